import pytest

from leverage_dashboard.backend.errors import ApiRequestError
from leverage_dashboard.backend.session_manager import TokenStore

ACCOUNTS = [{"account": {"account-number": "5WX1"}, "authority-level": "owner"}]
BALANCE = {"net-liquidating-value": "10000"}
POSITIONS = [{"symbol": "/ES", "instrument-type": "Future", "multiplier": "50", "quantity": "-2"}]
METRICS = [{"symbol": "/ES", "last-trade-price": "4500"}]
SESSION = {"session-token": "sess-123", "remember-token": "remember-abc"}


class FakeClient:
    """Stands in for TastytradeClient with canned responses per endpoint."""

    def __init__(self, **overrides):
        self.responses = {
            "create_session": SESSION,
            "get_accounts": ACCOUNTS,
            "get_balances": BALANCE,
            "get_positions": POSITIONS,
            "get_market_metrics": METRICS,
        }
        self.responses.update(overrides)
        self.calls = []

    def _respond(self, name, *args):
        self.calls.append((name,) + args)
        response = self.responses[name]
        if isinstance(response, Exception):
            raise response
        return response

    def create_session(self, payload):
        return self._respond("create_session", payload)

    def get_accounts(self, session_token):
        return self._respond("get_accounts", session_token)

    def get_balances(self, session_token, account_number):
        return self._respond("get_balances", session_token, account_number)

    def get_positions(self, session_token, account_number):
        return self._respond("get_positions", session_token, account_number)

    def get_market_metrics(self, session_token, symbols):
        return self._respond("get_market_metrics", session_token, list(symbols))

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


def http_error(status_code=500):
    return ApiRequestError(f"HTTP {status_code}", status_code=status_code)


@pytest.fixture
def token_store(tmp_path):
    return TokenStore(tmp_path / "storage.json")
