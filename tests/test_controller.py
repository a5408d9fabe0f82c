import pytest

from conftest import FakeClient, http_error
from leverage_dashboard import config
from leverage_dashboard.controller import AppContext, DashboardController, MISSING_CREDENTIALS_MESSAGE
from leverage_dashboard.frontend.components import DashboardView


@pytest.fixture
def make_controller(token_store):
    def _make(**responses):
        client = FakeClient(**responses)
        view = DashboardView({})
        controller = DashboardController(AppContext(client=client, token_store=token_store, view=view))
        return controller, client, view
    return _make


def test_password_login_renders_results(make_controller, token_store):
    controller, client, view = make_controller()
    result = controller.login_with_credentials("trader", "secret")
    assert result is not None
    assert view.current_view == config.VIEW_RESULTS
    assert view.fields == {"nlv": "$10,000.00", "notional_value": "$450,000.00", "leverage": "45.00x"}
    assert view.exposures[0]["symbol"] == "/ES"
    assert view.error is None
    assert token_store.load() == "remember-abc"
    assert client.calls[0] == ("create_session", {"login": "trader", "password": "secret", "remember-me": True})


def test_missing_credentials_makes_no_call(make_controller):
    controller, client, view = make_controller()
    assert controller.login_with_credentials("trader", "") is None
    assert view.error == MISSING_CREDENTIALS_MESSAGE
    assert client.calls == []


def test_resume_without_saved_token(make_controller):
    controller, client, view = make_controller()
    assert controller.resume_saved_session() is None
    assert client.calls == []
    assert view.current_view == config.VIEW_LOGIN


def test_resume_with_saved_token(make_controller, token_store):
    token_store.save("saved")
    controller, client, view = make_controller()
    assert controller.resume_saved_session() is not None
    assert client.calls[0] == ("create_session", {"remember-token": "saved"})
    assert view.current_view == config.VIEW_RESULTS
    assert token_store.load() == "saved"


def test_invalid_credentials_reverts_to_login(make_controller, token_store):
    token_store.save("stale")
    controller, _, view = make_controller(create_session=http_error(401))
    assert controller.resume_saved_session() is None
    assert view.current_view == config.VIEW_LOGIN
    assert view.error == "Invalid username or password."
    assert token_store.load() is None


def test_no_primary_account_updates_no_fields(make_controller, token_store):
    accounts = [{"account": {"account-number": "5WX1"}, "authority-level": "trade-only"}]
    controller, _, view = make_controller(get_accounts=accounts)
    assert controller.login_with_credentials("trader", "secret") is None
    assert view.error == "Primary account not found."
    assert view.current_view == config.VIEW_LOGIN
    assert view.fields == {}
    assert token_store.load() is None


def test_pipeline_failure_after_balance_keeps_early_nlv(make_controller, token_store):
    controller, _, view = make_controller(get_positions=http_error(502))
    assert controller.login_with_credentials("trader", "secret") is None
    assert view.fields == {"nlv": "$10,000.00"}
    assert view.error == "Could not fetch positions."
    assert token_store.load() is None


def test_reentrant_login_rejected(make_controller):
    controller, client, view = make_controller()
    controller.context.lock.acquire()
    try:
        assert controller.is_busy
        assert controller.login_with_credentials("trader", "secret") is None
    finally:
        controller.context.lock.release()
    assert client.calls == []
    assert view.current_view == config.VIEW_LOGIN
    assert not controller.is_busy


def test_lock_released_after_failure(make_controller):
    controller, _, _ = make_controller(create_session=http_error(500))
    controller.login_with_credentials("trader", "secret")
    assert not controller.is_busy


def test_logout(make_controller, token_store):
    controller, _, view = make_controller()
    controller.login_with_credentials("trader", "secret")
    view.state["username"] = "trader"
    view.state["password"] = "secret"
    controller.logout()
    assert token_store.load() is None
    assert view.current_view == config.VIEW_LOGIN
    assert "password" not in view.state
    assert controller.last_result is None
