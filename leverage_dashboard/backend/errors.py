"""
Error taxonomy for the Futures Leverage Dashboard.
Every error carries the message shown to the user; all of them end the
current login attempt.
"""

from typing import Optional


class DashboardError(Exception):
    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ApiRequestError(DashboardError):
    """A single API call failed at the transport level or returned non-2xx."""

    default_message = "API request failed."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedApiResponse(DashboardError):
    default_message = "Unexpected response from the API."


class InvalidCredentials(DashboardError):
    default_message = "Invalid username or password."


class LoginFailed(DashboardError):
    default_message = "Login failed."


class AccountsFetchFailed(DashboardError):
    default_message = "Could not fetch accounts."


class NoPrimaryAccount(DashboardError):
    default_message = "Primary account not found."


class BalanceFetchFailed(DashboardError):
    default_message = "Could not fetch account balance."


class PositionsFetchFailed(DashboardError):
    default_message = "Could not fetch positions."


class MetricsFetchFailed(DashboardError):
    default_message = "Could not fetch market metrics for futures."
