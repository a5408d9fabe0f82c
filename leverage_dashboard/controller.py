"""
Dashboard controller for the Futures Leverage Dashboard
Wires session handling and data aggregation to the view, with one error path.
"""

import threading
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional

from .backend import data_processor, session_manager
from .backend.api_client import TastytradeClient
from .backend.errors import DashboardError
from .backend.models import DashboardData
from .backend.session_manager import TokenStore
from .frontend.components import DashboardView, format_currency, format_leverage
from .logging_setup import get_logger

logger = get_logger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Please enter both username and password."


@dataclass
class AppContext:
    client: TastytradeClient
    token_store: TokenStore
    view: DashboardView
    lock: threading.Lock = field(default_factory=threading.Lock)


class DashboardController:
    def __init__(self, context: AppContext):
        self.context = context
        self.last_result: Optional[DashboardData] = None

    @property
    def is_busy(self) -> bool:
        return self.context.lock.locked()

    def perform_login(self, payload: Dict) -> Optional[DashboardData]:
        """
        Log in with ``payload`` and load the dashboard.

        Returns the computed figures, or None when the attempt failed or
        another attempt is still running.
        """
        lock = self.context.lock
        if not lock.acquire(blocking=False):
            logger.warning("Login already in progress, ignoring request")
            return None
        try:
            return self._run(payload)
        finally:
            lock.release()

    def _run(self, payload: Dict) -> Optional[DashboardData]:
        ctx = self.context
        view = ctx.view
        view.show_loading()
        try:
            session_token = session_manager.login(ctx.client, payload, ctx.token_store)
            result = data_processor.fetch_dashboard(
                ctx.client,
                session_token,
                on_nlv=lambda nlv: view.set_field("nlv", format_currency(nlv)),
            )
        except DashboardError as exc:
            logger.error(f"Dashboard load failed: {exc.__class__.__name__}: {exc.message}")
            view.alert_error(exc.message)
            view.show_login()
            ctx.token_store.clear()
            return None

        view.set_field("notional_value", format_currency(result.notional_value))
        view.set_field("leverage", format_leverage(result.leverage))
        view.set_exposures([asdict(e) for e in result.exposures])
        view.show_results()
        self.last_result = result
        return result

    def login_with_credentials(self, username: str, password: str) -> Optional[DashboardData]:
        if not username or not password:
            self.context.view.alert_error(MISSING_CREDENTIALS_MESSAGE)
            return None
        return self.perform_login(session_manager.build_password_payload(username, password))

    def resume_saved_session(self) -> Optional[DashboardData]:
        remember_token = self.context.token_store.load()
        if not remember_token:
            return None
        logger.info("Found saved remember-token, logging in silently")
        return self.perform_login(session_manager.build_remember_payload(remember_token))

    def logout(self) -> None:
        ctx = self.context
        ctx.token_store.clear()
        ctx.view.show_login()
        ctx.view.clear_credentials()
        self.last_result = None
        logger.info("Logged out")
