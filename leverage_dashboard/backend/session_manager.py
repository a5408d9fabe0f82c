"""
Session management functions for the Futures Leverage Dashboard
Handles session creation and persistence of the remember-token.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from .. import config
from ..logging_setup import get_logger
from .api_client import TastytradeClient
from .errors import ApiRequestError, InvalidCredentials, LoginFailed, MalformedApiResponse

logger = get_logger(__name__)

TOKEN_STORE_PATH = config.TOKEN_STORE_PATH
REMEMBER_TOKEN_KEY = config.REMEMBER_TOKEN_KEY


class TokenStore:
    """Key-value file holding the remember-token between visits."""

    def __init__(self, path: Path = TOKEN_STORE_PATH, key: str = REMEMBER_TOKEN_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable token store {self.path}: {exc}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data))
        except OSError as exc:
            logger.warning(f"Could not write token store {self.path}: {exc}")

    def load(self) -> Optional[str]:
        token = self._read_all().get(self.key)
        return token if isinstance(token, str) and token else None

    def save(self, token: str) -> None:
        data = self._read_all()
        data[self.key] = token
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if self.key in data:
            del data[self.key]
            self._write_all(data)


def build_password_payload(username: str, password: str) -> Dict:
    return {"login": username, "password": password, "remember-me": True}


def build_remember_payload(remember_token: str) -> Dict:
    return {"remember-token": remember_token}


def login(client: TastytradeClient, payload: Dict, token_store: TokenStore) -> str:
    """
    Create an API session and return its session token.

    A password login also stores the remember-token issued with the session.
    Any failure clears the stored remember-token.
    """
    via_password = bool(payload.get("password"))
    logger.info(f"Creating session via {'password' if via_password else 'remember-token'}")
    try:
        data = client.create_session(payload)
    except ApiRequestError as exc:
        token_store.clear()
        if exc.status_code == 401:
            raise InvalidCredentials() from exc
        raise LoginFailed() from exc
    except MalformedApiResponse:
        token_store.clear()
        raise

    session_token = data.get("session-token")
    if not isinstance(session_token, str) or not session_token:
        token_store.clear()
        raise MalformedApiResponse("Login response has no session token.")

    if via_password:
        remember_token = data.get("remember-token")
        if isinstance(remember_token, str) and remember_token:
            token_store.save(remember_token)
        else:
            logger.warning("Login response carried no remember-token")
    logger.info("Session created")
    return session_token
