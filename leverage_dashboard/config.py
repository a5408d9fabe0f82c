"""
Configuration constants for the Futures Leverage Dashboard
"""

import os
from pathlib import Path

BASE_PATH = Path(__file__).parent.parent

API_URL = os.getenv("DASHBOARD_API_URL", "https://api.tastytrade.com").rstrip("/")
USER_AGENT = "leverage-dashboard/1.0"
_timeout = os.getenv("DASHBOARD_REQUEST_TIMEOUT", "")
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

TOKEN_STORE_PATH = Path(
    os.getenv("DASHBOARD_TOKEN_STORE", str(Path.home() / ".leverage_dashboard" / "storage.json"))
)
REMEMBER_TOKEN_KEY = "tastytradeRememberToken"

OWNER_AUTHORITY = "owner"
FUTURE_INSTRUMENT_TYPE = "Future"

LOG_LEVEL = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s:%(lineno)d] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

VIEW_LOGIN = "login"
VIEW_LOADING = "loading"
VIEW_RESULTS = "results"

DISPLAY_FIELDS = ("nlv", "notional_value", "leverage")
FIELD_LABELS = {
    "nlv": "Net Liquidating Value",
    "notional_value": "Notional Value",
    "leverage": "Leverage",
}

PAGE_CONFIG = {
    "page_title": "Futures Leverage Dashboard",
    "page_icon": None,
    "layout": "centered",
    "initial_sidebar_state": "collapsed",
}

CHART_HEIGHTS = {
    "exposure": 350,
}

COLORS = {
    "positive": "#1f7a6d",
    "negative": "#b42318",
    "neutral": "#9a9a9a",
    "warning": "#b45309",
    "info": "#2563eb",
    "background": "#f7f7f5",
    "surface": "#ffffff",
    "text": "#1a1a1a",
    "text_secondary": "#6b6b6b",
}

# leverage at or above these multiples is highlighted in the metrics bar
LEVERAGE_WARNING = 3.0
LEVERAGE_DANGER = 10.0

SERVER_PORT = int(os.getenv("DASHBOARD_PORT", "8501"))
STREAMLIT_FLAGS = [
    "--server.port", str(SERVER_PORT),
    "--browser.gatherUsageStats", "false",
    "--theme.base", "light",
    "--theme.backgroundColor", COLORS["background"],
    "--theme.primaryColor", COLORS["info"],
]
