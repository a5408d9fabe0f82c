"""
UI Components for the Futures Leverage Dashboard
Contains the view-state adapter and the Streamlit widgets built on it.
"""

from typing import Dict, List, MutableMapping, Optional, Tuple

import streamlit as st

from .. import config

COLORS = config.COLORS
FIELD_LABELS = config.FIELD_LABELS
DISPLAY_FIELDS = config.DISPLAY_FIELDS

VIEW_KEY = "view"
FIELDS_KEY = "fields"
ERROR_KEY = "error"
EXPOSURES_KEY = "exposures"
USERNAME_KEY = "username"
PASSWORD_KEY = "password"


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_leverage(value: float) -> str:
    return f"{value:.2f}x"


class DashboardView:
    """
    Presentation state for one browser session.

    ``state`` is ``st.session_state`` inside the app; any mutable mapping works,
    which keeps the adapter usable without a running Streamlit server.
    """

    def __init__(self, state: MutableMapping):
        self.state = state
        self.state.setdefault(VIEW_KEY, config.VIEW_LOGIN)
        self.state.setdefault(FIELDS_KEY, {})
        self.state.setdefault(ERROR_KEY, None)
        self.state.setdefault(EXPOSURES_KEY, [])

    @property
    def current_view(self) -> str:
        return self.state[VIEW_KEY]

    @property
    def fields(self) -> Dict[str, str]:
        return dict(self.state[FIELDS_KEY])

    @property
    def error(self) -> Optional[str]:
        return self.state[ERROR_KEY]

    @property
    def exposures(self) -> List[Dict]:
        return list(self.state[EXPOSURES_KEY])

    def show_loading(self) -> None:
        self.state[ERROR_KEY] = None
        self.state[VIEW_KEY] = config.VIEW_LOADING

    def show_login(self) -> None:
        self.state[VIEW_KEY] = config.VIEW_LOGIN

    def show_results(self) -> None:
        self.state[VIEW_KEY] = config.VIEW_RESULTS

    def set_field(self, name: str, formatted_value: str) -> None:
        if name not in DISPLAY_FIELDS:
            raise KeyError(f"Unknown display field: {name}")
        fields = dict(self.state[FIELDS_KEY])
        fields[name] = formatted_value
        self.state[FIELDS_KEY] = fields

    def set_exposures(self, rows: List[Dict]) -> None:
        self.state[EXPOSURES_KEY] = list(rows)

    def alert_error(self, message: str) -> None:
        self.state[ERROR_KEY] = message

    def clear_credentials(self) -> None:
        for key in (USERNAME_KEY, PASSWORD_KEY):
            if key in self.state:
                del self.state[key]


def get_global_styles() -> str:
    return f"""
    <style>
        .metrics-bar {{display:flex;justify-content:space-between;gap:12px;margin-bottom:20px;}}
        .metrics-card {{flex:1;background:{COLORS['surface']};border:1px solid #e4e4e0;border-radius:4px;padding:12px 15px;}}
        .metrics-label {{color:{COLORS['text_secondary']};font-size:0.85rem;}}
        .metrics-value {{color:{COLORS['text']};font-size:1.3rem;font-weight:600;}}
    </style>
    """


def _leverage_color(leverage: Optional[float]) -> str:
    if leverage is None:
        return COLORS["text"]
    if leverage >= config.LEVERAGE_DANGER:
        return COLORS["negative"]
    if leverage >= config.LEVERAGE_WARNING:
        return COLORS["warning"]
    return COLORS["positive"]


def build_metrics_bar_html(nlv: str, notional_value: str, leverage: str, leverage_value: Optional[float] = None) -> str:
    cards = [
        (FIELD_LABELS["nlv"], nlv, COLORS["text"]),
        (FIELD_LABELS["notional_value"], notional_value, COLORS["text"]),
        (FIELD_LABELS["leverage"], leverage, _leverage_color(leverage_value)),
    ]
    body = "".join(
        f'<div class="metrics-card"><div class="metrics-label">{label}</div>'
        f'<div class="metrics-value" style="color:{color};">{value}</div></div>'
        for label, value, color in cards
    )
    return f'<div class="metrics-bar">{body}</div>'


def render_metrics_bar(view: DashboardView, leverage_value: Optional[float] = None) -> None:
    fields = view.fields
    st.markdown(get_global_styles(), unsafe_allow_html=True)
    st.markdown(
        build_metrics_bar_html(
            nlv=fields.get("nlv", "-"),
            notional_value=fields.get("notional_value", "-"),
            leverage=fields.get("leverage", "-"),
            leverage_value=leverage_value,
        ),
        unsafe_allow_html=True,
    )


def render_error(view: DashboardView) -> None:
    if view.error:
        st.error(f"Error: {view.error}")


def render_login_form() -> Optional[Tuple[str, str]]:
    with st.form("login_form"):
        username = st.text_input("Username", key=USERNAME_KEY)
        password = st.text_input("Password", type="password", key=PASSWORD_KEY)
        submitted = st.form_submit_button("Log In", use_container_width=True)
    if submitted:
        return username, password
    return None


def render_loader() -> None:
    st.info("Loading account data...")


def render_logout_button() -> bool:
    return st.button("Log Out", use_container_width=True)
