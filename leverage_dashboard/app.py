"""
Main Streamlit application for the Futures Leverage Dashboard
"""

import os
import sys

import streamlit as st

try:
    from . import config
    from .backend.api_client import TastytradeClient
    from .backend.session_manager import TokenStore
    from .controller import AppContext, DashboardController
    from .frontend.charts import render_exposure_chart
    from .frontend.components import (
        DashboardView,
        render_error,
        render_loader,
        render_login_form,
        render_logout_button,
        render_metrics_bar,
    )
    from .frontend.tables import build_exposure_dataframe, render_exposure_table
except ImportError:
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))
    from leverage_dashboard import config
    from leverage_dashboard.backend.api_client import TastytradeClient
    from leverage_dashboard.backend.session_manager import TokenStore
    from leverage_dashboard.controller import AppContext, DashboardController
    from leverage_dashboard.frontend.charts import render_exposure_chart
    from leverage_dashboard.frontend.components import (
        DashboardView,
        render_error,
        render_loader,
        render_login_form,
        render_logout_button,
        render_metrics_bar,
    )
    from leverage_dashboard.frontend.tables import build_exposure_dataframe, render_exposure_table

CONTROLLER_KEY = "controller"
RESUME_KEY = "resume_attempted"


def get_controller() -> DashboardController:
    if CONTROLLER_KEY not in st.session_state:
        context = AppContext(
            client=TastytradeClient(),
            token_store=TokenStore(),
            view=DashboardView(st.session_state),
        )
        st.session_state[CONTROLLER_KEY] = DashboardController(context)
    return st.session_state[CONTROLLER_KEY]


def main() -> None:
    st.set_page_config(**config.PAGE_CONFIG)
    st.title("Futures Leverage")

    controller = get_controller()
    view = controller.context.view

    if not st.session_state.get(RESUME_KEY):
        st.session_state[RESUME_KEY] = True
        with st.spinner("Restoring saved session..."):
            if controller.resume_saved_session() is not None:
                st.rerun()

    render_error(view)

    if view.current_view == config.VIEW_LOADING:
        if controller.is_busy:
            render_loader()
            return
        # an interrupted script run can leave the loader up with nothing in flight
        view.show_login()

    if view.current_view == config.VIEW_RESULTS:
        result = controller.last_result
        render_metrics_bar(view, leverage_value=result.leverage if result else None)
        exposure_df = build_exposure_dataframe(view.exposures)
        st.markdown("##### Futures Exposure")
        render_exposure_table(exposure_df)
        render_exposure_chart(exposure_df)
        if render_logout_button():
            controller.logout()
            st.rerun()
        return

    credentials = render_login_form()
    if credentials is not None:
        with st.spinner("Logging in..."):
            controller.login_with_credentials(*credentials)
        st.rerun()


if __name__ == "__main__":
    main()
