"""InsightStream - Enterprise Data Dashboard UI"""
import asyncio
import sys
from pathlib import Path

import streamlit as st

APP_DIR = Path(__file__).parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from insight_stream import DashboardController, DashboardState, Tab  # noqa: E402
from insight_stream.config import configure_logging  # noqa: E402
from llm_utils import build_client, build_settings  # noqa: E402
from ui_components import (  # noqa: E402
    render_analysis,
    render_analysis_placeholder,
    render_inventory_by_region,
    render_kpi_strip,
    render_live_buffer,
    render_page_header,
    render_report,
    render_revenue_trend,
    render_source_cards,
)

st.set_page_config(
    page_title="InsightStream",
    page_icon="📡",
    layout="wide"
)

SIDEBAR_ITEMS = [
    (Tab.DASHBOARD, "📊 Dashboard"),
    (Tab.SOURCES, "🗄️ Data Sources"),
    (Tab.ANALYSIS, "🧠 AI Insights"),
    (Tab.REPORTS, "📄 Reports"),
]


def get_controller() -> DashboardController:
    """One controller per browser session; its snapshots are mirrored into session_state."""
    if "controller" not in st.session_state:
        settings = build_settings()
        configure_logging(settings.log_level)
        controller = DashboardController(build_client(settings), poll_delay=settings.poll_delay)

        def _on_change(snapshot: DashboardState) -> None:
            st.session_state["dashboard_state"] = snapshot

        controller.subscribe(_on_change)
        controller.initialize()
        st.session_state["controller"] = controller
    return st.session_state["controller"]


def current_state() -> DashboardState:
    return st.session_state.get("dashboard_state") or st.session_state["controller"].state


def handle_poll(controller: DashboardController):
    with st.spinner("Polling DBs..."):
        asyncio.run(controller.poll_sources())
    st.rerun()


def handle_analysis(controller: DashboardController):
    with st.spinner("Analyzing..."):
        asyncio.run(controller.run_analysis())
    st.rerun()


def render_sidebar(controller: DashboardController, state: DashboardState):
    st.sidebar.title("📡 InsightStream")
    st.sidebar.markdown("---")
    for tab, label in SIDEBAR_ITEMS:
        st.sidebar.button(
            label,
            key=f"nav_{tab.value}",
            type="primary" if state.active_tab == tab else "secondary",
            width="stretch",
            on_click=controller.select_tab,
            args=(tab,),
        )


def render_actions(controller: DashboardController, state: DashboardState):
    col1, col2, _ = st.columns([1, 1, 3])
    with col1:
        poll = st.button(
            "Polling DBs..." if state.is_polling else "🔄 Poll Sources",
            disabled=state.is_polling,
            key="poll_sources",
        )
    with col2:
        analyze = st.button(
            "Analyzing..." if state.is_analyzing else "🧠 AI Deep Analysis",
            type="primary",
            disabled=state.is_analyzing,
            key="run_analysis",
        )
    if poll:
        handle_poll(controller)
    if analyze:
        handle_analysis(controller)


def render_notice(controller: DashboardController, state: DashboardState):
    if state.notice:
        st.error(state.notice)
        st.button("Dismiss", key="dismiss_notice", on_click=controller.dismiss_notice)


def render_dashboard_tab(state: DashboardState):
    render_kpi_strip(state)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Revenue Trend (Simulated SQL Polling)")
        render_revenue_trend(state.records)
    with col2:
        st.subheader("Inventory by Region (MS Access Mirror)")
        render_inventory_by_region(state.records)

    st.subheader("Live Polling Buffer")
    render_live_buffer(state.records)


def render_analysis_tab(controller: DashboardController, state: DashboardState):
    if state.analysis is None:
        if render_analysis_placeholder():
            handle_analysis(controller)
        return
    render_analysis(state.analysis)


def main():
    controller = get_controller()
    state = current_state()

    render_sidebar(controller, state)
    render_page_header(state)
    render_actions(controller, state)
    render_notice(controller, state)

    if state.active_tab == Tab.DASHBOARD:
        render_dashboard_tab(state)
    elif state.active_tab == Tab.SOURCES:
        render_source_cards(state.sources)
    elif state.active_tab == Tab.ANALYSIS:
        render_analysis_tab(controller, state)
    elif state.active_tab == Tab.REPORTS:
        render_report(state)


if __name__ == "__main__":
    main()
