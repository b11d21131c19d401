"""Shared page header and KPI strip."""
import streamlit as st

from insight_stream import DashboardState
from insight_stream.report import summarize_records

TAB_TITLES = {
    "dashboard": "Dashboard",
    "sources": "Data Sources",
    "analysis": "AI Insights",
    "reports": "Reports",
}


def render_page_header(state: DashboardState):
    """Title line shared by every tab."""
    title = TAB_TITLES.get(state.active_tab.value, state.active_tab.value.title())
    st.header(f"{title} Overview")
    st.caption("Managing real-time enterprise data streams")


def render_kpi_strip(state: DashboardState):
    """
    Render the four headline figures computed from the current batch.

    Args:
        state: Current dashboard snapshot
    """
    summary = summarize_records(state.records, state.sources)

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Total Revenue", f"${summary.total_sales:,}")
        st.caption(f"{summary.record_count:,} records in buffer")

    with col2:
        st.metric("Avg Profit Margin", f"{summary.avg_profit_margin:.1%}")
        st.caption(f"Profit ${summary.total_profit:,}")

    with col3:
        st.metric("Connected DBs", f"{summary.connected_sources} Active")
        st.caption(f"of {summary.total_sources} configured sources")

    with col4:
        st.metric("Inventory", f"{summary.total_inventory:,}")
        st.caption("Units on hand")
