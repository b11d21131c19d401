"""Operational performance report tab."""
from datetime import datetime

import streamlit as st

from insight_stream import DashboardState
from insight_stream.report import build_report_markdown, region_breakdown, summarize_records
from style_utils import format_percent, styled_metric
from ui_components.charts import render_sales_vs_profit


def render_report(state: DashboardState):
    generated_at = datetime.now()
    summary = summarize_records(state.records, state.sources)

    col1, col2 = st.columns([3, 1])
    with col1:
        st.subheader("📊 Operational Performance Report")
    with col2:
        st.caption(f"Generated: {generated_at.strftime('%Y-%m-%d')}")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Revenue Breakdown**")
        render_sales_vs_profit(state.records)
    with col2:
        styled_metric("Net Performance", format_percent(summary.avg_profit_margin), "Profit as a share of sales")
        styled_metric(
            "Resource Utilization",
            f"{summary.total_inventory:,}",
            f"Inventory units across {summary.record_count:,} records",
        )

    breakdown = region_breakdown(state.records)
    if not breakdown.empty:
        st.markdown("**By Region**")
        st.dataframe(breakdown, hide_index=True, width="stretch")

    st.caption(
        "This report aggregates data from active SQL Server clusters and legacy MS Access instances "
        "via the InsightStream middleware."
    )

    report_md = build_report_markdown(state.records, state.sources, state.analysis, generated_at=generated_at)
    st.download_button(
        label="Export Report (Markdown)",
        data=report_md,
        file_name=f"insightstream_report_{generated_at.strftime('%Y%m%d_%H%M')}.md",
        mime="text/markdown",
        key="export_report",
    )
