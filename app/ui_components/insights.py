"""Rendering of the current AI analysis."""
import html

import streamlit as st

from insight_stream.models import AnalysisResponse, Insight
from style_utils import COLORS, INSIGHT_COLORS, insight_badge


def confidence_label(confidence: float) -> str:
    """Map a confidence score to a short label."""
    if confidence >= 0.8:
        return "High confidence"
    elif confidence >= 0.5:
        return "Medium confidence"
    return "Low confidence"


def render_insight_card(insight: Insight):
    """Render a single insight as a styled card."""
    color = INSIGHT_COLORS.get(insight.type.value, COLORS["secondary"])
    st.markdown(f"""
<div style="border-right: 4px solid {color}; padding: 16px; margin: 8px 0; background: white; border-radius: 12px; border-top: 1px solid #F1F5F9; border-left: 1px solid #F1F5F9; border-bottom: 1px solid #F1F5F9;">
    <div style="display: flex; justify-content: space-between; align-items: center; margin-bottom: 8px;">
        {insight_badge(insight.type.value)}
        <span style="font-size: 0.75em; color: {COLORS['secondary']};">Confidence: {insight.confidence:.0%} ({confidence_label(insight.confidence)})</span>
    </div>
    <div style="font-weight: 700; color: {COLORS['dark']}; margin-bottom: 4px;">{html.escape(insight.title)}</div>
    <div style="font-size: 0.9em; color: {COLORS['secondary']};">{html.escape(insight.description)}</div>
</div>
    """, unsafe_allow_html=True)


def render_analysis(analysis: AnalysisResponse):
    """
    Render summary, insight cards, recommendations and suggested charts.

    Args:
        analysis: The current analysis held by the controller
    """
    with st.container(border=True):
        st.subheader("🧠 Executive AI Summary")
        st.markdown(analysis.summary)

    if analysis.insights:
        cols = st.columns(2)
        for i, insight in enumerate(analysis.insights):
            with cols[i % 2]:
                render_insight_card(insight)
    else:
        st.info("The analysis returned no individual insights.")

    if analysis.recommendations:
        st.subheader("AI-Driven Recommendations")
        for rec in analysis.recommendations:
            st.markdown(f"- ▸ {rec}")

    if analysis.suggested_charts:
        with st.expander("Suggested charts"):
            for chart in analysis.suggested_charts:
                st.markdown(f"- {chart}")


def render_analysis_placeholder() -> bool:
    """Empty state for the analysis tab. Returns True when the start button was pressed."""
    st.markdown("## No AI Insights Yet")
    st.markdown("Run a deep analysis to let the model scan your SQL & Access data for patterns.")
    return st.button("Start Analysis Engine", type="primary", key="start_analysis_engine")
