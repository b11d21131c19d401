"""Style utilities for consistent UI presentation."""
import streamlit as st

COLORS = {
    "primary": "#4F46E5",
    "secondary": "#64748B",
    "success": "#10B981",
    "warning": "#F59E0B",
    "critical": "#DC3545",
    "info": "#3B82F6",
    "light": "#F8FAFC",
    "dark": "#1E293B",
}

INSIGHT_COLORS = {
    "TREND": COLORS["info"],
    "WARNING": COLORS["warning"],
    "OPPORTUNITY": COLORS["success"],
}

INSIGHT_ICONS = {
    "TREND": "📈",
    "WARNING": "⚠️",
    "OPPORTUNITY": "💡",
}

STATUS_ICONS = {
    "CONNECTED": "🟢",
    "POLLING": "🟡",
    "DISCONNECTED": "⚪",
}


def format_currency(value: float) -> str:
    """Format a number as currency with thousands separators."""
    if value >= 1_000_000:
        return f"${value / 1_000_000:,.1f}M"
    elif value >= 1_000:
        return f"${value:,.0f}"
    else:
        return f"${value:,.2f}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Format a ratio as percentage."""
    return f"{value * 100:,.{decimals}f}%"


def styled_metric(label: str, value: str, description: str = ""):
    """Render a styled metric block with an optional description line."""
    st.markdown(f"""
<div style="padding: 16px; background: {COLORS['light']}; border-radius: 12px; margin-bottom: 8px; border: 1px solid #E2E8F0;">
    <div style="font-size: 0.85em; color: {COLORS['secondary']}; margin-bottom: 4px;">{label}</div>
    <div style="font-size: 1.8em; font-weight: 800; color: {COLORS['dark']};">{value}</div>
    {"<div style='font-size: 0.75em; color: " + COLORS['secondary'] + "; margin-top: 4px;'>" + description + "</div>" if description else ""}
</div>
    """, unsafe_allow_html=True)


def insight_badge(insight_type: str) -> str:
    """Return HTML for an insight type badge."""
    color = INSIGHT_COLORS.get(insight_type, COLORS["secondary"])
    icon = INSIGHT_ICONS.get(insight_type, "•")
    return f'<span style="background: {color}; color: white; padding: 2px 8px; border-radius: 12px; font-size: 0.75em; letter-spacing: 0.05em;">{icon} {insight_type}</span>'


def section_header(title: str, subtitle: str = ""):
    """Render a styled section header."""
    st.markdown(f"""
<div style="margin: 24px 0 16px 0;">
    <h3 style="margin: 0; color: {COLORS['dark']};">{title}</h3>
    {"<p style='margin: 4px 0 0 0; color: " + COLORS['secondary'] + "; font-size: 0.9em;'>" + subtitle + "</p>" if subtitle else ""}
</div>
    """, unsafe_allow_html=True)
