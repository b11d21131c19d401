"""UI components for the InsightStream dashboard."""
from .header import render_page_header, render_kpi_strip
from .charts import render_revenue_trend, render_inventory_by_region, render_sales_vs_profit, render_live_buffer
from .sources import render_source_cards
from .insights import render_analysis, render_analysis_placeholder, render_insight_card
from .report import render_report

__all__ = [
    "render_page_header",
    "render_kpi_strip",
    "render_revenue_trend",
    "render_inventory_by_region",
    "render_sales_vs_profit",
    "render_live_buffer",
    "render_source_cards",
    "render_analysis",
    "render_analysis_placeholder",
    "render_insight_card",
    "render_report",
]
