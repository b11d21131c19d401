from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd

from .models import AnalysisResponse, DataRecord, DataSource, InsightType, SourceStatus

RECORD_COLUMNS = ["id", "date", "region", "product", "sales", "profit", "inventory"]

# Number of leading records each view shows.
CHART_WINDOWS: dict[str, int] = {
    "revenue_trend": 15,
    "inventory_by_region": 8,
    "report_lines": 10,
    "live_buffer": 5,
}

INSIGHT_ORDER = {InsightType.WARNING: 0, InsightType.OPPORTUNITY: 1, InsightType.TREND: 2}


@dataclass(frozen=True)
class RecordSummary:
    record_count: int
    total_sales: int
    total_profit: int
    total_inventory: int
    avg_profit_margin: float
    connected_sources: int
    total_sources: int


def records_frame(records: Sequence[DataRecord]) -> pd.DataFrame:
    """Tabular view of a record batch, one row per record, in batch order."""
    if not records:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    df = pd.DataFrame([r.model_dump() for r in records], columns=RECORD_COLUMNS)
    df["date"] = pd.to_datetime(df["date"])
    return df


def window(records: Sequence[DataRecord], view: str) -> list[DataRecord]:
    return list(records[: CHART_WINDOWS[view]])


def summarize_records(records: Sequence[DataRecord], sources: Sequence[DataSource] = ()) -> RecordSummary:
    df = records_frame(records)
    total_sales = int(df["sales"].sum()) if not df.empty else 0
    total_profit = int(df["profit"].sum()) if not df.empty else 0
    return RecordSummary(
        record_count=len(df),
        total_sales=total_sales,
        total_profit=total_profit,
        total_inventory=int(df["inventory"].sum()) if not df.empty else 0,
        avg_profit_margin=(total_profit / total_sales) if total_sales else 0.0,
        connected_sources=sum(1 for s in sources if s.status == SourceStatus.CONNECTED),
        total_sources=len(sources),
    )


def region_breakdown(records: Sequence[DataRecord]) -> pd.DataFrame:
    """Sales, profit and inventory totals per region, largest sales first."""
    df = records_frame(records)
    if df.empty:
        return pd.DataFrame(columns=["region", "sales", "profit", "inventory"])
    out = df.groupby("region", as_index=False)[["sales", "profit", "inventory"]].sum()
    return out.sort_values(["sales", "region"], ascending=[False, True]).reset_index(drop=True)


def render_analysis_markdown(analysis: AnalysisResponse) -> str:
    lines: list[str] = []
    lines.append("### Executive summary\n")
    lines.append(f"{analysis.summary.strip()}\n")

    if analysis.insights:
        lines.append("\n### Insights\n")
        ordered = sorted(analysis.insights, key=lambda i: (INSIGHT_ORDER.get(i.type, 9), -i.confidence))
        for ins in ordered:
            lines.append(f"- **{ins.type.value}** ({ins.confidence:.0%}) {ins.title.strip()}: {ins.description.strip()}\n")

    if analysis.recommendations:
        lines.append("\n### Recommendations\n")
        for rec in analysis.recommendations:
            lines.append(f"- {rec}\n")

    if analysis.suggested_charts:
        lines.append("\n### Suggested charts\n")
        for chart in analysis.suggested_charts:
            lines.append(f"- {chart}\n")

    return "".join(lines).strip() + "\n"


def build_report_markdown(
    records: Sequence[DataRecord],
    sources: Sequence[DataSource],
    analysis: Optional[AnalysisResponse],
    *,
    generated_at: datetime,
) -> str:
    """Operational performance report for the reports tab export and the CLI."""
    s = summarize_records(records, sources)
    lines: list[str] = []
    lines.append("# Operational Performance Report\n\n")
    lines.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M')}\n\n")

    lines.append("## Key figures\n\n")
    lines.append(f"- Records analysed: {s.record_count:,}\n")
    lines.append(f"- Total revenue: ${s.total_sales:,}\n")
    lines.append(f"- Total profit: ${s.total_profit:,}\n")
    lines.append(f"- Avg profit margin: {s.avg_profit_margin:.1%}\n")
    lines.append(f"- Inventory on hand: {s.total_inventory:,}\n")
    lines.append(f"- Connected sources: {s.connected_sources}/{s.total_sources}\n")

    if sources:
        lines.append("\n## Data sources\n\n")
        for src in sources:
            lines.append(f"- {src.name} ({src.type.value}): {src.status.value}, last sync {src.last_sync}, {src.record_count:,} records\n")

    breakdown = region_breakdown(records)
    if not breakdown.empty:
        lines.append("\n## Revenue by region\n\n")
        lines.append("| Region | Sales | Profit | Inventory |\n")
        lines.append("|---|---:|---:|---:|\n")
        for row in breakdown.itertuples(index=False):
            lines.append(f"| {row.region} | {int(row.sales):,} | {int(row.profit):,} | {int(row.inventory):,} |\n")

    lines.append("\n## AI analysis\n\n")
    if analysis is None:
        lines.append("No analysis has been run for this session.\n")
    else:
        lines.append(render_analysis_markdown(analysis))

    return "".join(lines)
