from __future__ import annotations

from datetime import date, datetime

from insight_stream.mock_data import mock_sources
from insight_stream.models import AnalysisResponse, DataRecord, Insight, InsightType, SourceStatus
from insight_stream.report import (
    build_report_markdown,
    records_frame,
    region_breakdown,
    render_analysis_markdown,
    summarize_records,
    window,
)


def _records() -> list[DataRecord]:
    rows = [
        ("North", "Cloud Connect", 2000, 500, 10),
        ("South", "Edge Gateway", 1000, 300, 20),
        ("North", "Security Core", 3000, 700, 30),
    ]
    return [
        DataRecord(id=i + 1, date=date(2023, 1, 1 + i), region=r, product=p, sales=s, profit=pr, inventory=inv)
        for i, (r, p, s, pr, inv) in enumerate(rows)
    ]


def test_summary_totals_and_margin() -> None:
    sources = mock_sources()
    sources[1] = sources[1].model_copy(update={"status": SourceStatus.DISCONNECTED})
    s = summarize_records(_records(), sources)
    assert s.record_count == 3
    assert s.total_sales == 6000
    assert s.total_profit == 1500
    assert s.total_inventory == 60
    assert s.avg_profit_margin == 0.25
    assert (s.connected_sources, s.total_sources) == (1, 2)


def test_empty_batch_summarizes_to_zero() -> None:
    s = summarize_records([], [])
    assert s.record_count == 0
    assert s.total_sales == 0
    assert s.avg_profit_margin == 0.0
    assert records_frame([]).empty
    assert region_breakdown([]).empty


def test_region_breakdown_orders_by_sales() -> None:
    df = region_breakdown(_records())
    assert list(df["region"]) == ["North", "South"]
    assert list(df["sales"]) == [5000, 1000]
    assert list(df["inventory"]) == [40, 20]


def test_windows_slice_leading_records() -> None:
    recs = _records()
    assert [r.id for r in window(recs, "live_buffer")] == [1, 2, 3]
    assert len(window(recs * 10, "revenue_trend")) == 15


def test_analysis_markdown_orders_warnings_first() -> None:
    analysis = AnalysisResponse(
        summary="Summary text",
        insights=[
            Insight(title="Growth", description="Up", type=InsightType.TREND, confidence=0.9),
            Insight(title="Stockout", description="Low", type=InsightType.WARNING, confidence=0.55),
        ],
        recommendations=["Reorder"],
        suggested_charts=["Inventory by product"],
    )
    md = render_analysis_markdown(analysis)
    assert md.index("Stockout") < md.index("Growth")
    assert "**WARNING** (55%)" in md
    assert "- Reorder" in md
    assert "- Inventory by product" in md


def test_report_without_analysis() -> None:
    md = build_report_markdown(_records(), mock_sources(), None, generated_at=datetime(2024, 1, 2, 3, 4))
    assert md.startswith("# Operational Performance Report")
    assert "Generated: 2024-01-02 03:04" in md
    assert "Total revenue: $6,000" in md
    assert "| North | 5,000 | 1,200 | 40 |" in md
    assert "Main_Production_SQL (SQL_SERVER)" in md
    assert "No analysis has been run" in md
