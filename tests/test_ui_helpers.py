from __future__ import annotations

from insight_stream.models import Insight, InsightType
from style_utils import format_currency, format_percent, insight_badge
from ui_components import insights
from ui_components.insights import confidence_label


def test_format_currency() -> None:
    assert format_currency(42390) == "$42,390"
    assert format_currency(2_500_000) == "$2.5M"
    assert format_currency(12.5) == "$12.50"


def test_format_percent() -> None:
    assert format_percent(0.284) == "28.4%"


def test_confidence_label_bands() -> None:
    assert confidence_label(0.95) == "High confidence"
    assert confidence_label(0.5) == "Medium confidence"
    assert confidence_label(0.1) == "Low confidence"


def test_insight_badge_names_type() -> None:
    html = insight_badge("WARNING")
    assert "WARNING" in html
    assert "#F59E0B" in html


def test_insight_card_escapes_model_text(monkeypatch) -> None:
    rendered: list[str] = []
    monkeypatch.setattr(insights.st, "markdown", lambda body, **kwargs: rendered.append(body))

    payload = '<img src=x onerror="alert(1)">'
    insights.render_insight_card(
        Insight(title=payload, description="<script>x()</script>", type=InsightType.WARNING, confidence=0.9)
    )

    assert len(rendered) == 1
    assert payload not in rendered[0]
    assert "<script>" not in rendered[0]
    assert "&lt;img src=x onerror=&quot;alert(1)&quot;&gt;" in rendered[0]
