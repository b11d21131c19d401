from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import ValidationError

from ..models import AnalysisResponse, InsightType
from .errors import ParseError

INSIGHT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "type": {"type": "string", "enum": [t.value for t in InsightType]},
        "confidence": {"type": "number"},
    },
    "required": ["title", "description", "type", "confidence"],
    "additionalProperties": False,
}

# Structured-output contract sent with every request. Strict mode requires
# every property to be listed under "required" and no additional properties.
ANALYSIS_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "insights": {"type": "array", "items": INSIGHT_SCHEMA},
        "recommendations": {"type": "array", "items": {"type": "string"}},
        "suggestedCharts": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["summary", "insights", "recommendations", "suggestedCharts"],
    "additionalProperties": False,
}


def _describe_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors()[:5]:
        loc = ".".join(str(x) for x in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


def validate_analysis_obj(obj: Any, *, raw_text: str = "") -> AnalysisResponse:
    """Validate a decoded JSON object against the AnalysisResponse contract.

    Raises ParseError on any violation: non-object payloads, missing
    required fields, unknown insight types or confidence outside [0, 1].
    """
    if not isinstance(obj, Mapping):
        raise ParseError("Analysis response must be a JSON object.", raw_text=raw_text)
    try:
        return AnalysisResponse.model_validate(dict(obj))
    except ValidationError as e:
        raise ParseError(
            f"Analysis response does not match the schema: {_describe_validation_error(e)}",
            raw_text=raw_text,
        ) from e


def parse_analysis_response(text: str | None) -> AnalysisResponse:
    """Parse the raw text returned by the analysis service."""
    if text is None or not text.strip():
        raise ParseError("Analysis service returned an empty response.", raw_text=text or "")
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Analysis response is not valid JSON: {e}", raw_text=text) from e
    return validate_analysis_obj(obj, raw_text=text)
