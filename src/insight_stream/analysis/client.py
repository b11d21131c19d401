from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

import openai
from openai import AsyncOpenAI

from ..config import MAX_SAMPLE_SIZE, Settings, clamp_sample_size
from ..models import AnalysisResponse, DataRecord
from .errors import ConfigurationError, ParseError, RemoteServiceError
from .schema import ANALYSIS_RESPONSE_SCHEMA, parse_analysis_response

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a senior business data analyst. "
    "You review samples of transactional records exported from enterprise databases "
    "(SQL Server production systems and legacy MS Access files). "
    "Base every statement on the records provided; do not invent figures. "
    "Classify each insight as TREND, WARNING or OPPORTUNITY and give a confidence between 0 and 1. "
    "Return ONLY JSON that matches the requested schema."
)


def build_sample(records: Sequence[DataRecord], limit: int = MAX_SAMPLE_SIZE) -> list[DataRecord]:
    """Return the leading prefix sent to the service; never more than MAX_SAMPLE_SIZE rows."""
    return list(records[: clamp_sample_size(limit)])


def build_prompt(sample: Sequence[DataRecord]) -> str:
    snippet = json.dumps([r.model_dump(mode="json") for r in sample])
    return (
        "Analyze this dataset from our enterprise databases (SQL Server/MS Access).\n"
        f"Data snippet ({len(sample)} records): {snippet}\n"
        "Provide a comprehensive analysis including a summary, key insights, "
        "business recommendations and the charts you would build next."
    )


class InsightClient:
    """Sends a bounded record sample to the analysis service and parses the reply.

    One outbound request per `analyze` call. No caching and no retry: a
    failure yields an exception, never a partial AnalysisResponse.

    `client` may be any object exposing an async `chat.completions.create`;
    when omitted an `AsyncOpenAI` client is built on first use from
    `settings`.
    """

    def __init__(self, settings: Settings, *, client: Any = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def sample_size(self) -> int:
        return clamp_sample_size(self.settings.sample_size)

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.settings.api_key:
                raise ConfigurationError(
                    "No analysis service credential configured. Set INSIGHT_STREAM_API_KEY or OPENAI_API_KEY."
                )
            self._client = AsyncOpenAI(
                api_key=self.settings.api_key,
                base_url=self.settings.base_url,
                max_retries=0,
            )
        return self._client

    def request_params(self, sample: Sequence[DataRecord]) -> dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(sample)},
            ],
            "temperature": self.settings.temperature,
            "response_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": "analysis_response",
                    "strict": True,
                    "schema": ANALYSIS_RESPONSE_SCHEMA,
                },
            },
        }

    async def analyze(self, records: Sequence[DataRecord]) -> AnalysisResponse:
        client = self._get_client()
        sample = build_sample(records, self.sample_size)
        logger.info("Requesting analysis of %d/%d records (model=%s)", len(sample), len(records), self.settings.model)

        try:
            resp = await client.chat.completions.create(**self.request_params(sample))
        except openai.APIStatusError as e:
            logger.warning("Analysis service returned status %s: %s", e.status_code, e)
            raise RemoteServiceError(f"Analysis service returned status {e.status_code}.", status_code=e.status_code) from e
        except openai.APIError as e:
            logger.warning("Analysis service call failed: %s", e)
            raise RemoteServiceError(f"Analysis service call failed: {e}") from e

        try:
            return parse_analysis_response(_response_text(resp))
        except ParseError as e:
            logger.error("Analysis response violated the contract: %s", e)
            raise


def _response_text(resp: Any) -> Optional[str]:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    if message is None:
        return None
    refusal = getattr(message, "refusal", None)
    if refusal:
        raise ParseError(f"Analysis service refused the request: {refusal}")
    return getattr(message, "content", None)
