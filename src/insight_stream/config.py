from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

MAX_SAMPLE_SIZE = 50
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_POLL_DELAY = 2.0

# Checked in order; the first non-empty value wins.
API_KEY_VARS = ("INSIGHT_STREAM_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY")
BASE_URL_VARS = ("OPENAI_BASE_URL", "AI_INTEGRATIONS_OPENAI_BASE_URL")

LOG_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","message":"%(message)s","module":"%(name)s"}'


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup.

    api_key may be None: a missing credential only matters when an
    analysis is requested, and is reported then.
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.2
    sample_size: int = MAX_SAMPLE_SIZE
    poll_delay: float = DEFAULT_POLL_DELAY
    log_level: str = "INFO"


def _first(env: Mapping[str, str], names: tuple[str, ...]) -> Optional[str]:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def clamp_sample_size(n: int) -> int:
    return max(1, min(MAX_SAMPLE_SIZE, int(n)))


def load_settings(env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    When `env` is None the process environment is used, after loading a
    local .env file (existing variables are not overridden).
    """
    if env is None:
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ

    sample_raw = env.get("INSIGHT_STREAM_SAMPLE_SIZE")
    try:
        sample_size = clamp_sample_size(int(sample_raw)) if sample_raw else MAX_SAMPLE_SIZE
    except ValueError:
        sample_size = MAX_SAMPLE_SIZE

    return Settings(
        api_key=_first(env, API_KEY_VARS),
        base_url=_first(env, BASE_URL_VARS),
        model=env.get("INSIGHT_STREAM_LLM_MODEL") or DEFAULT_MODEL,
        temperature=_float(env, "INSIGHT_STREAM_LLM_TEMPERATURE", 0.2),
        sample_size=sample_size,
        poll_delay=max(0.0, _float(env, "INSIGHT_STREAM_POLL_DELAY", DEFAULT_POLL_DELAY)),
        log_level=(env.get("INSIGHT_STREAM_LOG_LEVEL") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
