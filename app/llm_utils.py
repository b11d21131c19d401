"""LLM configuration helpers for the InsightStream dashboard.

API Key Priority:
1. st.secrets["OPENAI_API_KEY"] (user-configured secret)
2. Environment variables, as resolved by insight_stream.config.load_settings
"""
from dataclasses import replace
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

from insight_stream.analysis import InsightClient
from insight_stream.config import Settings, load_settings


def _secret(name: str) -> Optional[str]:
    try:
        if name in st.secrets:
            return st.secrets[name]
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml present
        return None
    return None


def get_openai_api_key(settings: Settings) -> Optional[str]:
    """
    Get the analysis service key with a user-provided secret taking priority.

    Returns:
        API key string or None if not configured.
    """
    return _secret("OPENAI_API_KEY") or settings.api_key


def get_openai_base_url(settings: Settings) -> Optional[str]:
    """Get the service base URL if configured."""
    return _secret("OPENAI_BASE_URL") or settings.base_url


def build_settings() -> Settings:
    """Read configuration once per session; secrets override the environment."""
    settings = load_settings()
    return replace(
        settings,
        api_key=get_openai_api_key(settings),
        base_url=get_openai_base_url(settings),
    )


def build_client(settings: Settings) -> InsightClient:
    return InsightClient(settings)
