from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_SCRIPT = Path(__file__).resolve().parents[1] / "app" / "app.py"


@pytest.fixture()
def app_test(tmp_path: Path, monkeypatch) -> AppTest:
    monkeypatch.chdir(tmp_path)
    for name in ("INSIGHT_STREAM_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("INSIGHT_STREAM_POLL_DELAY", "0")
    at = AppTest.from_file(str(APP_SCRIPT), default_timeout=60)
    return at.run()


def test_dashboard_renders_initial_batch(app_test: AppTest) -> None:
    assert not app_test.exception
    assert app_test.header[0].value == "Dashboard Overview"
    state = app_test.session_state["dashboard_state"]
    assert len(state.records) == 100


def test_sidebar_switches_tabs(app_test: AppTest) -> None:
    app_test.button(key="nav_sources").click().run()
    assert not app_test.exception
    assert app_test.header[0].value == "Data Sources Overview"

    app_test.button(key="nav_reports").click().run()
    assert not app_test.exception
    assert app_test.header[0].value == "Reports Overview"


def test_analysis_without_credential_shows_notice(app_test: AppTest) -> None:
    app_test.button(key="run_analysis").click().run()
    assert not app_test.exception
    assert any("AI Analysis encountered an error" in e.value for e in app_test.error)
    state = app_test.session_state["dashboard_state"]
    assert state.is_analyzing is False
    assert state.analysis is None
    assert app_test.header[0].value == "Dashboard Overview"


def test_poll_refreshes_sources(app_test: AppTest) -> None:
    before = app_test.session_state["dashboard_state"].sources
    app_test.button(key="poll_sources").click().run()
    assert not app_test.exception
    after = app_test.session_state["dashboard_state"]
    assert after.is_polling is False
    assert [s.last_sync for s in after.sources] != [s.last_sync for s in before]
