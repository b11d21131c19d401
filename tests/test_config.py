from __future__ import annotations

from insight_stream.config import DEFAULT_MODEL, MAX_SAMPLE_SIZE, load_settings


def test_defaults_without_credentials() -> None:
    s = load_settings({})
    assert s.api_key is None
    assert s.model == DEFAULT_MODEL
    assert s.sample_size == MAX_SAMPLE_SIZE
    assert s.poll_delay == 2.0
    assert s.log_level == "INFO"


def test_api_key_priority() -> None:
    env = {"OPENAI_API_KEY": "openai", "AI_INTEGRATIONS_OPENAI_API_KEY": "replit"}
    assert load_settings(env).api_key == "openai"
    env["INSIGHT_STREAM_API_KEY"] = "own"
    assert load_settings(env).api_key == "own"
    assert load_settings({"AI_INTEGRATIONS_OPENAI_API_KEY": "replit"}).api_key == "replit"


def test_sample_size_is_clamped() -> None:
    assert load_settings({"INSIGHT_STREAM_SAMPLE_SIZE": "500"}).sample_size == MAX_SAMPLE_SIZE
    assert load_settings({"INSIGHT_STREAM_SAMPLE_SIZE": "0"}).sample_size == 1
    assert load_settings({"INSIGHT_STREAM_SAMPLE_SIZE": "20"}).sample_size == 20
    assert load_settings({"INSIGHT_STREAM_SAMPLE_SIZE": "many"}).sample_size == MAX_SAMPLE_SIZE


def test_numeric_overrides_and_bad_values() -> None:
    s = load_settings({"INSIGHT_STREAM_POLL_DELAY": "0.5", "INSIGHT_STREAM_LLM_TEMPERATURE": "oops"})
    assert s.poll_delay == 0.5
    assert s.temperature == 0.2
    assert load_settings({"INSIGHT_STREAM_POLL_DELAY": "-3"}).poll_delay == 0.0


def test_process_environment_without_dotenv(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("INSIGHT_STREAM_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("INSIGHT_STREAM_LLM_MODEL", "env-model")
    (tmp_path / ".env").write_text("INSIGHT_STREAM_API_KEY=from-dotenv\n", encoding="utf-8")
    assert load_settings(dotenv=False).model == "env-model"
    assert load_settings(dotenv=False).api_key is None


def test_dotenv_file_fills_missing_variables_only(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    # setenv first so the values load_dotenv writes are undone after the test
    for name in ("INSIGHT_STREAM_API_KEY", "OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY", "INSIGHT_STREAM_POLL_DELAY"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("INSIGHT_STREAM_LOG_LEVEL", "debug")
    (tmp_path / ".env").write_text(
        "INSIGHT_STREAM_API_KEY=from-dotenv\nINSIGHT_STREAM_POLL_DELAY=0.25\nINSIGHT_STREAM_LOG_LEVEL=WARNING\n",
        encoding="utf-8",
    )

    s = load_settings()
    assert s.api_key == "from-dotenv"
    assert s.poll_delay == 0.25
    assert s.log_level == "DEBUG"
