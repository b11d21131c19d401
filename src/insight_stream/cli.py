from __future__ import annotations

import asyncio
import json
import random
import subprocess
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from .analysis import AnalysisError, ConfigurationError, InsightClient
from .config import MAX_SAMPLE_SIZE, configure_logging, load_settings
from .mock_data import DEFAULT_BATCH_SIZE, generate_mock_data, mock_sources
from .report import build_report_markdown

app = typer.Typer(add_completion=False, help="InsightStream: simulated enterprise data with AI insights")

APP_SCRIPT = Path(__file__).resolve().parents[2] / "app" / "app.py"


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


@app.command()
def generate(
    count: int = typer.Option(DEFAULT_BATCH_SIZE, "--count", min=1, help="Number of records"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible batch"),
):
    """
    Print a batch of mock records as JSON.
    """
    records = generate_mock_data(count, rng=_rng(seed))
    typer.echo(json.dumps([r.model_dump(mode="json") for r in records], indent=2))


@app.command()
def analyze(
    count: int = typer.Option(DEFAULT_BATCH_SIZE, "--count", min=1, help="Number of records to generate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible batch"),
    sample_size: Optional[int] = typer.Option(
        None, "--sample-size", min=1, max=MAX_SAMPLE_SIZE, help="Records sent to the service (max 50)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", help="Write the Markdown report here instead of stdout"),
):
    """
    Generate a batch, request one AI analysis and emit the operational report.

    Exit codes: 2 when the service credential is missing, 1 on any other
    analysis failure.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    if sample_size is not None:
        settings = replace(settings, sample_size=sample_size)

    records = generate_mock_data(count, rng=_rng(seed))
    client = InsightClient(settings)
    try:
        result = asyncio.run(client.analyze(records))
    except ConfigurationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except AnalysisError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    report = build_report_markdown(records, mock_sources(), result, generated_at=datetime.now())
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report, encoding="utf-8")
        typer.echo(f"Report written: {output}")
    else:
        typer.echo(report.rstrip())


@app.command()
def dashboard(port: int = typer.Option(8501, "--port", help="Port for the Streamlit server")):
    """
    Launch the Streamlit dashboard.
    """
    if not APP_SCRIPT.exists():
        typer.echo(f"ERROR: dashboard script not found at {APP_SCRIPT}", err=True)
        raise typer.Exit(code=1)
    cmd = [sys.executable, "-m", "streamlit", "run", str(APP_SCRIPT), "--server.port", str(port)]
    raise typer.Exit(code=subprocess.call(cmd))
