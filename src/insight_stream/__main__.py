"""Package entry point.

Preferred invocation is via the installed console script:

    insight-stream ...

For convenience we also support:

    python -m insight_stream ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m insight_stream`."""

    app()


if __name__ == "__main__":
    main()
