from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base class for every failure of an analysis request."""


class ConfigurationError(AnalysisError):
    """Raised when the analysis service credential is not configured."""


class RemoteServiceError(AnalysisError):
    """Raised when the call to the analysis service did not complete."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(AnalysisError):
    """Raised when the service answered but the payload violates the response contract."""

    def __init__(self, message: str, *, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text
