"""Remote insight generation.

The client sends a bounded sample of records to the analysis service and
turns its structured reply into an AnalysisResponse, or fails with one of
the AnalysisError subclasses.
"""

from .client import InsightClient, build_prompt, build_sample
from .errors import AnalysisError, ConfigurationError, ParseError, RemoteServiceError
from .schema import ANALYSIS_RESPONSE_SCHEMA, parse_analysis_response, validate_analysis_obj

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "AnalysisError",
    "ConfigurationError",
    "InsightClient",
    "ParseError",
    "RemoteServiceError",
    "build_prompt",
    "build_sample",
    "parse_analysis_response",
    "validate_analysis_obj",
]
