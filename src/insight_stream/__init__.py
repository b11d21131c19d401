"""InsightStream: simulated enterprise records with AI-generated insights."""

from .controller import DashboardController, DashboardState
from .models import AnalysisResponse, DatabaseType, DataRecord, DataSource, Insight, InsightType, SourceStatus, Tab

__all__ = [
    "AnalysisResponse",
    "DashboardController",
    "DashboardState",
    "DataRecord",
    "DataSource",
    "DatabaseType",
    "Insight",
    "InsightType",
    "SourceStatus",
    "Tab",
]
