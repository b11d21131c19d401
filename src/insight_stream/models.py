from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr

REGIONS: tuple[str, ...] = ("North", "South", "East", "West", "Central")
PRODUCTS: tuple[str, ...] = ("Enterprise Suite", "Cloud Connect", "Edge Gateway", "Security Core")


class DatabaseType(str, Enum):
    """Kinds of upstream database a source descriptor can point at."""
    SQL_SERVER = "SQL_SERVER"
    MS_ACCESS = "MS_ACCESS"


class SourceStatus(str, Enum):
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    POLLING = "POLLING"


class InsightType(str, Enum):
    TREND = "TREND"
    WARNING = "WARNING"
    OPPORTUNITY = "OPPORTUNITY"


class Tab(str, Enum):
    """Dashboard tabs. Order matches the sidebar."""
    DASHBOARD = "dashboard"
    SOURCES = "sources"
    ANALYSIS = "analysis"
    REPORTS = "reports"


class DataRecord(BaseModel):
    """
    One synthetic business transaction.

    id: sequential within a generated batch (1-based)
    date: calendar day of the transaction
    region / product: drawn from REGIONS / PRODUCTS
    sales / profit: positive whole currency units
    inventory: units on hand, never negative
    """
    model_config = ConfigDict(frozen=True)

    id: int
    date: datetime.date
    region: str
    product: str
    sales: int = Field(gt=0)
    profit: int = Field(gt=0)
    inventory: int = Field(ge=0)


class DataSource(BaseModel):
    """
    Descriptor of a simulated upstream system (not a live connection).

    last_sync is a display string; it is rewritten wholesale on every poll.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    type: DatabaseType
    status: SourceStatus = SourceStatus.CONNECTED
    last_sync: str = Field(alias="lastSync")
    record_count: int = Field(alias="recordCount", ge=0)


class Insight(BaseModel):
    """Strict fields: the reply is rejected, not coerced, when a value has the wrong JSON type."""
    model_config = ConfigDict(frozen=True)

    title: StrictStr
    description: StrictStr
    type: InsightType
    confidence: StrictFloat = Field(ge=0.0, le=1.0)


class AnalysisResponse(BaseModel):
    """
    Aggregate result of one remote analysis call.

    Held as the single "current analysis" by the controller and replaced
    wholesale by the next successful call.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: StrictStr
    insights: list[Insight]
    recommendations: list[StrictStr]
    suggested_charts: list[StrictStr] = Field(alias="suggestedCharts")
