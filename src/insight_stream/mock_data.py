from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

from .models import PRODUCTS, REGIONS, DatabaseType, DataRecord, DataSource, SourceStatus

DEFAULT_BATCH_SIZE = 100
DEFAULT_START_DATE = date(2023, 1, 1)


def generate_mock_data(
    count: int = DEFAULT_BATCH_SIZE,
    *,
    start: date = DEFAULT_START_DATE,
    rng: Optional[random.Random] = None,
) -> list[DataRecord]:
    """
    Produce a batch of synthetic transactions, one per day from `start`.

    Bounds (half-open): sales [1000, 6000), profit [200, 2200),
    inventory [0, 1000). Pass a seeded `random.Random` for a
    reproducible batch.
    """
    r = rng or random.Random()
    records: list[DataRecord] = []
    for i in range(count):
        records.append(
            DataRecord(
                id=i + 1,
                date=start + timedelta(days=i),
                region=r.choice(REGIONS),
                product=r.choice(PRODUCTS),
                sales=r.randrange(1000, 6000),
                profit=r.randrange(200, 2200),
                inventory=r.randrange(0, 1000),
            )
        )
    return records


def mock_sources() -> list[DataSource]:
    """The two simulated upstream systems shown on the sources tab."""
    return [
        DataSource(
            id="src-1",
            name="Main_Production_SQL",
            type=DatabaseType.SQL_SERVER,
            status=SourceStatus.CONNECTED,
            last_sync="2023-11-20 14:30",
            record_count=15420,
        ),
        DataSource(
            id="src-2",
            name="Legacy_Sales_Access",
            type=DatabaseType.MS_ACCESS,
            status=SourceStatus.CONNECTED,
            last_sync="2023-11-19 09:15",
            record_count=4210,
        ),
    ]
