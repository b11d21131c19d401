from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Awaitable, Callable, Optional, Protocol, Sequence, Union

from .analysis.errors import AnalysisError, ConfigurationError
from .config import DEFAULT_POLL_DELAY
from .mock_data import generate_mock_data, mock_sources
from .models import AnalysisResponse, DataRecord, DataSource, SourceStatus, Tab

logger = logging.getLogger(__name__)

SYNC_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
ANALYSIS_FAILED_NOTICE = "AI Analysis encountered an error."


class Analyzer(Protocol):
    async def analyze(self, records: Sequence[DataRecord]) -> AnalysisResponse: ...


@dataclass(frozen=True)
class DashboardState:
    """Immutable snapshot of everything the presentation layer renders.

    A new snapshot is published for every change; subscribers never see a
    half-applied action.
    """

    active_tab: Tab = Tab.DASHBOARD
    records: tuple[DataRecord, ...] = ()
    sources: tuple[DataSource, ...] = field(default_factory=lambda: tuple(mock_sources()))
    analysis: Optional[AnalysisResponse] = None
    is_polling: bool = False
    is_analyzing: bool = False
    notice: Optional[str] = None
    initialized: bool = False


Subscriber = Callable[[DashboardState], None]


class DashboardController:
    """Orchestrates user actions against the generator and the insight client.

    Runs on a single asyncio loop. `poll_sources` and `run_analysis` are the
    only suspension points; each refuses to start while its own flag is set,
    and each clears that flag in a `finally` block.
    """

    def __init__(
        self,
        client: Analyzer,
        *,
        generator: Callable[[], list[DataRecord]] = generate_mock_data,
        sources: Optional[Sequence[DataSource]] = None,
        poll_delay: float = DEFAULT_POLL_DELAY,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        notifier: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.client = client
        self.generator = generator
        self.poll_delay = poll_delay
        self.clock = clock
        self.sleep = sleep
        self.notifier = notifier
        initial_sources = tuple(sources) if sources is not None else tuple(mock_sources())
        self._state = DashboardState(sources=initial_sources)
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback` for future snapshots; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _publish(self, new_state: DashboardState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for callback in list(self._subscribers):
            callback(new_state)

    def _update(self, **changes) -> None:
        self._publish(replace(self._state, **changes))

    # ---- actions ----

    def initialize(self) -> bool:
        """Populate the first record batch. Only the first call does anything."""
        if self._state.initialized:
            return False
        self._update(records=tuple(self.generator()), initialized=True)
        return True

    def select_tab(self, tab: Union[Tab, str]) -> None:
        self._update(active_tab=Tab(tab))

    def dismiss_notice(self) -> None:
        self._update(notice=None)

    async def poll_sources(self) -> bool:
        """Simulated refresh of records and source sync metadata.

        Returns False without doing anything if a poll is already running.
        """
        if self._state.is_polling:
            logger.info("Poll already in progress; ignoring request")
            return False

        self._update(is_polling=True)
        logger.info("Polling %d sources", len(self._state.sources))
        try:
            await self.sleep(self.poll_delay)
            synced_at = self.clock().strftime(SYNC_TIME_FORMAT)
            sources = tuple(
                s.model_copy(update={"last_sync": synced_at, "status": SourceStatus.CONNECTED})
                for s in self._state.sources
            )
            self._update(records=tuple(self.generator()), sources=sources, is_polling=False)
            logger.info("Poll complete at %s", synced_at)
        finally:
            if self._state.is_polling:
                self._update(is_polling=False)
        return True

    async def run_analysis(self) -> bool:
        """Request an analysis of the current records.

        On success the result replaces the current analysis and the
        analysis tab is shown. On failure the previous analysis and tab
        are kept and a notice is raised. Returns True only on success.
        """
        if self._state.is_analyzing:
            logger.info("Analysis already in progress; ignoring request")
            return False

        self._update(is_analyzing=True)
        try:
            result = await self.client.analyze(self._state.records)
        except ConfigurationError as e:
            logger.error("Analysis unavailable: %s", e)
            self._fail(f"{ANALYSIS_FAILED_NOTICE} {e}")
            return False
        except AnalysisError as e:
            logger.warning("Analysis failed (%s): %s", type(e).__name__, e)
            self._fail(ANALYSIS_FAILED_NOTICE)
            return False
        except Exception:
            logger.exception("Unexpected analysis failure")
            self._fail(ANALYSIS_FAILED_NOTICE)
            return False
        else:
            self._update(analysis=result, active_tab=Tab.ANALYSIS, notice=None, is_analyzing=False)
            logger.info("Analysis stored: %d insights", len(result.insights))
            return True
        finally:
            if self._state.is_analyzing:
                self._update(is_analyzing=False)

    def _fail(self, message: str) -> None:
        self._update(is_analyzing=False, notice=message)
        if self.notifier is not None:
            self.notifier(message)
