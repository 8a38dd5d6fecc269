"""Row-by-row reconciliation of spreadsheet rows against the catalog.

Each row walks ``PENDING -> MATCHING -> FOUND -> TAGGING -> TAGGED`` on the
happy path. A row that is not matched, whose tag update fails, or that raises
unexpectedly is recorded in the not-found half of the ledger; one bad row never
stops the run. The driver waits a fixed pacing interval after every row.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .matching import DEFAULT_SEARCH_LIMIT, CatalogMatcher
from .model import Matched, ReconciliationLedger, RowOutcome, RowState, TagFailed
from .ports import NullObserver
from .tagging import TagUpdater

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import SourceRow
    from .ports import CatalogService, ReconciliationObserver

Sleeper = Callable[[float], Awaitable[None]]

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationSettings:
    tag_name: str
    pacing_seconds: float = 0.5
    search_limit: int = DEFAULT_SEARCH_LIMIT
    strict_matching: bool = False


class ReconciliationDriver:
    def __init__(
        self,
        *,
        matcher: CatalogMatcher,
        updater: TagUpdater,
        settings: ReconciliationSettings,
        observer: ReconciliationObserver | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._matcher = matcher
        self._updater = updater
        self._settings = settings
        self._observer = observer or NullObserver()
        self._sleep = sleep

    @classmethod
    def for_catalog(
        cls,
        catalog: CatalogService,
        settings: ReconciliationSettings,
        *,
        observer: ReconciliationObserver | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> ReconciliationDriver:
        return cls(
            matcher=CatalogMatcher(
                catalog,
                search_limit=settings.search_limit,
                strict=settings.strict_matching,
            ),
            updater=TagUpdater(catalog),
            settings=settings,
            observer=observer,
            sleep=sleep,
        )

    async def run(self, rows: Iterable[SourceRow]) -> ReconciliationLedger:
        """Process ``rows`` in order and return the finalized ledger."""

        pending = list(rows)
        total = len(pending)
        ledger = ReconciliationLedger()

        for position, row in enumerate(pending, start=1):
            self._observer.row_started(position, total, row)
            self._observer.state_changed(row, RowState.PENDING)
            try:
                outcome = await self._process(row)
            except Exception as exc:  # noqa: BLE001
                log.exception("Error processing %r", row.title)
                outcome = RowOutcome(row=row, state=RowState.ERRORED, detail=str(exc))

            ledger.record(outcome)
            self._observer.row_finished(
                outcome,
                processed=ledger.processed,
                matched=ledger.matched,
                tagged=ledger.tagged_count,
            )
            await self._sleep(self._settings.pacing_seconds)

        return ledger.finalize()

    async def _process(self, row: SourceRow) -> RowOutcome:
        self._observer.state_changed(row, RowState.MATCHING)
        match = await self._matcher.find(row.title, row.vendor, row.product_type)
        self._observer.match_resolved(row, match)
        if not isinstance(match, Matched):
            return RowOutcome(row=row, state=RowState.NOT_FOUND, match=match)

        self._observer.state_changed(row, RowState.FOUND)
        self._observer.state_changed(row, RowState.TAGGING)
        result = await self._updater.ensure_tag(match.entry, self._settings.tag_name)
        if isinstance(result, TagFailed):
            return RowOutcome(
                row=row,
                state=RowState.TAG_FAILED,
                match=match,
                tag_result=result,
                detail=result.reason,
            )
        return RowOutcome(row=row, state=RowState.TAGGED, match=match, tag_result=result)
