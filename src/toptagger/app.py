"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from toptagger.adapters.csv_report import ReportFiles, write_reports
from toptagger.adapters.csv_source import load_source_rows
from toptagger.adapters.shopify import ShopifyCatalog
from toptagger.config import get_shopify_config, get_tagging_config
from toptagger.domain.model import Matched, NotFound, RowState
from toptagger.domain.ports import CatalogService
from toptagger.domain.reconciliation import (
    ReconciliationDriver,
    ReconciliationSettings,
    Sleeper,
)
from toptagger.domain.reporting import RunSummary

if TYPE_CHECKING:
    from datetime import datetime

    from toptagger.config import ShopifyConfig, TaggingConfig
    from toptagger.domain.model import (
        MatchOutcome,
        ReconciliationLedger,
        RowOutcome,
        SourceRow,
    )

CatalogFactory = Callable[[], AbstractAsyncContextManager[CatalogService]]

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagRunResult:
    ledger: ReconciliationLedger
    summary: RunSummary
    reports: ReportFiles


class LoggingObserver:
    """Narrates reconciliation progress through the module logger."""

    def row_started(self, position: int, total: int, row: SourceRow) -> None:
        log.info("Processing [%d/%d]: %s", position, total, row.title)

    def state_changed(self, row: SourceRow, state: RowState) -> None:
        log.debug("%s -> %s", row.title, state)

    def match_resolved(self, row: SourceRow, outcome: MatchOutcome) -> None:
        if isinstance(outcome, Matched):
            log.info("Found: %s (%s)", row.title, outcome.entry.id)
        elif isinstance(outcome, NotFound):
            log.info("Not found: %s (%s)", row.title, outcome.reason)

    def row_finished(
        self, outcome: RowOutcome, *, processed: int, matched: int, tagged: int
    ) -> None:
        if outcome.state is RowState.TAGGED:
            log.info("Tagged: %s", outcome.row.title)
        elif outcome.state is RowState.TAG_FAILED:
            log.warning("Tagging failed for %s: %s", outcome.row.title, outcome.detail)
        log.info("Progress: processed=%d, matched=%d, tagged=%d", processed, matched, tagged)


def _shopify_catalog_factory(config: ShopifyConfig) -> CatalogFactory:
    def factory() -> ShopifyCatalog:
        return ShopifyCatalog(config=config)

    return factory


async def _reconcile(
    rows: list[SourceRow],
    *,
    catalog_factory: CatalogFactory,
    settings: ReconciliationSettings,
    sleep: Sleeper,
) -> ReconciliationLedger:
    async with catalog_factory() as catalog:
        driver = ReconciliationDriver.for_catalog(
            catalog, settings, observer=LoggingObserver(), sleep=sleep
        )
        return await driver.run(rows)


def tag_top_sellers(
    *,
    tagging: TaggingConfig | None = None,
    shopify: ShopifyConfig | None = None,
    catalog_factory: CatalogFactory | None = None,
    sleep: Sleeper = asyncio.sleep,
    now: datetime | None = None,
) -> TagRunResult:
    """Tag every best seller listed in the intake file and write the audit reports.

    Shopify credentials are resolved before the input is read, so a missing
    configuration aborts the run without touching the catalog.
    """

    config = tagging or get_tagging_config()
    factory = catalog_factory or _shopify_catalog_factory(shopify or get_shopify_config())

    log.info("Starting to process top products from %s", config.input_path)
    source = load_source_rows(config.input_path)
    if not source.rows:
        log.warning(
            "No products found in %s; check the file format and contents", config.input_path
        )

    settings = ReconciliationSettings(
        tag_name=config.tag_name,
        pacing_seconds=config.pacing_seconds,
        search_limit=config.search_limit,
        strict_matching=config.strict_matching,
    )
    ledger = asyncio.run(
        _reconcile(source.rows, catalog_factory=factory, settings=settings, sleep=sleep)
    )

    reports = write_reports(
        ledger,
        out_dir=config.report_dir,
        timezone=config.report_timezone,
        now=now,
    )
    summary = RunSummary.from_ledger(ledger, tag_name=config.tag_name, skipped=source.skipped)
    for line in summary.lines():
        log.info(line)

    return TagRunResult(ledger=ledger, summary=summary, reports=reports)
