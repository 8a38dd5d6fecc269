"""Write the tagged and not-found audit reports as CSV files."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from toptagger.domain.reporting import (
    REPORT_COLUMNS,
    ReportRow,
    not_found_report_rows,
    tagged_report_rows,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from toptagger.domain.model import ReconciliationLedger

log = getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M"
TAGGED_REPORT_PREFIX = "tagged_products"
NOT_FOUND_REPORT_PREFIX = "not_found_products"


@dataclass(frozen=True, slots=True)
class ReportFiles:
    tagged: Path | None = None
    not_found: Path | None = None


def format_report_timestamp(now: datetime, timezone: str) -> str:
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(ZoneInfo(timezone)).strftime(TIMESTAMP_FORMAT)


def write_report(path: Path, rows: Iterable[ReportRow]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(REPORT_COLUMNS))
        writer.writeheader()
        writer.writerows(rows)


def write_reports(
    ledger: ReconciliationLedger,
    *,
    out_dir: Path,
    timezone: str,
    now: datetime | None = None,
) -> ReportFiles:
    """Write one file per non-empty half of ``ledger`` into ``out_dir``.

    Both files of a run share a single timestamp, rendered in ``timezone``.
    """

    stamp = format_report_timestamp(now or datetime.now(UTC), timezone)

    tagged_path: Path | None = None
    if ledger.tagged:
        tagged_path = out_dir / f"{TAGGED_REPORT_PREFIX}_{stamp}.csv"
        write_report(tagged_path, tagged_report_rows(ledger))
        log.info("Tagged products report saved to: %s", tagged_path)

    not_found_path: Path | None = None
    if ledger.not_found:
        not_found_path = out_dir / f"{NOT_FOUND_REPORT_PREFIX}_{stamp}.csv"
        write_report(not_found_path, not_found_report_rows(ledger))
        log.info("Not found products report saved to: %s", not_found_path)

    return ReportFiles(tagged=tagged_path, not_found=not_found_path)
