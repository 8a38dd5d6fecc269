"""Shape a finalized ledger into audit report rows and a run summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .model import ReconciliationLedger

REPORT_COLUMNS: Final[tuple[str, ...]] = ("gid", "title", "productType", "vendor")

type ReportRow = dict[str, str]


def strip_gid(identifier: str) -> str:
    """Drop a ``gid://<service>/<Type>/`` prefix, keeping the trailing identifier."""

    if identifier.startswith("gid://"):
        return identifier.rsplit("/", 1)[-1]
    return identifier


def tagged_report_rows(ledger: ReconciliationLedger) -> list[ReportRow]:
    return [
        {
            "gid": strip_gid(entry.id),
            "title": entry.title,
            "productType": entry.product_type,
            "vendor": entry.vendor,
        }
        for entry, _row in ledger.tagged
    ]


def not_found_report_rows(ledger: ReconciliationLedger) -> list[ReportRow]:
    return [
        {
            "gid": "",
            "title": row.title,
            "productType": row.product_type,
            "vendor": row.vendor,
        }
        for row in ledger.not_found
    ]


@dataclass(frozen=True, slots=True)
class RunSummary:
    tag_name: str
    tagged: int
    not_found: int
    processed: int = 0
    matched: int = 0
    skipped: int = 0

    @classmethod
    def from_ledger(
        cls, ledger: ReconciliationLedger, *, tag_name: str, skipped: int = 0
    ) -> RunSummary:
        return cls(
            tag_name=tag_name,
            tagged=ledger.tagged_count,
            not_found=ledger.not_found_count,
            processed=ledger.processed,
            matched=ledger.matched,
            skipped=skipped,
        )

    def lines(self) -> list[str]:
        return [
            "Tagging Summary:",
            "================",
            f"Tag added: {self.tag_name}",
            f"Total products tagged: {self.tagged}",
            f"Total products not found: {self.not_found}",
            f"Rows processed: {self.processed} (matched {self.matched}, skipped {self.skipped})",
        ]
