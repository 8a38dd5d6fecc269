from __future__ import annotations

from tests.support.catalog import make_entry
from toptagger.domain import (
    NotFound,
    NotFoundReason,
    ReconciliationLedger,
    RowOutcome,
    RowState,
    RunSummary,
    SourceRow,
    Tagged,
    not_found_report_rows,
    tagged_report_rows,
)
from toptagger.domain.model import Matched
from toptagger.domain.reporting import strip_gid


def _ledger() -> ReconciliationLedger:
    ledger = ReconciliationLedger()
    entry = make_entry("Widget A", tags=["sale", "api-top-seller"], number=42)
    tagged_row = SourceRow("Widget A", "Acme", "Gadget")
    ledger.record(
        RowOutcome(
            row=tagged_row,
            state=RowState.TAGGED,
            match=Matched(entry),
            tag_result=Tagged(entry),
        )
    )
    ledger.record(
        RowOutcome(
            row=SourceRow("Widget B", "Acme", "Gadget"),
            state=RowState.NOT_FOUND,
            match=NotFound(NotFoundReason.NO_EXACT_MATCH),
        )
    )
    return ledger.finalize()


def test_strip_gid_keeps_trailing_identifier() -> None:
    assert strip_gid("gid://shopify/Product/42") == "42"
    assert strip_gid("42") == "42"


def test_tagged_rows_use_catalog_values() -> None:
    rows = tagged_report_rows(_ledger())

    assert rows == [
        {"gid": "42", "title": "Widget A", "productType": "Gadget", "vendor": "Acme"},
    ]


def test_not_found_rows_have_empty_gid() -> None:
    rows = not_found_report_rows(_ledger())

    assert rows == [
        {"gid": "", "title": "Widget B", "productType": "Gadget", "vendor": "Acme"},
    ]


def test_summary_lines() -> None:
    summary = RunSummary.from_ledger(_ledger(), tag_name="api-top-seller", skipped=3)

    assert summary.lines() == [
        "Tagging Summary:",
        "================",
        "Tag added: api-top-seller",
        "Total products tagged: 1",
        "Total products not found: 1",
        "Rows processed: 2 (matched 1, skipped 3)",
    ]


def test_summary_for_empty_ledger_reports_zeroes() -> None:
    summary = RunSummary.from_ledger(ReconciliationLedger().finalize(), tag_name="api-top-seller")

    assert summary.tagged == 0
    assert summary.not_found == 0
    assert "Total products tagged: 0" in summary.lines()
