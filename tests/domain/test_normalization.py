from __future__ import annotations

import pytest

from toptagger.domain import IncompleteRowError, SourceRow, normalize_row, resolve_columns
from toptagger.domain.normalization import find_header


def test_normalize_row_extracts_and_trims_values() -> None:
    record = {"Product Title": "  Widget A ", "Vendor": "Acme ", "Product Type": " Gadget"}

    row = normalize_row(record)

    assert row == SourceRow(title="Widget A", vendor="Acme", product_type="Gadget")


def test_normalize_row_matches_headers_case_insensitively() -> None:
    record = {"TITLE": "Widget A", "vendor name": "Acme", "TyPe": "Gadget"}

    row = normalize_row(record)

    assert row.title == "Widget A"
    assert row.vendor == "Acme"
    assert row.product_type == "Gadget"


def test_first_matching_header_wins() -> None:
    record = {
        "Title": "Widget A",
        "SEO Title": "Buy Widget A",
        "Vendor": "Acme",
        "Type": "Gadget",
    }

    row = normalize_row(record)

    assert row.title == "Widget A"


@pytest.mark.parametrize(
    ("record", "missing"),
    [
        ({"Title": "Widget A", "Vendor": "Acme", "Type": "   "}, ("product_type",)),
        ({"Title": "", "Vendor": "", "Type": "Gadget"}, ("title", "vendor")),
        ({"Title": "Widget A", "Type": "Gadget"}, ("vendor",)),
        ({"Title": "Widget A", "Vendor": None, "Type": "Gadget"}, ("vendor",)),
    ],
)
def test_incomplete_rows_raise(record: dict[str, str | None], missing: tuple[str, ...]) -> None:
    with pytest.raises(IncompleteRowError) as exc:
        normalize_row(record)

    assert exc.value.missing == missing


def test_resolve_columns_reports_absent_headers() -> None:
    columns = resolve_columns(["Title", "Vendor"])

    assert columns.title == "Title"
    assert columns.vendor == "Vendor"
    assert columns.product_type is None
    assert not columns.is_complete


def test_pre_resolved_columns_are_used() -> None:
    columns = resolve_columns(["Handle", "Title", "Vendor", "Type"])

    row = normalize_row({"Title": "Widget A", "Vendor": "Acme", "Type": "Gadget"}, columns=columns)

    assert row.title == "Widget A"
    assert columns.is_complete


def test_find_header_returns_none_without_match() -> None:
    assert find_header(["Handle", "Price"], "title") is None
