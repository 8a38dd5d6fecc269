from __future__ import annotations

import asyncio

from tests.support.catalog import FakeCatalog, make_entry, unquote_title_query
from toptagger.domain import (
    CatalogMatcher,
    Matched,
    NotFound,
    NotFoundReason,
    build_title_query,
    sanitize_title,
)


def test_sanitize_title_escapes_quotes() -> None:
    title = "O'Brien's \"Thing\""

    sanitized = sanitize_title(title)

    assert sanitized == "O\\'Brien\\'s \\\"Thing\\\""


def test_sanitized_query_unescapes_to_input_title() -> None:
    title = 'Back\\slash "quoted" it\'s'

    query = build_title_query(title)

    assert query.startswith('title:"')
    assert unquote_title_query(query) == title


def test_sanitize_title_strips_surrounding_whitespace() -> None:
    assert sanitize_title("  Widget A  ") == "Widget A"


def test_find_returns_exact_match() -> None:
    entry = make_entry("Red Mug", vendor="Acme", product_type="Mug")
    matcher = CatalogMatcher(FakeCatalog([entry]))

    outcome = asyncio.run(matcher.find("Red Mug", "Acme", "Mug"))

    assert outcome == Matched(entry)


def test_filter_requires_all_three_fields() -> None:
    entry = make_entry("Red Mug", vendor="Acme", product_type="Mug")
    matcher = CatalogMatcher(FakeCatalog([entry]))

    outcome = asyncio.run(matcher.find("Red Mug", "Acme", "Cup"))

    assert outcome == NotFound(NotFoundReason.NO_EXACT_MATCH)


def test_vendor_and_type_compare_after_trimming() -> None:
    entry = make_entry("Red Mug", vendor=" Acme ", product_type="Mug ")
    matcher = CatalogMatcher(FakeCatalog([entry]))

    outcome = asyncio.run(matcher.find("Red Mug", "Acme", "Mug"))

    assert isinstance(outcome, Matched)


def test_empty_results_are_not_found() -> None:
    matcher = CatalogMatcher(FakeCatalog())

    outcome = asyncio.run(matcher.find("Widget Z", "Acme", "Gadget"))

    assert outcome == NotFound(NotFoundReason.NO_RESULTS)


def test_search_limit_is_passed_to_catalog() -> None:
    catalog = FakeCatalog()
    matcher = CatalogMatcher(catalog, search_limit=3)

    asyncio.run(matcher.find("Widget A", "Acme", "Gadget"))

    assert catalog.searches == [('title:"Widget A"', 3)]


def test_multiple_exact_matches_take_first_by_default() -> None:
    first = make_entry(number=1)
    second = make_entry(number=2)
    matcher = CatalogMatcher(FakeCatalog([first, second]))

    outcome = asyncio.run(matcher.find("Widget A", "Acme", "Gadget"))

    assert outcome == Matched(first, candidates=2)


def test_multiple_exact_matches_are_ambiguous_in_strict_mode() -> None:
    matcher = CatalogMatcher(FakeCatalog([make_entry(number=1), make_entry(number=2)]), strict=True)

    outcome = asyncio.run(matcher.find("Widget A", "Acme", "Gadget"))

    assert isinstance(outcome, NotFound)
    assert outcome.reason is NotFoundReason.AMBIGUOUS


def test_catalog_errors_become_transport_not_found() -> None:
    matcher = CatalogMatcher(FakeCatalog([make_entry()], failing_searches=["Widget A"]))

    outcome = asyncio.run(matcher.find("Widget A", "Acme", "Gadget"))

    assert isinstance(outcome, NotFound)
    assert outcome.reason is NotFoundReason.TRANSPORT_ERROR
    assert outcome.detail == "search failed for Widget A"
