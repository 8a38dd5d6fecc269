from __future__ import annotations

import asyncio
from dataclasses import replace

from tests.support.catalog import FakeCatalog, make_entry
from toptagger.domain import TagFailed, Tagged, TagUpdater
from toptagger.domain.tagging import current_tags, with_tag

TAG = "api-top-seller"


def test_with_tag_appends_missing_tag() -> None:
    assert with_tag(("sale",), TAG) == ("sale", TAG)


def test_with_tag_keeps_existing_tags_untouched() -> None:
    assert with_tag(("sale", TAG, "new"), TAG) == ("sale", TAG, "new")


def test_current_tags_treats_non_sequence_as_empty() -> None:
    entry = replace(make_entry(), tags="sale")  # type: ignore[arg-type]

    assert current_tags(entry) == ()


def test_ensure_tag_sends_full_tag_set() -> None:
    entry = make_entry(tags=["sale", "summer"])
    catalog = FakeCatalog([entry])

    result = asyncio.run(TagUpdater(catalog).ensure_tag(entry, TAG))

    assert catalog.updates == [(entry.id, ("sale", "summer", TAG))]
    assert isinstance(result, Tagged)
    assert result.entry.tags == ("sale", "summer", TAG)
    assert result.changed


def test_ensure_tag_is_idempotent() -> None:
    entry = make_entry(tags=["sale"])
    catalog = FakeCatalog([entry])
    updater = TagUpdater(catalog)

    first = asyncio.run(updater.ensure_tag(entry, TAG))
    assert isinstance(first, Tagged)
    second = asyncio.run(updater.ensure_tag(first.entry, TAG))

    assert isinstance(second, Tagged)
    assert not second.changed
    assert catalog.entries[entry.id].tags == ("sale", TAG)
    assert catalog.updates == [(entry.id, ("sale", TAG)), (entry.id, ("sale", TAG))]


def test_user_errors_fail_the_update() -> None:
    entry = make_entry()
    catalog = FakeCatalog([entry], rejected_updates={entry.id: "Tags are invalid"})

    result = asyncio.run(TagUpdater(catalog).ensure_tag(entry, TAG))

    assert result == TagFailed("Tags are invalid")


def test_catalog_errors_fail_the_update() -> None:
    entry = make_entry()
    catalog = FakeCatalog([entry], failing_updates=[entry.id])

    result = asyncio.run(TagUpdater(catalog).ensure_tag(entry, TAG))

    assert isinstance(result, TagFailed)
    assert entry.id in result.reason
