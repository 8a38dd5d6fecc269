"""Ensure a marker tag is present on a matched catalog entry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from .errors import CatalogError
from .model import TagFailed, Tagged

if TYPE_CHECKING:
    from .model import CatalogEntry, TagResult
    from .ports import CatalogService

log = getLogger(__name__)


def current_tags(entry: CatalogEntry) -> tuple[str, ...]:
    tags: object = entry.tags
    if isinstance(tags, str) or not isinstance(tags, Sequence):
        return ()
    return tuple(tag for tag in tags if isinstance(tag, str))


def with_tag(tags: Sequence[str], tag_name: str) -> tuple[str, ...]:
    """Return ``tags`` with ``tag_name`` appended unless it is already present."""

    if tag_name in tags:
        return tuple(tags)
    return (*tags, tag_name)


class TagUpdater:
    """Appends a tag and persists the complete tag set with a full-replace update."""

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    async def ensure_tag(self, entry: CatalogEntry, tag_name: str) -> TagResult:
        before = current_tags(entry)
        after = with_tag(before, tag_name)
        log.debug("Tags for %s before=%s after=%s", entry.id, before, after)

        try:
            response = await self._catalog.update_tags(entry.id, after)
        except CatalogError as exc:
            log.warning("Failed to update tags for product %r: %s", entry.title, exc)
            return TagFailed(str(exc))

        if response.errors:
            message = ", ".join(error.message for error in response.errors)
            log.warning("Tag update rejected for product %r: %s", entry.title, message)
            return TagFailed(message)

        return Tagged(replace(entry, tags=after), changed=after != before)
