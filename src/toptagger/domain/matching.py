"""Locate the catalog entry that corresponds to a spreadsheet row."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import CatalogError
from .model import Matched, NotFound, NotFoundReason

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import CatalogEntry, MatchOutcome
    from .ports import CatalogService

log = getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10


def sanitize_title(title: str) -> str:
    """Escape ``title`` for embedding inside a double-quoted search term.

    Backslashes are escaped first so the escapes added for quotes are not
    doubled afterwards.
    """

    escaped = title.replace("\\", "\\\\").replace("'", "\\'").replace('"', '\\"')
    return escaped.strip()


def build_title_query(title: str) -> str:
    return f'title:"{sanitize_title(title)}"'


def is_exact_match(entry: CatalogEntry, *, title: str, vendor: str, product_type: str) -> bool:
    return (
        entry.title == title
        and entry.vendor.strip() == vendor.strip()
        and entry.product_type.strip() == product_type.strip()
    )


class CatalogMatcher:
    """Exact-title search followed by a strict title/vendor/type filter."""

    def __init__(
        self,
        catalog: CatalogService,
        *,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
        strict: bool = False,
    ) -> None:
        self._catalog = catalog
        self._search_limit = search_limit
        self._strict = strict

    async def find(self, title: str, vendor: str, product_type: str) -> MatchOutcome:
        query = build_title_query(title)
        log.debug("Searching catalog with query: %s", query)
        try:
            candidates = await self._catalog.search(query, limit=self._search_limit)
        except CatalogError as exc:
            log.warning("Catalog search failed for %r: %s", title, exc)
            return NotFound(NotFoundReason.TRANSPORT_ERROR, detail=str(exc))

        if not candidates:
            return NotFound(NotFoundReason.NO_RESULTS)

        matches = [
            entry
            for entry in candidates
            if is_exact_match(entry, title=title, vendor=vendor, product_type=product_type)
        ]
        if not matches:
            log.info(
                "Found products with similar title but no exact match for %r: %s",
                title,
                _titles(candidates),
            )
            return NotFound(NotFoundReason.NO_EXACT_MATCH)

        if len(matches) > 1:
            if self._strict:
                return NotFound(
                    NotFoundReason.AMBIGUOUS,
                    detail=f"{len(matches)} catalog entries match exactly",
                )
            log.warning(
                "%d catalog entries match %r exactly; using the first (%s)",
                len(matches),
                title,
                matches[0].id,
            )

        return Matched(matches[0], candidates=len(matches))


def _titles(entries: Sequence[CatalogEntry]) -> list[str]:
    return [entry.title for entry in entries]
