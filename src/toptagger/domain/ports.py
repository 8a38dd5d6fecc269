"""Ports between the reconciliation core and its collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import (
        CatalogEntry,
        MatchOutcome,
        RowOutcome,
        RowState,
        SourceRow,
        TagUpdateResponse,
    )


@runtime_checkable
class CatalogService(Protocol):
    """Remote catalog reachable through a title search and a tag replacement."""

    async def search(self, query: str, *, limit: int) -> list[CatalogEntry]:
        """Return up to ``limit`` entries matching ``query``, in response order."""
        ...

    async def update_tags(self, entry_id: str, tags: Sequence[str]) -> TagUpdateResponse:
        """Replace the full tag set of ``entry_id``."""
        ...


class ReconciliationObserver(Protocol):
    """Receives progress from the reconciliation driver for narration."""

    def row_started(self, position: int, total: int, row: SourceRow) -> None: ...

    def state_changed(self, row: SourceRow, state: RowState) -> None: ...

    def match_resolved(self, row: SourceRow, outcome: MatchOutcome) -> None: ...

    def row_finished(
        self, outcome: RowOutcome, *, processed: int, matched: int, tagged: int
    ) -> None: ...


class NullObserver:
    def row_started(self, position: int, total: int, row: SourceRow) -> None:
        del position, total, row

    def state_changed(self, row: SourceRow, state: RowState) -> None:
        del row, state

    def match_resolved(self, row: SourceRow, outcome: MatchOutcome) -> None:
        del row, outcome

    def row_finished(
        self, outcome: RowOutcome, *, processed: int, matched: int, tagged: int
    ) -> None:
        del outcome, processed, matched, tagged


__all__ = ["CatalogService", "NullObserver", "ReconciliationObserver"]
