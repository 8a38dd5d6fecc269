"""Value types shared by the matching, tagging and reconciliation steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .errors import LedgerFinalizedError


@dataclass(frozen=True, slots=True)
class SourceRow:
    """One normalized spreadsheet row."""

    title: str
    vendor: str
    product_type: str


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Read snapshot of a catalog product, as returned by a search."""

    id: str
    title: str
    vendor: str
    product_type: str
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldError:
    """Field level validation error reported by the catalog service."""

    message: str
    field: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TagUpdateResponse:
    entry_id: str | None
    tags: tuple[str, ...] = ()
    errors: tuple[FieldError, ...] = ()


class NotFoundReason(StrEnum):
    NO_RESULTS = "no_results"
    NO_EXACT_MATCH = "no_exact_match"
    AMBIGUOUS = "ambiguous"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True, slots=True)
class Matched:
    entry: CatalogEntry
    candidates: int = 1


@dataclass(frozen=True, slots=True)
class NotFound:
    reason: NotFoundReason
    detail: str | None = None


type MatchOutcome = Matched | NotFound


@dataclass(frozen=True, slots=True)
class Tagged:
    entry: CatalogEntry
    changed: bool = True


@dataclass(frozen=True, slots=True)
class TagFailed:
    reason: str


type TagResult = Tagged | TagFailed


class RowState(StrEnum):
    PENDING = "pending"
    MATCHING = "matching"
    FOUND = "found"
    TAGGING = "tagging"
    TAGGED = "tagged"
    TAG_FAILED = "tag_failed"
    NOT_FOUND = "not_found"
    ERRORED = "errored"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {RowState.TAGGED, RowState.TAG_FAILED, RowState.NOT_FOUND, RowState.ERRORED}
)


@dataclass(frozen=True, slots=True)
class RowOutcome:
    """Terminal result for a single row."""

    row: SourceRow
    state: RowState
    match: MatchOutcome | None = None
    tag_result: TagResult | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        if not self.state.is_terminal:
            raise ValueError(f"Row outcome requires a terminal state, got {self.state}")
        if self.state is RowState.TAGGED and not isinstance(self.tag_result, Tagged):
            raise ValueError("Tagged outcome requires a Tagged result")

    @property
    def tagged_entry(self) -> CatalogEntry | None:
        if isinstance(self.tag_result, Tagged):
            return self.tag_result.entry
        return None


@dataclass(slots=True)
class ReconciliationLedger:
    """Append-only record of tagged and not-found rows, kept in source order."""

    tagged: list[tuple[CatalogEntry, SourceRow]] = field(
        default_factory=list[tuple[CatalogEntry, SourceRow]]
    )
    not_found: list[SourceRow] = field(default_factory=list[SourceRow])
    processed: int = 0
    matched: int = 0
    finalized: bool = False

    def record(self, outcome: RowOutcome) -> None:
        if self.finalized:
            raise LedgerFinalizedError("Cannot record outcomes into a finalized ledger")
        self.processed += 1
        if isinstance(outcome.match, Matched):
            self.matched += 1
        entry = outcome.tagged_entry
        if outcome.state is RowState.TAGGED and entry is not None:
            self.tagged.append((entry, outcome.row))
        else:
            self.not_found.append(outcome.row)

    def finalize(self) -> ReconciliationLedger:
        self.finalized = True
        return self

    @property
    def tagged_count(self) -> int:
        return len(self.tagged)

    @property
    def not_found_count(self) -> int:
        return len(self.not_found)
