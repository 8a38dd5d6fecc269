"""Matching, tagging and reconciliation core."""

from __future__ import annotations

from .errors import CatalogError, IncompleteRowError, LedgerFinalizedError
from .matching import CatalogMatcher, build_title_query, sanitize_title
from .model import (
    CatalogEntry,
    FieldError,
    Matched,
    MatchOutcome,
    NotFound,
    NotFoundReason,
    ReconciliationLedger,
    RowOutcome,
    RowState,
    SourceRow,
    TagFailed,
    Tagged,
    TagResult,
    TagUpdateResponse,
)
from .normalization import ColumnMapping, normalize_row, resolve_columns
from .reconciliation import ReconciliationDriver, ReconciliationSettings
from .reporting import RunSummary, not_found_report_rows, tagged_report_rows
from .tagging import TagUpdater

__all__ = [
    "CatalogEntry",
    "CatalogError",
    "CatalogMatcher",
    "ColumnMapping",
    "FieldError",
    "IncompleteRowError",
    "LedgerFinalizedError",
    "MatchOutcome",
    "Matched",
    "NotFound",
    "NotFoundReason",
    "ReconciliationDriver",
    "ReconciliationLedger",
    "ReconciliationSettings",
    "RowOutcome",
    "RowState",
    "RunSummary",
    "SourceRow",
    "TagFailed",
    "TagResult",
    "TagUpdateResponse",
    "TagUpdater",
    "Tagged",
    "build_title_query",
    "normalize_row",
    "not_found_report_rows",
    "resolve_columns",
    "sanitize_title",
    "tagged_report_rows",
]
