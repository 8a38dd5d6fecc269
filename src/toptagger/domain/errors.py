"""Domain level error types."""

from __future__ import annotations


class IncompleteRowError(ValueError):
    """Raised when a tabular record lacks a title, vendor or product type."""

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


class CatalogError(RuntimeError):
    """Raised by catalog services when a call fails at the transport or protocol layer."""


class LedgerFinalizedError(RuntimeError):
    """Raised when an outcome is recorded into a ledger that was already finalized."""
