"""Turn loosely keyed spreadsheet records into ``SourceRow`` values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import IncompleteRowError
from .model import SourceRow

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

TITLE_MARKER = "title"
VENDOR_MARKER = "vendor"
TYPE_MARKER = "type"


@dataclass(frozen=True, slots=True)
class ColumnMapping:
    """Header names resolved for each required field; ``None`` when absent."""

    title: str | None
    vendor: str | None
    product_type: str | None

    @property
    def is_complete(self) -> bool:
        return None not in (self.title, self.vendor, self.product_type)


def find_header(headers: Iterable[str], marker: str) -> str | None:
    """Return the first header containing ``marker``, ignoring case."""

    needle = marker.lower()
    for header in headers:
        if needle in header.lower():
            return header
    return None


def resolve_columns(headers: Iterable[str]) -> ColumnMapping:
    names = [header for header in headers if header is not None]
    return ColumnMapping(
        title=find_header(names, TITLE_MARKER),
        vendor=find_header(names, VENDOR_MARKER),
        product_type=find_header(names, TYPE_MARKER),
    )


def _value(record: Mapping[str, str | None], header: str | None) -> str:
    if header is None:
        return ""
    raw = record.get(header)
    if raw is None:
        return ""
    return raw.strip()


def normalize_row(
    record: Mapping[str, str | None],
    *,
    columns: ColumnMapping | None = None,
) -> SourceRow:
    """Extract title, vendor and product type from ``record``.

    Headers are matched by case-insensitive substring (``title``, ``vendor``,
    ``type``); when several headers match, the first one in iteration order is
    used. Pass a pre-resolved ``columns`` mapping to skip the lookup for every
    row of a file.

    Raises:
        IncompleteRowError: if any of the three values is missing or blank.
    """

    mapping = columns or resolve_columns(record.keys())
    title = _value(record, mapping.title)
    vendor = _value(record, mapping.vendor)
    product_type = _value(record, mapping.product_type)

    missing = tuple(
        name
        for name, value in (
            ("title", title),
            ("vendor", vendor),
            ("product_type", product_type),
        )
        if not value
    )
    if missing:
        raise IncompleteRowError(
            f"Row is missing required fields: {', '.join(missing)}", missing=missing
        )

    return SourceRow(title=title, vendor=vendor, product_type=product_type)
