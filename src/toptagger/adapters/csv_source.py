"""Read the best seller intake CSV into normalized rows."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from toptagger.domain.errors import IncompleteRowError
from toptagger.domain.model import SourceRow
from toptagger.domain.normalization import normalize_row, resolve_columns

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


@dataclass(slots=True)
class SourceLoadResult:
    rows: list[SourceRow] = field(default_factory=list[SourceRow])
    skipped: int = 0


def load_source_rows(path: Path) -> SourceLoadResult:
    """Load ``path`` and keep every record that yields a complete row.

    The file is read as UTF-8 (a leading BOM is tolerated) with the first line as
    header. Blank lines are ignored; incomplete records are logged and counted.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """

    result = SourceLoadResult()
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        columns = resolve_columns(reader.fieldnames or [])
        if not columns.is_complete:
            log.warning("Input %s lacks a title, vendor or type column: %s", path, columns)

        for record in reader:
            if not any(isinstance(value, str) and value.strip() for value in record.values()):
                continue
            try:
                row = normalize_row(record, columns=columns)
            except IncompleteRowError as exc:
                log.warning("Skipping line %d of %s: %s", reader.line_num, path.name, exc)
                result.skipped += 1
                continue
            result.rows.append(row)

    log.info("Loaded %d rows from %s (%d skipped)", len(result.rows), path, result.skipped)
    return result
