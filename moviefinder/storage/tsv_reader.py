"""
Reader for tab-separated title files.

The expected layout is IMDb's ``title.akas.tsv``: a header row followed by
rows of ``titleId, ordering, title, region, language, types, attributes,
isOriginalTitle``. Malformed rows are logged and skipped; the rest of the
file is still read.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, Optional

from moviefinder.storage.models import MovieRecord

logger = logging.getLogger(__name__)

# Null marker used by IMDb dataset dumps
NULL_CELL = "\\N"

COLUMN_COUNT = 8


def _cell(value: str) -> Optional[str]:
    return None if value == NULL_CELL else value


def parse_row(row: list[str], row_id: int) -> MovieRecord:
    """
    Build a record from one split data row.

    Raises:
        ValueError: if the row is short or ``ordering`` is not an integer.
    """
    if len(row) < COLUMN_COUNT:
        raise ValueError(f"expected {COLUMN_COUNT} columns, got {len(row)}")

    return MovieRecord(
        id=row_id,
        title_id=row[0],
        ordering=int(row[1]),
        title=_cell(row[2]),
        region=_cell(row[3]),
        language=_cell(row[4]),
        types=_cell(row[5]),
        attributes=_cell(row[6]),
        is_original_title=_cell(row[7]),
    )


def read_title_records(path: Path) -> Iterator[MovieRecord]:
    """
    Yield one ``MovieRecord`` per valid data row of *path*.

    The header row is skipped. Blank lines are ignored silently; rows that
    fail to parse are logged at WARNING with their line number.
    """
    path = Path(path)
    logger.info("Reading title data from %s", path)

    row_id = 0
    skipped = 0
    with open(path, encoding="utf-8", newline="") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        next(reader, None)

        for row in reader:
            if not row:
                continue
            try:
                record = parse_row(row, row_id + 1)
            except ValueError as e:
                skipped += 1
                logger.warning("Skipping line %d of %s: %s", reader.line_num, path, e)
                continue
            row_id += 1
            yield record

    logger.info("Read %d title rows from %s (%d malformed)", row_id, path, skipped)
