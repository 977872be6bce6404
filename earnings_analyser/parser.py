"""Tolerant reader for comma-delimited earnings exports.

Only two columns matter: the amount (``TotalMoney``, index 1) and the category
(``GameName``, index 2). Anything that does not yield both is dropped without
raising, so a half-broken file still produces whatever it can.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterator

from .aggregate import Aggregate, aggregate_records
from .logging_setup import get_logger

logger = get_logger(__name__)

QUOTE = '"'
DEFAULT_DELIMITER = ","
AMOUNT_INDEX = 1
CATEGORY_INDEX = 2

Record = tuple[str, float]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on any line-ending convention (``\\n``, ``\\r\\n`` or ``\\r``)."""

    return _LINE_BREAK.split(text)


def split_fields(line: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split ``line`` on ``delimiter`` except inside double-quoted spans.

    Quote characters are kept as part of the field; callers strip them where
    they care.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
            continue
        current.append(char)
    fields.append("".join(current))
    return fields


def parse_amount(text: str) -> float | None:
    """Parse a numeric field, returning ``None`` when it is not a finite number."""

    text = text.strip()
    # float() accepts "1_000"; amounts never use digit grouping.
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def clean_category(text: str) -> str:
    """Trim whitespace and drop one leading and one trailing double quote."""

    label = text.strip()
    if label.startswith(QUOTE):
        label = label[1:]
    if label.endswith(QUOTE):
        label = label[:-1]
    return label


def clean_export_label(text: str) -> str:
    """Like :func:`clean_category`, but un-double ``""`` inside a quoted label."""

    raw = text.strip()
    quoted = len(raw) >= 2 and raw.startswith(QUOTE) and raw.endswith(QUOTE)
    label = clean_category(raw)
    return label.replace(QUOTE * 2, QUOTE) if quoted else label


def iter_records(
    text: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    amount_index: int = AMOUNT_INDEX,
    category_index: int = CATEGORY_INDEX,
    clean_label: Callable[[str], str] = clean_category,
) -> Iterator[Record]:
    """Yield ``(category, amount)`` for every acceptable data line.

    The first line is always treated as the header. Blank lines, short lines,
    non-numeric amounts and empty categories are skipped.
    """

    lines = split_lines(text)
    if len(lines) < 2:
        return

    min_fields = max(amount_index, category_index) + 1
    for line_no, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if not line:
            continue
        fields = split_fields(line, delimiter)
        if len(fields) < min_fields:
            logger.debug("Skipping line %d: %d fields", line_no, len(fields))
            continue
        amount = parse_amount(fields[amount_index])
        category = clean_label(fields[category_index])
        if amount is None or not category:
            logger.debug("Skipping line %d: amount=%r category=%r", line_no, fields[amount_index], category)
            continue
        yield category, amount


def parse_csv_text(text: str) -> Aggregate:
    """Parse raw input text straight into a category → total mapping."""

    return aggregate_records(iter_records(text))


def parse_export_text(text: str) -> Aggregate:
    """Read back a file written by :func:`earnings_analyser.aggregate.export_csv`.

    Exports put the label first and the amount second; quoted labels keep
    their surrounding whitespace and have doubled quotes collapsed.
    """

    return aggregate_records(
        iter_records(text, amount_index=1, category_index=0, clean_label=clean_export_label)
    )
