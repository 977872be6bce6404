"""Category totals and their CSV export."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from .config import EXPORT_HEADER

Aggregate = dict[str, float]

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def aggregate_records(records: Iterable[tuple[str, float]]) -> Aggregate:
    """Sum amounts per category."""

    totals: Aggregate = {}
    for category, amount in records:
        totals[category] = totals.get(category, 0.0) + amount
    return totals


def total(aggregate: Aggregate) -> float:
    return float(sum(aggregate.values()))


def to_frame(aggregate: Aggregate) -> pd.DataFrame:
    """Return the aggregate as a ``category``/``amount`` frame, largest first."""

    if not aggregate:
        return pd.DataFrame(columns=["category", "amount"])
    df = pd.DataFrame(list(aggregate.items()), columns=["category", "amount"])
    return df.sort_values("amount", ascending=False, kind="stable").reset_index(drop=True)


def _quote(label: str) -> str:
    # Padded labels are quoted too, otherwise re-import trims them.
    if label != label.strip() or any(token in label for token in _NEEDS_QUOTING):
        return '"' + label.replace('"', '""') + '"'
    return label


def export_csv(aggregate: Aggregate) -> str:
    """Serialise the aggregate with raw numeric amounts (no currency formatting)."""

    lines = [",".join(EXPORT_HEADER)]
    lines.extend(f"{_quote(label)},{amount!r}" for label, amount in aggregate.items())
    return "\n".join(lines) + "\n"
