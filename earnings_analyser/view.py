"""Display filters over the category aggregate.

Two modes are supported:

- ``grouped``: the top ``max_display`` categories, with everything below that
  rank folded into a single ``"Other"`` entry appended at the end;
- ``threshold``: only categories whose total is at or above ``threshold``.

Entries are always ordered by amount, largest first. Ties keep the aggregate's
insertion order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Literal

from .aggregate import Aggregate
from .config import DEFAULT_MAX_DISPLAY, DEFAULT_THRESHOLD_MAX, OTHER_LABEL

Mode = Literal["grouped", "threshold"]
FilteredView = list[tuple[str, float]]

GROUPED: Mode = "grouped"
THRESHOLD: Mode = "threshold"
MODES: tuple[Mode, ...] = (GROUPED, THRESHOLD)


@dataclass(frozen=True)
class FilterParams:
    """Current filter mode plus the parameter each mode reads."""

    mode: Mode = GROUPED
    max_display: int = DEFAULT_MAX_DISPLAY
    threshold: float = 0.0

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown filter mode: {self.mode!r}")
        if self.max_display < 0:
            raise ValueError("max_display must be non-negative")

    def with_mode(self, mode: Mode) -> FilterParams:
        return replace(self, mode=mode)


def sorted_entries(aggregate: Aggregate) -> FilteredView:
    return sorted(aggregate.items(), key=lambda item: item[1], reverse=True)


def filter_view(aggregate: Aggregate, params: FilterParams) -> FilteredView:
    """Return the ordered ``(label, amount)`` pairs to display."""

    entries = sorted_entries(aggregate)

    if params.mode == THRESHOLD:
        return [(label, amount) for label, amount in entries if amount >= params.threshold]

    if len(entries) <= params.max_display:
        return entries

    shown = entries[: params.max_display]
    other_sum = sum(amount for _, amount in entries[params.max_display :])
    # "Other" stays last even when it outranks the shown entries.
    shown.append((OTHER_LABEL, other_sum))
    return shown


def threshold_slider_max(aggregate: Aggregate, default: float = DEFAULT_THRESHOLD_MAX) -> float:
    """Largest single-category total, used as the threshold slider's upper bound."""

    values = [value for value in aggregate.values() if not math.isnan(value)]
    if not values:
        return default
    return max(values)


def default_threshold(aggregate: Aggregate, default: float = DEFAULT_THRESHOLD_MAX) -> float:
    return threshold_slider_max(aggregate, default) / 2


def clamp_threshold(value: object) -> float:
    """Coerce a manually entered threshold; anything non-numeric or negative becomes 0."""

    try:
        threshold = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(threshold) or threshold < 0:
        return 0.0
    return threshold


def threshold_slider_range(slider_max: float | None, threshold: float) -> tuple[float, float]:
    """``(min, max)`` for the threshold slider, always containing ``threshold``.

    An all-negative aggregate gives a negative default threshold, so the lower
    bound drops below zero to keep the slider valid.
    """

    upper = max(float(slider_max or 0.0), threshold, 1.0)
    return min(0.0, threshold), upper
