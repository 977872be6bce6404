"""Text summary of the filtered earnings view.

Shares are computed against the filtered view's own total, so in threshold
mode the percentages describe only what is on screen.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypedDict

from . import utils

NO_DATA_TEXT = "No valid data found."
SUMMARY_TITLE = "Aggregated Earnings:"
LABEL_WIDTH = 35


class SummaryEntry(TypedDict):
    name: str
    amount: float
    share: float
    percent: str
    amount_text: str


def view_total(view: Sequence[tuple[str, float]]) -> float:
    return float(sum(amount for _, amount in view))


def summarize_view(view: Sequence[tuple[str, float]]) -> list[SummaryEntry]:
    """Attach share, percentage and currency text to each view entry."""

    overall = view_total(view)
    entries: list[SummaryEntry] = []
    for name, amount in view:
        share = amount / overall if overall else 0.0
        entries.append(
            {
                "name": name,
                "amount": float(amount),
                "share": share,
                "percent": utils.format_percent(share),
                "amount_text": utils.format_currency(amount),
            }
        )
    return entries


def format_summary(view: Sequence[tuple[str, float]]) -> str:
    """Render the summary panel text, or the no-data message for an empty view."""

    if not view:
        return NO_DATA_TEXT

    lines = [SUMMARY_TITLE, ""]
    for entry in summarize_view(view):
        lines.append(f"{entry['name']:<{LABEL_WIDTH}} : {entry['amount_text']} ({entry['percent']}%)")
    lines.append("")
    lines.append(f"Total Earnings: {utils.format_currency(view_total(view))}")
    return "\n".join(lines)
