"""Shared utilities for the Earnings Analyser project."""

from __future__ import annotations


def format_currency(value: float, currency: str = "$") -> str:
    """Return a human-readable currency string, e.g. ``$1,234.56`` or ``-$5.00``."""

    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{abs(value):,.2f}"


def format_percent(share: float) -> str:
    """Render a 0..1 share as a one-decimal percentage without the sign."""

    return f"{share * 100:.1f}"
