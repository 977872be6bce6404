"""Runtime settings for Earnings Analyser, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DISPLAY = 10
DEFAULT_MAX_DISPLAY_LIMIT = 20
DEFAULT_THRESHOLD_MAX = 1000.0

OTHER_LABEL = "Other"
EXPORT_FILENAME = "aggregated_data.csv"
EXPORT_HEADER = ("GameName", "TotalEarnings")
INPUT_HEADER = (
    "IdNo",
    "TotalMoney",
    "GameName",
    "Genre",
    "PlayerNo",
    "TournamentNo",
    "Top_Country",
    "Top_Country_Earnings",
    "Releaseyear",
)


@dataclass(frozen=True)
class Settings:
    """Tunable defaults for the filter controls."""

    max_display: int = DEFAULT_MAX_DISPLAY
    max_display_limit: int = DEFAULT_MAX_DISPLAY_LIMIT
    default_threshold_max: float = DEFAULT_THRESHOLD_MAX


def _env_number(name: str, default: float, *, cast: type = float, minimum: float = 0) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", name, raw, cast.__name__)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%r: must be >= %s", name, raw, minimum)
        return default
    return value


def load_settings() -> Settings:
    """Build :class:`Settings` from ``EARNINGS_ANALYSER_*`` environment variables."""

    max_display = int(_env_number("EARNINGS_ANALYSER_MAX_DISPLAY", DEFAULT_MAX_DISPLAY, cast=int, minimum=1))
    limit = int(
        _env_number("EARNINGS_ANALYSER_MAX_DISPLAY_LIMIT", DEFAULT_MAX_DISPLAY_LIMIT, cast=int, minimum=1)
    )
    if max_display > limit:
        logger.warning("Max display %d exceeds slider limit %d; raising the limit", max_display, limit)
        limit = max_display

    return Settings(
        max_display=max_display,
        max_display_limit=limit,
        default_threshold_max=_env_number(
            "EARNINGS_ANALYSER_DEFAULT_THRESHOLD_MAX", DEFAULT_THRESHOLD_MAX, minimum=0.0
        ),
    )
