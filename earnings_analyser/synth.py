"""Synthetic esports earnings datasets.

The generator produces deterministic tournament-earnings rows in the nine-column
layout the analyser imports, including titles with embedded commas and a
handful of titles that appear on several rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from .config import INPUT_HEADER

DEFAULT_ROWS = 120
DEFAULT_SEED = 7

COUNTRIES = ("US", "KR", "CN", "SE", "DK", "FR", "DE", "BR", "FI", "RU")


@dataclass(frozen=True)
class TitleProfile:
    """Static metadata for one esports title."""

    name: str
    genre: str
    release_year: int
    earnings_range: tuple[float, float]


def _title_catalogue() -> tuple[TitleProfile, ...]:
    return (
        TitleProfile("Dota 2", "Multiplayer Online Battle Arena", 2013, (200_000.0, 4_000_000.0)),
        TitleProfile("Counter-Strike: Global Offensive", "First-Person Shooter", 2012, (150_000.0, 2_500_000.0)),
        TitleProfile("Fortnite", "Battle Royale", 2017, (100_000.0, 3_000_000.0)),
        TitleProfile("League of Legends", "Multiplayer Online Battle Arena", 2009, (120_000.0, 2_200_000.0)),
        TitleProfile("StarCraft II", "Strategy", 2010, (20_000.0, 600_000.0)),
        TitleProfile("PLAYERUNKNOWN'S BATTLEGROUNDS", "Battle Royale", 2017, (40_000.0, 1_200_000.0)),
        TitleProfile("Overwatch", "First-Person Shooter", 2016, (30_000.0, 900_000.0)),
        TitleProfile("Hearthstone", "Collectible Card Game", 2014, (10_000.0, 400_000.0)),
        TitleProfile("Rocket League", "Sports", 2015, (10_000.0, 350_000.0)),
        TitleProfile("Super Smash Bros. Melee", "Fighting Game", 2001, (2_000.0, 120_000.0)),
        TitleProfile("Street Fighter V", "Fighting Game", 2016, (3_000.0, 150_000.0)),
        TitleProfile("Call of Duty: Black Ops 4", "First-Person Shooter", 2018, (15_000.0, 500_000.0)),
        TitleProfile("Tom Clancy's Rainbow Six Siege", "First-Person Shooter", 2015, (8_000.0, 300_000.0)),
        TitleProfile("Arena of Valor", "Multiplayer Online Battle Arena", 2016, (20_000.0, 700_000.0)),
        TitleProfile("Legends, The Card Game", "Collectible Card Game", 2019, (1_000.0, 40_000.0)),
        TitleProfile("Heroes of Might, Magic and Arenas", "Strategy", 2020, (500.0, 25_000.0)),
    )


CATALOGUE = _title_catalogue()


def generate_earnings(rows: int = DEFAULT_ROWS, seed: int | None = DEFAULT_SEED) -> pd.DataFrame:
    """Return ``rows`` tournament-earnings records in the import layout."""

    if rows <= 0:
        raise ValueError("rows must be positive")

    rng = np.random.default_rng(seed)
    picks = rng.integers(0, len(CATALOGUE), size=rows)

    records = []
    for idx, pick in enumerate(picks, start=1):
        title = CATALOGUE[int(pick)]
        low, high = title.earnings_range
        total = round(float(rng.uniform(low, high)), 2)
        top_share = float(rng.uniform(0.15, 0.6))
        records.append(
            {
                "IdNo": idx,
                "TotalMoney": total,
                "GameName": title.name,
                "Genre": title.genre,
                "PlayerNo": int(rng.integers(10, 2_000)),
                "TournamentNo": int(rng.integers(1, 250)),
                "Top_Country": COUNTRIES[int(rng.integers(0, len(COUNTRIES)))],
                "Top_Country_Earnings": round(total * top_share, 2),
                "Releaseyear": title.release_year,
            }
        )

    df = pd.DataFrame(records)
    return df[list(INPUT_HEADER)]


def expected_totals(df: pd.DataFrame) -> dict[str, float]:
    """Per-title totals computed directly with pandas, for cross-checking the parser."""

    return {str(name): float(value) for name, value in df.groupby("GameName", sort=False)["TotalMoney"].sum().items()}


def to_csv_text(df: pd.DataFrame) -> str:
    # pandas quotes fields containing the delimiter, matching the import format.
    return df.to_csv(index=False, lineterminator="\n")


def write_sample_csv(
    path: str | Path = Path("data") / "esports_earnings_sample.csv",
    *,
    rows: int = DEFAULT_ROWS,
    seed: int | None = DEFAULT_SEED,
) -> Path:
    """Persist a synthetic dataset to disk and return its path."""

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_csv_text(generate_earnings(rows=rows, seed=seed)), encoding="utf-8")
    return output_path


def main() -> None:  # pragma: no cover - convenience CLI
    print(f"Wrote {write_sample_csv()}")


if __name__ == "__main__":  # pragma: no cover - module CLI
    main()
