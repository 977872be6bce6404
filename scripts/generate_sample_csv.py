"""Write a synthetic esports earnings CSV in the analyser's import layout.

Output: data/esports_earnings_sample.csv (override with --output)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from earnings_analyser import synth
from earnings_analyser.logging_setup import configure_logging


def main() -> None:
    configure_logging()
    parser = argparse.ArgumentParser(description="Generate a synthetic esports earnings CSV")
    parser.add_argument("--rows", type=int, default=synth.DEFAULT_ROWS)
    parser.add_argument("--seed", type=int, default=synth.DEFAULT_SEED)
    parser.add_argument("--output", type=Path, default=Path("data") / "esports_earnings_sample.csv")
    args = parser.parse_args()

    path = synth.write_sample_csv(args.output, rows=args.rows, seed=args.seed)
    print(f"Wrote {path} with {args.rows} rows")


if __name__ == "__main__":
    main()
