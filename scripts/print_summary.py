"""Print the aggregated earnings summary for a CSV file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from earnings_analyser import view
from earnings_analyser.logging_setup import configure_logging
from earnings_analyser.session import AnalyserSession


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(description="Summarise earnings per title from a CSV export")
    parser.add_argument("path", type=Path)
    parser.add_argument("--mode", choices=view.MODES, default=view.GROUPED)
    parser.add_argument("--top", type=int, help="Titles to show before grouping the rest as Other")
    parser.add_argument("--threshold", type=float, help="Minimum earnings in threshold mode")
    parser.add_argument("--export", type=Path, help="Also write the aggregated CSV here")
    args = parser.parse_args(argv)

    session = AnalyserSession()
    session.set_mode(args.mode)
    result = session.import_file(args.path)
    if result.notice is not None:
        print(result.notice.message, file=sys.stderr)
    if not result.ok:
        return 1

    if args.top is not None:
        session.set_max_display(args.top)
    if args.threshold is not None:
        session.set_threshold(args.threshold)

    print(session.summary_text())
    if args.export is not None:
        args.export.write_text(session.export_csv(), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
