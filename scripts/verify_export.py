"""Check an exported workbook against the service-hour ceiling.

Lists every row at or above the ceiling and exits non-zero if any row exceeds it.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.volunteer_attendance.volunteer_attendance.core.constants import MAX_SERVICE_HOURS
from src.volunteer_attendance.volunteer_attendance.export.excel_writer import HEADERS


def find_rows_at_ceiling(path: Path, max_hours: float) -> pd.DataFrame:
    # Row 1 is the merged title, row 2 holds the headers.
    df = pd.read_excel(path, header=1)
    df[HEADERS[7]] = pd.to_numeric(df[HEADERS[7]], errors="coerce").fillna(0)
    return df[df[HEADERS[7]] >= max_hours]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("file", type=Path)
    parser.add_argument("--max-hours", type=float, default=MAX_SERVICE_HOURS)
    args = parser.parse_args(argv)

    at_ceiling = find_rows_at_ceiling(args.file, args.max_hours)
    for n, (_, row) in enumerate(at_ceiling.iterrows(), start=1):
        print(f"{n}. {row[HEADERS[2]]} | {row[HEADERS[4]]} | {row[HEADERS[5]]} - {row[HEADERS[6]]} | {row[HEADERS[7]]} h")

    over = at_ceiling[at_ceiling[HEADERS[7]] > args.max_hours]
    print(f"{len(at_ceiling)} rows at or above {args.max_hours} h, {len(over)} above")
    return 1 if len(over) else 0


if __name__ == "__main__":
    sys.exit(main())
