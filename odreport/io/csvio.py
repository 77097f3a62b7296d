from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List, Sequence


def read_rows(path: Path) -> List[List[str]]:
    # utf-8-sig swallows the BOM our own exports carry
    with path.open("r", newline="", encoding="utf-8-sig", errors="replace") as f:
        return [row for row in csv.reader(f)]


def format_rows(rows: Iterable[Sequence[str]]) -> str:
    """
    Every field quoted, inner quotes doubled, comma separated,
    newline between records and none after the last one.
    """
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for r in rows:
        w.writerow(["" if v is None else v for v in r])
    text = buf.getvalue()
    return text[:-1] if text.endswith("\n") else text
