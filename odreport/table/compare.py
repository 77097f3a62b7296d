from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from pyuca import Collator

# Leading numeric literal, parseFloat-style: sign, digits with optional
# fraction, optional exponent, or Infinity. Trailing junk is ignored.
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


class CellKind(Enum):
    NUMERIC = "numeric"
    TEXT = "text"


@dataclass(frozen=True)
class CellValue:
    text: str
    number: float

    @property
    def kind(self) -> CellKind:
        return CellKind.TEXT if math.isnan(self.number) else CellKind.NUMERIC


def parse_number(text: str) -> float:
    m = _NUMERIC_PREFIX.match(text.lstrip())
    if not m:
        return math.nan
    return float(m.group(0).replace("Infinity", "inf"))


def classify(text: str) -> CellValue:
    return CellValue(text=text, number=parse_number(text))


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    # DUCET already orders kana in gojuon order (あ < い < ... < ん), which is
    # what Japanese collation needs for report cells. Loading the table is slow.
    return Collator()


def collate(a: str, b: str, collator: Optional[Any] = None) -> int:
    c = collator if collator is not None else get_collator()
    ka = c.sort_key(a)
    kb = c.sort_key(b)
    return (ka > kb) - (ka < kb)


def compare_values(a: str, b: str, ascending: bool = True, collator: Optional[Any] = None) -> int:
    """
    Order two cell texts.

    Numeric only when *both* sides parse as numbers; a mixed pair compares
    as strings, whole. Result is -1, 0 or 1, flipped for descending.
    """
    va = classify(a)
    vb = classify(b)

    if va.kind is CellKind.NUMERIC and vb.kind is CellKind.NUMERIC:
        cmp = (va.number > vb.number) - (va.number < vb.number)
    else:
        cmp = collate(a, b, collator)

    return cmp if ascending else -cmp
