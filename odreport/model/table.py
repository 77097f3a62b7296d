# odreport/model/table.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..io.csvio import read_rows

Handler = Callable[[], Any]


class SortState(Enum):
    # values double as the header class names in rendered markup
    NONE = "none"
    ASCENDING = "sort-asc"
    DESCENDING = "sort-desc"

    @property
    def css_class(self) -> str:
        return "" if self is SortState.NONE else self.value


@dataclass(eq=False)
class HeaderCell:
    label: str
    state: SortState = SortState.NONE
    listeners: List[Handler] = field(default_factory=list)

    def click(self) -> None:
        for fn in list(self.listeners):
            fn()


@dataclass(eq=False)
class Row:
    cells: List[str]
    # anything the host attached to the row; must survive a sort untouched
    listeners: List[Handler] = field(default_factory=list)

    def cell_text(self, index: int) -> str:
        # short rows read as empty cells
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return ""


@dataclass(eq=False)
class ToolbarButton:
    css_class: str
    label: str
    on_click: Handler

    def click(self) -> None:
        self.on_click()


@dataclass(eq=False)
class Toolbar:
    css_class: str
    buttons: List[ToolbarButton] = field(default_factory=list)

    def button(self, css_class: str) -> Optional[ToolbarButton]:
        for b in self.buttons:
            if b.css_class == css_class:
                return b
        return None


@dataclass(eq=False)
class Table:
    """
    A report table: header cells plus body rows, held in display order.

    Tables compare by identity, the way the host page's table element does.
    Sorting rewrites the order of ``body`` in place; the Row objects
    themselves are never copied.
    """

    headers: List[HeaderCell]
    body: List[Row] = field(default_factory=list)
    table_id: str = ""
    css_class: str = "data-table"
    # export/print controls, placed immediately before the table once bound
    toolbar: Optional[Toolbar] = None

    # -----------------------
    # constructors
    # -----------------------

    @classmethod
    def from_records(
        cls,
        columns: Sequence[Any],
        rows: Iterable[Sequence[Any]],
        **kwargs: Any,
    ) -> "Table":
        headers = [HeaderCell(_text(c)) for c in columns]
        body = [Row([_text(v) for v in r]) for r in rows]
        return cls(headers=headers, body=body, **kwargs)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, **kwargs: Any) -> "Table":
        cols = list(frame.columns)
        rows = [[r[c] for c in cols] for _, r in frame.iterrows()]
        return cls.from_records(cols, rows, **kwargs)

    @classmethod
    def from_csv(cls, path: Path, **kwargs: Any) -> "Table":
        rows = read_rows(path)
        if not rows:
            return cls(headers=[], **kwargs)
        return cls.from_records(rows[0], rows[1:], **kwargs)

    # -----------------------
    # views
    # -----------------------

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def header_labels(self) -> List[str]:
        return [h.label for h in self.headers]

    def all_rows(self) -> List[List[str]]:
        """Header row first, then body rows, as cell texts."""
        return [self.header_labels()] + [list(r.cells) for r in self.body]

    def column_values(self, index: int) -> List[str]:
        return [r.cell_text(index) for r in self.body]

    def to_frame(self) -> pd.DataFrame:
        width = self.column_count
        data = [[r.cell_text(i) for i in range(width)] for r in self.body]
        return pd.DataFrame(data, columns=self.header_labels())

    # -----------------------
    # sort markers
    # -----------------------

    def sorted_column(self) -> Optional[Tuple[int, SortState]]:
        for i, h in enumerate(self.headers):
            if h.state is not SortState.NONE:
                return i, h.state
        return None

    def clear_sort_markers(self) -> None:
        for h in self.headers:
            h.state = SortState.NONE

    def set_sort_marker(self, index: int, state: SortState) -> None:
        # at most one header carries a marker
        self.clear_sort_markers()
        self.headers[index].state = state


def _text(v: Any) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    return str(v)
