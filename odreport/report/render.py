from __future__ import annotations

import hashlib
import html
from typing import Any, List, Optional

from ..model.table import HeaderCell, Row, Table, Toolbar
from .html_assets import PAGE_PRINT_CSS


def esc(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def stable_id(title: str) -> str:
    return "t_" + hashlib.sha1(title.encode("utf-8")).hexdigest()[:8]


def _header_html(h: HeaderCell) -> str:
    cls = h.state.css_class
    attr = f' class="{cls}"' if cls else ""
    return f"<th{attr}>{esc(h.label)}</th>"


def _row_html(r: Row) -> str:
    tds = "".join(f"<td>{esc(v)}</td>" for v in r.cells)
    return f"<tr>{tds}</tr>"


def table_html(table: Table) -> str:
    """
    Markup for the table as it currently stands: rows in their present
    order, the sorted header carrying sort-asc / sort-desc.
    """
    attrs: List[str] = []
    if table.table_id:
        attrs.append(f'id="{esc(table.table_id)}"')
    if table.css_class:
        attrs.append(f'class="{esc(table.css_class)}"')
    open_tag = "<table" + "".join(" " + a for a in attrs) + ">"

    ths = "".join(_header_html(h) for h in table.headers)
    trs = "".join(_row_html(r) for r in table.body)

    return f"{open_tag}<thead><tr>{ths}</tr></thead><tbody>{trs}</tbody></table>"


def toolbar_html(toolbar: Optional[Toolbar]) -> str:
    if toolbar is None:
        return ""
    buttons = "".join(
        f'<button class="{esc(b.css_class)}">{esc(b.label)}</button>' for b in toolbar.buttons
    )
    return f'<div class="{esc(toolbar.css_class)}">{buttons}</div>'


def table_block_html(table: Table) -> str:
    # toolbar sits immediately before the table it controls
    return toolbar_html(table.toolbar) + table_html(table)


def page_print_style() -> str:
    return f"<style>{PAGE_PRINT_CSS}</style>"
