from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Optional

from ..exceptions import InvalidColumnError
from ..model.table import SortState, Table
from .compare import compare_values

logger = logging.getLogger(__name__)


def next_direction(current: SortState) -> SortState:
    # repeated clicks toggle; anything not already ascending starts ascending
    if current is SortState.ASCENDING:
        return SortState.DESCENDING
    return SortState.ASCENDING


def sort_table(
    table: Table,
    column_index: int,
    *,
    direction: Optional[SortState] = None,
    collator: Optional[Any] = None,
) -> SortState:
    """
    Reorder table.body by one column and mark that column's header.

    With no explicit direction the header's current marker decides
    (see next_direction). Rows are reordered, never rebuilt: the same Row
    objects end up in table.body. Python's list.sort is stable, so rows
    that compare equal keep their relative order in either direction.
    """
    if not 0 <= column_index < table.column_count:
        raise InvalidColumnError(column_index, table.column_count)

    if direction is None or direction is SortState.NONE:
        direction = next_direction(table.headers[column_index].state)
    ascending = direction is SortState.ASCENDING

    table.set_sort_marker(column_index, direction)

    keyed = [(row.cell_text(column_index).strip(), row) for row in table.body]

    def _cmp(x, y) -> int:
        return compare_values(x[0], y[0], ascending, collator)

    keyed.sort(key=cmp_to_key(_cmp))
    table.body[:] = [row for _, row in keyed]

    logger.debug(
        "sorted table %r by column %d (%s), %d rows",
        table.table_id, column_index, direction.value, len(table.body),
    )
    return direction
