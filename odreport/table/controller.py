# odreport/table/controller.py

from __future__ import annotations

import logging
import weakref
from datetime import datetime, timezone
from functools import partial
from typing import Any, Callable, Optional

from ..config import DEFAULT_CONFIG, ReportConfig
from ..model.table import SortState, Table, Toolbar, ToolbarButton
from ..report.render import stable_id
from .export import DirectoryDownload, DownloadSink, export_table_to_csv, report_filename
from .printing import DocumentOpener, print_table
from .sorter import sort_table

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TableController:
    """
    Binds a table to its sort / export / print behaviour.

    initialize() wires one click handler per header and puts the export
    toolbar in front of the table. Calling it again for the same table
    does nothing.

    on_mutated is the hook for whatever else renders the same data (the
    report's charts). Sorting only reorders rows, so it is not fired from
    the sort path; code that changes table contents calls notify_mutated().
    """

    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        *,
        download: Optional[DownloadSink] = None,
        opener: Optional[DocumentOpener] = None,
        on_mutated: Optional[Callable[[Table], Any]] = None,
        clock: Callable[[], datetime] = _utcnow,
        collator: Optional[Any] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.download = download if download is not None else DirectoryDownload(self.config.download_dir)
        self.opener = opener
        self.on_mutated = on_mutated
        self.clock = clock
        self.collator = collator
        self._bound: "weakref.WeakSet[Table]" = weakref.WeakSet()

    def is_initialized(self, table: Table) -> bool:
        return table in self._bound

    def initialize(self, table: Table) -> None:
        if table in self._bound:
            return

        if not table.table_id:
            table.table_id = stable_id("|".join(table.header_labels()))

        for index, header in enumerate(table.headers):
            header.listeners.append(partial(self.sort, table, index))

        cfg = self.config
        table.toolbar = Toolbar(
            css_class=cfg.toolbar_class,
            buttons=[
                ToolbarButton(cfg.export_class, cfg.export_label, partial(self.export, table)),
                ToolbarButton(cfg.print_class, cfg.print_label, partial(self.print, table)),
            ],
        )

        self._bound.add(table)
        logger.debug("initialized table %r (%d columns)", table.table_id, table.column_count)

    # -----------------------
    # handlers
    # -----------------------

    def sort(self, table: Table, column_index: int) -> SortState:
        return sort_table(table, column_index, collator=self.collator)

    def export_filename(self) -> str:
        return report_filename(self.clock(), prefix=self.config.filename_prefix)

    def export(self, table: Table) -> None:
        export_table_to_csv(
            table,
            self.export_filename(),
            download=self.download,
            mime_type=self.config.csv_mime_type,
        )

    def print(self, table: Table) -> None:
        print_table(table, opener=self.opener)

    def notify_mutated(self, table: Table) -> None:
        if self.on_mutated is not None:
            self.on_mutated(table)
