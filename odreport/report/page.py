# odreport/report/page.py

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from ..config import DEFAULT_CONFIG, ReportConfig
from ..model.table import Table
from ..table.controller import TableController
from .render import page_print_style

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadingIndicator:
    def __init__(self) -> None:
        self.active = False

    def show(self) -> None:
        self.active = True

    def hide(self) -> None:
        self.active = False


def _stderr_alert(message: str) -> None:
    print(message, file=sys.stderr)


class ReportPage:
    """
    Page-level wiring around the report's tables and charts.

    Charts are anything with an update() method; the page never draws them,
    it only asks them to refresh after the table data changes or the
    viewport is resized. Every user action should go through guard(), which
    is where uncaught faults are logged, the loading indicator is cleared
    and the user is told to reload.
    """

    def __init__(
        self,
        controller: Optional[TableController] = None,
        *,
        charts: Sequence[Any] = (),
        loading: Optional[LoadingIndicator] = None,
        alert: Callable[[str], Any] = _stderr_alert,
        config: Optional[ReportConfig] = None,
    ):
        self.config = config or (controller.config if controller is not None else DEFAULT_CONFIG)
        self.controller = controller or TableController(self.config)
        if self.controller.on_mutated is None:
            self.controller.on_mutated = self._table_mutated
        self.charts: List[Any] = list(charts)
        self.loading = loading or LoadingIndicator()
        self.alert = alert
        self.tables: List[Table] = []

    def initialize(self, tables: Iterable[Table]) -> None:
        for t in tables:
            self.controller.initialize(t)
            if t not in self.tables:
                self.tables.append(t)

    # -----------------------
    # charts
    # -----------------------

    def update_charts(self) -> None:
        for chart in self.charts:
            chart.update()

    def on_resize(self) -> None:
        self.update_charts()

    def _table_mutated(self, table: Table) -> None:
        self.update_charts()

    def update_table_and_charts(self, table: Table, mutate: Optional[Callable[[Table], Any]] = None) -> None:
        if mutate is not None:
            mutate(table)
        self.controller.notify_mutated(table)

    # -----------------------
    # loading / errors
    # -----------------------

    def show_loading(self) -> None:
        self.loading.show()

    def hide_loading(self) -> None:
        self.loading.hide()

    def report_error(self, exc: BaseException) -> None:
        logger.error("Runtime error: %s", exc, exc_info=(type(exc), exc, exc.__traceback__))
        self.hide_loading()
        self.alert(self.config.error_message)

    def guard(self, action: Callable[..., T], *args: Any) -> Optional[T]:
        try:
            return action(*args)
        except Exception as e:
            self.report_error(e)
            return None

    def print_style(self) -> str:
        return page_print_style()


def initialize_report(
    tables: Iterable[Table],
    charts: Sequence[Any] = (),
    *,
    controller: Optional[TableController] = None,
    loading: Optional[LoadingIndicator] = None,
    alert: Callable[[str], Any] = _stderr_alert,
    config: Optional[ReportConfig] = None,
) -> ReportPage:
    """Bind every table on the page and hand back the page for event wiring."""
    page = ReportPage(controller, charts=charts, loading=loading, alert=alert, config=config)
    page.initialize(tables)
    return page
