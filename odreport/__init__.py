# odreport/__init__.py

from __future__ import annotations

__version__ = "0.1.0"

from .config import ReportConfig
from .model.table import HeaderCell, Row, SortState, Table
from .table.controller import TableController
from .report.page import ReportPage, initialize_report

__all__ = [
    "__version__",
    "HeaderCell",
    "ReportConfig",
    "ReportPage",
    "Row",
    "SortState",
    "Table",
    "TableController",
    "initialize_report",
]
