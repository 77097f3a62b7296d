"""
Exception hierarchy for odreport.

Caller mistakes (asking to sort a column the table does not have) raise
immediately. Environment failures while saving a download or opening the
print view are raised from the table operations and left for the page-wide
reporter in ``odreport.report.page`` to log and surface.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ReportError(Exception):
    """Base class for every error raised by odreport."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidColumnError(ReportError):
    """Sort requested for a column index outside the header row."""

    def __init__(self, column_index: int, column_count: int):
        super().__init__(
            f"Column {column_index} is out of range for a table with {column_count} columns",
            details={"column_index": column_index, "column_count": column_count},
        )
        self.column_index = column_index
        self.column_count = column_count


class DownloadError(ReportError):
    """The export payload could not be handed to the download target."""


class PrintViewError(ReportError):
    """The print view could not be opened (no browser, blocked window)."""
