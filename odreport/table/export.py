from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union

from ..exceptions import DownloadError
from ..io.csvio import format_rows
from ..io.fs import write_download
from ..model.table import Table

logger = logging.getLogger(__name__)

BOM = "\ufeff"
CSV_MIME_TYPE = "text/csv;charset=utf-8;"

# (filename, payload, mime type) -> None
DownloadSink = Callable[[str, bytes, str], None]


def report_filename(
    when: Optional[Union[date, datetime]] = None,
    prefix: str = "onedrive_report",
) -> str:
    """
    '<prefix>_YYYYMMDD.csv'. Aware datetimes are taken in UTC; naive ones
    and plain dates are used as given. Defaults to today (UTC).
    """
    if when is None:
        when = datetime.now(timezone.utc)
    if isinstance(when, datetime) and when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return f"{prefix}_{when:%Y%m%d}.csv"


def table_to_csv(table: Table) -> str:
    return format_rows(table.all_rows())


class DirectoryDownload:
    """Default download sink: saves the payload under a local directory."""

    def __init__(self, directory: Path):
        self.directory = directory
        self.last_path: Optional[Path] = None

    def __call__(self, filename: str, payload: bytes, mime_type: str) -> None:
        try:
            self.last_path = write_download(self.directory, filename, payload)
        except OSError as e:
            raise DownloadError(
                f"Could not save {filename}: {e}",
                details={"filename": filename, "directory": str(self.directory), "mime_type": mime_type},
            ) from e


def export_table_to_csv(
    table: Table,
    filename: str,
    *,
    download: Optional[DownloadSink] = None,
    mime_type: str = CSV_MIME_TYPE,
) -> None:
    csv_text = table_to_csv(table)
    payload = (BOM + csv_text).encode("utf-8")

    sink = download if download is not None else DirectoryDownload(Path("."))
    sink(filename, payload, mime_type)

    logger.info("exported %d rows to %s (%d bytes)", len(table.body) + 1, filename, len(payload))
