# odreport/config.py

from __future__ import annotations

from dataclasses import dataclass, replace as _replace
from pathlib import Path


@dataclass(frozen=True)
class ReportConfig:
    # csv export
    filename_prefix: str = "onedrive_report"
    csv_mime_type: str = "text/csv;charset=utf-8;"
    download_dir: Path = Path(".")

    # markup hooks (class names the page stylesheet targets)
    toolbar_class: str = "export-container"
    export_class: str = "csv-export"
    print_class: str = "print-button"

    # user-facing labels
    export_label: str = "CSVエクスポート"
    print_label: str = "印刷"
    error_message: str = "エラーが発生しました。ページを更新してください。"

    def replace(self, **overrides) -> "ReportConfig":
        return _replace(self, **overrides)


DEFAULT_CONFIG = ReportConfig()
