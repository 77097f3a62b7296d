"""
Unit tests for CSV serialization, export payloads and filenames.
"""

import csv
import io
from datetime import date, datetime, timedelta, timezone

import pytest

from odreport.exceptions import DownloadError
from odreport.model.table import Table
from odreport.table.export import (
    BOM,
    CSV_MIME_TYPE,
    DirectoryDownload,
    export_table_to_csv,
    report_filename,
    table_to_csv,
)
from odreport.table.sorter import sort_table


class TestTableToCsv:
    """CSV text produced from a table."""

    def test_header_and_rows_quoted(self, usage_table):
        """Test that every field is quoted and lines are newline-joined."""
        assert table_to_csv(usage_table) == (
            '"user","used_gb"\n'
            '"yamada","10"\n'
            '"sato","2"\n'
            '"suzuki","30"'
        )

    def test_inner_quotes_doubled(self):
        """Test RFC 4180 escaping of quotes and commas."""
        table = Table.from_records(["comment"], [['He said "hi", ok']])
        text = table_to_csv(table)

        assert text.splitlines()[1] == '"He said ""hi"", ok"'

        parsed = list(csv.reader(io.StringIO(text)))
        assert parsed[1] == ['He said "hi", ok']

    def test_reflects_current_order(self, usage_table):
        """Test that export reads rows in their sorted order."""
        sort_table(usage_table, 1)
        lines = table_to_csv(usage_table).split("\n")
        assert lines[1:] == ['"sato","2"', '"yamada","10"', '"suzuki","30"']

    def test_cell_text_not_trimmed(self):
        """Test that whitespace inside cells is exported as-is."""
        table = Table.from_records(["v"], [[" padded "]])
        assert table_to_csv(table).split("\n")[1] == '" padded "'

    def test_short_row_exports_its_cells(self):
        """Test that a short row exports only the cells it has."""
        table = Table.from_records(["a", "b"], [["1"]])
        assert table_to_csv(table).split("\n")[1] == '"1"'


class TestExportTableToCsv:
    """Download payloads."""

    def test_payload_has_bom_and_mime(self, usage_table, download):
        """Test that the payload is UTF-8 with a BOM and the CSV MIME type."""
        export_table_to_csv(usage_table, "out.csv", download=download)

        assert len(download.calls) == 1
        filename, payload, mime = download.calls[0]
        assert filename == "out.csv"
        assert mime == CSV_MIME_TYPE == "text/csv;charset=utf-8;"
        assert payload.startswith(b"\xef\xbb\xbf")
        assert payload.decode("utf-8") == BOM + table_to_csv(usage_table)

    def test_japanese_text_survives(self, download):
        """Test that non-Latin text decodes back intact."""
        table = Table.from_records(["名前"], [["山田"]])
        export_table_to_csv(table, "ja.csv", download=download)

        text = download.calls[0][1].decode("utf-8-sig")
        assert list(csv.reader(io.StringIO(text))) == [["名前"], ["山田"]]

    def test_export_does_not_mutate(self, usage_table, download):
        """Test that exporting leaves row order alone."""
        before = list(usage_table.body)
        export_table_to_csv(usage_table, "out.csv", download=download)
        assert usage_table.body == before

    def test_directory_download_writes_file(self, usage_table, tmp_path):
        """Test that the default sink saves under its directory."""
        sink = DirectoryDownload(tmp_path / "downloads")
        export_table_to_csv(usage_table, "report.csv", download=sink)

        saved = tmp_path / "downloads" / "report.csv"
        assert sink.last_path == saved.resolve()
        assert saved.read_bytes().startswith(b"\xef\xbb\xbf")

    def test_directory_download_strips_path(self, usage_table, tmp_path):
        """Test that path components in the filename are dropped."""
        sink = DirectoryDownload(tmp_path)
        export_table_to_csv(usage_table, "../escape.csv", download=sink)
        assert (tmp_path / "escape.csv").exists()

    def test_directory_download_failure(self, usage_table, tmp_path):
        """Test that an unusable target raises DownloadError."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")

        with pytest.raises(DownloadError) as exc_info:
            export_table_to_csv(usage_table, "out.csv", download=DirectoryDownload(blocker))

        assert exc_info.value.details["filename"] == "out.csv"


class TestReportFilename:
    """Dated export filenames."""

    def test_fixed_date(self):
        """Test the filename for 2024-03-05."""
        assert report_filename(date(2024, 3, 5)) == "onedrive_report_20240305.csv"

    def test_aware_datetime_uses_utc(self):
        """Test that aware datetimes are converted to UTC first."""
        jst = timezone(timedelta(hours=9))
        assert report_filename(datetime(2024, 3, 5, 8, 0, tzinfo=jst)) == "onedrive_report_20240304.csv"

    def test_naive_datetime_used_as_given(self):
        """Test that naive datetimes are not shifted."""
        assert report_filename(datetime(2024, 3, 5, 23, 59)) == "onedrive_report_20240305.csv"

    def test_prefix(self):
        """Test a custom prefix."""
        assert report_filename(date(2024, 12, 31), prefix="usage") == "usage_20241231.csv"

    def test_default_is_today(self):
        """Test that the default date is today's UTC date."""
        today = datetime.now(timezone.utc)
        name = report_filename()
        assert name in {
            f"onedrive_report_{today:%Y%m%d}.csv",
            f"onedrive_report_{today + timedelta(days=1):%Y%m%d}.csv",
        }
