"""
Shared fixtures: sample tables and recording fakes for the side-effecting
collaborators (download target, print opener, charts, alert).
"""

from datetime import datetime, timezone

import pytest

from odreport.model.table import Table


class RecordingDownload:
    def __init__(self):
        self.calls = []

    def __call__(self, filename, payload, mime_type):
        self.calls.append((filename, payload, mime_type))


class RecordingOpener:
    def __init__(self):
        self.documents = []

    def __call__(self, html_doc):
        self.documents.append(html_doc)


class FakeChart:
    def __init__(self):
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture
def usage_table():
    return Table.from_records(
        ["user", "used_gb"],
        [["yamada", "10"], ["sato", "2"], ["suzuki", "30"]],
        table_id="usage",
    )


@pytest.fixture
def download():
    return RecordingDownload()


@pytest.fixture
def opener():
    return RecordingOpener()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
