from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Optional

from ..exceptions import PrintViewError
from ..io.fs import write_temp_document
from ..model.table import Table
from ..report.html_assets import PRINT_CSS, PRINT_ON_LOAD_JS
from ..report.render import table_html

logger = logging.getLogger(__name__)

DocumentOpener = Callable[[str], None]


def render_print_document(table: Table) -> str:
    # markup snapshot; the table itself is left untouched
    snapshot = table_html(table)
    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8"/>
<style>{PRINT_CSS}</style>
</head>
<body>
{snapshot}
<script>{PRINT_ON_LOAD_JS}</script>
</body>
</html>
"""


def open_in_browser(html_doc: str) -> None:
    path = write_temp_document(html_doc)
    if not webbrowser.open_new_tab(path.as_uri()):
        raise PrintViewError("No browser available to open the print view", details={"path": str(path)})


def print_table(table: Table, *, opener: Optional[DocumentOpener] = None) -> None:
    """
    Hand a printable copy of the table to a new viewing context.

    Fire-and-forget: the document prints itself on load and nothing
    about the print dialog comes back here.
    """
    html_doc = render_print_document(table)
    (opener or open_in_browser)(html_doc)
    logger.info("opened print view for table %r (%d rows)", table.table_id, len(table.body))
