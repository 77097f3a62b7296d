# odreport/io/fs.py

from __future__ import annotations

import tempfile
from pathlib import Path


def write_download(directory: Path, filename: str, payload: bytes) -> Path:
    """
    Drop a download payload into directory under its suggested filename.
    Path components in filename are ignored, like a browser download would.
    """
    directory = directory.resolve()
    directory.mkdir(parents=True, exist_ok=True)

    out_path = directory / Path(filename).name
    out_path.write_bytes(payload)
    return out_path


def write_temp_document(html_doc: str, *, prefix: str = "odreport-print-") -> Path:
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", suffix=".html", prefix=prefix, delete=False
    ) as f:
        f.write(html_doc)
        return Path(f.name)
