"""Archive packager: bundle converted Markdown documents into a zip file"""

import io
import zipfile
from pathlib import Path
from typing import Iterable, Mapping

from txt2md.core.models import ConvertedDoc
from txt2md.logging import get_logger


log = get_logger("archive")


def collect_entries(docs: Iterable[ConvertedDoc]) -> dict[str, str]:
    """Map archive path -> Markdown, mirroring source folders; a later doc with the same path wins."""
    entries: dict[str, str] = {}
    for doc in docs:
        if doc.relative_path in entries:
            log.warning("%s replaces an earlier entry of the same name (from %s)", doc.relative_path, doc.source)
        entries[doc.relative_path] = doc.markdown
    return entries


def build_archive(entries: Mapping[str, str]) -> bytes:
    """Return a deflated zip containing one UTF-8 file per entry."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        for name, markdown in entries.items():
            zf.writestr(name, markdown.encode('utf-8'))
    return buf.getvalue()


def write_archive(entries: Mapping[str, str], path: Path) -> Path:
    """Write build_archive(entries) to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_archive(entries))
    log.info("wrote %d document(s) to %s", len(entries), path)
    return path
