"""Source readers: plain text files and Word documents"""

from pathlib import Path

import mammoth
from markdownify import ATX, markdownify

from txt2md.config import Settings
from txt2md.logging import get_logger


log = get_logger("extract")

TEXT_EXTENSIONS = {'.txt'}
WORD_EXTENSIONS = {'.doc', '.docx'}
SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS | WORD_EXTENSIONS
BOM = '\ufeff'


def is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def is_word_document(path: Path) -> bool:
    return path.suffix.lower() in WORD_EXTENSIONS


def discover_files(path: Path) -> list[Path]:
    """Return sorted supported files under path, or [path] if a single supported file."""
    if path.is_file():
        return [path] if is_supported(path) else []
    return sorted(p for p in path.rglob('*') if p.is_file() and is_supported(p))


def read_text_file(path: Path, encoding: str = 'utf-8') -> str:
    """Read a plain-text source; undecodable bytes are replaced, not fatal. A leading BOM is dropped."""
    return path.read_text(encoding=encoding, errors='replace').removeprefix(BOM)


def _log_messages(path: Path, messages: list) -> None:
    for m in messages:
        log.warning("%s: %s", path.name, m.message)


def extract_word_text(path: Path) -> str:
    """Extract the raw paragraph text of a Word document."""
    with path.open('rb') as f:
        result = mammoth.extract_raw_text(f)
    _log_messages(path, result.messages)
    return result.value


def extract_word_html(path: Path) -> str:
    """Render a Word document to HTML, keeping its own heading and list markup."""
    with path.open('rb') as f:
        result = mammoth.convert_to_html(f)
    _log_messages(path, result.messages)
    return result.value


def html_to_markdown(html: str) -> str:
    """Convert pre-rendered HTML to Markdown with ATX headings and `*` bullets."""
    return markdownify(html, heading_style=ATX, bullets='*').strip() + "\n"


def read_source(path: Path, settings: Settings) -> str:
    """Return the plain text of a supported source file for the heuristic converter."""
    suffix = path.suffix.lower()
    if suffix in TEXT_EXTENSIONS:
        return read_text_file(path, settings.encoding)
    if suffix in WORD_EXTENSIONS:
        return extract_word_text(path)
    raise ValueError(f"Unsupported file type: {path.suffix or path.name}")
