"""Batch driver: discover, convert, and write or package documents"""

from datetime import date
from pathlib import Path
from typing import Optional

from txt2md.config import Settings
from txt2md.core.archive import collect_entries, write_archive
from txt2md.core.convert import convert_text
from txt2md.core.extract import discover_files, extract_word_html, html_to_markdown, is_word_document, read_source
from txt2md.core.models import ConversionFailure, ConvertedDoc
from txt2md.core.utils.naming import markdown_name
from txt2md.logging import get_logger


log = get_logger("pipeline")


def convert_file(path: Path, settings: Settings, today: Optional[date] = None) -> ConvertedDoc:
    """Convert a single source file. Raises RuntimeError naming the file on failure."""
    try:
        if settings.docx_mode == 'html' and is_word_document(path):
            markdown = html_to_markdown(extract_word_html(path))
        else:
            markdown = convert_text(read_source(path, settings), today)
    except Exception as e:
        raise RuntimeError(f"Failed to convert {path}: {e}") from e
    log.info("converted %s", path)
    return ConvertedDoc(source=path, output_name=markdown_name(path.name), markdown=markdown)


def _relative_dir(path: Path, root: Path) -> str:
    """Posix folder of path below root; empty for files directly under root."""
    rel = path.parent.relative_to(root).as_posix()
    return "" if rel == "." else rel


def run_convert(
    path: str,
    settings: Settings,
    today: Optional[date] = None,
    ) -> tuple[list[ConvertedDoc], list[ConversionFailure]]:
    """Convert every supported file under path; one file failing does not stop the rest.

    Returns (converted, failures) in discovery order.
    """
    root = Path(path)
    converted: list[ConvertedDoc] = []
    failures: list[ConversionFailure] = []
    for p in discover_files(root):
        try:
            doc = convert_file(p, settings, today)
            if root.is_dir():
                doc.relative_dir = _relative_dir(p, root)
            converted.append(doc)
        except RuntimeError as e:
            log.warning("%s", e)
            failures.append(ConversionFailure(source=p, error=str(e.__cause__ or e)))
    return converted, failures


def write_outputs(docs: list[ConvertedDoc], output_dir: Path) -> list[tuple[Path, Path]]:
    """Write each doc to output_dir, mirroring its source folder. Returns (source, written_path) pairs.

    Sources sharing an output path (`notes.txt` and `notes.docx`) keep the last one, with a warning.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    written: dict[Path, Path] = {}
    for doc in docs:
        out_file = output_dir / doc.relative_path
        if out_file in written:
            log.warning("%s: %s replaces the output of %s", out_file, doc.source, written[out_file])
        written[out_file] = doc.source
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(doc.markdown, encoding='utf-8')
        results.append((doc.source, out_file))
    return results


def run_archive(docs: list[ConvertedDoc], output_dir: Path, archive_name: str) -> Path:
    """Package docs into output_dir/archive_name and return the archive path."""
    return write_archive(collect_entries(docs), output_dir / archive_name)
