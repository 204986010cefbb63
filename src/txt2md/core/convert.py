"""Plain text to Markdown conversion entry points.

Both functions are pure: no I/O and no state shared between calls, so
documents can be converted concurrently.
"""

from datetime import date
from typing import Optional, Sequence

from txt2md.core.emit import collapse_blank_runs, render_body
from txt2md.core.frontmatter import prepend_frontmatter
from txt2md.logging import get_logger


log = get_logger("convert")


def split_lines(text: str) -> list[str]:
    """Split on newlines; a trailing newline yields a final empty line. A leading BOM is dropped."""
    return text.removeprefix("\ufeff").replace("\r\n", "\n").split("\n")


def convert(lines: Sequence[str], today: Optional[date] = None) -> str:
    """Convert an ordered sequence of plain-text lines into a Markdown document."""
    today = today or date.today()
    log.debug("converting %d line(s)", len(lines))
    body = render_body(lines)
    return collapse_blank_runs(prepend_frontmatter(body, today))


def convert_text(text: str, today: Optional[date] = None) -> str:
    """Convert a plain-text document string into a Markdown document."""
    return convert(split_lines(text), today)
