"""Line classifier: ranked heuristic rules, first match wins"""

import re
from typing import Callable, Optional

from txt2md.core.models import ClassifiedLine, Line, LineTag


HEADING_MAX_LENGTH = 100

NUMBERED_RE = re.compile(r'^(\d+)\.\s+(.+)$')
BULLET_RE = re.compile(r'^[-*+]\s+(.+)$')
CAPITALIZED_RE = re.compile(r'^[A-Z]')

_LIST_PREFIXES = tuple(f"{n}. " for n in range(1, 10)) + ("* ", "- ", "+ ")

Rule = Callable[[Line, bool], Optional[ClassifiedLine]]


def is_indented(raw: str) -> bool:
    """True when a raw line opens or continues an indented code block."""
    return raw.startswith("    ") or raw.startswith("\t")


def dedent(raw: str) -> str:
    """Strip one leading tab or exactly four leading spaces."""
    if raw.startswith("\t"):
        return raw[1:]
    return raw[4:] if raw.startswith("    ") else raw


def _heading(line: Line, level: int) -> ClassifiedLine:
    return ClassifiedLine(LineTag.heading, line, text=line.trimmed, level=level)


def first_line_heading(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    if line.index == 0 and line.trimmed:
        return _heading(line, 1)
    return None


def blank(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    if not line.trimmed:
        return ClassifiedLine(LineTag.blank, line)
    return None


def code_start(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    if not collecting and is_indented(line.raw):
        return ClassifiedLine(LineTag.code_start, line, text=dedent(line.raw))
    return None


def code_continuation(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    if collecting and is_indented(line.raw):
        return ClassifiedLine(LineTag.code_continuation, line, text=dedent(line.raw))
    return None


def code_close(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    if collecting:
        return ClassifiedLine(LineTag.code_close, line)
    return None


def numbered_item(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    m = NUMBERED_RE.match(line.trimmed)
    if m:
        return ClassifiedLine(LineTag.numbered_item, line, text=m.group(2), number=m.group(1))
    return None


def bullet_item(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    m = BULLET_RE.match(line.trimmed)
    if m:
        return ClassifiedLine(LineTag.bullet_item, line, text=m.group(1))
    return None


def shout_case_heading(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    text = line.trimmed
    if text == text.upper() and len(text) < HEADING_MAX_LENGTH and " " not in text:
        return _heading(line, 2)
    return None


def colon_heading(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    text = line.trimmed
    if text.endswith(":") and len(text) < HEADING_MAX_LENGTH:
        return _heading(line, 2)
    return None


def capitalized_heading(line: Line, collecting: bool) -> Optional[ClassifiedLine]:
    """Short capitalized line without a period. Loose: plain short sentences match too."""
    text = line.trimmed
    if (
        len(text) < HEADING_MAX_LENGTH
        and CAPITALIZED_RE.match(text)
        and "." not in text
        and not text.startswith(_LIST_PREFIXES)
    ):
        return _heading(line, 2)
    return None


def paragraph(line: Line, collecting: bool) -> ClassifiedLine:
    return ClassifiedLine(LineTag.paragraph, line, text=line.trimmed)


# Precedence is the tuple order.
RANKED_RULES: tuple[tuple[str, Rule], ...] = (
    ("first_line_heading", first_line_heading),
    ("blank",              blank),
    ("code_start",         code_start),
    ("code_continuation",  code_continuation),
    ("code_close",         code_close),
    ("numbered_item",      numbered_item),
    ("bullet_item",        bullet_item),
    ("shout_case_heading", shout_case_heading),
    ("colon_heading",      colon_heading),
    ("capitalized_heading", capitalized_heading),
    ("paragraph",          paragraph),
)


def classify(line: Line, collecting: bool = False) -> ClassifiedLine:
    """Return the first rule match for line given the accumulator state. Never fails."""
    for _, rule in RANKED_RULES:
        result = rule(line, collecting)
        if result is not None:
            return result
    return paragraph(line, collecting)
