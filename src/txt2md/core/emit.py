"""Structural emitter: renders classified lines and code blocks as Markdown"""

import re
from typing import Iterable, Iterator, Sequence

from txt2md.core.classify import classify
from txt2md.core.codeblock import CodeBlockAccumulator
from txt2md.core.models import ClassifiedLine, Line, LineTag
from txt2md.logging import get_logger


log = get_logger("emit")

FENCE = "```"
BLANK_RUN_RE = re.compile(r'\n{3,}')


def iter_lines(lines: Sequence[str]) -> Iterator[Line]:
    """Wrap raw strings as Line objects carrying index and last-line flag."""
    last = len(lines) - 1
    for i, raw in enumerate(lines):
        yield Line(index=i, raw=raw, is_last=i == last)


def collapse_blank_runs(text: str) -> str:
    """Collapse any run of three or more newlines to exactly two."""
    return BLANK_RUN_RE.sub("\n\n", text)


def render_code_block(lines: Iterable[str], closing_blank: bool = True) -> str:
    """Fence lines in triple backticks; closing_blank adds a separating blank line."""
    block = f"{FENCE}\n" + "\n".join(lines) + f"\n{FENCE}\n"
    return block + "\n" if closing_blank else block


def render_line(classified: ClassifiedLine) -> str:
    """Render one non-code ClassifiedLine."""
    tag = classified.tag
    if tag is LineTag.heading:
        return "#" * (classified.level or 2) + f" {classified.text}\n\n"
    if tag is LineTag.numbered_item:
        return f"{classified.number}. {classified.text}\n"
    if tag is LineTag.bullet_item:
        return f"* {classified.text}\n"
    if tag is LineTag.blank:
        return "" if classified.line.is_last else "\n"
    if tag is LineTag.paragraph:
        return f"{classified.text}\n"
    raise ValueError(f"{tag.value} lines are buffered, not rendered directly")


def render_body(lines: Sequence[str]) -> str:
    """Single forward pass over lines producing the Markdown body."""
    parts: list[str] = []
    block = CodeBlockAccumulator()

    for line in iter_lines(lines):
        classified = classify(line, block.collecting)
        while classified.tag is LineTag.code_close:
            flushed = block.flush()
            log.debug("closed code block of %d line(s) at line %d", len(flushed), line.index)
            parts.append(render_code_block(flushed))
            classified = classify(line, block.collecting)

        if classified.tag is LineTag.code_start:
            block.open(classified.text)
        elif classified.tag is LineTag.code_continuation:
            block.append(classified.text)
        elif classified.tag is LineTag.blank and block.collecting:
            block.append("")
        else:
            parts.append(render_line(classified))

    if block.collecting:
        parts.append(render_code_block(block.flush(), closing_blank=False))

    return collapse_blank_runs("".join(parts))
