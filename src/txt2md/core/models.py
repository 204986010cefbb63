"""Data models for the line classification and conversion pipeline"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Optional

from pydantic import BaseModel


class LineTag(str, Enum):
    """Categories a single input line can be classified into"""
    heading = "heading"
    numbered_item = "numbered_item"
    bullet_item = "bullet_item"
    code_start = "code_start"
    code_continuation = "code_continuation"
    code_close = "code_close"     # signal only: flush the open block, then reclassify the same line
    blank = "blank"
    paragraph = "paragraph"


@dataclass(frozen=True)
class Line:
    """One input line with its position in the document."""
    index:   int
    raw:     str           # original text; used for indentation checks
    is_last: bool = False

    @property
    def trimmed(self) -> str:
        return self.raw.strip()


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying a Line; text holds the extracted payload."""
    tag:    LineTag
    line:   Line
    text:   str = ""
    level:  Optional[int] = None    # heading level (1 or 2)
    number: Optional[str] = None    # list marker digits, verbatim


class ConvertedDoc(BaseModel):
    """A successfully converted source document."""
    source:       Path
    output_name:  str
    markdown:     str
    relative_dir: str = ""     # source folder relative to the batch root, posix style

    @property
    def relative_path(self) -> str:
        """Output path relative to the output root, mirroring the source tree."""
        return str(PurePosixPath(self.relative_dir, self.output_name))


class ConversionFailure(BaseModel):
    """A source document that failed to convert, isolated from the rest of its batch."""
    source: Path
    error:  str
