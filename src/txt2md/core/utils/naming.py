"""Output filename generation for converted documents"""

import re


SOURCE_SUFFIX_RE = re.compile(r'\.(txt|docx?|rtf)$', re.IGNORECASE)


def markdown_name(filename: str) -> str:
    """Replace a known source extension with .md (`notes.TXT` -> `notes.md`)."""
    return f"{SOURCE_SUFFIX_RE.sub('', filename)}.md"
