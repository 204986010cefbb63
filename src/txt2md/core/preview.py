"""HTML preview rendering of converted Markdown"""

import re

from markdown_it import MarkdownIt


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def strip_frontmatter(markdown: str) -> str:
    m = FRONTMATTER_RE.match(markdown)
    return markdown[m.end():] if m else markdown


def render_html(markdown: str, preset: str = 'gfm-like') -> str:
    """Render the Markdown body (frontmatter excluded) to an HTML fragment."""
    return _make_parser(preset).render(strip_frontmatter(markdown))
