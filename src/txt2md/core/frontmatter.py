"""Frontmatter prepender: fixed conversion metadata header"""

from datetime import date

import yaml


def build_frontmatter(today: date) -> str:
    """Return the YAML header block marking a document as converted on today."""
    fm = {"converted": True, "date": today}
    header = yaml.safe_dump(fm, default_flow_style=False, sort_keys=False)
    return f"---\n{header}---\n\n"


def prepend_frontmatter(body: str, today: date) -> str:
    return build_frontmatter(today) + body
