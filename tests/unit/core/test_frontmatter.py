"""Unit tests for core/frontmatter.py"""

from datetime import date

import yaml

from txt2md.core.frontmatter import build_frontmatter, prepend_frontmatter


def test_build_frontmatter_exact(today, frontmatter):
    assert build_frontmatter(today) == frontmatter


def test_frontmatter_is_valid_yaml(today):
    header = build_frontmatter(today)
    data = yaml.safe_load(header.strip().strip("-"))
    assert data == {"converted": True, "date": date(2026, 1, 15)}


def test_prepend_frontmatter(today, frontmatter):
    assert prepend_frontmatter("# Body\n\n", today) == frontmatter + "# Body\n\n"
