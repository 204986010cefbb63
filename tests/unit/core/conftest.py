"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest
from docx import Document

from txt2md.config import Settings


@pytest.fixture(name="settings")
def settings_fixture(tmp_path):
    return Settings(output_dir=str(tmp_path / "out"))


@pytest.fixture(name="make_docx")
def make_docx_fixture(tmp_path):
    """Build a .docx from (style, text) pairs; style None means a plain paragraph."""
    def _make(name: str, paragraphs: list[tuple]) -> Path:
        doc = Document()
        for style, text in paragraphs:
            if style and style.startswith("Heading"):
                doc.add_heading(text, level=int(style.split()[-1]))
            else:
                doc.add_paragraph(text)
        path = tmp_path / name
        doc.save(str(path))
        return path
    return _make
