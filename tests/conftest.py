"""Root test configuration: fixed conversion date and logger isolation"""

import logging
from datetime import date

import pytest


@pytest.fixture(name="today")
def today_fixture():
    return date(2026, 1, 15)


@pytest.fixture(name="frontmatter")
def frontmatter_fixture():
    """Exact header produced for the `today` fixture."""
    return "---\nconverted: true\ndate: 2026-01-15\n---\n\n"


@pytest.fixture(autouse=True)
def reset_txt2md_logger():
    """Drop handlers installed by CLI runs so later tests never log to a closed stream."""
    yield
    logger = logging.getLogger("txt2md")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
