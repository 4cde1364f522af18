"""Root conftest — shared test configuration and the sample corpus."""

import logging
import os

import pytest

from distress.config import get_settings

# Tests never pick up a developer's .env overrides for these
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "text")

SAMPLE_TEXT = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


@pytest.fixture
def sample_text() -> str:
    """The 8-pair sample corpus: part 1 = 13, part 2 = 140."""
    return SAMPLE_TEXT


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; clear around every test so env patches apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """CLI/API entry points install a root handler; drop it after each test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
