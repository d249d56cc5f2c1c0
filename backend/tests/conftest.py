"""Root conftest - shared test configuration."""

import os
from datetime import date

import pytest

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")

FIXED_TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY
