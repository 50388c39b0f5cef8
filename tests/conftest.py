"""
Pytest configuration and shared fixtures for the periodic notes test suite.

This module provides:
- A mock date parser and the factory handing it out
- A period for 2023-10-02
- Temporary config files
"""

from datetime import datetime
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from periodic_notes.domain.models import Period, PeriodType
from periodic_notes.parsing.base import DateParser, DateParserFactory


@pytest.fixture
def period() -> Period:
    """Daily period for Monday 2023-10-02."""
    return Period(date=datetime(2023, 10, 2), type=PeriodType.DAILY)


@pytest.fixture
def date_parser() -> MagicMock:
    """Mock parser; tests program from_date per template."""
    return MagicMock(spec=DateParser)


@pytest.fixture
def date_parser_factory(date_parser: MagicMock) -> MagicMock:
    factory = MagicMock(spec=DateParserFactory)
    factory.get_parser.return_value = date_parser
    return factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to a config file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    return _write
