"""Abstract base classes for date parsers."""

from abc import ABC, abstractmethod
from datetime import datetime


class DateParser(ABC):
    """Render a date as text according to a format template."""

    @abstractmethod
    def from_date(self, value: datetime, template: str) -> str:
        """Format value using template."""
        pass


class DateParserFactory(ABC):
    """Provide the date parser used by the name builders."""

    @abstractmethod
    def get_parser(self) -> DateParser:
        """Return a date parser."""
        pass
