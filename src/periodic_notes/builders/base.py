"""Abstract base class for note name builders."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class NameBuilder(ABC, Generic[T]):
    """Fluent builder producing a note path from templates and a value."""

    @abstractmethod
    def with_path(self, template: str) -> "NameBuilder[T]":
        """Set the folder path template."""
        pass

    @abstractmethod
    def with_name(self, template: str) -> "NameBuilder[T]":
        """Set the note name template."""
        pass

    @abstractmethod
    def with_value(self, value: T) -> "NameBuilder[T]":
        """Set the value the templates are rendered for."""
        pass

    @abstractmethod
    def build(self) -> str:
        """Return the note path."""
        pass
