"""Helpers for note file names."""

MARKDOWN_EXTENSION = ".md"


def append_markdown_extension(value: str) -> str:
    """Return value with the markdown file extension appended."""
    return f"{value}{MARKDOWN_EXTENSION}"
