"""Build note paths for periodic notes."""

import logging
import re
from typing import Optional

from ..domain.errors import InvalidStateError
from ..domain.models import Period
from ..extensions import append_markdown_extension
from ..parsing.base import DateParser, DateParserFactory
from .base import NameBuilder

logger = logging.getLogger(__name__)


class PeriodNameBuilder(NameBuilder[Period]):
    """Assemble ``<folder>/<name>.md`` for a period.

    The name template is always rendered by the date parser. The folder is
    only rendered when it contains a date token as a standalone word outside
    quoted text; any other folder is a literal name and is used verbatim, so
    text such as ``Steve's Brain`` never reaches the parser's quote handling.
    """

    # Quoted text, up to the closing quote or the end; '' is an escaped quote
    QUOTED_TEXT = re.compile(r"'(?:''|[^'])*(?:'|$)")
    DATE_TOKEN_PATTERN = re.compile(
        r"(?<!\w)"
        r"(?:yyyy|yy|MM|M|dd|d|HH|H|mm|m|ss|s|ww|w|qqq|q|EEEE|EEE|eeee|eee)"
        r"(?!\w)",
        re.ASCII,
    )

    def __init__(self, date_parser_factory: DateParserFactory):
        self.date_parser: DateParser = date_parser_factory.get_parser()

        self._period: Optional[Period] = None
        self._path_template: Optional[str] = None
        self._name_template: Optional[str] = None

    def with_path(self, template: str) -> "PeriodNameBuilder":
        self._path_template = template
        return self

    def with_name(self, template: str) -> "PeriodNameBuilder":
        self._name_template = template
        return self

    def with_value(self, value: Period) -> "PeriodNameBuilder":
        self._period = value
        return self

    def build(self) -> str:
        if self._period is None:
            raise InvalidStateError("Could not create the note name: Period is required!")
        if not self._name_template:
            raise InvalidStateError(
                "Could not create the note name: Name template is required!"
            )

        path = self._resolve_path(self._period, self._path_template or "")
        name = append_markdown_extension(
            self.date_parser.from_date(self._period.date, self._name_template)
        )

        if len(path) == 0:
            return name

        return "/".join([path, name])

    def _resolve_path(self, period: Period, template: str) -> str:
        if not self.contains_date_tokens(template):
            logger.debug(f"Using literal folder {template!r}")
            return template

        logger.debug(f"Formatting folder template {template!r}")
        return self.date_parser.from_date(period.date, template)

    @classmethod
    def contains_date_tokens(cls, template: str) -> bool:
        """Check whether template holds a date token as a standalone word."""
        if not template:
            return False
        unquoted = cls.QUOTED_TEXT.sub(" ", template)
        return cls.DATE_TOKEN_PATTERN.search(unquoted) is not None
