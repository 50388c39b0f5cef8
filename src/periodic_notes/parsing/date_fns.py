"""Format dates with date-fns style templates."""

import re
from datetime import datetime

from .base import DateParser, DateParserFactory

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by datetime.weekday(), Monday first
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

QUARTER_ORDINALS = ("1st", "2nd", "3rd", "4th")


class DateFormatError(ValueError):
    """Raised when a template contains a letter the parser does not know."""


class DateFnsParser(DateParser):
    """Render dates using the date-fns token vocabulary.

    Runs of the same letter form a token (``yyyy``, ``MM``, ``EEEE``), text
    between single quotes is copied literally and ``''`` yields one quote.
    Names are always English so output does not depend on the process locale.
    """

    TOKEN = re.compile(
        r"(?P<run>([A-Za-z])\2*)"
        r"|(?P<quote>'')"
        r"|'(?P<literal>(?:''|[^'])*)(?:'|$)"
        r"|(?P<other>.)",
        re.DOTALL,
    )

    def from_date(self, value: datetime, template: str) -> str:
        parts = []
        for match in self.TOKEN.finditer(template):
            if match.group("run"):
                parts.append(self._format_token(value, match.group("run")))
            elif match.group("quote"):
                parts.append("'")
            elif match.group("other") is not None:
                parts.append(match.group("other"))
            else:
                parts.append(match.group("literal").replace("''", "'"))
        return "".join(parts)

    def _format_token(self, value: datetime, token: str) -> str:
        letter, length = token[0], len(token)

        if letter == "y":
            if length == 2:
                return f"{value.year % 100:02d}"
            return f"{value.year:0{length}d}"
        if letter == "M":
            if length <= 2:
                return f"{value.month:0{length}d}"
            return self._name(MONTHS[value.month - 1], length)
        if letter == "d":
            return f"{value.day:0{length}d}"
        if letter == "H":
            return f"{value.hour:0{length}d}"
        if letter == "m":
            return f"{value.minute:0{length}d}"
        if letter == "s":
            return f"{value.second:0{length}d}"
        if letter == "w":
            return f"{value.isocalendar()[1]:0{length}d}"
        if letter in ("q", "Q"):
            quarter = (value.month - 1) // 3 + 1
            if length <= 2:
                return f"{quarter:0{length}d}"
            if length == 3:
                return f"Q{quarter}"
            return f"{QUARTER_ORDINALS[quarter - 1]} quarter"
        if letter == "E":
            return self._name(WEEKDAYS[value.weekday()], max(length, 3))
        if letter == "e":
            if length <= 2:
                # Local day of week, the week starting on Sunday
                return f"{(value.weekday() + 1) % 7 + 1:0{length}d}"
            return self._name(WEEKDAYS[value.weekday()], length)

        raise DateFormatError(
            f"Format string contains an unescaped latin alphabet character `{letter}`"
        )

    def _name(self, name: str, length: int) -> str:
        """Pick the abbreviated, wide, narrow or short form of a name."""
        if length == 3:
            return name[:3]
        if length == 5:
            return name[:1]
        if length == 6:
            return name[:2]
        return name


class DateFnsParserFactory(DateParserFactory):
    """Factory handing out the date-fns compatible parser."""

    def get_parser(self) -> DateParser:
        return DateFnsParser()
