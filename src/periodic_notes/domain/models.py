"""Data models for periodic notes."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


class PeriodType(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Period:
    """One periodic note instance, identified by the start of its period."""

    date: datetime
    type: PeriodType = PeriodType.DAILY

    @classmethod
    def containing(
        cls, moment: date | datetime, period_type: PeriodType = PeriodType.DAILY
    ) -> "Period":
        """Return the period of the given type that holds moment."""
        day = moment.date() if isinstance(moment, datetime) else moment

        if period_type == PeriodType.WEEKLY:
            day = day - timedelta(days=day.weekday())
        elif period_type == PeriodType.MONTHLY:
            day = day.replace(day=1)
        elif period_type == PeriodType.QUARTERLY:
            day = day.replace(month=(day.month - 1) // 3 * 3 + 1, day=1)
        elif period_type == PeriodType.YEARLY:
            day = day.replace(month=1, day=1)

        return cls(date=datetime(day.year, day.month, day.day), type=period_type)

    def next(self) -> "Period":
        """Return the period that directly follows this one."""
        start = Period.containing(self.date, self.type).date

        if self.type == PeriodType.DAILY:
            return Period(start + timedelta(days=1), self.type)
        if self.type == PeriodType.WEEKLY:
            return Period(start + timedelta(weeks=1), self.type)
        if self.type == PeriodType.YEARLY:
            return Period(start.replace(year=start.year + 1), self.type)

        months = 1 if self.type == PeriodType.MONTHLY else 3
        index = start.month - 1 + months
        return Period(
            start.replace(year=start.year + index // 12, month=index % 12 + 1),
            self.type,
        )
