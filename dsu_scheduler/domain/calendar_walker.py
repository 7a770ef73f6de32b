# dsu_scheduler/domain/calendar_walker.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from dsu_scheduler.domain.models import CalendarDay
from dsu_scheduler.domain.errors import InvalidDateFormatError

WEEKEND_PREFIXES = ("sat", "sun")


@dataclass(frozen=True)
class CalendarWalker:
    """開始日から連続する暦日を列挙する"""
    date_format: str = "%m/%d/%Y"
    display_format: str = "%A, %m/%d/%Y"

    def parse(self, text: str) -> date:
        try:
            return datetime.strptime(text.strip(), self.date_format).date()
        except (ValueError, AttributeError) as e:
            raise InvalidDateFormatError(
                f"Date '{text}' does not match the expected format '{self.date_format}'."
            ) from e

    def format(self, d: date) -> str:
        return d.strftime(self.date_format)

    def day(self, d: date) -> CalendarDay:
        weekday_name = d.strftime("%A")
        return CalendarDay(
            day=d,
            weekday_name=weekday_name,
            is_weekend=weekday_name[:3].lower() in WEEKEND_PREFIXES,
            formatted=self.format(d),
            display=d.strftime(self.display_format),
        )

    def walk(self, start: Union[date, str], day_count: int) -> Iterator[CalendarDay]:
        # 文字列なら先に検証する（ジェネレータ開始前に例外を出す）
        start_day = self.parse(start) if isinstance(start, str) else start
        return (self.day(start_day + timedelta(days=i)) for i in range(max(day_count, 0)))

    @staticmethod
    def is_friday(cd: CalendarDay) -> bool:
        return cd.weekday_name[:3].lower() == "fri"
