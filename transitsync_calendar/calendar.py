import datetime
import logging
from typing import Optional

from .exceptions import CalendarContractError
from .weekday import DayOfWeek, WeekdayMask, day_of_week, day_property, to_service_date


class WeeklyCalendar:
    """
    A service calendar record: an inclusive date range plus the weekdays the
    service runs on inside that range.

    start_date <= end_date is assumed by every operation but not checked.
    """

    def __init__(self, service_id, start_date, end_date, weekdays=0):
        self.service_id = service_id
        self.start_date = to_service_date(start_date)
        self.end_date = to_service_date(end_date)
        if isinstance(weekdays, WeekdayMask):
            weekdays = weekdays.copy()
        elif not isinstance(weekdays, int):
            weekdays = WeekdayMask.from_days(weekdays)
        else:
            weekdays = WeekdayMask(weekdays)
        self.weekdays = weekdays

    @classmethod
    def for_day(cls, day, service_id):
        """Create a record covering exactly one day."""
        day = to_service_date(day)
        calendar = cls(service_id, day, day)
        calendar[day_of_week(day)] = True
        return calendar

    @property
    def mask(self) -> int:
        """The packed weekday pattern, bit n = DayOfWeek(n)."""
        return int(self.weekdays)

    @mask.setter
    def mask(self, value):
        self.weekdays = WeekdayMask(value)

    def __getitem__(self, day) -> bool:
        return self.weekdays[day]

    def __setitem__(self, day, active):
        self.weekdays[day] = active

    monday = day_property(DayOfWeek.MONDAY)
    tuesday = day_property(DayOfWeek.TUESDAY)
    wednesday = day_property(DayOfWeek.WEDNESDAY)
    thursday = day_property(DayOfWeek.THURSDAY)
    friday = day_property(DayOfWeek.FRIDAY)
    saturday = day_property(DayOfWeek.SATURDAY)
    sunday = day_property(DayOfWeek.SUNDAY)

    @property
    def span_days(self) -> int:
        """Number of days between start and end date (0 for a single-day record)."""
        return (self.end_date - self.start_date).days

    def in_range(self, date) -> bool:
        date = to_service_date(date)
        return self.start_date <= date <= self.end_date

    def covers_date(self, date) -> bool:
        """True if the service runs on `date` according to this record."""
        date = to_service_date(date)
        if self.start_date <= date <= self.end_date:
            return self[day_of_week(date)]
        return False

    def get_status_for(self, date) -> Optional[bool]:
        """
        The weekday flag for `date` when it lies inside the range, None when it
        does not. None means this record has no say about the date, which is
        not the same as the service not running.
        """
        date = to_service_date(date)
        if self.start_date <= date <= self.end_date:
            return self[day_of_week(date)]
        return None

    def contains_day(self, day) -> bool:
        """Reads the weekday flag only, the date range is ignored."""
        return self[day]

    def set(self, day, value):
        """
        Set the flag for the weekday of `day`.

        Only allowed on records spanning a single week, since on a longer
        record the flag would also apply to other dates.
        """
        day = to_service_date(day)
        if self.span_days > 7:
            logging.warning(f"Refusing to set {day} on {self!r}: record spans multiple weeks")
            raise CalendarContractError(
                "Cannot set mask for a specific day if the calendar object spans multiple weeks."
            )
        if day < self.start_date or day > self.end_date:
            logging.warning(f"Refusing to set {day} on {self!r}: day outside range")
            raise CalendarContractError(
                "Cannot set mask for a specific day if the day is not within the calendar's range."
            )
        self[day_of_week(day)] = value

    def copy_week_pattern_from(self, other):
        self.weekdays = other.weekdays.copy()

    def clone(self):
        return WeeklyCalendar(self.service_id, self.start_date, self.end_date, self.weekdays)

    def dates(self):
        """Yield every covered date in order."""
        day = self.start_date
        while day <= self.end_date:
            if self[day_of_week(day)]:
                yield day
            day += datetime.timedelta(days=1)

    def __eq__(self, other):
        if not isinstance(other, WeeklyCalendar):
            return NotImplemented
        return (
            self.service_id == other.service_id
            and self.start_date == other.start_date
            and self.end_date == other.end_date
            and self.weekdays == other.weekdays
        )

    __hash__ = None

    def __str__(self):
        return f"{self.service_id} {self.start_date.isoformat()}..{self.end_date.isoformat()} {self.weekdays}"

    def __repr__(self):
        return (
            f"WeeklyCalendar({self.service_id!r}, {self.start_date.isoformat()}, "
            f"{self.end_date.isoformat()}, {self.weekdays!r})"
        )
