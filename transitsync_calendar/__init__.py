"""
TransitSync Calendar

This module models transit service calendars: a date range plus the weekdays a
service runs on, with algebra to add or remove single service dates while
keeping the number of records small.

Example:
    import datetime
    from transitsync_calendar import WeeklyCalendar, WeekdayMask, algebra

    calendar = WeeklyCalendar(
        "WEEKDAY",
        datetime.date(2024, 1, 1),
        datetime.date(2024, 1, 14),
        WeekdayMask.from_names("mon,wed,fri"),
    )
    # Drop the service on Wednesday 3 January
    pieces = algebra.subtract(calendar, datetime.date(2024, 1, 3))
    running = algebra.get_services_for_date(pieces, datetime.date(2024, 1, 10))
"""

from . import algebra
from .calendar import WeeklyCalendar
from .calendar_date import CalendarDate, ExceptionType
from .exceptions import CalendarContractError, CalendarError
from .weekday import DayOfWeek, WeekdayMask, first_day_of_week, last_day_of_week

__all__ = [
    'algebra',
    'WeeklyCalendar',
    'CalendarDate',
    'ExceptionType',
    'CalendarError',
    'CalendarContractError',
    'DayOfWeek',
    'WeekdayMask',
    'first_day_of_week',
    'last_day_of_week',
]
