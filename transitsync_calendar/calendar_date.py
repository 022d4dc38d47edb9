from enum import IntEnum

from .weekday import to_service_date


class ExceptionType(IntEnum):
    """GTFS calendar_dates exception_type values."""
    ADDED = 1
    REMOVED = 2


class CalendarDate:
    """A single-date exception to a service's weekly pattern."""

    def __init__(self, service_id, date, exception_type):
        self.service_id = service_id
        self.date = to_service_date(date)
        self.exception_type = ExceptionType(exception_type)

    def __repr__(self):
        return f"CalendarDate({self.service_id!r}, {self.date.isoformat()}, {self.exception_type.name})"
