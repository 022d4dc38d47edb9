class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class CalendarContractError(CalendarError, ValueError):
    """
    Raised when a calendar operation is called with arguments that break its
    preconditions (a day outside the record's range, a non-Monday week start,
    an invalid weekday). These are caller errors and are never corrected.
    """
