"""
Calendar algebra over WeeklyCalendar records.

Adding or removing a single service date keeps the weekly pattern intact
everywhere except where the change applies: records are split at week
boundaries (Monday to Sunday) rather than expanded into one record per date.
Every function returning records returns a tuple in chronological order.
"""
import datetime
import logging
from typing import Iterable, List, Optional, Tuple

from .calendar import WeeklyCalendar
from .exceptions import CalendarContractError
from .weekday import (
    as_day_of_week,
    day_of_week,
    first_day_of_week,
    last_day_of_week,
    to_service_date,
)

Calendars = Tuple[WeeklyCalendar, ...]

ONE_DAY = datetime.timedelta(days=1)


def _piece(source: WeeklyCalendar, start_date, end_date) -> WeeklyCalendar:
    """A new record over [start_date, end_date] carrying source's id and full pattern."""
    piece = WeeklyCalendar(source.service_id, start_date, end_date)
    piece.copy_week_pattern_from(source)
    return piece


def _widen(calendar: WeeklyCalendar, day) -> Optional[WeeklyCalendar]:
    """
    Stretch a single-day record onto the day right before or after it, or
    return None if `day` is not next to it or the stretched range would pick
    up dates other than `day`.
    """
    if calendar.span_days != 0 or abs((day - calendar.start_date).days) != 1:
        return None

    start_date = min(calendar.start_date, day)
    end_date = max(calendar.end_date, day)

    widened = _piece(calendar, start_date, end_date)
    widened[day_of_week(day)] = True
    if set(widened.dates()) != set(calendar.dates()) | {day}:
        return None
    return widened


def add(calendar: WeeklyCalendar, day) -> Calendars:
    """
    Return records covering everything `calendar` covers plus `day`.

    A record spanning at most a week that already contains `day` in its range
    just gets the weekday switched on (in a copy); a single-day record right
    next to `day` is stretched to reach it when that adds no other dates. Anything
    else keeps the original and adds a separate single-day record, since
    widening a weekly pattern would add more dates than asked for.
    """
    day = to_service_date(day)
    if calendar.covers_date(day):
        return (calendar,)

    if calendar.span_days <= 7 and calendar.start_date <= day <= calendar.end_date:
        added = calendar.clone()
        added.set(day, True)
        logging.debug(f"Added {day} to {calendar.service_id} by switching on {day_of_week(day).name}")
        return (added,)

    widened = _widen(calendar, day)
    if widened is not None:
        logging.debug(f"Added {day} to {calendar.service_id} by widening its range to {widened.start_date}..{widened.end_date}")
        return (widened,)

    single = WeeklyCalendar.for_day(day, calendar.service_id)
    logging.debug(f"Added {day} to {calendar.service_id} as a separate single-day record")
    if day < calendar.start_date:
        return (single, calendar)
    return (calendar, single)


def subtract(calendar: WeeklyCalendar, day) -> Calendars:
    """
    Return records covering everything `calendar` covers except `day`.

    The week containing `day` is cut out as its own record with that weekday
    switched off; the parts before and after keep the original pattern. When
    the whole record lies inside that week it is modified in place instead.
    """
    day = to_service_date(day)
    if not calendar.covers_date(day):
        return (calendar,)

    weekday = day_of_week(day)
    week_start = first_day_of_week(day)
    week_end = last_day_of_week(day)

    if week_start <= calendar.start_date and week_end >= calendar.end_date:
        calendar[weekday] = False
        logging.debug(f"Removed {day} from {calendar.service_id} in place")
        return (calendar,)

    if week_start <= calendar.start_date:
        subtracted = _piece(calendar, calendar.start_date, week_end)
        subtracted[weekday] = False
        rest = _piece(calendar, week_end + ONE_DAY, calendar.end_date)
        pieces = (subtracted, rest)
    elif week_end >= calendar.end_date:
        rest = _piece(calendar, calendar.start_date, week_start - ONE_DAY)
        subtracted = _piece(calendar, week_start, calendar.end_date)
        subtracted[weekday] = False
        pieces = (rest, subtracted)
    else:
        before = _piece(calendar, calendar.start_date, week_start - ONE_DAY)
        subtracted = _piece(calendar, week_start, week_end)
        subtracted[weekday] = False
        after = _piece(calendar, week_end + ONE_DAY, calendar.end_date)
        pieces = (before, subtracted, after)

    logging.debug(f"Removed {day} from {calendar.service_id}, split into {len(pieces)} records")
    return pieces


def trim_start_date(calendar: WeeklyCalendar) -> None:
    """Move start_date forward onto the first active weekday."""
    if calendar.mask == 0:
        return
    while not calendar[day_of_week(calendar.start_date)]:
        calendar.start_date += ONE_DAY


def trim_end_date(calendar: WeeklyCalendar) -> None:
    """Move end_date back onto the last active weekday."""
    if calendar.mask == 0:
        return
    while not calendar[day_of_week(calendar.end_date)]:
        calendar.end_date -= ONE_DAY


def trim_dates(calendar: WeeklyCalendar) -> None:
    """Trim both ends of the range onto active weekdays."""
    trim_start_date(calendar)
    trim_end_date(calendar)


def mask_for_week(calendar: WeeklyCalendar, monday) -> int:
    """
    The packed weekday mask of `calendar` for the week starting at `monday`,
    with days falling outside the record's range switched off.
    """
    monday = to_service_date(monday)
    if monday.weekday() != 0:
        raise CalendarContractError(f"The given day is not a monday: {monday}")

    mask = 0
    for offset in range(7):
        day = monday + datetime.timedelta(days=offset)
        if calendar.start_date <= day <= calendar.end_date:
            mask |= calendar.mask & (1 << day_of_week(day))
    return mask


def try_merge(calendar: WeeklyCalendar, other: WeeklyCalendar) -> Optional[WeeklyCalendar]:
    """
    Merge two records of the same service into one if that can be done
    without changing the covered dates, returning None when it cannot.
    """
    raise NotImplementedError("Merging calendars is not implemented.")


def add_or_subtract(calendar: WeeklyCalendar, calendar_date) -> Calendars:
    """Apply a CalendarDate exception, adding or removing its date."""
    raise NotImplementedError("Applying calendar date exceptions is not implemented.")


def get_services_for_day_of_week(
    calendars: Iterable[WeeklyCalendar], day, date=None
) -> List[WeeklyCalendar]:
    """
    Records whose pattern includes the weekday `day`. When `date` is given,
    only records whose range contains it are kept.
    """
    day = as_day_of_week(day)
    if date is not None:
        date = to_service_date(date)
    return [
        calendar
        for calendar in calendars
        if calendar.contains_day(day) and (date is None or calendar.in_range(date))
    ]


def get_services_for_date(calendars: Iterable[WeeklyCalendar], date) -> List[WeeklyCalendar]:
    """Records under which the service runs on `date`."""
    date = to_service_date(date)
    return [calendar for calendar in calendars if calendar.covers_date(date)]
