import datetime
from enum import IntEnum

import pytz

from .exceptions import CalendarContractError


class DayOfWeek(IntEnum):
    """Day of the week, numbered from Sunday = 0 as in the packed mask."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# Monday-first order, used for display and iteration.
WEEK_ORDER = (
    DayOfWeek.MONDAY,
    DayOfWeek.TUESDAY,
    DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY,
    DayOfWeek.FRIDAY,
    DayOfWeek.SATURDAY,
    DayOfWeek.SUNDAY,
)

_DAY_ALIASES = {
    "weekdays": WEEK_ORDER[:5],
    "weekend": WEEK_ORDER[5:],
    "all": WEEK_ORDER,
}


def as_day_of_week(value) -> DayOfWeek:
    """Coerce an int or DayOfWeek into a DayOfWeek, rejecting anything outside 0..6."""
    if isinstance(value, bool):
        raise CalendarContractError(f"Day is not a valid day of the week: {value!r}")
    try:
        return DayOfWeek(value)
    except (ValueError, TypeError):
        raise CalendarContractError(f"Day is not a valid day of the week: {value!r}") from None


def day_of_week(day: datetime.date) -> DayOfWeek:
    """Return the DayOfWeek of a date."""
    return DayOfWeek((day.weekday() + 1) % 7)


def to_service_date(value, tz=None) -> datetime.date:
    """
    Reduce a date or datetime to the service date it falls on.

    Datetimes keep their own calendar date and lose the time-of-day. When
    `tz` is given (a zone name or a tzinfo), an aware datetime is converted to
    that zone first, so a UTC timestamp can be read as the agency's local day.
    """
    if isinstance(value, datetime.datetime):
        if tz is not None and value.tzinfo is not None:
            zone = pytz.timezone(tz) if isinstance(tz, str) else tz
            value = value.astimezone(zone)
        return value.date()
    if isinstance(value, datetime.date):
        return value
    raise CalendarContractError(f"Expected a date or datetime, got {type(value).__name__}")


def first_day_of_week(day) -> datetime.date:
    """Monday of the week containing `day`. Weeks run Monday to Sunday."""
    day = to_service_date(day)
    return day - datetime.timedelta(days=day.weekday())


def last_day_of_week(day) -> datetime.date:
    """Sunday of the week containing `day`. Weeks run Monday to Sunday."""
    day = to_service_date(day)
    return day + datetime.timedelta(days=6 - day.weekday())


def day_property(day):
    def getter(self):
        return self[day]

    def setter(self, value):
        self[day] = value

    return property(getter, setter, doc=f"True if the service runs on {day.name.title()}.")


class WeekdayMask:
    """
    Seven weekday flags packed into the low bits of a byte.

    Bit n holds DayOfWeek(n), so Sunday is bit 0 and Saturday bit 6. Flags can
    be read by name (mask.monday), by DayOfWeek (mask[DayOfWeek.MONDAY]) or as
    the packed integer (int(mask)).
    """

    FULL = 0x7F

    def __init__(self, value=0):
        value = int(value)
        if value < 0 or value > self.FULL:
            raise CalendarContractError(f"Weekday mask must fit in 7 bits; got {value}")
        self._value = value

    @classmethod
    def from_days(cls, days):
        mask = cls()
        for day in days:
            mask[day] = True
        return mask

    @classmethod
    def from_names(cls, text: str):
        """
        Build a mask from a comma separated list of day names, e.g. "mon,wed,fri".
        Full names, three letter abbreviations and the aliases "weekdays",
        "weekend" and "all" are accepted.
        """
        days = []
        for token in text.split(","):
            token = token.strip().lower()
            if not token:
                continue
            if token in _DAY_ALIASES:
                days.extend(_DAY_ALIASES[token])
                continue
            match = [d for d in DayOfWeek if d.name.lower() == token or d.name[:3].lower() == token]
            if not match:
                raise CalendarContractError(f"Unknown day name: {token!r}")
            days.append(match[0])
        return cls.from_days(days)

    def __getitem__(self, day) -> bool:
        return bool(self._value & (1 << as_day_of_week(day)))

    def __setitem__(self, day, active):
        bit = 1 << as_day_of_week(day)
        if active:
            self._value |= bit
        else:
            self._value &= ~bit

    monday = day_property(DayOfWeek.MONDAY)
    tuesday = day_property(DayOfWeek.TUESDAY)
    wednesday = day_property(DayOfWeek.WEDNESDAY)
    thursday = day_property(DayOfWeek.THURSDAY)
    friday = day_property(DayOfWeek.FRIDAY)
    saturday = day_property(DayOfWeek.SATURDAY)
    sunday = day_property(DayOfWeek.SUNDAY)

    def days(self):
        """Active days, Monday first."""
        return [day for day in WEEK_ORDER if self[day]]

    def copy(self):
        return WeekdayMask(self._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    def __eq__(self, other):
        if isinstance(other, WeekdayMask):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    # Mutable, so not hashable.
    __hash__ = None

    def __str__(self):
        return "".join(day.name[:2].title() if self[day] else "--" for day in WEEK_ORDER)

    def __repr__(self):
        names = ", ".join(day.name[:3].lower() for day in self.days())
        return f"WeekdayMask({names})"
