#!/usr/bin/env python3
import argparse
import logging
import datetime
import sys
import os

# Add the parent directory to the path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from transitsync_calendar import algebra
from transitsync_calendar.calendar import WeeklyCalendar
from transitsync_calendar.config import Config
from transitsync_calendar.exceptions import CalendarError
from transitsync_calendar.weekday import WeekdayMask, WEEK_ORDER, to_service_date


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_date(date_str):
    """Parse a date string into a date object."""
    formats = [
        "%Y-%m-%d",
        "%Y%m%d",      # GTFS style
        "%d/%m/%Y",
    ]
    for fmt in formats:
        try:
            return datetime.datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    try:
        # Accept full ISO timestamps, read as a service date in the configured timezone
        return to_service_date(datetime.datetime.fromisoformat(date_str), tz=Config.TIMEZONE)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Could not parse date: {date_str}")


def print_calendars(calendars):
    for i, calendar in enumerate(calendars):
        print(f"  {i+1}. {calendar}")


def print_mask(mask):
    days = [day.name[:3].title() for day in WEEK_ORDER if mask & (1 << day)]
    print(f"📅 Mask {mask:#04x}: {', '.join(days) if days else 'no service'}")


def build_calendar(args):
    return WeeklyCalendar(
        args.service,
        args.start,
        args.end,
        WeekdayMask.from_names(args.days),
    )


def main():
    parser = argparse.ArgumentParser(
        description="TransitSync Calendar CLI - Inspect and edit weekly service calendars",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Does a Mon/Wed/Fri service run on 3 January?
  ./main_cli.py covers 2024-01-03 --start 2024-01-01 --end 2024-01-14 --days mon,wed,fri

  # Remove a date from a weekday service
  ./main_cli.py subtract 2024-01-03 --start 2024-01-01 --end 2024-01-14 --days weekdays

  # Show the mask for the week starting Monday 8 January
  ./main_cli.py mask 2024-01-08 --start 2024-01-01 --end 2024-01-10 --days all
        """
    )

    parser.add_argument('--debug', action='store_true', default=Config.DEBUG, help='Enable debug logging')

    calendar_args = argparse.ArgumentParser(add_help=False)
    calendar_args.add_argument('--start', type=parse_date, required=True, help='First date of the calendar')
    calendar_args.add_argument('--end', type=parse_date, required=True, help='Last date of the calendar')
    calendar_args.add_argument('--days', type=str, default='all', help='Active days, e.g. "mon,wed,fri" or "weekdays"')
    calendar_args.add_argument('--service', type=str, default='SERVICE', help='Service identifier')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    covers_parser = subparsers.add_parser('covers', parents=[calendar_args], help='Check whether a date is in service')
    covers_parser.add_argument('date', type=parse_date, help='Date to check')

    add_parser = subparsers.add_parser('add', parents=[calendar_args], help='Add a service date')
    add_parser.add_argument('date', type=parse_date, help='Date to add')

    subtract_parser = subparsers.add_parser('subtract', parents=[calendar_args], help='Remove a service date')
    subtract_parser.add_argument('date', type=parse_date, help='Date to remove')

    mask_parser = subparsers.add_parser('mask', parents=[calendar_args], help='Show the active days of one week')
    mask_parser.add_argument('monday', type=parse_date, help='Monday starting the week')

    subparsers.add_parser('trim', parents=[calendar_args], help='Trim the range to active days')

    args = parser.parse_args()
    setup_logging(args.debug)

    if not args.command:
        parser.print_help()
        return

    try:
        calendar = build_calendar(args)
        logging.debug(f"Calendar: {calendar!r}")

        if args.command == 'covers':
            status = calendar.get_status_for(args.date)
            if status is None:
                print(f"❔ {args.date} is outside {calendar.start_date}..{calendar.end_date}")
            elif status:
                print(f"✅ {calendar.service_id} runs on {args.date}")
            else:
                print(f"❌ {calendar.service_id} does not run on {args.date}")
        elif args.command == 'add':
            print_calendars(algebra.add(calendar, args.date))
        elif args.command == 'subtract':
            print_calendars(algebra.subtract(calendar, args.date))
        elif args.command == 'mask':
            print_mask(algebra.mask_for_week(calendar, args.monday))
        elif args.command == 'trim':
            algebra.trim_dates(calendar)
            print_calendars([calendar])
    except CalendarError as e:
        print(f"❌ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
