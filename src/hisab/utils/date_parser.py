"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from hisab.utils.amount_parser import BENGALI_DIGITS

# Relative day words, English and Bengali, as offsets from today
RELATIVE_DAYS = {
    "today": 0,
    "আজ": 0,
    "yesterday": -1,
    "গতকাল": -1,
    "tomorrow": 1,
    "আগামীকাল": 1,
}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15 January 2024", "২০২৪-০১-১৫"
    - Relative days: "today"/"আজ", "yesterday"/"গতকাল", "tomorrow"
    - Period starts: "this month", "last month", "this year", "last year"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower().translate(BENGALI_DIGITS)
    today = date.today()

    if date_str in RELATIVE_DAYS:
        return today + timedelta(days=RELATIVE_DAYS[date_str])

    if date_str == "this month":
        return today.replace(day=1)
    if date_str == "last month":
        return (today - relativedelta(months=1)).replace(day=1)
    if date_str == "this year":
        return today.replace(month=1, day=1)
    if date_str == "last year":
        return today.replace(month=1, day=1) - relativedelta(years=1)

    # Try parsing as absolute date
    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: this-month, last-month, this-year or last-year
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date), both inclusive

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    if today is None:
        today = date.today()

    if period == "this-month":
        return (today.replace(day=1), today)

    if period == "last-month":
        # Last day of last month is the day before the first of this month
        end_date = today.replace(day=1) - timedelta(days=1)
        return (end_date.replace(day=1), end_date)

    if period == "this-year":
        return (today.replace(month=1, day=1), today)

    if period == "last-year":
        start_date = today.replace(month=1, day=1) - relativedelta(years=1)
        return (start_date, today.replace(month=1, day=1) - timedelta(days=1))

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: this-month, last-month, this-year, last-year"
    )
