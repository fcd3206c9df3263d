"""Timezone-aware date/time helpers for the academy application."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from flask import current_app, has_app_context

DEFAULT_TIMEZONE = 'America/New_York'


def get_timezone() -> ZoneInfo:
    """Get the configured timezone (default outside an app context)."""
    if has_app_context():
        return ZoneInfo(current_app.config.get('TIMEZONE', DEFAULT_TIMEZONE))
    return ZoneInfo(DEFAULT_TIMEZONE)


def get_today() -> date:
    """Get today's date in the configured timezone."""
    return datetime.now(get_timezone()).date()


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


def parse_date(value) -> date:
    """
    Parse a calendar date.

    Accepts date objects, 'YYYY-MM-DD' strings and full ISO datetime
    strings. Datetimes carrying an offset (including a trailing 'Z') are
    converted to the configured timezone before the day is taken; naive
    datetimes keep their own calendar day.

    Args:
        value: date, datetime or string

    Returns:
        date object

    Raises:
        ValueError: If the value is empty or not a valid date
    """
    if isinstance(value, datetime):
        return _local_day(value)
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValueError('date is required')

    text = value.strip()
    if len(text) <= 10:
        return date.fromisoformat(text)

    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    return _local_day(datetime.fromisoformat(text))


def _local_day(moment: datetime) -> date:
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(get_timezone()).date()


def date_range(start: date, end: date) -> list:
    """Every calendar day from start to end, both inclusive."""
    days = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days


def years_between(born: date, today: date) -> int:
    """Completed years between two dates (age on 'today')."""
    years = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        years -= 1
    return years
