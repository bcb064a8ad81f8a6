"""Japanese date formatting utilities for campaign schedules."""

from datetime import date, timedelta
from typing import Optional

from loguru import logger

WEEKDAYS = ("月", "火", "水", "木", "金", "土", "日")

# 旬 (period of month) values accepted by format_period
PERIODS = ("上旬", "中旬", "下旬")


def parse_date(date_str: str) -> Optional[date]:
    """
    Parse a YYYY-MM-DD string into a calendar date without timezone handling.

    Components are read directly, so the day can never shift. Out-of-range
    months and days roll over the way calendar arithmetic does
    ("2024-02-30" -> 2024-03-01, "2024-13-01" -> 2025-01-01).

    Args:
        date_str: Date string such as "2024-12-25"

    Returns:
        Parsed date, or None if the components are not numeric
    """
    try:
        year, month, day = (int(part) for part in date_str.strip().split("-"))
    except ValueError:
        return None

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _format_day(value: date) -> str:
    return f"{value.year}年{value.month}月{value.day}日（{WEEKDAYS[value.weekday()]}）"


def format_date(date_str: str) -> str:
    """
    Format a date with its weekday, never with a time.

    Examples:
        >>> format_date("2024-12-25")
        '2024年12月25日（水）'
        >>> format_date("")
        ''
    """
    if not date_str:
        return ""

    parsed = parse_date(date_str)
    if parsed is None:
        logger.warning(f"Unparseable date '{date_str}', leaving as-is")
        return date_str

    return _format_day(parsed)


def format_date_time(
    date_str: str,
    hour: str = "",
    minute: str = "",
    force_time: bool = False,
    default_hour: str = "00",
    default_minute: str = "00",
) -> str:
    """
    Format a date with weekday and an optional HH:MM suffix.

    The time is shown when both hour and minute are given, or when force_time
    is set; in the forced case a blank hour or minute falls back to its default.

    Args:
        date_str: Date string (YYYY-MM-DD)
        hour: Hour component, may be blank
        minute: Minute component, may be blank
        force_time: Always append a time
        default_hour: Hour used when forced and hour is blank
        default_minute: Minute used when forced and minute is blank

    Returns:
        Formatted string, or "" for an empty date

    Examples:
        >>> format_date_time("2024-12-25", "09", "30")
        '2024年12月25日（水）09:30'
        >>> format_date_time("2024-12-25")
        '2024年12月25日（水）'
        >>> format_date_time("2024-12-25", force_time=True, default_hour="23", default_minute="59")
        '2024年12月25日（水）23:59'
    """
    if not date_str:
        return ""

    parsed = parse_date(date_str)
    if parsed is None:
        logger.warning(f"Unparseable date '{date_str}', leaving as-is")
        return date_str

    formatted = _format_day(parsed)
    hour = (hour or "").strip()
    minute = (minute or "").strip()

    if force_time:
        hour = hour or default_hour
        minute = minute or default_minute
    elif not (hour and minute):
        return formatted

    return f"{formatted}{hour.zfill(2)}:{minute.zfill(2)}"


def format_period(year: str, month: str, period: str) -> str:
    """
    Format a coarse year/month/旬 date.

    Two-digit years are expanded by prefixing "20". The month is used as given.
    A 旬 outside PERIODS is kept as written and logged as a warning.

    Examples:
        >>> format_period("24", "11", "上旬")
        '2024年11月上旬'
        >>> format_period("2025", "3", "下旬")
        '2025年3月下旬'
    """
    year = year.strip()
    if len(year) == 2:
        year = f"20{year}"

    period = period.strip()
    if period not in PERIODS:
        logger.warning(f"Unknown period '{period}', expected one of {'/'.join(PERIODS)}")

    return f"{year}年{month.strip()}月{period}"
