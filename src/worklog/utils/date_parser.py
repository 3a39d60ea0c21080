"""Date parsing utilities."""

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_NAMES = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

WEEKDAY_NAMES = (
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
)

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_RE = re.compile(r"^(\d{4})[-/](\d{1,2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "hoje", "ontem"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "hoje": today,
        "yesterday": today - timedelta(days=1),
        "ontem": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "amanhã": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if _DATE_KEY_RE.match(date_str):
        try:
            return datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}")

    try:
        dt = date_parser.parse(date_str, yearfirst=True)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_log_date(value: Any) -> Optional[date]:
    """Parse a spreadsheet date cell.

    Accepts datetime/date values as-is, or strings made of three parts
    separated by '-' or '/' in year, month, day order ("2024-01-15",
    "2024/01/15"). Returns None when the value cannot be read as a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    parts = re.split(r"[-/]", value.strip())
    if len(parts) != 3:
        return None
    try:
        year, month, day = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None


def parse_month(month_str: Optional[str]) -> tuple[int, int]:
    """Parse a month selector into (year, month).

    Accepts "YYYY-MM", "YYYY/MM", "this month", "last month", "next month".
    None or an empty string means the current month.

    Raises:
        ValueError: If the selector cannot be parsed
    """
    today = date.today()
    if not month_str or not month_str.strip():
        return today.year, today.month

    value = month_str.strip().lower()
    relative = {
        "this month": 0,
        "this-month": 0,
        "last month": -1,
        "last-month": -1,
        "next month": 1,
        "next-month": 1,
    }
    if value in relative:
        target = today.replace(day=1) + relativedelta(months=relative[value])
        return target.year, target.month

    match = _MONTH_RE.match(value)
    if match is None:
        raise ValueError(f"Could not parse month '{month_str}'. Use YYYY-MM.")

    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{month_str}'")
    return year, month


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months."""
    target = date(year, month, 1) + relativedelta(months=delta)
    return target.year, target.month


def month_range(year: int, month: int) -> tuple[str, str]:
    """Return the first and last date keys of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return f"{year:04d}-{month:02d}-01", f"{year:04d}-{month:02d}-{last_day:02d}"


def date_key(value: date) -> str:
    """Format a date as a YYYY-MM-DD key."""
    return value.strftime("%Y-%m-%d")


def validate_date_key(value: str) -> str:
    """Validate that value is a real YYYY-MM-DD calendar date.

    Raises:
        ValueError: If value is not a valid date key
    """
    value = (value or "").strip()
    if not _DATE_KEY_RE.match(value):
        raise ValueError(f"Invalid date '{value}'. Use YYYY-MM-DD.")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValueError(f"Invalid date '{value}'. Use YYYY-MM-DD.")
    return value


def month_name(year: int, month: int) -> str:
    """Return the Portuguese month label, e.g. 'outubro de 2026'."""
    return f"{MONTH_NAMES[month - 1]} de {year}"


def format_short_date(key: str) -> str:
    """Format a date key as DD/MM/YYYY."""
    return datetime.strptime(key, "%Y-%m-%d").strftime("%d/%m/%Y")


def format_long_date(key: str) -> str:
    """Format a date key as 'segunda-feira, 19 de outubro'."""
    value = datetime.strptime(key, "%Y-%m-%d").date()
    return f"{WEEKDAY_NAMES[value.weekday()]}, {value.day:02d} de {MONTH_NAMES[value.month - 1]}"
