"""Utility functions for worklog."""

from worklog.utils.date_parser import parse_date, parse_log_date, parse_month, month_range
from worklog.utils.logging import get_logger

__all__ = ["parse_date", "parse_log_date", "parse_month", "month_range", "get_logger"]
