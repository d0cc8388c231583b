"""
Utility functions and helpers
"""

import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r"\b\w")

def parse_timestamp(timestamp_str: Optional[str]) -> Optional[datetime]:
    """Parse a backend timestamp into a naive UTC datetime, None if unparseable"""
    if not timestamp_str:
        return None
    try:
        # Handle ISO format with 'Z' (UTC)
        if timestamp_str.endswith('Z'):
            timestamp_str = timestamp_str[:-1] + '+00:00'

        parsed = datetime.fromisoformat(timestamp_str)

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

        return parsed

    except ValueError as e:
        logger.warning(f"Failed to parse timestamp '{timestamp_str}': {e}")
        return None

def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Date part of a backend date or timestamp string"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        parsed = parse_timestamp(value)
        return parsed.date() if parsed else None

def humanize_label(value: str) -> str:
    """'in_progress' -> 'In Progress'; only the first underscore is replaced"""
    return _WORD_START.sub(lambda m: m.group(0).upper(), value.replace('_', ' ', 1))

def day_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')

def format_short_date(value: Union[str, date]) -> str:
    """Jan 5, 2025"""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"

def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")

def badge(color: str) -> str:
    """Tailwind badge classes for a colour name"""
    return f"bg-{color}-100 text-{color}-800"
