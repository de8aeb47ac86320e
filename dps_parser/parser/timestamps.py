"""
Timestamp parsing for combat log lines.
"""

import re
from typing import Optional

# Format: "YYYYMMDD-HH:MM:SS:mmm" with 1-3 millisecond digits
TIMESTAMP_PATTERN = re.compile(
    r"(\d{4})(\d{2})(\d{2})-(\d{2}):(\d{2}):(\d{2}):(\d{1,3})", re.ASCII
)

# Two-digit years are read as 19xx
TWO_DIGIT_YEAR_BASE = 1900

MS_PER_DAY = 86_400_000


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Days since 1970-01-01 for a proleptic Gregorian date.

    Works for any year, including ones outside ``datetime``'s 1..9999 range.
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def parse_log_timestamp(value: str) -> Optional[int]:
    """
    Parse a log timestamp into milliseconds since the Unix epoch (UTC).

    Calendar fields are read as UTC wall-clock values. Fields that match the
    pattern but overflow their unit (month 13, hour 25, ...) carry into the
    next unit, and years 0000-0099 mean 1900-1999.

    Args:
        value: Raw timestamp field

    Returns:
        Epoch milliseconds, or None if the field is not a valid timestamp
    """
    match = TIMESTAMP_PATTERN.fullmatch(value.strip())
    if not match:
        return None

    year, month, day, hour, minute, second, millis = (int(g) for g in match.groups())

    if year <= 99:
        year += TWO_DIGIT_YEAR_BASE

    # Carry month overflow into the year (month "00" is December of the year before)
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    days = days_from_civil(year, month, 1) + day - 1
    return days * MS_PER_DAY + ((hour * 60 + minute) * 60 + second) * 1000 + millis
