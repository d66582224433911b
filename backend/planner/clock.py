"""Clock helpers — the only place where times become strings and back.

The scheduler itself works on datetime instants and minute counts only.
"""

import logging
import re
from datetime import datetime, time, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

TIME_OF_DAY_FORMAT = "%I:%M %p"  # 9:00 AM

_TIME_OF_DAY_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([ap]m)\s*$", re.IGNORECASE)


def parse_time_of_day(value: Optional[str]) -> Optional[time]:
    """Parse an "h:mm AM/PM" string. Returns None (and logs) when it can't."""
    if not value:
        return None
    match = _TIME_OF_DAY_RE.match(value)
    if not match:
        logger.warning(f"Ignoring unparseable time of day: {value!r}")
        return None
    hour, minute, meridiem = match.groups()
    try:
        return datetime.strptime(f"{hour}:{minute} {meridiem.upper()}", TIME_OF_DAY_FORMAT).time()
    except ValueError:
        logger.warning(f"Ignoring out-of-range time of day: {value!r}")
        return None


def on_same_day(moment: datetime, tod: time) -> datetime:
    """Place a time of day on the calendar day of `moment`.

    Past midnight that is the next day, so "9:00 AM" can be ~9 hours ahead.
    """
    return moment.replace(hour=tod.hour, minute=tod.minute, second=0, microsecond=0)


def format_time(moment: datetime) -> str:
    return moment.strftime(TIME_OF_DAY_FORMAT).lstrip("0")


def add_minutes(moment: datetime, minutes: int) -> datetime:
    return moment + timedelta(minutes=minutes)


def minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() // 60)
