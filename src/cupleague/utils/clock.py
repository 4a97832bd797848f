"""Clock and calendar helpers shared by the scheduler and standings code."""

# Cup League
# Copyright (C) 2025  Cup League developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import re
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Tuple, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from cupleague.constants import MINUTES_PER_DAY

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

DateLike = Union[str, date, datetime]


def parse_clock(value: str) -> int:
    """Convert an ``HH:MM`` string to minutes after midnight.

    Raises:
        ValueError: If the string is not a valid 24h clock time
    """
    match = _CLOCK_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid clock time {value!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Invalid clock time {value!r}, expected HH:MM")
    return hours * 60 + minutes


def format_clock(total_minutes: int) -> str:
    """Format minutes after midnight as ``HH:MM``.

    The hour wraps at 24 but the day is not rolled: 1500 minutes is "01:00".
    """
    hours = (total_minutes // 60) % 24
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def minutes_to_time(total_minutes: int) -> time:
    """Wall-clock ``time`` for an absolute minute offset (wrapping at midnight)."""
    wrapped = total_minutes % MINUTES_PER_DAY
    return time(wrapped // 60, wrapped % 60)


def to_date(value: DateLike) -> date:
    """Coerce an ISO string, date or datetime into a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.isoparse(value).date()


def to_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Coerce a persisted timestamp into a ``datetime`` (``None`` passes through)."""
    if value is None or isinstance(value, datetime):
        return value
    return date_parser.isoparse(value)


def day_bounds(day: DateLike, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """Half-open ``[start, end)`` interval covering one calendar day.

    Args:
        day: The calendar day
        tz: Timezone to attach, so bounds compare cleanly with aware timestamps
    """
    start = datetime.combine(to_date(day), time.min, tzinfo=tz)
    return start, start + relativedelta(days=1)


def in_day(moment: Optional[datetime], day: DateLike) -> bool:
    """Whether ``moment`` falls on ``day``; timestamps are compared in their own zone."""
    if moment is None:
        return False
    start, end = day_bounds(day, moment.tzinfo)
    return start <= moment < end


def calendar_key(moment: datetime) -> str:
    """ISO date used to group undated-gameday matches (aware stamps in UTC)."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date().isoformat()
