"""Fixture scheduling for Cup League.

Round-robin pairing generation and the assignment of pairings to
gamedays, time slots and tables.
"""

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

from cupleague.scheduling.fixture_generator import (
    attach_day_dates,
    build_match_stream,
    format_schedule,
    generate_schedule,
    generate_schedule_from_config,
    group_by_day,
    schedule_day,
    to_match_records,
)
from cupleague.scheduling.round_robin import BYE, RoundRobin, create_round_robin, mirror

__all__ = [
    "generate_schedule",
    "generate_schedule_from_config",
    "build_match_stream",
    "schedule_day",
    "attach_day_dates",
    "to_match_records",
    "format_schedule",
    "group_by_day",
    "RoundRobin",
    "create_round_robin",
    "mirror",
    "BYE",
]
