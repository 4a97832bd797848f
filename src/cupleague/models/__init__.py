"""Data models for Cup League."""

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

from cupleague.models.fixture import ScheduledMatch, SchedulerConfig
from cupleague.models.match import MatchRecord
from cupleague.models.point_system import DEFAULT_POINT_SYSTEM, PointSystem
from cupleague.models.standings import (
    GameDayMvp,
    MvpPick,
    RankPoint,
    SeasonProgress,
    StandingsRow,
    StandingsWindow,
)
from cupleague.models.team import TeamRef

__all__ = [
    "TeamRef",
    "ScheduledMatch",
    "SchedulerConfig",
    "MatchRecord",
    "PointSystem",
    "DEFAULT_POINT_SYSTEM",
    "StandingsWindow",
    "StandingsRow",
    "RankPoint",
    "MvpPick",
    "GameDayMvp",
    "SeasonProgress",
]
