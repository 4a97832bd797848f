"""Cup League: round-robin fixture scheduling and standings for cup leagues."""

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

from cupleague.exceptions import (
    ConfigurationError,
    CupLeagueException,
    InvalidDayPlanException,
    InvalidMatchDataException,
    ScheduleException,
    StandingsException,
    ValidationException,
)
from cupleague.models import (
    GameDayMvp,
    MatchRecord,
    MvpPick,
    PointSystem,
    RankPoint,
    ScheduledMatch,
    SchedulerConfig,
    SeasonProgress,
    StandingsRow,
    StandingsWindow,
    TeamRef,
)
from cupleague.scheduling import (
    format_schedule,
    generate_schedule,
    generate_schedule_from_config,
    to_match_records,
)
from cupleague.standings import (
    StandingsCalculator,
    compute_gameday_mvps,
    compute_rank_series,
    compute_standings,
    summarize_progress,
)

__version__ = "1.0.0"

__all__ = [
    "generate_schedule",
    "generate_schedule_from_config",
    "to_match_records",
    "format_schedule",
    "compute_standings",
    "compute_rank_series",
    "compute_gameday_mvps",
    "summarize_progress",
    "StandingsCalculator",
    "TeamRef",
    "ScheduledMatch",
    "SchedulerConfig",
    "MatchRecord",
    "PointSystem",
    "StandingsWindow",
    "StandingsRow",
    "RankPoint",
    "MvpPick",
    "GameDayMvp",
    "SeasonProgress",
    "CupLeagueException",
    "ScheduleException",
    "ConfigurationError",
    "InvalidDayPlanException",
    "StandingsException",
    "InvalidMatchDataException",
    "ValidationException",
]
