"""Standings engine for Cup League.

Ranked tables over completed matches, rank-over-time series and
per-gameday MVP derivation.
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

from cupleague.standings.calculator import (
    StandingsCalculator,
    coerce_window,
    compute_standings,
    eligible_matches,
    summarize_progress,
)
from cupleague.standings.mvp import compute_gameday_mvps, group_by_period, tally_ballots
from cupleague.standings.rank_series import compute_rank_series
from cupleague.standings.scoring import MatchOutcome, score_match

__all__ = [
    "StandingsCalculator",
    "compute_standings",
    "compute_rank_series",
    "compute_gameday_mvps",
    "coerce_window",
    "eligible_matches",
    "summarize_progress",
    "group_by_period",
    "tally_ballots",
    "MatchOutcome",
    "score_match",
]
