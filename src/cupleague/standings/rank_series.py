"""Rank-over-time series: a team's table position after every round."""

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

from typing import Iterable, List, Optional, Sequence

from cupleague.models import (
    DEFAULT_POINT_SYSTEM,
    PointSystem,
    RankPoint,
    StandingsWindow,
    TeamRef,
)
from cupleague.standings.calculator import (
    MatchLike,
    StandingsCalculator,
    TeamLike,
    eligible_matches,
)
from cupleague.utils import setup_logger

logger = setup_logger(__name__)


def compute_rank_series(
    matches: Iterable[MatchLike],
    teams_in_league: Iterable[TeamLike],
    team_id: str,
    point_system: PointSystem = DEFAULT_POINT_SYSTEM,
    tiebreak_order: Optional[Sequence[str]] = None,
) -> List[RankPoint]:
    """Rank of ``team_id`` after each round from 1 to the last completed round.

    Each point is a full standings recomputation with ``upto_round`` set,
    so it equals the table the caller would get for that round directly.

    Returns:
        One RankPoint per round; empty when no completed match has a round.
        ``rank`` is None when the team is not part of the league.
    """
    completed = eligible_matches(matches)
    teams = [TeamRef.coerce(t) for t in teams_in_league]
    max_round = max((m.round for m in completed if m.round is not None), default=0)

    calculator = StandingsCalculator(
        point_system=point_system, tiebreak_order=tiebreak_order
    )
    series: List[RankPoint] = []
    for round_number in range(1, max_round + 1):
        table = calculator.calculate(
            completed, teams, StandingsWindow(upto_round=round_number)
        )
        rank = next((row.rank for row in table if row.team_id == team_id), None)
        series.append(RankPoint(round=round_number, rank=rank))

    logger.debug(f"Rank series for {team_id}: {len(series)} rounds")
    return series
