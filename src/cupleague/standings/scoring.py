"""Per-match scoring rule: winner, overtime flag, points and cup differential."""

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

from dataclasses import dataclass
from typing import Optional

from cupleague.models import DEFAULT_POINT_SYSTEM, PointSystem


@dataclass(frozen=True)
class MatchOutcome:
    """How one decided match feeds both teams' standings rows.

    Attributes:
        home_won: True if the home side won
        overtime: True if the game went to overtime
        winner_points: Points awarded to the winner
        loser_points: Points awarded to the loser
        cup_diff: Differential added to the winner and taken from the loser
    """

    home_won: bool
    overtime: bool
    winner_points: int
    loser_points: int
    cup_diff: int


def score_match(
    home_score: int,
    away_score: int,
    point_system: PointSystem = DEFAULT_POINT_SYSTEM,
) -> Optional[MatchOutcome]:
    """Apply the point system to a final score.

    Returns:
        The outcome, or None for equal scores (no draws exist in this sport)

    Example:
        >>> score_match(16, 11)
        MatchOutcome(home_won=True, overtime=True, winner_points=2, loser_points=1, cup_diff=1)
    """
    if home_score == away_score:
        return None

    overtime = point_system.is_overtime(home_score, away_score)
    if overtime:
        winner_points = point_system.overtime_win_points
        loser_points = point_system.overtime_loss_points
    else:
        winner_points = point_system.regulation_win_points
        loser_points = point_system.regulation_loss_points

    return MatchOutcome(
        home_won=home_score > away_score,
        overtime=overtime,
        winner_points=winner_points,
        loser_points=loser_points,
        cup_diff=point_system.cup_diff(home_score, away_score),
    )
