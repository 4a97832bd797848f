"""PointSystem data class."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict

from cupleague.constants import (
    CAPPED_CUP_DIFF,
    CUP_DIFF_CAP_THRESHOLD,
    OVERTIME_LOSS_POINTS,
    OVERTIME_WIN_POINTS,
    REGULATION_LOSS_POINTS,
    REGULATION_TARGET,
    REGULATION_WIN_POINTS,
)


@dataclass(frozen=True)
class PointSystem:
    """Point awards and cup differential rules for one league.

    Attributes
    ----------
    regulation_target : int
        Cups needed to win in regulation. A game is overtime when the
        winner scored more than this and the loser reached it.
    regulation_win_points : int
        Points for a regulation win.
    regulation_loss_points : int
        Points for a regulation loss.
    overtime_win_points : int
        Points for an overtime win.
    overtime_loss_points : int
        Points for an overtime loss.
    cup_diff_cap_threshold : int
        Winning scores above this count as ``capped_cup_diff``.
    capped_cup_diff : int
        Differential credited for capped games.
    """

    regulation_target: int = REGULATION_TARGET
    regulation_win_points: int = REGULATION_WIN_POINTS
    regulation_loss_points: int = REGULATION_LOSS_POINTS
    overtime_win_points: int = OVERTIME_WIN_POINTS
    overtime_loss_points: int = OVERTIME_LOSS_POINTS
    cup_diff_cap_threshold: int = CUP_DIFF_CAP_THRESHOLD
    capped_cup_diff: int = CAPPED_CUP_DIFF

    def is_overtime(self, home_score: int, away_score: int) -> bool:
        """Whether the final score went past the target with both sides at it."""
        high, low = max(home_score, away_score), min(home_score, away_score)
        return high > self.regulation_target and low >= self.regulation_target

    def cup_diff(self, home_score: int, away_score: int) -> int:
        """Absolute differential credited to the winner (and debited to the loser)."""
        if max(home_score, away_score) > self.cup_diff_cap_threshold:
            return self.capped_cup_diff
        return abs(home_score - away_score)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize point system to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PointSystem":
        """Deserialize point system from dictionary; unknown keys are ignored."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


DEFAULT_POINT_SYSTEM = PointSystem()
