"""Data models produced by the standings engine."""

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

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, Optional

from cupleague.models.match import MatchRecord
from cupleague.type_hints import PeriodKey
from cupleague.utils.clock import in_day


@dataclass(frozen=True)
class StandingsWindow:
    """Restricts which completed matches count towards a standings table.

    Every bound that is set must pass (the bounds AND together); an empty
    window admits every completed match. Matches without a round or
    gameday never pass a bound on that field.

    Attributes
    ----------
    upto_game_day : int or None
        Include matches with ``game_day <= upto_game_day``.
    upto_round : int or None
        Include matches with ``round <= upto_round``.
    game_day : int or None
        Include matches played on exactly this gameday.
    date : date or None
        Include matches whose timestamp falls in ``[date, date + 1 day)``.
    """

    upto_game_day: Optional[int] = None
    upto_round: Optional[int] = None
    game_day: Optional[int] = None
    date: Optional[dt.date] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.upto_game_day is None
            and self.upto_round is None
            and self.game_day is None
            and self.date is None
        )

    def admits(self, match: MatchRecord) -> bool:
        """Whether ``match`` lies inside the window (status is not checked here)."""
        if self.upto_game_day is not None:
            if match.game_day is None or match.game_day > self.upto_game_day:
                return False
        if self.upto_round is not None:
            if match.round is None or match.round > self.upto_round:
                return False
        if self.game_day is not None and match.game_day != self.game_day:
            return False
        if self.date is not None and not in_day(match.match_at, self.date):
            return False
        return True


@dataclass(frozen=True)
class StandingsRow:
    """One ranked line of a standings table.

    ``losses_total`` is derived from the two loss buckets and never stored.
    """

    rank: int
    team_id: str
    name: str
    games: int = 0
    wins_total: int = 0
    wins_regular: int = 0
    wins_ot: int = 0
    losses_regular: int = 0
    losses_ot: int = 0
    cup_diff: int = 0
    points: int = 0

    @property
    def losses_total(self) -> int:
        return self.losses_regular + self.losses_ot

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standings row to dictionary."""
        return {
            "rank": self.rank,
            "team_id": self.team_id,
            "name": self.name,
            "games": self.games,
            "wins_total": self.wins_total,
            "wins_regular": self.wins_regular,
            "wins_ot": self.wins_ot,
            "losses_total": self.losses_total,
            "losses_regular": self.losses_regular,
            "losses_ot": self.losses_ot,
            "cup_diff": self.cup_diff,
            "points": self.points,
        }


@dataclass(frozen=True)
class RankPoint:
    """A team's position after a given round; ``rank`` is None if not ranked."""

    round: int
    rank: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {"round": self.round, "rank": self.rank}


@dataclass(frozen=True)
class MvpPick:
    """The most voted player of the winning team in one period."""

    player_id: str
    team_id: str
    team_name: str
    votes: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.player_id,
            "team_id": self.team_id,
            "team_name": self.team_name,
            "votes": self.votes,
        }


@dataclass(frozen=True)
class GameDayMvp:
    """MVP outcome for one period, keyed by gameday or, failing that, by date.

    Attributes
    ----------
    game_day : int or None
        Gameday label of the period.
    date : str or None
        ISO date of the period when the matches carry no gameday.
    mvp : MvpPick or None
        None while any match of the period is unfinished, or when no
        ballot went to the winning team.
    """

    game_day: Optional[int]
    date: Optional[str]
    mvp: Optional[MvpPick]

    @property
    def period_key(self) -> PeriodKey:
        return self.game_day if self.game_day is not None else self.date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_day": self.game_day,
            "date": self.date,
            "mvp": self.mvp.to_dict() if self.mvp else None,
        }


@dataclass(frozen=True)
class SeasonProgress:
    """Match counts for a league snapshot."""

    total_matches: int
    completed_matches: int
    highest_round: int

    @property
    def remaining_matches(self) -> int:
        return self.total_matches - self.completed_matches

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_matches": self.total_matches,
            "completed_matches": self.completed_matches,
            "remaining_matches": self.remaining_matches,
            "highest_round": self.highest_round,
        }
