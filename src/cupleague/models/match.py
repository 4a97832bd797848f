"""Match record data class: the standings engine's view of a persisted match row."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from cupleague.constants import MATCH_STATUSES, STATUS_COMPLETED, STATUS_SCHEDULED
from cupleague.exceptions import InvalidMatchDataException
from cupleague.type_hints import MatchStatus
from cupleague.utils.clock import to_datetime

# Persisted (camelCase) column name -> attribute name
_ROW_ALIASES = {
    "id": "match_id",
    "homeTeamId": "home_team_id",
    "awayTeamId": "away_team_id",
    "homeTeamScore": "home_score",
    "awayTeamScore": "away_score",
    "homeScore": "home_score",
    "awayScore": "away_score",
    "matchStatus": "status",
    "matchRound": "round",
    "gameDay": "game_day",
    "matchAt": "match_at",
    "matchTable": "table",
    "homeTeamBestPlayerId": "home_best_player_id",
    "awayTeamBestPlayerId": "away_best_player_id",
}


@dataclass(frozen=True)
class MatchRecord:
    """A match row as loaded from storage.

    Only rows with ``status == "completed"`` count towards standings; the
    rest still matter for the MVP completeness gate.

    Attributes
    ----------
    home_team_id : str
        Persisted id of the home team.
    away_team_id : str
        Persisted id of the away team.
    home_score : int
        Cups scored by the home team, ``>= 0``.
    away_score : int
        Cups scored by the away team, ``>= 0``.
    status : str
        One of ``scheduled``, ``in_progress``, ``completed``, ``cancelled``.
    round : int or None
        Season-wide round counter.
    game_day : int or None
        Explicit gameday label.
    match_at : datetime or None
        Scheduled start timestamp.
    table : int or None
        Table the match is played on.
    home_best_player_id : str or None
        MVP ballot cast for the home side.
    away_best_player_id : str or None
        MVP ballot cast for the away side.
    match_id : str or None
        Persisted match id, if any.
    """

    home_team_id: str
    away_team_id: str
    home_score: int = 0
    away_score: int = 0
    status: MatchStatus = STATUS_SCHEDULED
    round: Optional[int] = None
    game_day: Optional[int] = None
    match_at: Optional[datetime] = None
    table: Optional[int] = None
    home_best_player_id: Optional[str] = None
    away_best_player_id: Optional[str] = None
    match_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status not in MATCH_STATUSES:
            raise InvalidMatchDataException(
                f"Unknown match status {self.status!r}; expected one of {MATCH_STATUSES}"
            )
        if self.home_score < 0 or self.away_score < 0:
            raise InvalidMatchDataException(
                f"Scores must be non-negative: {self.home_score}-{self.away_score}"
            )

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def is_draw(self) -> bool:
        return self.home_score == self.away_score

    def complete(
        self,
        home_score: int,
        away_score: int,
        home_best_player_id: Optional[str] = None,
        away_best_player_id: Optional[str] = None,
    ) -> "MatchRecord":
        """Return a completed copy of this match carrying the final result."""
        return replace(
            self,
            home_score=home_score,
            away_score=away_score,
            home_best_player_id=home_best_player_id,
            away_best_player_id=away_best_player_id,
            status=STATUS_COMPLETED,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "match_id": self.match_id,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "status": self.status,
            "round": self.round,
            "game_day": self.game_day,
            "match_at": self.match_at.isoformat() if self.match_at else None,
            "table": self.table,
            "home_best_player_id": self.home_best_player_id,
            "away_best_player_id": self.away_best_player_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchRecord":
        """Deserialize a match record.

        Accepts both the snake_case keys written by :meth:`to_dict` and the
        camelCase column names of persisted match rows. Missing scores count
        as 0 and timestamps may be ISO strings.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ROW_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value

        for required in ("home_team_id", "away_team_id"):
            if values.get(required) is None:
                raise InvalidMatchDataException(f"Match row is missing {required}")

        values["home_team_id"] = str(values["home_team_id"])
        values["away_team_id"] = str(values["away_team_id"])
        values["home_score"] = _int_or_zero(values.get("home_score"))
        values["away_score"] = _int_or_zero(values.get("away_score"))
        values["status"] = values.get("status") or STATUS_SCHEDULED
        for name in ("round", "game_day", "table"):
            if values.get(name) is not None:
                values[name] = int(values[name])
        values["match_at"] = to_datetime(values.get("match_at"))
        return cls(**values)


def _int_or_zero(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidMatchDataException(f"Score is not a number: {value!r}") from e
