"""Data models for generated fixtures and scheduler configuration."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List

from cupleague.constants import (
    DEFAULT_MATCH_DURATION,
    DEFAULT_START_TIME,
    DEFAULT_TABLES,
)
from cupleague.exceptions import ConfigurationError, InvalidDayPlanException
from cupleague.models.team import TeamRef
from cupleague.type_hints import TeamToken
from cupleague.utils.clock import parse_clock


@dataclass(frozen=True)
class ScheduledMatch(Generic[TeamToken]):
    """One fixture of a generated schedule.

    Attributes
    ----------
    home : TeamToken
        Home team token exactly as passed to the scheduler.
    away : TeamToken
        Away team token.
    day : int
        Gameday, 1-indexed, one per entry of the day plan.
    table : int
        Table number in ``[1, tables]``.
    slot : int
        0-indexed time slot within the day.
    round : int
        Season-wide round counter; never resets between days.
    start_time : str
        Slot start as ``HH:MM`` (hour wraps at 24).
    absolute_minutes : int
        Slot start as minutes after midnight of the gameday, unwrapped.
    global_order : int
        Position of the match in the whole season, strictly increasing.
    """

    home: TeamToken
    away: TeamToken
    day: int
    table: int
    slot: int
    round: int
    start_time: str
    absolute_minutes: int
    global_order: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize fixture to dictionary (TeamRef tokens keep their id)."""
        return {
            "home": _token_to_dict(self.home),
            "away": _token_to_dict(self.away),
            "day": self.day,
            "table": self.table,
            "slot": self.slot,
            "round": self.round,
            "start_time": self.start_time,
            "absolute_minutes": self.absolute_minutes,
            "global_order": self.global_order,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduledMatch":
        """Deserialize fixture from dictionary."""
        return cls(
            home=_token_from_dict(data["home"]),
            away=_token_from_dict(data["away"]),
            day=data["day"],
            table=data["table"],
            slot=data["slot"],
            round=data["round"],
            start_time=data["start_time"],
            absolute_minutes=data["absolute_minutes"],
            global_order=data["global_order"],
        )


@dataclass
class SchedulerConfig:
    """Configuration for a fixture generation run.

    Attributes:
        matches_per_day: Number of round-robin rounds to play on each gameday
        start_time: First slot of every gameday, ``HH:MM``
        match_duration: Minutes between consecutive slots
        tables: Number of tables played on in parallel
        avoid_team_clashes: Defer pairings that would put a team on two
            tables in one slot instead of strict row-major filling
    """

    matches_per_day: List[int] = field(default_factory=list)
    start_time: str = DEFAULT_START_TIME
    match_duration: int = DEFAULT_MATCH_DURATION
    tables: int = DEFAULT_TABLES
    avoid_team_clashes: bool = False

    @property
    def start_minutes(self) -> int:
        """First slot of the day in minutes after midnight."""
        return parse_clock(self.start_time)

    @property
    def total_rounds(self) -> int:
        """Sum of the day plan."""
        return sum(self.matches_per_day)

    def validate(self, team_count: int) -> None:
        """Check the configuration against the number of teams.

        Raises:
            ConfigurationError: If the configuration cannot produce a schedule
            InvalidDayPlanException: If the day plan is empty or malformed
        """
        if team_count < 2:
            raise ConfigurationError(
                f"At least 2 teams are required, got {team_count}"
            )

        max_tables = team_count // 2
        if isinstance(self.tables, bool) or not isinstance(self.tables, int):
            raise ConfigurationError(f"Table count must be an integer: {self.tables!r}")
        if self.tables < 1:
            raise ConfigurationError(f"At least 1 table is required, got {self.tables}")
        if self.tables > max_tables:
            raise ConfigurationError(
                f"Too many tables ({self.tables}). At most {max_tables} tables "
                f"can be used with {team_count} teams."
            )

        if not self.matches_per_day:
            raise InvalidDayPlanException("The day plan needs at least one day")
        for day, rounds in enumerate(self.matches_per_day, start=1):
            if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds <= 0:
                raise InvalidDayPlanException(
                    f"Day {day} must play a positive whole number of rounds, got {rounds!r}"
                )

        if (
            isinstance(self.match_duration, bool)
            or not isinstance(self.match_duration, int)
            or self.match_duration <= 0
        ):
            raise ConfigurationError(
                f"Match duration must be a positive number of minutes: {self.match_duration!r}"
            )

        try:
            parse_clock(self.start_time)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "matches_per_day": list(self.matches_per_day),
            "start_time": self.start_time,
            "match_duration": self.match_duration,
            "tables": self.tables,
            "avoid_team_clashes": self.avoid_team_clashes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchedulerConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            matches_per_day=list(data["matches_per_day"]),
            start_time=data.get("start_time", DEFAULT_START_TIME),
            match_duration=data.get("match_duration", DEFAULT_MATCH_DURATION),
            tables=data.get("tables", DEFAULT_TABLES),
            avoid_team_clashes=bool(data.get("avoid_team_clashes", False)),
        )


def _token_to_dict(token: Any) -> Any:
    if isinstance(token, TeamRef):
        return token.to_dict()
    if isinstance(token, (str, int)):
        return token
    return str(token)


def _token_from_dict(value: Any) -> Any:
    if isinstance(value, dict):
        return TeamRef.from_dict(value)
    return value
