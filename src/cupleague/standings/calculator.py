"""Standings calculation for league seasons.

This module turns a snapshot of match rows into a ranked standings table.
Tables are always rebuilt from the match history; nothing is cached or
carried between calls.
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

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from cupleague.constants import DEFAULT_STANDINGS_SORT_ORDER, TIEBREAK_NAMES
from cupleague.exceptions import InvalidMatchDataException, StandingsException
from cupleague.models import (
    DEFAULT_POINT_SYSTEM,
    MatchRecord,
    PointSystem,
    SeasonProgress,
    StandingsRow,
    StandingsWindow,
    TeamRef,
)
from cupleague.standings.scoring import score_match
from cupleague.utils import setup_logger
from cupleague.utils.clock import to_date

logger = setup_logger(__name__)

MatchLike = Union[MatchRecord, Mapping[str, Any]]
TeamLike = Union[TeamRef, str, Mapping[str, Any]]
WindowLike = Union[StandingsWindow, Mapping[str, Any], None]

_WINDOW_KEYS = {
    "upto_game_day": "upto_game_day",
    "uptoGameDay": "upto_game_day",
    "upto_round": "upto_round",
    "uptoRound": "upto_round",
    "game_day": "game_day",
    "gameDay": "game_day",
    "date": "date",
}


@dataclass
class _Tally:
    """Mutable accumulator for one team while a table is being built."""

    team: TeamRef
    games: int = 0
    wins_total: int = 0
    wins_regular: int = 0
    wins_ot: int = 0
    losses_regular: int = 0
    losses_ot: int = 0
    cup_diff: int = 0
    points: int = 0

    def add_win(self, overtime: bool, points: int, cup_diff: int) -> None:
        self.games += 1
        self.wins_total += 1
        if overtime:
            self.wins_ot += 1
        else:
            self.wins_regular += 1
        self.points += points
        self.cup_diff += cup_diff

    def add_loss(self, overtime: bool, points: int, cup_diff: int) -> None:
        self.games += 1
        if overtime:
            self.losses_ot += 1
        else:
            self.losses_regular += 1
        self.points += points
        self.cup_diff -= cup_diff

    def freeze(self, rank: int) -> StandingsRow:
        return StandingsRow(
            rank=rank,
            team_id=self.team.id,
            name=self.team.name,
            games=self.games,
            wins_total=self.wins_total,
            wins_regular=self.wins_regular,
            wins_ot=self.wins_ot,
            losses_regular=self.losses_regular,
            losses_ot=self.losses_ot,
            cup_diff=self.cup_diff,
            points=self.points,
        )


class StandingsCalculator:
    """Builds ranked standings tables from completed matches.

    Scoring per decided match:
    - Overtime (winner above the regulation target, loser at or above it):
      winner 2 points, loser 1 point
    - Regulation: winner 3 points, loser 0 points
    - Cup differential: the score margin, or 1 when the winning score
      exceeds 13

    Ranking, all descending: points, total wins, cup differential,
    regulation wins. Team name ascending (then team id) closes the order.
    Point values and the tiebreak order can be configured.
    """

    def __init__(
        self,
        point_system: PointSystem = DEFAULT_POINT_SYSTEM,
        tiebreak_order: Optional[Sequence[str]] = None,
        strict: bool = False,
    ) -> None:
        """Initialize the calculator.

        Args:
            point_system: Point awards and cup differential rules
            tiebreak_order: Sort keys in priority order, names from TIEBREAK_NAMES
            strict: Raise on equal scores instead of skipping the match

        Raises:
            StandingsException: If the tiebreak order names an unknown key
        """
        order = list(tiebreak_order or DEFAULT_STANDINGS_SORT_ORDER)
        unknown = [key for key in order if key not in TIEBREAK_NAMES]
        if unknown:
            raise StandingsException(f"Unknown tiebreak keys: {unknown}")
        self.point_system = point_system
        self.tiebreak_order = order
        self.strict = strict

    def calculate(
        self,
        matches: Iterable[MatchLike],
        teams_in_league: Iterable[TeamLike],
        window: WindowLike = None,
    ) -> List[StandingsRow]:
        """Compute the ranked table.

        Args:
            matches: Match rows of one league, any status
            teams_in_league: Teams to rank; matches naming other teams are skipped
            window: Optional gameday/round/date restriction

        Returns:
            One row per team, ``rank`` 1-indexed in ranking order
        """
        window = coerce_window(window)
        tallies: Dict[str, _Tally] = {}
        for team in teams_in_league:
            ref = TeamRef.coerce(team)
            tallies.setdefault(ref.id, _Tally(team=ref))

        counted = 0
        for match in eligible_matches(matches, window):
            if self._apply(match, tallies):
                counted += 1

        ordered = sorted(tallies.values(), key=self._sort_key)
        rows = [tally.freeze(rank) for rank, tally in enumerate(ordered, start=1)]
        logger.debug(
            f"Ranked {len(rows)} teams from {counted} matches (window={window})"
        )
        return rows

    def _apply(self, match: MatchRecord, tallies: Dict[str, _Tally]) -> bool:
        home = tallies.get(match.home_team_id)
        away = tallies.get(match.away_team_id)
        if home is None or away is None:
            logger.warning(
                f"Skipping match {match.home_team_id} vs {match.away_team_id}: "
                "team not in league"
            )
            return False

        outcome = score_match(match.home_score, match.away_score, self.point_system)
        if outcome is None:
            message = (
                f"Match {match.home_team_id} vs {match.away_team_id} (round "
                f"{match.round}) ended {match.home_score}-{match.away_score}; "
                "draws are not possible"
            )
            if self.strict:
                raise InvalidMatchDataException(message)
            logger.warning(f"Skipping {message}")
            return False

        winner, loser = (home, away) if outcome.home_won else (away, home)
        winner.add_win(outcome.overtime, outcome.winner_points, outcome.cup_diff)
        loser.add_loss(outcome.overtime, outcome.loser_points, outcome.cup_diff)
        return True

    def _sort_key(self, tally: _Tally) -> tuple:
        stats = tuple(-getattr(tally, key) for key in self.tiebreak_order)
        return stats + (tally.team.name.casefold(), tally.team.name, tally.team.id)


def compute_standings(
    matches: Iterable[MatchLike],
    teams_in_league: Iterable[TeamLike],
    window: WindowLike = None,
    point_system: PointSystem = DEFAULT_POINT_SYSTEM,
    tiebreak_order: Optional[Sequence[str]] = None,
    strict: bool = False,
) -> List[StandingsRow]:
    """Ranked standings table for a league snapshot.

    Only completed matches inside ``window`` count. See
    :class:`StandingsCalculator` for the scoring and ranking rules.
    """
    calculator = StandingsCalculator(
        point_system=point_system, tiebreak_order=tiebreak_order, strict=strict
    )
    return calculator.calculate(matches, teams_in_league, window)


def eligible_matches(
    matches: Iterable[MatchLike], window: Optional[StandingsWindow] = None
) -> List[MatchRecord]:
    """Completed matches inside the window, in input order."""
    records = [as_match_record(m) for m in matches]
    return [
        m for m in records if m.is_completed and (window is None or window.admits(m))
    ]


def as_match_record(match: MatchLike) -> MatchRecord:
    """Accept a MatchRecord or a persisted row mapping."""
    if isinstance(match, MatchRecord):
        return match
    return MatchRecord.from_dict(dict(match))


def coerce_window(window: WindowLike) -> Optional[StandingsWindow]:
    """Normalise a window given as a StandingsWindow, a mapping or None.

    Mappings may use snake_case or camelCase keys; dates may be ISO strings.
    """
    if window is None or isinstance(window, StandingsWindow):
        return window
    values: Dict[str, Any] = {}
    for key, value in window.items():
        if key not in _WINDOW_KEYS:
            raise StandingsException(f"Unknown standings window key {key!r}")
        if value is not None:
            values[_WINDOW_KEYS[key]] = value
    if "date" in values:
        values["date"] = to_date(values["date"])
    return StandingsWindow(**values)


def summarize_progress(matches: Iterable[MatchLike]) -> SeasonProgress:
    """Total, completed and highest-round counts for a league snapshot."""
    records = [as_match_record(m) for m in matches]
    return SeasonProgress(
        total_matches=len(records),
        completed_matches=sum(1 for m in records if m.is_completed),
        highest_round=max((m.round or 0 for m in records), default=0),
    )
