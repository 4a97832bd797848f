"""Per-gameday MVP derivation.

A period (a gameday, or a calendar date for matches without one) gets an
MVP once every match in it is completed: the top team of that period's
mini-table is found, and the player of that team named best player most
often in the period's matches is the MVP.
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

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from cupleague.models import (
    DEFAULT_POINT_SYSTEM,
    GameDayMvp,
    MatchRecord,
    MvpPick,
    PointSystem,
    StandingsRow,
    TeamRef,
)
from cupleague.standings.calculator import (
    MatchLike,
    StandingsCalculator,
    TeamLike,
    as_match_record,
)
from cupleague.utils import setup_logger
from cupleague.utils.clock import calendar_key

logger = setup_logger(__name__)

# ("game_day", 3) or ("date", "2025-06-12")
Period = Tuple[str, object]


def compute_gameday_mvps(
    matches: Iterable[MatchLike],
    teams_in_league: Iterable[TeamLike],
    point_system: PointSystem = DEFAULT_POINT_SYSTEM,
    tiebreak_order: Optional[Sequence[str]] = None,
) -> List[GameDayMvp]:
    """MVP for every period of the season.

    Args:
        matches: All match rows of the league, any status
        teams_in_league: Teams ranked in each period's mini-table
        point_system: Point awards used for the mini-tables
        tiebreak_order: Sort keys used for the mini-tables

    Returns:
        One entry per period, gamedays in number order followed by
        date-keyed periods in date order. ``mvp`` is None for periods with
        unfinished matches and for periods where the winning team got no
        ballot.
    """
    teams = [TeamRef.coerce(t) for t in teams_in_league]
    calculator = StandingsCalculator(
        point_system=point_system, tiebreak_order=tiebreak_order
    )

    results: List[GameDayMvp] = []
    for period, items in group_by_period(matches).items():
        game_day, day = _split_period(period)
        if not all(m.is_completed for m in items):
            logger.debug(f"Period {period[1]} still has unfinished matches")
            results.append(GameDayMvp(game_day=game_day, date=day, mvp=None))
            continue

        table = calculator.calculate(items, teams)
        mvp = _pick_mvp(items, table[0]) if table else None
        logger.debug(f"Period {period[1]}: MVP {mvp.player_id if mvp else None}")
        results.append(GameDayMvp(game_day=game_day, date=day, mvp=mvp))

    results.sort(key=_result_order)
    return results


def group_by_period(matches: Iterable[MatchLike]) -> Dict[Period, List[MatchRecord]]:
    """Bucket matches by gameday, or by calendar date when the gameday is unset.

    Buckets keep chronological match order. Matches with neither a gameday
    nor a timestamp are left out.
    """
    records = sorted(
        enumerate(as_match_record(m) for m in matches), key=_chronological_key
    )
    buckets: Dict[Period, List[MatchRecord]] = {}
    for _, match in records:
        if match.game_day:
            period: Period = ("game_day", match.game_day)
        elif match.match_at is not None:
            period = ("date", calendar_key(match.match_at))
        else:
            continue
        buckets.setdefault(period, []).append(match)
    return buckets


def tally_ballots(matches: Sequence[MatchRecord], team_id: str) -> Dict[str, int]:
    """Best-player ballots for ``team_id``'s players, in first-seen order.

    Each match contributes at most one ballot per side; only the side
    played by ``team_id`` counts.
    """
    votes: Dict[str, int] = {}
    for match in matches:
        if match.home_team_id == team_id and match.home_best_player_id:
            votes[match.home_best_player_id] = votes.get(match.home_best_player_id, 0) + 1
        if match.away_team_id == team_id and match.away_best_player_id:
            votes[match.away_best_player_id] = votes.get(match.away_best_player_id, 0) + 1
    return votes


def _pick_mvp(matches: Sequence[MatchRecord], winner: StandingsRow) -> Optional[MvpPick]:
    votes = tally_ballots(matches, winner.team_id)
    if not votes:
        return None
    # Equal tallies go to the player whose first ballot came earliest
    top_player, top_votes = None, 0
    for player_id, count in votes.items():
        if count > top_votes:
            top_player, top_votes = player_id, count
    return MvpPick(
        player_id=top_player,
        team_id=winner.team_id,
        team_name=winner.name,
        votes=top_votes,
    )


def _chronological_key(item: Tuple[int, MatchRecord]) -> tuple:
    index, match = item
    if match.match_at is None:
        return (1, datetime.min, index)
    moment = match.match_at
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return (0, moment, index)


def _split_period(period: Period) -> Tuple[Optional[int], Optional[str]]:
    kind, value = period
    if kind == "game_day":
        return value, None
    return None, value


def _result_order(result: GameDayMvp) -> tuple:
    if result.game_day is not None:
        return (0, result.game_day, "")
    return (1, 0, result.date or "")
