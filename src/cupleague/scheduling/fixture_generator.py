"""Fixture generation for a double round-robin league season.

This module turns a team list and a rounds-per-day plan into a list of
fixtures with a gameday, a table, a time slot and a season-wide round
number. It performs no I/O.
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

import random
from datetime import date, datetime
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from cupleague.constants import (
    DEFAULT_MATCH_DURATION,
    DEFAULT_START_TIME,
    DEFAULT_TABLES,
    STATUS_SCHEDULED,
)
from cupleague.models import MatchRecord, ScheduledMatch, SchedulerConfig, TeamRef
from cupleague.scheduling.round_robin import create_round_robin, mirror
from cupleague.type_hints import Pairing, TeamToken
from cupleague.utils import setup_logger
from cupleague.utils.clock import format_clock, minutes_to_time, to_date

logger = setup_logger(__name__)


def generate_schedule(
    teams: Sequence[TeamToken],
    matches_per_day: Sequence[int],
    start_time: str = DEFAULT_START_TIME,
    match_duration: int = DEFAULT_MATCH_DURATION,
    tables: int = DEFAULT_TABLES,
    rng: Optional[random.Random] = None,
    avoid_team_clashes: bool = False,
) -> List[ScheduledMatch]:
    """Generate a double round-robin season.

    Args:
        teams: Team tokens (ids, names or TeamRef objects)
        matches_per_day: Rounds to play on each gameday, in order
        start_time: First slot of every gameday, ``HH:MM``
        match_duration: Minutes per slot
        tables: Tables played on in parallel, at most ``len(teams) // 2``
        rng: Random source for the two shuffles; a fresh ``random.Random()``
            is used when omitted, so concurrent calls never share state
        avoid_team_clashes: Defer a pairing whose team already plays in the
            current slot instead of filling tables strictly in stream order

    Returns:
        Fixtures ordered by ``global_order``

    Raises:
        ConfigurationError: If the configuration cannot produce a schedule
    """
    config = SchedulerConfig(
        matches_per_day=list(matches_per_day),
        start_time=start_time,
        match_duration=match_duration,
        tables=tables,
        avoid_team_clashes=avoid_team_clashes,
    )
    return generate_schedule_from_config(teams, config, rng=rng)


def generate_schedule_from_config(
    teams: Sequence[TeamToken],
    config: SchedulerConfig,
    rng: Optional[random.Random] = None,
) -> List[ScheduledMatch]:
    """Generate a season from a SchedulerConfig. See :func:`generate_schedule`."""
    team_list = list(teams)
    config.validate(len(team_list))

    rng = rng if rng is not None else random.Random()
    stream = build_match_stream(team_list, rng)

    per_round = len(team_list) // 2
    start_minutes = config.start_minutes
    schedule: List[ScheduledMatch] = []
    cursor = 0
    round_offset = 0

    for day_index, rounds_today in enumerate(config.matches_per_day):
        wanted = rounds_today * per_round
        day_matches = stream[cursor : cursor + wanted]
        cursor += len(day_matches)
        if len(day_matches) < wanted:
            logger.info(
                f"Day {day_index + 1} asked for {wanted} matches, "
                f"only {len(day_matches)} pairings remain"
            )

        scheduled = schedule_day(
            day_matches,
            day=day_index + 1,
            start_minutes=start_minutes,
            match_duration=config.match_duration,
            tables=config.tables,
            round_offset=round_offset,
            order_offset=len(schedule),
            avoid_team_clashes=config.avoid_team_clashes,
        )
        schedule.extend(scheduled)
        if scheduled:
            round_offset = scheduled[-1].round

    logger.info(
        "Generated %s matches for %s teams over %s days",
        len(schedule),
        len(team_list),
        len(config.matches_per_day),
    )
    return schedule


def build_match_stream(
    teams: Sequence[TeamToken], rng: random.Random
) -> List[Pairing]:
    """Flatten a shuffled double round-robin into one ordered pairing stream.

    The team order is shuffled, the single round-robin rounds are shuffled
    as whole rounds, and the mirrored (home/away swapped) pairings follow
    after every first-leg pairing in the same round order.
    """
    round_robin = create_round_robin(teams, rng=rng)
    rounds = round_robin.rounds()
    rng.shuffle(rounds)
    first_leg = [pairing for pairings in rounds for pairing in pairings]
    return first_leg + mirror(first_leg)


def schedule_day(
    matches: Sequence[Pairing],
    day: int,
    start_minutes: int,
    match_duration: int,
    tables: int,
    round_offset: int = 0,
    order_offset: int = 0,
    avoid_team_clashes: bool = False,
) -> List[ScheduledMatch]:
    """Assign one gameday's pairings to slots and tables.

    Tables fill first, then the slot advances (row-major): the i-th pairing
    of the day lands on slot ``i // tables``, table ``i % tables + 1``.
    With ``avoid_team_clashes`` a pairing whose team is already playing in
    the current slot waits for the next one instead; the relative order of
    the remaining pairings is kept.

    Args:
        matches: The day's (home, away) pairings in stream order
        day: Gameday number (1-indexed)
        start_minutes: First slot start in minutes after midnight
        match_duration: Minutes per slot
        tables: Tables available per slot
        round_offset: Rounds already used by earlier days
        order_offset: ``global_order`` of the first match of this day
        avoid_team_clashes: Never put one team on two tables in a slot

    Returns:
        The day's fixtures in slot/table order
    """
    if avoid_team_clashes:
        slots = _fill_slots_without_clashes(matches, tables)
    else:
        slots = [list(matches[i : i + tables]) for i in range(0, len(matches), tables)]

    scheduled: List[ScheduledMatch] = []
    for slot, chosen in enumerate(slots):
        absolute_minutes = start_minutes + slot * match_duration
        for table_index, (home, away) in enumerate(chosen):
            scheduled.append(
                ScheduledMatch(
                    home=home,
                    away=away,
                    day=day,
                    table=table_index + 1,
                    slot=slot,
                    round=round_offset + slot + 1,
                    start_time=format_clock(absolute_minutes),
                    absolute_minutes=absolute_minutes,
                    global_order=order_offset + len(scheduled),
                )
            )
        logger.debug(f"Day {day} slot {slot}: {len(chosen)} matches")

    return scheduled


def _fill_slots_without_clashes(
    matches: Sequence[Pairing], tables: int
) -> List[List[Pairing]]:
    pending = list(matches)
    slots: List[List[Pairing]] = []
    while pending:
        busy = set()
        chosen: List[Pairing] = []
        leftover: List[Pairing] = []
        for pairing in pending:
            home, away = pairing
            if len(chosen) < tables and home not in busy and away not in busy:
                chosen.append(pairing)
                busy.update((home, away))
            else:
                leftover.append(pairing)
        slots.append(chosen)
        pending = leftover
    return slots


# ========== Presentation and persistence helpers ==========


def attach_day_dates(
    schedule: Sequence[ScheduledMatch],
    day_dates: Sequence[Union[str, date]],
) -> List[Tuple[ScheduledMatch, Optional[date]]]:
    """Pair each fixture with the calendar date of its gameday.

    Days beyond the end of ``day_dates`` get ``None``.
    """
    dates = [to_date(d) if d else None for d in day_dates]
    return [
        (match, dates[match.day - 1] if match.day <= len(dates) else None)
        for match in schedule
    ]


def to_match_records(
    schedule: Sequence[ScheduledMatch],
    team_ids: Optional[Mapping[TeamToken, str]] = None,
    day_dates: Optional[Sequence[Union[str, date]]] = None,
    round_offset: int = 0,
) -> List[MatchRecord]:
    """Map generated fixtures to scheduled match rows ready for storage.

    Args:
        schedule: Output of :func:`generate_schedule`
        team_ids: Token to persisted team id; when omitted, TeamRef tokens
            use their ``id`` and other tokens are used as-is
        day_dates: Calendar date of each gameday, used for ``match_at``
        round_offset: Highest round already stored for the league, so a
            second schedule continues the round sequence

    Returns:
        One MatchRecord per fixture whose teams could be mapped
    """
    dated = attach_day_dates(schedule, day_dates or [])
    records: List[MatchRecord] = []
    for match, day_date in dated:
        home_id = _resolve_team_id(match.home, team_ids)
        away_id = _resolve_team_id(match.away, team_ids)
        if home_id is None or away_id is None:
            logger.warning(
                f"Skipping fixture {match.home} vs {match.away}: team not in league"
            )
            continue
        match_at = (
            datetime.combine(day_date, minutes_to_time(match.absolute_minutes))
            if day_date
            else None
        )
        records.append(
            MatchRecord(
                home_team_id=home_id,
                away_team_id=away_id,
                status=STATUS_SCHEDULED,
                round=round_offset + match.round,
                game_day=match.day,
                match_at=match_at,
                table=match.table,
            )
        )
    return records


def _resolve_team_id(
    token: TeamToken, team_ids: Optional[Mapping[TeamToken, str]]
) -> Optional[str]:
    if team_ids is not None:
        return team_ids.get(token)
    if isinstance(token, TeamRef):
        return token.id
    return str(token)


def format_schedule(schedule: Sequence[ScheduledMatch]) -> str:
    """Render fixtures as text, one block per gameday, in ``global_order``."""
    lines: List[str] = []
    current_day: Optional[int] = None
    for match in sorted(schedule, key=lambda m: m.global_order):
        if match.day != current_day:
            lines.append(f"=== Game Day {match.day} ===")
            current_day = match.day
        lines.append(
            f"{match.global_order}  {match.start_time} - {match.home} vs {match.away}"
            f" - table: {match.table}"
        )
    return "\n".join(lines)


def group_by_day(schedule: Sequence[ScheduledMatch]) -> Dict[int, List[ScheduledMatch]]:
    """Fixtures keyed by gameday, each list in ``global_order``."""
    days: Dict[int, List[ScheduledMatch]] = {}
    for match in sorted(schedule, key=lambda m: m.global_order):
        days.setdefault(match.day, []).append(match)
    return days
