"""Round Robin Pairing System Implementation.

Circle method: the first team stays put while the others rotate one seat
per round. With an odd team count a bye seat is added and every pairing
against it is dropped.
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
from typing import Generic, List, Optional, Sequence, Tuple

from cupleague.constants import BYE_LABEL
from cupleague.exceptions import ConfigurationError
from cupleague.type_hints import Pairing, RoundPairings, TeamToken


class _Bye:
    """Seat filler for odd team counts. Never equal to a real team token."""

    __slots__ = ()

    def __repr__(self) -> str:
        return BYE_LABEL


BYE = _Bye()


class RoundRobin(Generic[TeamToken]):
    """Single round-robin over a fixed team order.

    Attributes:
        teams: Team tokens in seating order
        number_of_rounds: ``n - 1`` for even ``n``, ``n`` for odd ``n``
        matches_per_round: Real pairings in each round (``n // 2``)
    """

    def __init__(self, teams: Sequence[TeamToken]) -> None:
        if len(teams) < 2:
            raise ConfigurationError(f"At least 2 teams are required, got {len(teams)}")
        if len(set(teams)) != len(teams):
            raise ConfigurationError("Team list contains duplicates")

        self.teams: List[TeamToken] = list(teams)
        seats: List[object] = list(teams)
        if len(seats) % 2:
            seats.append(BYE)
        self._seats = seats
        self.number_of_rounds = len(seats) - 1
        self.matches_per_round = len(self.teams) // 2
        self._rounds: Optional[List[RoundPairings]] = None

    @property
    def has_bye(self) -> bool:
        return len(self._seats) != len(self.teams)

    def rounds(self) -> List[RoundPairings]:
        """All rounds in circle-method order, each a list of (home, away)."""
        if self._rounds is None:
            self._rounds = self._generate()
        return [list(pairings) for pairings in self._rounds]

    def get_round_pairings(
        self, round_number: int
    ) -> Tuple[RoundPairings, Optional[TeamToken]]:
        """Pairings and bye team for one round (1-indexed).

        Raises:
            ValueError: If the round number is out of range
        """
        if not 1 <= round_number <= self.number_of_rounds:
            raise ValueError(
                f"Round {round_number} out of range 1..{self.number_of_rounds}"
            )
        pairings = self.rounds()[round_number - 1]
        if not self.has_bye:
            return pairings, None
        playing = {team for pair in pairings for team in pair}
        bye_team = next(team for team in self.teams if team not in playing)
        return pairings, bye_team

    def _generate(self) -> List[RoundPairings]:
        seats = list(self._seats)
        size = len(seats)
        rounds = []
        for _ in range(self.number_of_rounds):
            pairings = []
            for i in range(size // 2):
                home, away = seats[i], seats[size - 1 - i]
                if home is BYE or away is BYE:
                    continue
                pairings.append((home, away))
            rounds.append(pairings)
            # Keep seat 0 fixed, move the last seat to position 1
            seats.insert(1, seats.pop())
        return rounds


def create_round_robin(
    teams: Sequence[TeamToken], rng: Optional[random.Random] = None
) -> RoundRobin:
    """Build a RoundRobin, optionally shuffling the seating order first.

    Args:
        teams: Team tokens to pair
        rng: Random source for the initial shuffle; no shuffle when None

    Returns:
        The round-robin over the (possibly shuffled) teams
    """
    seating = list(teams)
    if rng is not None:
        rng.shuffle(seating)
    return RoundRobin(seating)


def mirror(
    pairings: Sequence[Pairing],
) -> RoundPairings:
    """Swap home and away for every pairing."""
    return [(away, home) for home, away in pairings]
