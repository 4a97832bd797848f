"""Type hints used in Cup League."""

from typing import Hashable, List, Literal, Tuple, TypeVar, Union

# Persisted match status
MatchStatus = Literal["scheduled", "in_progress", "completed", "cancelled"]

# Anything the scheduler can pair: a team id, a team name or a TeamRef
TeamToken = TypeVar("TeamToken", bound=Hashable)

# (home, away) pair produced by the round-robin
Pairing = Tuple[TeamToken, TeamToken]
# All pairings for one round-robin round
RoundPairings = List[Pairing]

# Key identifying an MVP period: a gameday number or an ISO date string
PeriodKey = Union[int, str]
