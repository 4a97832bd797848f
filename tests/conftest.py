"""
Pytest configuration for cupleague tests.
"""

import random
from datetime import datetime

import pytest

from cupleague.models import MatchRecord, TeamRef


@pytest.fixture
def rng():
    """Seeded random source so schedules are reproducible."""
    return random.Random(20250612)


@pytest.fixture
def four_teams():
    return [TeamRef(id=code, name=code) for code in ("A", "B", "C", "D")]


@pytest.fixture
def make_match():
    """Factory for completed match rows with sensible defaults."""

    def _make(
        home,
        away,
        home_score,
        away_score,
        round=1,
        game_day=1,
        status="completed",
        match_at=None,
        home_mvp=None,
        away_mvp=None,
    ):
        return MatchRecord(
            home_team_id=home,
            away_team_id=away,
            home_score=home_score,
            away_score=away_score,
            status=status,
            round=round,
            game_day=game_day,
            match_at=match_at or datetime(2025, 6, 12, 18, 0),
            home_best_player_id=home_mvp,
            away_best_player_id=away_mvp,
        )

    return _make
