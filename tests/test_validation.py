from datetime import date, datetime, time, timedelta, timezone

import pytest

from cupleague.exceptions import InvalidMatchDataException, ValidationException
from cupleague.models import MatchRecord, StandingsWindow, TeamRef
from cupleague.utils.clock import (
    calendar_key,
    day_bounds,
    format_clock,
    in_day,
    minutes_to_time,
    parse_clock,
)
from cupleague.utils.validation import (
    parse_day_plan,
    validate_clock,
    validate_day_plan,
    validate_window,
)

# ========== Day plans ==========


@pytest.mark.parametrize(
    "plan, expected",
    [
        ("4-5-4-5-4", [4, 5, 4, 5, 4]),
        (" 3 - 3 ", [3, 3]),
        ([2, 2.0, "1"], [2, 2, 1]),
    ],
)
def test_valid_day_plans(plan, expected):
    result = validate_day_plan(plan)
    assert result
    assert result.sanitized_value == expected
    assert parse_day_plan(plan) == expected


@pytest.mark.parametrize(
    "plan", [None, "", "4-0-4", "4-x", "4--4", [], [3, -1], [2.5], [True], [float("inf")]]
)
def test_invalid_day_plans(plan):
    result = validate_day_plan(plan)
    assert not result
    assert result.error_message
    with pytest.raises(ValidationException):
        parse_day_plan(plan)


# ========== Clock ==========


def test_validate_clock_pads_hours():
    assert validate_clock("8:05").sanitized_value == "08:05"
    assert validate_clock("23:59")


@pytest.mark.parametrize("value", [None, "", "24:00", "12:60", "noon", "1200"])
def test_validate_clock_rejects(value):
    assert not validate_clock(value)


def test_parse_and_format_clock():
    assert parse_clock("18:30") == 1110
    assert format_clock(1110) == "18:30"
    assert format_clock(1500) == "01:00"
    assert minutes_to_time(1500) == time(1, 0)
    with pytest.raises(ValueError):
        parse_clock("7pm")


def test_day_bounds_are_half_open():
    start, end = day_bounds("2025-06-12")
    assert start == datetime(2025, 6, 12)
    assert end == datetime(2025, 6, 13)
    assert in_day(datetime(2025, 6, 12, 23, 59), date(2025, 6, 12))
    assert not in_day(datetime(2025, 6, 13), date(2025, 6, 12))
    assert not in_day(None, date(2025, 6, 12))


def test_calendar_key_converts_to_utc():
    assert calendar_key(datetime(2025, 6, 12, 18, 0)) == "2025-06-12"
    tokyo = timezone(timedelta(hours=9))
    assert calendar_key(datetime(2025, 6, 13, 8, 0, tzinfo=tokyo)) == "2025-06-12"


# ========== Standings windows ==========


def test_validate_window_sanitizes():
    result = validate_window(upto_round="3", date="2025-06-12")
    assert result.sanitized_value == StandingsWindow(upto_round=3, date=date(2025, 6, 12))
    assert validate_window().sanitized_value.is_empty
    assert validate_window(game_day=2.0).sanitized_value.game_day == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"upto_round": 0},
        {"upto_round": -2},
        {"upto_game_day": "abc"},
        {"game_day": float("nan")},
        {"upto_game_day": 1.5},
        {"date": "2025-13-01"},
        {"date": "yesterday"},
    ],
)
def test_validate_window_rejects(kwargs):
    result = validate_window(**kwargs)
    assert not result
    assert "must be a positive integer" in result.error_message or "Invalid date" in result.error_message


# ========== Records ==========


def test_match_record_from_persisted_row():
    record = MatchRecord.from_dict(
        {
            "id": 17,
            "homeTeamId": 1,
            "awayTeamId": 2,
            "homeTeamScore": None,
            "matchStatus": "in_progress",
            "matchRound": "4",
            "gameDay": 2,
            "matchAt": "2025-06-12T18:30:00+02:00",
            "homeTeamBestPlayerId": "p9",
            "createdAt": "ignored",
        }
    )
    assert (record.home_team_id, record.away_team_id) == ("1", "2")
    assert (record.home_score, record.away_score) == (0, 0)
    assert record.status == "in_progress"
    assert (record.round, record.game_day) == (4, 2)
    assert record.match_at == datetime(2025, 6, 12, 18, 30, tzinfo=timezone(timedelta(hours=2)))
    assert record.home_best_player_id == "p9"
    assert record.match_id == 17


def test_match_record_round_trip():
    record = MatchRecord("A", "B", round=1, game_day=1, match_at=datetime(2025, 6, 12, 18, 0), table=2)
    assert MatchRecord.from_dict(record.to_dict()) == record

    done = record.complete(10, 7, home_best_player_id="a1")
    assert done.is_completed and not done.is_draw
    assert done.home_best_player_id == "a1"
    assert not record.is_completed


@pytest.mark.parametrize(
    "row",
    [
        {"home_team_id": "A", "away_team_id": "B", "status": "postponed"},
        {"home_team_id": "A", "away_team_id": "B", "home_score": -1},
        {"home_team_id": "A", "away_team_id": "B", "home_score": "ten"},
        {"home_team_id": "A"},
    ],
)
def test_bad_match_rows_are_rejected(row):
    with pytest.raises(InvalidMatchDataException):
        MatchRecord.from_dict(row)


def test_team_ref_coercion():
    assert TeamRef.coerce("A") == TeamRef("A", "A")
    assert TeamRef.coerce({"teamId": 3, "name": "Cups"}) == TeamRef("3", "Cups")
    assert str(TeamRef("3", "Cups")) == "Cups"
    assert TeamRef.from_dict(TeamRef("3", "Cups").to_dict()) == TeamRef("3", "Cups")
