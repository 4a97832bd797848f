import random
from datetime import date, datetime, timedelta, timezone

import pytest

from cupleague.constants import TB_CUP_DIFF, TB_POINTS, TB_WINS_REGULAR
from cupleague.exceptions import InvalidMatchDataException, StandingsException
from cupleague.models import MatchRecord, PointSystem, StandingsWindow, TeamRef
from cupleague.standings import (
    StandingsCalculator,
    coerce_window,
    compute_standings,
    score_match,
    summarize_progress,
)
from cupleague.testing import simulate_season


def _row(table, team_id):
    return next(row for row in table if row.team_id == team_id)


def _order(table):
    return [row.team_id for row in table]


# ========== Scoring ==========


def test_regulation_win_scores_three_to_nothing(make_match):
    table = compute_standings([make_match("A", "B", 10, 7)], ["A", "B"])

    winner, loser = _row(table, "A"), _row(table, "B")
    assert (winner.rank, winner.points, winner.wins_regular, winner.cup_diff) == (1, 3, 1, 3)
    assert (loser.rank, loser.points, loser.losses_regular, loser.cup_diff) == (2, 0, 1, -3)
    assert winner.games == loser.games == 1


def test_overtime_win_splits_points_and_caps_differential(make_match):
    table = compute_standings([make_match("A", "B", 16, 11)], ["A", "B"])

    winner, loser = _row(table, "A"), _row(table, "B")
    assert (winner.points, winner.wins_ot, winner.wins_total, winner.cup_diff) == (2, 1, 1, 1)
    assert (loser.points, loser.losses_ot, loser.losses_total, loser.cup_diff) == (1, 1, 1, -1)


def test_away_win_credits_away_team(make_match):
    table = compute_standings([make_match("A", "B", 7, 10)], ["A", "B"])
    assert _order(table) == ["B", "A"]
    assert _row(table, "B").points == 3


@pytest.mark.parametrize(
    "home, away, overtime, cup_diff",
    [
        (11, 10, True, 1),
        (12, 10, True, 2),
        (13, 12, True, 1),
        (14, 12, True, 1),
        (11, 9, False, 2),
        (10, 0, False, 10),
        (14, 5, False, 1),
    ],
)
def test_score_match_rules(home, away, overtime, cup_diff):
    outcome = score_match(home, away)
    assert outcome.home_won
    assert outcome.overtime is overtime
    assert outcome.cup_diff == cup_diff
    assert (outcome.winner_points, outcome.loser_points) == ((2, 1) if overtime else (3, 0))


def test_score_match_has_no_draws():
    assert score_match(10, 10) is None


def test_custom_point_system():
    points = PointSystem(regulation_win_points=2, overtime_win_points=2, overtime_loss_points=0)
    table = compute_standings(
        [MatchRecord("A", "B", 11, 10, status="completed")], ["A", "B"], point_system=points
    )
    assert [row.points for row in table] == [2, 0]
    assert PointSystem.from_dict(points.to_dict()) == points


# ========== Filtering ==========


def test_only_completed_matches_count(make_match):
    matches = [
        make_match("A", "B", 10, 3),
        make_match("B", "A", 10, 3, status="scheduled"),
        make_match("B", "A", 10, 3, status="in_progress"),
        make_match("B", "A", 10, 3, status="cancelled"),
    ]
    table = compute_standings(matches, ["A", "B"])
    assert _row(table, "A").games == 1
    assert _row(table, "B").wins_total == 0


def test_equal_scores_are_skipped(make_match, caplog):
    table = compute_standings([make_match("A", "B", 10, 10)], ["A", "B"])

    assert all(row.games == 0 and row.points == 0 for row in table)
    assert "draws are not possible" in caplog.text


def test_equal_scores_raise_in_strict_mode(make_match):
    with pytest.raises(InvalidMatchDataException):
        compute_standings([make_match("A", "B", 10, 10)], ["A", "B"], strict=True)


def test_matches_against_unknown_teams_are_skipped(make_match):
    table = compute_standings(
        [make_match("A", "X", 10, 0), make_match("A", "B", 10, 4)], ["A", "B"]
    )
    assert _order(table) == ["A", "B"]
    assert _row(table, "A").games == 1


def test_teams_without_games_still_ranked(make_match):
    table = compute_standings(
        [make_match("A", "B", 10, 4)], [TeamRef("A", "Alpha"), TeamRef("B", "Bravo"), TeamRef("C", "Charlie")]
    )
    assert _order(table) == ["A", "C", "B"]
    assert [row.rank for row in table] == [1, 2, 3]
    assert _row(table, "C").to_dict()["losses_total"] == 0


def test_persisted_rows_are_accepted():
    row = {
        "homeTeamId": "A",
        "awayTeamId": "B",
        "homeTeamScore": 10,
        "awayTeamScore": 2,
        "matchStatus": "completed",
        "matchRound": 1,
        "gameDay": 1,
    }
    table = compute_standings([row], [{"id": "A", "name": "Alpha"}, {"id": "B", "name": "Bravo"}])
    assert _order(table) == ["A", "B"]
    assert table[0].name == "Alpha"


# ========== Ranking ==========


def test_total_wins_break_points_ties(make_match):
    matches = [
        make_match("A", "D", 10, 5),
        make_match("C", "B", 12, 10),
        make_match("D", "B", 11, 10),
        make_match("C", "B", 11, 10),
    ]
    table = compute_standings(matches, ["A", "B", "C", "D"])

    assert _order(table) == ["C", "A", "B", "D"]
    assert (_row(table, "A").points, _row(table, "B").points) == (3, 3)


def test_cup_difference_breaks_win_ties(make_match):
    matches = [make_match("A", "C", 10, 2), make_match("B", "D", 10, 8)]
    table = compute_standings(matches, ["A", "B", "C", "D"])
    assert _order(table) == ["A", "B", "D", "C"]


def test_regulation_wins_break_cup_difference_ties(make_match):
    matches = [
        make_match("X", "P", 10, 9),
        make_match("X", "Q", 10, 11),
        make_match("Y", "P", 12, 10),
        make_match("Y", "Q", 10, 11),
        make_match("Y", "P", 10, 11),
    ]
    table = compute_standings(matches, ["P", "Q", "X", "Y"])

    assert _order(table) == ["Q", "X", "Y", "P"]
    x, y = _row(table, "X"), _row(table, "Y")
    assert (x.points, x.wins_total, x.cup_diff) == (y.points, y.wins_total, y.cup_diff)


def test_name_closes_the_order_case_insensitively():
    teams = [TeamRef("3", "Charlie"), TeamRef("1", "alpha"), TeamRef("2", "Bravo")]
    table = compute_standings([], teams)
    assert [row.name for row in table] == ["alpha", "Bravo", "Charlie"]


def test_custom_tiebreak_order(make_match):
    matches = [
        make_match("P", "R", 10, 9),
        make_match("P", "S", 10, 9),
        make_match("Q", "R", 10, 0),
    ]
    teams = ["P", "Q", "R", "S"]
    assert _order(compute_standings(matches, teams)) == ["P", "Q", "S", "R"]

    calculator = StandingsCalculator(tiebreak_order=[TB_CUP_DIFF, TB_POINTS, TB_WINS_REGULAR])
    assert _order(calculator.calculate(matches, teams)) == ["Q", "P", "S", "R"]


def test_unknown_tiebreak_key_is_rejected():
    with pytest.raises(StandingsException):
        StandingsCalculator(tiebreak_order=["points", "style"])


def test_standings_do_not_depend_on_match_order():
    season = simulate_season(6, [5, 5], seed=11, tables=3)
    shuffled = list(season.matches)
    random.Random(5).shuffle(shuffled)

    assert compute_standings(shuffled, season.teams) == compute_standings(
        season.matches, season.teams
    )


# ========== Windows ==========


def test_round_window_equals_prefilter():
    season = simulate_season(6, [5, 5], seed=3, tables=3)
    last_round = max(m.round for m in season.matches)

    for round_number in range(1, last_round + 1):
        windowed = compute_standings(
            season.matches, season.teams, {"upto_round": round_number}
        )
        prefiltered = compute_standings(
            [m for m in season.matches if m.round <= round_number], season.teams
        )
        assert windowed == prefiltered


def test_gameday_windows(make_match):
    matches = [
        make_match("A", "B", 10, 0, round=1, game_day=1),
        make_match("B", "A", 10, 0, round=2, game_day=2),
        make_match("B", "A", 10, 0, round=3, game_day=2),
        make_match("A", "B", 10, 0, round=4, game_day=None),
    ]

    upto_first = compute_standings(matches, ["A", "B"], {"uptoGameDay": 1})
    assert _row(upto_first, "A").games == 1

    second_only = compute_standings(matches, ["A", "B"], StandingsWindow(game_day=2))
    assert _row(second_only, "B").wins_total == 2
    assert _row(second_only, "A").games == 2

    combined = compute_standings(matches, ["A", "B"], {"upto_game_day": 2, "upto_round": 2})
    assert _row(combined, "A").games == 2


def test_round_window_excludes_matches_without_round(make_match):
    matches = [make_match("A", "B", 10, 0, round=None)]
    table = compute_standings(matches, ["A", "B"], {"upto_round": 5})
    assert _row(table, "A").games == 0


def test_date_window_is_half_open(make_match):
    matches = [
        make_match("A", "B", 10, 0, match_at=datetime(2025, 6, 12, 0, 0)),
        make_match("A", "B", 10, 0, match_at=datetime(2025, 6, 12, 23, 59)),
        make_match("B", "A", 10, 0, match_at=datetime(2025, 6, 13, 0, 0)),
    ]

    june_12 = compute_standings(matches, ["A", "B"], {"date": "2025-06-12"})
    assert _row(june_12, "A").wins_total == 2
    assert _row(june_12, "B").wins_total == 0

    june_13 = compute_standings(matches, ["A", "B"], StandingsWindow(date=date(2025, 6, 13)))
    assert _row(june_13, "B").wins_total == 1


def test_date_window_uses_match_timezone(make_match):
    cest = timezone(timedelta(hours=2))
    matches = [make_match("A", "B", 10, 0, match_at=datetime(2025, 6, 13, 1, 0, tzinfo=cest))]

    table = compute_standings(matches, ["A", "B"], {"date": "2025-06-13"})
    assert _row(table, "A").wins_total == 1


def test_coerce_window():
    assert coerce_window(None) is None
    assert coerce_window({"gameDay": 2, "date": "2025-06-12"}) == StandingsWindow(
        game_day=2, date=date(2025, 6, 12)
    )
    assert coerce_window({"upto_round": None}).is_empty
    with pytest.raises(StandingsException):
        coerce_window({"season": 1})


def test_summarize_progress(make_match):
    matches = [
        make_match("A", "B", 10, 0, round=1),
        make_match("B", "A", 0, 0, round=2, status="scheduled"),
        make_match("A", "B", 0, 0, round=None, status="scheduled"),
    ]
    progress = summarize_progress(matches)

    assert (progress.total_matches, progress.completed_matches) == (3, 1)
    assert progress.remaining_matches == 2
    assert progress.highest_round == 2
    assert summarize_progress([]).highest_round == 0
