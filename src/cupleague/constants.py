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

# --- Scheduler defaults ---
DEFAULT_START_TIME = "08:00"
DEFAULT_MATCH_DURATION = 40  # minutes
DEFAULT_TABLES = 6
MINUTES_PER_DAY = 24 * 60

# Display label for the synthetic opponent of an odd team count
BYE_LABEL = "BYE"

# --- Match status values (as persisted) ---
STATUS_SCHEDULED = "scheduled"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"

MATCH_STATUSES = (
    STATUS_SCHEDULED,
    STATUS_IN_PROGRESS,
    STATUS_COMPLETED,
    STATUS_CANCELLED,
)

# --- Point system defaults ---
# A game is overtime when the winner passed the target and the loser reached it.
REGULATION_TARGET = 10
REGULATION_WIN_POINTS = 3
REGULATION_LOSS_POINTS = 0
OVERTIME_WIN_POINTS = 2
OVERTIME_LOSS_POINTS = 1

# Winning scores above this count as the capped differential
CUP_DIFF_CAP_THRESHOLD = 13
CAPPED_CUP_DIFF = 1

# --- Standings sort keys ---
TB_POINTS = "points"
TB_WINS_TOTAL = "wins_total"
TB_CUP_DIFF = "cup_diff"
TB_WINS_REGULAR = "wins_regular"
TB_WINS_OT = "wins_ot"
TB_GAMES = "games"

# Default display names for standings columns
TIEBREAK_NAMES = {
    TB_POINTS: "Points",
    TB_WINS_TOTAL: "Wins",
    TB_CUP_DIFF: "Cup Difference",
    TB_WINS_REGULAR: "Regulation Wins",
    TB_WINS_OT: "Overtime Wins",
    TB_GAMES: "Games Played",
}

# Default order used for ranking if not configured otherwise.
# Team name ascending always closes the ordering.
DEFAULT_STANDINGS_SORT_ORDER = [
    TB_POINTS,
    TB_WINS_TOTAL,
    TB_CUP_DIFF,
    TB_WINS_REGULAR,
]
