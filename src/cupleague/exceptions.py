"""Exceptions for use in Cup League"""

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


# ========== Base Application Exception ==========


class CupLeagueException(Exception):
    """Base exception for all Cup League errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all library-specific errors with a single except clause.
    """

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(CupLeagueException):
    """Base exception for fixture generation errors."""

    pass


class ConfigurationError(ScheduleException):
    """Raised when the scheduler is called with an unusable configuration.

    Covers too few teams, duplicate teams, a table count outside
    ``[1, teams // 2]``, a malformed start time and a non-positive
    match duration.
    """

    pass


class InvalidDayPlanException(ConfigurationError):
    """Raised when the per-day round plan is empty or has non-positive entries."""

    pass


# ========== Standings Exceptions ==========


class StandingsException(CupLeagueException):
    """Base exception for standings computation errors."""

    pass


class InvalidMatchDataException(StandingsException):
    """Raised when a match row cannot be used for ranking.

    Negative scores and unknown statuses always raise. Equal scores only
    raise when standings are computed in strict mode.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(CupLeagueException):
    """Base exception for caller-boundary validation errors."""

    pass
