"""Validation utilities for Cup League.

These helpers serve the caller-facing boundary (an HTTP handler, a CLI)
before values reach the scheduler or the standings engine, which assume
validated input.
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

import math
from typing import Any, List, Optional, Sequence, Union

from cupleague.exceptions import ValidationException
from cupleague.models.standings import StandingsWindow
from cupleague.utils.clock import parse_clock, to_date


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Day Plan Validation ==========


def validate_day_plan(plan: Union[str, Sequence[Any], None]) -> ValidationResult:
    """Validate a rounds-per-day plan.

    Accepts either a list of integers or the dash separated form used in
    query strings, e.g. ``"4-5-4-5-4"``.

    Returns:
        ValidationResult whose sanitized value is the list of integers

    Example:
        >>> validate_day_plan("3-3").sanitized_value
        [3, 3]
    """
    if plan is None or (isinstance(plan, str) and not plan.strip()):
        return ValidationResult(
            is_valid=False, error_message="A rounds-per-day plan is required"
        )

    raw = plan.split("-") if isinstance(plan, str) else list(plan)
    if not raw:
        return ValidationResult(
            is_valid=False, error_message="A rounds-per-day plan is required"
        )

    entries: List[int] = []
    for item in raw:
        value = _as_positive_int(item)
        if value is None:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    "The rounds-per-day plan may only contain positive integers, "
                    f"got {item!r}"
                ),
            )
        entries.append(value)

    return ValidationResult(is_valid=True, sanitized_value=entries)


def parse_day_plan(plan: Union[str, Sequence[Any]]) -> List[int]:
    """Parse a rounds-per-day plan or raise.

    Raises:
        ValidationException: If the plan is empty or has a non-positive entry
    """
    result = validate_day_plan(plan)
    if not result.is_valid:
        raise ValidationException(result.error_message)
    return result.sanitized_value


def _as_positive_int(item: Any) -> Optional[int]:
    if isinstance(item, bool):
        return None
    if isinstance(item, str):
        item = item.strip()
        if not item.isdigit():
            return None
        item = int(item)
    if isinstance(item, float):
        if not math.isfinite(item) or not item.is_integer():
            return None
        item = int(item)
    if not isinstance(item, int) or item <= 0:
        return None
    return item


# ========== Clock Validation ==========


def validate_clock(value: Optional[str]) -> ValidationResult:
    """Validate an ``HH:MM`` start time; the sanitized value is zero padded."""
    if not value or not str(value).strip():
        return ValidationResult(is_valid=False, error_message="A start time is required")
    try:
        minutes = parse_clock(str(value))
    except ValueError as e:
        return ValidationResult(is_valid=False, error_message=str(e))
    return ValidationResult(
        is_valid=True, sanitized_value=f"{minutes // 60:02d}:{minutes % 60:02d}"
    )


# ========== Standings Window Validation ==========


def validate_window(
    upto_game_day: Any = None,
    upto_round: Any = None,
    game_day: Any = None,
    date: Any = None,
) -> ValidationResult:
    """Validate raw standings window parameters.

    Gameday and round bounds must be finite positive integers and the date
    must be an ISO calendar date. Omitted parameters stay unbounded.

    Returns:
        ValidationResult whose sanitized value is a StandingsWindow
    """
    numbers = {}
    for label, raw in (
        ("upto_game_day", upto_game_day),
        ("upto_round", upto_round),
        ("game_day", game_day),
    ):
        if raw is None or raw == "":
            numbers[label] = None
            continue
        value = _as_positive_int(raw)
        if value is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"{label} must be a positive integer, got {raw!r}",
            )
        numbers[label] = value

    day = None
    if date:
        try:
            day = to_date(date)
        except (ValueError, OverflowError, TypeError):
            return ValidationResult(
                is_valid=False, error_message=f"Invalid date {date!r}, expected YYYY-MM-DD"
            )

    return ValidationResult(
        is_valid=True,
        sanitized_value=StandingsWindow(date=day, **numbers),
    )
