"""Team reference data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class TeamRef:
    """An opaque team identifier plus its display name.

    Attributes
    ----------
    id : str
        Persisted team identifier.
    name : str
        Display name, also the final standings tie-break.
    """

    id: str
    name: str

    def __str__(self) -> str:
        return self.name

    @classmethod
    def coerce(cls, value: Union["TeamRef", str, Dict[str, Any]]) -> "TeamRef":
        """Build a TeamRef from a bare id/name string, a dict or a TeamRef."""
        if isinstance(value, TeamRef):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        return cls(id=str(value), name=str(value))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team reference to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamRef":
        """Deserialize team reference from dictionary."""
        team_id = data.get("id", data.get("teamId"))
        if team_id is None:
            raise KeyError("id")
        return cls(id=str(team_id), name=str(data.get("name") or team_id))
