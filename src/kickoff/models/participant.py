"""A participant registered in a tournament."""

# Kickoff
# Copyright (C) 2025  Kickoff developers
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
from typing import Any, Dict

from kickoff.utils import generate_id
from kickoff.utils.validation import validate_name_strict, validate_team_strict


@dataclass
class Participant:
    """Represents a participant in the tournament.

    Attributes
    ----------
    id : str
        Opaque unique identifier. Fixtures reference participants by id only,
        so editing ``name`` or ``team`` never affects existing fixtures.
    name : str
        Display name of the participant.
    team : str
        Team label the participant plays with.
    """

    id: str
    name: str
    team: str

    @classmethod
    def create(cls, name: str, team: str) -> "Participant":
        """Register a new participant with a fresh id and validated labels.

        Raises:
            NameValidationException: If name or team is empty or too long
        """
        return cls(
            id=generate_id(cls.__name__),
            name=validate_name_strict(name),
            team=validate_team_strict(team),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.team})"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"id": self.id, "name": self.name, "team": self.team}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(id=data["id"], name=data["name"], team=data.get("team", ""))
