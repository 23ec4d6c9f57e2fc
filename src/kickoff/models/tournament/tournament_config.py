"""TournamentConfig data class."""

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

from kickoff.constants import DEFAULT_KNOCKOUT_QUALIFIERS
from kickoff.models.enums import TournamentFormat


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    format : TournamentFormat
        League, knockout, or hybrid (league followed by a knockout bracket).
    double_leg : bool
        League fixtures are played home and away.
    knockout_qualifiers : int
        Hybrid only: number of top league finishers seeded into the bracket.
    """

    name: str = "Untitled Tournament"
    format: TournamentFormat = TournamentFormat.LEAGUE
    double_leg: bool = False
    knockout_qualifiers: int = DEFAULT_KNOCKOUT_QUALIFIERS

    def __post_init__(self) -> None:
        self.format = TournamentFormat(self.format)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format.value,
            "double_leg": self.double_leg,
            "knockout_qualifiers": self.knockout_qualifiers,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            format=TournamentFormat(data.get("format", TournamentFormat.LEAGUE.value)),
            double_leg=data.get("double_leg", False),
            knockout_qualifiers=data.get(
                "knockout_qualifiers", DEFAULT_KNOCKOUT_QUALIFIERS
            ),
        )
