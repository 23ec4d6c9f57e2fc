"""The tournament snapshot: everything needed to resume a tournament."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from kickoff.models.enums import Stage, TournamentStatus
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.tournament.tournament_config import TournamentConfig


@dataclass
class TournamentState:
    """Container for the complete state of one tournament.

    Attributes
    ----------
    config : TournamentConfig
        Name, format and league options.
    participants : list of Participant
        Registered participants in registration order.
    fixtures : list of Fixture
        Every fixture in creation order. League fixtures stay in place when a
        hybrid tournament moves on to its knockout stage.
    status : TournamentStatus
        SETUP until fixtures are generated, then ACTIVE, then FINISHED.
    current_stage : Stage
        Stage new fixtures are created in.
    winner_id : str or None
        Set once the tournament has a champion.
    """

    config: TournamentConfig = field(default_factory=TournamentConfig)
    participants: List[Participant] = field(default_factory=list)
    fixtures: List[Fixture] = field(default_factory=list)
    status: TournamentStatus = TournamentStatus.SETUP
    current_stage: Stage = Stage.LEAGUE
    winner_id: Optional[str] = None

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        return None

    def get_fixture(self, fixture_id: str) -> Optional[Fixture]:
        for fixture in self.fixtures:
            if fixture.id == fixture_id:
                return fixture
        return None

    def replace_fixture(self, updated: Fixture) -> None:
        """Swap the stored fixture that has ``updated.id`` for ``updated``."""
        for index, fixture in enumerate(self.fixtures):
            if fixture.id == updated.id:
                self.fixtures[index] = updated
                return
        raise KeyError(updated.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the snapshot to dictionary."""
        return {
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.participants],
            "fixtures": [f.to_dict() for f in self.fixtures],
            "status": self.status.value,
            "current_stage": self.current_stage.value,
            "winner_id": self.winner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize the snapshot from dictionary."""
        return cls(
            config=TournamentConfig.from_dict(data.get("config", {})),
            participants=[
                Participant.from_dict(p) for p in data.get("participants", [])
            ],
            fixtures=[Fixture.from_dict(f) for f in data.get("fixtures", [])],
            status=TournamentStatus(data.get("status", TournamentStatus.SETUP.value)),
            current_stage=Stage(data.get("current_stage", Stage.LEAGUE.value)),
            winner_id=data.get("winner_id"),
        )
