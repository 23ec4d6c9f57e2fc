from kickoff.models.enums import FixtureStatus, Stage, TournamentFormat, TournamentStatus
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.standings import StandingsRow
from kickoff.models.tournament import TournamentConfig, TournamentState

__all__ = [
    "Participant",
    "Fixture",
    "FixtureStatus",
    "Stage",
    "StandingsRow",
    "TournamentConfig",
    "TournamentFormat",
    "TournamentState",
    "TournamentStatus",
]
