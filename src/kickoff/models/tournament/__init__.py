"""Tournament-level data models.

The orchestrating :class:`~kickoff.models.tournament.tournament.Tournament`
lives in its own module and is imported from there, so that the controllers
can depend on the snapshot types without a circular import.
"""

from kickoff.models.tournament.tournament_config import TournamentConfig
from kickoff.models.tournament.tournament_state import TournamentState

__all__ = ["TournamentConfig", "TournamentState"]
