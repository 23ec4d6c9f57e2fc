"""Type hints used in Kickoff."""

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from kickoff.models.fixture import Fixture

# Participant id, or the bye sentinel
SlotId = str
# (home slot, away slot)
Pairing = Tuple[SlotId, SlotId]
# All pairings of one round
RoundPairings = List[Pairing]

FixturesByRound = Dict[int, List["Fixture"]]

#  LocalWords:  RoundPairings
