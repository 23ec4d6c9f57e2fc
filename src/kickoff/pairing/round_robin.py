"""Round Robin (league) fixture generation."""

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

from typing import List, Optional, Sequence, Tuple

from kickoff.constants import BYE_ID, MIN_PARTICIPANTS
from kickoff.exceptions import InvalidParticipantCountException
from kickoff.models.enums import Stage
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.type_hints import RoundPairings
from kickoff.utils import setup_logger

logger = setup_logger(__name__)


class RoundRobin:
    """Berger-table schedule built with the circle method.

    The first participant stays fixed while everybody else rotates one seat
    clockwise after each round. With an odd number of participants a bye slot
    is added so the table has even length; whoever meets the bye slot sits
    that round out.

    Attributes:
        slots: Working order of participant ids (bye slot included)
        number_of_rounds: Rounds needed for everyone to meet once
        has_bye: Whether a bye slot was added
    """

    def __init__(self, participant_ids: Sequence[str]):
        if len(participant_ids) < MIN_PARTICIPANTS:
            raise InvalidParticipantCountException(len(participant_ids))

        self.slots: List[str] = list(participant_ids)
        self.has_bye = len(self.slots) % 2 == 1
        if self.has_bye:
            self.slots.append(BYE_ID)

        self.number_of_rounds = len(self.slots) - 1
        self._rounds: List[Tuple[RoundPairings, Optional[str]]] = self._build()

    def _build(self) -> List[Tuple[RoundPairings, Optional[str]]]:
        working = list(self.slots)
        size = len(working)
        rounds = []

        for _ in range(self.number_of_rounds):
            pairings: RoundPairings = []
            bye_id = None
            for i in range(size // 2):
                home, away = working[i], working[size - 1 - i]
                if home == BYE_ID:
                    bye_id = away
                elif away == BYE_ID:
                    bye_id = home
                else:
                    pairings.append((home, away))
            rounds.append((pairings, bye_id))

            # Position 0 never moves
            working.insert(1, working.pop())

        return rounds

    def get_round_pairings(
        self, round_number: int
    ) -> Tuple[RoundPairings, Optional[str]]:
        """Get pairings for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            Tuple of (list of (home_id, away_id), id sitting out or None)

        Raises:
            ValueError: If round_number is outside 1..number_of_rounds
        """
        if not 1 <= round_number <= self.number_of_rounds:
            raise ValueError(
                f"Round {round_number} out of range 1..{self.number_of_rounds}"
            )
        pairings, bye_id = self._rounds[round_number - 1]
        return list(pairings), bye_id


def create_round_robin(participants: Sequence[Participant]) -> RoundRobin:
    """Build a RoundRobin table for the given participants, in order."""
    return RoundRobin([p.id for p in participants])


def generate_league_fixtures(
    participants: Sequence[Participant], double_leg: bool = False
) -> List[Fixture]:
    """Generate every league fixture for the participants.

    Args:
        participants: Participants in registration order; the first one is
            the fixed seat of the circle
        double_leg: Add a return leg with home and away swapped

    Returns:
        Fixtures ordered by round. With ``double_leg`` the second leg follows
        the first, its rounds continuing after the last first-leg round.

    Raises:
        InvalidParticipantCountException: If fewer than two participants
    """
    schedule = create_round_robin(participants)

    first_leg: List[Fixture] = []
    for round_number in range(1, schedule.number_of_rounds + 1):
        pairings, bye_id = schedule.get_round_pairings(round_number)
        for home_id, away_id in pairings:
            first_leg.append(
                Fixture.scheduled(home_id, away_id, round_number, Stage.LEAGUE)
            )
        if bye_id is not None:
            logger.debug(f"Round {round_number}: {bye_id} has a bye")

    if not double_leg:
        logger.info(
            f"Generated {len(first_leg)} league fixtures over "
            f"{schedule.number_of_rounds} rounds"
        )
        return first_leg

    second_leg = []
    for fixture in first_leg:
        return_fixture = fixture.reversed()
        return_fixture.round = fixture.round + schedule.number_of_rounds
        second_leg.append(return_fixture)

    logger.info(
        f"Generated {len(first_leg) * 2} league fixtures over "
        f"{schedule.number_of_rounds * 2} rounds (double leg)"
    )
    return first_leg + second_leg
