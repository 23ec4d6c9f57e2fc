"""Single elimination bracket generation."""

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

from typing import List, Sequence

from kickoff.constants import BYE_ID, BYE_LOSS_SCORE, BYE_WIN_MARGIN, MIN_PARTICIPANTS
from kickoff.exceptions import InvalidParticipantCountException
from kickoff.models.enums import Stage
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.type_hints import RoundPairings
from kickoff.utils import setup_logger

logger = setup_logger(__name__)


def bracket_size(num_participants: int) -> int:
    """Smallest power of two that holds every participant (at least 2)."""
    size = 2
    while size < num_participants:
        size *= 2
    return size


def count_byes(num_participants: int) -> int:
    """Number of bye slots needed to fill the bracket."""
    return bracket_size(num_participants) - num_participants


def seed_pairings(seed_ids: Sequence[str]) -> RoundPairings:
    """Pair seeds first against last, second against second-last, and so on.

    ``seed_ids`` is padded with ``BYE_ID`` up to the bracket size first, so
    byes always land on the away side of the best seeds.
    """
    size = bracket_size(len(seed_ids))
    slots = list(seed_ids) + [BYE_ID] * (size - len(seed_ids))
    return [(slots[i], slots[size - 1 - i]) for i in range(size // 2)]


def generate_knockout_bracket(participants: Sequence[Participant]) -> List[Fixture]:
    """Generate the first round of a single elimination bracket.

    Args:
        participants: Participants ordered by seed, best first. No seeding
            weight is applied beyond position.

    Returns:
        ``size / 2`` fixtures sharing ``round = size``. Fixtures against a bye
        are already played and won 3-0 by the real participant, so the next
        round can be drawn without entering them by hand.

    Raises:
        InvalidParticipantCountException: If fewer than two participants
    """
    if len(participants) < MIN_PARTICIPANTS:
        raise InvalidParticipantCountException(len(participants))

    size = bracket_size(len(participants))
    fixtures: List[Fixture] = []

    for home_id, away_id in seed_pairings([p.id for p in participants]):
        fixture = Fixture.scheduled(home_id, away_id, size, Stage.KNOCKOUT)
        if away_id == BYE_ID:
            fixture = fixture.with_result(BYE_WIN_MARGIN, BYE_LOSS_SCORE)
            logger.debug(f"{home_id} advances on a bye")
        elif home_id == BYE_ID:
            fixture = fixture.with_result(BYE_LOSS_SCORE, BYE_WIN_MARGIN)
            logger.debug(f"{away_id} advances on a bye")
        fixtures.append(fixture)

    logger.info(
        f"Generated knockout round of {size}: {len(fixtures)} fixtures, "
        f"{count_byes(len(participants))} byes"
    )
    return fixtures
