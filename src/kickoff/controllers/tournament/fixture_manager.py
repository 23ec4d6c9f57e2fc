"""Fixture management for tournaments.

This module handles all fixture-related operations including choosing the
generator for a format, manual fixtures, the hybrid league-to-knockout
transition and drawing later knockout rounds.
"""

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

from kickoff.constants import BYE_ID, MANUAL_ROUND, MIN_PARTICIPANTS
from kickoff.exceptions import (
    InvalidFixtureException,
    InvalidParticipantCountException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from kickoff.models.enums import Stage, TournamentFormat
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.standings import StandingsRow
from kickoff.models.tournament.tournament_state import TournamentState
from kickoff.pairing import generate_knockout_bracket, generate_league_fixtures
from kickoff.type_hints import FixturesByRound
from kickoff.utils import setup_logger

logger = setup_logger(__name__)


class FixtureManager:
    """Manages fixture creation for a tournament snapshot.

    This class is responsible for:
    - Selecting the generator that matches the tournament format
    - Validating and creating manual fixtures
    - Seeding league finishers into a knockout bracket (hybrid format)
    - Drawing each knockout round from the winners of the previous one

    It never edits results; see :class:`ResultRecorder`.
    """

    def __init__(self, state: TournamentState):
        """Initialize the fixture manager.

        Args:
            state: The snapshot whose fixtures are managed
        """
        self.state = state

    # ========== Generation ==========

    def generate_initial_fixtures(self) -> Tuple[List[Fixture], Stage]:
        """Generate the opening fixtures for the configured format.

        Knockout tournaments start with a bracket seeded in registration
        order. League and hybrid tournaments start with the league schedule.

        Returns:
            Tuple of (fixtures, stage they belong to)

        Raises:
            InvalidParticipantCountException: If fewer than two participants
        """
        participants = self.state.participants
        if len(participants) < MIN_PARTICIPANTS:
            raise InvalidParticipantCountException(len(participants))

        if self.state.config.format == TournamentFormat.KNOCKOUT:
            return generate_knockout_bracket(participants), Stage.KNOCKOUT

        fixtures = generate_league_fixtures(
            participants, double_leg=self.state.config.double_leg
        )
        return fixtures, Stage.LEAGUE

    def create_manual_fixture(
        self, home_id: Optional[str], away_id: Optional[str]
    ) -> Fixture:
        """Create a fixture outside the generated schedule.

        The fixture joins the current stage and gets ``MANUAL_ROUND`` so it
        is listed after every generated round.

        Raises:
            InvalidFixtureException: If a side is missing or both sides match
            ParticipantNotFoundException: If a side is not registered
        """
        if not home_id or not away_id:
            raise InvalidFixtureException("Both home and away must be selected")
        if home_id == away_id:
            raise InvalidFixtureException("A participant cannot play itself")

        for participant_id in (home_id, away_id):
            if participant_id == BYE_ID or self.state.get_participant(participant_id) is None:
                raise ParticipantNotFoundException(
                    f"Unknown participant: {participant_id}"
                )

        fixture = Fixture.scheduled(
            home_id, away_id, MANUAL_ROUND, self.state.current_stage, is_manual=True
        )
        logger.info(f"Created manual fixture {home_id} vs {away_id}")
        return fixture

    def create_knockout_from_standings(
        self, standings: Sequence[StandingsRow]
    ) -> List[Fixture]:
        """Seed the top of the league table into a knockout bracket.

        Args:
            standings: Sorted league table, best first

        Returns:
            First knockout round fixtures

        Raises:
            InvalidParticipantCountException: If fewer than two qualify
        """
        qualifiers = self.state.config.knockout_qualifiers
        seeded = [
            participant
            for participant in (
                self.state.get_participant(row.participant_id)
                for row in standings[:qualifiers]
            )
            if participant is not None
        ]

        if len(seeded) < MIN_PARTICIPANTS:
            raise InvalidParticipantCountException(len(seeded))

        logger.info(
            "Qualified for knockout: %s", ", ".join(p.name for p in seeded)
        )
        return generate_knockout_bracket(seeded)

    def draw_next_knockout_round(self) -> Tuple[List[Fixture], Optional[str]]:
        """Draw the next knockout round from the latest completed one.

        Winners are taken in fixture order, so the winner of the first
        fixture meets the winner of the last one. Bye fixtures count as
        played, so their winners move on like everyone else.

        Returns:
            Tuple of (new fixtures, champion id). Exactly one is meaningful:
            when the completed round was the final, the fixture list is
            empty and the champion is set.

        Raises:
            TournamentStateException: If there is no knockout round, a fixture
                is unplayed, or a fixture ended level
        """
        current_round = self.latest_knockout_round()
        if current_round is None:
            raise TournamentStateException("No knockout round has been drawn yet")

        round_fixtures = self.knockout_round_fixtures(current_round)
        unplayed = [f for f in round_fixtures if not f.is_played]
        if unplayed:
            raise TournamentStateException(
                f"Round of {current_round} still has {len(unplayed)} unplayed fixture(s)"
            )

        drawn = [f for f in round_fixtures if f.is_draw]
        if drawn:
            raise TournamentStateException(
                f"Knockout fixture {drawn[0].id} ended level; record a decisive result"
            )

        winners = [self._require_participant(f.winner_id) for f in round_fixtures]
        if len(winners) == 1:
            logger.info(f"Champion decided: {winners[0].name}")
            return [], winners[0].id

        return generate_knockout_bracket(winners), None

    # ========== Queries ==========

    def latest_knockout_round(self) -> Optional[int]:
        """Smallest generated knockout round (the one furthest along), or None."""
        rounds = [
            f.round
            for f in self.state.fixtures
            if f.stage == Stage.KNOCKOUT and not f.is_manual
        ]
        return min(rounds) if rounds else None

    def knockout_round_fixtures(self, round_number: int) -> List[Fixture]:
        return [
            f
            for f in self.state.fixtures
            if f.stage == Stage.KNOCKOUT and not f.is_manual and f.round == round_number
        ]

    def fixtures_for_stage(self, stage: Optional[Stage] = None) -> List[Fixture]:
        if stage is None:
            return list(self.state.fixtures)
        return [f for f in self.state.fixtures if f.stage == stage]

    def fixtures_by_round(self, stage: Stage) -> FixturesByRound:
        """Group the fixtures of one stage by round, in playing order.

        League rounds ascend (matchday 1 first), knockout rounds descend
        (round of 8 before the final). Manual fixtures always come last.
        """
        grouped: FixturesByRound = {}
        for fixture in self.fixtures_for_stage(stage):
            grouped.setdefault(fixture.round, []).append(fixture)

        def order(round_number: int):
            if round_number == MANUAL_ROUND:
                return (1, 0)
            return (0, -round_number if stage == Stage.KNOCKOUT else round_number)

        return {r: grouped[r] for r in sorted(grouped, key=order)}

    def _require_participant(self, participant_id: Optional[str]) -> Participant:
        participant = (
            self.state.get_participant(participant_id) if participant_id else None
        )
        if participant is None:
            raise ParticipantNotFoundException(
                f"Unknown participant: {participant_id}"
            )
        return participant
