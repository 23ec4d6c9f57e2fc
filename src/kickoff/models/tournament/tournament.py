"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
fixture, result and standings managers around a single snapshot.
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

from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from kickoff.constants import (
    DEFAULT_KNOCKOUT_QUALIFIERS,
    MIN_PARTICIPANTS,
    PREDICTION_NOT_ENOUGH_DATA,
)
from kickoff.controllers.tournament import (
    FixtureManager,
    ResultRecorder,
    StandingsCalculator,
)
from kickoff.exceptions import (
    DuplicateParticipantException,
    InvalidFixtureException,
    InvalidParticipantCountException,
    InvalidResultException,
    ParticipantNotFoundException,
    TournamentStateException,
)
from kickoff.models.enums import Stage, TournamentFormat, TournamentStatus
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.standings import StandingsRow
from kickoff.type_hints import FixturesByRound
from kickoff.utils import setup_logger
from kickoff.utils.validation import validate_name_strict, validate_team_strict

from .tournament_config import TournamentConfig
from .tournament_state import TournamentState

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - FixtureManager: picks the generator, manual fixtures, knockout draws
    - ResultRecorder: manages result entry and validation
    - StandingsCalculator: computes the league table

    The Tournament owns one :class:`TournamentState` and is the only place
    that moves it through its lifecycle (SETUP, ACTIVE, FINISHED).
    """

    def __init__(
        self,
        name: str = "Untitled Tournament",
        tournament_format: Union[TournamentFormat, str] = TournamentFormat.LEAGUE,
        double_leg: bool = False,
        knockout_qualifiers: int = DEFAULT_KNOCKOUT_QUALIFIERS,
    ) -> None:
        """Initialize a new tournament in setup.

        Args:
            name: Tournament name
            tournament_format: League, knockout or hybrid
            double_leg: League fixtures are played home and away
            knockout_qualifiers: Hybrid only, how many league finishers advance
        """
        if knockout_qualifiers < MIN_PARTICIPANTS:
            raise InvalidParticipantCountException(knockout_qualifiers)

        config = TournamentConfig(
            name=name,
            format=TournamentFormat(tournament_format),
            double_leg=double_leg,
            knockout_qualifiers=knockout_qualifiers,
        )
        self._attach(TournamentState(config=config))

    def _attach(self, state: TournamentState) -> None:
        self.state = state
        self.fixture_manager = FixtureManager(state)
        self.result_recorder = ResultRecorder(state)
        self.standings_calculator = StandingsCalculator()

    # ========== Properties ==========

    @property
    def config(self) -> TournamentConfig:
        return self.state.config

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.state.config.name

    @name.setter
    def name(self, value: str) -> None:
        """Set tournament name."""
        self.state.config.name = validate_name_strict(
            value, label="Tournament name", reserve_bye=False
        )

    @property
    def format(self) -> TournamentFormat:
        return self.state.config.format

    @property
    def double_leg(self) -> bool:
        return self.state.config.double_leg

    @property
    def status(self) -> TournamentStatus:
        return self.state.status

    @property
    def current_stage(self) -> Stage:
        return self.state.current_stage

    @property
    def participants(self) -> List[Participant]:
        """Registered participants in registration order (a copy)."""
        return list(self.state.participants)

    @property
    def winner_id(self) -> Optional[str]:
        return self.state.winner_id

    @property
    def winner(self) -> Optional[Participant]:
        """The champion, once decided."""
        if self.state.winner_id is None:
            return None
        return self.state.get_participant(self.state.winner_id)

    # ========== Participant Management ==========

    def get_participant(self, participant_id: str) -> Participant:
        """Look up a registered participant.

        Raises:
            ParticipantNotFoundException: If the id is not registered
        """
        participant = self.state.get_participant(participant_id)
        if participant is None:
            raise ParticipantNotFoundException(f"Unknown participant: {participant_id}")
        return participant

    def add_participant(self, name: str, team: str) -> Participant:
        """Register a participant.

        Args:
            name: Display name, trimmed before storing
            team: Team label, trimmed before storing

        Returns:
            The new participant with a fresh id

        Raises:
            TournamentStateException: If the tournament has already started
            NameValidationException: If name or team is invalid
        """
        self._require_status(TournamentStatus.SETUP, "add participants")
        participant = Participant.create(name, team)
        self._register(participant)
        logger.info(f"Added participant: {participant} ({participant.id})")
        return participant

    def _register(self, participant: Participant) -> None:
        if self.state.get_participant(participant.id) is not None:
            raise DuplicateParticipantException(
                f"Participant id already registered: {participant.id}"
            )
        self.state.participants.append(participant)

    def update_participant(
        self,
        participant_id: str,
        name: Optional[str] = None,
        team: Optional[str] = None,
    ) -> Participant:
        """Rename a participant or change their team.

        Allowed at any point of the tournament; fixtures reference the id, so
        they are unaffected.

        Raises:
            ParticipantNotFoundException: If the id is not registered
            NameValidationException: If a new name or team is invalid
        """
        participant = self.get_participant(participant_id)
        changes: Dict[str, str] = {}
        if name is not None:
            changes["name"] = validate_name_strict(name)
        if team is not None:
            changes["team"] = validate_team_strict(team)
        if not changes:
            return participant

        updated = replace(participant, **changes)
        index = self.state.participants.index(participant)
        self.state.participants[index] = updated
        logger.info(f"Updated participant {participant_id}: {updated}")
        return updated

    def remove_participant(self, participant_id: str) -> Participant:
        """Unregister a participant.

        Raises:
            TournamentStateException: If the tournament has already started
            ParticipantNotFoundException: If the id is not registered
        """
        self._require_status(TournamentStatus.SETUP, "remove participants")
        participant = self.get_participant(participant_id)
        self.state.participants.remove(participant)
        logger.info(f"Removed participant: {participant} ({participant_id})")
        return participant

    # ========== Configuration ==========

    def set_format(self, tournament_format: Union[TournamentFormat, str]) -> None:
        """Choose league, knockout or hybrid. Setup only."""
        self._require_status(TournamentStatus.SETUP, "change the format")
        self.state.config.format = TournamentFormat(tournament_format)

    def set_double_leg(self, double_leg: bool) -> None:
        """Play league fixtures home and away. Setup only."""
        self._require_status(TournamentStatus.SETUP, "change the league legs")
        self.state.config.double_leg = bool(double_leg)

    # ========== Lifecycle ==========

    def start(self) -> List[Fixture]:
        """Generate the opening fixtures and activate the tournament.

        Returns:
            The generated fixtures

        Raises:
            TournamentStateException: If the tournament is not in setup
            InvalidParticipantCountException: If fewer than two participants
        """
        self._require_status(TournamentStatus.SETUP, "start")

        fixtures, stage = self.fixture_manager.generate_initial_fixtures()
        self.state.fixtures = list(fixtures)
        self.state.current_stage = stage
        self.state.status = TournamentStatus.ACTIVE

        logger.info(
            f"Started {self.format.value.lower()} tournament '{self.name}' with "
            f"{len(self.state.participants)} participants and {len(fixtures)} fixtures"
        )
        return list(fixtures)

    def finish(self) -> Optional[Participant]:
        """Close an active tournament.

        In a league, the table leader becomes the winner if none is set yet.

        Returns:
            The winner, if any
        """
        self._require_status(TournamentStatus.ACTIVE, "finish")

        if self.state.winner_id is None and self.format == TournamentFormat.LEAGUE:
            standings = self.get_standings()
            if standings:
                self.state.winner_id = standings[0].participant_id

        self.state.status = TournamentStatus.FINISHED
        winner = self.winner
        logger.info(
            f"Finished tournament '{self.name}', winner: "
            f"{winner.name if winner else 'None'}"
        )
        return winner

    def reset(self) -> None:
        """Throw the current tournament away and return to a fresh setup."""
        self._attach(TournamentState())
        logger.info("Tournament reset")

    # ========== Result Management ==========

    def record_result(self, fixture_id: str, home_score: Any, away_score: Any) -> Fixture:
        """Record (or overwrite) the score of a fixture.

        Raises:
            TournamentStateException: If the tournament is not active
            FixtureNotFoundException: If the fixture does not exist
            InvalidResultException: If a score is invalid
        """
        self._require_status(TournamentStatus.ACTIVE, "record results")
        return self.result_recorder.record_result(fixture_id, home_score, away_score)

    def clear_result(self, fixture_id: str) -> Fixture:
        """Reset a fixture to scheduled."""
        self._require_status(TournamentStatus.ACTIVE, "clear results")
        return self.result_recorder.clear_result(fixture_id)

    # ========== Fixture Management ==========

    def add_manual_fixture(self, home_id: Optional[str], away_id: Optional[str]) -> Fixture:
        """Add a fixture outside the generated schedule.

        Raises:
            TournamentStateException: If the tournament is not active
            InvalidFixtureException: If a side is missing or both sides match
            ParticipantNotFoundException: If a side is not registered
        """
        self._require_status(TournamentStatus.ACTIVE, "add fixtures")
        fixture = self.fixture_manager.create_manual_fixture(home_id, away_id)
        self.state.fixtures.append(fixture)
        return fixture

    def advance_to_knockout(self) -> List[Fixture]:
        """Move a hybrid tournament from its league to its knockout stage.

        The top ``knockout_qualifiers`` of the table are seeded into a bracket
        which is appended after the league fixtures.

        Returns:
            The first knockout round

        Raises:
            TournamentStateException: If not an active hybrid in its league stage
            InvalidParticipantCountException: If fewer than two qualify
        """
        self._require_status(TournamentStatus.ACTIVE, "advance to the knockout stage")
        if self.format != TournamentFormat.HYBRID:
            raise TournamentStateException(
                f"Only hybrid tournaments have a knockout stage to advance to, "
                f"this one is {self.format.value}"
            )
        if self.state.current_stage != Stage.LEAGUE:
            raise TournamentStateException("The knockout stage has already started")

        if not self.is_stage_complete():
            logger.warning("Advancing to knockout before every league fixture was played")

        bracket = self.fixture_manager.create_knockout_from_standings(self.get_standings())
        self.state.fixtures.extend(bracket)
        self.state.current_stage = Stage.KNOCKOUT

        logger.info(f"Advanced to knockout stage with {len(bracket)} fixtures")
        return bracket

    def advance_knockout_round(self) -> List[Fixture]:
        """Draw the next knockout round, or crown the champion after the final.

        Returns:
            The new round's fixtures; empty when the tournament was just won

        Raises:
            TournamentStateException: If not in an active knockout stage, or the
                latest round has unplayed or level fixtures
        """
        self._require_status(TournamentStatus.ACTIVE, "advance the knockout")
        if self.state.current_stage != Stage.KNOCKOUT:
            raise TournamentStateException("The tournament is not in its knockout stage")

        fixtures, champion_id = self.fixture_manager.draw_next_knockout_round()
        if champion_id is not None:
            self.state.winner_id = champion_id
            self.state.status = TournamentStatus.FINISHED
            logger.info(f"Tournament '{self.name}' won by {self.winner}")
            return []

        self.state.fixtures.extend(fixtures)
        logger.info(f"Drew knockout round of {fixtures[0].round}")
        return fixtures

    # ========== Queries ==========

    def get_standings(self) -> List[StandingsRow]:
        """Get the current league table.

        Returns:
            Rows sorted best to worst
        """
        return self.standings_calculator.compute(self.state.participants, self.state.fixtures)

    def get_fixture(self, fixture_id: str) -> Optional[Fixture]:
        return self.state.get_fixture(fixture_id)

    def get_fixtures(self, stage: Optional[Union[Stage, str]] = None) -> List[Fixture]:
        """All fixtures, or those of one stage, in creation order."""
        return self.fixture_manager.fixtures_for_stage(
            Stage(stage) if stage is not None else None
        )

    def fixtures_by_round(self, stage: Optional[Union[Stage, str]] = None) -> FixturesByRound:
        """Fixtures of a stage (default: current) grouped by round."""
        return self.fixture_manager.fixtures_by_round(
            Stage(stage) if stage is not None else self.state.current_stage
        )

    def active_fixtures(self) -> List[Fixture]:
        """Fixtures of the current stage."""
        return self.get_fixtures(self.state.current_stage)

    def is_stage_complete(self) -> bool:
        """True if the current stage has fixtures and all of them are played."""
        fixtures = self.active_fixtures()
        return bool(fixtures) and all(f.is_played for f in fixtures)

    # ========== Commentary ==========

    def annotate_fixture(self, fixture_id: str, commentator: Any) -> str:
        """Ask a commentator about a played fixture and store the answer.

        Args:
            fixture_id: The fixture to describe
            commentator: Object with ``describe_fixture(fixture, home, away)``

        Returns:
            The stored commentary

        Raises:
            FixtureNotFoundException: If the fixture does not exist
            InvalidFixtureException: If the fixture is a bye
            InvalidResultException: If the fixture has not been played
        """
        fixture = self.result_recorder.get_fixture(fixture_id)
        if fixture.is_bye:
            raise InvalidFixtureException(f"Fixture {fixture_id} is a bye, nothing to comment on")
        if not fixture.is_played:
            raise InvalidResultException(f"Fixture {fixture_id} has no result to comment on")

        home = self.get_participant(fixture.home_id)
        away = self.get_participant(fixture.away_id)
        text = commentator.describe_fixture(fixture, home, away)
        self.result_recorder.attach_annotation(fixture_id, text)
        return text

    def predict(self, commentator: Any) -> str:
        """Ask a commentator whether the table leader will hold on."""
        standings = self.get_standings()
        if len(standings) < 2:
            return PREDICTION_NOT_ENOUGH_DATA
        return commentator.predict_tournament(standings[0], standings[1])

    # ========== Utility Methods ==========

    def _require_status(self, status: TournamentStatus, action: str) -> None:
        if self.state.status != status:
            logger.warning(f"Cannot {action}: tournament is {self.state.status.value}")
            raise TournamentStateException(
                f"Cannot {action} while the tournament is "
                f"{self.state.status.value.lower()}"
            )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return self.state.to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Raises:
            DuplicateParticipantException: If two participants share an id
        """
        state = TournamentState.from_dict(data)

        tournament = cls.__new__(cls)
        tournament._attach(TournamentState(config=state.config))
        for participant in state.participants:
            tournament._register(participant)
        tournament.state.fixtures = state.fixtures
        tournament.state.status = state.status
        tournament.state.current_stage = state.current_stage
        tournament.state.winner_id = state.winner_id

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament
