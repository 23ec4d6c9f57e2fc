"""Result recording and validation for tournaments.

This module handles recording fixture results with proper validation and error checking.
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
from typing import Any

from kickoff.exceptions import (
    FixtureNotFoundException,
    InvalidResultException,
    TournamentStateException,
)
from kickoff.models.enums import Stage
from kickoff.models.fixture import Fixture
from kickoff.models.tournament.tournament_state import TournamentState
from kickoff.utils import setup_logger
from kickoff.utils.validation import validate_score_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating fixture results.

    This class is responsible for:
    - Recording scores with proper validation
    - Clearing a result back to scheduled
    - Refusing edits that would contradict an already drawn knockout round
    - Attaching commentary to played fixtures

    Fixtures are replaced in the snapshot, never edited in place.
    """

    def __init__(self, state: TournamentState):
        self.state = state

    def record_result(self, fixture_id: str, home_score: Any, away_score: Any) -> Fixture:
        """Record the score of a fixture.

        Recording over an existing result replaces it (and drops its
        commentary, which described the old score).

        Args:
            fixture_id: The fixture to record
            home_score: Goals scored by the home side
            away_score: Goals scored by the away side

        Returns:
            The updated fixture

        Raises:
            FixtureNotFoundException: If the fixture does not exist
            InvalidResultException: If a score is invalid or the fixture is a bye
            TournamentStateException: If a later knockout round was already drawn
        """
        fixture = self._editable_fixture(fixture_id)
        home = validate_score_strict(home_score)
        away = validate_score_strict(away_score)

        updated = fixture.with_result(home, away)
        self.state.replace_fixture(updated)

        logger.debug(
            f"Recorded {fixture.home_id} {home}-{away} {fixture.away_id} "
            f"(fixture {fixture_id})"
        )
        return updated

    def clear_result(self, fixture_id: str) -> Fixture:
        """Reset a fixture to scheduled.

        Raises:
            FixtureNotFoundException: If the fixture does not exist
            InvalidResultException: If the fixture is a bye
            TournamentStateException: If a later knockout round was already drawn
        """
        fixture = self._editable_fixture(fixture_id)
        if not fixture.is_played:
            logger.warning(f"Fixture {fixture_id} has no result to clear")
            return fixture

        updated = fixture.cleared()
        self.state.replace_fixture(updated)
        logger.info(f"Cleared result of fixture {fixture_id}")
        return updated

    def attach_annotation(self, fixture_id: str, annotation: str) -> Fixture:
        """Store commentary on a played fixture.

        Raises:
            FixtureNotFoundException: If the fixture does not exist
            InvalidResultException: If the fixture has not been played
        """
        fixture = self.get_fixture(fixture_id)
        if not fixture.is_played:
            raise InvalidResultException(
                f"Fixture {fixture_id} has no result to comment on"
            )

        updated = replace(fixture, annotation=annotation)
        self.state.replace_fixture(updated)
        return updated

    def get_fixture(self, fixture_id: str) -> Fixture:
        """Look up a fixture, raising FixtureNotFoundException if unknown."""
        fixture = self.state.get_fixture(fixture_id)
        if fixture is None:
            logger.error(f"Cannot find fixture: {fixture_id}")
            raise FixtureNotFoundException(f"Unknown fixture: {fixture_id}")
        return fixture

    def _editable_fixture(self, fixture_id: str) -> Fixture:
        fixture = self.get_fixture(fixture_id)

        if fixture.is_bye:
            raise InvalidResultException(
                f"Fixture {fixture_id} is a bye and was resolved automatically"
            )

        if fixture.stage == Stage.LEAGUE and self.state.current_stage == Stage.KNOCKOUT:
            raise TournamentStateException(
                "League results are closed: the knockout stage has started"
            )

        if fixture.stage == Stage.KNOCKOUT and not fixture.is_manual:
            later_rounds = [
                f
                for f in self.state.fixtures
                if f.stage == Stage.KNOCKOUT
                and not f.is_manual
                and f.round < fixture.round
            ]
            if later_rounds:
                raise TournamentStateException(
                    f"Round of {fixture.round} is closed: the next round was already drawn"
                )

        return fixture
