"""League table calculation.

This module folds played league fixtures into a sorted standings table.
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

from typing import Dict, Iterable, List, Sequence

from kickoff.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from kickoff.models.enums import Stage
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.standings import StandingsRow
from kickoff.utils import setup_logger

logger = setup_logger(__name__)


class StandingsCalculator:
    """Calculates the league table.

    Ranking criteria, in order:
    - Points (3 per win, 1 per draw)
    - Goal difference
    - Goals scored

    Participants still level after all three keep their registration order.
    That order is a side effect of the stable sort, not a tiebreak rule, and
    callers should not build on it.

    Only fixtures with stage LEAGUE and status PLAYED count. Knockout
    fixtures never change the table.
    """

    def compute(
        self, participants: Sequence[Participant], fixtures: Iterable[Fixture]
    ) -> List[StandingsRow]:
        """Compute the sorted standings table.

        Args:
            participants: Registered participants, in registration order
            fixtures: Any fixtures; the ones that do not count are ignored

        Returns:
            One row per participant, best first
        """
        rows: Dict[str, StandingsRow] = {}
        for participant in participants:
            if participant.id not in rows:
                rows[participant.id] = StandingsRow(
                    participant_id=participant.id,
                    name=participant.name,
                    team=participant.team,
                )

        for fixture in fixtures:
            if fixture.stage != Stage.LEAGUE or not fixture.is_played:
                continue

            home = rows.get(fixture.home_id)
            away = rows.get(fixture.away_id)
            if home is None or away is None:
                logger.debug(
                    "Skipping fixture %s: unknown participant %s",
                    fixture.id,
                    fixture.home_id if home is None else fixture.away_id,
                )
                continue

            self._apply_result(home, away, fixture.home_score, fixture.away_score)

        return sorted(rows.values(), key=self._sort_key)

    @staticmethod
    def _apply_result(
        home: StandingsRow, away: StandingsRow, home_score: int, away_score: int
    ) -> None:
        """Add one played fixture to both rows."""
        home.played += 1
        away.played += 1
        home.goals_for += home_score
        home.goals_against += away_score
        away.goals_for += away_score
        away.goals_against += home_score

        if home_score > away_score:
            home.won += 1
            home.points += WIN_POINTS
            away.lost += 1
            away.points += LOSS_POINTS
        elif home_score < away_score:
            away.won += 1
            away.points += WIN_POINTS
            home.lost += 1
            home.points += LOSS_POINTS
        else:
            home.drawn += 1
            away.drawn += 1
            home.points += DRAW_POINTS
            away.points += DRAW_POINTS

    @staticmethod
    def _sort_key(row: StandingsRow):
        return (-row.points, -row.goal_difference, -row.goals_for)


def calculate_standings(
    participants: Sequence[Participant], fixtures: Iterable[Fixture]
) -> List[StandingsRow]:
    """Compute the league table. See :class:`StandingsCalculator`."""
    return StandingsCalculator().compute(participants, fixtures)
