"""Kickoff: fixtures and standings for head-to-head tournaments.

Round-robin leagues, single-elimination brackets with byes, and hybrids that
seed the top of a league into a knockout stage.
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

APP_NAME = "Kickoff"
APP_VERSION = "0.1.0"
__version__ = APP_VERSION

from kickoff.controllers.tournament import calculate_standings
from kickoff.models import (
    Fixture,
    FixtureStatus,
    Participant,
    Stage,
    StandingsRow,
    TournamentConfig,
    TournamentFormat,
    TournamentState,
    TournamentStatus,
)
from kickoff.models.tournament.tournament import Tournament
from kickoff.pairing import generate_knockout_bracket, generate_league_fixtures

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "Fixture",
    "FixtureStatus",
    "Participant",
    "Stage",
    "StandingsRow",
    "Tournament",
    "TournamentConfig",
    "TournamentFormat",
    "TournamentState",
    "TournamentStatus",
    "calculate_standings",
    "generate_knockout_bracket",
    "generate_league_fixtures",
]
