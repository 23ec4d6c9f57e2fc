"""Tournament managers used by :class:`kickoff.models.tournament.tournament.Tournament`.

This package splits tournament handling into focused classes with clear
responsibilities: fixture creation, result entry and the league table.
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

from kickoff.controllers.tournament.fixture_manager import FixtureManager
from kickoff.controllers.tournament.result_recorder import ResultRecorder
from kickoff.controllers.tournament.standings_calculator import (
    StandingsCalculator,
    calculate_standings,
)

__all__ = [
    "FixtureManager",
    "ResultRecorder",
    "StandingsCalculator",
    "calculate_standings",
]
