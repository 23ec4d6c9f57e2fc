"""Enumerations shared by the tournament models."""

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

from enum import Enum

from kickoff.constants import (
    FORMAT_HYBRID,
    FORMAT_KNOCKOUT,
    FORMAT_LEAGUE,
    LIFECYCLE_ACTIVE,
    LIFECYCLE_FINISHED,
    LIFECYCLE_SETUP,
    STAGE_KNOCKOUT,
    STAGE_LEAGUE,
    STATUS_PLAYED,
    STATUS_SCHEDULED,
)


class FixtureStatus(str, Enum):
    SCHEDULED = STATUS_SCHEDULED
    PLAYED = STATUS_PLAYED


class Stage(str, Enum):
    LEAGUE = STAGE_LEAGUE
    KNOCKOUT = STAGE_KNOCKOUT


class TournamentFormat(str, Enum):
    """How the tournament is played.

    LEAGUE: everyone plays everyone.
    KNOCKOUT: single elimination from the start.
    HYBRID: a league whose top finishers move on to a knockout bracket.
    """

    LEAGUE = FORMAT_LEAGUE
    KNOCKOUT = FORMAT_KNOCKOUT
    HYBRID = FORMAT_HYBRID


class TournamentStatus(str, Enum):
    SETUP = LIFECYCLE_SETUP
    ACTIVE = LIFECYCLE_ACTIVE
    FINISHED = LIFECYCLE_FINISHED
