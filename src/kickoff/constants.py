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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_SAVE_FILE = f"tournament{SAVE_FILE_EXTENSION}"

# League points
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Byes
BYE_ID = "BYE"  # Reserved participant id, never registered
BYE_WIN_MARGIN = 3  # Home score of an auto-resolved bye fixture
BYE_LOSS_SCORE = 0

# Manual fixtures sort after every generated round
MANUAL_ROUND = 999

# Hybrid format: league finishers that reach the bracket
DEFAULT_KNOCKOUT_QUALIFIERS = 4

MIN_PARTICIPANTS = 2
MAX_NAME_LENGTH = 64
MAX_TEAM_LENGTH = 64

# Fixture status
STATUS_SCHEDULED = "SCHEDULED"
STATUS_PLAYED = "PLAYED"

# Stages
STAGE_LEAGUE = "LEAGUE"
STAGE_KNOCKOUT = "KNOCKOUT"

# Tournament formats
FORMAT_LEAGUE = "LEAGUE"
FORMAT_KNOCKOUT = "KNOCKOUT"
FORMAT_HYBRID = "HYBRID"

# Lifecycle
LIFECYCLE_SETUP = "SETUP"
LIFECYCLE_ACTIVE = "ACTIVE"
LIFECYCLE_FINISHED = "FINISHED"

# Display names for knockout rounds, keyed by participants remaining
KNOCKOUT_ROUND_NAMES = {
    2: "Final",
    4: "Semifinals",
    8: "Quarterfinals",
    16: "Round of 16",
}
MANUAL_ROUND_NAME = "Extra fixtures"

# Commentary
DEFAULT_COMMENTARY_MODEL = "gemini-2.5-flash"
COMMENTARY_UNAVAILABLE = "AI commentary unavailable (missing API key)."
COMMENTARY_EMPTY_FALLBACK = "What a match!"
COMMENTARY_ERROR_FALLBACK = "Incredible match!"
PREDICTION_FALLBACK = ""
PREDICTION_NOT_ENOUGH_DATA = "Not enough data to predict."

# Environment variables
ENV_API_KEY = "GEMINI_API_KEY"
ENV_MODEL = "KICKOFF_MODEL"
ENV_LOG_LEVEL = "KICKOFF_LOG_LEVEL"
