"""Saving and loading tournament snapshots as JSON files."""

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

import json
from pathlib import Path
from typing import Union

from kickoff.exceptions import FileLoadException, FileSaveException, KickoffException
from kickoff.models.tournament.tournament import Tournament
from kickoff.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def save_tournament(tournament: Tournament, path: PathLike) -> Path:
    """Write the tournament snapshot to ``path``, replacing any existing file.

    Returns:
        The path written

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(tournament.to_dict(), f, indent=4)
    except OSError as e:
        logger.exception("Error saving tournament:")
        raise FileSaveException(f"Could not save tournament to {path}: {e}") from e

    logger.info(f"Tournament saved to {path}")
    return path


def load_tournament(path: PathLike) -> Tournament:
    """Read a tournament snapshot from ``path``.

    Raises:
        FileLoadException: If the file is missing, not JSON, or not a valid
            snapshot
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise FileLoadException(f"No tournament file at {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        logger.exception("Error loading tournament:")
        raise FileLoadException(f"Could not read tournament from {path}: {e}") from e

    if not isinstance(data, dict):
        raise FileLoadException(f"{path} does not contain a tournament snapshot")

    try:
        tournament = Tournament.from_dict(data)
    except (KeyError, TypeError, ValueError, KickoffException) as e:
        logger.exception("Error loading tournament:")
        raise FileLoadException(f"{path} is not a valid tournament snapshot: {e}") from e

    logger.info(f"Tournament loaded from {path}")
    return tournament
