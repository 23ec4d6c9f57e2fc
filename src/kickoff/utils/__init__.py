"""Shared helpers: logger setup and id generation."""

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

import logging
import os
import uuid

from kickoff.constants import ENV_LOG_LEVEL

PACKAGE_LOGGER_NAME = "kickoff"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, configuring the package logger on first use.

    All module loggers are children of the ``kickoff`` logger, which owns the
    only handler. Its level comes from ``KICKOFF_LOG_LEVEL`` (default WARNING).

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

        level_name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
        package_logger.setLevel(getattr(logging, level_name, logging.WARNING))

    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of every Kickoff logger at once."""
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a unique identifier such as ``participant-3f2a9c1b7d4e``.

    Args:
        prefix: Kind of object the id is for, usually a class name

    Returns:
        Lower-case prefix followed by 12 random hex characters
    """
    return f"{prefix.lower()}-{uuid.uuid4().hex[:12]}"
