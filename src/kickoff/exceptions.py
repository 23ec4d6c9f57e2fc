"""Exceptions for use in Kickoff"""

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


# ========== Base Application Exception ==========


class KickoffException(Exception):
    """Base exception for all Kickoff errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(KickoffException):
    """Base exception for fixture generation errors."""

    pass


class InvalidParticipantCountException(PairingException):
    """Raised when a generator is asked to pair fewer than two participants."""

    def __init__(self, count: int, minimum: int = 2):
        super().__init__(
            f"At least {minimum} participants are required, got {count}"
        )
        self.count = count
        self.minimum = minimum


# ========== Tournament Exceptions ==========


class TournamentException(KickoffException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class ParticipantNotFoundException(TournamentException):
    """Raised when a requested participant cannot be found."""

    pass


class FixtureNotFoundException(TournamentException):
    """Raised when a requested fixture cannot be found."""

    pass


class DuplicateParticipantException(TournamentException):
    """Raised when attempting to add a participant whose id already exists."""

    pass


# ========== Fixture Exceptions ==========


class FixtureException(KickoffException):
    """Base exception for fixture errors."""

    pass


class InvalidFixtureException(FixtureException):
    """Raised when a fixture would pair a participant with itself or nobody."""

    pass


# ========== Result Exceptions ==========


class ResultException(KickoffException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative score)."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(KickoffException):
    """Base exception for validation errors."""

    pass


class NameValidationException(ValidationException):
    """Raised when a participant or team name is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(KickoffException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Commentary Exceptions ==========


class CommentaryException(KickoffException):
    """Raised when the commentary service cannot produce text."""

    pass
