"""Validation utilities for Kickoff.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from kickoff.constants import BYE_ID, MAX_NAME_LENGTH, MAX_TEAM_LENGTH
from kickoff.exceptions import InvalidResultException, NameValidationException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(
    value: Optional[str],
    label: str = "Name",
    max_length: int = MAX_NAME_LENGTH,
    reserve_bye: bool = True,
) -> ValidationResult:
    """Validate a participant or team name.

    Surrounding whitespace is stripped and inner runs of whitespace are
    collapsed to a single space.

    Args:
        value: The raw name
        label: What the value is, used in error messages
        max_length: Longest accepted name after cleaning
        reserve_bye: Reject the bye sentinel, which only participant names
            can collide with

    Returns:
        ValidationResult with the cleaned name

    Example:
        >>> result = validate_name("  Ana   Lopez ")
        >>> result.sanitized_value
        'Ana Lopez'
    """
    if value is None or not str(value).strip():
        return ValidationResult(is_valid=False, error_message=f"{label} is required")

    cleaned = " ".join(str(value).split())

    if len(cleaned) > max_length:
        return ValidationResult(
            is_valid=False,
            error_message=f"{label} must be at most {max_length} characters: {cleaned}",
        )

    if reserve_bye and cleaned.upper() == BYE_ID:
        return ValidationResult(
            is_valid=False, error_message=f"{label} '{cleaned}' is reserved"
        )

    return ValidationResult(is_valid=True, sanitized_value=cleaned)


def validate_name_strict(
    value: Optional[str], label: str = "Name", reserve_bye: bool = True
) -> str:
    """Validate a participant name and return it cleaned.

    Raises:
        NameValidationException: If the name is invalid
    """
    result = validate_name(value, label=label, reserve_bye=reserve_bye)
    if not result.is_valid:
        raise NameValidationException(result.error_message)
    return result.sanitized_value


def validate_team_strict(value: Optional[str]) -> str:
    """Validate a team label and return it cleaned.

    Raises:
        NameValidationException: If the team label is invalid
    """
    result = validate_name(
        value, label="Team", max_length=MAX_TEAM_LENGTH, reserve_bye=False
    )
    if not result.is_valid:
        raise NameValidationException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(value: Any) -> ValidationResult:
    """Validate a goal count.

    Accepts non-negative ints and strings of digits (as typed at a prompt).
    Booleans and floats are rejected even when they look integral.

    Args:
        value: The raw score

    Returns:
        ValidationResult whose sanitized value is an ``int``
    """
    if isinstance(value, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Score must be an integer: {value!r}"
        )

    if isinstance(value, str):
        stripped = value.strip()
        if not stripped.isdecimal():
            return ValidationResult(
                is_valid=False,
                error_message=f"Score must be a non-negative integer: {value!r}",
            )
        return ValidationResult(is_valid=True, sanitized_value=int(stripped))

    if not isinstance(value, int):
        return ValidationResult(
            is_valid=False, error_message=f"Score must be an integer: {value!r}"
        )

    if value < 0:
        return ValidationResult(
            is_valid=False, error_message=f"Score cannot be negative: {value}"
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_score_strict(value: Any) -> int:
    """Validate a goal count and return it as an int.

    Raises:
        InvalidResultException: If the score is invalid
    """
    result = validate_score(value)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
    return result.sanitized_value
