"""
Input validation utilities.
Caller mistakes are rejected here, before any request is built or sent.
"""

from typing import Sequence, TypeVar

from shared_utils.error_handler import ValidationError
from shared_utils.logging_utils import get_scoped_logger
from shared_utils.constants import LogScope


logger = get_scoped_logger(LogScope.VALIDATION)

T = TypeVar("T")


class InputValidator:
    """Utility class for input validation."""

    @staticmethod
    def validate_non_empty_string(value: str, field_name: str) -> str:
        """Validate non-empty string.

        The value is returned unchanged: filenames are matched literally.

        Args:
            value: String to validate
            field_name: Name of field for error messages

        Returns:
            Validated string

        Raises:
            ValidationError: If validation fails
        """
        if not isinstance(value, str):
            raise ValidationError(f"{field_name} must be a string")

        if not value or not value.strip():
            logger.warning("validation_failed", field=field_name, reason="empty")
            raise ValidationError(f"{field_name} cannot be empty", context={"field": field_name})

        return value

    @staticmethod
    def validate_file_id(value: str) -> str:
        """Validate a server-assigned file identifier.

        Args:
            value: File ID to validate

        Returns:
            Validated file ID

        Raises:
            ValidationError: If the ID is blank or would escape the files path
        """
        value = InputValidator.validate_non_empty_string(value, "file_id")
        if "/" in value or "?" in value or "#" in value:
            raise ValidationError("file_id contains reserved URL characters", context={"file_id": value})
        return value

    @staticmethod
    def validate_non_empty_sequence(values: Sequence[T], field_name: str) -> Sequence[T]:
        """Validate that a sequence has at least one element.

        Args:
            values: Sequence to validate
            field_name: Name of field for error messages

        Returns:
            The sequence as a tuple, preserving order

        Raises:
            ValidationError: If the sequence is empty
        """
        items = tuple(values)
        if not items:
            logger.warning("validation_failed", field=field_name, reason="empty_sequence")
            raise ValidationError(f"{field_name} must contain at least one value", context={"field": field_name})
        return items
