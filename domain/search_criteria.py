"""
Search predicates over the media library.

Each criteria value maps to exactly one query string; see
``services.criteria_builder``. Format values may be given as ``FileFormat``
members or as text accepted by ``FileFormat.parse``; anything else is a
caller error raised as ``ValidationError``.
"""

from __future__ import annotations

from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from domain.models import FileFormat
from shared_utils.error_handler import ValidationError
from shared_utils.validation import InputValidator


def _as_format(value: Any) -> FileFormat:
    if isinstance(value, FileFormat):
        return value
    if isinstance(value, str):
        return FileFormat.parse(value)
    raise ValidationError(
        f"Unsupported file format value: {value!r}",
        context={"type": type(value).__name__},
    )


class FormatEquals(BaseModel):
    """Files whose format equals ``format``."""

    model_config = ConfigDict(frozen=True)

    format: FileFormat

    @field_validator("format", mode="before")
    @classmethod
    def _known_format(cls, v):
        return _as_format(v)


class _FormatRange(BaseModel):
    """Non-empty, ordered set of formats."""

    model_config = ConfigDict(frozen=True)

    formats: Tuple[FileFormat, ...]

    @field_validator("formats", mode="before")
    @classmethod
    def _known_formats(cls, v):
        if isinstance(v, (str, bytes)) or not isinstance(v, (list, tuple)):
            raise ValidationError("formats must be a list of file formats", context={"field": "formats"})
        return tuple(_as_format(item) for item in InputValidator.validate_non_empty_sequence(v, "formats"))


class FormatIn(_FormatRange):
    """Files whose format is one of ``formats``."""


class FormatNotIn(_FormatRange):
    """Files whose format is none of ``formats``."""


class FilenameEquals(BaseModel):
    """Files whose name equals ``name`` exactly, extension included."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def _non_blank(cls, v):
        return InputValidator.validate_non_empty_string(v, "name")


SearchCriteria = Union[FormatEquals, FormatIn, FormatNotIn, FilenameEquals]
