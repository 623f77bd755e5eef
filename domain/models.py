"""
Pure domain models for the ImageKit media client.

These models contain NO HTTP dependencies. They represent the remote file
metadata and the values that flow between the criteria builder, the services
and the HTTP adapter.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from shared_utils.error_handler import ValidationError


class FileFormat(str, Enum):
    """Searchable file formats."""

    JPG = "jpg"
    WEBP = "webp"
    PNG = "png"
    GIF = "gif"
    SVG = "svg"
    AVIF = "avif"
    PDF = "pdf"
    JS = "js"
    WOFF2 = "woff2"
    WOFF = "woff"
    TTF = "ttf"
    OTF = "otf"
    EOT = "eot"
    CSS = "css"
    TXT = "txt"
    MP4 = "mp4"
    WEBM = "webm"
    MOV = "mov"
    SWF = "swf"
    TS = "ts"
    M3U8 = "m3u8"
    ICO = "ico"

    def to_query_value(self) -> str:
        """Value used for this format in a search query."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> "FileFormat":
        """Parse user input such as ``"PNG"`` or ``".png"`` into a FileFormat.

        Raises:
            ValidationError: If the text names no known format
        """
        normalized = text.strip().lstrip(".").lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(
            f"Unknown file format: {text!r}",
            context={"allowed": [m.value for m in cls]},
        )


class FileType(str, Enum):
    """Kind of stored file as reported by the server."""

    IMAGE = "image"
    NON_IMAGE = "non-image"


class FileRecord(BaseModel):
    """Metadata for one file stored in the media library.

    Read-only from the client's perspective; each response yields fresh
    instances with no identity shared between them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    file_id: str = Field(validation_alias=AliasChoices("fileId", "file_id", "id"), serialization_alias="fileId")
    name: str
    url: str
    file_type: FileType = Field(validation_alias=AliasChoices("fileType", "file_type"), serialization_alias="fileType")
    width: Optional[int] = None  # images only
    height: Optional[int] = None  # images only
    format: Optional[str] = None
    size: Optional[int] = None
    tags: List[str] = []
    created_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at"), serialization_alias="createdAt"
    )
    updated_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("updatedAt", "updated_at"), serialization_alias="updatedAt"
    )
    file_path: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("filePath", "file_path"), serialization_alias="filePath"
    )
    thumbnail_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("thumbnailUrl", "thumbnail", "thumbnail_url"),
        serialization_alias="thumbnailUrl",
    )
    is_private_file: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("isPrivateFile", "is_private_file"),
        serialization_alias="isPrivateFile",
    )
    mime: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, v):
        # The API sends null for untagged files
        return [] if v is None else v


class ErrorPayload(BaseModel):
    """Error body returned alongside a non-success status."""

    message: str
    help: Optional[str] = None


class UploadOptions(BaseModel):
    """Optional upload settings; unset options are left to server defaults."""

    folder: Optional[str] = None
    tags: List[str] = []
    use_unique_file_name: Optional[bool] = None
    is_private_file: Optional[bool] = None
    custom_coordinates: Optional[str] = None

    def to_form_fields(self) -> Dict[str, str]:
        """Render the explicitly set options as multipart form fields."""
        fields: Dict[str, str] = {}
        if self.folder is not None:
            fields["folder"] = self.folder
        if self.tags:
            fields["tags"] = ",".join(self.tags)
        if self.use_unique_file_name is not None:
            fields["useUniqueFileName"] = "true" if self.use_unique_file_name else "false"
        if self.is_private_file is not None:
            fields["isPrivateFile"] = "true" if self.is_private_file else "false"
        if self.custom_coordinates is not None:
            fields["customCoordinates"] = self.custom_coordinates
        return fields


class RequestDescriptor(BaseModel):
    """An HTTP request that has been described but not sent."""

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    url: str
    params: Tuple[Tuple[str, str], ...] = ()
