"""
UploadService — multipart upload of a single file.

No retry: a transient failure surfaces to the caller immediately.
"""

from __future__ import annotations

from typing import Optional

from adapters.imagekit_http import ImageKitHttpAdapter, UploadContent
from domain.models import FileRecord, UploadOptions
from shared_utils.constants import LogScope
from shared_utils.logging_utils import get_scoped_logger, log_execution
from shared_utils.validation import InputValidator


logger = get_scoped_logger(LogScope.UPLOAD)


class UploadService:
    def __init__(self, *, http: ImageKitHttpAdapter, upload_url: str) -> None:
        self._http = http
        self._upload_url = upload_url

    @log_execution(scope=LogScope.UPLOAD)
    async def upload(
        self,
        content: UploadContent,
        file_name: str,
        options: Optional[UploadOptions] = None,
    ) -> FileRecord:
        """Upload ``content`` under ``file_name``.

        Args:
            content: File bytes or a binary file object, passed through unread
            file_name: Target name in the media library
            options: Folder, tags, naming and privacy settings

        Returns:
            FileRecord describing the stored file

        Raises:
            ValidationError: Blank file name
            ApiError: Classified non-success response
            ParsingError: Body is not a file record
            TransportError: Request could not be sent
        """
        file_name = InputValidator.validate_non_empty_string(file_name, "file_name")
        fields = {"fileName": file_name, **(options or UploadOptions()).to_form_fields()}

        response = await self._http.post_multipart(
            self._upload_url,
            fields=fields,
            file_field=("file", file_name),
            content=content,
        )
        self._http.raise_for_status(response)
        record = self._http.parse_record(response)
        logger.info("file_uploaded", file_id=record.file_id, name=record.name, size=record.size)
        return record
