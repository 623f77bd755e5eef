"""
FileDetailsService — fetches metadata for one file.
"""

from __future__ import annotations

from adapters.imagekit_http import ImageKitHttpAdapter
from domain.models import FileRecord
from shared_utils.constants import APIEndpoints, LogScope
from shared_utils.logging_utils import log_execution
from shared_utils.validation import InputValidator


class FileDetailsService:
    def __init__(self, *, http: ImageKitHttpAdapter, base_url: str) -> None:
        self._http = http
        self._base_url = base_url

    @log_execution(scope=LogScope.FILE_DETAILS)
    async def get_details(self, file_id: str) -> FileRecord:
        """Fetch the FileRecord for ``file_id``.

        Raises:
            ValidationError: Blank or malformed file ID
            ApiError: Classified non-success response
            ParsingError: Body is not a file record
            TransportError: Request could not be sent
        """
        file_id = InputValidator.validate_file_id(file_id)
        url = f"{self._base_url}{APIEndpoints.FILE.format(file_id=file_id)}"
        response = await self._http.get(url)
        self._http.raise_for_status(response)
        return self._http.parse_record(response)
