"""
DeleteService — removes a file by ID.

Only ``204 No Content`` counts as success. Deleting an unknown or already
deleted ID surfaces the server's own classification unchanged.
"""

from __future__ import annotations

from adapters.imagekit_http import ImageKitHttpAdapter
from shared_utils.constants import APIEndpoints, LogScope
from shared_utils.logging_utils import get_scoped_logger, log_execution
from shared_utils.validation import InputValidator


logger = get_scoped_logger(LogScope.DELETE)

NO_CONTENT = 204


class DeleteService:
    def __init__(self, *, http: ImageKitHttpAdapter, base_url: str) -> None:
        self._http = http
        self._base_url = base_url

    @log_execution(scope=LogScope.DELETE)
    async def delete(self, file_id: str) -> None:
        """Delete the file with ``file_id``.

        Raises:
            ValidationError: Blank or malformed file ID
            ApiError: Any status other than 204, even a 2xx
            TransportError: Request could not be sent
        """
        file_id = InputValidator.validate_file_id(file_id)
        url = f"{self._base_url}{APIEndpoints.FILE.format(file_id=file_id)}"
        response = await self._http.delete(url)
        self._http.raise_for_status(response, expected=NO_CONTENT)
        logger.info("file_deleted", file_id=file_id)
