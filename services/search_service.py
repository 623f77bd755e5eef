"""
SearchService — runs searches against the files listing endpoint.

Two layers:
    * ``search`` executes a RequestDescriptor and returns whatever matched,
      an empty list included.
    * The ``search_by_*`` wrappers build the criteria, call ``search`` and
      raise SearchEmptyError when nothing matched.
"""

from __future__ import annotations

from typing import List, Sequence

from adapters.imagekit_http import ImageKitHttpAdapter
from domain.models import FileFormat, FileRecord, RequestDescriptor
from domain.search_criteria import FilenameEquals, FormatEquals, FormatIn, FormatNotIn
from services.criteria_builder import build_request, join_formats
from shared_utils.constants import LogScope
from shared_utils.error_handler import SearchEmptyError
from shared_utils.logging_utils import ContextualLogger, log_execution


logger = ContextualLogger(scope=LogScope.SEARCH)


class SearchService:
    """Search operations over the media library."""

    def __init__(self, *, http: ImageKitHttpAdapter, base_url: str) -> None:
        self._http = http
        self._base_url = base_url

    # ------------------------------------------------------------------
    # Raw primitive
    # ------------------------------------------------------------------

    @log_execution(scope=LogScope.SEARCH)
    async def search(self, descriptor: RequestDescriptor) -> List[FileRecord]:
        """Execute a search request.

        Args:
            descriptor: Request built by ``services.criteria_builder``

        Returns:
            Matching records in server order; empty when nothing matched.

        Raises:
            ApiError: Classified non-success response
            ParsingError: Body is not a JSON array of file records
            TransportError: Request could not be sent
        """
        response = await self._http.send(descriptor)
        self._http.raise_for_status(response)
        records = self._http.parse_records(response)
        logger.info("search_completed", params=dict(descriptor.params), matches=len(records))
        return records

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    async def search_by_format(self, file_format: FileFormat) -> List[FileRecord]:
        """All files of one format; SearchEmptyError when there are none."""
        criteria = FormatEquals(format=file_format)
        records = await self.search(build_request(criteria, self._base_url))
        if not records:
            raise self._empty("format", criteria.format.to_query_value())
        return records

    async def search_by_formats(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        """All files whose format is in ``formats``."""
        criteria = FormatIn(formats=formats)
        records = await self.search(build_request(criteria, self._base_url))
        if not records:
            raise self._empty("formats", join_formats(criteria.formats))
        return records

    async def search_by_formats_excluding(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        """All files whose format is not in ``formats``."""
        criteria = FormatNotIn(formats=formats)
        records = await self.search(build_request(criteria, self._base_url))
        if not records:
            raise self._empty("formats", join_formats(criteria.formats))
        return records

    async def search_by_filename(self, name: str) -> FileRecord:
        """The first file whose name matches exactly (extension included).

        Only the first match is returned even when the server reports several.
        """
        records = await self.search(build_request(FilenameEquals(name=name), self._base_url))
        if not records:
            raise self._empty("name", name)
        return records[0]

    @staticmethod
    def _empty(label: str, value: str) -> SearchEmptyError:
        logger.info("search_empty", label=label, value=value)
        return SearchEmptyError(f"No files were found by the given {label}: {value}", criteria=value)
