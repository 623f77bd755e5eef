"""
ImageKit — client facade over the search, upload, delete and details services.

One shared ``httpx.AsyncClient`` is built at construction and handed to every
service; nothing reconfigures it afterwards.

Example:
    async with ImageKit.from_environment() as imagekit:
        pngs = await imagekit.search_by_format(FileFormat.PNG)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import httpx

from adapters.imagekit_http import ImageKitHttpAdapter, UploadContent, build_http_client
from domain.models import FileFormat, FileRecord, RequestDescriptor, UploadOptions
from domain.search_criteria import SearchCriteria
from services.criteria_builder import build_request
from services.delete_service import DeleteService
from services.file_details_service import FileDetailsService
from services.search_service import SearchService
from services.upload_service import UploadService
from shared_utils.config_loader import Settings, get_settings


class ImageKit:
    """Async client for the ImageKit media library."""

    def __init__(self, *, settings: Settings, client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._client = client
        http = ImageKitHttpAdapter(client)
        self._search = SearchService(http=http, base_url=settings.base_url)
        self._upload = UploadService(http=http, upload_url=settings.get_upload_url())
        self._delete = DeleteService(http=http, base_url=settings.base_url)
        self._details = FileDetailsService(http=http, base_url=settings.base_url)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ImageKit":
        return cls(settings=settings, client=build_http_client(settings, transport=transport))

    @classmethod
    def from_environment(cls) -> "ImageKit":
        """Build a client from ``IMAGEKIT_*`` environment variables.

        Raises:
            ConfigurationError: Naming the missing or invalid variable
        """
        return cls.from_settings(get_settings())

    @property
    def settings(self) -> Settings:
        return self._settings

    async def __aenter__(self) -> "ImageKit":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client."""
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def build_search(self, criteria: SearchCriteria) -> RequestDescriptor:
        """Describe a search request for ``criteria`` against this client's base URL."""
        return build_request(criteria, self._settings.base_url)

    async def search(self, descriptor: RequestDescriptor) -> List[FileRecord]:
        return await self._search.search(descriptor)

    async def search_by_format(self, file_format: FileFormat) -> List[FileRecord]:
        return await self._search.search_by_format(file_format)

    async def search_by_formats(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        return await self._search.search_by_formats(formats)

    async def search_by_formats_excluding(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        return await self._search.search_by_formats_excluding(formats)

    async def search_by_filename(self, name: str) -> FileRecord:
        return await self._search.search_by_filename(name)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def upload(
        self,
        content: UploadContent,
        file_name: str,
        options: Optional[UploadOptions] = None,
    ) -> FileRecord:
        return await self._upload.upload(content, file_name, options)

    async def get_file_details(self, file_id: str) -> FileRecord:
        return await self._details.get_details(file_id)

    async def delete(self, file_id: str) -> None:
        await self._delete.delete(file_id)
