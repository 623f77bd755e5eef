"""
Port interface for a remote media library.

Implementations: ImageKit (services/media_library.py)
"""

from __future__ import annotations

from typing import IO, List, Optional, Protocol, Sequence, Union, runtime_checkable

from domain.models import FileFormat, FileRecord, RequestDescriptor, UploadOptions


@runtime_checkable
class MediaLibraryPort(Protocol):
    """Abstract interface for searching, uploading, inspecting and deleting files."""

    async def search(self, descriptor: RequestDescriptor) -> List[FileRecord]:
        """Execute a prepared search request.

        Returns:
            Matching records; an empty list when nothing matched.
        """
        ...

    async def search_by_format(self, file_format: FileFormat) -> List[FileRecord]:
        """Files of one format.

        Raises:
            SearchEmptyError: If nothing matched.
        """
        ...

    async def search_by_formats(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        ...

    async def search_by_formats_excluding(self, formats: Sequence[FileFormat]) -> List[FileRecord]:
        ...

    async def search_by_filename(self, name: str) -> FileRecord:
        """First file whose name matches exactly.

        Raises:
            SearchEmptyError: If nothing matched.
        """
        ...

    async def upload(
        self,
        content: Union[bytes, IO[bytes]],
        file_name: str,
        options: Optional[UploadOptions] = None,
    ) -> FileRecord:
        ...

    async def get_file_details(self, file_id: str) -> FileRecord:
        ...

    async def delete(self, file_id: str) -> None:
        ...
