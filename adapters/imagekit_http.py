"""
httpx-backed adapter for the ImageKit REST API.

Owns nothing but a reference to the shared ``httpx.AsyncClient``; the client
is configured once by :func:`build_http_client` and never mutated afterwards,
so one adapter may serve any number of concurrent calls.
"""

from __future__ import annotations

import base64
import json
from typing import IO, Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx
from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from domain.models import FileRecord, RequestDescriptor
from shared_utils.config_loader import Settings
from shared_utils.constants import Defaults, LogScope
from shared_utils.error_handler import ParsingError, TransportError, error_from_response
from shared_utils.logging_utils import get_scoped_logger


logger = get_scoped_logger(LogScope.HTTP)

_RECORD_LIST = TypeAdapter(List[FileRecord])

UploadContent = Union[bytes, IO[bytes]]


def build_auth_header(private_key: str) -> str:
    """HTTP Basic credentials: private key as username, empty password."""
    token = base64.b64encode(f"{private_key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the long-lived client shared by every operation.

    Args:
        settings: Validated client settings
        transport: Optional transport override (tests, proxies)

    Returns:
        AsyncClient with base URL and default headers set
    """
    client = httpx.AsyncClient(
        base_url=settings.base_url,
        headers={
            "Authorization": build_auth_header(settings.private_key),
            "Accept": "application/json",
            "User-Agent": Defaults.USER_AGENT,
        },
        timeout=settings.request_timeout,
        transport=transport,
    )
    logger.info("http_client_created", base_url=settings.base_url, timeout=settings.request_timeout)
    return client


class ImageKitHttpAdapter:
    """Issues requests and interprets ImageKit responses."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def send(self, descriptor: RequestDescriptor) -> httpx.Response:
        """Execute a described request."""
        return await self._request(descriptor.method, descriptor.url, params=list(descriptor.params))

    async def get(self, url: str) -> httpx.Response:
        return await self._request("GET", url)

    async def delete(self, url: str) -> httpx.Response:
        return await self._request("DELETE", url)

    async def post_multipart(
        self,
        url: str,
        *,
        fields: Mapping[str, str],
        file_field: Tuple[str, str],
        content: UploadContent,
    ) -> httpx.Response:
        """POST multipart/form-data with one file part.

        Args:
            url: Upload endpoint
            fields: Plain form fields
            file_field: (field_name, filename) for the file part
            content: File bytes or a binary file object, streamed as-is
        """
        field_name, filename = file_field
        return await self._request(
            "POST",
            url,
            data=dict(fields),
            files={field_name: (filename, content)},
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.error("http_transport_failed", method=method, url=url, error=str(exc))
            raise TransportError(f"{method} {url} failed: {exc}", context={"method": method}) from exc

        logger.debug("http_response", method=method, url=url, status=response.status_code)
        return response

    # ------------------------------------------------------------------
    # Response interpretation
    # ------------------------------------------------------------------

    @staticmethod
    def error_message(response: httpx.Response) -> str:
        """Server message from an error body.

        Uses the ``message`` field of a JSON error payload when present,
        otherwise the raw body text.
        """
        try:
            payload = json.loads(response.content)
        except ValueError:
            return response.text
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            return payload["message"]
        return response.text

    @classmethod
    def raise_for_status(cls, response: httpx.Response, expected: Optional[int] = None) -> None:
        """Raise the classified ApiError unless the response is a success.

        Args:
            response: Received response
            expected: Exact status required for success; any 2xx when omitted
        """
        ok = response.status_code == expected if expected is not None else response.is_success
        if ok:
            return
        error = error_from_response(response.status_code, cls.error_message(response))
        logger.warning(
            "api_error_response",
            status=response.status_code,
            kind=error.kind.value,
            message=error.message,
        )
        raise error

    @staticmethod
    def parse_record(response: httpx.Response) -> FileRecord:
        """Decode the body as one FileRecord."""
        try:
            return FileRecord.model_validate_json(response.content)
        except PydanticValidationError as exc:
            raise ParsingError(f"Invalid file record in response: {exc}", context=_parse_context(exc)) from exc

    @staticmethod
    def parse_records(response: httpx.Response) -> List[FileRecord]:
        """Decode the body as a JSON array of FileRecord."""
        try:
            return _RECORD_LIST.validate_json(response.content)
        except PydanticValidationError as exc:
            raise ParsingError(f"Invalid file list in response: {exc}", context=_parse_context(exc)) from exc


def _parse_context(exc: PydanticValidationError) -> Dict[str, Any]:
    return {"error_count": exc.error_count(), "first_error": exc.errors()[0].get("type")}
