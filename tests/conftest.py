"""
Root conftest.py — shared fixtures for the entire test suite.

Guidelines:
    • No __init__.py in test sub-directories (avoids shadowing root packages).
    • pytest.ini_options lives in pyproject.toml with pythonpath=["."].
    • HTTP is faked with httpx.MockTransport — no live ImageKit calls.
    • Markers: integration.
"""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from services.media_library import ImageKit
from shared_utils.config_loader import Settings


# ---------------------------------------------------------------------------
# Marker registration
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: mark test as integration test")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

BASE_SETTINGS_KWARGS: Dict[str, str] = {
    "private_key": "private_test_key",
    "public_key": "public_test_key",
    "base_url": "https://api.example.test/v1",
}

BASE_URL = BASE_SETTINGS_KWARGS["base_url"]


@pytest.fixture()
def base_settings_kwargs() -> Dict[str, str]:
    """Provide the minimal kwargs needed to instantiate ``Settings``."""
    return {**BASE_SETTINGS_KWARGS}


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, **BASE_SETTINGS_KWARGS)


# ---------------------------------------------------------------------------
# Sample API payloads
# ---------------------------------------------------------------------------

IMAGE_RECORD: Dict[str, Any] = {
    "fileId": "598821f949c0a938d57563bd",
    "type": "file",
    "name": "ferris.jpg",
    "filePath": "/ferris.jpg",
    "tags": ["crab", "rust"],
    "isPrivateFile": False,
    "url": "https://ik.imagekit.io/demo/ferris.jpg",
    "thumbnail": "https://ik.imagekit.io/demo/tr:n-media_library_thumbnail/ferris.jpg",
    "fileType": "image",
    "mime": "image/jpeg",
    "width": 640,
    "height": 640,
    "size": 24580,
    "format": "jpg",
    "createdAt": "2019-08-24T06:14:41.313Z",
    "updatedAt": "2019-08-24T06:14:41.313Z",
}

DOCUMENT_RECORD: Dict[str, Any] = {
    "fileId": "598821f949c0a938d57563be",
    "type": "file",
    "name": "manual.pdf",
    "filePath": "/docs/manual.pdf",
    "tags": None,
    "url": "https://ik.imagekit.io/demo/docs/manual.pdf",
    "fileType": "non-image",
    "size": 102400,
    "format": "pdf",
    "createdAt": "2020-01-02T10:00:00.000Z",
}


@pytest.fixture()
def image_record() -> Dict[str, Any]:
    return dict(IMAGE_RECORD)


@pytest.fixture()
def document_record() -> Dict[str, Any]:
    return dict(DOCUMENT_RECORD)


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------

class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, json: Any = None, content: bytes = b"") -> None:
        self.status_code = status_code
        self.json = json
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture()
def make_imagekit(settings: Settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], ImageKit]:
    """Build an ImageKit client whose transport is ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ImageKit:
        return ImageKit.from_settings(settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture()
def recording_handler() -> type:
    """The RecordingHandler class, so tests can build handlers per case."""
    return RecordingHandler
