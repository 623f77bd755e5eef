"""
Constants management.
Centralized configuration for endpoints, defaults, error codes and log scopes.
"""

from enum import Enum
from typing import Final


class ErrorKind(str, Enum):
    """Closed taxonomy of failures surfaced by the client."""
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    TOO_MANY_REQUESTS = "too_many_requests"
    SERVER_ERROR = "server_error"
    SEARCH_EMPTY = "search_empty"
    TRANSPORT = "transport"
    ENVIRONMENT = "environment"
    PARSING = "parsing"
    UNKNOWN = "unknown"


# Default values
class Defaults:
    """Client defaults."""
    BASE_URL: Final[str] = "https://api.imagekit.io/v1"
    USER_AGENT: Final[str] = "imagekit-media-client/0.1.0"


# Remote API paths, relative to the configured base URL
class APIEndpoints:
    """ImageKit media API routes."""
    FILES = "/files"
    FILE = "/files/{file_id}"
    UPLOAD = "/files/upload"


class QueryParams:
    """Query parameter names understood by the files listing endpoint."""
    SEARCH_QUERY: Final[str] = "searchQuery"


class EnvVars:
    """Environment variable names read by the settings loader."""
    PRIVATE_KEY: Final[str] = "IMAGEKIT_PRIVATE_KEY"
    PUBLIC_KEY: Final[str] = "IMAGEKIT_PUBLIC_KEY"
    BASE_URL: Final[str] = "IMAGEKIT_BASE_URL"
    UPLOAD_URL: Final[str] = "IMAGEKIT_UPLOAD_URL"
    REQUEST_TIMEOUT: Final[str] = "IMAGEKIT_REQUEST_TIMEOUT"


# Logging scopes
class LogScope:
    """Standardized logging scope names."""
    CONFIG = "config_loader"
    VALIDATION = "validation"
    ERROR_HANDLER = "error_handler"
    HTTP = "http"
    SEARCH = "search"
    UPLOAD = "upload"
    DELETE = "delete"
    FILE_DETAILS = "file_details"
    CLI = "cli"


# Error codes
class ErrorCode(str, Enum):
    """Standardized error codes for consistency."""
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CONFIG = "INVALID_CONFIG"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    SERVER_ERROR = "SERVER_ERROR"
    SEARCH_EMPTY = "SEARCH_EMPTY"
    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    PARSING_FAILED = "PARSING_FAILED"
    UNKNOWN_API_ERROR = "UNKNOWN_API_ERROR"
