"""
Structured error handling for the ImageKit media client.

Every failure surfaced by the client is one member of the closed ``ErrorKind``
taxonomy. HTTP responses are classified by status code; the server's message
travels with the raised exception.
"""

from typing import Optional, Dict, Any, Type
import logging

from shared_utils.constants import ErrorCode, ErrorKind, LogScope
from shared_utils.logging_utils import get_scoped_logger


class AppException(Exception):
    """Base exception for client errors."""

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        error_code: str,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to response dictionary."""
        return {
            "error": {
                "code": self.error_code,
                "kind": self.kind.value if self.kind else None,
                "message": self.message,
                "context": self.context
            }
        }


class ValidationError(AppException):
    """Caller supplied an invalid argument; raised before any request is issued."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT.value,
            message=message,
            context=context
        )


class ConfigurationError(AppException):
    """Missing or invalid environment configuration."""

    kind = ErrorKind.ENVIRONMENT

    def __init__(self, message: str, variable: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        ctx = {**(context or {})}
        if variable:
            ctx["variable"] = variable
        self.variable = variable
        super().__init__(
            error_code=ErrorCode.INVALID_CONFIG.value,
            message=message,
            context=ctx
        )


class TransportError(AppException):
    """Network or connection failure before a response was received."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            error_code=ErrorCode.TRANSPORT_FAILED.value,
            message=message,
            context=context
        )


class ParsingError(AppException):
    """Response body does not match the expected shape."""

    kind = ErrorKind.PARSING

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            error_code=ErrorCode.PARSING_FAILED.value,
            message=message,
            context=context
        )


class SearchEmptyError(AppException):
    """A successful search matched no files."""

    kind = ErrorKind.SEARCH_EMPTY

    def __init__(self, message: str, criteria: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        ctx = {**(context or {})}
        if criteria is not None:
            ctx["criteria"] = criteria
        super().__init__(
            error_code=ErrorCode.SEARCH_EMPTY.value,
            message=message,
            context=ctx
        )


class ApiError(AppException):
    """Error response from the remote API, classified by status code."""

    kind = ErrorKind.UNKNOWN
    code = ErrorCode.UNKNOWN_API_ERROR

    def __init__(self, message: str, status_code: int, context: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(
            error_code=self.code.value,
            message=message,
            context={**(context or {}), "status_code": status_code}
        )


class BadRequestError(ApiError):
    kind = ErrorKind.BAD_REQUEST
    code = ErrorCode.BAD_REQUEST


class UnauthorizedError(ApiError):
    kind = ErrorKind.UNAUTHORIZED
    code = ErrorCode.UNAUTHORIZED


class ForbiddenError(ApiError):
    kind = ErrorKind.FORBIDDEN
    code = ErrorCode.FORBIDDEN


class TooManyRequestsError(ApiError):
    kind = ErrorKind.TOO_MANY_REQUESTS
    code = ErrorCode.TOO_MANY_REQUESTS


class ServerError(ApiError):
    kind = ErrorKind.SERVER_ERROR
    code = ErrorCode.SERVER_ERROR


class UnknownApiError(ApiError):
    """Status code not covered by the documented error codes."""


_STATUS_KINDS: Dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    429: ErrorKind.TOO_MANY_REQUESTS,
    500: ErrorKind.SERVER_ERROR,
    502: ErrorKind.SERVER_ERROR,
    503: ErrorKind.SERVER_ERROR,
    504: ErrorKind.SERVER_ERROR,
}

_KIND_ERRORS: Dict[ErrorKind, Type[ApiError]] = {
    ErrorKind.BAD_REQUEST: BadRequestError,
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.FORBIDDEN: ForbiddenError,
    ErrorKind.TOO_MANY_REQUESTS: TooManyRequestsError,
    ErrorKind.SERVER_ERROR: ServerError,
    ErrorKind.UNKNOWN: UnknownApiError,
}


def classify(status_code: int, reason: str = "") -> ErrorKind:
    """Map an HTTP status code to an ErrorKind.

    Total over all integers: anything outside the documented codes is
    ``ErrorKind.UNKNOWN``. ``reason`` is accepted for symmetry with
    :func:`error_from_response` and does not affect the result.
    """
    return _STATUS_KINDS.get(status_code, ErrorKind.UNKNOWN)


def error_from_response(status_code: int, message: str) -> ApiError:
    """Build the exception for a non-success response.

    Args:
        status_code: HTTP status of the response
        message: Server message, carried verbatim

    Returns:
        ApiError subclass matching ``classify(status_code)``
    """
    error_cls = _KIND_ERRORS[classify(status_code, message)]
    return error_cls(message, status_code)


def log_exception(
    exc: Exception,
    scope: str = LogScope.ERROR_HANDLER,
    logger: Optional[logging.Logger] = None
) -> None:
    """Log exception with structured context.

    Args:
        exc: Exception to log
        scope: Log scope identifier
        logger: Optional custom logger (uses structlog if not provided)
    """
    if logger is None:
        logger = get_scoped_logger(scope)

    if isinstance(exc, AppException):
        logger.error(
            "app_exception",
            error_code=exc.error_code,
            kind=exc.kind.value if exc.kind else None,
            message=exc.message,
            context=exc.context
        )
    else:
        logger.error(
            "unexpected_exception",
            error_type=type(exc).__name__,
            message=str(exc),
        )

