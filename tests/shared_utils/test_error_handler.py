"""
Comprehensive tests for shared_utils.error_handler.

Covers the status classifier, error_from_response(), every exception
subclass, to_dict() serialisation and log_exception().
"""

from unittest.mock import MagicMock

import pytest

from shared_utils.constants import ErrorCode, ErrorKind
from shared_utils.error_handler import (
    ApiError,
    AppException,
    BadRequestError,
    ConfigurationError,
    ForbiddenError,
    ParsingError,
    SearchEmptyError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnauthorizedError,
    UnknownApiError,
    ValidationError,
    classify,
    error_from_response,
    log_exception,
)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        "status, kind",
        [
            (400, ErrorKind.BAD_REQUEST),
            (401, ErrorKind.UNAUTHORIZED),
            (403, ErrorKind.FORBIDDEN),
            (429, ErrorKind.TOO_MANY_REQUESTS),
            (500, ErrorKind.SERVER_ERROR),
            (502, ErrorKind.SERVER_ERROR),
            (503, ErrorKind.SERVER_ERROR),
            (504, ErrorKind.SERVER_ERROR),
        ],
    )
    def test_documented_codes(self, status: int, kind: ErrorKind) -> None:
        assert classify(status, "reason") == kind

    def test_unauthorized_and_forbidden_are_distinct(self) -> None:
        assert classify(401, "") != classify(403, "")

    @pytest.mark.parametrize("status", [0, 200, 204, 302, 404, 409, 418, 501, 599, 999, -1])
    def test_everything_else_is_unknown(self, status: int) -> None:
        assert classify(status, "whatever") == ErrorKind.UNKNOWN


# ---------------------------------------------------------------------------
# error_from_response
# ---------------------------------------------------------------------------


class TestErrorFromResponse:
    @pytest.mark.parametrize(
        "status, cls",
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (429, TooManyRequestsError),
            (503, ServerError),
            (404, UnknownApiError),
        ],
    )
    def test_builds_matching_class(self, status: int, cls: type) -> None:
        exc = error_from_response(status, "msg")
        assert type(exc) is cls
        assert isinstance(exc, ApiError)
        assert exc.status_code == status

    def test_unknown_keeps_reason_verbatim(self) -> None:
        reason = '  {"odd": "body"} \n'
        exc = error_from_response(418, reason)
        assert exc.kind == ErrorKind.UNKNOWN
        assert exc.message == reason
        assert str(exc) == reason

    def test_message_and_context(self) -> None:
        exc = error_from_response(429, "rate limited")
        assert exc.kind == ErrorKind.TOO_MANY_REQUESTS
        assert exc.error_code == ErrorCode.TOO_MANY_REQUESTS.value
        assert exc.message == "rate limited"
        assert exc.context == {"status_code": 429}


# ---------------------------------------------------------------------------
# AppException base and local errors
# ---------------------------------------------------------------------------


class TestAppException:
    def test_defaults(self) -> None:
        exc = AppException(error_code="TEST", message="boom")
        assert exc.error_code == "TEST"
        assert exc.message == "boom"
        assert exc.context == {}
        assert exc.kind is None
        assert str(exc) == "boom"

    def test_to_dict_structure(self) -> None:
        exc = AppException("CODE", "msg", context={"a": 1})
        assert exc.to_dict() == {
            "error": {"code": "CODE", "kind": None, "message": "msg", "context": {"a": 1}}
        }

    def test_to_dict_carries_kind(self) -> None:
        payload = error_from_response(429, "rate limited").to_dict()
        assert payload["error"]["kind"] == "too_many_requests"
        assert payload["error"]["context"] == {"status_code": 429}


class TestLocalErrors:
    def test_validation_error(self) -> None:
        exc = ValidationError("bad input", context={"field": "name"})
        assert exc.error_code == ErrorCode.INVALID_INPUT.value
        assert exc.kind is None

    def test_configuration_error_names_variable(self) -> None:
        exc = ConfigurationError("missing", variable="IMAGEKIT_PRIVATE_KEY")
        assert exc.kind == ErrorKind.ENVIRONMENT
        assert exc.variable == "IMAGEKIT_PRIVATE_KEY"
        assert exc.context["variable"] == "IMAGEKIT_PRIVATE_KEY"

    def test_configuration_error_without_variable(self) -> None:
        assert "variable" not in ConfigurationError("oops").context

    def test_transport_error(self) -> None:
        exc = TransportError("connection refused")
        assert exc.kind == ErrorKind.TRANSPORT
        assert exc.error_code == ErrorCode.TRANSPORT_FAILED.value

    def test_parsing_error(self) -> None:
        exc = ParsingError("bad json")
        assert exc.kind == ErrorKind.PARSING
        assert exc.error_code == ErrorCode.PARSING_FAILED.value

    def test_search_empty_error(self) -> None:
        exc = SearchEmptyError("nothing", criteria="png")
        assert exc.kind == ErrorKind.SEARCH_EMPTY
        assert exc.context["criteria"] == "png"

    def test_every_kind_has_an_exception(self) -> None:
        kinds = {
            cls.kind
            for cls in (
                BadRequestError, UnauthorizedError, ForbiddenError, TooManyRequestsError,
                ServerError, UnknownApiError, SearchEmptyError, TransportError,
                ConfigurationError, ParsingError,
            )
        }
        assert kinds == set(ErrorKind)


# ---------------------------------------------------------------------------
# log_exception
# ---------------------------------------------------------------------------


class TestLogException:
    def test_app_exception_uses_error_level(self) -> None:
        mock_logger = MagicMock()
        log_exception(TooManyRequestsError("slow down", 429), logger=mock_logger)
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "app_exception"
        assert kwargs["kind"] == "too_many_requests"
        assert kwargs["message"] == "slow down"

    def test_generic_exception(self) -> None:
        mock_logger = MagicMock()
        log_exception(RuntimeError("kaboom"), logger=mock_logger)
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "unexpected_exception"
        assert kwargs["error_type"] == "RuntimeError"

