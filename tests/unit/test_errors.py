from __future__ import annotations

from tokensoft_sdk.core.errors import (
    TokensoftApiError,
    TokensoftConfigurationError,
    TokensoftError,
    TokensoftProjectionError,
    TokensoftProtocolError,
    TokensoftTransportError,
    format_api_errors,
)
from tokensoft_sdk.core.models import ApiError


def test_error_hierarchy():
    assert issubclass(TokensoftConfigurationError, TokensoftError)
    assert issubclass(TokensoftProtocolError, TokensoftTransportError)
    assert issubclass(TokensoftApiError, TokensoftError)
    assert issubclass(TokensoftProjectionError, ValueError)


def test_format_api_errors_joins_with_semicolons():
    errors = [
        ApiError(message="bad email", name="ValidationError", time_thrown=None),
        ApiError(message="denied", name="AuthError", time_thrown=None, data={"code": 7}),
    ]
    assert format_api_errors(errors) == (
        'Errors: ValidationError: bad email; AuthError: denied - {"code": 7}'
    )


def test_api_error_keeps_errors_and_data():
    error = ApiError(message="m", name="N", time_thrown=None)
    exc = TokensoftApiError("x", errors=[error], data={"user": None})
    assert exc.errors == (error,)
    assert exc.data == {"user": None}


def test_api_error_from_payload_defaults():
    error = ApiError.from_payload({"message": "m"})
    assert error.name == "Error"
    assert error.time_thrown is None
    assert error.data is None
