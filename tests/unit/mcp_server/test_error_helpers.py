"""Tests for chart tool error construction helpers."""

from charts.validation import ValidationError
from common.models.error_metadata import ErrorCategory
from mcp_server.utils.errors import (
    UnknownChartToolError,
    build_tool_error,
    classify_exception,
    envelope_for_exception,
)
from mcp_server.utils.timeout import ChartTimeoutError


def test_classify_exception():
    assert classify_exception(ValidationError("x")) == ErrorCategory.INVALID_PARAMS
    assert classify_exception(UnknownChartToolError("x")) == ErrorCategory.METHOD_NOT_FOUND
    assert classify_exception(ChartTimeoutError("op", 5)) == ErrorCategory.TIMEOUT
    assert classify_exception(ZeroDivisionError()) == ErrorCategory.INTERNAL


def test_build_tool_error_formats_message_for_users():
    error = build_tool_error(
        ErrorCategory.INVALID_PARAMS, "Width must be a number between 10 and 200"
    )

    assert error.message.startswith("Tool parameters are invalid or fail validation\n\nDetails: ")
    assert error.message.endswith("Suggestion: Check parameter types, ranges, and required fields")
    assert error.details_safe == {"reason": "Width must be a number between 10 and 200"}


def test_build_tool_error_without_canonical_builder():
    error = build_tool_error(ErrorCategory.INVALID_REQUEST, "bad envelope")
    assert error.message == (
        "The request is malformed or missing required fields\n\n"
        "Details: bad envelope\n\n"
        "Suggestion: Check request format and ensure all required fields are present"
    )
    assert error.category == ErrorCategory.INVALID_REQUEST


def test_envelope_for_exception_uses_exception_text():
    envelope = envelope_for_exception(ChartTimeoutError("create_histogram_generation", 50))

    assert envelope.is_error()
    assert envelope.error.category == ErrorCategory.TIMEOUT
    assert envelope.error.details_safe == {
        "reason": "Operation 'create_histogram_generation' timed out after 50ms"
    }
