"""Tests for canonical tool error constructors."""

import pytest
from pydantic import ValidationError

from common.models.error_metadata import ErrorCategory, ToolError
from common.models.tool_errors import (
    tool_error_internal,
    tool_error_invalid_params,
    tool_error_method_not_found,
    tool_error_timeout,
)


def test_invalid_params_error_contract():
    error = tool_error_invalid_params(message="Width out of range", details_safe={"field": "width"})

    assert error.category == ErrorCategory.INVALID_PARAMS
    assert error.code == "VALIDATION_ERROR"
    assert error.rpc_code == -32602
    assert error.retryable is False
    assert error.details_safe == {"field": "width"}
    assert error.hint == "Check parameter types, ranges, and required fields"


def test_method_not_found_error_contract():
    error = tool_error_method_not_found(message="Unknown tool: create_pie_chart")

    assert error.code == "TOOL_NOT_FOUND"
    assert error.rpc_code == -32601


def test_timeout_error_is_not_retryable():
    error = tool_error_timeout()

    assert error.category == ErrorCategory.TIMEOUT
    assert error.code == "CHART_TIMEOUT"
    assert error.rpc_code == -32603
    assert error.retryable is False
    assert error.message == "Request timed out."


def test_internal_error_contract():
    error = tool_error_internal()
    assert error.code == "INTERNAL_ERROR"
    assert error.rpc_code == -32603


def test_tool_error_message_is_bounded():
    with pytest.raises(ValidationError):
        ToolError(category=ErrorCategory.INTERNAL, message="x" * 2049)


def test_to_dict_drops_none_fields():
    data = ToolError(category=ErrorCategory.INTERNAL, message="boom").to_dict()
    assert data == {"category": "internal", "message": "boom", "retryable": False}
