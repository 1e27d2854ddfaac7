"""Shared error construction helpers for chart tool handlers.

Every failure reaches the caller as a :class:`ChartResponseEnvelope` with a
populated ``error`` field, so clients never special-case error parsing.
"""

from typing import Optional

from charts.validation import ValidationError
from common.errors.error_codes import format_error_for_user
from common.errors.sanitization import sanitize_error_message, sanitize_exception
from common.models.error_metadata import ErrorCategory, ToolError
from common.models.tool_envelopes import ChartResponseEnvelope, ChartToolMetadata
from common.models.tool_errors import (
    tool_error_internal,
    tool_error_invalid_params,
    tool_error_method_not_found,
    tool_error_timeout,
)
from mcp_server.utils.timeout import ChartTimeoutError

_BUILDERS = {
    ErrorCategory.INVALID_PARAMS: tool_error_invalid_params,
    ErrorCategory.METHOD_NOT_FOUND: tool_error_method_not_found,
    ErrorCategory.TIMEOUT: tool_error_timeout,
    ErrorCategory.INTERNAL: tool_error_internal,
}


class UnknownChartToolError(LookupError):
    """No chart renderer is registered under the requested tool name."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


def classify_exception(exc: BaseException) -> ErrorCategory:
    if isinstance(exc, ValidationError):
        return ErrorCategory.INVALID_PARAMS
    if isinstance(exc, UnknownChartToolError):
        return ErrorCategory.METHOD_NOT_FOUND
    if isinstance(exc, ChartTimeoutError):
        return ErrorCategory.TIMEOUT
    return ErrorCategory.INTERNAL


def build_tool_error(category: ErrorCategory, message: str) -> ToolError:
    """Bounded ToolError whose message carries the documented description and suggestion."""
    builder = _BUILDERS.get(category)
    user_message = sanitize_error_message(format_error_for_user(category, message))
    if builder is None:
        return ToolError(category=category, message=user_message)
    return builder(message=user_message, details_safe={"reason": sanitize_error_message(message)})


def envelope_for_exception(
    exc: BaseException, metadata: Optional[ChartToolMetadata] = None
) -> ChartResponseEnvelope:
    category = classify_exception(exc)
    return ChartResponseEnvelope(
        result=None,
        metadata=metadata or ChartToolMetadata(),
        error=build_tool_error(category, sanitize_exception(exc)),
    )
