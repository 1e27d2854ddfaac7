"""Canonical error-code taxonomy and user-facing error documentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR

from common.models.error_metadata import ErrorCategory


class ErrorCode(str, Enum):
    """Bounded canonical error codes for external contracts and observability."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    PARSE_ERROR = "PARSE_ERROR"
    CHART_TIMEOUT = "CHART_TIMEOUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_CATEGORY_TO_CODE: dict[str, ErrorCode] = {
    ErrorCategory.INVALID_PARAMS.value: ErrorCode.VALIDATION_ERROR,
    ErrorCategory.METHOD_NOT_FOUND.value: ErrorCode.TOOL_NOT_FOUND,
    ErrorCategory.INVALID_REQUEST.value: ErrorCode.INVALID_REQUEST,
    ErrorCategory.PARSE_ERROR.value: ErrorCode.PARSE_ERROR,
    ErrorCategory.TIMEOUT.value: ErrorCode.CHART_TIMEOUT,
    ErrorCategory.INTERNAL.value: ErrorCode.INTERNAL_ERROR,
}

# Timeouts have no JSON-RPC class of their own and travel as internal errors.
_CATEGORY_TO_RPC: dict[str, int] = {
    ErrorCategory.INVALID_PARAMS.value: INVALID_PARAMS,
    ErrorCategory.METHOD_NOT_FOUND.value: METHOD_NOT_FOUND,
    ErrorCategory.INVALID_REQUEST.value: INVALID_REQUEST,
    ErrorCategory.PARSE_ERROR.value: PARSE_ERROR,
    ErrorCategory.TIMEOUT.value: INTERNAL_ERROR,
    ErrorCategory.INTERNAL.value: INTERNAL_ERROR,
}

_CODE_GROUPS: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "VALIDATION",
    ErrorCode.TOOL_NOT_FOUND: "ROUTING",
    ErrorCode.INVALID_REQUEST: "PROTOCOL",
    ErrorCode.PARSE_ERROR: "PROTOCOL",
    ErrorCode.CHART_TIMEOUT: "TIMEOUT",
    ErrorCode.INTERNAL_ERROR: "INTERNAL",
}


@dataclass(frozen=True)
class ErrorDocumentation:
    """What an error class means and what the caller can do about it."""

    category: ErrorCategory
    description: str
    when: str
    user_action: str
    examples: Tuple[str, ...]


ERROR_DOCUMENTATION: dict[ErrorCategory, ErrorDocumentation] = {
    ErrorCategory.INVALID_REQUEST: ErrorDocumentation(
        category=ErrorCategory.INVALID_REQUEST,
        description="The request is malformed or missing required fields",
        when="MCP protocol violation or invalid JSON structure",
        user_action="Check request format and ensure all required fields are present",
        examples=(
            "Missing 'method' field in request",
            "Invalid JSON structure",
            "Wrong request schema",
        ),
    ),
    ErrorCategory.METHOD_NOT_FOUND: ErrorDocumentation(
        category=ErrorCategory.METHOD_NOT_FOUND,
        description="The requested tool or method is not available",
        when="Calling a tool that doesn't exist",
        user_action="Use list_tools to see available tools and check tool name spelling",
        examples=(
            "create_pie_chart (not implemented)",
            "generate_chart (wrong tool name)",
            "create_line_graph (should be create_line_chart)",
        ),
    ),
    ErrorCategory.INVALID_PARAMS: ErrorDocumentation(
        category=ErrorCategory.INVALID_PARAMS,
        description="Tool parameters are invalid or fail validation",
        when="Input data doesn't meet requirements",
        user_action="Check parameter types, ranges, and required fields",
        examples=(
            "data: [] (empty array)",
            "width: 5 (below minimum of 10)",
            "color: 'purple' (invalid color name)",
            "data: ['a', 'b'] (strings instead of numbers)",
        ),
    ),
    ErrorCategory.TIMEOUT: ErrorDocumentation(
        category=ErrorCategory.TIMEOUT,
        description="Chart generation did not finish within its time budget",
        when="Validation or rendering exceeded the configured timeout",
        user_action="Try a smaller dataset or raise CHART_GENERATION_TIMEOUT_MS",
        examples=("Rendering a very large dataset on a loaded host",),
    ),
    ErrorCategory.INTERNAL: ErrorDocumentation(
        category=ErrorCategory.INTERNAL,
        description="Unexpected server error during chart generation",
        when="Runtime errors, memory issues, or system failures",
        user_action="Try reducing data size or complexity, check server logs",
        examples=(
            "Out of memory with very large datasets",
            "System resource exhaustion",
            "Unexpected calculation errors",
        ),
    ),
    ErrorCategory.PARSE_ERROR: ErrorDocumentation(
        category=ErrorCategory.PARSE_ERROR,
        description="Failed to parse request JSON",
        when="Malformed JSON in request body",
        user_action="Validate JSON syntax and structure",
        examples=(
            "Missing closing bracket",
            "Trailing comma in JSON",
            "Invalid escape sequences",
        ),
    ),
}


def _normalize_category(category: str | ErrorCategory | None) -> str:
    if isinstance(category, ErrorCategory):
        return category.value
    if category is None:
        return ""
    return str(category).strip()


def canonical_error_code_for_category(
    category: str | ErrorCategory | None,
    *,
    fallback: ErrorCode = ErrorCode.INTERNAL_ERROR,
) -> ErrorCode:
    """Resolve canonical error code from category-like values."""
    normalized = _normalize_category(category)
    if not normalized:
        return fallback
    return _CATEGORY_TO_CODE.get(normalized, fallback)


def rpc_code_for_category(category: str | ErrorCategory | None) -> int:
    """JSON-RPC error code for a category; unknown values map to internal error."""
    return _CATEGORY_TO_RPC.get(_normalize_category(category), INTERNAL_ERROR)


def parse_error_code(
    value: Any,
    *,
    fallback: ErrorCode = ErrorCode.INTERNAL_ERROR,
) -> ErrorCode:
    """Parse string-like values to `ErrorCode` with safe fallback."""
    if isinstance(value, ErrorCode):
        return value
    if value is None:
        return fallback
    try:
        return ErrorCode(str(value).strip())
    except ValueError:
        return fallback


def error_code_group(value: Any) -> str:
    """Return a stable coarse grouping for telemetry dimensions."""
    parsed = parse_error_code(value)
    return _CODE_GROUPS.get(parsed, "INTERNAL")


def get_error_documentation(
    category: str | ErrorCategory | None,
) -> Optional[ErrorDocumentation]:
    normalized = _normalize_category(category)
    try:
        return ERROR_DOCUMENTATION.get(ErrorCategory(normalized))
    except ValueError:
        return None


def format_error_for_user(category: str | ErrorCategory | None, message: str) -> str:
    """Wrap a raw error message with its documented description and suggestion.

    Categories without documentation return ``message`` unchanged.
    """
    doc = get_error_documentation(category)
    if doc is None:
        return message
    return f"{doc.description}\n\nDetails: {message}\n\nSuggestion: {doc.user_action}"
