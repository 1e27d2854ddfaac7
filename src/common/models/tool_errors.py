"""Canonical tool error constructors."""

from __future__ import annotations

from typing import Any, Optional

from common.errors.error_codes import (
    canonical_error_code_for_category,
    get_error_documentation,
    rpc_code_for_category,
)
from common.models.error_metadata import ErrorCategory, ToolError


def _build_tool_error(
    *,
    category: ErrorCategory,
    message: str,
    retryable: bool = False,
    details_safe: Optional[dict[str, Any]] = None,
) -> ToolError:
    doc = get_error_documentation(category)
    return ToolError(
        category=category,
        code=canonical_error_code_for_category(category).value,
        message=message,
        retryable=retryable,
        rpc_code=rpc_code_for_category(category),
        details_safe=details_safe,
        hint=doc.user_action if doc else None,
    )


def tool_error_invalid_params(
    *, message: str, details_safe: Optional[dict[str, Any]] = None
) -> ToolError:
    """Build a canonical invalid-params tool error."""
    return _build_tool_error(
        category=ErrorCategory.INVALID_PARAMS, message=message, details_safe=details_safe
    )


def tool_error_method_not_found(
    *, message: str, details_safe: Optional[dict[str, Any]] = None
) -> ToolError:
    """Build a canonical method-not-found tool error."""
    return _build_tool_error(
        category=ErrorCategory.METHOD_NOT_FOUND, message=message, details_safe=details_safe
    )


def tool_error_timeout(
    *,
    message: str = "Request timed out.",
    details_safe: Optional[dict[str, Any]] = None,
) -> ToolError:
    """Build a canonical timeout tool error.

    Timeouts are not retried automatically, so ``retryable`` stays false.
    """
    return _build_tool_error(
        category=ErrorCategory.TIMEOUT, message=message, details_safe=details_safe
    )


def tool_error_internal(
    *,
    message: str = "Internal error.",
    details_safe: Optional[dict[str, Any]] = None,
) -> ToolError:
    """Build a canonical internal tool error."""
    return _build_tool_error(
        category=ErrorCategory.INTERNAL, message=message, details_safe=details_safe
    )
