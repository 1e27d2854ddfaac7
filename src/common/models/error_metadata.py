"""Structured error metadata models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorCategory(str, Enum):
    """Canonical error categories."""

    INVALID_PARAMS = "invalid_params"
    METHOD_NOT_FOUND = "method_not_found"
    INVALID_REQUEST = "invalid_request"
    PARSE_ERROR = "parse_error"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class ToolError(BaseModel):
    """Canonical tool error contract."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    category: ErrorCategory = Field(..., description="Error category")
    code: Optional[str] = Field(None, description="Stable machine-readable error code")
    message: str = Field(
        ..., max_length=2048, description="Safe user-facing error message (bounded)"
    )
    retryable: bool = Field(False, description="Whether the error is retryable")
    rpc_code: Optional[int] = Field(None, description="JSON-RPC error code for this category")
    details_safe: Optional[dict[str, Any]] = Field(
        None, description="Safe details that can be surfaced to callers"
    )
    hint: Optional[str] = Field(None, max_length=2048, description="Suggested corrective action")

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses/telemetry."""
        return self.model_dump(mode="json", exclude_none=True)
