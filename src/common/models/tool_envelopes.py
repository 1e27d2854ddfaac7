"""Typed envelope models for chart tool IO."""

from typing import Optional

from pydantic import BaseModel, Field

from common.models.error_metadata import ToolError
from common.models.tool_versions import DEFAULT_TOOL_VERSION

# Current schema version for future-proofing
CURRENT_SCHEMA_VERSION = "1.0"
CURRENT_TOOL_VERSION = DEFAULT_TOOL_VERSION


class ChartDimensions(BaseModel):
    """Declared size of a rendered chart in character cells."""

    width: int
    height: int


class ChartToolMetadata(BaseModel):
    """Metadata for chart tool responses."""

    tool_version: str = Field(
        default=CURRENT_TOOL_VERSION,
        description="Semantic version for chart tool response contract",
    )
    chart_type: Optional[str] = Field(None, description="Renderer that produced the chart")
    title: Optional[str] = None
    dimensions: Optional[ChartDimensions] = None
    data_points: Optional[int] = Field(None, description="Number of input values")
    execution_time_ms: Optional[float] = None
    request_id: Optional[str] = Field(
        None, description="Request identifier propagated for cross-layer correlation"
    )


class ChartResponseEnvelope(BaseModel):
    """Standardized envelope for chart tool responses."""

    schema_version: str = Field(default=CURRENT_SCHEMA_VERSION)
    result: Optional[str] = Field(default=None, description="The rendered chart text")
    metadata: ChartToolMetadata = Field(default_factory=ChartToolMetadata)
    error: Optional[ToolError] = None

    def is_error(self) -> bool:
        """Check if the envelope represents an error."""
        return self.error is not None
