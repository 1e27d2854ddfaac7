"""Tests for typed chart tool envelopes."""

import json

from common.models.error_metadata import ErrorCategory, ToolError
from common.models.tool_envelopes import (
    ChartDimensions,
    ChartResponseEnvelope,
    ChartToolMetadata,
)


def test_envelope_defaults():
    env = ChartResponseEnvelope(result="▁▂▃")

    assert env.schema_version == "1.0"
    assert env.metadata.tool_version == "v1"
    assert env.error is None
    assert not env.is_error()


def test_envelope_serialization_omits_unset_fields():
    env = ChartResponseEnvelope(
        result="chart",
        metadata=ChartToolMetadata(
            chart_type="line", dimensions=ChartDimensions(width=60, height=15), data_points=3
        ),
    )
    payload = json.loads(env.model_dump_json(exclude_none=True))

    assert payload["result"] == "chart"
    assert payload["metadata"]["dimensions"] == {"width": 60, "height": 15}
    assert "error" not in payload
    assert "title" not in payload["metadata"]


def test_error_envelope_serialization():
    env = ChartResponseEnvelope(
        error=ToolError(category=ErrorCategory.INVALID_PARAMS, message="bad width")
    )
    payload = json.loads(env.model_dump_json(exclude_none=True))

    assert env.is_error()
    assert "result" not in payload
    assert payload["error"]["category"] == "invalid_params"
    assert payload["error"]["message"] == "bad width"
