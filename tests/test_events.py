"""Tests for SSE event types and serialization."""

import json
import math

import pytest

from receptionist_roi.streaming.events import SessionEventType, SSEEvent


class TestSSEEvent:
    def test_serializes_to_sse_format(self):
        event = SSEEvent(
            event_type=SessionEventType.SESSION_CREATED,
            data={"session_id": "abc-123"},
            sequence_id=1,
        )
        sse_str = event.to_sse_string()
        assert sse_str.startswith("event: session_created\n")
        assert "id: 1" in sse_str
        assert sse_str.endswith("\n\n")

    def test_event_type_values_are_unique(self):
        values = [t.value for t in SessionEventType]
        assert len(values) == len(set(values))

    def test_event_payload_is_valid_json(self):
        """Parse the data field from to_sse_string() and verify it's valid JSON."""
        event = SSEEvent(
            event_type=SessionEventType.RESULT_RECALCULATED,
            data={"result": {"net_benefit": 5274.2, "payback_period_months": None}},
            sequence_id=42,
        )
        for line in event.to_sse_string().strip().split("\n"):
            if line.startswith("data:"):
                parsed = json.loads(line[len("data:"):].strip())
                assert parsed["result"]["net_benefit"] == 5274.2
                assert parsed["result"]["payback_period_months"] is None
                assert "timestamp" in parsed
                break
        else:
            raise AssertionError("No data: line found in SSE output")

    def test_non_finite_payload_is_refused(self):
        event = SSEEvent(
            event_type=SessionEventType.RESULT_RECALCULATED,
            data={"value": math.inf},
            sequence_id=1,
        )
        with pytest.raises(ValueError):
            event.to_sse_string()
