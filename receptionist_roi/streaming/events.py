"""SSE event types and serialization for calculator sessions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class SessionEventType(str, Enum):
    """All event types emitted while a calculator session is edited."""

    # Session lifecycle
    SESSION_CREATED = "session_created"
    SESSION_DELETED = "session_deleted"

    # Input edits
    FIELD_UPDATED = "field_updated"
    FIELD_REJECTED = "field_rejected"
    OPTIONS_UPDATED = "options_updated"

    # Presets
    INDUSTRY_APPLIED = "industry_applied"
    TIER_APPLIED = "tier_applied"

    # Recalculation
    RESULT_RECALCULATED = "result_recalculated"
    COMPUTE_BLOCKED = "compute_blocked"


@dataclass
class SSEEvent:
    """A single Server-Sent Event ready for wire serialization."""

    event_type: SessionEventType
    data: dict[str, Any]
    sequence_id: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def to_sse_string(self) -> str:
        """Serialize to SSE wire format.

        Format:
            event: <type>
            data: <json>
            id: <seq>

            (terminated by double newline)
        """
        payload = {
            **self.data,
            "timestamp": self.timestamp.isoformat(),
        }
        data_json = json.dumps(payload, default=str, allow_nan=False)
        return f"event: {self.event_type.value}\ndata: {data_json}\nid: {self.sequence_id}\n\n"
