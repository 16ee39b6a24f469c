"""StreamManager: per-session event buffering and SSE subscriber management."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Any, AsyncGenerator, Optional

from .events import SessionEventType, SSEEvent


class StreamManager:
    """Manages SSE event distribution for calculator sessions.

    Each session_id has:
    - A list of subscriber queues (asyncio.Queue instances)
    - A buffer of all emitted events for replay on reconnect
    - A monotonically increasing sequence counter

    Subscriber queues receive None when the session is discarded.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[asyncio.Queue[Optional[SSEEvent]]]] = defaultdict(list)
        self._buffers: dict[str, list[SSEEvent]] = defaultdict(list)
        self._sequences: dict[str, int] = defaultdict(int)

    async def subscribe(self, session_id: str) -> asyncio.Queue[Optional[SSEEvent]]:
        """Create and return a new subscriber queue for a session."""
        queue: asyncio.Queue[Optional[SSEEvent]] = asyncio.Queue()
        self._subscribers[session_id].append(queue)
        return queue

    async def unsubscribe(self, session_id: str, queue: asyncio.Queue[Optional[SSEEvent]]) -> None:
        """Remove a subscriber queue from a session."""
        subs = self._subscribers.get(session_id, [])
        if queue in subs:
            subs.remove(queue)

    async def emit(self, session_id: str, event: SSEEvent) -> None:
        """Broadcast an event to all subscribers and buffer it for replay."""
        self._buffers[session_id].append(event)
        for queue in self._subscribers[session_id]:
            await queue.put(event)

    async def publish(
        self, session_id: str, event_type: SessionEventType, data: dict[str, Any]
    ) -> SSEEvent:
        """Build an event with the session's next sequence id and emit it."""
        self._sequences[session_id] += 1
        event = SSEEvent(
            event_type=event_type,
            data=data,
            sequence_id=self._sequences[session_id],
        )
        await self.emit(session_id, event)
        return event

    def discard(self, session_id: str) -> None:
        """Drop a deleted session's buffer and counter and close its open streams."""
        for queue in self._subscribers.pop(session_id, []):
            queue.put_nowait(None)
        self._buffers.pop(session_id, None)
        self._sequences.pop(session_id, None)

    async def event_generator(
        self, session_id: str, last_event_id: int | None = None
    ) -> AsyncGenerator[str, None]:
        """Async generator yielding SSE strings for a session.

        If last_event_id is provided, replays buffered events with
        sequence_id > last_event_id before switching to live events.
        Ends once the session is discarded.
        """
        queue = await self.subscribe(session_id)
        replayed_up_to = 0
        try:
            # SSE comment as connection heartbeat (ignored by browsers)
            yield ": connected\n\n"

            # Replay missed events from buffer
            if last_event_id is not None:
                for event in list(self._buffers.get(session_id, [])):
                    if event.sequence_id > last_event_id:
                        replayed_up_to = event.sequence_id
                        yield event.to_sse_string()

            # Stream live events, skipping any already sent during replay
            while True:
                event = await queue.get()
                if event is None:
                    return
                if event.sequence_id <= replayed_up_to:
                    continue
                yield event.to_sse_string()
        finally:
            await self.unsubscribe(session_id, queue)
