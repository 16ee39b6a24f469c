"""Tests for the StreamManager pub/sub and replay system."""

import asyncio

import pytest

from receptionist_roi.streaming.events import SessionEventType, SSEEvent
from receptionist_roi.streaming.manager import StreamManager


def _make_event(seq: int, event_type: SessionEventType = SessionEventType.SESSION_CREATED) -> SSEEvent:
    return SSEEvent(event_type=event_type, data={"seq": seq}, sequence_id=seq)


class TestStreamManager:
    @pytest.mark.asyncio
    async def test_emit_delivers_to_subscriber(self):
        """Subscribe, emit event, get from queue."""
        manager = StreamManager()
        queue = await manager.subscribe("session-1")
        await manager.emit("session-1", _make_event(1))
        received = await asyncio.wait_for(queue.get(), timeout=1.0)
        assert received.sequence_id == 1

    @pytest.mark.asyncio
    async def test_emit_delivers_to_multiple_subscribers(self):
        manager = StreamManager()
        q1 = await manager.subscribe("session-1")
        q2 = await manager.subscribe("session-1")
        await manager.emit("session-1", _make_event(1))
        r1 = await asyncio.wait_for(q1.get(), timeout=1.0)
        r2 = await asyncio.wait_for(q2.get(), timeout=1.0)
        assert r1.sequence_id == r2.sequence_id == 1

    @pytest.mark.asyncio
    async def test_sessions_are_isolated(self):
        manager = StreamManager()
        queue = await manager.subscribe("session-1")
        await manager.emit("session-2", _make_event(1))
        assert queue.empty()

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_delivery(self):
        manager = StreamManager()
        queue = await manager.subscribe("session-1")
        await manager.unsubscribe("session-1", queue)
        await manager.emit("session-1", _make_event(1))
        assert queue.empty()

    @pytest.mark.asyncio
    async def test_publish_assigns_increasing_sequence_ids(self):
        manager = StreamManager()
        first = await manager.publish("session-1", SessionEventType.FIELD_UPDATED, {})
        second = await manager.publish("session-1", SessionEventType.RESULT_RECALCULATED, {})
        other = await manager.publish("session-2", SessionEventType.SESSION_CREATED, {})
        assert (first.sequence_id, second.sequence_id) == (1, 2)
        assert other.sequence_id == 1

    @pytest.mark.asyncio
    async def test_discard_resets_sequence(self):
        manager = StreamManager()
        await manager.publish("session-1", SessionEventType.SESSION_CREATED, {})
        manager.discard("session-1")
        event = await manager.publish("session-1", SessionEventType.SESSION_CREATED, {})
        assert event.sequence_id == 1

    @pytest.mark.asyncio
    async def test_replay_missed_events_on_reconnect(self):
        """event_generator replays events with seq > last_event_id."""
        manager = StreamManager()
        for seq in (1, 2, 3):
            await manager.emit("session-1", _make_event(seq))

        gen = manager.event_generator("session-1", last_event_id=1)
        results = [await gen.__anext__() for _ in range(3)]  # heartbeat + 2 replays
        await gen.aclose()

        assert results[0] == ": connected\n\n"
        assert "id: 2" in results[1]
        assert "id: 3" in results[2]

    @pytest.mark.asyncio
    async def test_discard_ends_open_streams(self):
        manager = StreamManager()
        gen = manager.event_generator("session-1")
        await gen.__anext__()  # heartbeat

        manager.discard("session-1")

        with pytest.raises(StopAsyncIteration):
            await asyncio.wait_for(gen.__anext__(), timeout=1.0)
        assert "session-1" not in manager._subscribers

    @pytest.mark.asyncio
    async def test_event_published_during_heartbeat_sent_once(self):
        manager = StreamManager()
        gen = manager.event_generator("session-1", last_event_id=0)
        await gen.__anext__()  # heartbeat; already subscribed

        await manager.publish("session-1", SessionEventType.FIELD_UPDATED, {})
        replayed = await asyncio.wait_for(gen.__anext__(), timeout=1.0)
        await manager.publish("session-1", SessionEventType.RESULT_RECALCULATED, {})
        live = await asyncio.wait_for(gen.__anext__(), timeout=1.0)
        await gen.aclose()

        assert "id: 1" in replayed
        assert "id: 2" in live
