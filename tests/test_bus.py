"""Unit tests for EventBus."""

import asyncio
import pytest
from communication.bus import EventBus
from config import BusConfig
from core.errors import BusError


class TestEventBus:
    """Tests for EventBus class."""

    def test_bus_creation(self):
        """EventBus initializes with given queue size."""
        bus = EventBus(queue_size=10)
        assert bus._queue_size == 10
        assert len(bus._subscribers) == 0

    def test_bus_rejects_bad_queue_size(self):
        """Non-positive queue sizes are refused."""
        with pytest.raises(BusError):
            EventBus(queue_size=0)

    def test_publish_without_subscribers(self):
        """Publishing with nobody listening is fine and counted."""
        bus = EventBus(queue_size=10)
        assert bus.publish({"type": "test"}) == 0
        assert bus.get_stats()["total_published"] == 1

    @pytest.mark.asyncio
    async def test_subscribe(self):
        """Subscriber is added to bus."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("test-client")
        assert "test-client" in bus._subscribers
        assert sub.name == "test-client"
        assert bus.subscriber_count == 1

    @pytest.mark.asyncio
    async def test_subscribe_is_idempotent(self):
        """Subscribing twice under one name returns the same subscriber."""
        bus = EventBus(queue_size=10)
        first = await bus.subscribe("test-client")
        second = await bus.subscribe("test-client")
        assert first is second
        assert bus.subscriber_count == 1

    @pytest.mark.asyncio
    async def test_subscribe_empty_name(self):
        """Empty subscriber names are refused."""
        bus = EventBus(queue_size=10)
        with pytest.raises(BusError):
            await bus.subscribe("")

    @pytest.mark.asyncio
    async def test_subscribe_custom_queue_size(self):
        """Subscriber can have custom queue size."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("test-client", max_queue_size=50)
        assert sub.queue.maxsize == 50

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [0, -1])
    async def test_subscribe_rejects_bad_queue_size(self, size):
        """Non-positive per-subscriber sizes are refused, not defaulted."""
        bus = EventBus(queue_size=10)
        with pytest.raises(BusError):
            await bus.subscribe("test-client", max_queue_size=size)
        assert bus.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_subscribe_single_topic_string(self):
        """A bare topic string is one topic, not a set of characters."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("test-client", topics="placement")
        assert sub.topics == {"placement"}
        bus.publish({"type": "placed"}, topic="placement")
        bus.publish({"type": "other"}, topic="p")
        assert sub.queue.qsize() == 1

    def test_from_config(self):
        """EventBus.from_config takes the default queue size from BusConfig."""
        bus = EventBus.from_config(BusConfig(queue_size=7))
        assert bus._queue_size == 7

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        """Subscriber is removed from bus."""
        bus = EventBus(queue_size=10)
        await bus.subscribe("test-client")
        assert await bus.unsubscribe("test-client") is True
        assert "test-client" not in bus._subscribers

    @pytest.mark.asyncio
    async def test_unsubscribe_nonexistent(self):
        """Unsubscribing nonexistent client returns False."""
        bus = EventBus(queue_size=10)
        assert await bus.unsubscribe("nonexistent") is False

    @pytest.mark.asyncio
    async def test_publish_to_subscriber(self):
        """Message is delivered to subscriber."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("test-client")

        bus.publish({"type": "test", "value": 42})

        msg = await asyncio.wait_for(sub.queue.get(), timeout=1.0)
        assert msg["type"] == "test"
        assert msg["value"] == 42

    @pytest.mark.asyncio
    async def test_publish_to_multiple_subscribers(self):
        """Message is delivered to all subscribers."""
        bus = EventBus(queue_size=10)
        sub1 = await bus.subscribe("client-1")
        sub2 = await bus.subscribe("client-2")

        assert bus.publish({"type": "broadcast"}) == 2

        msg1 = await asyncio.wait_for(sub1.queue.get(), timeout=1.0)
        msg2 = await asyncio.wait_for(sub2.queue.get(), timeout=1.0)
        assert msg1["type"] == "broadcast"
        assert msg2["type"] == "broadcast"

    @pytest.mark.asyncio
    async def test_topic_filtering(self):
        """Subscribers with topics only see matching events."""
        bus = EventBus(queue_size=10)
        picky = await bus.subscribe("picky", topics=["placement"])
        everything = await bus.subscribe("everything")

        bus.publish({"type": "other"}, topic="removal")
        bus.publish({"type": "placed"}, topic="placement")

        assert picky.queue.qsize() == 1
        assert everything.queue.qsize() == 2
        assert picky.queue.get_nowait()["type"] == "placed"

    @pytest.mark.asyncio
    async def test_queue_overflow_drops_message(self):
        """Full queue drops new messages without blocking."""
        bus = EventBus(queue_size=2)
        sub = await bus.subscribe("slow-client", max_queue_size=2)

        bus.publish({"msg": 1})
        bus.publish({"msg": 2})
        assert bus.publish({"msg": 3}) == 0

        assert sub.dropped == 1
        assert sub.received == 2
        assert bus.get_stats()["total_dropped"] == 1

    @pytest.mark.asyncio
    async def test_get_stats(self):
        """Bus returns statistics."""
        bus = EventBus(queue_size=10)
        await bus.subscribe("client-1")
        bus.publish({"type": "test"})

        stats = bus.get_stats()
        assert stats["subscriber_count"] == 1
        assert stats["total_published"] == 1
        assert stats["total_delivered"] == 1

    @pytest.mark.asyncio
    async def test_get_subscriber_info(self):
        """Bus returns subscriber details."""
        bus = EventBus(queue_size=10)
        sub = await bus.subscribe("client-1")
        bus.publish({"type": "test"})

        await sub.queue.get()

        info = await bus.get_subscriber_info()
        assert len(info) == 1
        assert info[0]["name"] == "client-1"
        assert info[0]["queued"] == 0
        assert info[0]["received"] == 1
        assert info[0]["dropped"] == 0
