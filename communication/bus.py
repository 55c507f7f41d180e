import asyncio
import time
from core.errors import BusError
from core.observer import get_logger

class Subscriber:
    __slots__ = ("name", "queue", "topics", "created_at", "received", "dropped")

    def __init__(self, name, queue, topics=None):
        self.name = name
        self.queue = queue
        self.topics = topics or set()
        self.created_at = time.time()
        self.received = 0
        self.dropped = 0

    def wants(self, topic):
        return not self.topics or topic in self.topics

def _topic_set(topics):
    if not topics:
        return set()
    if isinstance(topics, str):
        return {topics}
    return set(topics)

class EventBus:
    """Copy-on-write pub/sub for world events.

    Publishing is synchronous and lock-free: it walks the current subscriber
    snapshot and never waits. A full subscriber queue drops the event.
    """

    def __init__(self, queue_size=50):
        if queue_size <= 0:
            raise BusError(f"queue_size must be positive, got {queue_size}")
        self._lock = asyncio.Lock()
        self._subscribers = {}
        self._subscribers_snapshot = []
        self._queue_size = queue_size
        self._log = get_logger()
        self.total_published = 0
        self.total_delivered = 0
        self.total_dropped = 0

    @classmethod
    def from_config(cls, bus_config):
        return cls(queue_size=bus_config.queue_size)

    async def subscribe(self, name, max_queue_size=None, topics=None):
        if not name:
            raise BusError("subscriber name must be non-empty")
        if max_queue_size is not None and max_queue_size <= 0:
            raise BusError(f"max_queue_size must be positive, got {max_queue_size}", subscriber_name=name)
        async with self._lock:
            if name in self._subscribers:
                return self._subscribers[name]
            maxsize = self._queue_size if max_queue_size is None else max_queue_size
            subscriber = Subscriber(name, asyncio.Queue(maxsize=maxsize), _topic_set(topics))
            self._subscribers[name] = subscriber
            self._subscribers_snapshot = list(self._subscribers.values())
            self._log.info(f"sub+ {name}", topics=sorted(subscriber.topics))
            return subscriber

    async def unsubscribe(self, name):
        async with self._lock:
            if name not in self._subscribers:
                return False
            del self._subscribers[name]
            self._subscribers_snapshot = list(self._subscribers.values())
            self._log.info(f"sub- {name}")
            return True

    def publish(self, event, topic=""):
        delivered = dropped = 0
        for subscriber in self._subscribers_snapshot:
            if not subscriber.wants(topic):
                continue
            try:
                subscriber.queue.put_nowait(event)
            except asyncio.QueueFull:
                subscriber.dropped += 1
                dropped += 1
                continue
            subscriber.received += 1
            delivered += 1
        self.total_published += 1
        self.total_delivered += delivered
        self.total_dropped += dropped
        if dropped:
            self._log.debug("publish dropped", topic=topic, dropped=dropped)
        return delivered

    @property
    def subscriber_count(self):
        return len(self._subscribers_snapshot)

    def get_stats(self):
        return {
            "subscriber_count": len(self._subscribers_snapshot),
            "total_published": self.total_published,
            "total_delivered": self.total_delivered,
            "total_dropped": self.total_dropped
        }

    async def get_subscriber_info(self):
        return [
            {   "name": subscriber.name,
                "topics": sorted(subscriber.topics),
                "queued": subscriber.queue.qsize(),
                "received": subscriber.received,
                "dropped": subscriber.dropped
            } for subscriber in self._subscribers_snapshot
        ]
