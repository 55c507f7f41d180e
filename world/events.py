from utils.tracking import format_timestamp, generate_ksuid, ksuid_seconds


class WorldEvent:
    """Envelope for something a world announces on its bus.

    The base world never publishes; concrete worlds choose the kinds.
    """

    __slots__ = ("id", "timestamp", "kind", "world", "payload")

    def __init__(self, kind, world, payload=None, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.kind = kind
        self.world = world
        self.payload = payload or {}

    @property
    def created_at(self):
        """Unix second the event id was minted in."""
        return ksuid_seconds(self.id)

    def __repr__(self):
        return f"WorldEvent({self.kind!r}, world={self.world!r})"

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "created_at": self.created_at,
            "kind": self.kind,
            "world": self.world,
            "payload": dict(self.payload),
        }
