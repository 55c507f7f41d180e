"""Abstract world: a typed facade over Grid plus the world's event bus.

A world is owned by an environment that builds it, calls ``initialize`` once,
then drives placement and queries. The world never schedules itself.

Concrete worlds hold one occupant kind each and implement ``place_item`` and
``place_items``; the base class can store any occupant but cannot narrow a
loosely typed one to the exact kind a subtype expects, so that is left to
the subtype.
"""

import random
import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from core.errors import InvalidArgumentError
from core.observer import get_logger
from world.coordinate import Coordinate, Locatable
from world.events import WorldEvent
from world.grid import Grid

T = TypeVar("T", bound=Locatable)

_rng = random.Random()
_rng_lock = threading.Lock()


def seed_random(seed):
    """Reseed the process-wide coordinate source. Never done implicitly."""
    with _rng_lock:
        _rng.seed(seed)


def get_random_coordinate(max_x, max_y, rng=None):
    """Uniform Coordinate with 0 <= x < max_x and 0 <= y < max_y.

    Draws from ``rng`` when given, otherwise from the shared source.
    """
    if max_x <= 0 or max_y <= 0:
        raise InvalidArgumentError(f"bounds must be positive, got {max_x}x{max_y}",
                                   context={"max_x": max_x, "max_y": max_y})
    if rng is not None:
        return Coordinate(rng.randrange(max_x), rng.randrange(max_y))
    with _rng_lock:
        return Coordinate(_rng.randrange(max_x), _rng.randrange(max_y))


class World(ABC, Generic[T]):
    """A bounded grid of single-occupancy cells for one occupant kind."""

    get_random_coordinate = staticmethod(get_random_coordinate)

    def __init__(self, event_bus):
        self._event_bus = event_bus
        self._environment = None
        self._grid = Grid()
        self._log = get_logger()

    def __str__(self):
        return "World"

    def initialize(self, width, height, environment):
        # A rejected size must leave both grid and environment untouched.
        Grid.check_size(width, height)
        self.set_environment(environment)
        self._grid.initialize(width, height)
        self._log.info("world init", world=str(self), width=width, height=height)

    def initialize_from(self, world_config, environment):
        """initialize() sized by a WorldConfig."""
        self.initialize(world_config.width, world_config.height, environment)

    # placement

    def put_item(self, *args):
        """put_item(x, y, item) or put_item(item) at the item's own x, y.

        Coordinates are not pre-checked; out of range raises OutOfBoundsError.
        """
        if len(args) == 3:
            x, y, item = args
        elif len(args) == 1:
            item, = args
            x, y = item.x, item.y
        else:
            raise TypeError(f"put_item() takes (item) or (x, y, item), got {len(args)} arguments")
        self._grid.put(x, y, item)

    @abstractmethod
    def place_items(self, items):
        """Place a batch of occupants, narrowing each to this world's kind."""

    @abstractmethod
    def place_item(self, item):
        """Place one occupant, narrowing it to this world's kind."""

    def free(self, x, y):
        self.put_item(x, y, None)

    # queries

    def in_bounds(self, x, y):
        return self._grid.in_bounds(x, y)

    def get_item(self, x, y):
        return self._grid.get(x, y)

    def get_items(self):
        """Live column-major table; cell writes go straight into the world."""
        return self._grid.rows()

    def get_items_copied(self):
        """New lists, same occupants. Mutating an occupant still shows here."""
        return self._grid.rows_copy()

    def get_items_flat(self):
        return self._grid.flatten()

    @property
    def width(self):
        return self._grid.width

    @property
    def height(self):
        return self._grid.height

    @property
    def initialized(self):
        return self._grid.initialized

    # environment and bus

    @property
    def environment(self):
        return self._environment

    def get_environment(self):
        return self._environment

    def set_environment(self, environment):
        self._environment = environment

    @property
    def event_bus(self):
        return self._event_bus

    def get_event_bus(self):
        return self._event_bus

    def publish(self, kind, topic="", **payload):
        """Announce a WorldEvent on this world's bus; returns deliveries."""
        return self._event_bus.publish(WorldEvent(kind, str(self), payload), topic=topic)
