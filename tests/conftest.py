"""Pytest fixtures for all tests."""

import pytest

from communication.bus import EventBus
from world.base import World


class Token:
    """Minimal occupant: knows its own cell."""

    def __init__(self, name, x=0, y=0):
        self.name = name
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Token({self.name!r}, {self.x}, {self.y})"


class TokenWorld(World):
    """Concrete world holding Tokens only; announces each placement."""

    def __str__(self):
        return "TokenWorld"

    def place_item(self, item):
        if not isinstance(item, Token):
            raise TypeError(f"TokenWorld holds Token, not {type(item).__name__}")
        self.put_item(item)
        self.publish("placed", topic="placement", name=item.name, x=item.x, y=item.y)

    def place_items(self, items):
        for item in items:
            self.place_item(item)


class Environment:
    """Stand-in owner; the world only keeps a reference to it."""


@pytest.fixture
def bus():
    """Create test event bus."""
    return EventBus(queue_size=10)


@pytest.fixture
def environment():
    return Environment()


@pytest.fixture
def world(bus, environment):
    """A 3x2 token world, initialized and empty."""
    w = TokenWorld(bus)
    w.initialize(3, 2, environment)
    return w


@pytest.fixture
def token():
    return Token("A", x=2, y=1)
