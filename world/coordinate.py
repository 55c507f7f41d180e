"""Grid coordinates and the occupant capability the world relies on."""

from typing import NamedTuple, Protocol, runtime_checkable


class Coordinate(NamedTuple):
    """Immutable (x, y) cell position.

    Validity is relative to a particular grid, so nothing is checked here.
    """

    x: int
    y: int


@runtime_checkable
class Locatable(Protocol):
    """Anything that knows the cell it sits in."""

    x: int
    y: int
