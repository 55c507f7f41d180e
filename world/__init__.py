from world.base import World, get_random_coordinate, seed_random
from world.coordinate import Coordinate, Locatable
from world.events import WorldEvent
from world.grid import Grid

__all__ = [
    "World",
    "Grid",
    "Coordinate",
    "Locatable",
    "WorldEvent",
    "get_random_coordinate",
    "seed_random",
]
