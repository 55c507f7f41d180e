import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class WorldConfig:
    __slots__ = ("width", "height", "random_seed")

    def __init__(self, width=32, height=32, random_seed=None):
        self.width = width
        self.height = height
        self.random_seed = random_seed


class BusConfig:
    __slots__ = ("queue_size",)

    def __init__(self, queue_size=50):
        self.queue_size = queue_size


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("world", "bus", "logging")

    def __init__(self, world=None, bus=None, logging=None):
        self.world = world or WorldConfig()
        self.bus = bus or BusConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            WorldConfig(**d.get("world", {})),
            BusConfig(**d.get("bus", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))


def setup(config=None):
    """Apply logging level and random seed; returns the config used."""
    from core.observer import configure_from
    from world.base import seed_random

    config = config or load_config()
    configure_from(config.logging)
    if config.world.random_seed is not None:
        seed_random(config.world.random_seed)
    return config
