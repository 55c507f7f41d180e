from core.errors import (
    BaseSimError,
    BusError,
    InvalidArgumentError,
    OutOfBoundsError,
    WorldError,
    WorldNotInitializedError,
)
from core.observer import get_logger, LogLevel, StructuredLogger

__all__ = [
    "BaseSimError",
    "BusError",
    "WorldError",
    "OutOfBoundsError",
    "WorldNotInitializedError",
    "InvalidArgumentError",
    "get_logger",
    "LogLevel",
    "StructuredLogger",
]
