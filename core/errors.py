"""Tracked errors raised by the world core and its event bus."""

from utils.tracking import format_timestamp, generate_ksuid


class BaseSimError(Exception):
    """Base error carrying a unique id and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class BusError(BaseSimError):
    """Event bus misuse (bad subscriber names, bad queue sizes)."""

    def __init__(self, message, subscriber_name=None, **kwargs):
        context = kwargs.pop("context", {})
        if subscriber_name:
            context["subscriber_name"] = subscriber_name
        super().__init__(message, context=context, **kwargs)


class WorldError(BaseSimError):
    """Base for grid and world failures."""


class OutOfBoundsError(WorldError, IndexError):
    """Cell access outside the live grid."""

    def __init__(self, x, y, width, height, **kwargs):
        context = kwargs.pop("context", {})
        context.update(x=x, y=y, width=width, height=height)
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} grid", context=context, **kwargs)
        self.x = x
        self.y = y


class WorldNotInitializedError(WorldError, RuntimeError):
    """Placement or query before initialize()."""

    def __init__(self, message="world used before initialize()", **kwargs):
        super().__init__(message, **kwargs)


class InvalidArgumentError(WorldError, ValueError):
    """An argument outside its documented domain."""

    def __init__(self, message, argument=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if argument:
            context[argument] = value
        super().__init__(message, context=context, **kwargs)
