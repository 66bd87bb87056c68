"""Exceptions raised by fast_raycast."""


class RaycastError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(RaycastError, ValueError):
    """A degenerate input: zero direction, bad cell size, malformed point."""


class NoConverterRegisteredError(RaycastError, LookupError):
    """No conversion function is registered for a type or its superclasses."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        super().__init__(
            f"{cls.__qualname__} object provided to Converter.from_object "
            "did not have a registered converter"
        )
