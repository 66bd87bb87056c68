"""
Registry turning arbitrary objects into another representation (usually
an :class:`~fast_raycast.area.Area`) through per-type conversion functions.
"""
import logging
import threading
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from .errors import NoConverterRegisteredError

logger = logging.getLogger(__name__)

C = TypeVar("C")


class Converter(Generic[C]):
    """
    Maps a runtime type to a function converting its instances.

    Lookups fall back along the superclass chain (first base at each level)
    and cache an ancestor's function under the exact type that missed.
    Safe to share between threads; the last registration wins.
    """

    def __init__(self) -> None:
        self._functions: Dict[type, Callable[[Any], C]] = {}
        self._lock = threading.Lock()

    def register(self, cls: type, function: Callable[[Any], C]) -> None:
        """Register *function* for exactly *cls*, replacing any previous one."""
        with self._lock:
            self._functions[cls] = function
        logger.debug("registered converter for %s", cls.__qualname__)

    def lookup(self, cls: type) -> Callable[[Any], C]:
        """Return the function used for *cls* without invoking it."""
        with self._lock:
            function = self._functions.get(cls)
        if function is not None:
            return function

        ancestor = _superclass(cls)
        while ancestor is not None:
            with self._lock:
                function = self._functions.get(ancestor)
            if function is not None:
                with self._lock:
                    self._functions[cls] = function
                logger.debug("cached converter of %s for %s",
                             ancestor.__qualname__, cls.__qualname__)
                return function
            ancestor = _superclass(ancestor)

        raise NoConverterRegisteredError(cls)

    def from_object(self, obj: Any) -> C:
        """Convert *obj* with the function registered for its type."""
        return self.lookup(type(obj))(obj)

    def __contains__(self, cls: type) -> bool:
        with self._lock:
            return cls in self._functions


def _superclass(cls: type) -> Optional[type]:
    # first base only; mixins further right are not walked
    return cls.__bases__[0] if cls.__bases__ else None
