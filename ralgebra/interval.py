from typing import Any, Protocol, TypeVar

Idx = TypeVar("Idx")


class HasBounds(Protocol):
    """Anything exposing a ``start`` and a possibly-absent ``end``."""

    @property
    def start(self) -> Any: ...

    @property
    def end(self) -> Any: ...
