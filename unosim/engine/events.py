"""Notification hooks fired by the game controller."""

from typing import Any, Callable, List


class GameEvent:
    """A list of subscribers called in subscription order.

    Subscribers get the event arguments and their return values are ignored.
    """

    def __init__(self, name: str):
        self.name = name
        self._handlers: List[Callable[..., Any]] = []

    def subscribe(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Register a handler. Returns it so this can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: Callable[..., Any]) -> None:
        self._handlers.remove(handler)

    def fire(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"GameEvent({self.name!r}, {len(self._handlers)} handlers)"
