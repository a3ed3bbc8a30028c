"""Event - observer primitive used for editor and graph notifications."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Event(Generic[T]):
    """
    Observable notification channel.

    Usage:
        on_log: Event[LogEntry] = Event()
        on_log += sink.append      # subscribe
        on_log.emit(entry)         # notify subscribers in subscription order
        on_log -= sink.append      # unsubscribe

    A handler subscribed twice is called once. Handlers added or removed
    while an emit is in progress take effect on the next emit.
    """

    def __init__(self):
        self._handlers: list[Callable[[T], None]] = []

    def __iadd__(self, handler: Callable[[T], None]) -> "Event[T]":
        if handler not in self._handlers:
            self._handlers.append(handler)
        return self

    def __isub__(self, handler: Callable[[T], None]) -> "Event[T]":
        if handler in self._handlers:
            self._handlers.remove(handler)
        return self

    def emit(self, value: T = None) -> None:
        """Notify all subscribers."""
        for handler in list(self._handlers):
            handler(value)

    def clear(self) -> None:
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)
