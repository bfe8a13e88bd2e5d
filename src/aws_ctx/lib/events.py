"""Typed event channel with disposable subscriptions."""

import logging
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

Listener: TypeAlias = Callable[[T], None]


class Subscription:
    """Handle returned by `EventEmitter.subscribe`. Dispose to stop listening."""

    def __init__(self, dispose: Callable[[], None]) -> None:
        self._dispose = dispose
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if not self._disposed:
            self._disposed = True
            self._dispose()


class EventEmitter(Generic[T]):
    """Synchronous broadcast to listeners in registration order.

    Each `fire` delivers exactly one call per listener; nothing is queued or
    coalesced. A listener that raises is logged and the remaining listeners
    still run.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._remove(listener))

    def fire(self, event: T) -> None:
        # Snapshot so listeners may dispose themselves mid-delivery
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Context listener %r failed", listener)

    def _remove(self, listener: Listener[T]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass
