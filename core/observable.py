"""
Minimal push-based subscription primitive.

A ``BehaviorSubject`` holds the latest value, replays it to every new
subscriber and then forwards each subsequent *distinct* value. Equality is
value equality (``==``), so pydantic models that compare field-by-field are
deduplicated naturally.

An observer that raises during ``next`` is logged and skipped; the value is
still delivered to every other observer.
"""

import logging
from threading import RLock
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Observer = Callable[[T], None]

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``subscribe``; call ``unsubscribe`` to stop updates."""

    def __init__(self, subject: "BehaviorSubject", observer: Observer):
        self._subject = subject
        self._observer = observer
        self.closed = False

    def unsubscribe(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._subject._remove(self._observer)


class BehaviorSubject(Generic[T]):
    """
    Latest-value subject with distinct-until-changed semantics.

    Example:
        subject = BehaviorSubject(None)
        seen = []
        sub = subject.subscribe(seen.append)   # seen == [None]
        subject.next(1)                         # seen == [None, 1]
        subject.next(1)                         # unchanged, not re-emitted
        sub.unsubscribe()
    """

    def __init__(self, initial: T):
        self._value = initial
        self._observers: List[Observer] = []
        self._lock = RLock()

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, observer: Observer) -> Subscription:
        with self._lock:
            self._observers.append(observer)
            current = self._value
        observer(current)
        return Subscription(self, observer)

    def next(self, value: T) -> bool:
        """Publish ``value``. Returns False when it equals the current value."""
        with self._lock:
            if value == self._value:
                return False
            self._value = value
            # Snapshot so observers may unsubscribe while being notified.
            observers = list(self._observers)
        # A failing observer must not starve the ones after it.
        for observer in observers:
            try:
                observer(value)
            except Exception:
                logger.exception("Observer %r raised while handling an update", observer)
        return True

    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def _remove(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
