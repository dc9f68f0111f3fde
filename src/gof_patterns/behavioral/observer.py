"""Observer.

Subscribers register callbacks on a subject and are called back,
synchronously and in subscription order, every time it emits a value.
"""

import itertools
import threading
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")
Callback = Callable[[T], Any]

logger = get_logger(__name__)


class Subscription:
    """Handle returned by ``Subject.subscribe``."""

    def __init__(self, subject: "Subject", subscription_id: int):
        self._subject = subject
        self._subscription_id = subscription_id
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        """Stop receiving future emissions. Calling it again is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._subject._remove(self._subscription_id)


class Subject(Generic[T]):
    """
    Event source with an ordered list of subscriber callbacks.

    ``next()`` takes a snapshot of the subscribers before calling them, so
    unsubscribing during an emission only affects later emissions. A
    callback that raises is logged and the remaining callbacks still run.
    """

    def __init__(self):
        self._subscribers: List[Tuple[int, Callback]] = []
        self._ids = itertools.count()
        self._lock = threading.Lock()

    def subscribe(self, callback: Callback) -> Subscription:
        with self._lock:
            subscription_id = next(self._ids)
            self._subscribers.append((subscription_id, callback))
        logger.debug("Subscriber added", subscription_id=subscription_id)
        return Subscription(self, subscription_id)

    def _remove(self, subscription_id: int) -> None:
        with self._lock:
            self._subscribers = [
                (sid, callback) for sid, callback in self._subscribers if sid != subscription_id
            ]
        logger.debug("Subscriber removed", subscription_id=subscription_id)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def next(self, value: T) -> None:
        """Emit value to every current subscriber."""
        with self._lock:
            snapshot = list(self._subscribers)

        for subscription_id, callback in snapshot:
            try:
                callback(value)
            except Exception as e:
                logger.error(
                    "Error in subscriber callback",
                    subscription_id=subscription_id,
                    error=str(e),
                )


def run_demo(console: Optional[ConsolePort] = None) -> None:
    """Three TV companies relay the same news."""
    console = console or get_console()

    news: Subject[str] = Subject()
    news.subscribe(lambda v: console.write_line(f"{v} via TVCompany1"))
    news.subscribe(lambda v: console.write_line(f"{v} via TVCompany2"))
    news.subscribe(lambda v: console.write_line(f"{v} via TVCompany3"))

    news.next("Breaking news: ")
    news.next("Something happened!")
