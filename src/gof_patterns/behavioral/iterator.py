"""Iterator.

A lazy, finite, non-restartable walk over a bounded range.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gof_patterns.domain.exceptions import InvalidRangeError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console


@dataclass(frozen=True)
class IteratorResult:
    """One step of an iteration: the value and whether the sequence is exhausted."""
    value: int
    done: bool


class RangeIterator:
    """
    Stateful iterator over ``(start, end]`` in increments of step.

    Each call to ``next()`` advances the cursor by step and reports the new
    value until the cursor reaches end. Once exhausted, ``next()`` keeps
    returning ``IteratorResult(end, done=True)``. The iterator never
    restarts.

    The cursor is advanced before it is compared again, so a step that
    does not divide the range evenly reports one value past end.
    """

    def __init__(self, start: int, end: int, step: int = 1):
        if isinstance(step, bool) or not isinstance(step, int) or step < 1:
            raise InvalidRangeError(step)
        self._current = start
        self._end = end
        self._step = step

    def next(self) -> IteratorResult:
        if self._current < self._end:
            self._current += self._step
            return IteratorResult(value=self._current, done=False)
        return IteratorResult(value=self._end, done=True)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value


def range_iterator(start: int, end: int, step: int = 1) -> RangeIterator:
    return RangeIterator(start, end, step)


def run_demo(
    console: Optional[ConsolePort] = None,
    start: int = 0,
    end: int = 20,
    step: int = 5,
    items: Iterable[str] = ("item1", "item2", "item3"),
) -> None:
    """Iterate a plain collection, then a lazy range."""
    console = console or get_console()

    for item in items:
        console.write_line(item)

    for n in range_iterator(start, end, step):
        console.write_line(str(n))
