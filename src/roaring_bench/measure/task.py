from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class Task(Protocol):
    """A named, repeatable unit of work.

    ``run`` performs exactly the work being measured and returns an integer
    derived from its output (a cardinality, a count). It must not do I/O and
    must not cache results between calls.
    """

    name: str

    def run(self) -> int: ...


@dataclass(frozen=True)
class NamedTask:
    name: str
    fn: Callable[[], int]

    def run(self) -> int:
        return self.fn()
