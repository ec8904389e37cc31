class Sink:
    """XOR accumulator for task results.

    Every result produced during warmup, calibration and sampling is folded in
    so the work cannot be proven unused. Program logic never reads it; the
    ``value`` property exists for tests.

    Not thread-safe. Parallel runs need one sink per thread.
    """

    __slots__ = ("_acc",)

    def __init__(self) -> None:
        self._acc = 0

    def fold(self, result: int) -> None:
        self._acc ^= result

    @property
    def value(self) -> int:
        return self._acc

    def __repr__(self) -> str:
        return "Sink()"
