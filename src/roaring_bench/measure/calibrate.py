import logging
from collections.abc import Callable

from ..config import MAX_BATCH
from .sink import Sink
from .task import Task

logger = logging.getLogger(__name__)


def calibrate_batch(
    task: Task,
    target_ns: int,
    *,
    sink: Sink,
    clock: Callable[[], int],
    max_batch: int = MAX_BATCH,
) -> int:
    """Pick how many runs of ``task`` fill one timed sample of ~``target_ns``.

    Times a single invocation. The estimate is never revisited, so a task
    whose first call is much slower than later ones gets an undersized batch.

    Returns:
        Batch size in ``[1, max_batch]``.
    """
    start = clock()
    result = task.run()
    stop = clock()
    sink.fold(result)

    one_op_ns = max(1, stop - start)
    ideal = target_ns // one_op_ns

    if ideal <= 1:
        batch = 1
    elif ideal >= max_batch:
        batch = max_batch
    else:
        batch = ideal

    logger.debug(
        "Calibrated %s: one_op=%dns target=%dns batch=%d", task.name, one_op_ns, target_ns, batch
    )
    return batch
