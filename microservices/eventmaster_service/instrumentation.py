"""
Operation instrumentation

perform_operation is the envelope every write goes through: it times the
call, counts the outcome under the operation name and wraps failures with
that name. Reads and streams use track(), which does the same timing and
counting around a block whose result is data rather than an id.
"""

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator

from core.metrics import RequestMetrics, ms_since

from .errors import OperationError
from .models import WriteResponse

logger = logging.getLogger(__name__)


def perform_operation(recorder: RequestMetrics, method: str, op: Callable[[], str]) -> WriteResponse:
    """
    Run a write operation once and acknowledge it.

    Args:
        recorder: Metrics for the calling front end
        method: Operation name used as the metric label and error context
        op: Performs the write and returns the store-assigned id

    Returns:
        WriteResponse carrying the id

    Raises:
        OperationError: wrapping whatever op raised
    """
    start = time.monotonic()
    try:
        object_id = op()
    except Exception as e:
        recorder.failure(method)
        logger.error(f"Error performing operation {method}: {e}")
        raise OperationError(method, e) from e
    else:
        recorder.success(method)
        return WriteResponse(id=object_id or "")
    finally:
        recorder.observe(method, ms_since(start))


@contextmanager
def track(recorder: RequestMetrics, name: str) -> Iterator[None]:
    """Time a block and count it as a failure if anything escapes it"""
    start = time.monotonic()
    try:
        yield
    except BaseException:
        # GeneratorExit lands here when a streaming client goes away
        recorder.failure(name)
        raise
    else:
        recorder.success(name)
    finally:
        recorder.observe(name, ms_since(start))
