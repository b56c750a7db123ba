"""
Callback-to-stream bridge

The store produces event ids by calling a sink; a gRPC handler has to yield
them. EventIDStream runs the store call on a worker of a shared executor and
hands ids over through a bounded queue, so the producer blocks when the client
falls behind and the full result set is never held in memory. The executor
bounds how many store scans run at once; streams beyond that wait for a free
worker.
"""

import logging
import queue
import threading
from concurrent.futures import Executor, Future
from typing import Iterator, Optional

from .errors import GatewayError
from .event_store import EventStore
from .models import TimeQuery

logger = logging.getLogger(__name__)

_DONE = object()
_PUT_TIMEOUT = 0.1


class StreamClosedError(GatewayError):
    """The consuming side stopped reading"""


class EventIDStream:
    """Iterate the ids a store emits for a TimeQuery.

    Ids arrive in the order the store emits them. If the store call fails,
    `error` is set and iteration ends after every id emitted before the
    failure has been yielded.
    """

    def __init__(self, store: EventStore, query: TimeQuery, executor: Executor,
                 buffer_size: int = 1000):
        self.store = store
        self.query = query
        self.error: Optional[BaseException] = None
        self._queue: "queue.Queue" = queue.Queue(maxsize=max(buffer_size, 1))
        self._closed = threading.Event()
        self._executor = executor
        self._future: Optional[Future] = None

    def start(self) -> "EventIDStream":
        self._future = self._executor.submit(self._produce)
        return self

    def emit(self, event_id: str):
        """Sink handed to the store"""
        while True:
            if self._closed.is_set():
                raise StreamClosedError("event id stream closed by consumer")
            try:
                self._queue.put(event_id, timeout=_PUT_TIMEOUT)
                return
            except queue.Full:
                continue

    def _produce(self):
        try:
            self.store.stream_event_ids(self.query, self.emit)
        except StreamClosedError:
            logger.debug("Event id stream abandoned by consumer")
        except Exception as e:
            self.error = e
        finally:
            while not self._closed.is_set():
                try:
                    self._queue.put(_DONE, timeout=_PUT_TIMEOUT)
                    break
                except queue.Full:
                    continue

    def __iter__(self) -> Iterator[str]:
        try:
            while True:
                item = self._queue.get()
                if item is _DONE:
                    return
                yield item
        finally:
            self._closed.set()
            # A producer still waiting for a worker never starts
            if self._future is not None:
                self._future.cancel()
