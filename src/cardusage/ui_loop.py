import logging
import queue
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

logger = logging.getLogger("cardusage")

T = TypeVar("T")


class UiLoop:
    def __init__(self, max_workers: int = 2) -> None:
        self._queue: "queue.Queue[tuple[Callable[..., Any], tuple[Any, ...]]]" = (
            queue.Queue()
        )
        self._owner = threading.get_ident()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="cardusage-fetch"
        )

    def is_ui_thread(self) -> bool:
        return threading.get_ident() == self._owner

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue ``callback(*args)`` to run on the UI thread. Thread-safe."""
        self._queue.put((callback, args))

    def run_pending(self) -> int:
        """Run every queued callback; returns how many ran."""
        if not self.is_ui_thread():
            raise RuntimeError("run_pending must be called on the UI thread")
        ran = 0
        while True:
            try:
                callback, args = self._queue.get_nowait()
            except queue.Empty:
                return ran
            callback(*args)
            ran += 1

    def run_until(
        self, predicate: Callable[[], bool], timeout: float | None = None
    ) -> bool:
        """Pump the queue until ``predicate()`` holds or ``timeout`` elapses."""
        if not self.is_ui_thread():
            raise RuntimeError("run_until must be called on the UI thread")
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            self.run_pending()
            if predicate():
                return True
            if deadline is None:
                wait = 0.1
            else:
                wait = deadline - time.monotonic()
                if wait <= 0:
                    return False
                wait = min(wait, 0.1)
            try:
                callback, args = self._queue.get(timeout=wait)
            except queue.Empty:
                continue
            callback(*args)

    def run_in_background(
        self,
        work: Callable[[], T],
        on_done: Callable[["Future[T]"], Any],
    ) -> "Future[T]":
        """Run ``work`` on a worker thread, then ``on_done(future)`` on the UI thread."""
        future = self._executor.submit(work)
        future.add_done_callback(lambda f: self.post(on_done, f))
        return future

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    def __enter__(self) -> "UiLoop":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
