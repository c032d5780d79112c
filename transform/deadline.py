"""
Run a callable on a worker thread under a wall-clock deadline.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from typing import TypeVar

from secure_core.errors import ProcessingTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DeadlineGuard:
    """
    Race a computation against a timer; the first to settle decides the outcome.

    The returned Future resolves exactly once. When the timer wins, the future
    fails with ProcessingTimeout and the ``cancelled`` event handed to the
    computation is set, so a cooperative computation can stop early. When the
    computation wins, the timer is cancelled.
    """

    def __init__(self, timeout_seconds: float, label: str = "Processing") -> None:
        if timeout_seconds < 0:
            raise ValueError("timeout_seconds must be >= 0")
        self.timeout_seconds = timeout_seconds
        self.label = label

    def submit(self, fn: Callable[[threading.Event], T]) -> Future[T]:
        future: Future[T] = Future()
        future.set_running_or_notify_cancel()
        cancelled = threading.Event()
        lock = threading.Lock()
        start = time.perf_counter()

        def settle(result: T | None = None, error: BaseException | None = None) -> bool:
            with lock:
                if future.done():
                    return False
                if error is not None:
                    future.set_exception(error)
                else:
                    future.set_result(result)  # type: ignore[arg-type]
                return True

        def on_expire() -> None:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if settle(error=ProcessingTimeout(f"{self.label} timeout after {self.timeout_seconds:g}s")):
                logger.debug("%s expired after %.1fms", self.label, elapsed_ms)
            cancelled.set()

        timer = threading.Timer(self.timeout_seconds, on_expire)
        timer.daemon = True

        def work() -> None:
            try:
                result = fn(cancelled)
            except BaseException as exc:  # noqa: BLE001 - delivered through the future
                settle(error=exc)
            else:
                settle(result=result)
            finally:
                timer.cancel()

        # The timer starts first so that a zero deadline always wins over real work.
        timer.start()
        worker = threading.Thread(target=work, name=f"{self.label}-worker", daemon=True)
        worker.start()
        return future
