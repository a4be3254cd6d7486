# -*- coding: utf-8 -*-
"""Background execution for persistence work."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable

logger = logging.getLogger(__name__)

TaskCallable = Callable[[], Any]
SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]


class TaskRunner:
    """Run callables on a thread pool and report results through callbacks.

    Callbacks are invoked on the worker thread. Tasks are not coalesced; with
    ``max_workers=1`` they run in submission order.
    """

    def __init__(self, max_workers: int = 2) -> None:
        self.max_workers = int(max_workers)
        self._executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="taskmanager")
        self._futures: list[Future] = []
        self._lock = threading.Lock()
        self._pending = 0

    def submit(
        self,
        name: str,
        func: TaskCallable,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> Future:
        with self._lock:
            self._pending += 1
        future = self._executor.submit(self._run, name, func, on_success, on_error)
        with self._lock:
            self._futures = [f for f in self._futures if not f.done()]
            self._futures.append(future)
        return future

    def _run(
        self,
        name: str,
        func: TaskCallable,
        on_success: SuccessCallback | None,
        on_error: ErrorCallback | None,
    ) -> Any:
        logger.debug("Task %s started", name)
        try:
            result = func()
        except Exception as exc:
            logger.exception("Task %s failed", name)
            if on_error is not None:
                on_error(exc)
            raise
        else:
            logger.debug("Task %s finished", name)
            if on_success is not None:
                on_success(result)
            return result
        finally:
            with self._lock:
                self._pending = max(0, self._pending - 1)

    def pending_count(self) -> int:
        with self._lock:
            return self._pending

    def wait_for_all(self, timeout: float | None = None) -> None:
        with self._lock:
            futures = list(self._futures)
        if futures:
            wait(futures, timeout=timeout)

    def shutdown(self, wait_for_tasks: bool = True) -> None:
        self._executor.shutdown(wait=wait_for_tasks, cancel_futures=False)
