# -*- coding: utf-8 -*-
"""Tests for the background task runner."""

from __future__ import annotations

import threading
import time

from taskmanager.core.task_runner import TaskRunner


def test_submit_runs_in_background_and_reports_success() -> None:
    runner = TaskRunner(max_workers=1)
    results = []
    start = time.perf_counter()
    runner.submit("slow", lambda: (time.sleep(0.1), 42)[1], on_success=results.append)
    assert time.perf_counter() - start < 0.05
    runner.wait_for_all()
    assert results == [42]
    runner.shutdown()


def test_callbacks_run_on_worker_thread() -> None:
    runner = TaskRunner(max_workers=1)
    threads: list[str] = []
    runner.submit("name", lambda: None, on_success=lambda _: threads.append(threading.current_thread().name))
    runner.wait_for_all()
    assert threads and threads[0].startswith("taskmanager")
    runner.shutdown()


def test_error_callback_receives_exception() -> None:
    runner = TaskRunner(max_workers=1)
    errors: list[BaseException] = []

    def _boom():
        raise RuntimeError("boom")

    future = runner.submit("boom", _boom, on_error=errors.append)
    runner.wait_for_all()
    assert len(errors) == 1 and str(errors[0]) == "boom"
    assert isinstance(future.exception(), RuntimeError)
    runner.shutdown()


def test_failure_does_not_block_other_tasks() -> None:
    runner = TaskRunner(max_workers=2)
    done: list[str] = []
    runner.submit("bad", lambda: 1 / 0)
    runner.submit("good", lambda: "ok", on_success=done.append)
    runner.wait_for_all()
    assert done == ["ok"]
    runner.shutdown()


def test_pending_count_drops_to_zero() -> None:
    runner = TaskRunner(max_workers=1)
    gate = threading.Event()
    runner.submit("blocked", lambda: gate.wait(1))
    runner.submit("queued", lambda: None)
    assert runner.pending_count() == 2
    gate.set()
    runner.wait_for_all()
    assert runner.pending_count() == 0
    runner.shutdown()


def test_single_worker_finishes_in_submission_order() -> None:
    runner = TaskRunner(max_workers=1)
    finished: list[str] = []
    runner.submit("slow", lambda: (time.sleep(0.1), "slow")[1], on_success=finished.append)
    runner.submit("fast", lambda: "fast", on_success=finished.append)
    runner.shutdown(wait_for_tasks=True)
    assert finished == ["slow", "fast"]
