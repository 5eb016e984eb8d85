# src/taskboard/tasks/task_reporter.py

from __future__ import annotations

"""
Background reporter.

A small periodic loop, run in a daemon thread, that:
- counts all tasks through the service,
- emits a one-line report,
- waits for the next tick or for stop(), whichever comes first.

The wait is on a threading.Event, so stop() takes effect immediately instead
of at the next wake-up. No lock is held while waiting.
"""

import logging
import threading
from collections.abc import Callable
from typing import Protocol

from .task_filters import TaskFilter, match_all
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 2.0


class TaskQuery(Protocol):
    def find_tasks(self, predicate: TaskFilter) -> list[Task]: ...


def format_report(total: int) -> str:
    return f"[Report] Total tasks: {total}"


class BackgroundReporter:
    def __init__(
            self,
            service: TaskQuery,
            *,
            interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
            emit: Callable[[str], None] = print,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._service = service
        self._interval = float(interval_seconds)
        self._emit = emit
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.reports_emitted = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("reporter already started")
        self._thread = threading.Thread(target=self.run, name="task-reporter", daemon=True)
        self._thread.start()
        logger.info("Background reporter started (interval=%.2fs).", self._interval)

    def stop(self) -> None:
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout=timeout)

    def run(self) -> None:
        """Loop until stop(). Can also be called directly (blocks the caller)."""
        while not self._stop_event.is_set():
            try:
                total = len(self._service.find_tasks(match_all()))
            except Exception:
                logger.exception("Reporter query failed")
            else:
                self._emit(format_report(total))
                self.reports_emitted += 1
                logger.debug("Report emitted total=%s", total)

            if self._stop_event.wait(self._interval):
                break

        logger.info("Background reporter stopped after %d reports.", self.reports_emitted)
