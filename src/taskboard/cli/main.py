# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, seeds the sample data, then walks through
the demonstration:
- employees and tasks,
- filtered, windowed and grouped views,
- file export,
- the background reporter running for a short while.
"""

from __future__ import annotations

import logging
import signal
import sys
import threading
from datetime import date

from ..cli.bootstrap import create_initial_state, seed_sample_data
from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_export import TaskExportError, export_tasks
from ..tasks.task_filters import both, high_priority, not_done
from ..tasks.task_reporter import BackgroundReporter

logger = logging.getLogger(__name__)


def _print_section(title: str) -> None:
    print(f"\n--- {title} ---")


def run_demo(
        state: AppState,
        *,
        today: date | None = None,
        stop_event: threading.Event | None = None,
) -> None:
    settings = state.settings
    if today is None:
        today = date.today()
    if stop_event is None:
        stop_event = threading.Event()

    sample = seed_sample_data(state, today=today)
    service = state.task_service
    logger.info("Demo data ready: %d employees, %d tasks.", len(state.employees), service.count())

    print("--- Employees ---")
    for emp in state.employees.find_all_sorted():
        print(emp)

    first, second = sample.employees
    print(f"Experience diff: {first.experience_gap(second)} years")

    _print_section("All Tasks")
    for task in state.tasks.find_all():
        print(task)

    reporter = BackgroundReporter(
        service,
        interval_seconds=float(getattr(settings, "report_interval_seconds", 2.0)),
    )
    reporter.start()

    try:
        _print_section("High Priority Not Done")
        for task in service.find_tasks(both(high_priority(), not_done())):
            print(task)

        window = int(getattr(settings, "due_window_days", 3))
        _print_section(f"Due in {window} days")
        for task in service.due_in(window, today=today):
            print(task)

        _print_section("Overdue")
        for task in service.overdue(today=today):
            print(task)

        _print_section("By Employee")
        for emp, tasks in service.by_employee().items():
            print(f"{emp.name} -> [{', '.join(str(t) for t in tasks)}]")

        export_path = getattr(settings, "export_path", "tasks_export.txt")
        try:
            export_tasks(export_path, state.tasks.find_all())
        except TaskExportError as e:
            logger.warning("Export failed path=%s: %s", export_path, e)
            print(f"Export failed: {e}", file=sys.stderr)

        # Let the reporter tick a few times; a signal cuts this short.
        stop_event.wait(float(getattr(settings, "demo_duration_seconds", 4.0)))
    finally:
        reporter.stop()
        reporter.join(timeout=5.0)

    print("\nFinished.")


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    # Use an Event so the demo can wait without a busy loop and still react to Ctrl+C.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    signal.signal(signal.SIGINT, _handle_signal)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, _handle_signal)

    run_demo(state, stop_event=stop_main)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
