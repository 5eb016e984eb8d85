# src/taskboard/tasks/task_export.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType
from typing import TextIO

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskExportError(RuntimeError):
    """An I/O failure while exporting tasks (the OSError is the __cause__)."""


class TaskFileExporter:
    """
    Writes tasks to a text file, one `str(task)` per line.

    Use as a context manager; the file is opened on enter (truncating it) and
    closed exactly once on exit, whether the block succeeds or raises.

        with TaskFileExporter("tasks_export.txt") as exporter:
            for task in tasks:
                exporter.write(task)
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._fh: TextIO | None = None
        self.lines_written = 0

    @property
    def path(self) -> Path:
        return self._path

    def __enter__(self) -> TaskFileExporter:
        try:
            self._fh = self._path.open("w", encoding=self._encoding)
        except OSError as e:
            raise TaskExportError(f"cannot open {self._path}: {e}") from e
        logger.debug("Export opened path=%s", self._path)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.close()
        except TaskExportError:
            # Don't mask the error that is already propagating.
            if exc is None:
                raise
            logger.exception("Export close failed while handling another error path=%s", self._path)

    def write(self, task: Task) -> None:
        if self._fh is None:
            raise TaskExportError("exporter is not open (use it as a context manager)")
        try:
            self._fh.write(f"{task}\n")
        except OSError as e:
            raise TaskExportError(f"cannot write to {self._path}: {e}") from e
        self.lines_written += 1

    def close(self) -> None:
        fh, self._fh = self._fh, None
        if fh is None:
            return
        try:
            fh.close()
        except OSError as e:
            raise TaskExportError(f"cannot close {self._path}: {e}") from e
        logger.debug("Export closed path=%s lines=%s", self._path, self.lines_written)


def export_tasks(path: str | Path, tasks: Iterable[Task], *, encoding: str = "utf-8") -> int:
    """Write all tasks to `path`; returns the number of lines written."""
    with TaskFileExporter(path, encoding=encoding) as exporter:
        for task in tasks:
            exporter.write(task)
    logger.info("Exported %d tasks to %s", exporter.lines_written, exporter.path)
    return exporter.lines_written
