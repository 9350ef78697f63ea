from __future__ import annotations

"""
Task Runners for Network Operations.

A runner executes a blocking task and delivers its outcome to a completion
callback: either the task's return value or the exception it raised. The
inline runner serves the CLI and the tests; the threaded runner keeps the
GUI responsive and hands the outcome back to the UI thread.
"""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

Task = Callable[[], Any]
Completion = Callable[[Any], None]
TaskRunner = Callable[[Task, Completion], None]


def run_inline(task: Task, on_complete: Completion) -> None:
    """Execute the task immediately on the calling thread."""
    try:
        outcome = task()
    except Exception as e:
        outcome = e
    on_complete(outcome)


class ThreadedRunner:
    """
    Run each task on its own daemon thread.

    Args:
        marshal: Schedules a callable on the UI thread, e.g.
            ``lambda fn: app.after(0, fn)`` for Tk.
    """

    def __init__(self, marshal: Callable[[Callable[[], None]], Any]):
        self._marshal = marshal

    def __call__(self, task: Task, on_complete: Completion) -> None:
        threading.Thread(
            target=self._worker,
            args=(task, on_complete),
            daemon=True,
        ).start()

    def _worker(self, task: Task, on_complete: Completion) -> None:
        try:
            outcome = task()
        except Exception as e:
            logger.debug(f"Background task raised {type(e).__name__}: {e}")
            outcome = e
        self._marshal(lambda: on_complete(outcome))
