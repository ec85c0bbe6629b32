"""Background task runner that hands results back to the Tk thread.

Blocking work (the solve HTTP call) runs on a ``ThreadPoolExecutor`` worker.
The UI thread polls the resulting futures through a Tk-style ``after``
function, so completion callbacks always run on the thread that owns the
widgets and the grid model. Worker threads never touch UI state.
"""

from __future__ import annotations


import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar("T")

ScheduleFn = Callable[[int, Callable[[], None]], Any]

log = logging.getLogger(__name__)


@dataclass
class _PendingTask:
    """Future plus the callbacks to fire once it completes."""
    future: Future
    on_done: Callable[[Any], None]
    on_error: Callable[[BaseException], None]


class BackgroundTaskRunner:
    """Run callables on a worker pool and deliver results via UI ticks."""

    def __init__(
        self,
        schedule: ScheduleFn,
        *,
        executor: Optional[ThreadPoolExecutor] = None,
        poll_interval_ms: int = 50,
    ) -> None:
        """Store the scheduler and worker pool.

        Args:
            schedule: Function compatible with Tk ``after(delay_ms, callback)``.
            executor: Worker pool; a single-worker pool is created if omitted.
            poll_interval_ms: Delay between completion checks on the UI thread.
        """
        self._schedule = schedule
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="sudoku-solve"
        )
        self._poll_interval_ms = max(1, int(poll_interval_ms))
        self._pending: List[_PendingTask] = []
        self._tick_scheduled = False
        self._closed = False

    def submit(
        self,
        work: Callable[[], T],
        on_done: Callable[[T], None],
        on_error: Callable[[BaseException], None],
    ) -> None:
        """Start ``work`` on the pool; exactly one callback fires later.

        Raises:
            RuntimeError: If the runner has been shut down.
        """
        if self._closed:
            raise RuntimeError("BackgroundTaskRunner is shut down")
        future = self._executor.submit(work)
        self._pending.append(_PendingTask(future=future, on_done=on_done, on_error=on_error))
        self._ensure_tick()

    def pending_count(self) -> int:
        return len(self._pending)

    def shutdown(self) -> int:
        """Stop accepting work and drop undelivered results.

        Queued tasks are cancelled; a task already running cannot be stopped
        and its pool thread is joined at interpreter exit.

        Returns:
            Number of tasks still running on the pool.
        """
        self._closed = True
        self._executor.shutdown(wait=False, cancel_futures=True)
        running = sum(1 for task in self._pending if not task.future.done())
        self._pending.clear()
        return running

    # ------------------------------------------------------------------
    # UI-thread polling
    # ------------------------------------------------------------------
    def _ensure_tick(self) -> None:
        if self._tick_scheduled or not self._pending:
            return
        self._tick_scheduled = True
        self._schedule(self._poll_interval_ms, self._tick)

    def _tick(self) -> None:
        self._tick_scheduled = False
        if self._closed:
            return
        finished = [task for task in self._pending if task.future.done()]
        try:
            for task in finished:
                self._pending.remove(task)
                try:
                    self._deliver(task)
                except Exception:
                    # One failing callback must not strand the other tasks.
                    log.exception("Background task callback failed")
        finally:
            self._ensure_tick()

    @staticmethod
    def _deliver(task: _PendingTask) -> None:
        if task.future.cancelled():
            return
        exc = task.future.exception()
        if exc is not None:
            log.debug("Background task raised %s", exc.__class__.__name__)
            task.on_error(exc)
            return
        task.on_done(task.future.result())


__all__ = ["BackgroundTaskRunner"]
