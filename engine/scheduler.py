"""
Schedulers for deferred one-shot actions.

The AI's move shows up after a short delay. Each front end has its own
event loop, so the session only talks to this small interface:

    handle = scheduler.schedule(delay_ms, callback)
    scheduler.cancel(handle)
"""

import sched
import time
from typing import Any, Callable, List, Optional


class Scheduler:
    """Base class: run a callback once, some milliseconds from now."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        """
        Arrange for callback to run once after delay_ms.

        Returns:
            A handle that can be passed to cancel().
        """
        raise NotImplementedError

    def cancel(self, handle: Any) -> bool:
        """
        Cancel a scheduled callback.

        Returns:
            True if it was still pending, False if it already ran or was cancelled.
        """
        raise NotImplementedError


class TkScheduler(Scheduler):
    """Runs callbacks on the Tkinter event loop with root.after."""

    def __init__(self, root):
        self.root = root

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self.root.after(delay_ms, callback)

    def cancel(self, handle: Any) -> bool:
        if handle is None:
            return False
        self.root.after_cancel(handle)
        return True


class SchedScheduler(Scheduler):
    """
    Runs callbacks with the standard library's sched module.

    Nothing runs by itself: call run_pending() from the main loop.
    """

    def __init__(self, timefunc=time.monotonic, delayfunc=time.sleep):
        self._scheduler = sched.scheduler(timefunc, delayfunc)

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self._scheduler.enter(delay_ms / 1000.0, 0, callback)

    def cancel(self, handle: Any) -> bool:
        try:
            self._scheduler.cancel(handle)
        except ValueError:
            # Already ran or already cancelled
            return False
        return True

    def run_pending(self, blocking: bool = True):
        """Run due callbacks. With blocking=True, wait for all of them."""
        self._scheduler.run(blocking=blocking)

    @property
    def has_pending(self) -> bool:
        return not self._scheduler.empty()


class _ManualTask:
    """A callback waiting in a ManualScheduler."""

    def __init__(self, due_ms: int, callback: Callable[[], None]):
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.done = False


class ManualScheduler(Scheduler):
    """
    A scheduler driven by hand, with its own clock.

    Time only moves when advance() is called. Handy for tests and for
    driving a game step by step.
    """

    def __init__(self):
        self.now_ms = 0
        self._tasks: List[_ManualTask] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> _ManualTask:
        task = _ManualTask(self.now_ms + delay_ms, callback)
        self._tasks.append(task)
        return task

    def cancel(self, handle: Optional[_ManualTask]) -> bool:
        if handle is None or handle.done or handle.cancelled:
            return False
        handle.cancelled = True
        return True

    @property
    def pending(self) -> List[_ManualTask]:
        return [t for t in self._tasks if not t.done and not t.cancelled]

    def advance(self, ms: int) -> int:
        """
        Move the clock forward and run every task that came due.

        Returns:
            How many callbacks ran.
        """
        self.now_ms += ms
        ran = 0
        while True:
            due = [t for t in self.pending if t.due_ms <= self.now_ms]
            if not due:
                break
            task = min(due, key=lambda t: t.due_ms)
            task.done = True
            task.callback()
            ran += 1
        return ran

    def run_all(self) -> int:
        """Run every pending task, moving the clock as far as needed."""
        pending = self.pending
        if not pending:
            return 0
        latest = max(t.due_ms for t in pending)
        return self.advance(max(0, latest - self.now_ms))
