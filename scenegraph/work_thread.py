"""A worker thread fed through task pipes."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class PipeTask:
    """A unit of work.

    ``callback_in`` runs on the worker thread; ``callback_out`` runs on the
    thread that collects the finished task.
    """

    callback_in: Callable[[Any], None] | None = None
    callback_out: Callable[[Any], None] | None = None
    param: Any = None


class Pipe:
    """A thread-safe first-in first-out queue of tasks with a waitable count."""

    def __init__(self) -> None:
        self._queue: deque[PipeTask] = deque()
        self._condition = threading.Condition()
        self._generation = 0

    def push(self, task: PipeTask) -> None:
        """Add a task; it must have an input callback."""
        if task is None or task.callback_in is None:
            raise ValueError("task must have callback_in")
        with self._condition:
            self._queue.append(task)
            self._condition.notify_all()

    def peek(self) -> PipeTask | None:
        """Return the oldest task without removing it, or None."""
        with self._condition:
            return self._queue[0] if self._queue else None

    def try_pop(self) -> PipeTask | None:
        """Remove and return the oldest task, or None if the pipe is empty."""
        with self._condition:
            if not self._queue:
                return None
            task = self._queue.popleft()
            self._condition.notify_all()
            return task

    def pop(self) -> PipeTask | None:
        """Wait until the pipe holds a task, then remove and return it.

        Returns None if woken by notify() while still empty.
        """
        self.wait_while(0)
        return self.try_pop()

    def wait_while(self, tasks: int) -> None:
        """Block while the task count equals ``tasks`` and no notify() arrives."""
        self._wait(tasks, lambda: False)

    def notify(self) -> None:
        """Wake every thread blocked in wait_while()."""
        with self._condition:
            self._generation += 1
            self._condition.notify_all()

    def tasks(self) -> int:
        """Return the number of queued tasks."""
        with self._condition:
            return len(self._queue)

    def _wait(self, tasks: int, cancelled: Callable[[], bool]) -> None:
        with self._condition:
            generation = self._generation
            self._condition.wait_for(
                lambda: len(self._queue) != tasks
                or self._generation != generation
                or cancelled()
            )


class WorkThread:
    """Runs pushed tasks on a background thread in the order they arrive.

    Finished tasks are collected with try_pop(), which also runs each
    task's output callback on the calling thread.
    """

    def __init__(self) -> None:
        self._incoming = Pipe()
        self._outgoing = Pipe()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="WorkThread", daemon=True)
        self._thread.start()

    def push(self, task: PipeTask) -> None:
        """Queue a task for the worker."""
        self._incoming.push(task)

    def try_pop(self) -> PipeTask | None:
        """Collect the oldest finished task, running its output callback."""
        task = self._outgoing.peek()
        if task is not None and task.callback_out is not None:
            task.callback_out(task.param)
        return self._outgoing.try_pop()

    def wait_one(self) -> None:
        """Wait until at least one task has finished or none are pending."""
        self.wait_n(1)

    def wait_n(self, n: int) -> None:
        """Wait until ``n`` tasks have finished or none are pending."""
        for _ in range(self._outgoing.tasks(), n):
            tasks = self._incoming.tasks()
            if not tasks:
                break
            self._incoming.wait_while(tasks)

    def wait_all(self) -> None:
        """Wait until every pushed task has been run."""
        while tasks := self._incoming.tasks():
            self._incoming.wait_while(tasks)

    def tasks_in(self) -> int:
        """Return the number of tasks waiting to run."""
        return self._incoming.tasks()

    def tasks_out(self) -> int:
        """Return the number of finished tasks not yet collected."""
        return self._outgoing.tasks()

    def close(self) -> None:
        """Stop the worker thread and wait for it to exit."""
        self._stop.set()
        self._incoming.notify()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> WorkThread:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _run(self) -> None:
        while not self._stop.is_set():
            self._incoming._wait(0, self._stop.is_set)
            while (task := self._incoming.peek()) is not None:
                task.callback_in(task.param)
                self._outgoing.push(task)
                self._incoming.try_pop()