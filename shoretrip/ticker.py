"""Cancellable periodic tasks that drive the live view."""

import threading
from typing import Callable, Optional, Union

from .sensors import GPSPlayback, LatestValue


class PeriodicTask:
    """Calls ``callback`` every ``interval`` seconds on a daemon thread until cancelled.

    ``interval`` may be a number or a function returning the next wait,
    which lets a playback trace set its own pace.
    """

    def __init__(self, interval: Union[float, Callable[[], float]], callback: Callable[[], None],
                 name: str = "tick", run_immediately: bool = False):
        self.interval = interval
        self.callback = callback
        self.name = name
        self.run_immediately = run_immediately
        self.runs = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def next_interval(self) -> float:
        if callable(self.interval):
            return self.interval()
        return self.interval

    def start(self) -> "PeriodicTask":
        if self._thread is not None:
            return self
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        return self

    def _run(self):
        if self.run_immediately and not self._stop.is_set():
            self._fire()
        # wait() returns True as soon as cancel() is called
        while not self._stop.wait(self.next_interval()):
            self._fire()

    def _fire(self):
        self.runs += 1
        self.callback()

    def cancel(self, timeout: Optional[float] = None):
        """Stop the task; blocks until the current callback, if any, returns"""
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def __enter__(self) -> "PeriodicTask":
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.cancel()


def watch_position(source, cell: LatestValue, interval: float,
                   on_update: Optional[Callable[[], None]] = None,
                   on_error: Optional[Callable[[], None]] = None,
                   on_finished: Optional[Callable[[], None]] = None) -> PeriodicTask:
    """Poll ``source.get_location()`` into ``cell``; failed reads leave the cell as is.

    A playback source is polled at its own trace pace and the watch ends
    with the trace.
    """
    playback = source if isinstance(source, GPSPlayback) else None

    def poll():
        location = source.get_location()
        if location is None:
            if on_error:
                on_error()
        elif cell.set(location) and on_update:
            on_update()

        if playback and playback.is_finished():
            task.cancel()
            if on_finished:
                on_finished()

    pace = playback.get_poll_interval if playback else interval
    task = PeriodicTask(pace, poll, name="position-watch", run_immediately=True)
    return task


def listen_orientation(source, cell: LatestValue, interval: float,
                       on_update: Optional[Callable[[], None]] = None) -> PeriodicTask:
    """Poll ``source.get_heading()`` into ``cell``"""

    def poll():
        heading = source.get_heading()
        if heading is None:
            return
        if cell.set(heading) and on_update:
            on_update()

    return PeriodicTask(interval, poll, name="orientation-listener", run_immediately=True)
