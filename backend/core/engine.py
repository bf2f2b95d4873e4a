import logging
import threading
from typing import Callable, Optional

class PeriodicTimer:
    """Calls ``callback(timer)`` every ``interval`` seconds on a daemon thread.

    A cancelled timer never calls back again, but a callback already running
    when ``cancel()`` is called will finish. Callers that must not observe a
    late tick compare the handle they receive with the one they hold.
    """

    def __init__(self, interval: float, callback: Callable[["PeriodicTimer"], None], name: Optional[str] = None):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = float(interval)
        self.callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name or "periodic-timer", daemon=True)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> "PeriodicTimer":
        self._thread.start()
        return self

    def cancel(self):
        self._cancelled.set()

    def join(self, timeout: Optional[float] = None):
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def _run(self):
        # Event.wait returns True as soon as cancel() is called
        while not self._cancelled.wait(self.interval):
            try:
                self.callback(self)
            except Exception as e:
                logging.error(f"Error in timer {self._thread.name}: {e}")

def start_timer(interval: float, callback: Callable[[PeriodicTimer], None], name: Optional[str] = None) -> PeriodicTimer:
    return PeriodicTimer(interval, callback, name=name).start()
