import queue
from typing import Callable, Optional


class Watcher:
    """
    Handle returned by `Store.register_watcher`.

    Notifications coalesce: however many arrive before the consumer waits,
    `wait` reports a single pending change. An optional callback is run on
    the notifying thread.
    """

    def __init__(self, callback: Optional[Callable[[], None]] = None):
        self.callback = callback
        self._pending = queue.Queue(maxsize=1)

    def notify(self):
        try:
            self._pending.put_nowait(True)
        except queue.Full:
            pass
        if self.callback is not None:
            self.callback()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until a notification is pending, then consume it.

        Returns
        -------
        bool
            False if `timeout` elapsed without a notification
        """
        try:
            self._pending.get(timeout=timeout)
        except queue.Empty:
            return False
        return True

    def pending(self) -> bool:
        """Consume a pending notification without blocking."""
        try:
            self._pending.get_nowait()
        except queue.Empty:
            return False
        return True
