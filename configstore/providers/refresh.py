import os
import threading
import time
from typing import Callable, List, Optional

from configstore.core.item import Item
from configstore.logger import ConfigStoreLogger, get_configstore_logger
from .memory import InMemoryProvider

DEFAULT_REFRESH_INTERVAL = 10.0


class RefreshLoop:
    """
    Polls a file and swaps the items of its backing provider when it changes.

    Runs in a daemon thread that wakes every `interval` seconds. A tick
    reloads only when the file's modification time moved past the last one
    seen; any stat, read or decode failure skips the tick and leaves the
    previous items untouched.

    Parameters
    ----------
    filename : str
        The file to watch
    load : callable
        Reads and decodes the file, returning a list of Items or raising
    target : InMemoryProvider
        Provider whose items are replaced on a successful reload
    on_change : callable
        Called without arguments after each successful swap
    interval : float
        Seconds between two ticks
    last_seen : float, optional
        Modification time to compare against, defaults to now
    """

    def __init__(
        self,
        filename: str,
        load: Callable[[str], List[Item]],
        target: InMemoryProvider,
        on_change: Callable[[], None],
        interval: float = DEFAULT_REFRESH_INTERVAL,
        last_seen: Optional[float] = None,
        logger: Optional[ConfigStoreLogger] = None
    ):
        self.filename = filename
        self.load = load
        self.target = target
        self.on_change = on_change
        self.interval = interval
        self.last_seen = time.time() if last_seen is None else last_seen
        self.logger = (logger or get_configstore_logger()).bind(component="RefreshLoop", path=filename)

        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    def tick(self) -> bool:
        """
        Run one poll.

        Returns
        -------
        bool
            True if the items were replaced and watchers notified
        """
        try:
            mtime = os.stat(self.filename).st_mtime
        except OSError as e:
            self.logger.debug("Stat failed, skipping refresh", error=str(e))
            return False

        if mtime <= self.last_seen:
            return False
        self.last_seen = mtime

        try:
            items = self.load(self.filename)
        except Exception as e:
            self.logger.debug("Reload failed, keeping previous items", error=str(e))
            return False

        self.target.replace(items)
        self.logger.info("Configuration file reloaded", items=len(items))
        self.on_change()
        return True

    def _run(self):
        while not self._stop_event.wait(self.interval):
            self.tick()

    def start(self) -> bool:
        if self.is_running():
            self.logger.warning("Refresh loop is already running")
            return False

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            name=f"configstore-refresh:{self.filename}",
            daemon=True
        )
        self._thread.start()
        return True

    def stop(self, timeout: Optional[float] = None) -> bool:
        """
        Signal the loop to stop and wait for its thread.

        Returns
        -------
        bool
            False if the thread was still alive after `timeout`
        """
        self._stop_event.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                self.logger.warning("Refresh loop did not stop in time", timeout=timeout)
                return False
        self._thread = None
        return True

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
