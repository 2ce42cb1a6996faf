from typing import Callable, List, Optional

from configstore.core.item import Item
from configstore.logger import ConfigStoreLogger
from .decoders import Decoder, decode_yaml
from .memory import InMemoryProvider
from .refresh import DEFAULT_REFRESH_INTERVAL, RefreshLoop


def read_items(filename: str, decode: Optional[Decoder] = None) -> List[Item]:
    """Read a file and decode it, with the YAML decoder unless one is given."""
    with open(filename, 'rb') as f:
        content = f.read()
    return list((decode or decode_yaml)(content))


class FileProvider(InMemoryProvider):
    """
    File-based provider.

    Holds the items decoded from a file. With refresh enabled, a
    RefreshLoop keeps them in sync with the file on disk.
    """

    kind = "file"

    def __init__(self, filename: str, items=(), decode: Optional[Decoder] = None):
        super().__init__(items)
        self.filename = filename
        self.decode = decode
        self._refresh: Optional[RefreshLoop] = None

    @classmethod
    def load(cls, filename: str, decode: Optional[Decoder] = None) -> "FileProvider":
        """Read the file once. Raises on read or decode failure."""
        return cls(filename, read_items(filename, decode), decode)

    def _reload(self, filename: str) -> List[Item]:
        return read_items(filename, self.decode)

    def start_refresh(
        self,
        on_change: Callable[[], None],
        interval: float = DEFAULT_REFRESH_INTERVAL,
        last_seen: Optional[float] = None,
        logger: Optional[ConfigStoreLogger] = None
    ) -> RefreshLoop:
        if self._refresh is None:
            self._refresh = RefreshLoop(
                self.filename, self._reload, self, on_change,
                interval=interval, last_seen=last_seen, logger=logger
            )
        self._refresh.start()
        return self._refresh

    @property
    def refresh_loop(self) -> Optional[RefreshLoop]:
        return self._refresh

    def close(self):
        if self._refresh is not None:
            self._refresh.stop()
