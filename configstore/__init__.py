"""
Dynamic configuration aggregation.

Collects configuration items from files, directories, environment variables
and in-memory overrides, resolves them by priority and notifies watchers
when a refreshable file changes.
"""

import threading

from .config import StoreSettings
from .core import (
    Item, ItemList,
    ConfigStoreError, ConfigurationError, NotFoundError,
    ProviderError, DecodeError, ItemNotFoundError
)
from .logger import ConfigStoreLogger, NullLogger, get_configstore_logger, init_logger, setup_logging
from .providers import (
    Provider, FunctionProvider, ErrorProvider, InMemoryProvider,
    FileProvider, RefreshLoop, decode_yaml, transform_key
)
from .resolution import Resolution
from .store import Store
from .watcher import Watcher
from .sources import (
    error_provider, in_memory_provider,
    file_provider, file_refresh_provider, file_custom_provider, file_custom_refresh_provider,
    file_list_provider, env_provider
)
from .bootstrap import init_from, init_from_environment, parse_sources

_default_store = None
_default_lock = threading.Lock()


def default_store() -> Store:
    """Get or create the process-wide store."""
    global _default_store
    with _default_lock:
        if _default_store is None:
            settings = StoreSettings.from_env()
            _default_store = Store(settings, logger=init_logger(settings))
        return _default_store


def resolve() -> Resolution:
    """Resolve the process-wide store."""
    return default_store().resolve()


__all__ = [
    # Data types
    'Item',
    'ItemList',
    'Resolution',

    # Store
    'Store',
    'StoreSettings',
    'Watcher',
    'default_store',
    'resolve',

    # Providers
    'Provider',
    'FunctionProvider',
    'ErrorProvider',
    'InMemoryProvider',
    'FileProvider',
    'RefreshLoop',
    'decode_yaml',
    'transform_key',

    # Source helpers
    'error_provider',
    'in_memory_provider',
    'file_provider',
    'file_refresh_provider',
    'file_custom_provider',
    'file_custom_refresh_provider',
    'file_list_provider',
    'env_provider',
    'init_from',
    'init_from_environment',
    'parse_sources',

    # Logging
    'ConfigStoreLogger',
    'NullLogger',
    'get_configstore_logger',
    'init_logger',
    'setup_logging',

    # Exceptions
    'ConfigStoreError',
    'ConfigurationError',
    'NotFoundError',
    'ProviderError',
    'DecodeError',
    'ItemNotFoundError'
]
