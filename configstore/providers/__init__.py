"""
Configuration providers.

- Provider: abstract interface invoked by the Store
- FunctionProvider / ErrorProvider: wrapped callable, always-failing source
- InMemoryProvider: lock-guarded mutable item list
- FileProvider / RefreshLoop: file-backed items with optional polling
"""

from .base import Provider, FunctionProvider, ErrorProvider, ProviderFunc
from .memory import InMemoryProvider
from .file import FileProvider, read_items
from .refresh import RefreshLoop, DEFAULT_REFRESH_INTERVAL
from .decoders import Decoder, decode_yaml
from .env import ENV_PRIORITY, environment_items, transform_key

__all__ = [
    'Provider',
    'FunctionProvider',
    'ErrorProvider',
    'ProviderFunc',
    'InMemoryProvider',
    'FileProvider',
    'read_items',
    'RefreshLoop',
    'DEFAULT_REFRESH_INTERVAL',
    'Decoder',
    'decode_yaml',
    'ENV_PRIORITY',
    'environment_items',
    'transform_key'
]
