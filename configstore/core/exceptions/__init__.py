"""
Core exceptions for configstore.

This module provides all exception classes used throughout the package,
with a single root so callers can catch everything with `ConfigStoreError`.
"""

# Base exceptions
from .base import (
    ConfigStoreError,
    ConfigurationError,
    NotFoundError
)

# Provider exceptions
from .provider import (
    ProviderError,
    DecodeError,
    ItemNotFoundError
)

__all__ = [
    # Base exceptions
    'ConfigStoreError',
    'ConfigurationError',
    'NotFoundError',

    # Provider exceptions
    'ProviderError',
    'DecodeError',
    'ItemNotFoundError'
]
