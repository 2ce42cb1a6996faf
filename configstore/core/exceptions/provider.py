"""
Provider-specific exceptions for configstore.
"""

from .base import ConfigStoreError, NotFoundError


class ProviderError(ConfigStoreError):
    """Raised, or collected during resolution, when a provider failed."""

    def __init__(self, provider_name: str, cause: BaseException):
        self.provider_name = provider_name
        self.cause = cause
        super().__init__(f"Provider '{provider_name}' failed: {cause}")


class DecodeError(ConfigStoreError):
    """Raised when file content cannot be decoded into items."""

    def __init__(self, message: str, source: str = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(f"Decode error: {message}")


class ItemNotFoundError(NotFoundError):
    """Raised when a key is missing from a resolved configuration."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Item", key)
