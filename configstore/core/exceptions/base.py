"""
Base exception classes for configstore.
"""


class ConfigStoreError(Exception):
    """Base exception for all configstore errors."""
    pass


class ConfigurationError(ConfigStoreError):
    """Raised when a configuration source description is invalid."""

    def __init__(self, source: str = None, reason: str = None):
        self.source = source
        self.reason = reason
        message = "Configuration error"
        if source:
            message += f" for source '{source}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotFoundError(ConfigStoreError):
    """Base exception for lookups that found nothing."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier is not None:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
