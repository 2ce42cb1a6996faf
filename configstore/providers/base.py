"""
Configuration provider base classes.

This module provides the provider interface every configuration source
implements, plus the two trivial variants: a wrapped callable and an
always-failing source.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Union

from configstore.core.item import Item, ItemList


class Provider(ABC):
    """
    Abstract base class for configuration providers.

    A provider is invoked on demand by the Store and returns an ItemList.
    Failures are reported through `ItemList.error`; a provider may also
    raise, in which case the Store records the exception the same way.
    """

    kind = "provider"

    @abstractmethod
    def items(self) -> ItemList:
        """Return the provider's current items."""
        pass

    def close(self):
        """Release background resources. Most providers have none."""
        pass

    def __call__(self) -> ItemList:
        return self.items()


ProviderFunc = Callable[[], Union[ItemList, Iterable[Item]]]


class FunctionProvider(Provider):
    """
    Adapts a bare callable into a Provider.

    The callable may return an ItemList or any iterable of Items.
    """

    kind = "function"

    def __init__(self, fn: ProviderFunc):
        self.fn = fn

    def items(self) -> ItemList:
        result = self.fn()
        if isinstance(result, ItemList):
            return result
        return ItemList.of(result)


class ErrorProvider(Provider):
    """
    Zero-item provider that fails with the same error on every invocation.

    Registered in place of a source that could not be set up, so the
    failure stays visible in every resolution.
    """

    kind = "error"

    def __init__(self, error: BaseException):
        self.error = error

    def items(self) -> ItemList:
        return ItemList(error=self.error)
