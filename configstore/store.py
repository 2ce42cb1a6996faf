"""
Provider registry and resolver.

The Store owns the registered providers and the watchers. Resolution is
pull-based: `resolve` invokes every provider and merges the items by
priority. Change notification is push-based: refresh loops call
`notify_watchers` and consumers decide when to resolve again.
"""

import threading
from typing import Callable, List, Optional, Tuple, Union

from configstore.config import StoreSettings
from configstore.core.exceptions import ProviderError
from configstore.core.item import Item
from configstore.logger import ConfigStoreLogger, get_configstore_logger
from configstore.providers.base import FunctionProvider, Provider, ProviderFunc
from configstore.resolution import Resolution
from configstore.watcher import Watcher


class Store:
    """
    Central registry of configuration providers.

    Providers are kept in registration order and never removed. On a key
    conflict the higher priority wins; on a priority tie the provider
    registered later wins, so higher-precedence sources should be
    registered last.

    Parameters
    ----------
    settings : StoreSettings, optional
        Refresh interval and environment priority for the source helpers
    logger : ConfigStoreLogger, optional
        Diagnostic sink, handed down to the providers built for this store.
        Pass a NullLogger to silence it.
    """

    def __init__(
        self,
        settings: Optional[StoreSettings] = None,
        logger: Optional[ConfigStoreLogger] = None
    ):
        self.settings = settings or StoreSettings()
        if logger is None:
            logger = get_configstore_logger(log_level=self.settings.log_level)
        self.logger = logger.bind(component="Store")
        self._lock = threading.RLock()

        self._providers: List[Tuple[str, Provider]] = []
        self._watchers: List[Watcher] = []

    def register_provider(self, name: str, provider: Union[Provider, ProviderFunc]) -> Provider:
        """
        Register a provider under `name`.

        Names are diagnostic labels only. Registering the same name twice
        keeps both entries and both contribute items.

        Args:
            name: Label such as 'file:/etc/app.yaml' or 'env:APP_'
            provider: A Provider, or a callable returning an ItemList or Items

        Returns:
            The registered provider
        """
        if not isinstance(provider, Provider):
            if not callable(provider):
                raise TypeError(f"provider must be a Provider or a callable, got {type(provider).__name__}")
            provider = FunctionProvider(provider)

        with self._lock:
            self._providers.append((name, provider))

        self.logger.debug("Provider registered", provider=name, provider_type=provider.kind)
        return provider

    def provider_names(self) -> List[str]:
        """Registered provider names, in registration order."""
        with self._lock:
            return [name for name, _ in self._providers]

    def resolve(self) -> Resolution:
        """
        Invoke every provider and merge their items.

        A failing provider never aborts resolution: whatever items it
        returned are merged and its error is collected in
        `Resolution.errors`.
        """
        with self._lock:
            providers = list(self._providers)

        resolution = Resolution()
        for name, provider in providers:
            try:
                item_list = provider.items()
            except Exception as e:
                self.logger.debug("Provider raised during resolution", provider=name, error=str(e))
                resolution.errors.append(ProviderError(name, e))
                continue

            if item_list.error is not None:
                resolution.errors.append(ProviderError(name, item_list.error))

            for item in item_list.items:
                self._merge(resolution, item)

        return resolution

    @staticmethod
    def _merge(resolution: Resolution, item: Item):
        current = resolution.items.get(item.key)
        if current is None or item.priority >= current.priority:
            resolution.items[item.key] = item

    def register_watcher(self, callback: Optional[Callable[[], None]] = None) -> Watcher:
        """
        Register a consumer interested in configuration changes.

        Returns:
            Watcher handle; `watcher.wait()` blocks until the next notification
        """
        watcher = Watcher(callback)
        with self._lock:
            self._watchers.append(watcher)
        return watcher

    def unregister_watcher(self, watcher: Watcher) -> bool:
        with self._lock:
            if watcher in self._watchers:
                self._watchers.remove(watcher)
                return True
            return False

    def notify_watchers(self):
        """
        Tell every watcher that the backing data of some provider changed.

        Does not resolve; consumers resolve again when they are ready.
        """
        with self._lock:
            watchers = list(self._watchers)

        for watcher in watchers:
            try:
                watcher.notify()
            except Exception as e:
                self.logger.error("Error in watcher callback", error=str(e))

    def close(self):
        """Stop every background task owned by the registered providers."""
        with self._lock:
            providers = list(self._providers)

        for name, provider in providers:
            try:
                provider.close()
            except Exception as e:
                self.logger.error("Error closing provider", provider=name, error=str(e))
        self.logger.debug("Store closed", providers=len(providers))

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
