"""
Helpers that build providers for common sources and register them on a Store.

Every helper registers something, even on failure: a source that cannot be
set up is registered as an ErrorProvider so it shows up in every
resolution instead of vanishing.
"""

import os
import stat
import time
from typing import Mapping, Optional

from configstore.core.exceptions import DecodeError
from configstore.providers.base import ErrorProvider, Provider
from configstore.providers.decoders import Decoder
from configstore.providers.env import KeyTransform, environment_items, normalize_prefix, transform_key
from configstore.providers.file import FileProvider
from configstore.providers.memory import InMemoryProvider
from configstore.store import Store


def error_provider(store: Store, name: str, error: BaseException) -> ErrorProvider:
    """Register a source that failed to set up."""
    store.logger.error("Configuration source unavailable", provider=name, error=str(error))
    provider = ErrorProvider(error)
    store.register_provider(name, provider)
    return provider


def in_memory_provider(store: Store, name: str) -> InMemoryProvider:
    """Register an empty InMemoryProvider to be filled with `add`."""
    provider = InMemoryProvider()
    store.register_provider(name, provider)
    return provider


def file_provider(
    store: Store,
    filename: str,
    refresh: bool = False,
    decode: Optional[Decoder] = None,
    interval: Optional[float] = None
) -> Optional[Provider]:
    """
    Register the items of a file as `file:<filename>`.

    Args:
        store: Store to register on
        filename: Path of the file, an empty string is ignored
        refresh: Poll the file and reload it when it changes
        decode: Custom decoder, YAML when omitted
        interval: Poll interval, defaults to the store settings

    Returns:
        The registered FileProvider, an ErrorProvider if the file could not
        be read or decoded, or None for an empty filename
    """
    if not filename:
        return None

    name = f"file:{filename}"
    loaded_at = time.time()
    try:
        provider = FileProvider.load(filename, decode)
    except (OSError, DecodeError) as e:
        return error_provider(store, name, e)
    except Exception as e:
        # custom decoders may raise anything
        return error_provider(store, name, DecodeError(str(e), source=filename))

    store.logger.info("Configuration from file", path=filename, items=len(provider))
    store.register_provider(name, provider)

    if refresh:
        provider.start_refresh(
            store.notify_watchers,
            interval=interval or store.settings.refresh_interval,
            last_seen=loaded_at,
            logger=store.logger
        )
    return provider


def file_refresh_provider(store: Store, filename: str, interval: Optional[float] = None) -> Optional[Provider]:
    return file_provider(store, filename, refresh=True, interval=interval)


def file_custom_provider(store: Store, filename: str, decode: Decoder) -> Optional[Provider]:
    return file_provider(store, filename, decode=decode)


def file_custom_refresh_provider(
    store: Store,
    filename: str,
    decode: Decoder,
    interval: Optional[float] = None
) -> Optional[Provider]:
    return file_provider(store, filename, refresh=True, decode=decode, interval=interval)


def file_list_provider(store: Store, dirname: str):
    """
    Register every file directly inside `dirname` as its own file provider.

    Subdirectories and symlinks to directories are skipped. If the
    directory cannot be listed, or a symlink target cannot be stat'ed, a
    single `filelist:<dirname>` ErrorProvider is registered and the rest of
    the directory is not processed.
    """
    if not dirname:
        return

    name = f"filelist:{dirname}"
    try:
        with os.scandir(dirname) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        error_provider(store, name, e)
        return

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            continue
        if entry.is_symlink():
            try:
                target = os.stat(entry.path)
            except OSError as e:
                error_provider(store, name, e)
                return
            if stat.S_ISDIR(target.st_mode):
                continue

        file_provider(store, entry.path)


def env_provider(
    store: Store,
    prefix: str = "",
    environ: Optional[Mapping[str, str]] = None,
    key_transform: KeyTransform = transform_key
) -> InMemoryProvider:
    """
    Register a snapshot of the environment variables under `prefix`.

    The prefix is matched case-insensitively and gets a trailing '_' when
    missing. An empty prefix imports the whole environment as `env:all`.
    """
    _, label = normalize_prefix(prefix)
    provider = in_memory_provider(store, f"env:{label}")
    environ = os.environ if environ is None else environ
    provider.add(*environment_items(prefix, environ, key_transform, store.settings.env_priority))
    store.logger.info("Configuration from environment", provider=f"env:{label}", items=len(provider))
    return provider
