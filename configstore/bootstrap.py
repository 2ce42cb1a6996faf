"""
Wire sources onto a store from a textual source list.

A source list is a comma-separated string (or a list) of entries:

    file:/etc/app/base.yaml
    filerefresh:/etc/app/live.yaml
    filelist:/etc/app/conf.d
    env:APP          (or just "env" for the whole environment)
"""

import os
from typing import Iterable, List, Mapping, Optional, Union

from configstore.core.exceptions import ConfigurationError
from configstore.sources import env_provider, file_list_provider, file_provider
from configstore.store import Store

CONFIGURATION_FROM = "CONFIGURATION_FROM"

SOURCE_KINDS = ("file", "filerefresh", "filelist", "env")


def parse_sources(sources: Union[str, Iterable[str]]) -> List[tuple]:
    """
    Split a source list into (kind, argument) pairs.

    Raises:
        ConfigurationError: On an unknown kind or a missing path
    """
    if isinstance(sources, str):
        sources = sources.split(",")

    parsed = []
    for source in sources:
        source = source.strip()
        if not source:
            continue
        kind, _, argument = source.partition(":")
        kind = kind.strip().lower()
        argument = argument.strip()
        if kind not in SOURCE_KINDS:
            raise ConfigurationError(source, f"unknown source kind '{kind}', expected one of {', '.join(SOURCE_KINDS)}")
        if kind != "env" and not argument:
            raise ConfigurationError(source, "missing path")
        parsed.append((kind, argument))
    return parsed


def init_from(store: Store, sources: Union[str, Iterable[str]]) -> Store:
    """Register every source of the list on `store`, in order."""
    for kind, argument in parse_sources(sources):
        if kind == "file":
            file_provider(store, argument)
        elif kind == "filerefresh":
            file_provider(store, argument, refresh=True)
        elif kind == "filelist":
            file_list_provider(store, argument)
        else:
            env_provider(store, argument)
    return store


def init_from_environment(
    store: Store,
    var: str = CONFIGURATION_FROM,
    environ: Optional[Mapping[str, str]] = None
) -> Store:
    """Read the source list from the environment variable `var`. Unset is a no-op."""
    environ = os.environ if environ is None else environ
    sources = environ.get(var, "")
    if not sources:
        store.logger.info("No configuration sources declared", variable=var)
        return store
    return init_from(store, sources)
