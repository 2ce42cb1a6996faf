"""
Environment variable source.

Variable names are normalised with `transform_key` before the prefix
check, so `APP_DB_HOST` under the prefix `APP` becomes the key `db-host`.
"""

from typing import Callable, List, Mapping, Tuple

from configstore.core.item import Item

ENV_PRIORITY = 15

KeyTransform = Callable[[str], str]


def transform_key(key: str) -> str:
    """Lower-case the key and turn underscores into dashes."""
    return key.lower().replace("_", "-")


def normalize_prefix(prefix: str) -> Tuple[str, str]:
    """
    Return the prefix with its trailing separator, and the provider label.

    An empty prefix is labelled "all".
    """
    if prefix and not prefix.endswith("_"):
        prefix += "_"
    return prefix, (prefix.upper() or "all")


def environment_items(
    prefix: str,
    environ: Mapping[str, str],
    key_transform: KeyTransform = transform_key,
    priority: int = ENV_PRIORITY
) -> List[Item]:
    """Collect the variables of `environ` matching `prefix`, prefix stripped."""
    prefix, _ = normalize_prefix(prefix)
    transformed_prefix = key_transform(prefix)

    items = []
    for name, value in environ.items():
        key = key_transform(name)
        if key.startswith(transformed_prefix):
            items.append(Item(key[len(transformed_prefix):], value, priority))
    return items
