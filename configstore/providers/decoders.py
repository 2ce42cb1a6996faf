"""
Decoders turning raw file content into configuration items.

The default decoder reads YAML (and therefore JSON) documents shaped either
as a list of ``{key, value, priority}`` mappings or as a plain
``key: value`` mapping.
"""

from typing import Any, Callable, List

import yaml

from configstore.core.exceptions import DecodeError
from configstore.core.item import Item

Decoder = Callable[[bytes], List[Item]]


def _to_value(raw: Any, key: str) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (dict, list)):
        raise DecodeError(f"value of '{key}' must be a scalar, got {type(raw).__name__}")
    return str(raw)


def _to_priority(raw: Any, key: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecodeError(f"priority of '{key}' must be an integer, got {raw!r}")
    return raw


def _entry_to_item(entry: Any, index: int) -> Item:
    if not isinstance(entry, dict):
        raise DecodeError(f"entry {index} must be a mapping, got {type(entry).__name__}")
    key = entry.get("key")
    key = "" if key is None else str(key)
    return Item(key, _to_value(entry.get("value"), key), _to_priority(entry.get("priority"), key))


def decode_yaml(content: bytes) -> List[Item]:
    """
    Default decoder.

    Raises
    ------
    DecodeError
        If the content is not valid YAML or does not have one of the
        accepted shapes.
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DecodeError(str(e)) from e

    if document is None:
        return []
    if isinstance(document, list):
        return [_entry_to_item(entry, i) for i, entry in enumerate(document)]
    if isinstance(document, dict):
        return [Item(str(key), _to_value(value, str(key))) for key, value in document.items()]
    raise DecodeError(f"expected a list or a mapping, got {type(document).__name__}")
