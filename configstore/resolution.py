from dataclasses import dataclass, field
from typing import Any, Dict, List

from configstore.core.exceptions import ItemNotFoundError, ProviderError
from configstore.core.item import Item


@dataclass
class Resolution:
    """
    Outcome of `Store.resolve`: the winning item per key, plus the errors
    reported by individual providers during that call.
    """

    items: Dict[str, Item] = field(default_factory=dict)
    errors: List[ProviderError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def get(self, key: str, default: Any = None) -> Any:
        """Value for `key`, or `default` when nothing provides it."""
        item = self.items.get(key)
        return default if item is None else item.value

    def get_item(self, key: str) -> Item:
        item = self.items.get(key)
        if item is None:
            raise ItemNotFoundError(key)
        return item

    def get_item_value(self, key: str) -> str:
        """
        Value for `key`.

        Raises
        ------
        ItemNotFoundError
            If no provider supplied the key
        """
        return self.get_item(key).value

    def keys(self) -> List[str]:
        return list(self.items)

    def values(self) -> Dict[str, str]:
        """Flat key -> value mapping."""
        return {key: item.value for key, item in self.items.items()}

    def __contains__(self, key: str) -> bool:
        return key in self.items

    def __len__(self) -> int:
        return len(self.items)
