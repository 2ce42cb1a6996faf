from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Item:
	"""
	A single configuration entry.

	Items sharing a key are resolved by priority: the higher one wins.
	An empty key is allowed but can never be looked up.
	"""

	key: str
	value: str
	priority: int = 0

	def __repr__(self):
		return f"Item({self.key}={self.value!r}, priority={self.priority})"


@dataclass(frozen=True)
class ItemList:
	"""
	Items produced by one provider invocation, with the error that may
	have left the sequence incomplete or empty.
	"""

	items: Tuple[Item, ...] = ()
	error: Optional[BaseException] = None

	@classmethod
	def of(cls, items: Iterable[Item] = (), error: BaseException = None) -> "ItemList":
		return cls(tuple(items), error)

	def __iter__(self) -> Iterator[Item]:
		return iter(self.items)

	def __len__(self) -> int:
		return len(self.items)

	@property
	def ok(self) -> bool:
		return self.error is None
