import unittest
from dataclasses import FrozenInstanceError

from configstore.core import Item, ItemList
from configstore.core.exceptions import ConfigStoreError, ItemNotFoundError, NotFoundError, ProviderError


class TestItem(unittest.TestCase):

    def test_item_defaults_to_zero_priority(self):
        item = Item("key", "value")
        self.assertEqual(item.priority, 0)

    def test_item_is_immutable(self):
        item = Item("key", "value", 5)
        with self.assertRaises(FrozenInstanceError):
            item.value = "other"

    def test_items_compare_by_value(self):
        self.assertEqual(Item("a", "1", 2), Item("a", "1", 2))
        self.assertNotEqual(Item("a", "1", 2), Item("a", "1", 3))


class TestItemList(unittest.TestCase):

    def test_of_builds_tuple(self):
        items = [Item("a", "1"), Item("b", "2")]
        item_list = ItemList.of(items)
        items.append(Item("c", "3"))

        self.assertEqual(len(item_list), 2)
        self.assertIsInstance(item_list.items, tuple)
        self.assertTrue(item_list.ok)

    def test_error_list_is_not_ok(self):
        item_list = ItemList(error=OSError("boom"))
        self.assertFalse(item_list.ok)
        self.assertEqual(list(item_list), [])


class TestExceptions(unittest.TestCase):

    def test_provider_error_keeps_name_and_cause(self):
        cause = ValueError("bad")
        error = ProviderError("file:/tmp/x", cause)
        self.assertIsInstance(error, ConfigStoreError)
        self.assertEqual(error.provider_name, "file:/tmp/x")
        self.assertIs(error.cause, cause)
        self.assertIn("file:/tmp/x", str(error))

    def test_item_not_found_is_not_found(self):
        error = ItemNotFoundError("missing")
        self.assertIsInstance(error, NotFoundError)
        self.assertEqual(error.key, "missing")
        self.assertIn("missing", str(error))


if __name__ == "__main__":
    unittest.main()
