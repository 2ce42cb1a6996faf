"""
Test suite for RefreshLoop.
Ticks are driven by hand; one test runs the real background thread.
"""

import os
import tempfile
import time
import unittest
from unittest.mock import Mock

from configstore import NullLogger
from configstore.core import Item
from configstore.providers import FileProvider, RefreshLoop, read_items


class TestRefreshLoop(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "live.yaml")
        self._write("- {key: x, value: '1', priority: 10}\n")
        self.target = FileProvider.load(self.path)
        self.on_change = Mock()
        self.loop = RefreshLoop(
            self.path, read_items, self.target, self.on_change,
            interval=3600, logger=NullLogger()
        )

    def tearDown(self):
        self.loop.stop(timeout=5)
        self.tmpdir.cleanup()

    def _write(self, content, bump=0):
        # a running loop must never read a half-written file
        staging = self.path + ".tmp"
        with open(staging, "w") as f:
            f.write(content)
        if bump:
            stamp = time.time() + bump
            os.utime(staging, (stamp, stamp))
        os.replace(staging, self.path)

    def test_unchanged_file_is_skipped(self):
        self.assertFalse(self.loop.tick())
        self.on_change.assert_not_called()

    def test_newer_file_is_swapped_and_notified(self):
        self._write("- {key: x, value: '2', priority: 10}\n", bump=60)

        self.assertTrue(self.loop.tick())

        self.assertEqual(self.target.items().items, (Item("x", "2", 10),))
        self.on_change.assert_called_once_with()

    def test_swap_happens_once_per_modification(self):
        self._write("- {key: x, value: '2', priority: 10}\n", bump=60)

        self.assertTrue(self.loop.tick())
        self.assertFalse(self.loop.tick())
        self.assertEqual(self.on_change.call_count, 1)

    def test_undecodable_rewrite_keeps_previous_items(self):
        self._write("- key: [broken", bump=60)

        self.assertFalse(self.loop.tick())

        self.assertEqual(self.target.items().items, (Item("x", "1", 10),))
        self.on_change.assert_not_called()

    def test_missing_file_is_skipped(self):
        os.remove(self.path)

        self.assertFalse(self.loop.tick())
        self.assertEqual(self.target.items().items, (Item("x", "1", 10),))

    def test_background_thread_reloads_and_stops(self):
        loop = RefreshLoop(
            self.path, read_items, self.target, self.on_change,
            interval=0.05, logger=NullLogger()
        )
        self.assertTrue(loop.start())
        self.assertFalse(loop.start())
        try:
            self._write("- {key: x, value: '3', priority: 10}\n", bump=60)
            deadline = time.time() + 5
            while not self.on_change.called and time.time() < deadline:
                time.sleep(0.02)
        finally:
            self.assertTrue(loop.stop(timeout=5))

        self.assertFalse(loop.is_running())
        self.assertEqual(self.target.items().items, (Item("x", "3", 10),))


if __name__ == "__main__":
    unittest.main()
