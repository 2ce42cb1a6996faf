"""
Shared pytest configuration and fixtures for the configstore tests.
"""

import pytest

from configstore import Item, NullLogger, Store, StoreSettings


@pytest.fixture
def store():
    """A silent store; background refresh loops are stopped on teardown."""
    store = Store(StoreSettings(refresh_interval=3600), logger=NullLogger())
    yield store
    store.close()


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML item list to a file under tmp_path and return its path."""
    def _write(name, items):
        path = tmp_path / name
        lines = []
        for item in items:
            lines.append(f"- key: {item.key}")
            lines.append(f"  value: \"{item.value}\"")
            lines.append(f"  priority: {item.priority}")
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write


@pytest.fixture
def sample_items():
    return [
        Item("db-host", "localhost", 10),
        Item("db-port", "5432", 10),
    ]

