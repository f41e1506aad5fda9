import os
import sys
import random
import pytest

# Ensure item_forge can be imported from a source checkout
sys.path.append(os.getcwd())


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from item_forge.core.events import EventBus
    return EventBus()


@pytest.fixture
def inventory():
    """Empty inventory with default config."""
    from item_forge.inventory.manager import Inventory
    return Inventory()


@pytest.fixture
def rng():
    """Seeded random source for reproducible drops."""
    return random.Random(1234)


@pytest.fixture
def save_path(tmp_path):
    """Path for a CSV save inside the test's temp directory."""
    return tmp_path / "inventory.csv"
