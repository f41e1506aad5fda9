import random
from collections import Counter

import pytest

from item_forge.config import DEFAULT_ITEM_NAMES, InventoryConfig
from item_forge.inventory.generator import ItemGenerator
from item_forge.inventory.items import Rarity


def test_same_seed_same_items():
    a = ItemGenerator(rng=random.Random(99)).generate_many(20)
    b = ItemGenerator(rng=random.Random(99)).generate_many(20)
    assert a == b


def test_items_use_name_pool(rng):
    items = ItemGenerator(rng=rng).generate_many(200)
    assert {item.name for item in items} <= set(DEFAULT_ITEM_NAMES)
    assert all(item.sub_level == 0 for item in items)


@pytest.mark.parametrize("value, expected", [
    (0.0, Rarity.COMMON),
    (0.49, Rarity.COMMON),
    (0.5, Rarity.GREAT),
    (0.74, Rarity.GREAT),
    (0.75, Rarity.RARE),
    (0.89, Rarity.RARE),
    (0.9, Rarity.EPIC),
    (0.97, Rarity.EPIC),
    (0.98, Rarity.LEGENDARY),
    (0.999, Rarity.LEGENDARY),
])
def test_rarity_thresholds(value, expected):
    rng = random.Random()
    rng.random = lambda: value
    assert ItemGenerator(rng=rng).roll_rarity() is expected


def test_distribution_roughly_matches_weights(rng):
    counts = Counter(item.rarity for item in ItemGenerator(rng=rng).generate_many(20000))
    assert counts[Rarity.COMMON] / 20000 == pytest.approx(0.50, abs=0.02)
    assert counts[Rarity.GREAT] / 20000 == pytest.approx(0.25, abs=0.02)
    assert counts[Rarity.RARE] / 20000 == pytest.approx(0.15, abs=0.02)
    assert counts[Rarity.EPIC] / 20000 == pytest.approx(0.08, abs=0.02)
    assert counts[Rarity.LEGENDARY] / 20000 == pytest.approx(0.02, abs=0.01)


def test_custom_config(rng):
    config = InventoryConfig(
        item_names=("Stick",),
        rarity_weights={Rarity.RARE: 1.0},
    )
    items = ItemGenerator(config=config, rng=rng).generate_many(10)
    assert {(item.name, item.rarity) for item in items} == {("Stick", Rarity.RARE)}
