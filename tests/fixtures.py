# tests/fixtures.py
import os
import sys
import unittest
from typing import Sequence

# the service modules live under src/ and import each other as top level packages
SRC_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from lootgen.host import Host, MemoryDocumentStore, CollectingNotifier  # noqa: E402
from models.sources import (  # noqa: E402
    GenType,
    PackSource,
    PoolSource,
    TableSource,
    TreasureSource,
    Denomination,
)


class ScriptedRandom:
    """
    Returns the scripted values in order, then repeats the last one.
    """

    def __init__(self, values: Sequence[float] = (0.0,)):
        self.values = list(values)
        self.calls = 0

    def uniform(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


class FixedDice:
    def __init__(self, total: int = 1):
        self.total = total
        self.expressions: list[str] = []

    def evaluate(self, expression: str) -> int:
        self.expressions.append(expression)
        return self.total


def make_item(name: str, quantity: int = 1, price="1 gp", item_type="equipment", **data):
    return {
        "_id": name.replace(" ", "")[:16],
        "name": name,
        "type": item_type,
        "data": {
            "slug": name.lower().replace(" ", "-"),
            "quantity": {"value": quantity},
            "price": {"value": price},
            **data,
        },
    }


def make_spell(_id: str, name: str, level: int, traditions=("arcane",), rarity="common"):
    return {
        "_id": _id,
        "name": name,
        "type": "spell",
        "data": {
            "slug": name.lower().replace(" ", "-"),
            "level": {"value": level},
            "traditions": {"value": list(traditions)},
            "traits": {"value": [], "rarity": {"value": rarity}},
            "school": {"value": "evocation"},
        },
    }


def make_template(_id: str, name: str):
    return {
        "_id": _id,
        "name": name,
        "type": "consumable",
        "data": {
            "slug": name.lower().replace(" ", "-"),
            "quantity": {"value": 1},
            "traits": {"value": ["consumable", "magical"], "rarity": {"value": "common"}},
            "description": {"value": "<p>Template.</p>"},
        },
    }


LONGSWORD = {
    "_id": "longsword0000000",
    "name": "Longsword",
    "type": "weapon",
    "data": {
        "slug": "longsword",
        "level": {"value": 1},
        "price": {"value": "10 gp"},
        "weight": {"value": "1"},
        "quantity": {"value": 1},
    },
}

BREASTPLATE = {
    "_id": "breastplate00000",
    "name": "Breastplate",
    "type": "armor",
    "data": {
        "slug": "breastplate",
        "level": {"value": 0},
        "price": {"value": "8 gp"},
        "weight": {"value": "2"},
        "armor": {"value": 4},
        "armorType": {"value": "medium"},
        "quantity": {"value": 1},
    },
}

STEEL_SHIELD = {
    "_id": "steelshield00000",
    "name": "Steel Shield",
    "type": "armor",
    "data": {
        "slug": "steel-shield",
        "level": {"value": 0},
        "price": {"value": "2 gp"},
        "weight": {"value": "1"},
        "armor": {"value": 2},
        "armorType": {"value": "shield"},
        "hardness": {"value": 5},
        "hp": {"value": 20, "max": 20},
        "brokenThreshold": {"value": 10},
        "quantity": {"value": 1},
    },
}

ITEM_PACK = "test.items"
TABLE_PACK = "test.tables"


def pool_source(elements: list[dict], weight: float = 1, name: str = "Pool"):
    return PoolSource(name=name, storeId=f"pool-{name}", weight=weight, elements=elements)


def pack_source(pack_id: str = ITEM_PACK, weight: float = 1, item_type=None):
    return PackSource(
        id=pack_id, storeId=f"pack-{pack_id}", name=pack_id, weight=weight, itemType=item_type
    )


def table_source(table_id: str, weight: float = 1):
    return TableSource(
        id=table_id,
        storeId=f"table-{table_id}",
        name=table_id,
        weight=weight,
        itemType=GenType.permanent,
        tableSource=PackSource(id=TABLE_PACK, name="Tables"),
    )


def treasure_source(table_id: str = "gems", value: str = "1d4*50"):
    return TreasureSource(
        id=table_id,
        storeId=f"table-{table_id}",
        name="Lesser Precious Stones",
        value=value,
        denomination=Denomination.gold,
        itemType=GenType.treasure,
        tableSource=PackSource(id=TABLE_PACK, name="Tables"),
    )


def document_table(_id: str, results: list[dict], formula: str = "1d2"):
    return {"_id": _id, "name": _id, "formula": formula, "results": results}


class LootgenTestBase(unittest.TestCase):
    """Base class for the synchronous engine tests."""

    def setUp(self):
        self.rng = ScriptedRandom([0.0])
        self.dice = FixedDice(3)
        self.notifier = CollectingNotifier()


class AsyncLootgenTestBase(unittest.IsolatedAsyncioTestCase):
    """Base class for tests that draw through a host."""

    def setUp(self):
        self.rng = ScriptedRandom([0.0])
        self.dice = FixedDice(1)
        self.notifier = CollectingNotifier()
        self.store = MemoryDocumentStore()

    def make_host(self) -> Host:
        return Host(
            documents=self.store, dice=self.dice, rng=self.rng, notifier=self.notifier
        )
