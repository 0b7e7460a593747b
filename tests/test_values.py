import unittest

from tests.fixtures import LootgenTestBase, make_item, treasure_source, table_source
from lootgen.values import roll_treasure_values
from models import DrawResult

RUBY = make_item("Ruby", item_type="treasure", value={"value": 0})


class TestRollTreasureValues(LootgenTestBase):
    def test_sets_value_and_denomination(self):
        results = [DrawResult(itemData=RUBY, source=treasure_source(value="1d4*50"))]

        rolled = roll_treasure_values(results, self.dice)

        self.assertEqual(rolled[0].itemData["data"]["value"]["value"], 3)
        self.assertEqual(rolled[0].itemData["data"]["denomination"]["value"], "gp")
        self.assertEqual(self.dice.expressions, ["1d4*50"])

    def test_does_not_mutate_input(self):
        results = [DrawResult(itemData=RUBY, source=treasure_source())]

        rolled = roll_treasure_values(results, self.dice)

        self.assertIsNot(rolled, results)
        self.assertEqual(results[0].itemData["data"]["value"]["value"], 0)
        self.assertNotIn("denomination", results[0].itemData["data"])

    def test_passes_other_results_through(self):
        sword = make_item("Sword", item_type="weapon")
        from_table = DrawResult(itemData=RUBY, source=table_source("plain"))
        not_treasure = DrawResult(itemData=sword, source=treasure_source())

        rolled = roll_treasure_values([from_table, not_treasure], self.dice)

        self.assertEqual(rolled, [from_table, not_treasure])
        self.assertEqual(self.dice.expressions, [])


if __name__ == "__main__":
    unittest.main()
