import unittest
from copy import deepcopy

from tests.fixtures import LootgenTestBase, LONGSWORD, BREASTPLATE, STEEL_SHIELD, make_item
from lootgen.builder import (
    make_builder,
    ItemBuilderException,
    WeaponBuilder,
    ArmorBuilder,
    ShieldBuilder,
)
from models import MaterialGrade


class TestMakeBuilder(LootgenTestBase):
    def test_subtypes(self):
        self.assertIsInstance(make_builder(LONGSWORD), WeaponBuilder)
        self.assertIsInstance(make_builder(BREASTPLATE), ArmorBuilder)
        self.assertIsInstance(make_builder(STEEL_SHIELD), ShieldBuilder)

    def test_not_equipment(self):
        with self.assertRaises(ItemBuilderException):
            make_builder(make_item("Rope"))


class TestItemBuilder(LootgenTestBase):
    def test_potency_validation_keeps_state(self):
        builder = make_builder(LONGSWORD).set_potency(0)
        with self.assertRaises(ItemBuilderException):
            builder.set_potency(5)
        self.assertEqual(builder.potency, 0)

    def test_fresh_builder_has_no_potency(self):
        builder = make_builder(LONGSWORD)
        self.assertEqual(builder.potency, 0)
        with self.assertRaises(ItemBuilderException):
            builder.set_potency(5)
        self.assertEqual(builder.potency, 0)
        # zero is the starting value, not a chosen potency
        with self.assertRaises(ItemBuilderException):
            builder.set_striking_rune("striking")
        self.assertIsNone(builder.build()["data"]["potencyRune"]["value"])

    def test_checks_disabled(self):
        builder = make_builder(LONGSWORD).set_checks(False).set_potency(5)
        item = builder.build()
        self.assertEqual(item["data"]["potencyRune"]["value"], 5)

    def test_invalid_material(self):
        builder = make_builder(LONGSWORD)
        with self.assertRaises(ItemBuilderException):
            builder.set_material("dragonhide")
        self.assertIsNone(builder.material_slug)

        with self.assertRaises(ItemBuilderException):
            builder.set_material("adamantine", MaterialGrade.low)
        self.assertIsNone(builder.material_slug)

    def test_material_default_grade(self):
        builder = make_builder(LONGSWORD).set_material("coldIron")
        self.assertEqual(builder.material_grade, MaterialGrade.standard)

    def test_runes_need_potency(self):
        builder = make_builder(LONGSWORD)
        with self.assertRaises(ItemBuilderException):
            builder.set_striking_rune("striking")
        with self.assertRaises(ItemBuilderException):
            builder.set_property_rune(0, "flaming")
        self.assertIsNone(builder.fundamental)

    def test_rune_validity(self):
        builder = make_builder(LONGSWORD).set_potency(2)
        with self.assertRaises(ItemBuilderException):
            builder.set_striking_rune("resilient")
        with self.assertRaises(ItemBuilderException):
            builder.set_property_rune(0, "slick")
        with self.assertRaises(ItemBuilderException):
            builder.set_property_rune(2, "flaming")
        with self.assertRaises(ItemBuilderException):
            builder.set_property_rune(4, "flaming")
        self.assertEqual(builder.property_slugs, ["", "", "", ""])

    def test_build_weapon(self):
        item = (
            make_builder(LONGSWORD)
            .set_material("coldIron", "low")
            .set_potency(1)
            .set_striking_rune("striking")
            .set_property_rune(0, "ghostTouch")
            .build()
        )

        data = item["data"]
        self.assertEqual(data["preciousMaterial"]["value"], "coldIron")
        self.assertEqual(data["preciousMaterialGrade"]["value"], "low")
        self.assertEqual(data["potencyRune"]["value"], 1)
        self.assertEqual(data["strikingRune"]["value"], "striking")
        self.assertEqual(data["propertyRune1"]["value"], "ghostTouch")
        self.assertEqual(data["propertyRune2"]["value"], "")
        self.assertEqual(data["level"]["value"], 4)
        self.assertEqual(data["price"]["value"], f"{10 + 40 + 4 + 35 + 65 + 75} gp")

    def test_build_armor(self):
        item = (
            make_builder(BREASTPLATE)
            .set_potency(1)
            .set_resiliency_rune("resilient")
            .build()
        )
        self.assertEqual(item["data"]["resiliencyRune"]["value"], "resilient")
        self.assertEqual(item["data"]["level"]["value"], 8)
        self.assertEqual(item["data"]["price"]["value"], f"{8 + 160 + 340} gp")

    def test_build_shield(self):
        item = make_builder(STEEL_SHIELD).set_material("adamantine").build()
        data = item["data"]
        self.assertEqual(data["level"]["value"], 8)
        self.assertEqual(data["price"]["value"], "442 gp")
        self.assertEqual(data["hardness"]["value"], 10)
        self.assertEqual(data["hp"]["value"], 40)
        self.assertEqual(data["brokenThreshold"]["value"], 20)

    def test_build_does_not_mutate_base(self):
        base = deepcopy(LONGSWORD)
        make_builder(base).set_potency(1).build()
        self.assertEqual(base, LONGSWORD)

    def test_builds_differ_only_by_id(self):
        builder = make_builder(LONGSWORD).set_potency(2).set_property_rune(1, "frost")
        first, second = builder.build(), builder.build()

        self.assertNotEqual(first["_id"], second["_id"])
        self.assertNotEqual(first["_id"], LONGSWORD["_id"])
        del first["_id"], second["_id"]
        self.assertEqual(first, second)

    def test_reset(self):
        builder = make_builder(LONGSWORD).set_material("silver", "low").set_potency(1)
        builder.reset()
        item = builder.build()
        self.assertIsNone(item["data"]["preciousMaterial"]["value"])
        self.assertIsNone(item["data"]["potencyRune"]["value"])
        self.assertEqual(item["data"]["level"]["value"], 1)
        self.assertEqual(item["data"]["price"]["value"], "10 gp")


if __name__ == "__main__":
    unittest.main()
