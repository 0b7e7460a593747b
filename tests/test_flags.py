import unittest

from tests.fixtures import LootgenTestBase
from lootgen.flags import (
    source_flag_path,
    filter_flag_path,
    get_data_source_settings,
    get_filter_settings,
    build_source_setting_update,
    build_filter_setting_update,
)
from models.filters import FilterType
from models.sources import GenType, TableSource, TreasureSource
from pf2e.filters import spell_filters
from pf2e.tables import (
    permanent_sources,
    treasure_sources,
    spell_sources,
    sources_of_type,
)


class TestFlagPaths(LootgenTestBase):
    def setUp(self):
        super().setUp()
        self.first_level = permanent_sources()["table-JyDn13oc0MdLjpyw"]

    def test_source_path(self):
        self.assertEqual(
            source_flag_path(self.first_level),
            "sources.permanent.table-JyDn13oc0MdLjpyw",
        )
        self.assertEqual(
            source_flag_path(self.first_level, with_flags=True),
            "flags.pf2e-lootgen.sources.permanent.table-JyDn13oc0MdLjpyw",
        )

    def test_pack_ids_do_not_add_path_segments(self):
        spells = next(iter(spell_sources().values()))
        self.assertEqual(source_flag_path(spells), "sources.spell.pack-pf2e-spells-srd")

    def test_filter_path(self):
        level_three = spell_filters()["level-3"]
        self.assertEqual(filter_flag_path(level_three), "filters.spell.level.level-3")
        self.assertEqual(
            filter_flag_path(spell_filters()["evocation"], True),
            "flags.pf2e-lootgen.filters.spell.school.evocation",
        )


class TestSettingsOverlay(LootgenTestBase):
    def test_source_settings(self):
        source = permanent_sources()["table-JyDn13oc0MdLjpyw"]
        flags = {
            "sources": {
                "permanent": {
                    "table-JyDn13oc0MdLjpyw": {
                        "weight": 5,
                        "enabled": False,
                        "name": "ignored",
                    }
                }
            }
        }

        loaded = get_data_source_settings(flags, source)

        self.assertIsInstance(loaded, TableSource)
        self.assertEqual((loaded.weight, loaded.enabled), (5, False))
        self.assertEqual(loaded.name, "1st-Level")
        self.assertEqual((source.weight, source.enabled), (1, True))

    def test_treasure_settings_keep_value(self):
        source = next(iter(treasure_sources().values()))
        loaded = get_data_source_settings({}, source)
        self.assertIsInstance(loaded, TreasureSource)
        self.assertEqual(loaded.value, source.value)
        self.assertEqual(loaded, source)

    def test_filter_settings(self):
        level_three = spell_filters()["level-3"]
        flags = {"filters": {"spell": {"level": {"level-3": {"enabled": False}}}}}
        loaded = get_filter_settings(flags, level_three)
        self.assertFalse(loaded.enabled)
        self.assertEqual(loaded.desiredValue, 3)
        self.assertTrue(level_three.enabled)


class TestSettingUpdates(LootgenTestBase):
    def test_source_update(self):
        update = build_source_setting_update(GenType.treasure, "enabled", False)
        self.assertEqual(len(update), len(sources_of_type(GenType.treasure)))
        self.assertTrue(
            all(k.startswith("flags.pf2e-lootgen.sources.treasure.") for k in update)
        )
        self.assertTrue(all(k.endswith(".enabled") for k in update))
        self.assertEqual(set(update.values()), {False})

    def test_multiple_keys(self):
        update = build_source_setting_update(
            GenType.consumable, ["enabled", "weight"], [True, 2]
        )
        self.assertEqual(len(update), 2 * 20)
        key = "flags.pf2e-lootgen.sources.consumable.table-tlX5PLwar8b1tmiQ"
        self.assertEqual(update[f"{key}.enabled"], True)
        self.assertEqual(update[f"{key}.weight"], 2)

    def test_filter_update(self):
        update = build_filter_setting_update(FilterType.school, "weight", 3)
        self.assertEqual(len(update), 8)
        self.assertEqual(update["flags.pf2e-lootgen.filters.spell.school.illusion.weight"], 3)

    def test_mismatched_lengths(self):
        with self.assertRaises(ValueError):
            build_source_setting_update(GenType.spell, ["enabled", "weight"], [True])
        with self.assertRaises(ValueError):
            build_filter_setting_update(FilterType.level, "enabled", [True, False])

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            build_source_setting_update(GenType.spell, "name", "x")


if __name__ == "__main__":
    unittest.main()
