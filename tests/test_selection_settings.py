"""Unit tests for the persisted Select By Level defaults."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "LevelSelect.extension", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from LevelSelect.models.selection import LevelOption, SelectionCriteria
from LevelSelect.settings import SelectByLevelSettings


class FakeConfigSection(object):
    """Mimics the pyRevit config section API used by the settings."""

    def __init__(self, **values):
        for key, value in values.items():
            setattr(self, key, value)

    def get_option(self, name, default_value=None):
        return getattr(self, name, default_value)


LEVELS = [
    LevelOption(1, "Level 1", 0.0),
    LevelOption(2, "Level 2", 12.0),
    LevelOption(3, "Roof", 30.0),
]


class SelectByLevelSettingsTests(unittest.TestCase):
    """Validates defaults, coercion and config round trips."""

    def test_defaults_respected(self):
        settings = SelectByLevelSettings()
        self.assertTrue(settings.select_by_level)
        self.assertFalse(settings.select_by_reference_level)
        self.assertFalse(settings.remember_last_level)
        self.assertEqual(settings.last_level_name, "")

    def test_string_flags_are_coerced(self):
        settings = SelectByLevelSettings.from_config(FakeConfigSection(
            select_by_level="false",
            select_by_reference_level="True",
            remember_last_level="true",
        ))
        self.assertFalse(settings.select_by_level)
        self.assertTrue(settings.select_by_reference_level)
        self.assertTrue(settings.remember_last_level)

    def test_unreadable_flag_falls_back_to_default(self):
        settings = SelectByLevelSettings({"select_by_level": "maybe"})
        self.assertTrue(settings.select_by_level)

    def test_config_round_trip(self):
        config = FakeConfigSection()
        settings = SelectByLevelSettings()
        settings.set("select_by_reference_level", True)
        settings.set("last_level_name", "Roof")
        settings.apply_to_config(config)

        restored = SelectByLevelSettings.from_config(config)
        self.assertEqual(restored.to_dict(), settings.to_dict())

    def test_unknown_key_rejected(self):
        with self.assertRaises(KeyError):
            SelectByLevelSettings().set("zoom_factor", 2)

    def test_remember_stores_flags_and_skips_level_by_default(self):
        settings = SelectByLevelSettings()
        settings.remember(SelectionCriteria(LEVELS[1], by_level=False, by_reference_level=True))
        self.assertFalse(settings.select_by_level)
        self.assertTrue(settings.select_by_reference_level)
        self.assertEqual(settings.last_level_name, "")

    def test_remember_stores_level_when_enabled(self):
        settings = SelectByLevelSettings({"remember_last_level": True})
        settings.remember(SelectionCriteria(LEVELS[2]))
        self.assertEqual(settings.last_level_name, "Roof")

    def test_initial_level_defaults_to_first(self):
        settings = SelectByLevelSettings({"last_level_name": "Roof"})
        self.assertEqual(settings.initial_level_index(LEVELS), 0)
        self.assertEqual(settings.initial_level_index([]), -1)

    def test_initial_level_uses_remembered_level(self):
        settings = SelectByLevelSettings({"remember_last_level": True, "last_level_name": "Level 2"})
        self.assertEqual(settings.initial_level_index(LEVELS), 1)

    def test_remembered_level_missing_falls_back_to_first(self):
        settings = SelectByLevelSettings({"remember_last_level": True, "last_level_name": "Basement"})
        self.assertEqual(settings.initial_level_index(LEVELS), 0)


if __name__ == "__main__":
    unittest.main()
