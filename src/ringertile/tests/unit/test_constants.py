"""Unit tests for RingerTile constants.

Validates constant values across all constant groups for type correctness,
range validity, and consistency.
"""

import unittest

from ringertile import constants
from ringertile.constants.config import ConfigConstants
from ringertile.constants.ringer import ActionConstants, DisplayConstants, ModeConstants
from ringertile.core.modes import CATALOG


class TestConstants(unittest.TestCase):
    """Tests for validating RingerTile constants."""

    def test_app_constants(self):
        self.assertTrue(constants.app.APP_NAME)
        self.assertTrue(constants.app.VERSION)

    def test_config_constants(self):
        self.assertIsInstance(ConfigConstants.DEFAULT_CONFIG, dict)
        self.assertIn(ConfigConstants.DEFAULT_VIBRATE_WHEN_RINGING, (0, 1))
        self.assertEqual(set(ConfigConstants.DEFAULT_CONFIG),
                         {constants.config.keys.VIBRATE_WHEN_RINGING, constants.config.keys.SELECTABLE_ORDER})

    def test_mode_constants_match_catalog(self):
        self.assertEqual(ModeConstants.CATALOG_SIZE, len(CATALOG))
        self.assertEqual(ModeConstants.DEFAULT_ORDER, tuple(range(len(CATALOG))))

    def test_display_constants(self):
        self.assertEqual(len(DisplayConstants.ICONS), len(CATALOG))
        self.assertEqual(DisplayConstants.ENABLED, (False, False, True, True))

    def test_action_constants(self):
        self.assertEqual(ActionConstants.VIBRATE_DURATION_MS, 250)
        self.assertEqual(ActionConstants.SOUND_SETTINGS_ACTION, "android.settings.SOUND_SETTINGS")

    def test_logs_constants(self):
        self.assertGreater(constants.logs.MAX_LOG_SIZE, 0)
        self.assertTrue(constants.logs.LOG_FILENAME)


if __name__ == "__main__":
    unittest.main()
