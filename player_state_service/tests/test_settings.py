import unittest
from unittest.mock import patch

from pydantic import ValidationError

from player_state_service.settings import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        self.assertEqual(settings.MAX_SWORD_LEVEL, 20)
        self.assertEqual(settings.SWORD_SLOT, 2)
        self.assertEqual(settings.PORT, 8080)

    def test_reads_environment(self):
        env = {"PLAYER_STATE_SERVICE_MAX_SWORD_LEVEL": "30", "PLAYER_STATE_SERVICE_PORT": "9000"}
        with patch.dict("os.environ", env):
            settings = Settings()  # type: ignore[call-arg]
        self.assertEqual(settings.MAX_SWORD_LEVEL, 30)
        self.assertEqual(settings.PORT, 9000)

    def test_sword_slot_must_be_an_equipment_slot(self):
        with self.assertRaises(ValidationError):
            Settings(PLAYER_STATE_SERVICE_SWORD_SLOT=5)  # type: ignore[call-arg]

    def test_release_version_alias(self):
        with patch.dict("os.environ", {"PLAYER_STATE_SERVICE_IMAGE_RELEASE_VERSION": "1.4.0"}):
            settings = Settings()  # type: ignore[call-arg]
        self.assertEqual(settings.PLAYER_STATE_SERVICE_VERSION, "1.4.0")
