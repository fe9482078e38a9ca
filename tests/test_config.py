import unittest

from gdrivemodels.auth import AuthInfo
from gdrivemodels.config import MODELS_FOLDER, REQUESTS_FOLDER, GalleryConfig
from gdrivemodels.errors import ConfigError


class TestGalleryConfig(unittest.TestCase):
    def test_is_admin_is_case_insensitive(self) -> None:
        config = GalleryConfig(
            auth=AuthInfo.from_api_key("k"),
            folders={MODELS_FOLDER: "F1"},
            admin_emails=frozenset({" We.ArDesign3D@gmail.com "}),
        )
        self.assertTrue(config.is_admin("we.ardesign3d@gmail.com"))
        self.assertTrue(config.is_admin("WE.ARDESIGN3D@GMAIL.COM"))
        self.assertFalse(config.is_admin("someone@gmail.com"))
        self.assertFalse(config.is_admin(None))
        self.assertFalse(config.is_admin(""))

    def test_rejects_empty_folders_and_ids(self) -> None:
        with self.assertRaises(ConfigError):
            GalleryConfig(auth=AuthInfo.from_api_key("k"), folders={})
        with self.assertRaises(ConfigError):
            GalleryConfig(auth=AuthInfo.from_api_key("k"), folders={MODELS_FOLDER: " "})

    def test_folder_id_lookup(self) -> None:
        config = GalleryConfig(auth=AuthInfo.from_api_key("k"), folders={MODELS_FOLDER: "F1"})
        self.assertEqual(config.folder_id(MODELS_FOLDER), "F1")
        with self.assertRaises(ConfigError):
            config.folder_id(REQUESTS_FOLDER)

    def test_from_env_api_key(self) -> None:
        config = GalleryConfig.from_env(
            {
                "GDRIVEMODELS_API_KEY": "AIza-test",
                "GDRIVEMODELS_SERVICE_ACCOUNT_FILE": "/tmp/sa.json",
                "GDRIVEMODELS_MODELS_FOLDER_ID": "F1",
                "GDRIVEMODELS_REQUESTS_FOLDER_ID": "F2",
                "GDRIVEMODELS_ADMIN_EMAILS": "a@gmail.com, B@gmail.com,,",
            }
        )
        self.assertEqual(config.auth.kind, "api_key")
        self.assertEqual(config.folders, {MODELS_FOLDER: "F1", REQUESTS_FOLDER: "F2"})
        self.assertEqual(config.admin_emails, frozenset({"a@gmail.com", "b@gmail.com"}))

    def test_from_env_service_account(self) -> None:
        with self.assertLogs("gdrivemodels.config", level="WARNING"):
            config = GalleryConfig.from_env(
                {
                    "GDRIVEMODELS_SERVICE_ACCOUNT_FILE": "/tmp/sa.json",
                    "GDRIVEMODELS_MODELS_FOLDER_ID": "F1",
                }
            )
        self.assertEqual(config.auth.service_account_file, "/tmp/sa.json")
        self.assertEqual(config.folders, {MODELS_FOLDER: "F1"})
        self.assertEqual(config.admin_emails, frozenset())

    def test_from_env_missing_values(self) -> None:
        with self.assertRaises(ConfigError):
            GalleryConfig.from_env({"GDRIVEMODELS_MODELS_FOLDER_ID": "F1"})
        with self.assertRaises(ConfigError):
            GalleryConfig.from_env({"GDRIVEMODELS_API_KEY": "k"})


if __name__ == "__main__":
    unittest.main()
