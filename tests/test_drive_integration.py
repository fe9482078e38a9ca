import dataclasses
import os
import unittest

from gdrivemodels import GalleryConfig, ModelGallery

_INTEGRATION_ADMIN = "integration-admin@example.com"

_REQUIRED_ENV = ("GDRIVEMODELS_MODELS_FOLDER_ID",)
_CREDENTIAL_ENV = ("GDRIVEMODELS_API_KEY", "GDRIVEMODELS_SERVICE_ACCOUNT_FILE")


def _configured() -> bool:
    if not all(os.environ.get(name, "").strip() for name in _REQUIRED_ENV):
        return False
    return any(os.environ.get(name, "").strip() for name in _CREDENTIAL_ENV)


@unittest.skipUnless(_configured(), "Drive integration env vars are not set")
class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with a real shared Drive folder (read-only).

    Required env vars:
        - GDRIVEMODELS_MODELS_FOLDER_ID: folder holding models and thumbnails
        - GDRIVEMODELS_API_KEY or GDRIVEMODELS_SERVICE_ACCOUNT_FILE

    Optional:
        - GDRIVEMODELS_TEST_USER_EMAIL: a user expected to own models there
    """

    @classmethod
    def setUpClass(cls) -> None:
        config = GalleryConfig.from_env()
        cls.config = dataclasses.replace(
            config, admin_emails=config.admin_emails | {_INTEGRATION_ADMIN}
        )
        cls.gallery = ModelGallery(cls.config)

    def test_scan_all_then_user_subset(self) -> None:
        everything = self.gallery.scan_all(_INTEGRATION_ADMIN)
        self.assertEqual(everything.status, "success")

        all_ids = {a.id for a in everything.objects}
        for asset in everything.objects:
            self.assertTrue(asset.display_name)

        email = os.environ.get("GDRIVEMODELS_TEST_USER_EMAIL", "").strip()
        if not email:
            return

        mine = self.gallery.scan_for_user(email)
        self.assertTrue({a.id for a in mine.objects} <= all_ids)
        for asset in mine.objects:
            self.assertEqual(asset.owner_email, email)


if __name__ == "__main__":
    unittest.main()
