import unittest

from gdrivemodels.models import (
    ClassifyResult,
    DriveFileRecord,
    ModelAsset,
    OwnerIdentifier,
    ScanResult,
)


class TestOwnerIdentifier(unittest.TestCase):
    def test_pseudo_email(self) -> None:
        owner = OwnerIdentifier(
            raw_segment="catenary_bim_designer",
            normalized_handle="catenary.bim.designer",
        )
        self.assertEqual(owner.pseudo_email, "catenary.bim.designer@gmail.com")


class TestModelAsset(unittest.TestCase):
    def test_urls_with_thumbnail(self) -> None:
        model = DriveFileRecord(id="M1", name="Hero_abc.def.glb")
        thumb = DriveFileRecord(id="I1", name="Hero_abc.def.png")
        asset = ModelAsset(
            id="M1",
            source_file=model,
            display_name="Hero",
            thumbnail=thumb,
            owner_handle="abc.def",
        )
        self.assertEqual(asset.name, "Hero_abc.def.glb")
        self.assertEqual(asset.download_url, "/api/models/M1?filename=Hero_abc.def.glb")
        self.assertEqual(asset.image_url, "/api/images/I1?filename=Hero_abc.def.png")
        self.assertEqual(asset.owner_email, "abc.def@gmail.com")

    def test_no_thumbnail_no_owner(self) -> None:
        asset = ModelAsset(
            id="M1",
            source_file=DriveFileRecord(id="M1", name="Logo_ab.glb"),
            display_name="Logo Ab",
        )
        self.assertIsNone(asset.image_url)
        self.assertIsNone(asset.owner_email)


class TestResults(unittest.TestCase):
    def test_classify_result_default(self) -> None:
        self.assertEqual(ClassifyResult().objects, [])

    def test_scan_status(self) -> None:
        ok = ScanResult(objects=[], images=[], scanned_folders=["A", "B"])
        self.assertEqual(ok.status, "success")

        partial = ScanResult(
            objects=[], images=[], scanned_folders=["A", "B"], failed_folders={"B": "NotFoundError"}
        )
        self.assertEqual(partial.status, "partial")

        failed = ScanResult(
            objects=[], images=[], scanned_folders=["A"], failed_folders={"A": "ApiError"}
        )
        self.assertEqual(failed.status, "failed")


if __name__ == "__main__":
    unittest.main()
