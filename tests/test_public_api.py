import unittest

import sitesync


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        self.assertTrue(hasattr(sitesync, "SiteSyncManager"))
        self.assertTrue(hasattr(sitesync, "S3Controller"))
        self.assertTrue(hasattr(sitesync, "SyncOptions"))
        self.assertTrue(hasattr(sitesync, "ScanOptions"))

        self.assertTrue(hasattr(sitesync, "Action"))
        self.assertTrue(hasattr(sitesync, "SyncPlan"))
        self.assertTrue(hasattr(sitesync, "PlanItem"))
        self.assertTrue(hasattr(sitesync, "build_sync_plan"))
        self.assertTrue(hasattr(sitesync, "prepare_invalidation_paths"))

        self.assertTrue(hasattr(sitesync, "SiteSyncError"))
        self.assertTrue(hasattr(sitesync, "ListingError"))
        self.assertTrue(hasattr(sitesync, "ExecutionError"))

    def test___all___is_defined(self) -> None:
        self.assertTrue(hasattr(sitesync, "__all__"))
        self.assertIn("SiteSyncManager", sitesync.__all__)
        self.assertIn("SiteSyncError", sitesync.__all__)
        for name in sitesync.__all__:
            self.assertTrue(hasattr(sitesync, name), name)


if __name__ == "__main__":
    unittest.main()
