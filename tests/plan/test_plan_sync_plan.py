import unittest

from sitesync.models import LocalFile, RemoteObject
from sitesync.plan import Action, PlanItem, SyncPlan


class TestSyncPlan(unittest.TestCase):
    def _plan(self) -> SyncPlan:
        local = LocalFile(path="/site/a.css", key="a.css", hash="h", size=1)
        remote = RemoteObject(key="old.js", fingerprint="x")
        return SyncPlan(
            items=[
                PlanItem(key="a.css", action=Action.UNCHANGED, local=local, remote=remote),
                PlanItem(key="old.js", action=Action.UNKNOWN, remote=remote),
            ],
            region="us-west-2",
            bucket="site-bucket",
        )

    def test_sync_plan_fields(self) -> None:
        plan = self._plan()
        self.assertEqual(plan.bucket, "site-bucket")
        self.assertIsNone(plan.endpoint)
        self.assertTrue(plan.plan_id)
        self.assertIsNotNone(plan.created_at.tzinfo)

    def test_no_changes_when_only_informational(self) -> None:
        plan = self._plan()
        self.assertFalse(plan.has_changes)
        self.assertEqual(plan.mutating_items(), [])
        self.assertEqual(plan.count_by_action(), {Action.UNCHANGED: 1, Action.UNKNOWN: 1})

    def test_get(self) -> None:
        plan = self._plan()
        self.assertEqual(plan.get("old.js").action, Action.UNKNOWN)
        with self.assertRaises(KeyError):
            plan.get("missing")


if __name__ == "__main__":
    unittest.main()
