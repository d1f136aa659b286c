import unittest

from sitesync.models import LocalFile, RemoteObject
from sitesync.plan import ACTION_PRIORITY, Action, PlanItem, sort_plan_items


def _item(key: str, action: Action, cache: bool = False) -> PlanItem:
    if action in (Action.CREATE, Action.UNCHANGED, Action.UPDATE):
        local = LocalFile(path=f"/site/{key}", key=key, hash="h", size=1)
        return PlanItem(key=key, action=action, local=local, cache=cache)
    return PlanItem(key=key, action=action, remote=RemoteObject(key=key, fingerprint="h"))


class TestOrdering(unittest.TestCase):
    def test_sorted_by_action_priority(self) -> None:
        items = [
            _item("d", Action.DELETE),
            _item("u", Action.UPDATE),
            _item("c", Action.CREATE),
            _item("s", Action.UNCHANGED),
            _item("i", Action.IGNORE),
            _item("k", Action.UNKNOWN),
        ]
        ordered = sort_plan_items(items)
        self.assertEqual([i.key for i in ordered], ["k", "i", "s", "c", "u", "d"])

    def test_cached_before_non_cached_within_action(self) -> None:
        items = [
            _item("index.html", Action.CREATE, cache=False),
            _item("a.css", Action.CREATE, cache=True),
            _item("b.js", Action.CREATE, cache=True),
        ]
        ordered = sort_plan_items(items)
        self.assertEqual([i.key for i in ordered], ["a.css", "b.js", "index.html"])

    def test_ties_keep_encounter_order_not_key_order(self) -> None:
        items = [_item("z", Action.DELETE), _item("a", Action.DELETE), _item("m", Action.DELETE)]
        self.assertEqual([i.key for i in sort_plan_items(items)], ["z", "a", "m"])

    def test_sort_invariant(self) -> None:
        items = [
            _item("1", Action.UPDATE, cache=False),
            _item("2", Action.CREATE, cache=False),
            _item("3", Action.UPDATE, cache=True),
            _item("4", Action.UNKNOWN),
            _item("5", Action.CREATE, cache=True),
            _item("6", Action.DELETE),
            _item("7", Action.UNCHANGED, cache=True),
        ]
        ordered = sort_plan_items(items)
        for prev, cur in zip(ordered, ordered[1:]):
            self.assertLessEqual(ACTION_PRIORITY[prev.action], ACTION_PRIORITY[cur.action])
            if prev.action is cur.action:
                self.assertFalse(not prev.cache and cur.cache)


if __name__ == "__main__":
    unittest.main()
