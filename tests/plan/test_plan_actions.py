import unittest

from sitesync.plan import ACTION_PRIORITY, MUTATING_ACTIONS, Action


class TestAction(unittest.TestCase):
    def test_action_values(self) -> None:
        self.assertEqual(Action.CREATE.value, "Create")
        self.assertEqual(Action.UNKNOWN.value, "Unknown")
        self.assertEqual(Action("Delete"), Action.DELETE)

    def test_priority_is_total_over_actions(self) -> None:
        self.assertEqual(set(ACTION_PRIORITY), set(Action))
        ordered = sorted(Action, key=ACTION_PRIORITY.__getitem__)
        self.assertEqual(
            ordered,
            [
                Action.UNKNOWN,
                Action.IGNORE,
                Action.UNCHANGED,
                Action.CREATE,
                Action.UPDATE,
                Action.DELETE,
            ],
        )

    def test_mutating_actions(self) -> None:
        self.assertEqual(MUTATING_ACTIONS, {Action.CREATE, Action.UPDATE, Action.DELETE})


if __name__ == "__main__":
    unittest.main()
