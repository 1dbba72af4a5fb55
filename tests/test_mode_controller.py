import unittest

from treegesture.control.mode_controller import ModeController
from treegesture.core.types import Mode, Verdict

class TestModeController(unittest.TestCase):
    def setUp(self):
        self.modes = ModeController()

    def test_starts_formed(self):
        self.assertEqual(self.modes.mode, Mode.FORMED)

    def test_confirmed_open_goes_chaos(self):
        change = self.modes.apply(Verdict.OPEN_CONFIRMED, now=1.0)
        self.assertEqual(self.modes.mode, Mode.CHAOS)
        self.assertEqual(change.mode, Mode.CHAOS)
        self.assertEqual(change.previous, Mode.FORMED)
        self.assertEqual(change.timestamp, 1.0)

    def test_click_and_fist_go_formed(self):
        for verdict in (Verdict.CLICK, Verdict.FIST_CONFIRMED):
            self.modes.sync(Mode.CHAOS)
            change = self.modes.apply(verdict)
            self.assertEqual(change.mode, Mode.FORMED)

    def test_no_self_transition(self):
        self.assertIsNone(self.modes.apply(Verdict.CLICK))
        self.modes.apply(Verdict.OPEN_CONFIRMED)
        self.assertIsNone(self.modes.apply(Verdict.OPEN_CONFIRMED))

    def test_unconfirmed_verdicts_never_move(self):
        for verdict in (Verdict.AIMING, Verdict.COOLDOWN, Verdict.OPEN_PENDING,
                        Verdict.FIST_PENDING, Verdict.TRACKING, Verdict.NO_HAND):
            self.assertIsNone(self.modes.apply(verdict))
        self.assertEqual(self.modes.mode, Mode.FORMED)

    def test_sync_is_silent(self):
        self.modes.sync(Mode.CHAOS)
        self.assertEqual(self.modes.mode, Mode.CHAOS)
        self.assertIsNone(self.modes.apply(Verdict.OPEN_CONFIRMED))

    def test_toggle(self):
        change = self.modes.toggle(now=2.0)
        self.assertEqual(change.mode, Mode.CHAOS)
        change = self.modes.toggle(now=3.0)
        self.assertEqual(change.mode, Mode.FORMED)
        self.assertEqual(change.previous, Mode.CHAOS)

if __name__ == '__main__':
    unittest.main()
