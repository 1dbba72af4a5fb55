import unittest

from treegesture.core.stabilizer import TemporalDebouncer
from treegesture.core.state_manager import DebounceState
from treegesture.core.types import GestureCandidate, Verdict

G = GestureCandidate
FRAME = 1.0 / 30

class TestTemporalDebouncer(unittest.TestCase):
    def setUp(self):
        self.debouncer = TemporalDebouncer()
        self.state = DebounceState()
        self.t = 100.0

    def feed(self, candidate, n=1):
        verdicts = []
        for _ in range(n):
            verdicts.append(self.debouncer.update(self.state, candidate, self.t))
            self.t += FRAME
        return verdicts

    def test_open_needs_six_frames(self):
        verdicts = self.feed(G.OPEN, 6)
        self.assertEqual(verdicts[:5], [Verdict.OPEN_PENDING] * 5)
        self.assertEqual(verdicts[5], Verdict.OPEN_CONFIRMED)
        self.assertEqual(self.state.open_frames, 6)

    def test_fist_needs_six_frames(self):
        verdicts = self.feed(G.FIST, 6)
        self.assertEqual(verdicts[4], Verdict.FIST_PENDING)
        self.assertEqual(verdicts[5], Verdict.FIST_CONFIRMED)

    def test_break_resets_counter(self):
        self.feed(G.OPEN, 4)
        self.assertEqual(self.feed(G.NEUTRAL), [Verdict.TRACKING])
        self.assertEqual(self.state.open_frames, 0)
        self.assertNotIn(Verdict.OPEN_CONFIRMED, self.feed(G.OPEN, 4))

    def test_open_and_fist_reset_each_other(self):
        self.feed(G.OPEN, 3)
        self.feed(G.FIST)
        self.assertEqual(self.state.open_frames, 0)
        self.assertEqual(self.state.closed_frames, 1)

    def test_pinch_confirms_on_second_frame(self):
        self.assertEqual(self.feed(G.PINCH, 2), [Verdict.AIMING, Verdict.CLICK])

    def test_aim_resets_mode_counters(self):
        self.feed(G.OPEN, 4)
        self.assertEqual(self.feed(G.AIM), [Verdict.AIMING])
        self.assertEqual(self.state.open_frames, 0)

    def test_single_pinch_frame_does_not_arm_cooldown(self):
        self.feed(G.PINCH)
        self.feed(G.OPEN)
        self.assertIsNone(self.state.last_pinch_release_at)

    def test_release_arms_cooldown(self):
        self.feed(G.PINCH, 2)
        release_time = self.t
        self.assertEqual(self.feed(G.OPEN), [Verdict.COOLDOWN])
        self.assertEqual(self.state.last_pinch_release_at, release_time)
        self.assertEqual(self.state.pinch_frames, 0)

    def test_cooldown_blocks_mode_switch_until_elapsed(self):
        self.feed(G.PINCH, 2)
        release_time = self.t
        # 8 frames = 267ms, still inside the 300ms window
        self.assertEqual(set(self.feed(G.OPEN, 8)), {Verdict.COOLDOWN})
        self.assertEqual(self.state.open_frames, 0)

        self.t = release_time + 0.31
        verdicts = self.feed(G.OPEN, 6)
        self.assertEqual(verdicts[-1], Verdict.OPEN_CONFIRMED)

    def test_cooldown_never_blocks_pinch_or_aim(self):
        self.feed(G.PINCH, 2)
        self.feed(G.NEUTRAL)
        self.assertEqual(self.feed(G.AIM), [Verdict.AIMING])
        self.assertEqual(self.feed(G.PINCH, 2), [Verdict.AIMING, Verdict.CLICK])

    def test_lost_resets_everything_but_cooldown(self):
        self.feed(G.PINCH, 2)
        self.feed(G.NEUTRAL)
        stamp = self.state.last_pinch_release_at
        self.feed(G.OPEN)
        self.assertEqual(self.debouncer.lost(self.state), Verdict.NO_HAND)
        self.assertEqual((self.state.open_frames, self.state.closed_frames, self.state.pinch_frames),
                         (0, 0, 0))
        self.assertEqual(self.state.last_pinch_release_at, stamp)

    def test_hand_loss_mid_pinch_does_not_arm_cooldown(self):
        self.feed(G.PINCH, 3)
        self.debouncer.lost(self.state)
        self.assertIsNone(self.state.last_pinch_release_at)

    def test_custom_confidence(self):
        debouncer = TemporalDebouncer({"CONFIDENCE_THRESHOLD": 1, "PINCH_CONFIRM_FRAMES": 1,
                                       "PINCH_COOLDOWN": 0.3})
        state = DebounceState()
        self.assertEqual(debouncer.update(state, G.FIST, 0.0), Verdict.FIST_PENDING)
        self.assertEqual(debouncer.update(state, G.FIST, 0.1), Verdict.FIST_CONFIRMED)

if __name__ == '__main__':
    unittest.main()
