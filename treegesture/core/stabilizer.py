"""
TreeGesture Stabilization Layer (The Debouncer).
Turns noisy per-frame candidates into confirmed, hysteresis-stable verdicts.

Counters are plain consecutive-frame counts: a frame without the candidate
resets its counter to zero (no decay, no sliding window).
"""

import logging
from typing import Optional

from treegesture.config import CONFIG
from treegesture.core.state_manager import DebounceState
from treegesture.core.types import GestureCandidate, Verdict

logger = logging.getLogger(__name__)

class TemporalDebouncer:
    def __init__(self, config: Optional[dict] = None):
        cfg = {**CONFIG, **(config or {})}
        self.confidence_threshold = cfg["CONFIDENCE_THRESHOLD"]
        self.pinch_confirm_frames = cfg["PINCH_CONFIRM_FRAMES"]
        self.cooldown = cfg["PINCH_COOLDOWN"]

    def in_cooldown(self, state: DebounceState, now: float) -> bool:
        if state.last_pinch_release_at is None:
            return False
        return (now - state.last_pinch_release_at) < self.cooldown

    def _track_pinch(self, state: DebounceState, candidate: GestureCandidate, now: float) -> bool:
        """Updates the pinch counter and returns True if the pinch is confirmed."""
        if candidate is GestureCandidate.PINCH:
            state.pinch_frames += 1
        else:
            # A one-frame flicker must not arm the cooldown
            if state.pinch_frames > 1:
                state.last_pinch_release_at = now
                logger.debug("Pinch released after %d frames, cooldown armed", state.pinch_frames)
            state.pinch_frames = 0
        return state.pinch_frames > self.pinch_confirm_frames

    def update(self, state: DebounceState, candidate: GestureCandidate, now: float) -> Verdict:
        """
        Feeds one frame's candidate. Mutates `state`.

        Priority (highest first):
        confirmed pinch > aim pose > cooldown > open/fist hysteresis > neutral.
        """
        pinch_confirmed = self._track_pinch(state, candidate, now)

        # 1. Select
        if pinch_confirmed:
            state.reset_mode_counters()
            return Verdict.CLICK

        # 2. Aim (includes the first, unconfirmed pinch frame)
        if candidate.is_aim_pose:
            state.reset_mode_counters()
            return Verdict.AIMING

        # 3. Cooldown: mode switches are ignored, counters stay at zero
        if self.in_cooldown(state, now):
            state.reset_mode_counters()
            return Verdict.COOLDOWN

        # 4. Mode switch candidates
        if candidate is GestureCandidate.OPEN:
            state.open_frames += 1
            state.closed_frames = 0
            if state.open_frames > self.confidence_threshold:
                return Verdict.OPEN_CONFIRMED
            return Verdict.OPEN_PENDING

        if candidate is GestureCandidate.FIST:
            state.closed_frames += 1
            state.open_frames = 0
            if state.closed_frames > self.confidence_threshold:
                return Verdict.FIST_CONFIRMED
            return Verdict.FIST_PENDING

        # 5. Neutral
        state.reset_mode_counters()
        return Verdict.TRACKING

    def lost(self, state: DebounceState) -> Verdict:
        """No hand this frame: every counter starts over."""
        state.reset_counters()
        return Verdict.NO_HAND
