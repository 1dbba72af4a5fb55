"""
TreeGesture State Management.
The only memory in the pipeline. Owned by the session, reset on hand loss.
"""
from typing import Optional

class DebounceState:
    def __init__(self):
        # --- FRAME COUNTERS ---
        self.open_frames = 0
        self.closed_frames = 0
        self.pinch_frames = 0

        # --- TIMERS ---
        # None = no pinch released yet this session
        self.last_pinch_release_at: Optional[float] = None

    def reset_mode_counters(self):
        self.open_frames = 0
        self.closed_frames = 0

    def reset_counters(self):
        """Hand left the frame. The cooldown stamp is kept."""
        self.reset_mode_counters()
        self.pinch_frames = 0

    def __repr__(self):
        return (f"DebounceState(open={self.open_frames}, closed={self.closed_frames}, "
                f"pinch={self.pinch_frames}, release_at={self.last_pinch_release_at})")
