"""
TreeGesture Cognition Engine (The Referee).
==========================================

Maps a FeatureVector to exactly one GestureCandidate using fixed geometric
thresholds. There is no model and no memory here: the same features always
give the same candidate.

The rules form a single ordered list, evaluated top-down:

1. **PINCH:** thumb and index touching, support fingers out.
2. **AIM:** thumb and index close (looser), support fingers out.
3. **OPEN:** four or more fingers out.
4. **FIST:** at most one finger out.
5. **NEUTRAL:** anything else (2-3 fingers, no pinch).

Because PINCH is tested before AIM and AIM before OPEN, a pinching hand with
all fingers out is a PINCH, never an OPEN.
"""

from typing import Optional

from treegesture.config import CONFIG
from treegesture.core.types import FeatureVector, GestureCandidate, Point2D

class GestureClassifier:
    """
    The Referee.

    Attributes:
        pinch_threshold (float): Thumb-Index distance under which the hand pinches.
        aiming_threshold (float): Looser distance under which the hand aims.
    """
    def __init__(self, config: Optional[dict] = None):
        cfg = {**CONFIG, **(config or {})}
        self.pinch_threshold = cfg["PINCH_THRESHOLD"]
        self.aiming_threshold = cfg["AIMING_THRESHOLD"]
        self.min_support = cfg["MIN_SUPPORT_FINGERS"]
        self.open_min = cfg["OPEN_MIN_FINGERS"]
        self.fist_max = cfg["FIST_MAX_FINGERS"]

    def classify(self, features: FeatureVector) -> GestureCandidate:
        supported = features.other_extended_count >= self.min_support
        total = features.total_extended_count

        if supported and features.pinch_distance < self.pinch_threshold:
            return GestureCandidate.PINCH
        if supported and features.pinch_distance < self.aiming_threshold:
            return GestureCandidate.AIM
        if total >= self.open_min:
            return GestureCandidate.OPEN
        if total <= self.fist_max:
            return GestureCandidate.FIST
        return GestureCandidate.NEUTRAL

    @staticmethod
    def pointer_for(features: FeatureVector, candidate: GestureCandidate) -> Point2D:
        """
        Palm center normally; the Thumb/Index midpoint while pinching or aiming,
        which gives the user fingertip precision.
        """
        if candidate.is_aim_pose:
            return features.pinch_midpoint
        return features.centroid
