"""
TreeGesture Kinematics (The Feature Extractor).
Turns a (21, 3) landmark array into a fixed geometric FeatureVector.
Only x/y are used: z from a monocular model is too noisy to trust.
"""
import numpy as np
from typing import Optional

from treegesture.config import CONFIG
from treegesture.core.types import FeatureVector, Point2D
from treegesture.hand_utils import (
    FINGERS, INDEX_TIP, PALM_POINTS, THUMB_TIP, WRIST,
)

def _dist(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))

class FeatureExtractor:
    def __init__(self, config: Optional[dict] = None):
        cfg = {**CONFIG, **(config or {})}
        self.thumb_ratio = cfg["THUMB_EXTENSION_RATIO"]
        self.finger_ratio = cfg["FINGER_EXTENSION_RATIO"]

    def is_extended(self, lms: np.ndarray, tip_idx: int, base_idx: int, multiplier: float) -> bool:
        """
        A finger is out when its tip is much further from the wrist than its knuckle.
        """
        wrist = lms[WRIST]
        return _dist(lms[tip_idx], wrist) > multiplier * _dist(lms[base_idx], wrist)

    def palm_centroid(self, lms: np.ndarray) -> Point2D:
        x, y = lms[list(PALM_POINTS), :2].mean(axis=0)
        return Point2D(float(x), float(y))

    def pinch_distance(self, lms: np.ndarray) -> float:
        """Euclidean distance between Thumb(4) and Index(8), in normalized image units."""
        return _dist(lms[THUMB_TIP], lms[INDEX_TIP])

    def pinch_midpoint(self, lms: np.ndarray) -> Point2D:
        x, y = (lms[THUMB_TIP, :2] + lms[INDEX_TIP, :2]) / 2.0
        return Point2D(float(x), float(y))

    def extract(self, lms: Optional[np.ndarray]) -> Optional[FeatureVector]:
        """
        Returns None when there is no hand. Nothing downstream runs for that frame.
        """
        if lms is None:
            return None

        flags = {}
        for name, (tip, base) in FINGERS.items():
            ratio = self.thumb_ratio if name == "thumb" else self.finger_ratio
            flags[name] = self.is_extended(lms, tip, base, ratio)

        return FeatureVector(
            thumb_extended=flags["thumb"],
            index_extended=flags["index"],
            middle_extended=flags["middle"],
            ring_extended=flags["ring"],
            pinky_extended=flags["pinky"],
            pinch_distance=self.pinch_distance(lms),
            centroid=self.palm_centroid(lms),
            pinch_midpoint=self.pinch_midpoint(lms),
        )
