"""
TreeGesture Landmark Boundary.
==============================

Everything that comes out of the landmark model passes through here first.
The core assumes a well-formed 21-point contract; this module is where that
contract is enforced, so a bad frame is rejected before any geometry runs.

Accepted inputs:
1. A MediaPipe NormalizedLandmarkList (has `.landmark`).
2. A sequence of objects with `.x`, `.y` (and optionally `.z`).
3. A sequence of (x, y) or (x, y, z) rows (lists, tuples, NumPy).
"""

import logging
import numpy as np
from typing import Any, Optional

from treegesture.config import CONFIG

logger = logging.getLogger(__name__)

# --- ANATOMICAL INDEX SCHEME ---
WRIST = 0
THUMB_BASE, THUMB_TIP = 2, 4
INDEX_BASE, INDEX_TIP = 5, 8
MIDDLE_BASE, MIDDLE_TIP = 9, 12
RING_BASE, RING_TIP = 13, 16
PINKY_BASE, PINKY_TIP = 17, 20

# Finger -> (tip, base)
FINGERS = {
    "thumb": (THUMB_TIP, THUMB_BASE),
    "index": (INDEX_TIP, INDEX_BASE),
    "middle": (MIDDLE_TIP, MIDDLE_BASE),
    "ring": (RING_TIP, RING_BASE),
    "pinky": (PINKY_TIP, PINKY_BASE),
}

# Wrist + the four knuckles: a palm center that ignores finger pose
PALM_POINTS = (WRIST, INDEX_BASE, MIDDLE_BASE, RING_BASE, PINKY_BASE)

HAND_CONNECTIONS = (
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (0, 9), (9, 10), (10, 11), (11, 12),
    (0, 13), (13, 14), (14, 15), (15, 16),
    (0, 17), (17, 18), (18, 19), (19, 20),
    (5, 9), (9, 13), (13, 17),
)


class LandmarkError(ValueError):
    """Raised when the landmark model hands us something that is not a hand."""


def to_landmark_array(landmark_list: Any, config: Optional[dict] = None) -> Optional[np.ndarray]:
    """
    Converts one detected hand into a (21, 3) float array.

    Returns None for the "no hand" signal (None or empty input).
    Raises LandmarkError for wrong counts, wrong shapes, non-finite values
    or coordinates outside the normalized image.
    """
    cfg = {**CONFIG, **(config or {})}
    if landmark_list is None:
        return None

    # MediaPipe NormalizedLandmarkList -> its repeated field
    if hasattr(landmark_list, "landmark"):
        landmark_list = landmark_list.landmark

    if len(landmark_list) == 0:
        return None

    expected = cfg["LANDMARK_COUNT"]
    if len(landmark_list) != expected:
        raise LandmarkError(f"Expected {expected} landmarks, got {len(landmark_list)}")

    # 1. Data Structuring
    if hasattr(landmark_list[0], "x"):
        coords = np.array([[lm.x, lm.y, getattr(lm, "z", 0.0)] for lm in landmark_list], dtype=float)
    else:
        try:
            coords = np.asarray(landmark_list, dtype=float)
        except (TypeError, ValueError) as e:
            raise LandmarkError(f"Landmarks are not numeric: {e}") from e
        if coords.ndim != 2 or coords.shape[1] not in (2, 3):
            raise LandmarkError(f"Landmark rows must be (x, y) or (x, y, z), got shape {coords.shape}")
        if coords.shape[1] == 2:
            coords = np.hstack([coords, np.zeros((coords.shape[0], 1))])

    # 2. Sanity
    if not np.all(np.isfinite(coords)):
        raise LandmarkError("Landmarks contain NaN or infinite values")

    tol = cfg["LANDMARK_RANGE_TOLERANCE"]
    xy = coords[:, :2]
    if np.any(xy < -tol) or np.any(xy > 1.0 + tol):
        raise LandmarkError("Landmark coordinates fall outside the normalized image")

    return coords


def landmarks_or_none(landmark_list: Any, config: Optional[dict] = None) -> Optional[np.ndarray]:
    """
    Live-loop variant of to_landmark_array: a rejected frame is logged and
    becomes the "no hand" signal, so the session still emits an event for it.
    """
    try:
        return to_landmark_array(landmark_list, config)
    except LandmarkError as e:
        logger.warning("Dropped frame: %s", e)
        return None
