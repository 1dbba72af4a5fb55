"""
TreeGesture Types.
Central definition of Data Contracts to prevent circular imports.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import time

# --- GEOMETRY TYPES ---
@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

CENTER = Point2D(0.5, 0.5)

# --- GESTURE TYPES ---
class GestureCandidate(Enum):
    """Instantaneous per-frame classification. Exactly one per frame."""
    NEUTRAL = "NEUTRAL"
    FIST = "FIST"
    OPEN = "OPEN"
    PINCH = "PINCH"
    AIM = "AIM"

    @property
    def is_aim_pose(self) -> bool:
        """Every PINCH frame is also an AIM frame at the feature level."""
        return self in (GestureCandidate.PINCH, GestureCandidate.AIM)

class Mode(Enum):
    FORMED = "FORMED"
    CHAOS = "CHAOS"

class Verdict(Enum):
    """Outcome of the debouncer for one frame, in priority order."""
    NO_HAND = "No hand detected"
    CLICK = "ACTION: CLICK"
    AIMING = "Aiming (Locked)"
    COOLDOWN = "..."
    OPEN_PENDING = "Detected: OPEN"
    OPEN_CONFIRMED = "Detected: OPEN (Chaos)"
    FIST_PENDING = "Detected: FIST"
    FIST_CONFIRMED = "Detected: FIST (Formed)"
    TRACKING = "Tracking..."

    @property
    def status(self) -> str:
        return self.value

@dataclass(frozen=True)
class FeatureVector:
    thumb_extended: bool
    index_extended: bool
    middle_extended: bool
    ring_extended: bool
    pinky_extended: bool
    pinch_distance: float
    centroid: Point2D
    pinch_midpoint: Point2D

    @property
    def other_extended_count(self) -> int:
        """Middle, Ring and Pinky only (the 'support' fingers of a pinch)."""
        return sum((self.middle_extended, self.ring_extended, self.pinky_extended))

    @property
    def total_extended_count(self) -> int:
        return sum((self.thumb_extended, self.index_extended, self.middle_extended,
                    self.ring_extended, self.pinky_extended))

# --- OUTPUT CONTRACTS ---
@dataclass(frozen=True)
class InteractionEvent:
    pointer_x: float = 0.5
    pointer_y: float = 0.5
    detected: bool = False
    pinching: bool = False  # Confirmed pinch only
    aiming: bool = False    # Instantaneous aim pose

    @property
    def is_locked(self) -> bool:
        """Collaborators freeze camera drift while the user is targeting."""
        return self.detected and (self.pinching or self.aiming)

UNDETECTED = InteractionEvent(pointer_x=CENTER.x, pointer_y=CENTER.y)

@dataclass(frozen=True)
class ModeChangeEvent:
    mode: Mode
    previous: Mode
    timestamp: float = field(default_factory=time.time)

@dataclass(frozen=True)
class FrameReport:
    event: InteractionEvent
    mode: Mode
    verdict: Verdict
    mode_change: Optional[ModeChangeEvent] = None

    @property
    def status(self) -> str:
        """Diagnostics only. Not authoritative."""
        return self.verdict.status
