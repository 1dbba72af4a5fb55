"""
TreeGesture Controller.
Acts as the central nervous system: one synchronous pass per landmark frame.

Lifecycle:
    created at session start -> process_frame() once per frame ->
    reset() on restart -> discarded at session end.
"""

import logging
import time
from typing import Any, Iterable, List, Optional

from treegesture.config import CONFIG
from treegesture.control.mode_controller import ModeController
from treegesture.core.interfaces import IInteractionListener
from treegesture.core.kinematics import FeatureExtractor
from treegesture.core.stabilizer import TemporalDebouncer
from treegesture.core.state_manager import DebounceState
from treegesture.core.types import (
    UNDETECTED, FrameReport, GestureCandidate, InteractionEvent, Mode, ModeChangeEvent, Verdict,
)
from treegesture.gesture_engine import GestureClassifier
from treegesture.hand_utils import to_landmark_array

logger = logging.getLogger(__name__)

class GestureSession:
    def __init__(self, config: Optional[dict] = None,
                 listeners: Optional[Iterable[IInteractionListener]] = None,
                 initial_mode: Mode = Mode.FORMED):
        self.config = {**CONFIG, **(config or {})}
        self.state = DebounceState()

        # Pipeline stages
        self.extractor = FeatureExtractor(self.config)
        self.classifier = GestureClassifier(self.config)
        self.debouncer = TemporalDebouncer(self.config)
        self.modes = ModeController(initial_mode)

        self.listeners: List[IInteractionListener] = list(listeners or [])
        self.last_report: Optional[FrameReport] = None
        self.last_candidate: Optional[GestureCandidate] = None
        self._busy = False

    @property
    def mode(self) -> Mode:
        return self.modes.mode

    def add_listener(self, listener: IInteractionListener):
        self.listeners.append(listener)

    def reset(self):
        """Session restart. Mode is kept: it belongs to the display, not the hand."""
        self.state = DebounceState()
        self.last_report = None
        self.last_candidate = None

    def sync_mode(self, mode: Mode):
        self.modes.sync(mode)

    def toggle_mode(self, now: Optional[float] = None) -> ModeChangeEvent:
        change = self.modes.toggle(now)
        self._notify_mode(change)
        return change

    def process_frame(self, landmarks: Any, now: Optional[float] = None) -> FrameReport:
        """
        Runs Boundary -> Features -> Referee -> Debouncer -> Mode for one frame.

        Args:
            landmarks: 21 (x, y, z) points or None for "no hand".
            now: Frame timestamp in seconds. Defaults to the wall clock.

        Raises:
            LandmarkError: the frame violates the 21-point contract.
            RuntimeError: called again while a frame is still being processed.
        """
        if self._busy:
            raise RuntimeError("process_frame is not re-entrant; previous frame still in flight")
        self._busy = True
        try:
            now = time.time() if now is None else now
            report = self._run(landmarks, now)
        finally:
            self._busy = False

        self.last_report = report
        # Listeners run after the pass is complete; they may not re-enter mid-frame
        self._busy = True
        try:
            for listener in self.listeners:
                listener.on_interaction(report.event)
            if report.mode_change:
                self._notify_mode(report.mode_change)
        finally:
            self._busy = False
        return report

    def _run(self, landmarks: Any, now: float) -> FrameReport:
        # 1. Boundary (raises on malformed input)
        lms = to_landmark_array(landmarks, self.config)

        # 2. Features
        features = self.extractor.extract(lms)
        if features is None:
            self.last_candidate = None
            verdict = self.debouncer.lost(self.state)
            return FrameReport(event=UNDETECTED, mode=self.mode, verdict=verdict)

        # 3. Referee
        candidate = self.classifier.classify(features)
        pointer = self.classifier.pointer_for(features, candidate)

        # 4. Debounce
        verdict = self.debouncer.update(self.state, candidate, now)
        if candidate != self.last_candidate:
            logger.debug("Candidate %s -> %s (%r)", self.last_candidate, candidate, self.state)
        self.last_candidate = candidate

        # 5. Mode
        change = self.modes.apply(verdict, now)

        event = InteractionEvent(
            pointer_x=pointer.x,
            pointer_y=pointer.y,
            detected=True,
            pinching=verdict is Verdict.CLICK,
            aiming=candidate.is_aim_pose,
        )
        return FrameReport(event=event, mode=self.mode, verdict=verdict, mode_change=change)

    def _notify_mode(self, change: Optional[ModeChangeEvent]):
        if change is None:
            return
        for listener in self.listeners:
            listener.on_mode_change(change)
