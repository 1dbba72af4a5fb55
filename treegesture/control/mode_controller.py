"""
TreeGesture Mode Controller.
Two-state machine (FORMED <-> CHAOS) driven only by confirmed verdicts.
"""

import logging
import time
from typing import Optional

from treegesture.core.types import Mode, ModeChangeEvent, Verdict

logger = logging.getLogger(__name__)

# Verdict -> target mode. Anything not listed never moves the machine.
TRANSITIONS = {
    Verdict.CLICK: Mode.FORMED,
    Verdict.OPEN_CONFIRMED: Mode.CHAOS,
    Verdict.FIST_CONFIRMED: Mode.FORMED,
}

class ModeController:
    def __init__(self, initial: Mode = Mode.FORMED):
        self.mode = initial

    def _set(self, target: Mode, now: Optional[float]) -> Optional[ModeChangeEvent]:
        if target == self.mode:
            return None
        change = ModeChangeEvent(mode=target, previous=self.mode,
                                 timestamp=time.time() if now is None else now)
        self.mode = target
        logger.info("Mode %s -> %s", change.previous.value, change.mode.value)
        return change

    def apply(self, verdict: Verdict, now: Optional[float] = None) -> Optional[ModeChangeEvent]:
        """Returns a change event only on an actual transition."""
        target = TRANSITIONS.get(verdict)
        if target is None:
            return None
        return self._set(target, now)

    def sync(self, mode: Mode):
        """The UI changed the mode on its own (e.g. a button). No event."""
        self.mode = mode

    def toggle(self, now: Optional[float] = None) -> ModeChangeEvent:
        target = Mode.CHAOS if self.mode == Mode.FORMED else Mode.FORMED
        return self._set(target, now)
