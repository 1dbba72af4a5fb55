"""
TreeGesture - Main Entry Point.
==============================

Runnable adapter around the gesture core:
1. Perception: threaded OpenCV camera + MediaPipe Hands (one hand).
2. Cognition: GestureSession turns landmarks into InteractionEvents.
3. Feedback: HUD preview window.

Usage:
    $ python -m treegesture.main
    ESC = quit, V = toggle visuals, M = toggle mode by hand
"""
import logging
import threading
import time
from typing import Optional, Tuple

import cv2
import mediapipe as mp
import numpy as np

from treegesture.config import CONFIG, init_logging
from treegesture.control.controller import GestureSession
from treegesture.core.interfaces import IInteractionListener
from treegesture.core.types import InteractionEvent, ModeChangeEvent
from treegesture.hand_utils import landmarks_or_none
from treegesture.ui.hud import HUD

logger = logging.getLogger(__name__)

class ThreadedCamera:
    """
    Camera reader on a daemon thread so the main loop always gets the
    freshest frame instead of a stale buffered one.
    """
    def __init__(self, src: int = 0):
        self.cap = cv2.VideoCapture(src)
        if not self.cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {src}")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, CONFIG["CAMERA_WIDTH"])
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CONFIG["CAMERA_HEIGHT"])
        self.cap.set(cv2.CAP_PROP_FPS, CONFIG["TARGET_FPS"])

        self.ret, self.frame = self.cap.read()
        self.running = True
        self.lock = threading.Lock()

        threading.Thread(target=self._reader, daemon=True).start()

    def _reader(self):
        """Background thread loop for frame grabbing."""
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                logger.error("Camera stream ended")
                self.running = False
                break
            with self.lock:
                self.ret, self.frame = ret, frame

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        """Returns the most recent frame. Non-blocking."""
        with self.lock:
            return self.ret, self.frame.copy() if self.frame is not None else None

    def release(self):
        self.running = False
        self.cap.release()

class LoggingListener(IInteractionListener):
    """Stand-in for the 3D scene: just reports what it would react to."""
    def __init__(self):
        self.was_pinching = False

    def on_interaction(self, event: InteractionEvent) -> None:
        # Pinch release is the "select" edge for the scene
        if self.was_pinching and not event.pinching:
            logger.info("Select at (%.2f, %.2f)", event.pointer_x, event.pointer_y)
        self.was_pinching = event.pinching

    def on_mode_change(self, event: ModeChangeEvent) -> None:
        logger.info("Scene -> %s", event.mode.value)

def main():
    init_logging()
    logger.info("TREEGESTURE: ONLINE (ESC quit, V visuals, M toggle mode)")

    session = GestureSession(listeners=[LoggingListener()])
    hud = HUD(mirror=CONFIG["MIRROR_PREVIEW"])
    window_name = "TreeGesture"

    try:
        cam = ThreadedCamera(CONFIG["CAMERA_INDEX"])
    except RuntimeError:
        logger.exception("Camera unavailable")
        raise

    mp_hands = mp.solutions.hands
    hands = mp_hands.Hands(
        max_num_hands=CONFIG["MAX_NUM_HANDS"],
        min_detection_confidence=CONFIG["MIN_DETECTION_CONFIDENCE"],
        min_tracking_confidence=CONFIG["MIN_TRACKING_CONFIDENCE"],
        model_complexity=CONFIG["MODEL_COMPLEXITY"],
    )

    prev_time = 0.0
    show_visuals = True

    try:
        while cam.running:
            ret, frame = cam.read()
            if not ret or frame is None: continue

            # Landmarks stay in camera space; only the preview is mirrored
            results = hands.process(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
            if CONFIG["MIRROR_PREVIEW"]:
                frame = cv2.flip(frame, 1)

            raw = results.multi_hand_landmarks[0] if results.multi_hand_landmarks else None
            lms = landmarks_or_none(raw)
            report = session.process_frame(lms)

            if show_visuals:
                hud.render(frame, report, lms)

            curr = time.time()
            fps = 1 / (curr - prev_time) if (curr - prev_time) > 0 else 0
            prev_time = curr
            hud.draw_fps(frame, fps)

            cv2.imshow(window_name, frame)

            k = cv2.waitKey(1)
            if k == 27: break
            elif k == ord('v'): show_visuals = not show_visuals
            elif k == ord('m'): session.toggle_mode()
    finally:
        hands.close()
        cam.release()
        cv2.destroyAllWindows()
        logger.info("TREEGESTURE: OFFLINE")

if __name__ == "__main__":
    main()
