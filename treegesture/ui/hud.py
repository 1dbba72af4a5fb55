"""
TreeGesture HUD.
Diagnostic preview: skeleton colored by interaction state, pointer, mode and status.
Draws in place on a BGR frame; purely cosmetic, never feeds the core.
"""

import cv2
import numpy as np
from typing import Optional

from treegesture.core.types import FrameReport, Mode
from treegesture.hand_utils import HAND_CONNECTIONS

class HUD:
    def __init__(self, mirror: bool = False):
        # Preview is flipped; landmarks and pointer are in camera space
        self.mirror = mirror

        # --- THEME COLORS (BGR) ---
        self.C_GOLD   = (55, 175, 212)   # Idle skeleton / UI
        self.C_CYAN   = (255, 255, 0)    # Aiming
        self.C_GREEN  = (0, 255, 0)      # Pinching
        self.C_JOINT  = (34, 139, 34)    # Idle joints
        self.C_WHITE  = (255, 255, 255)
        self.C_RED    = (68, 68, 255)    # CHAOS badge
        self.C_DARK   = (20, 20, 20)     # Backgrounds

    def _draw_glass_panel(self, img, x, y, w, h, color, alpha=0.6):
        """Draws a semi-transparent 'Glass' background."""
        if y+h > img.shape[0] or x+w > img.shape[1] or x < 0 or y < 0: return

        sub_img = img[y:y+h, x:x+w]
        rect = np.full(sub_img.shape, color, dtype=np.uint8)
        img[y:y+h, x:x+w] = cv2.addWeighted(sub_img, 1 - alpha, rect, alpha, 1.0)
        cv2.rectangle(img, (x, y), (x+w, y+h), color, 1)

    def to_pixel(self, x, y, w, h):
        if self.mirror:
            x = 1.0 - x
        return int(x * w), int(y * h)

    def skeleton_color(self, report: FrameReport):
        if report.event.pinching: return self.C_GREEN
        if report.event.aiming: return self.C_CYAN
        return self.C_GOLD

    def render(self, frame: np.ndarray, report: FrameReport, lms: Optional[np.ndarray]):
        h, w = frame.shape[:2]
        event = report.event

        # 1. SKELETON
        if lms is not None:
            color = self.skeleton_color(report)
            pts = [self.to_pixel(x, y, w, h) for x, y in lms[:, :2]]
            for a, b in HAND_CONNECTIONS:
                cv2.line(frame, pts[a], pts[b], color, 2)
            joint = self.C_WHITE if event.pinching else color if event.aiming else self.C_JOINT
            for p in pts:
                cv2.circle(frame, p, 3, joint, -1)

        # 2. POINTER
        if event.detected:
            center = self.to_pixel(event.pointer_x, event.pointer_y, w, h)
            radius = 6 if event.pinching else 4
            cv2.circle(frame, center, radius, self.C_GREEN if event.pinching else self.C_GOLD, -1)
            cv2.circle(frame, center, radius, self.C_WHITE, 1)

        # 3. STATUS BAR
        self._draw_glass_panel(frame, 5, 5, min(w - 10, 230), 40, self.C_DARK, 0.5)
        mode_color = self.C_RED if report.mode == Mode.CHAOS else self.C_GOLD
        cv2.putText(frame, report.mode.value, (12, 22),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, mode_color, 1)
        cv2.putText(frame, report.status, (12, 39),
                    cv2.FONT_HERSHEY_PLAIN, 0.9, self.C_GOLD, 1)

    def draw_fps(self, frame, fps):
        cv2.putText(frame, f"{int(fps)} FPS", (frame.shape[1]-70, 20),
                    cv2.FONT_HERSHEY_PLAIN, 1.0, self.C_GREEN, 1)
