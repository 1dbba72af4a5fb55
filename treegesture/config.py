"""
TreeGesture Configuration Management.
=====================================

This module defines the tunable constants of the gesture core.
The parameters are organized into the same "Layer Cake" model as the pipeline:
geometry first, then timing, then the surrounding application.

! WARNING !
Changing Layer 1 changes what counts as a pinch/open hand immediately.
Changing Layer 2 changes how "sticky" the mode switch feels.
"""

from pathlib import Path
import logging
import os

# --- SYSTEM PATHS ---
FILE_PATH = Path(__file__).resolve()
PROJECT_ROOT = FILE_PATH.parent.parent

PATHS = {
    "LOG_DIR": PROJECT_ROOT / "logs",
}

# --- MASTER CONFIGURATION ---
CONFIG = {
    # =========================================================
    # LAYER 1: GEOMETRY (The Feature Extractor & Referee)
    # =========================================================
    "THUMB_EXTENSION_RATIO": 1.2,   # Thumb tip must reach 1.2x its base distance
    "FINGER_EXTENSION_RATIO": 1.5,  # Other tips must reach 1.5x their knuckle distance
    "PINCH_THRESHOLD": 0.08,        # Thumb-Index distance for a pinch (normalized)
    "AIMING_THRESHOLD": 0.25,       # Looser Thumb-Index distance for aiming
    "MIN_SUPPORT_FINGERS": 2,       # Middle/Ring/Pinky that must be out for pinch/aim
    "OPEN_MIN_FINGERS": 4,          # Extended fingers for OPEN
    "FIST_MAX_FINGERS": 1,          # Extended fingers allowed for FIST

    # =========================================================
    # LAYER 2: TIMING (The Debouncer)
    # =========================================================
    "CONFIDENCE_THRESHOLD": 5,      # Open/Fist counter must EXCEED this
    "PINCH_CONFIRM_FRAMES": 1,      # Pinch counter must EXCEED this (fast path)
    "PINCH_COOLDOWN": 0.3,          # Seconds after a pinch release where mode switches are ignored

    # =========================================================
    # LAYER 3: INPUT BOUNDARY
    # =========================================================
    "LANDMARK_COUNT": 21,
    "LANDMARK_RANGE_TOLERANCE": 0.05, # MediaPipe overshoots [0, 1] when a fingertip leaves the frame

    # =========================================================
    # LAYER 4: CAMERA & LANDMARK MODEL
    # =========================================================
    "CAMERA_INDEX": 0,              # OpenCV device ID
    "CAMERA_WIDTH": 320,
    "CAMERA_HEIGHT": 240,
    "TARGET_FPS": 30,               # Hardware limit for Camera
    "MAX_NUM_HANDS": 1,
    "MIN_DETECTION_CONFIDENCE": 0.5,
    "MIN_TRACKING_CONFIDENCE": 0.5,
    "MODEL_COMPLEXITY": 1,          # 0=Fast, 1=Balanced
    "MIRROR_PREVIEW": True,         # Selfie view

    # =========================================================
    # LAYER 5: DIAGNOSTICS
    # =========================================================
    "LOG_LEVEL": "INFO",
    "LOG_FORMAT": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    "LOG_TO_FILE": False,
}


def init_environment():
    """
    Creates necessary directories safely at runtime.
    """
    os.makedirs(PATHS["LOG_DIR"], exist_ok=True)


def init_logging(level=None):
    """
    Configures the root logger once for the application and the lab tools.
    """
    level = level or CONFIG["LOG_LEVEL"]
    handlers = [logging.StreamHandler()]
    if CONFIG["LOG_TO_FILE"]:
        init_environment()
        handlers.append(logging.FileHandler(PATHS["LOG_DIR"] / "treegesture.log"))

    logging.basicConfig(level=level, format=CONFIG["LOG_FORMAT"], handlers=handlers)
