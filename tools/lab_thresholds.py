import cv2
import mediapipe as mp
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from treegesture.config import CONFIG, init_logging
from treegesture.control.controller import GestureSession
from treegesture.hand_utils import landmarks_or_none
from treegesture.ui.hud import HUD

def run_lab():
    init_logging("DEBUG")
    print("🤏 THRESHOLD LAB (Referee + Debouncer)")
    print("   -> Tune pinch/aim distances and the confirmation window live.")
    print("   -> Press 'S' to print config values, ESC to quit.")

    cv2.namedWindow("Threshold Lab", cv2.WINDOW_NORMAL)
    cv2.resizeWindow("Threshold Lab", 960, 720)

    def nothing(x): pass

    # Distances in 1/100 of the normalized image
    cv2.createTrackbar("PINCH (x100)", "Threshold Lab", int(CONFIG["PINCH_THRESHOLD"]*100), 20, nothing)
    cv2.createTrackbar("AIM (x100)", "Threshold Lab", int(CONFIG["AIMING_THRESHOLD"]*100), 50, nothing)
    cv2.createTrackbar("CONFIDENCE FRAMES", "Threshold Lab", CONFIG["CONFIDENCE_THRESHOLD"], 15, nothing)
    cv2.createTrackbar("COOLDOWN (ms)", "Threshold Lab", int(CONFIG["PINCH_COOLDOWN"]*1000), 1500, nothing)

    cam = cv2.VideoCapture(CONFIG["CAMERA_INDEX"])
    mp_hands = mp.solutions.hands
    hands = mp_hands.Hands(max_num_hands=1, model_complexity=CONFIG["MODEL_COMPLEXITY"])
    hud = HUD(mirror=True)
    session = GestureSession()

    while True:
        # Live updates: the stages read their thresholds as plain attributes
        pinch = cv2.getTrackbarPos("PINCH (x100)", "Threshold Lab") / 100.0
        aim = max(pinch, cv2.getTrackbarPos("AIM (x100)", "Threshold Lab") / 100.0)
        frames = cv2.getTrackbarPos("CONFIDENCE FRAMES", "Threshold Lab")
        cooldown = cv2.getTrackbarPos("COOLDOWN (ms)", "Threshold Lab") / 1000.0

        session.classifier.pinch_threshold = pinch
        session.classifier.aiming_threshold = aim
        session.debouncer.confidence_threshold = frames
        session.debouncer.cooldown = cooldown

        ret, frame = cam.read()
        if not ret: break
        h, w, _ = frame.shape
        results = hands.process(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
        frame = cv2.flip(frame, 1)

        raw = results.multi_hand_landmarks[0] if results.multi_hand_landmarks else None
        lms = landmarks_or_none(raw)
        report = session.process_frame(lms)
        hud.render(frame, report, lms)

        if lms is not None:
            dist = session.extractor.pinch_distance(lms)
            cv2.rectangle(frame, (10, h-90), (300, h-10), (0,0,0), -1)
            cv2.putText(frame, f"PINCH DIST: {dist:.3f}", (20, h-65), 1, 1, (255,255,255), 1)
            cv2.putText(frame, f"OPEN/FIST: {session.state.open_frames}/{session.state.closed_frames}", (20, h-40), 1, 1, (255,255,255), 1)
            cv2.putText(frame, f"PINCH FRAMES: {session.state.pinch_frames}", (20, h-18), 1, 1, (255,255,255), 1)

        cv2.imshow("Threshold Lab", frame)
        k = cv2.waitKey(1)
        if k == 27: break
        if k == ord('s'):
            print("\n" + "="*40)
            print("💾 CONFIG VALUES (REFEREE / DEBOUNCER):")
            print(f'    "PINCH_THRESHOLD": {pinch:.2f},')
            print(f'    "AIMING_THRESHOLD": {aim:.2f},')
            print(f'    "CONFIDENCE_THRESHOLD": {frames},')
            print(f'    "PINCH_COOLDOWN": {cooldown:.2f},')
            print("="*40 + "\n")

    hands.close()
    cam.release()
    cv2.destroyAllWindows()

if __name__ == "__main__":
    run_lab()
