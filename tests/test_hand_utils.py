import unittest
import numpy as np

from treegesture.hand_utils import HAND_CONNECTIONS, LandmarkError, landmarks_or_none, to_landmark_array
from hand_factory import open_hand

# Mock for MediaPipe Landmark structure
class MockLandmark:
    def __init__(self, x, y, z=0.0):
        self.x = x
        self.y = y
        self.z = z

class MockLandmarkList:
    def __init__(self, points):
        self.landmark = [MockLandmark(*p) for p in points]

class TestLandmarkBoundary(unittest.TestCase):
    def test_tuples_become_array(self):
        arr = to_landmark_array(open_hand())
        self.assertEqual(arr.shape, (21, 3))
        self.assertAlmostEqual(arr[0, 0], 0.5)
        self.assertAlmostEqual(arr[0, 1], 0.8)

    def test_mediapipe_style_objects(self):
        """Both a NormalizedLandmarkList and a bare list of landmarks are accepted."""
        points = open_hand()
        from_list = to_landmark_array(MockLandmarkList(points))
        from_objs = to_landmark_array([MockLandmark(*p) for p in points])
        np.testing.assert_allclose(from_list, np.array(points))
        np.testing.assert_allclose(from_objs, np.array(points))

    def test_xy_rows_get_zero_depth(self):
        arr = to_landmark_array([(x, y) for x, y, _ in open_hand()])
        self.assertEqual(arr.shape, (21, 3))
        self.assertTrue(np.all(arr[:, 2] == 0.0))

    def test_no_hand_is_not_an_error(self):
        self.assertIsNone(to_landmark_array(None))
        self.assertIsNone(to_landmark_array([]))
        self.assertIsNone(to_landmark_array(MockLandmarkList([])))

    def test_wrong_count_rejected(self):
        with self.assertRaises(LandmarkError):
            to_landmark_array(open_hand()[:20])

    def test_out_of_range_rejected(self):
        pts = open_hand()
        pts[8] = (1.2, 0.5, 0.0)
        with self.assertRaises(LandmarkError):
            to_landmark_array(pts)

    def test_tolerance_allows_slight_overshoot(self):
        pts = open_hand()
        pts[8] = (1.01, 0.5, 0.0)
        config = {"LANDMARK_COUNT": 21, "LANDMARK_RANGE_TOLERANCE": 0.05}
        arr = to_landmark_array(pts, config)
        self.assertAlmostEqual(arr[8, 0], 1.01)

    def test_default_tolerance_accepts_fingertip_overshoot(self):
        pts = open_hand()
        pts[20] = (1.003, pts[20][1], 0.0)
        arr = to_landmark_array(pts)
        self.assertAlmostEqual(arr[20, 0], 1.003)

    def test_dropped_frame_becomes_no_hand(self):
        pts = open_hand()
        pts[20] = (1.2, pts[20][1], 0.0)
        with self.assertLogs("treegesture.hand_utils", level="WARNING") as logs:
            self.assertIsNone(landmarks_or_none(pts))
        self.assertIn("Dropped frame", logs.output[0])

    def test_good_frame_passes_through(self):
        self.assertEqual(landmarks_or_none(open_hand()).shape, (21, 3))

    def test_nan_rejected(self):
        pts = open_hand()
        pts[3] = (float("nan"), 0.5, 0.0)
        with self.assertRaises(LandmarkError):
            to_landmark_array(pts)

    def test_bad_row_width_rejected(self):
        with self.assertRaises(LandmarkError):
            to_landmark_array([(0.5,)] * 21)

    def test_landmark_error_is_value_error(self):
        self.assertTrue(issubclass(LandmarkError, ValueError))

    def test_connections_cover_every_joint(self):
        joints = {i for edge in HAND_CONNECTIONS for i in edge}
        self.assertEqual(joints, set(range(21)))

if __name__ == '__main__':
    unittest.main()
