import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from maze_engine.viz.recorder import VideoRecorder

class TestVideoRecorder(unittest.TestCase):
    def test_to_bgr(self):
        # surfarray layout: (width=3, height=2, RGB)
        rgb = np.zeros((3, 2, 3), dtype=np.uint8)
        rgb[2, 1] = (255, 0, 0)
        frame = VideoRecorder.to_bgr(rgb)
        self.assertEqual(frame.shape, (2, 3, 3))
        self.assertEqual(tuple(frame[1, 2]), (0, 0, 255))

    def test_fit_frame_scales_to_first_size(self):
        recorder = VideoRecorder()
        recorder.frame_size = (40, 30)
        same = np.zeros((30, 40, 3), dtype=np.uint8)
        self.assertIs(recorder.fit_frame(same), same)
        bigger = np.zeros((60, 80, 3), dtype=np.uint8)
        self.assertEqual(recorder.fit_frame(bigger).shape, (30, 40, 3))

    def test_inactive_records_nothing(self):
        recorder = VideoRecorder(active=False)
        self.assertIsNone(recorder.output_file)
        recorder.capture_frame(pygame.Surface((10, 10)))
        self.assertEqual(recorder.frame_count, 0)
        self.assertIsNone(recorder.stop())

    def test_default_filename(self):
        name = VideoRecorder.default_filename(prefix="gen_4x4", directory="no_such_dir_here")
        self.assertTrue(name.startswith("gen_4x4_"))
        self.assertTrue(name.endswith(".mp4"))

if __name__ == '__main__':
    unittest.main()
