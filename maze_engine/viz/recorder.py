import logging
import os
from datetime import datetime
from typing import Optional, Tuple

import pygame
import cv2
import numpy as np

logger = logging.getLogger(__name__)

class VideoRecorder:
    """
    Writes rendered generation frames to an mp4.

    The first captured frame fixes the video size; later frames from a
    resized window are scaled to it, since cv2.VideoWriter drops frames
    whose size differs.
    """

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size: Optional[Tuple[int, int]] = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = self.default_filename()

    @staticmethod
    def default_filename(prefix="maze_gen", directory="recordings"):
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        fname = f"{prefix}_{ts}.mp4"
        if os.path.isdir(directory):
            return os.path.join(directory, fname)
        return fname

    @staticmethod
    def to_bgr(rgb: np.ndarray) -> np.ndarray:
        # surfarray is (width, height, 3) RGB; OpenCV wants (height, width, 3) BGR
        frame = np.ascontiguousarray(np.transpose(rgb, (1, 0, 2)))
        return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

    def fit_frame(self, frame: np.ndarray) -> np.ndarray:
        height, width = frame.shape[:2]
        if (width, height) == self.frame_size:
            return frame
        return cv2.resize(frame, self.frame_size, interpolation=cv2.INTER_AREA)

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        frame = self.to_bgr(pygame.surfarray.array3d(surface))

        if self.writer is None:
            self.frame_size = (frame.shape[1], frame.shape[0])
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.debug("Opened video writer %s at %dx%d", self.output_file, *self.frame_size)

        self.writer.write(self.fit_frame(frame))
        self.frame_count += 1

    def stop(self) -> Optional[str]:
        """Closes the writer; returns the video path if any frame was written."""
        if self.writer is None:
            return None
        self.writer.release()
        self.writer = None
        logger.debug("Closed video writer after %d frames", self.frame_count)
        return self.output_file
