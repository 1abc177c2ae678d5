import time
from typing import Callable


class FpsCounter:
    """Frames counted per wall-clock second. `fps` holds the last full window."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.window_start = clock()
        self.frames = 0
        self.fps = 0

    def tick(self):
        self.frames += 1
        now = self._clock()
        if now - self.window_start >= 1.0:
            self.fps = self.frames
            self.frames = 0
            self.window_start = now

    def __repr__(self):
        return f"FpsCounter(fps={self.fps}, frames={self.frames})"
