import time


def no_delay(dt):
    return None


class WallClockPacer:
    """Sleeps int(dt * 1000 * scale) ms per cycle so a run plays back at (scaled) real time."""
    def __init__(self, scale=1.0, sleep=time.sleep):
        if scale < 0:
            raise ValueError(f"pacing scale must be >= 0, got {scale}")
        self.scale = scale; self.sleep = sleep
    def __call__(self, dt):
        ms = int(dt * 1000 * self.scale)
        if ms > 0:
            self.sleep(ms / 1000.0)
