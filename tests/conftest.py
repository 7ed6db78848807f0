import threading
import time

import numpy as np
import pytest

from voicera.core.state import app_state
from voicera.services import camera_service
from voicera.services.face_service import Box, Detection


class FakeCapture:
    """Stands in for cv2.VideoCapture"""

    def __init__(self, opened=True, frame_count=None, shape=(48, 64, 3), bgr=(0, 0, 255)):
        self.opened = opened
        self.frame_count = frame_count
        self.shape = shape
        self.bgr = bgr
        self.released = False
        self.reads = 0
        self.props = {}

    def isOpened(self):
        return self.opened and not self.released

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def read(self):
        if self.released or (self.frame_count is not None and self.reads >= self.frame_count):
            return False, None
        self.reads += 1
        frame = np.zeros(self.shape, dtype=np.uint8)
        frame[:] = self.bgr
        return True, frame

    def release(self):
        self.released = True


@pytest.fixture(autouse=True)
def reset_state():
    app_state.reset()
    yield
    app_state.reset()


@pytest.fixture
def fake_camera(monkeypatch):
    cam = FakeCapture()
    monkeypatch.setattr(camera_service.cv2, "VideoCapture", lambda index: cam)
    return cam


@pytest.fixture
def denied_camera(monkeypatch):
    cam = FakeCapture(opened=False)
    monkeypatch.setattr(camera_service.cv2, "VideoCapture", lambda index: cam)
    return cam


@pytest.fixture
def detection():
    return Detection(
        box=Box(40, 60, 50, 50),
        score=0.93,
        landmarks=[(55.0, 75.0), (75.0, 75.0), (65.0, 90.0)],
        expressions={'happy': 0.82, 'neutral': 0.15, 'sad': 0.03},
        age=31.4,
        gender='male',
        gender_probability=0.97,
    )


class FakeClock:
    def __init__(self, times):
        self._times = iter(times)

    def __call__(self):
        return next(self._times)


@pytest.fixture
def fake_clock():
    return FakeClock


class SlowCapture(FakeCapture):
    """Capture whose read() blocks long enough for another thread to interleave"""

    def __init__(self, delay=0.2, **kwargs):
        super().__init__(**kwargs)
        self.delay = delay
        self.reading = threading.Event()
        self.in_read = False
        self.released_during_read = False

    def read(self):
        self.in_read = True
        self.reading.set()
        time.sleep(self.delay)
        try:
            return super().read()
        finally:
            self.in_read = False

    def release(self):
        if self.in_read:
            self.released_during_read = True
        super().release()


@pytest.fixture
def slow_camera(monkeypatch):
    cam = SlowCapture()
    monkeypatch.setattr(camera_service.cv2, "VideoCapture", lambda index: cam)
    return cam
