"""Shared test fixtures for molball."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def water_xyz_path():
    """Return the path to the water fixture, with header."""
    return FIXTURES_DIR / "water.xyz"


@pytest.fixture
def water_noheader_xyz_path():
    """Return the path to the water fixture without its header lines."""
    return FIXTURES_DIR / "water_noheader.xyz"


class FakeWindow:
    """Records the calls the frame loop makes, in order."""

    def __init__(self, n_frame=1, pressed=(), frame_time=0.1):
        self.n_frame_left = n_frame
        self.pressed = set(pressed)
        self.frame_time = frame_time
        self.calls = []
        self.camera_updates = []

    def should_close(self):
        self.calls.append(("should_close",))
        return self.n_frame_left <= 0

    def get_frame_time(self):
        self.calls.append(("get_frame_time",))
        return self.frame_time

    def is_key_down(self, key):
        return key in self.pressed

    def update_camera(self, pose, mode):
        self.calls.append(("update_camera", mode))
        self.camera_updates.append((pose, mode))

    def begin_drawing(self):
        self.calls.append(("begin_drawing",))

    def clear_background(self, color):
        self.calls.append(("clear_background", color))

    def begin_mode3d(self, pose):
        self.calls.append(("begin_mode3d", tuple(pose.position.tolist())))

    def draw_sphere(self, center, radius, color):
        self.calls.append(("draw_sphere", tuple(center), radius, color))

    def draw_cylinder(self, p1, p2, radius, color):
        self.calls.append(("draw_cylinder", tuple(p1), tuple(p2), radius, color))

    def end_mode3d(self):
        self.calls.append(("end_mode3d",))

    def end_drawing(self):
        self.calls.append(("end_drawing",))
        self.n_frame_left -= 1


@pytest.fixture
def fake_window_class():
    return FakeWindow
