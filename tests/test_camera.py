"""Tests for molball.camera — pose and controller."""

import numpy as np
import pytest

from molball.camera import (
    DIRECT,
    ORBITAL,
    ORTHOGRAPHIC,
    PERSPECTIVE,
    CameraController,
    CameraPose,
)


class KeyWindow:
    def __init__(self, pressed=()):
        self.pressed = set(pressed)
        self.camera_updates = []

    def is_key_down(self, key):
        return key in self.pressed

    def update_camera(self, pose, mode):
        self.camera_updates.append((pose, mode))


class TestCameraPose:
    def test_defaults(self):
        pose = CameraPose()
        assert pose.position.tolist() == [0.0, 0.0, -5.0]
        assert pose.target.tolist() == [0.0, 0.0, 0.0]
        assert pose.up.tolist() == [0.0, 1.0, 0.0]
        assert pose.fovy == 90.0
        assert pose.projection == PERSPECTIVE

    def test_orthographic(self):
        assert CameraPose(projection=ORTHOGRAPHIC).projection == ORTHOGRAPHIC

    def test_unknown_projection(self):
        with pytest.raises(ValueError):
            CameraPose(projection="fisheye")

    def test_degenerate(self):
        assert not CameraPose().is_degenerate()
        assert CameraPose(position=(0, -5, 0)).is_degenerate()

    def test_poses_do_not_share_arrays(self):
        a, b = CameraPose(), CameraPose()
        a.position[0] = 1.0
        assert b.position[0] == 0.0


class TestDirectTranslation:
    def test_forward(self):
        pose = CameraPose(position=(0, 0, -5))
        CameraController(DIRECT, speed=2.0).update(pose, 0.1, KeyWindow({"W"}))
        assert pose.position == pytest.approx([0.0, 0.0, -4.8])
        assert pose.target.tolist() == [0.0, 0.0, 0.0]
        assert pose.up.tolist() == [0.0, 1.0, 0.0]

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("S", [0.0, 0.0, -5.2]),
            ("D", [0.2, 0.0, -5.0]),
            ("A", [-0.2, 0.0, -5.0]),
        ],
    )
    def test_other_keys(self, key, expected):
        pose = CameraPose()
        CameraController(DIRECT, speed=2.0).update(pose, 0.1, KeyWindow({key}))
        assert pose.position == pytest.approx(expected)

    def test_no_keys(self):
        pose = CameraPose()
        CameraController(DIRECT).update(pose, 0.1, KeyWindow())
        assert pose.position.tolist() == [0.0, 0.0, -5.0]

    def test_opposite_keys_cancel(self):
        pose = CameraPose()
        CameraController(DIRECT).update(pose, 0.5, KeyWindow({"W", "S", "A", "D"}))
        assert pose.position == pytest.approx([0.0, 0.0, -5.0])

    def test_zero_dt(self):
        pose = CameraPose()
        CameraController(DIRECT).update(pose, 0.0, KeyWindow({"W"}))
        assert pose.position.tolist() == [0.0, 0.0, -5.0]

    def test_target_stays_at_origin(self):
        pose = CameraPose()
        controller = CameraController(DIRECT)
        window = KeyWindow({"W", "D"})
        for _ in range(10):
            controller.update(pose, 0.05, window)
        assert np.all(pose.target == 0.0)


class TestOrbital:
    def test_delegates_to_window(self):
        pose = CameraPose()
        window = KeyWindow({"W"})
        CameraController(ORBITAL).update(pose, 0.1, window)
        assert window.camera_updates == [(pose, ORBITAL)]
        assert pose.position.tolist() == [0.0, 0.0, -5.0]

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            CameraController("free")
