"""
Camera pose and the per-frame camera controller.

The controller has two schemes, fixed when it is built:

- "direct": W/S move the camera along z and D/A along x, at a constant
  speed scaled by the frame time. The target and up vector stay put, so
  the view does not turn to follow the camera.
- "orbital": the window's own camera update is called once per frame.
"""

import numpy as np

PERSPECTIVE = "perspective"
ORTHOGRAPHIC = "orthographic"

DIRECT = "direct"
ORBITAL = "orbital"
CAMERA_MODES = (DIRECT, ORBITAL)

DEFAULT_POSITION = (0.0, 0.0, -5.0)
DEFAULT_TARGET = (0.0, 0.0, 0.0)
DEFAULT_UP = (0.0, 1.0, 0.0)
DEFAULT_FOVY = 90.0
DEFAULT_SPEED = 2.0

# key -> (axis, sign)
DIRECT_KEYS = {
    "W": (2, 1.0),
    "S": (2, -1.0),
    "D": (0, 1.0),
    "A": (0, -1.0),
}


def vector(x, y, z):
    return np.array([x, y, z], dtype=np.float32)


class CameraPose:
    """
    Holds everything needed to place the 3D view: where the camera is,
    what it looks at, which way is up, the vertical field of view in
    degrees and the projection.
    """

    def __init__(
        self,
        position=DEFAULT_POSITION,
        target=DEFAULT_TARGET,
        up=DEFAULT_UP,
        fovy=DEFAULT_FOVY,
        projection=PERSPECTIVE,
    ):
        if projection not in (PERSPECTIVE, ORTHOGRAPHIC):
            raise ValueError(f"Unknown projection {projection!r}")
        self.position = vector(*position)
        self.target = vector(*target)
        self.up = vector(*up)
        self.fovy = float(fovy)
        self.projection = projection

    def get_direction(self):
        return self.target - self.position

    def is_degenerate(self):
        """True when up is parallel to the view direction."""
        return not np.any(np.cross(self.up, self.get_direction()))

    def __repr__(self):
        return (
            f"CameraPose(position={self.position.tolist()}, target={self.target.tolist()}, "
            f"up={self.up.tolist()}, fovy={self.fovy}, projection={self.projection!r})"
        )


class CameraController:
    def __init__(self, mode=DIRECT, speed=DEFAULT_SPEED):
        if mode not in CAMERA_MODES:
            raise ValueError(f"Unknown camera mode {mode!r}")
        self.mode = mode
        self.speed = speed

    def update(self, pose, dt, window):
        """Moves pose in place for a frame that took dt seconds."""
        if self.mode == DIRECT:
            self.translate(pose, dt, window)
        else:
            window.update_camera(pose, self.mode)

    def translate(self, pose, dt, window):
        step = self.speed * dt
        for key, (axis, sign) in DIRECT_KEYS.items():
            if window.is_key_down(key):
                pose.position[axis] += sign * step
