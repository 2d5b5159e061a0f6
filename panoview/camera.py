from dataclasses import dataclass
import numpy as np
from panoview.constants import DEFAULT_VFOV, PITCH_LIMIT
from panoview.math_utils import clamp, mat4_camera_view


@dataclass
class CameraState:
    yaw: float = 0.0  # radians, unbounded
    pitch: float = 0.0  # radians, clamped to +-PITCH_LIMIT
    vertical_fov: float = DEFAULT_VFOV  # degrees

    def horizontal_fov(self, viewport_w: float, viewport_h: float) -> float:
        if not viewport_h:
            return self.vertical_fov
        return self.vertical_fov * viewport_w / viewport_h

    def reset_angles(self, start_angle: float = 0.0):
        self.yaw = float(start_angle)
        self.pitch = 0.0

    def apply_pan(self, dx: float, dy: float, speed_x: float, speed_y: float):
        self.yaw += dx * speed_x
        self.pitch = clamp(self.pitch + dy * speed_y, -PITCH_LIMIT, PITCH_LIMIT)

    def view_matrix(self) -> np.ndarray:
        return mat4_camera_view(self.yaw, self.pitch)
