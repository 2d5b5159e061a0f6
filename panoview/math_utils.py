import math
import numpy as np

def to_radians(deg: float) -> float:
    return deg * math.pi / 180.0

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def fov_height(fov_deg: float, radius: float) -> float:
    # Height of a wall at `radius` that exactly fills a vertical fov.
    return math.tan(to_radians(fov_deg) / 2.0) * 2.0 * radius

def mat4_perspective(fovy_deg: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    fovy = math.radians(fovy_deg)
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (zfar + znear) / (znear - zfar)
    m[2, 3] = (2.0 * zfar * znear) / (znear - zfar)
    m[3, 2] = -1.0
    return m

def mat4_rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0,   c,  -s, 0.0],
        [0.0,   s,   c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)

def mat4_rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [  c, 0.0,   s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [ -s, 0.0,   c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)

def mat4_camera_view(yaw: float, pitch: float) -> np.ndarray:
    """View matrix for a camera at the origin looking down -Z.

    The camera is oriented as Ry(yaw) @ Rx(pitch) (angles in radians); the view
    matrix is its inverse.
    """
    return mat4_rotation_x(-pitch) @ mat4_rotation_y(-yaw)
