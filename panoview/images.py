import logging
import os

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class ImageLoadError(RuntimeError):
    pass


def to_rgb(img: np.ndarray) -> np.ndarray:
    """Convert an OpenCV-decoded array (grey, BGR or BGRA) to RGB/RGBA uint8."""
    if img.dtype != np.uint8:
        # 16-bit PNG/TIFF or float (0..1) panoramas
        peak = float(np.iinfo(img.dtype).max) if np.issubdtype(img.dtype, np.integer) else 1.0
        img = cv2.convertScaleAbs(img, alpha=255.0 / peak)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    channels = img.shape[2]
    if channels == 1:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def load_image(path: str) -> np.ndarray:
    if not os.path.exists(path):
        raise ImageLoadError(f"Image file {path} not found.")

    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ImageLoadError(f"Could not decode image {path}")

    img = to_rgb(img)
    h, w = img.shape[:2]
    logger.info("[image] Loaded %s (%dx%d)", path, w, h)
    return np.ascontiguousarray(img)
