import logging

import cv2
from OpenGL import GL

logger = logging.getLogger(__name__)

_WRAP = {
    "repeat": GL.GL_REPEAT,
    "clamp": GL.GL_CLAMP_TO_EDGE,
}

_FILTER = {
    "nearest": GL.GL_NEAREST,
    "linear": GL.GL_LINEAR,
}


def fit_to_max_size(img, max_size: int):
    h, w = img.shape[:2]
    if max_size <= 0 or (w <= max_size and h <= max_size):
        return img
    scale = max_size / float(max(w, h))
    new_w = max(1, int(w * scale))
    new_h = max(1, int(h * scale))
    logger.warning("[texture] %dx%d exceeds GL max %d; downscaling to %dx%d", w, h, max_size, new_w, new_h)
    return cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_AREA)


class Texture:
    """2D texture for a panorama Material (RGB or RGBA uint8 image)."""

    def __init__(self, material):
        max_size = int(GL.glGetIntegerv(GL.GL_MAX_TEXTURE_SIZE))
        img = fit_to_max_size(material.image, max_size)
        h, w = img.shape[:2]
        channels = img.shape[2] if img.ndim == 3 else 1
        self.width, self.height = w, h
        self.gl_format = GL.GL_RGBA if channels == 4 else GL.GL_RGB

        filt = _FILTER.get(material.filter, GL.GL_NEAREST)

        self.tex_id = GL.glGenTextures(1)
        GL.glBindTexture(GL.GL_TEXTURE_2D, self.tex_id)
        GL.glTexParameteri(GL.GL_TEXTURE_2D, GL.GL_TEXTURE_MIN_FILTER, filt)
        GL.glTexParameteri(GL.GL_TEXTURE_2D, GL.GL_TEXTURE_MAG_FILTER, filt)
        GL.glTexParameteri(GL.GL_TEXTURE_2D, GL.GL_TEXTURE_WRAP_S, _WRAP.get(material.wrap_s, GL.GL_REPEAT))
        GL.glTexParameteri(GL.GL_TEXTURE_2D, GL.GL_TEXTURE_WRAP_T, _WRAP.get(material.wrap_t, GL.GL_CLAMP_TO_EDGE))
        GL.glPixelStorei(GL.GL_UNPACK_ALIGNMENT, 1)
        GL.glTexImage2D(GL.GL_TEXTURE_2D, 0, self.gl_format, w, h, 0, self.gl_format, GL.GL_UNSIGNED_BYTE, img)

    def bind(self, unit: int = 0):
        GL.glActiveTexture(GL.GL_TEXTURE0 + unit)
        GL.glBindTexture(GL.GL_TEXTURE_2D, self.tex_id)

    def dispose(self):
        if self.tex_id:
            GL.glDeleteTextures(1, [self.tex_id])
            self.tex_id = 0
