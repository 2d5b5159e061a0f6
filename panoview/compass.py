"""Compass notification and the pie-slice indicator overlay.

A compass is any object with ``update_ui(rotation_angle, field_of_view_angle)``
(both in radians). The view holds at most one, plus an optional movement
handler callable with the same arguments.
"""
import math
from typing import Callable, List, Optional, Protocol, Tuple

import numpy as np

from panoview.constants import (
    COMPASS_BG_COLOR,
    COMPASS_CIRCLE_STEPS,
    COMPASS_MARGIN,
    COMPASS_RING_COLOR,
    COMPASS_RING_INSET,
    COMPASS_RING_WIDTH,
    COMPASS_SIZE,
    COMPASS_SLICE_COLOR,
    COMPASS_SLICE_INSET,
)
from panoview.geometry import make_disc, make_ring, make_slice


MovementHandler = Callable[[float, float], None]
Color = Tuple[float, float, float, float]


class Compass(Protocol):
    def update_ui(self, rotation_angle: float, field_of_view_angle: float) -> None:
        ...


class MovementNotifier:
    def __init__(self, compass: Optional[Compass] = None, movement_handler: Optional[MovementHandler] = None):
        self.compass = compass
        self.movement_handler = movement_handler

    def notify(self, rotation_angle: float, field_of_view_angle: float, call_handler: bool = True):
        if self.compass is not None:
            self.compass.update_ui(rotation_angle, field_of_view_angle)
        if call_handler and self.movement_handler is not None:
            self.movement_handler(rotation_angle, field_of_view_angle)


class Shape:
    """One flat-coloured primitive in normalised device coordinates."""

    __slots__ = ("mode", "points", "color")

    def __init__(self, mode: str, points: np.ndarray, color: Color):
        self.mode = mode  # "fan" | "strip"
        self.points = points
        self.color = color


class PieSliceCompass:
    """Round indicator: the slice shows the horizontal fov, the whole dial
    turns with the view.

    Anchored to the top-right corner of the framebuffer by default.
    """

    def __init__(
        self,
        size: float = COMPASS_SIZE,
        margin: float = COMPASS_MARGIN,
        slice_color: Color = COMPASS_SLICE_COLOR,
        ring_color: Color = COMPASS_RING_COLOR,
        bg_color: Color = COMPASS_BG_COLOR,
        anchor: str = "top-right",
    ):
        self.size = float(size)
        self.margin = float(margin)
        self.slice_color = tuple(slice_color)
        self.ring_color = tuple(ring_color)
        self.bg_color = tuple(bg_color)
        self.anchor = anchor
        self.slice_angle = math.pi / 2
        self.rotation_angle = 0.0

    def update_ui(self, rotation_angle: float, field_of_view_angle: float) -> None:
        self.slice_angle = float(field_of_view_angle)
        self.rotation_angle = float(rotation_angle)

    def center(self, fb_w: int, fb_h: int) -> Tuple[float, float]:
        half = self.size / 2.0
        if self.anchor == "top-left":
            return self.margin + half, fb_h - self.margin - half
        if self.anchor == "bottom-left":
            return self.margin + half, self.margin + half
        if self.anchor == "bottom-right":
            return fb_w - self.margin - half, self.margin + half
        return fb_w - self.margin - half, fb_h - self.margin - half

    def shapes_px(self, fb_w: int, fb_h: int) -> List[Shape]:
        """Primitives in pixel coordinates (origin bottom-left, y up)."""
        cx, cy = self.center(fb_w, fb_h)
        half = self.size / 2.0
        steps = COMPASS_CIRCLE_STEPS

        # Dial rotates as a whole; slice is centred on "up" before rotation.
        start = math.pi / 2 - self.slice_angle / 2 + self.rotation_angle
        return [
            Shape("fan", make_disc(cx, cy, half, steps), self.bg_color),
            Shape("strip", make_ring(cx, cy, half - COMPASS_RING_INSET, COMPASS_RING_WIDTH, steps), self.ring_color),
            Shape("fan", make_slice(cx, cy, half - COMPASS_SLICE_INSET, start, self.slice_angle, steps), self.slice_color),
        ]

    def shapes(self, fb_w: int, fb_h: int) -> List[Shape]:
        if fb_w <= 0 or fb_h <= 0:
            return []
        out = []
        scale = np.array([2.0 / fb_w, 2.0 / fb_h], dtype=np.float32)
        for shape in self.shapes_px(fb_w, fb_h):
            ndc = shape.points * scale - 1.0
            out.append(Shape(shape.mode, ndc.astype(np.float32), shape.color))
        return out
