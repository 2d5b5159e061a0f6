import logging
from typing import Optional

import numpy as np

from panoview.camera import CameraState
from panoview.compass import Compass, MovementHandler, MovementNotifier
from panoview.constants import (
    DEFAULT_START_ANGLE,
    DEFAULT_VFOV,
    PAN_SPEED,
    RADIUS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from panoview.interaction import GesturePhase, InteractionController
from panoview.math_utils import fov_height, to_radians
from panoview.projection import ProjectionType, select_type
from panoview.scene import Scene

logger = logging.getLogger(__name__)


class PanoramaView:
    """Panorama widget state: scene, camera, input and compass fan-out.

    Knows nothing about GL or windows; the renderer reads `scene` and
    `camera`, the input handler feeds `handle_pan` / `scroll_wheel`.
    """

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
                 image: Optional[np.ndarray] = None):
        self.width = width
        self.height = height
        self.radius = RADIUS
        self.pan_speed = PAN_SPEED
        self.start_angle = DEFAULT_START_ANGLE

        self.scene = Scene()
        self.camera = CameraState(vertical_fov=DEFAULT_VFOV)
        # Fixed at setup from the initial fov; zoom does not resize the tube.
        self.fov_height = fov_height(self.camera.vertical_fov, self.radius)

        self.notifier = MovementNotifier()
        self.controller = InteractionController(self)

        self._image = None
        self._projection_type = ProjectionType.CYLINDRICAL
        self._overlay = None

        if image is not None:
            self.image = image

    # Public properties

    @property
    def image(self) -> Optional[np.ndarray]:
        return self._image

    @image.setter
    def image(self, image: Optional[np.ndarray]):
        self._image = image
        self.projection_type = select_type(image)

    @property
    def projection_type(self) -> ProjectionType:
        return self._projection_type

    @projection_type.setter
    def projection_type(self, value: ProjectionType):
        # Any assignment rebuilds, even to the same type.
        self._projection_type = value
        self.scene.rebuild_geometry(value, self._image, self.fov_height, self.radius)
        self.reset_camera_angles()

    @property
    def compass(self) -> Optional[Compass]:
        return self.notifier.compass

    @compass.setter
    def compass(self, compass: Optional[Compass]):
        self.notifier.compass = compass

    @property
    def movement_handler(self) -> Optional[MovementHandler]:
        return self.notifier.movement_handler

    @movement_handler.setter
    def movement_handler(self, handler: Optional[MovementHandler]):
        self.notifier.movement_handler = handler

    @property
    def overlay(self):
        return self._overlay

    @overlay.setter
    def overlay(self, overlay):
        if self._overlay is not None and self._overlay is not overlay:
            logger.debug("Replacing overlay %r", self._overlay)
        self._overlay = overlay

    @property
    def vertical_fov(self) -> float:
        return self.camera.vertical_fov

    @vertical_fov.setter
    def vertical_fov(self, value: float):
        self.camera.vertical_fov = value

    @property
    def horizontal_fov(self) -> float:
        return self.camera.horizontal_fov(self.width, self.height)

    def horizontal_fov_radians(self) -> float:
        return to_radians(self.horizontal_fov)

    # Camera / notifications

    def reset_camera_angles(self):
        self.camera.reset_angles(self.start_angle)
        self.report_movement(float(self.start_angle), self.horizontal_fov_radians(), call_handler=False)

    def report_movement(self, rotation_angle: float, field_of_view_angle: float, call_handler: bool = True):
        self.notifier.notify(rotation_angle, field_of_view_angle, call_handler=call_handler)

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            return
        if (width, height) == (self.width, self.height):
            return
        self.width, self.height = width, height
        self.report_movement(-self.camera.yaw, self.horizontal_fov_radians(), call_handler=False)

    # Input

    def handle_pan(self, phase: GesturePhase, translation=(0.0, 0.0)):
        self.controller.handle_pan(phase, translation)

    def scroll_wheel(self, delta_y: float):
        self.controller.scroll_wheel(delta_y)

    def zoom(self, scale: float):
        self.controller.zoom(scale)

    @property
    def zoom_level(self) -> float:
        return self.controller.zoom_level.value
