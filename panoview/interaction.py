import logging
from enum import Enum

from panoview.constants import FOV_MAX, FOV_MIN, ZOOM_MAX, ZOOM_MIN, ZOOM_STEP
from panoview.projection import ProjectionType

logger = logging.getLogger(__name__)


class GesturePhase(Enum):
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class ZoomAccumulator:
    """Discrete zoom level in [ZOOM_MIN, ZOOM_MAX], one ZOOM_STEP per tick."""

    def __init__(self, value: float = ZOOM_MIN):
        self.value = value

    def step(self, delta_y: float) -> float:
        if delta_y > 0 and ZOOM_MIN <= self.value < ZOOM_MAX:
            self.value += ZOOM_STEP
        if delta_y < 0 and ZOOM_MIN < self.value <= ZOOM_MAX:
            self.value -= ZOOM_STEP
        # Two decimals keeps repeated 0.1 steps from drifting.
        self.value = round(self.value, 2)
        return self.value


class InteractionController:
    """Turns drag and scroll input into camera changes on a PanoramaView.

    Drag translations are cumulative since the gesture began (screen space,
    y up); the increment applied per event is the difference from the last
    event. Nothing here raises on bad input: values are clamped or ignored.
    """

    def __init__(self, view):
        self.view = view
        self.state = DragState.IDLE
        self.anchor = (0.0, 0.0)
        self.zoom_level = ZoomAccumulator()
        self.base_fov = None

    def handle_pan(self, phase: GesturePhase, translation=(0.0, 0.0)):
        if phase == GesturePhase.BEGAN:
            self.anchor = (0.0, 0.0)
            self.state = DragState.DRAGGING
        elif phase == GesturePhase.CHANGED:
            if self.state != DragState.DRAGGING:
                return
            self._pan_to(float(translation[0]), float(translation[1]))
        elif phase in (GesturePhase.ENDED, GesturePhase.CANCELLED):
            self.state = DragState.IDLE

    def _pan_to(self, tx: float, ty: float):
        view = self.view
        speed_x, speed_y = view.pan_speed
        if view.projection_type == ProjectionType.CYLINDRICAL:
            speed_y = 0.0  # no vertical look on a cylinder

        dx = tx - self.anchor[0]
        dy = ty - self.anchor[1]
        view.camera.apply_pan(dx, dy, speed_x, speed_y)
        self.anchor = (tx, ty)

        view.report_movement(-view.camera.yaw, view.horizontal_fov_radians())

    def scroll_wheel(self, delta_y: float):
        level = self.zoom_level.step(delta_y)
        logger.debug("[zoom] level %.2f", level)
        self.zoom(level)

    def zoom(self, scale: float):
        camera = self.view.camera
        if self.base_fov is None:
            self.base_fov = camera.vertical_fov
        if scale <= 0:
            return

        fov = self.base_fov / scale
        if FOV_MIN < fov < FOV_MAX:
            camera.vertical_fov = fov
