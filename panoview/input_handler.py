import logging

import glfw

from panoview.images import ImageLoadError, load_image
from panoview.interaction import GesturePhase

logger = logging.getLogger(__name__)

_ZOOM_KEYS = {
    glfw.KEY_1: 1.0,
    glfw.KEY_2: 2.0,
    glfw.KEY_3: 3.0,
    glfw.KEY_4: 4.0,
}


class InputHandler:
    """Routes GLFW callbacks to the PanoramaView.

    A left-button drag becomes a pan gesture whose translation is measured
    from the press point, with y pointing up.
    """

    def __init__(self, app):
        self.app = app
        self.dragging = False
        self.press_x, self.press_y = 0.0, 0.0

    def on_key(self, win, key, scancode, action, mods):
        if action not in (glfw.PRESS, glfw.REPEAT): return

        view = self.app.view
        if key == glfw.KEY_ESCAPE:
            glfw.set_window_should_close(win, True)
        elif key == glfw.KEY_R:
            view.reset_camera_angles()
            logger.info("[view] Angles reset to %.3f rad", view.start_angle)
        elif key in (glfw.KEY_EQUAL, glfw.KEY_KP_ADD):
            view.scroll_wheel(1.0)
        elif key in (glfw.KEY_MINUS, glfw.KEY_KP_SUBTRACT):
            view.scroll_wheel(-1.0)
        elif key in _ZOOM_KEYS:
            # Direct zoom like a slider; the scroll accumulator is left alone.
            view.zoom(_ZOOM_KEYS[key])

    def on_mouse(self, win, button, action, mods):
        if button != glfw.MOUSE_BUTTON_LEFT:
            return
        if action == glfw.PRESS:
            self.dragging = True
            self.press_x, self.press_y = glfw.get_cursor_pos(win)
            self.app.view.handle_pan(GesturePhase.BEGAN)
        elif action == glfw.RELEASE and self.dragging:
            self.dragging = False
            self.app.view.handle_pan(GesturePhase.ENDED)

    def on_cursor(self, win, x, y):
        if not self.dragging: return
        # GLFW y grows downward; gestures use y up.
        translation = (x - self.press_x, self.press_y - y)
        self.app.view.handle_pan(GesturePhase.CHANGED, translation)

    def on_scroll(self, win, xoff, yoff):
        self.app.view.scroll_wheel(yoff)

    def on_drop(self, win, paths):
        if not paths:
            return
        path = paths[0]
        try:
            self.app.view.image = load_image(path)
        except ImageLoadError as e:
            logger.warning("[drop] %s", e)
            return
        glfw.set_window_title(win, f"{self.app.config.title} - {path}")

    def on_window_size(self, win, width, height):
        self.app.view.resize(width, height)
