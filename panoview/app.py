import logging

import glfw

from panoview.compass import PieSliceCompass
from panoview.config import ViewerConfig
from panoview.images import load_image
from panoview.input_handler import InputHandler
from panoview.render.renderer import Renderer
from panoview.view import PanoramaView

logger = logging.getLogger(__name__)


class App:
    def __init__(self, config: ViewerConfig):
        self.config = config
        self._init_window()
        try:
            self._init_view()
            self.renderer = Renderer()
        except Exception:
            glfw.terminate()
            raise

        self.input_handler = InputHandler(self)

        # Callbacks routed to Input Handler
        glfw.set_key_callback(self.window, self.input_handler.on_key)
        glfw.set_mouse_button_callback(self.window, self.input_handler.on_mouse)
        glfw.set_cursor_pos_callback(self.window, self.input_handler.on_cursor)
        glfw.set_scroll_callback(self.window, self.input_handler.on_scroll)
        glfw.set_drop_callback(self.window, self.input_handler.on_drop)
        glfw.set_window_size_callback(self.window, self.input_handler.on_window_size)

    def _init_window(self):
        if not glfw.init():
            raise RuntimeError("glfw.init() failed")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 2)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 1)

        monitor = glfw.get_primary_monitor() if self.config.fullscreen else None
        mode = glfw.get_video_mode(monitor) if monitor else None

        width = mode.size.width if mode else self.config.width
        height = mode.size.height if mode else self.config.height

        self.window = glfw.create_window(width, height, self.config.title, monitor, None)
        if not self.window:
            glfw.terminate()
            raise RuntimeError("Failed to create window")

        glfw.make_context_current(self.window)
        glfw.swap_interval(1)

    def _init_view(self):
        cfg = self.config
        # Horizontal fov follows the window (points), not the framebuffer.
        win_w, win_h = glfw.get_window_size(self.window)
        self.view = PanoramaView(width=win_w, height=win_h)
        self.view.pan_speed = cfg.pan_speed
        self.view.start_angle = cfg.start_angle

        if cfg.compass.enabled:
            cc = cfg.compass
            compass = PieSliceCompass(
                size=cc.size,
                margin=cc.margin,
                slice_color=cc.slice_color,
                ring_color=cc.ring_color,
                bg_color=cc.bg_color,
                anchor=cc.anchor,
            )
            self.view.compass = compass
            self.view.overlay = compass

        if cfg.image:
            self.view.image = load_image(cfg.image)
            glfw.set_window_title(self.window, f"{cfg.title} - {cfg.image}")
        else:
            logger.info("No image given; drop a panorama onto the window.")

    def run(self):
        try:
            while not glfw.window_should_close(self.window):
                glfw.poll_events()
                self._render()
        finally:
            self.renderer.dispose()
            glfw.terminate()

    def _render(self):
        fb_w, fb_h = glfw.get_framebuffer_size(self.window)
        if fb_w <= 0 or fb_h <= 0:
            return  # minimised
        self.renderer.draw_frame((fb_w, fb_h), self.view)
        glfw.swap_buffers(self.window)
