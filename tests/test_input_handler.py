import cv2
import pytest

glfw = pytest.importorskip("glfw")

from panoview.config import ViewerConfig
from panoview.input_handler import InputHandler
from panoview.view import PanoramaView


class _FakeApp:
    def __init__(self, image):
        self.config = ViewerConfig()
        self.view = PanoramaView(width=1280, height=720, image=image)


@pytest.fixture
def handler(monkeypatch, equirect_image):
    titles = []
    monkeypatch.setattr(glfw, "get_cursor_pos", lambda win: (100.0, 100.0))
    monkeypatch.setattr(glfw, "set_window_title", lambda win, title: titles.append(title))
    h = InputHandler(_FakeApp(equirect_image))
    h.titles = titles
    return h


def test_drag_translation_is_y_up(handler):
    cam = handler.app.view.camera
    handler.on_mouse(None, glfw.MOUSE_BUTTON_LEFT, glfw.PRESS, 0)
    handler.on_cursor(None, 150.0, 80.0)
    assert cam.yaw == pytest.approx(0.25)
    assert cam.pitch == pytest.approx(0.1), "moving the mouse up looks up"

    handler.on_mouse(None, glfw.MOUSE_BUTTON_LEFT, glfw.RELEASE, 0)
    handler.on_cursor(None, 500.0, 500.0)
    assert cam.yaw == pytest.approx(0.25)


def test_right_button_does_not_drag(handler):
    handler.on_mouse(None, glfw.MOUSE_BUTTON_RIGHT, glfw.PRESS, 0)
    handler.on_cursor(None, 300.0, 300.0)
    assert handler.app.view.camera.yaw == 0.0


def test_scroll_and_keys_zoom(handler):
    view = handler.app.view
    handler.on_scroll(None, 0.0, 1.0)
    assert view.zoom_level == 1.1
    handler.on_key(None, glfw.KEY_EQUAL, 0, glfw.PRESS, 0)
    assert view.zoom_level == 1.2
    handler.on_key(None, glfw.KEY_MINUS, 0, glfw.REPEAT, 0)
    assert view.zoom_level == 1.1
    handler.on_key(None, glfw.KEY_MINUS, 0, glfw.RELEASE, 0)
    assert view.zoom_level == 1.1


def test_reset_key(handler):
    view = handler.app.view
    view.start_angle = 0.5
    view.camera.pitch = 0.9
    handler.on_key(None, glfw.KEY_R, 0, glfw.PRESS, 0)
    assert view.camera.yaw == 0.5
    assert view.camera.pitch == 0.0


def test_escape_closes(handler, monkeypatch):
    closed = []
    monkeypatch.setattr(glfw, "set_window_should_close", lambda win, flag: closed.append(flag))
    handler.on_key(None, glfw.KEY_ESCAPE, 0, glfw.PRESS, 0)
    assert closed == [True]


def test_drop_loads_image(handler, tmp_path, wide_image):
    path = str(tmp_path / "wide.png")
    assert cv2.imwrite(path, wide_image)
    handler.on_drop(None, [path])
    view = handler.app.view
    assert view.image.shape == wide_image.shape
    assert view.scene.geometry_node.kind.value == "cylindrical"
    assert handler.titles and path in handler.titles[-1]


def test_bad_drop_keeps_current_image(handler, tmp_path):
    view = handler.app.view
    before = view.image
    handler.on_drop(None, [str(tmp_path / "missing.jpg")])
    handler.on_drop(None, [])
    assert view.image is before
    assert handler.titles == []


def test_window_resize(handler):
    handler.on_window_size(None, 640, 640)
    assert handler.app.view.horizontal_fov == pytest.approx(80.0)


def test_number_keys_zoom_directly(handler):
    view = handler.app.view
    handler.on_key(None, glfw.KEY_2, 0, glfw.PRESS, 0)
    assert view.vertical_fov == pytest.approx(40.0)
    handler.on_key(None, glfw.KEY_1, 0, glfw.PRESS, 0)
    assert view.vertical_fov == pytest.approx(40.0), "80 is outside the fov window"
    handler.on_key(None, glfw.KEY_4, 0, glfw.PRESS, 0)
    assert view.vertical_fov == pytest.approx(20.0), "20 is outside the fov window"
    assert view.zoom_level == 1.0, "number keys bypass the scroll accumulator"
