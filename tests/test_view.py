import math

import pytest

from panoview.interaction import GesturePhase
from panoview.projection import ProjectionType
from panoview.view import PanoramaView


def _hfov_rad(view):
    return math.radians(view.vertical_fov * view.width / view.height)


def test_fov_height_fixed_at_setup():
    view = PanoramaView(width=1280, height=720)
    assert view.fov_height == pytest.approx(2 * 10 * math.tan(math.radians(80) / 2))


def test_setting_image_picks_projection(equirect_image, wide_image):
    view = PanoramaView()
    view.image = equirect_image
    assert view.projection_type == ProjectionType.SPHERICAL
    assert view.scene.geometry_node.kind == ProjectionType.SPHERICAL

    view.image = wide_image
    assert view.projection_type == ProjectionType.CYLINDRICAL
    assert view.scene.geometry_node.kind == ProjectionType.CYLINDRICAL
    assert view.scene.geometry_node.params["height"] == view.fov_height


def test_image_in_constructor(equirect_image):
    view = PanoramaView(image=equirect_image)
    assert view.projection_type == ProjectionType.SPHERICAL
    assert view.scene.geometry_node is not None


def test_reassigning_same_type_rebuilds(equirect_image):
    view = PanoramaView(image=equirect_image)
    gen = view.scene.generation
    view.projection_type = ProjectionType.SPHERICAL
    assert view.scene.generation == gen + 1


def test_projection_without_image_keeps_scene_empty(compass):
    view = PanoramaView()
    view.compass = compass
    view.projection_type = ProjectionType.SPHERICAL
    assert view.scene.geometry_node is None
    assert len(compass.calls) == 1, "angles are still reset and reported"


def test_image_change_resets_angles(equirect_image, compass):
    view = PanoramaView(image=equirect_image)
    view.start_angle = 0.75
    view.compass = compass
    view.handle_pan(GesturePhase.BEGAN)
    view.handle_pan(GesturePhase.CHANGED, (300.0, 80.0))
    assert view.camera.pitch != 0.0

    view.image = equirect_image
    assert view.camera.yaw == 0.75
    assert view.camera.pitch == 0.0
    assert compass.calls[-1] == (0.75, pytest.approx(_hfov_rad(view)))


def test_reset_notifies_compass_but_not_handler(equirect_image, compass):
    handled = []
    view = PanoramaView(width=1000, height=500)
    view.compass = compass
    view.movement_handler = lambda rot, fov: handled.append((rot, fov))

    view.image = equirect_image
    assert compass.calls == [(0.0, pytest.approx(math.radians(160.0)))]
    assert handled == []


def test_drag_notifies_both(equirect_image, compass):
    handled = []
    view = PanoramaView(width=1000, height=500, image=equirect_image)
    view.compass = compass
    view.movement_handler = lambda rot, fov: handled.append((rot, fov))

    view.handle_pan(GesturePhase.BEGAN)
    view.handle_pan(GesturePhase.CHANGED, (100.0, 0.0))
    assert len(compass.calls) == 1
    assert len(handled) == 1
    rot, fov = handled[0]
    assert rot == pytest.approx(-0.5)
    assert fov == pytest.approx(math.radians(160.0))
    assert compass.calls[0] == handled[0]


def test_resize_updates_horizontal_fov(equirect_image, compass):
    handled = []
    view = PanoramaView(width=1000, height=500, image=equirect_image)
    view.compass = compass
    view.movement_handler = lambda rot, fov: handled.append((rot, fov))

    view.resize(500, 500)
    assert view.horizontal_fov == pytest.approx(80.0)
    assert compass.calls[-1][1] == pytest.approx(math.radians(80.0))
    assert handled == []


def test_resize_ignores_empty_and_unchanged(compass):
    view = PanoramaView(width=800, height=600)
    view.compass = compass
    view.resize(0, 0)
    view.resize(800, 600)
    assert compass.calls == []
    assert (view.width, view.height) == (800, 600)


def test_overlay_is_replaced():
    view = PanoramaView()
    first, second = object(), object()
    view.overlay = first
    view.overlay = second
    assert view.overlay is second
    view.overlay = None
    assert view.overlay is None


def test_tube_height_not_tracking_zoom(wide_image):
    view = PanoramaView(image=wide_image)
    initial = view.fov_height
    for _ in range(5):
        view.scroll_wheel(1.0)
    assert view.vertical_fov < 80.0
    view.image = wide_image
    assert view.scene.geometry_node.params["height"] == initial
