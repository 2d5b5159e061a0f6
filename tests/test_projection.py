import numpy as np
import pytest

from panoview.projection import ProjectionType, select_type, select_type_for_size


@pytest.mark.parametrize(
    "shape",
    [
        (512, 1024, 3),
        (500, 1000),
        (1, 2, 4),
        (4096, 8192, 3),
    ],
)
def test_exact_two_to_one_is_spherical(shape):
    img = np.zeros(shape, dtype=np.uint8)
    assert select_type(img) == ProjectionType.SPHERICAL


@pytest.mark.parametrize(
    "shape",
    [
        (512, 1025, 3),
        (511, 1024, 3),
        (100, 400, 3),
        (300, 300, 3),
        (1024, 512, 3),
    ],
)
def test_other_ratios_are_cylindrical(shape):
    img = np.zeros(shape, dtype=np.uint8)
    assert select_type(img) == ProjectionType.CYLINDRICAL


def test_no_image_defaults_to_cylindrical():
    assert select_type(None) == ProjectionType.CYLINDRICAL


def test_zero_height_is_cylindrical():
    assert select_type_for_size(2.0, 0.0) == ProjectionType.CYLINDRICAL


def test_no_tolerance_near_two():
    assert select_type_for_size(2000.0001, 1000.0) == ProjectionType.CYLINDRICAL
