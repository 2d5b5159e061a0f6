import numpy as np
import pytest


class RecordingCompass:
    def __init__(self):
        self.calls = []

    def update_ui(self, rotation_angle, field_of_view_angle):
        self.calls.append((rotation_angle, field_of_view_angle))


@pytest.fixture
def equirect_image():
    return np.zeros((64, 128, 3), dtype=np.uint8)


@pytest.fixture
def wide_image():
    return np.zeros((100, 400, 3), dtype=np.uint8)


@pytest.fixture
def compass():
    return RecordingCompass()
