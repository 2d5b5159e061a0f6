import cv2
import numpy as np
import pytest

from panoview.images import ImageLoadError, load_image, to_rgb


def test_load_converts_bgr_to_rgb(tmp_path):
    bgr = np.zeros((10, 20, 3), dtype=np.uint8)
    bgr[:, :, 0] = 255  # blue in OpenCV order
    path = str(tmp_path / "pano.png")
    assert cv2.imwrite(path, bgr)

    img = load_image(path)
    assert img.shape == (10, 20, 3)
    assert img.dtype == np.uint8
    assert np.all(img[:, :, 2] == 255)
    assert np.all(img[:, :, 0] == 0)


def test_grey_expanded(tmp_path):
    path = str(tmp_path / "grey.png")
    assert cv2.imwrite(path, np.full((8, 16), 7, dtype=np.uint8))
    img = load_image(path)
    assert img.shape == (8, 16, 3)
    assert np.all(img == 7)


def test_alpha_kept():
    bgra = np.zeros((4, 8, 4), dtype=np.uint8)
    bgra[..., 3] = 200
    assert to_rgb(bgra).shape == (4, 8, 4)
    assert np.all(to_rgb(bgra)[..., 3] == 200)


def test_sixteen_bit_scaled():
    img = np.full((2, 2, 3), 65535, dtype=np.uint16)
    out = to_rgb(img)
    assert out.dtype == np.uint8
    assert np.all(out == 255)


def test_missing_file(tmp_path):
    with pytest.raises(ImageLoadError):
        load_image(str(tmp_path / "missing.jpg"))


def test_undecodable_file(tmp_path):
    p = tmp_path / "junk.jpg"
    p.write_bytes(b"not an image")
    with pytest.raises(ImageLoadError):
        load_image(str(p))
