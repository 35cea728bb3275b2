import numpy as np
import pytest
from PIL import Image

import image_io
from errors import ImageLoadError


@pytest.fixture(params=[True, False], ids=["opencv", "pil"])
def loader_backend(request, monkeypatch):
    if request.param and not image_io.OPENCV_AVAILABLE:
        pytest.skip("OpenCV not installed")
    monkeypatch.setattr(image_io, "USE_OPENCV", request.param)
    return request.param


def test_loads_grayscale_png(tmp_path, loader_backend):
    grid = np.zeros((12, 20), dtype=np.uint8)
    grid[3, 7] = 200
    path = tmp_path / "spot.png"
    Image.fromarray(grid).save(path)

    loaded = image_io.load_grayscale(path)

    assert loaded.shape == (12, 20)
    assert loaded.dtype == np.uint8
    assert loaded[3, 7] == 200
    assert int(loaded.sum()) == 200


def test_converts_rgb_to_luma(tmp_path, loader_backend):
    rgb = np.zeros((5, 5, 3), dtype=np.uint8)
    rgb[2, 2] = (255, 255, 255)
    path = tmp_path / "rgb.png"
    Image.fromarray(rgb).save(path)

    loaded = image_io.load_grayscale(path)

    assert loaded.shape == (5, 5)
    assert loaded[2, 2] == 255
    assert loaded[0, 0] == 0


def test_missing_file(tmp_path, loader_backend):
    with pytest.raises(ImageLoadError):
        image_io.load_grayscale(tmp_path / "missing.png")


def test_corrupt_file(tmp_path, loader_backend):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not a png at all")

    with pytest.raises(ImageLoadError):
        image_io.load_grayscale(path)


def test_sixteen_bit_png_keeps_high_byte(tmp_path, loader_backend):
    # Multiples of 257 reduce to the same byte whether low bits are dropped or scaled
    grid = np.full((20, 20), 3 * 257, dtype=np.uint16)
    grid[10, 10] = 233 * 257
    path = tmp_path / "deep.png"
    Image.fromarray(grid).save(path)

    loaded = image_io.load_grayscale(path)

    assert loaded.dtype == np.uint8
    assert loaded[0, 0] == 3
    assert loaded[10, 10] == 233


def test_sixteen_bit_pil_drops_low_byte(tmp_path, monkeypatch):
    monkeypatch.setattr(image_io, "USE_OPENCV", False)
    grid = np.full((4, 4), 1000, dtype=np.uint16)
    grid[1, 2] = 60000
    path = tmp_path / "deep.png"
    Image.fromarray(grid).save(path)

    loaded = image_io.load_grayscale(path)

    assert loaded[0, 0] == 3
    assert loaded[1, 2] == 234


def test_oversized_image_is_a_load_error(tmp_path, monkeypatch):
    monkeypatch.setattr(image_io, "USE_OPENCV", False)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    path = tmp_path / "huge.png"
    Image.fromarray(np.zeros((20, 20), dtype=np.uint8)).save(path)

    with pytest.raises(ImageLoadError):
        image_io.load_grayscale(path)
