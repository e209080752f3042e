import numpy as np
import pytest
from PIL import Image

from algolab.imaging import load_grayscale, main, sobel, threshold


def _random_image(seed=0, shape=(12, 9)):
    return np.random.default_rng(seed).integers(0, 256, size=shape, dtype=np.uint8)


def _write_png(path, array):
    Image.fromarray(array).save(path)


def test_sobel_uniform_image_is_zero():
    image = np.full((6, 7), 123, dtype=np.uint8)
    assert np.array_equal(sobel(image), np.zeros((6, 7), dtype=np.uint8))


def test_sobel_keeps_shape_and_zero_border():
    result = sobel(_random_image())
    assert result.shape == (12, 9)
    assert result.dtype == np.uint8
    assert not result[0].any() and not result[-1].any()
    assert not result[:, 0].any() and not result[:, -1].any()


def test_sobel_is_symmetric_under_transpose():
    image = _random_image(seed=3, shape=(10, 10))
    assert np.array_equal(sobel(image.T), sobel(image).T)


def test_sobel_vertical_edge():
    image = np.array([[0, 0, 10, 10]] * 3, dtype=np.uint8)
    result = sobel(image)
    assert result[1, 1] == 40
    assert result[1, 2] == 40


def test_sobel_stores_large_gradient_as_byte():
    image = np.array([[0, 0, 255, 255]] * 3, dtype=np.uint8)
    assert sobel(image)[1, 1] == 252


def test_sobel_small_image_is_all_zero():
    image = np.array([[0, 255], [255, 0]], dtype=np.uint8)
    assert np.array_equal(sobel(image), np.zeros((2, 2), dtype=np.uint8))


def test_sobel_rejects_colour_image():
    with pytest.raises(ValueError):
        sobel(np.zeros((4, 4, 3), dtype=np.uint8))


def test_threshold_boundary_is_inclusive():
    image = np.array([[127, 128, 129]], dtype=np.uint8)
    assert threshold(image, 128).tolist() == [[0, 255, 255]]


def test_threshold_output_is_binary():
    result = threshold(_random_image(seed=5), 100)
    assert set(np.unique(result)) <= {0, 255}
    assert np.array_equal(result == 255, _random_image(seed=5) >= 100)


def test_threshold_zero_makes_everything_white():
    assert (threshold(_random_image(seed=1), 0) == 255).all()


@pytest.mark.parametrize("level", [-1, 256])
def test_threshold_rejects_out_of_range_level(level):
    with pytest.raises(ValueError):
        threshold(_random_image(), level)


def test_load_grayscale_round_trip(tmp_path):
    image = _random_image(seed=7)
    path = tmp_path / "in.png"
    _write_png(path, image)
    assert np.array_equal(load_grayscale(path), image)


def test_load_grayscale_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_grayscale(tmp_path / "missing.png")


def test_main_threshold_writes_result(tmp_path, capsys):
    image = _random_image(seed=11)
    source = tmp_path / "in.png"
    target = tmp_path / "out.png"
    _write_png(source, image)
    assert main(["threshold", "128", str(target), "--input", str(source)]) == 0
    assert np.array_equal(load_grayscale(target), threshold(image, 128))
    assert str(target) in capsys.readouterr().out


def test_main_sobel_writes_result(tmp_path):
    image = _random_image(seed=13)
    source = tmp_path / "in.png"
    target = tmp_path / "edges.png"
    _write_png(source, image)
    assert main(["sobel", "--input", str(source), "--output", str(target)]) == 0
    assert np.array_equal(load_grayscale(target), sobel(image))


def test_main_rejects_bad_threshold(tmp_path):
    source = tmp_path / "in.png"
    target = tmp_path / "out.png"
    _write_png(source, _random_image())
    assert main(["threshold", "300", str(target), "--input", str(source)]) == 1
    assert not target.exists()


def test_main_missing_input(tmp_path):
    target = tmp_path / "out.png"
    assert main(["threshold", "10", str(target), "--input", str(tmp_path / "no.png")]) == 1
    assert not target.exists()