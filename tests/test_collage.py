import numpy as np
import pytest

from artlens.collage import ImageCollager, make_collage
from artlens.photo import PhotoError, save_image


@pytest.fixture
def first():
    rng = np.random.default_rng(1)
    return rng.integers(0, 256, size=(60, 50, 3), dtype=np.uint8)


@pytest.fixture
def second():
    rng = np.random.default_rng(2)
    return rng.integers(0, 256, size=(60, 50, 3), dtype=np.uint8)


def test_collage_shape(first, second):
    assert make_collage(first, second).shape == (60, 100, 3)


def test_collage_halves_below_labels(first, second):
    collage = make_collage(first, second)
    assert np.array_equal(collage[40:, :50], first[40:])
    assert np.array_equal(collage[40:, 50:], second[40:])


def test_collage_resizes_second(first):
    small = np.zeros((10, 7, 3), dtype=np.uint8)
    assert make_collage(first, small).shape == (60, 100, 3)


def test_collage_accepts_gray_second(first):
    gray = np.full((60, 50), 128, dtype=np.uint8)
    collage = make_collage(first, gray)
    assert collage.shape == (60, 100, 3)
    expected = np.full((20, 50, 3), 128, dtype=np.uint8)
    assert np.array_equal(collage[40:, 50:], expected)


def test_collage_draws_red_labels():
    black = np.zeros((60, 50, 3), dtype=np.uint8)
    collage = make_collage(black, black)
    left_top = collage[:35, :50]
    right_top = collage[:35, 50:]
    assert int(left_top[..., 0].max()) > 0
    assert int(right_top[..., 0].max()) > 0
    assert int(left_top[..., 1:].max()) == 0
    assert int(right_top[..., 1:].max()) == 0


def test_collage_empty_raises(first):
    with pytest.raises(PhotoError):
        make_collage(first, np.zeros((0, 0, 3), dtype=np.uint8))


def test_collager_without_images_raises(first):
    collager = ImageCollager()
    collager.load_image(first)
    with pytest.raises(PhotoError):
        collager.create_collage()


def test_collager_builds_collage(first, second):
    collager = ImageCollager()
    collager.load_image(first)
    collager.load_second_image(second)
    assert np.array_equal(collager.create_collage(), make_collage(first, second))


def test_collager_second_image_from_path(tmp_path, first, second):
    target = tmp_path / "second.png"
    save_image(second, target)
    collager = ImageCollager()
    collager.load_second_image(target)
    assert collager.second_image_path == str(target)
    assert np.array_equal(collager.second_image, second)


def test_collager_second_image_missing_path_raises(tmp_path):
    with pytest.raises(PhotoError):
        ImageCollager().load_second_image(tmp_path / "nope.png")