import numpy as np
import pytest

from artlens.photo import (
    FilteredPhoto,
    Photo,
    PhotoError,
    load_image,
    save_image,
    side_by_side,
)


@pytest.fixture
def rgb():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(3, 4, 3), dtype=np.uint8)


def test_save_and_load_round_trip(tmp_path, rgb):
    target = tmp_path / "pic.png"
    save_image(rgb, target)
    assert np.array_equal(load_image(target), rgb)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(PhotoError):
        load_image(tmp_path / "missing.png")


def test_save_empty_raises(tmp_path):
    with pytest.raises(PhotoError):
        save_image(None, tmp_path / "x.png")


def test_save_unknown_extension_raises(tmp_path, rgb):
    with pytest.raises(PhotoError):
        save_image(rgb, tmp_path / "x.notaformat")


def test_photo_load_sets_path(tmp_path, rgb):
    target = tmp_path / "pic.png"
    save_image(rgb, target)
    photo = Photo(name="p")
    photo.load(target)
    assert photo.path == str(target)
    assert np.array_equal(photo.image, rgb)


def test_photo_save_without_image_raises(tmp_path):
    with pytest.raises(PhotoError):
        Photo().save(tmp_path / "x.png")


def test_photo_show_without_image_raises():
    with pytest.raises(PhotoError):
        Photo().show()


def test_add_tag_skips_duplicates():
    photo = Photo()
    photo.add_tag("sea")
    photo.add_tag("sky")
    photo.add_tag("sea")
    assert photo.tags == ["sea", "sky"]
    assert photo.has_tag("sky")
    assert not photo.has_tag("land")


def test_original_photo_type_and_origin():
    photo = Photo()
    assert photo.type_name() == "Photo"
    assert photo.origin() is None


def test_metadata_of_photo(rgb):
    photo = Photo(image=rgb, tags=["a", "b"], lineage="Original")
    lines = photo.metadata().splitlines()
    assert lines[0] == "---------- Metadata ----------"
    assert "Type: Photo" in lines
    assert "Original/Derivative: Original" in lines
    assert "Resolution: 4 x 3" in lines


def test_metadata_without_image():
    assert Photo().metadata().splitlines()[-1] == "No image."


def test_filtered_photo_copies_image_and_tags(rgb):
    base = Photo(image=rgb, tags=["sea"], lineage="Original")
    filtered = FilteredPhoto(base, "Oil Painting")
    assert filtered.tags == ["sea", "Oil Painting"]
    assert base.tags == ["sea"]
    assert filtered.lineage == "Derivative"
    assert filtered.type_name() == "FilteredPhoto"
    filtered.image[0, 0] = 255 - base.image[0, 0]
    assert not np.array_equal(filtered.image, base.image)


def test_set_source_tracks_original(rgb):
    base = Photo(image=rgb)
    first = FilteredPhoto(base, "Pop Filming")
    first.set_source(base)
    second = FilteredPhoto(first, "Oil Painting")
    second.set_source(first)
    assert first.origin() is base
    assert second.origin() is base


def test_filtered_metadata_ends_with_filter(rgb):
    filtered = FilteredPhoto(Photo(image=rgb), "Oil Painting")
    assert filtered.describe_filter() == "Filter applied: Oil Painting"
    lines = filtered.metadata().splitlines()
    assert lines[-1] == "Filter applied: Oil Painting"
    assert "Type: FilteredPhoto" in lines


def test_filtered_show_without_source_raises(rgb):
    with pytest.raises(PhotoError):
        FilteredPhoto(Photo(image=rgb), "Oil Painting").show()


def test_side_by_side_same_height(rgb):
    joined = side_by_side(rgb, rgb, 3)
    assert joined.shape == (3, 4 + 3 + 4, 3)
    assert np.array_equal(joined[:, :4], rgb)
    assert np.array_equal(joined[:, 7:], rgb)
    assert np.all(joined[:, 4:7] == 255)


def test_side_by_side_scales_right_to_left_height(rgb):
    tall = np.zeros((6, 8, 3), dtype=np.uint8)
    joined = side_by_side(rgb, tall, 2)
    assert joined.shape[0] == rgb.shape[0]
    assert joined.shape[1] == 4 + 2 + 4


def test_side_by_side_empty_raises(rgb):
    with pytest.raises(PhotoError):
        side_by_side(rgb, np.zeros((0, 0, 3), dtype=np.uint8))