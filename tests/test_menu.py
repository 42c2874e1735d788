import io

import numpy as np
import pytest
from PIL import Image

from artlens.menu import ImageLoader, Menu, main
from artlens.photo import PhotoError


@pytest.fixture
def image_path(tmp_path):
    rng = np.random.default_rng(0)
    data = rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)
    path = tmp_path / "input.png"
    Image.fromarray(data).save(path)
    return path, data


def _run(text):
    out = io.StringIO()
    menu = Menu(io.StringIO(text), out)
    menu.run()
    return menu, out.getvalue()


def test_loader_load_reads_pixels(image_path):
    path, data = image_path
    loader = ImageLoader()
    loader.load(path)
    assert np.array_equal(loader.image, data)


def test_loader_load_missing_raises(tmp_path):
    with pytest.raises(PhotoError):
        ImageLoader().load(tmp_path / "missing.png")


def test_loader_save_appends_jpg(image_path, tmp_path):
    path, data = image_path
    loader = ImageLoader()
    loader.load(path)
    written = loader.save(tmp_path / "out")
    assert written.endswith("out.jpg")
    assert (tmp_path / "out.jpg").exists()
    with Image.open(tmp_path / "out.jpg") as img:
        assert img.size == (16, 12)


def test_loader_save_without_image_raises(tmp_path):
    with pytest.raises(PhotoError):
        ImageLoader().save(tmp_path / "out")


def test_loader_show_without_image_raises():
    with pytest.raises(PhotoError):
        ImageLoader().show()


def test_exit_says_goodbye():
    _, output = _run("0\n")
    assert "Goodbye!" in output


def test_invalid_option():
    _, output = _run("9\n0\n")
    assert "Invalid option." in output


def test_face_detection_under_construction():
    _, output = _run("3\n4\n0\n")
    assert output.count("Under Construction") == 2


def test_end_of_input_stops_loop():
    _, output = _run("")
    assert "Goodbye!" not in output
    assert "Select option: " in output


def test_menu_load_success(image_path):
    path, data = image_path
    menu, output = _run(f"1\n{path}\n0\n")
    assert "Image loaded successfully." in output
    assert np.array_equal(menu.loader.image, data)


def test_menu_load_failure(tmp_path):
    menu, output = _run(f"1\n{tmp_path / 'nope.png'}\n0\n")
    assert "Image load failed." in output
    assert menu.loader.image is None


def test_pencil_sketch_makes_gray(image_path):
    path, _ = image_path
    menu, output = _run(f"1\n{path}\n2\n1\n0\n0\n")
    assert "Applied Pencil Sketch." in output
    assert menu.loader.image.shape == (12, 16)


def test_pop_filming_keeps_shape(image_path):
    path, data = image_path
    menu, output = _run(f"1\n{path}\n2\n4\n0\n0\n")
    assert "Applied Edge Painting." in output
    assert menu.loader.image.shape == data.shape


def test_filter_without_image():
    menu, output = _run("2\n1\n0\n0\n")
    assert "No image loaded." in output
    assert menu.loader.image is None


def test_filter_menu_invalid_and_construction():
    _, output = _run("2\n7\n5\n0\n0\n")
    assert "Invalid option." in output
    assert "Under Construction" in output


def test_color_filter_after_pencil_reports_error(image_path):
    path, _ = image_path
    menu, output = _run(f"1\n{path}\n2\n1\n4\n0\n0\n")
    assert "Cannot apply filter" in output
    assert menu.loader.image.ndim == 2


def test_menu_save(image_path, tmp_path):
    path, _ = image_path
    target = tmp_path / "saved"
    _, output = _run(f"1\n{path}\n6\n{target}\n0\n")
    assert (tmp_path / "saved.jpg").exists()
    assert "saved.jpg" in output


def test_menu_save_without_image(tmp_path):
    _, output = _run(f"6\n{tmp_path / 'x'}\n0\n")
    assert "No image loaded." in output
    assert not (tmp_path / "x.jpg").exists()


def test_main_returns_zero(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    assert "Goodbye!" in out.getvalue()