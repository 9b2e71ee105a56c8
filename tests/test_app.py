import pytest

from fdfview.app import _Viewer, main, run
from fdfview.controls import Key
from fdfview.fdfmap import MapError, parse_map


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_with_too_many_arguments_fails():
    assert main(["one.fdf", "two.fdf"]) == 1


def test_main_with_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "absent.fdf")]) == 1


def test_main_with_empty_map_fails(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1


def test_run_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "absent.fdf", 100, 100)


def test_run_ragged_map_raises(tmp_path):
    path = tmp_path / "ragged.fdf"
    path.write_text("1 2 3\n4 5\n")
    with pytest.raises(MapError):
        run(path, 100, 100)


def test_viewer_draws_on_start():
    viewer = _Viewer(parse_map("0 0\n0 0\n"), 200, 200)
    assert any(viewer.image.data)
    assert viewer.running is True


def test_viewer_key_redraws():
    viewer = _Viewer(parse_map("0 0\n0 0\n"), 400, 400)
    before = bytes(viewer.image.data)
    viewer.on_key(Key.ARROW_RIGHT)
    assert viewer.camera.x == 100
    assert bytes(viewer.image.data) != before
    assert viewer.running is True


def test_viewer_escape_stops():
    viewer = _Viewer(parse_map("0 0\n"), 100, 100)
    viewer.on_key(Key.ESCAPE)
    assert viewer.running is False


def test_viewer_mouse_zooms():
    viewer = _Viewer(parse_map("1 2\n3 4\n"), 200, 200)
    before = viewer.camera.zoom
    viewer.on_mouse(4)
    assert viewer.camera.zoom > before
    assert viewer.running is True