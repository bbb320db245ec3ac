import pytest

from heliview.app import FpsCounter, Viewer, main
from heliview.renderer import Frame

MODEL = "1\n255 0 0\n3\n-1 -1 0\n1 -1 0\n0 1 0\n1\n0 1 2\n"


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "heli.txt"
    path.write_text(MODEL)
    return path


def test_fps_report_and_restart():
    counter = FpsCounter()
    for _ in range(10):
        counter.tick()
    assert counter.report() == "FPS: 2.0"
    assert counter.report() == "FPS: 0.0"


def test_toggle_missing_model_raises(tmp_path):
    viewer = Viewer(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        viewer.toggle()
    assert viewer.running is False


def test_toggle_starts_and_stops(model_file):
    viewer = Viewer(model_file)
    assert viewer.toggle() is True
    assert viewer.running is True
    assert len(viewer.scene.meshes) == 1
    assert viewer.toggle() is False
    assert viewer.running is False


def test_advance_renders_and_moves(model_file):
    viewer = Viewer(model_file)
    viewer.toggle()
    start_p = viewer.camera.p
    frame = viewer.advance()
    assert isinstance(frame, Frame)
    assert (frame.width, frame.height) == (801, 601)
    assert viewer.camera.p > start_p
    assert viewer.fps.frames == 1


def test_advance_when_stopped_raises():
    with pytest.raises(RuntimeError):
        Viewer().advance()


def test_main_writes_frames(model_file, tmp_path):
    out = tmp_path / "frames"
    code = main(["--model", str(model_file), "--frames", "2", "--output", str(out)])
    assert code == 0
    files = sorted(out.glob("*.ppm"))
    assert len(files) == 2
    assert files[0].read_bytes().startswith(b"P6\n801 601\n255\n")


def test_main_missing_model_fails(tmp_path, capsys):
    code = main(["--model", str(tmp_path / "none.txt"), "--output", str(tmp_path)])
    assert code == 1
    assert "Model is not found" in capsys.readouterr().err