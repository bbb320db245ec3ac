import pytest

from heliview.camera import Camera
from heliview.model import Color, Mesh, Scene
from heliview.renderer import Frame, Light, Renderer

CAMERA = Camera(0.0, 0.0, 10.0)
HEADER = b"P6\n801 601\n255\n"
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)


def _triangle(color, z=0.0):
    return Mesh(color, [(-1.0, -1.0, z), (1.0, -1.0, z), (0.0, 1.0, z)], [(0, 1, 2)])


def _pixels(frame):
    return frame.to_ppm()[len(HEADER):]


def test_empty_scene_renders_black_frame():
    frame = Renderer().render(Scene(), CAMERA, Light())
    assert (frame.width, frame.height) == (801, 601)
    assert set(_pixels(frame)) == {0}


def test_ppm_layout():
    frame = Frame(801, 601)
    data = frame.to_ppm()
    assert data.startswith(HEADER)
    assert len(data) == len(HEADER) + 801 * 601 * 3


def test_triangle_center_has_mesh_colour():
    frame = Renderer().render(Scene([_triangle(RED)]), CAMERA, Light())
    assert frame.pixel(400, 320) == (255, 0, 0)


def test_outside_triangle_stays_black():
    frame = Renderer().render(Scene([_triangle(RED)]), CAMERA, Light())
    assert frame.pixel(10, 10) == (0, 0, 0)
    assert frame.pixel(790, 590) == (0, 0, 0)


def test_only_mesh_colour_channels_are_lit():
    data = _pixels(Renderer().render(Scene([_triangle(RED)]), CAMERA, Light()))
    assert set(data[1::3]) == {0}
    assert set(data[2::3]) == {0}
    assert any(data[0::3])


@pytest.mark.parametrize("red_first", [True, False])
def test_nearer_surface_wins(red_first):
    near, far = _triangle(RED, z=1.0), _triangle(GREEN, z=0.0)
    meshes = [near, far] if red_first else [far, near]
    frame = Renderer().render(Scene(meshes), CAMERA, Light())
    r, g, _ = frame.pixel(400, 320)
    assert g == 0
    assert r > 0


def test_render_leaves_scene_untouched():
    mesh = _triangle(RED)
    before = list(mesh.vertices)
    Renderer().render(Scene([mesh]), CAMERA, Light())
    assert mesh.vertices == before


def test_render_is_deterministic():
    scene = Scene([_triangle(RED), _triangle(GREEN, z=0.5)])
    first = Renderer().render(scene, CAMERA, Light()).to_ppm()
    second = Renderer().render(scene, CAMERA, Light()).to_ppm()
    assert first == second


def test_triangle_flat_on_screen_draws_nothing():
    mesh = Mesh(RED, [(-1.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)], [(0, 1, 2)])
    frame = Renderer().render(Scene([mesh]), CAMERA, Light())
    assert set(_pixels(frame)) == {0}


def test_pixel_outside_frame_raises():
    frame = Frame(801, 601)
    with pytest.raises(IndexError):
        frame.pixel(801, 0)
    with pytest.raises(IndexError):
        frame.pixel(0, -1)


def test_set_pixel_round_trip():
    frame = Frame(4, 3)
    frame.set_pixel(2, 1, (10, 20, 30))
    assert frame.pixel(2, 1) == (10, 20, 30)


def test_vertex_in_eye_plane_raises():
    mesh = Mesh(RED, [(0.0, 0.0, 10.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)], [(0, 1, 2)])
    with pytest.raises(ValueError):
        Renderer().render(Scene([mesh]), CAMERA, Light())