# heliview

heliview is a small software renderer. It reads a triangle-mesh model from a
text file and projects it through a perspective camera. It fills each triangle
scanline by scanline, uses a z-buffer for hidden surfaces and shades surfaces
from a point light. A scripted camera flight then moves the viewpoint around
the model while two of its parts (the rotors, objects 1 and 2) spin about
their own centres. The frames are written out as binary PPM images.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Model format

The model file holds numbers separated by whitespace:

```
<number of objects>              (0 to 10)
for each object:
    <R> <G> <B>
    <number of points>           (0 to 1000)
    <x> <y> <z>                  (one per point)
    <number of triangles>        (0 to 1000)
    <i1> <i2> <i3>               (zero-based point indices)
```

A file that ends early holds a token that is not a number, has a count out of
range or has a triangle that names a missing point is rejected with
`heliview.model.ModelFormatError`.

## Command line

```
heliview [--model FILE] [--frames N] [--output DIR] [--calm]
```

- `--model`: the scene file. The default is `heli_nfs3.txt` in the current directory.
- `--frames`: how many frames to render. The default is 1.
- `--output`: the directory for the frames. It is created if it does not exist. The default is the current directory.
- `--calm`: keep the final camera position when the flight ends. Without it the flight starts over.

Frames are written as `frame_00000.ppm`, `frame_00001.ppm` and so on. Each
frame is 801×601 pixels. While rendering, the command prints a line such as
`FPS: 3.2` every five seconds. A missing model prints
`Model is not found: Check for <file>!` and exits with status 1. A malformed
model also exits with status 1.

## Library use

```python
from heliview.model import load_scene, Axis
from heliview.renderer import Renderer, Light
from heliview.flight import Flight

scene = load_scene("heli_nfs3.txt")
flight = Flight()
camera = flight.start_camera()
renderer = Renderer()
light = Light()

frame = renderer.render(scene, camera, light)
with open("frame.ppm", "wb") as out:
    out.write(frame.to_ppm())

flight.step(scene, camera, calm=False)   # advance the flight by one frame
scene.rotate(Axis.Y, 0.1, index=1)       # spin object 1 about its own centre
```

- `heliview.camera.Camera(p, q, r)` projects a point onto the plane `z = 0` with `project(x, y, z)`. A point in the eye's own plane raises `ValueError`.
- `heliview.model` provides `Scene`, `Mesh`, `Color` and `Axis`, and also `parse_scene(text)` and `load_scene(path)`.
  - `Scene.rotate`, `Scene.move`, `Scene.zoom_in` and `Scene.zoom_out` turn, shift or scale the whole scene or a single object.
  - `Mesh.center_of_mass`, `Mesh.translate`, `Mesh.scale` and `Mesh.rotate` work on one mesh.
- `heliview.renderer.Renderer` has these settings: `width`, `height`, `scale`, `saturation` and `back_light`. Its `render` method returns a `Frame`. `Frame.pixel(x, y)` gives the `(R, G, B)` colour at a pixel, and `Frame.to_ppm()` encodes the frame.
- `heliview.flight.Flight` holds the state of the flight. Its methods are `start_camera()`, `step(scene, camera, calm)` and `reset(camera)`, and its `finished` property reports when the flight is over.
- `heliview.app.Viewer` ties these together. `toggle()` loads the model and starts the flight, or stops it if it is running. `advance()` renders a frame and moves the flight on by one step. `FpsCounter` counts the frames.

## What it does not do

heliview has no window and no interactive display. It does not show the
animation on screen. It only renders frames to PPM files, or to `Frame`
objects in your own code.