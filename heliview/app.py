"""Viewer that plays the helicopter flight and writes the frames to disk."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from heliview.flight import Flight
from heliview.model import ModelFormatError, Scene, load_scene
from heliview.renderer import Frame, Light, Renderer

DEFAULT_MODEL = "heli_nfs3.txt"
FPS_INTERVAL = 5.0


@dataclass
class FpsCounter:
    """Counts frames and reports the rate over a fixed interval."""

    interval: float = FPS_INTERVAL
    frames: int = 0

    def tick(self) -> None:
        """Count one frame."""
        self.frames += 1

    def report(self) -> str:
        """Return the rate since the last report and start counting again."""
        fps = self.frames / self.interval
        self.frames = 0
        return f"FPS: {fps:.1f}"


class Viewer:
    """Loads the model and plays the flight one frame at a time."""

    def __init__(self, model_path: str | Path = DEFAULT_MODEL,
                 renderer: Renderer | None = None, light: Light | None = None) -> None:
        self.model_path = Path(model_path)
        self.renderer = renderer or Renderer()
        self.light = light or Light()
        self.calm = False
        self.fps = FpsCounter()
        self.flight = Flight()
        self.camera = self.flight.start_camera()
        self.scene = Scene()
        self.running = False

    def toggle(self) -> bool:
        """Start or stop the flight; returns whether it is now running.

        Starting reloads the model, so a missing file raises FileNotFoundError.
        """
        if self.running:
            self.running = False
            return False
        self.scene = load_scene(self.model_path)
        self.flight = Flight()
        self.camera = self.flight.start_camera()
        self.fps = FpsCounter()
        self.running = True
        return True

    def advance(self) -> Frame:
        """Render the current frame, then move the flight on by one step."""
        if not self.running:
            raise RuntimeError("the viewer is stopped")
        frame = self.renderer.render(self.scene, self.camera, self.light)
        self.flight.step(self.scene, self.camera, self.calm)
        self.fps.tick()
        return frame


def main(argv: list[str] | None = None) -> int:
    """Render the flight to numbered PPM files."""
    parser = argparse.ArgumentParser(prog="heliview",
                                     description="Render the helicopter flight to PPM frames.")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="scene description file")
    parser.add_argument("--frames", type=int, default=1, help="number of frames to render")
    parser.add_argument("--output", default=".", help="directory for the frames")
    parser.add_argument("--calm", action="store_true", help="hold the last position at the end")
    args = parser.parse_args(argv)

    viewer = Viewer(args.model)
    viewer.calm = args.calm
    try:
        viewer.toggle()
    except FileNotFoundError:
        print(f"Model is not found: Check for {args.model}!", file=sys.stderr)
        return 1
    except ModelFormatError as error:
        print(f"Invalid model {args.model}: {error}", file=sys.stderr)
        return 1

    out = Path(args.output)
    out.mkdir(parents=True, exist_ok=True)
    last = time.monotonic()
    for n in range(args.frames):
        frame = viewer.advance()
        (out / f"frame_{n:05d}.ppm").write_bytes(frame.to_ppm())
        now = time.monotonic()
        if now - last >= viewer.fps.interval:
            print(viewer.fps.report())
            last = now
    viewer.toggle()
    return 0


if __name__ == "__main__":
    sys.exit(main())