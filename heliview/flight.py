"""The scripted helicopter flight: spinning rotors and a moving viewpoint."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from heliview.camera import Camera
from heliview.model import Axis, Scene

START_SPEED = 1.34567
START_CAMERA = (-169.0, 50.0, 412.5)
TRAVEL_LIMIT = 200
APPROACH_STOP = 100
HOLD = 20
DESCENT_STEPS = 7 * 20
DRIFT_STEPS = 10 * 20
CLIMB_STEPS = 8 * 20

# (axis, angle per step, mesh index) of the spinning parts.
_SPINNERS = (
    (Axis.X, -math.pi / 8, 2),
    (Axis.Y, -math.pi / 16, 1),
)


@dataclass
class Flight:
    """State of the flight: approach, hover, descent, drift and climb."""

    speed: float = START_SPEED
    travel: int = 0
    hover: int = 0
    drift_hover: int = 0
    climb_hover: int = 0
    descent_steps: int = 0
    descent_rate: float = START_SPEED
    drift_steps: int = 0
    drift_rate: float = START_SPEED
    climb_steps: int = 0
    climb_rate: float = START_SPEED

    @property
    def finished(self) -> bool:
        """True once the final climb is over."""
        return self.climb_rate == 0

    def start_camera(self) -> Camera:
        """The viewpoint at the start of the flight."""
        return Camera(*START_CAMERA)

    def reset(self, camera: Camera) -> None:
        """Restart the flight and put the camera back at its start."""
        for f in fields(self):
            setattr(self, f.name, f.default)
        camera.p, camera.q, camera.r = START_CAMERA

    def step(self, scene: Scene, camera: Camera, calm: bool = False) -> None:
        """Advance one frame; restart at the end unless ``calm`` is set."""
        self._spin(scene)
        self._fly(camera)
        if self.finished and not calm:
            self.reset(camera)

    @staticmethod
    def _spin(scene: Scene) -> None:
        for axis, angle, index in _SPINNERS:
            if index < len(scene.meshes) and scene.meshes[index].triangles:
                scene.rotate(axis, angle, index)

    def _fly(self, camera: Camera) -> None:
        self.travel = int(self.travel + self.speed)
        if self.travel > TRAVEL_LIMIT or self.travel <= -TRAVEL_LIMIT:
            self.speed = -self.speed
        camera.p += 2 * ((self.speed > 0) - (self.speed < 0))
        if camera.p >= APPROACH_STOP or self.speed == 0:
            self.speed = 0.0
            self._after_approach(camera)

    def _after_approach(self, camera: Camera) -> None:
        self.hover += 1
        if self.hover < HOLD:
            return
        self.hover = HOLD - 1
        camera.q -= self.descent_rate
        self.descent_steps += 1
        if self.descent_steps < DESCENT_STEPS:
            return
        self.descent_rate = 0.0
        self.descent_steps -= 1

        self.drift_hover += 1
        if self.drift_hover < HOLD:
            return
        self.drift_hover = HOLD - 1
        camera.p -= self.drift_rate
        self.drift_steps += 1
        if self.drift_steps < DRIFT_STEPS:
            return
        self.drift_rate = 0.0
        self.drift_steps -= 1

        self.climb_hover += 1
        if self.climb_hover < HOLD:
            return
        self.climb_hover = HOLD - 1
        camera.q += self.climb_rate
        self.climb_steps += 1
        if self.climb_steps >= CLIMB_STEPS:
            self.climb_rate = 0.0