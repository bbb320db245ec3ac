"""Z-buffered scanline rendering of triangle scenes with distance shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

from heliview.camera import Camera
from heliview.model import Mesh, Scene, Triangle

WIDTH = 800
HEIGHT = 600
SCALE = 80.0
SATURATION = 20
_BACK_LIGHT_FLOOR = 0.2


@dataclass(frozen=True)
class Light:
    """A point light whose distance to a surface sets its brightness."""

    x: float = 0.0
    y: float = 0.0
    z: float = 4.8


class Frame:
    """An RGB picture with a black background."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 3)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} frame")
        return (y * self.width + x) * 3

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the ``(r, g, b)`` colour at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        r, g, b = self._data[offset:offset + 3]
        return r, g, b

    def set_pixel(self, x: int, y: int, rgb: tuple[int, int, int]) -> None:
        """Store an ``(r, g, b)`` colour at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        self._data[offset:offset + 3] = bytes(rgb)

    def to_ppm(self) -> bytes:
        """Encode the frame as a binary PPM image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self._data)


def _channel(value: int, gain: float) -> int:
    return max(0, min(255, int(value * gain)))


@dataclass
class Renderer:
    """Fills scene triangles into a frame with a depth buffer and point-light shading."""

    width: int = WIDTH
    height: int = HEIGHT
    scale: float = SCALE
    saturation: int = SATURATION
    back_light: bool = False

    def render(self, scene: Scene, camera: Camera, light: Light) -> Frame:
        """Draw ``scene`` as seen by ``camera`` and lit by ``light``."""
        frame = Frame(self.width + 1, self.height + 1)
        depth: list[float | None] = [None] * (frame.width * frame.height)
        near, far = self._light_range(scene, light)
        cx, cy = self.width // 2, self.height // 2
        kx = self.scale
        ky = kx * self.height / self.width
        for mesh in scene.meshes:
            screen = [
                (int(cx + px * kx), int(cy - py * ky))
                for px, py in (camera.project(*v) for v in mesh.vertices)
            ]
            for tri in mesh.triangles:
                self._fill(frame, depth, mesh, tri, screen, camera, light,
                           near, far, (cx, cy), (kx, ky))
        return frame

    @staticmethod
    def _light_range(scene: Scene, light: Light) -> tuple[float, float]:
        near = 32767.0 * 32767.0
        far = -32767.0 * 32767.0
        for mesh in scene.meshes:
            for x, y, z in mesh.vertices:
                d = (x - light.x) ** 2 + (y - light.y) ** 2 + (z - light.z) ** 2
                far = max(far, d)
                near = min(near, d)
        return near, far

    def _fill(self, frame, depth, mesh: Mesh, tri: Triangle, screen, camera: Camera,
              light: Light, near: float, far: float, center, scale) -> None:
        cx, cy = center
        kx, ky = scale
        p, q, r = camera.p, camera.q, camera.r
        v1, v2, v3 = (mesh.vertices[i] for i in tri)
        tp = [screen[i] for i in tri]

        x1, y1, z1 = (v1[k] - v3[k] for k in range(3))
        x2, y2, z2 = (v2[k] - v3[k] for k in range(3))
        a = y1 * z2 - z1 * y2
        b = -(x1 * z2 - z1 * x2)
        c = x1 * y2 - y1 * x2
        d = -a * v2[0] - b * v2[1] - c * v2[2]
        normal_len = math.sqrt(a * a + b * b + c * c)
        centroid = tuple((v1[k] + v2[k] + v3[k]) / 3 for k in range(3))

        n_min = 0
        lowest = tp[0][1]
        if tp[1][1] < lowest:
            lowest = tp[1][1]
            n_min = 1
        if tp[2][1] < lowest:
            n_min = 2
        n_max = 0
        highest = tp[0][1]
        if tp[1][1] > highest:
            highest = tp[1][1]
            n_max = 1
        if tp[2][1] > highest:
            n_max = 2
        mid = 0
        if mid == n_max:
            mid += 1
        if mid == n_min:
            mid += 1
        if mid == n_max and mid != 2:
            mid += 1

        ax, ay = tp[n_min]
        bx, by = tp[mid]
        ccx, ccy = tp[n_max]
        if ccy == ay:
            return

        span = far - near
        for sy in range(max(ay, 0), min(ccy, self.height) + 1):
            left = int(ax + (sy - ay) * (ccx - ax) / (ccy - ay))
            if sy < by:
                right = int(ax + (sy - ay) * (bx - ax) / (by - ay))
            elif ccy == by:
                right = bx
            else:
                right = int(bx + (sy - by) * (ccx - bx) / (ccy - by))
            if left > right:
                left, right = right, left
            if right > self.width:
                continue
            ye = (cy - sy) / ky
            for h in range(left + 1, right + 1):
                if not 0 <= h <= self.width:
                    continue
                xe = (h - cx) / kx
                denominator = a * (xe - p) / r + b * (ye - q) / r - c
                if denominator == 0:
                    continue
                dz = (a * xe + b * ye + d) / denominator
                slot = sy * frame.width + h
                stored = depth[slot]
                if stored is not None and not stored < dz - r:
                    continue

                dist = (xe - light.x) ** 2 + (ye - light.y) ** 2 + (dz - light.z) ** 2
                gain = (dist - near) / span if span else 0.0
                gain = min(1.0, max(0.0, gain))
                gain = 1 - gain * gain

                vx = p - (centroid[0] - xe)
                vy = q - (centroid[1] - ye)
                vz = r - (centroid[2] - dz)
                lengths = math.sqrt(vx * vx + vy * vy + vz * vz) * normal_len
                cosine = abs((vx * a + vy * b + vz * c) / lengths) if lengths else 0.0

                gain = cosine * gain * (self.saturation / 5.0)
                gain = min(gain, 1.0)
                if self.back_light and gain < _BACK_LIGHT_FLOOR:
                    gain = _BACK_LIGHT_FLOOR

                color = mesh.color
                frame.set_pixel(h, sy, (_channel(color.r, gain),
                                        _channel(color.g, gain),
                                        _channel(color.b, gain)))
                depth[slot] = dz - r