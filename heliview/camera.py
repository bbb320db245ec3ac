"""Perspective camera that projects scene points onto the picture plane."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Camera:
    """An eye at ``(p, q, r)`` looking at the plane ``z = 0``."""

    p: float
    q: float
    r: float

    def project(self, x: float, y: float, z: float) -> tuple[float, float]:
        """Project a 3D point onto the plane ``z = 0`` as seen from the eye.

        Raises ValueError for a point that lies in the eye's own plane,
        which has no projection.
        """
        depth = z - self.r
        if depth == 0:
            raise ValueError(f"point at z={z} lies in the eye plane and cannot be projected")
        t = -self.r / depth
        return self.p + t * (x - self.p), self.q + t * (y - self.q)