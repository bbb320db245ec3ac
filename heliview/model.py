"""Triangle-mesh scenes: loading, rotating, moving and scaling."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from pathlib import Path

Vertex = tuple[float, float, float]
Triangle = tuple[int, int, int]

MAX_OBJECTS = 10
MAX_POINTS = 1000


class ModelFormatError(ValueError):
    """Raised when a model description cannot be parsed."""


class Axis(enum.Enum):
    """A coordinate axis."""

    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class Color:
    """An RGB colour with 0-255 components."""

    r: int
    g: int
    b: int


def _rotate_vertex(axis: Axis, cos_a: float, sin_a: float, v: Vertex) -> Vertex:
    x, y, z = v
    if axis is Axis.Z:
        return x * cos_a - y * sin_a, x * sin_a + y * cos_a, z
    if axis is Axis.X:
        return x, y * cos_a - z * sin_a, y * sin_a + z * cos_a
    return x * cos_a - z * sin_a, y, x * sin_a + z * cos_a


@dataclass
class Mesh:
    """A coloured triangle mesh."""

    color: Color
    vertices: list[Vertex] = field(default_factory=list)
    triangles: list[Triangle] = field(default_factory=list)

    def center_of_mass(self) -> Vertex:
        """Mean of the centroids of all triangles."""
        if not self.triangles:
            raise ValueError("a mesh without triangles has no center of mass")
        sx = sy = sz = 0.0
        for tri in self.triangles:
            a, b, c = (self.vertices[i] for i in tri)
            sx += (a[0] + b[0] + c[0]) / 3
            sy += (a[1] + b[1] + c[1]) / 3
            sz += (a[2] + b[2] + c[2]) / 3
        n = len(self.triangles)
        return sx / n, sy / n, sz / n

    def translate(self, dx: float, dy: float, dz: float) -> None:
        """Shift every vertex by the given offsets."""
        self.vertices = [(x + dx, y + dy, z + dz) for x, y, z in self.vertices]

    def scale(self, k: float) -> None:
        """Multiply every coordinate by ``k``."""
        self.vertices = [(x * k, y * k, z * k) for x, y, z in self.vertices]

    def rotate(self, axis: Axis, angle: float, about_center: bool = False) -> None:
        """Rotate around an axis through the origin, or through the center of mass."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        if about_center:
            cx, cy, cz = self.center_of_mass()
            self.translate(-cx, -cy, -cz)
        self.vertices = [_rotate_vertex(axis, cos_a, sin_a, v) for v in self.vertices]
        if about_center:
            self.translate(cx, cy, cz)


@dataclass
class Scene:
    """A collection of meshes."""

    meshes: list[Mesh] = field(default_factory=list)

    def _targets(self, index: int | None) -> list[Mesh]:
        return list(self.meshes) if index is None else [self.meshes[index]]

    def rotate(self, axis: Axis, angle: float, index: int | None = None) -> None:
        """Rotate one mesh about its center, or the whole scene about the origin."""
        if index is None:
            for mesh in self.meshes:
                mesh.rotate(axis, angle)
        else:
            self.meshes[index].rotate(axis, angle, about_center=True)

    def move(self, axis: Axis, distance: float, index: int | None = None) -> None:
        """Shift one mesh, or all of them, along an axis."""
        offset = (
            distance if axis is Axis.X else 0.0,
            distance if axis is Axis.Y else 0.0,
            distance if axis is Axis.Z else 0.0,
        )
        for mesh in self._targets(index):
            mesh.translate(*offset)

    def zoom_in(self, k: float) -> None:
        """Scale the whole scene up by ``k``."""
        for mesh in self.meshes:
            mesh.scale(k)

    def zoom_out(self, k: float) -> None:
        """Scale the whole scene down by ``k``."""
        if k == 0:
            raise ValueError("zoom factor must not be zero")
        for mesh in self.meshes:
            mesh.vertices = [(x / k, y / k, z / k) for x, y, z in mesh.vertices]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._it = iter(text.split())

    def _next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ModelFormatError(f"unexpected end of data while reading {what}") from None

    def integer(self, what: str) -> int:
        token = self._next(what)
        try:
            return int(token)
        except ValueError:
            raise ModelFormatError(f"expected integer for {what}, got {token!r}") from None

    def number(self, what: str) -> float:
        token = self._next(what)
        try:
            return float(token)
        except ValueError:
            raise ModelFormatError(f"expected number for {what}, got {token!r}") from None


def _count(tokens: _Tokens, what: str, limit: int) -> int:
    n = tokens.integer(what)
    if not 0 <= n <= limit:
        raise ModelFormatError(f"{what} must be between 0 and {limit}, got {n}")
    return n


def parse_scene(text: str) -> Scene:
    """Parse a whitespace-separated scene description.

    The layout is the object count, then per object: an RGB colour, the
    vertex count, the vertices as ``x y z``, the triangle count and the
    triangles as three vertex indices.
    """
    tokens = _Tokens(text)
    meshes = []
    for o in range(_count(tokens, "object count", MAX_OBJECTS)):
        color = Color(*(tokens.integer(f"object {o} colour") for _ in range(3)))
        n_points = _count(tokens, f"object {o} vertex count", MAX_POINTS)
        vertices = [
            tuple(tokens.number(f"object {o} vertex {i}") for _ in range(3))
            for i in range(n_points)
        ]
        n_tris = _count(tokens, f"object {o} triangle count", MAX_POINTS)
        triangles = []
        for i in range(n_tris):
            tri = tuple(tokens.integer(f"object {o} triangle {i}") for _ in range(3))
            if any(not 0 <= v < n_points for v in tri):
                raise ModelFormatError(
                    f"object {o} triangle {i} refers to a missing vertex: {tri}"
                )
            triangles.append(tri)
        meshes.append(Mesh(color, vertices, triangles))
    return Scene(meshes)


def load_scene(path: str | Path) -> Scene:
    """Read and parse a scene file."""
    return parse_scene(Path(path).read_text())