"""Flat triangle generators used by the plant drawing callbacks.

Every generator appends vertices (x, y, depth) with a packed RGBA color and
triangle indices to a shared ``PolyData``. Depth only orders the layers
(branches behind leaves behind flowers); all shapes are planar.
"""

# Standard library
from collections.abc import Sequence
from typing import TypeAlias

# Third-party libraries
import numpy as np
import numpy.typing as npt

# Type Aliases
Color: TypeAlias = Sequence[int]


def pack_color(rgba: Color) -> int:
    """Pack 0..255 RGBA channels into one ``0xRRGGBBAA`` integer."""
    r, g, b, a = (int(min(max(round(c), 0), 255)) for c in rgba)
    return (r << 24) | (g << 16) | (b << 8) | a


class PolyData:
    """Growable triangle mesh."""

    def __init__(self) -> None:
        self.positions: list[tuple[float, float, float]] = []
        self.colors: list[int] = []
        self.indices: list[int] = []

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def clear(self) -> None:
        self.positions = []
        self.colors = []
        self.indices = []

    def add_vertex(self, point: npt.ArrayLike, depth: float, color: int) -> int:
        x, y = np.asarray(point, dtype=np.float64)[:2]
        self.positions.append((float(x), float(y), float(depth)))
        self.colors.append(color)
        return len(self.positions) - 1

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self.indices.extend((a, b, c))

    def add_fan(self, center: npt.ArrayLike, rim: npt.NDArray[np.float64], depth: float, color: int) -> None:
        """Triangle fan from ``center`` around the closed polygon ``rim``."""
        hub = self.add_vertex(center, depth, color)
        first = self.vertex_count
        for point in rim:
            self.add_vertex(point, depth, color)
        count = len(rim)
        for i in range(count):
            self.add_triangle(hub, first + i, first + (i + 1) % count)

    def as_arrays(self) -> tuple[npt.NDArray[np.float32], npt.NDArray[np.uint32], npt.NDArray[np.uint32]]:
        """
        Return the mesh as numpy arrays.

        Returns
        -------
        tuple
            ``(positions (N, 3) float32, colors (N,) uint32,
            indices (M, 3) uint32)``.
        """
        positions = np.array(self.positions, dtype=np.float32).reshape(-1, 3)
        colors = np.array(self.colors, dtype=np.uint32)
        indices = np.array(self.indices, dtype=np.uint32).reshape(-1, 3)
        return positions, colors, indices


def _frame(start: npt.ArrayLike, end: npt.ArrayLike) -> tuple[np.ndarray, np.ndarray, np.ndarray, float] | None:
    """Origin, unit direction, unit normal and length of a segment, or None if degenerate."""
    p0 = np.asarray(start, dtype=np.float64)[:2]
    p1 = np.asarray(end, dtype=np.float64)[:2]
    delta = p1 - p0
    length = float(np.hypot(*delta))
    if not np.isfinite(length) or length == 0.0:
        return None
    direction = delta / length
    normal = np.array([-direction[1], direction[0]])
    return p0, direction, normal, length


def gen_line(
    start: npt.ArrayLike,
    start_width: float,
    end: npt.ArrayLike,
    end_width: float,
    depth: float,
    color: Color,
    poly: PolyData,
) -> None:
    """Tapered quad from ``start`` (``start_width`` wide) to ``end`` (``end_width`` wide)."""
    frame = _frame(start, end)
    if frame is None:
        return
    p0, direction, normal, length = frame
    p1 = p0 + direction * length
    packed = pack_color(color)

    a = poly.add_vertex(p0 + normal * start_width * 0.5, depth, packed)
    b = poly.add_vertex(p0 - normal * start_width * 0.5, depth, packed)
    c = poly.add_vertex(p1 - normal * end_width * 0.5, depth, packed)
    d = poly.add_vertex(p1 + normal * end_width * 0.5, depth, packed)
    poly.add_triangle(a, b, c)
    poly.add_triangle(a, c, d)


def gen_line_kite(
    start: npt.ArrayLike,
    end: npt.ArrayLike,
    width: float,
    ratio: float,
    depth: float,
    color: Color,
    poly: PolyData,
) -> None:
    """Kite from ``start`` to ``end``; its widest point sits at ``ratio`` of the length."""
    frame = _frame(start, end)
    if frame is None:
        return
    p0, direction, normal, length = frame
    waist = p0 + direction * length * ratio
    packed = pack_color(color)

    tip_start = poly.add_vertex(p0, depth, packed)
    left = poly.add_vertex(waist + normal * width * 0.5, depth, packed)
    tip_end = poly.add_vertex(p0 + direction * length, depth, packed)
    right = poly.add_vertex(waist - normal * width * 0.5, depth, packed)
    poly.add_triangle(tip_start, left, tip_end)
    poly.add_triangle(tip_start, tip_end, right)


def gen_obb(
    center: npt.ArrayLike,
    size: npt.ArrayLike,
    rotation: float,
    depth: float,
    color: Color,
    poly: PolyData,
) -> None:
    """Oriented box of ``size`` (width, height) rotated by ``rotation`` radians."""
    half = np.asarray(size, dtype=np.float64)[:2] * 0.5
    c, s = np.cos(rotation), np.sin(rotation)
    basis = np.array([[c, -s], [s, c]])
    corners = np.array([[-1, -1], [1, -1], [1, 1], [-1, 1]], dtype=np.float64) * half
    points = corners @ basis.T + np.asarray(center, dtype=np.float64)[:2]
    packed = pack_color(color)

    first = poly.vertex_count
    for point in points:
        poly.add_vertex(point, depth, packed)
    poly.add_triangle(first, first + 1, first + 2)
    poly.add_triangle(first, first + 2, first + 3)


def _ring(center: npt.ArrayLike, radii: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    theta = np.linspace(0.0, 2.0 * np.pi, len(radii), endpoint=False)
    offsets = np.stack([np.cos(theta), np.sin(theta)], axis=1) * radii[:, None]
    return offsets + np.asarray(center, dtype=np.float64)[:2]


def gen_circle(
    center: npt.ArrayLike,
    radius: float,
    segments: int,
    depth: float,
    color: Color,
    poly: PolyData,
) -> None:
    """Regular polygon with ``segments`` sides approximating a disc."""
    rim = _ring(center, np.full(segments, radius, dtype=np.float64))
    poly.add_fan(center, rim, depth, pack_color(color))


def gen_star(
    center: npt.ArrayLike,
    outer_radius: float,
    inner_radius: float,
    points: int,
    depth: float,
    color: Color,
    poly: PolyData,
) -> None:
    """Star with ``points`` tips alternating between outer and inner radius."""
    radii = np.tile([outer_radius, inner_radius], points).astype(np.float64)
    rim = _ring(center, radii)
    poly.add_fan(center, rim, depth, pack_color(color))
