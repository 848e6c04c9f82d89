from __future__ import annotations

from dataclasses import dataclass

EPSILON = 1e-9
POINT_TOLERANCE = 1e-7


@dataclass(frozen=True)
class Point:
    """A standard 2D coordinate."""

    x: float
    y: float

    @classmethod
    def from_tuple(cls, coords: tuple[float, float] | list[float]) -> Point:
        """Build a point from an `(x, y)` pair."""
        x, y = coords
        return cls(float(x), float(y))

    def to_tuple(self) -> tuple[float, float]:
        """Return this point as an `(x, y)` tuple."""
        return (self.x, self.y)

    def is_close(self, other: Point, tolerance: float = POINT_TOLERANCE) -> bool:
        """Compare two points axis by axis within an absolute tolerance."""
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


@dataclass(frozen=True)
class Edge:
    """A directed segment from `start` to `end`.

    `contains` treats the edge as an infinite line and reports the right-hand
    side (y axis pointing up) as inside. `intersection` works on the supporting
    lines too; bounding the result to the finite segments is left to callers
    via `spans`.
    """

    start: Point
    end: Point

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide."""
        return self.dx == 0 and self.dy == 0

    def contains(self, point: Point) -> bool:
        """Return True if `point` is on the line or on its right-hand side."""
        return _cross(self.dx, self.dy, point.x - self.start.x, point.y - self.start.y) <= 0

    def intersection(self, other: Edge) -> Point | None:
        """Intersect the supporting lines of two edges.

        Returns None when the lines are parallel or coincident, or when either
        edge has zero length.
        """
        rx, ry = self.dx, self.dy
        sx, sy = other.dx, other.dy
        denominator = _cross(rx, ry, sx, sy)
        scale = abs(rx) * abs(sy) + abs(ry) * abs(sx)
        if scale == 0 or abs(denominator) <= EPSILON * scale:
            return None

        qx = other.start.x - self.start.x
        qy = other.start.y - self.start.y
        t = _cross(qx, qy, sx, sy) / denominator

        # Exact coordinates on axis-aligned edges keep boundary points on the boundary.
        x = self.start.x if rx == 0 else other.start.x if sx == 0 else self.start.x + t * rx
        y = self.start.y if ry == 0 else other.start.y if sy == 0 else self.start.y + t * ry
        return Point(x, y)

    def spans(self, point: Point, tolerance: float = EPSILON) -> bool:
        """Check whether a point on the supporting line falls within the finite segment."""
        return (
            min(self.start.x, self.end.x) - tolerance
            <= point.x
            <= max(self.start.x, self.end.x) + tolerance
            and min(self.start.y, self.end.y) - tolerance
            <= point.y
            <= max(self.start.y, self.end.y) + tolerance
        )

    def parameter_of(self, point: Point) -> float:
        """Position of `point` along the edge, 0.0 at `start` and 1.0 at `end`."""
        length_sq = self.dx * self.dx + self.dy * self.dy
        if length_sq == 0:
            return 0.0
        return ((point.x - self.start.x) * self.dx + (point.y - self.start.y) * self.dy) / length_sq
