import enum
import math

from pydantic import BaseModel, ConfigDict, Field, conlist, field_validator

from modules.geometry.primitives import Point

Coordinate = conlist(item_type=float, min_length=2, max_length=2)


class ShapeKind(enum.StrEnum):
    """How a point sequence should be interpreted when clipping."""

    PATH = "path"
    POLYGON = "polygon"


class Extent(BaseModel):
    """The clip rectangle [0, width] x [0, height], anchored at the origin."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., ge=0, description="Horizontal size of the viewport")
    height: float = Field(..., ge=0, description="Vertical size of the viewport")

    @field_validator("width", "height")
    @classmethod
    def reject_non_finite(cls, value: float) -> float:
        """Infinite or NaN dimensions cannot describe a drawable viewport."""
        if not math.isfinite(value):
            raise ValueError("extent dimensions must be finite")
        return value

    def contains(self, point: Point) -> bool:
        """Closed-rectangle membership; points on the boundary count as inside."""
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height

    @property
    def corners(self) -> list[Point]:
        """Rectangle corners in clockwise order starting at the origin."""
        return [
            Point(0.0, 0.0),
            Point(0.0, self.height),
            Point(self.width, self.height),
            Point(self.width, 0.0),
        ]


class ClipRequest(BaseModel):
    """A shape to clip, as read from a JSON document."""

    kind: ShapeKind = Field(default=ShapeKind.PATH, description="Open path or closed polygon")
    extent: Extent = Field(..., description="The viewport to clip against")
    points: list[Coordinate] = Field(default_factory=list, description="[[x, y], ...] vertices")

    def to_points(self) -> list[Point]:
        """Convert the raw coordinates into geometry points."""
        return [Point.from_tuple(coords) for coords in self.points]


class ClipResult(BaseModel):
    """Clipped geometry ready to be persisted.

    A path request yields zero or more sub-paths; a polygon request yields at
    most one ring.
    """

    kind: ShapeKind
    extent: Extent
    shapes: list[list[Coordinate]] = Field(default_factory=list)

    @classmethod
    def from_shapes(
        cls, kind: ShapeKind, extent: Extent, shapes: list[list[Point]], precision: int | None = None
    ) -> "ClipResult":
        """Build a result from point sequences, optionally rounding coordinates."""

        def _coords(point: Point) -> list[float]:
            if precision is None:
                return [point.x, point.y]
            return [round(point.x, precision), round(point.y, precision)]

        return cls(
            kind=kind,
            extent=extent,
            shapes=[[_coords(point) for point in shape] for shape in shapes],
        )
