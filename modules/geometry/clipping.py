from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from modules.geometry.primitives import EPSILON, Edge, Point
from schemas.geometry_models import Extent
from utils.logger import get_logger

log = get_logger("Clipping")


def boundary_edges(extent: Extent) -> list[Edge]:
    """
    Return the viewport boundaries as directed edges: left, top, right, bottom.

    The edges walk the rectangle clockwise (y axis up), so the interior lies on
    the right-hand side of every edge and `Edge.contains` reports it as inside.
    """
    origin, top_left, top_right, bottom_right = extent.corners
    return [
        Edge(origin, top_left),
        Edge(top_left, top_right),
        Edge(top_right, bottom_right),
        Edge(bottom_right, origin),
    ]


def _segment_crossings(segment: Edge, boundaries: list[Edge]) -> list[Point]:
    """Finite crossings of a segment with the boundary edges, ordered along the segment."""
    if segment.is_degenerate:
        return []

    found: list[tuple[float, Point]] = []
    for boundary in boundaries:
        crossing = segment.intersection(boundary)
        if crossing is None:
            continue
        if not (segment.spans(crossing) and boundary.spans(crossing)):
            continue
        found.append((segment.parameter_of(crossing), crossing))

    found.sort(key=lambda item: item[0])
    crossings: list[Point] = []
    for _, crossing in found:
        # A corner is reported by both of its boundaries.
        if crossings and crossings[-1].is_close(crossing, EPSILON):
            continue
        crossings.append(crossing)
    return crossings


def _flush(run: list[Point], clipped: list[list[Point]]) -> None:
    if len(run) >= 2:
        clipped.append(list(run))
    run.clear()


def clip_path(path: Sequence[Point], extent: Extent) -> list[list[Point]]:
    """
    Clip an open polyline to the viewport.

    Walks consecutive point pairs and keeps the parts lying inside the closed
    rectangle. Each maximal inside run becomes one sub-path, with interpolated
    boundary points wherever the path enters or leaves. A segment whose
    endpoints are both outside can still pass through the rectangle; that
    traversal is emitted as its own two-point sub-path.

    Args:
        path: Consecutive vertices of the polyline. No closing edge is implied.
        extent: The viewport to clip against.

    Returns:
        Sub-paths in the order they occur along the input path. Empty when
        nothing of the path lies inside.
    """
    if len(path) == 1:
        return [[path[0]]] if extent.contains(path[0]) else []

    boundaries = boundary_edges(extent)
    clipped: list[list[Point]] = []
    run: list[Point] = []

    for start, end in pairwise(path):
        start_inside = extent.contains(start)
        end_inside = extent.contains(end)

        if start_inside and end_inside:
            if not run:
                run.append(start)
            run.append(end)
        elif start_inside:
            if not run:
                run.append(start)
            crossings = _segment_crossings(Edge(start, end), boundaries)
            if crossings and not crossings[-1].is_close(start, EPSILON):
                run.append(crossings[-1])
            _flush(run, clipped)
        elif end_inside:
            crossings = _segment_crossings(Edge(start, end), boundaries)
            if crossings:
                run.append(crossings[0])
            if not run or not run[-1].is_close(end, EPSILON):
                run.append(end)
        else:
            crossings = _segment_crossings(Edge(start, end), boundaries)
            if len(crossings) >= 2:
                clipped.append([crossings[0], crossings[-1]])

    _flush(run, clipped)
    return clipped


def _clip_against(polygon: list[Point], boundary: Edge) -> list[Point]:
    """One Sutherland-Hodgman pass: keep the part of `polygon` inside `boundary`."""
    output: list[Point] = []
    previous = polygon[-1]
    previous_inside = boundary.contains(previous)

    for current in polygon:
        current_inside = boundary.contains(current)
        if current_inside != previous_inside:
            crossing = Edge(previous, current).intersection(boundary)
            if crossing is not None:
                output.append(crossing)
        if current_inside:
            output.append(current)
        previous, previous_inside = current, current_inside

    return output


def clip_polygon(polygon: Sequence[Point], extent: Extent) -> list[Point]:
    """
    Clip a closed polygon to the viewport with Sutherland-Hodgman.

    The ring is reduced against the left, top, right and bottom half-planes in
    that order. Vertex winding is preserved and rectangle corners appear where
    consecutive passes both cut the same region.

    Args:
        polygon: Ring vertices; the last vertex connects back to the first.
        extent: The viewport to clip against.

    Returns:
        The clipped ring, or an empty list when the polygon misses the viewport
        or the viewport has no area.
    """
    if extent.width == 0 or extent.height == 0:
        return []

    clipped = list(polygon)
    for boundary in boundary_edges(extent):
        if not clipped:
            break
        clipped = _clip_against(clipped, boundary)
        if not clipped:
            log.debug(
                f"Polygon of {len(polygon)} vertices eliminated by boundary "
                f"{boundary.start.to_tuple()} -> {boundary.end.to_tuple()}"
            )
    return clipped
