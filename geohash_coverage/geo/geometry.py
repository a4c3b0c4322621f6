"""
Geometry Predicates

Planar tests between points, segments, rectangles and polygon rings.
Coordinates are treated as flat (lng, lat) pairs; no geodesic correction.

A ring is a sequence of (lng, lat) vertices. The closing edge from the
last vertex back to the first is always tested, so rings may be given
either explicitly closed or implicitly closed.

Known limitations:
- Points exactly on an edge are resolved by the ray-casting tie-break,
  which is arbitrary. Boundary-aligned cells may therefore classify
  differently on either side of a border.
- Collinear segments that overlap along a stretch are only detected
  when an endpoint of one lies on the other (on_segment fallback).
"""

from typing import Sequence

from .codec import BoundingBox, Point

Ring = Sequence[Sequence[float]]


def direction(p1: Point, p2: Point, p3: Point) -> float:
    """Cross product sign of p3 relative to the directed line p1 -> p2."""
    return (p3[0] - p1[0]) * (p2[1] - p1[1]) - (p2[0] - p1[0]) * (p3[1] - p1[1])


def on_segment(p1: Point, p2: Point, p: Point) -> bool:
    """True if p lies in the bounding box of segment p1-p2 (used for collinear points)."""
    return (min(p1[0], p2[0]) <= p[0] <= max(p1[0], p2[0]) and
            min(p1[1], p2[1]) <= p[1] <= max(p1[1], p2[1]))


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Check whether segment p1-p2 intersects segment p3-p4.

    Touching endpoints count as an intersection.
    """
    d1 = direction(p3, p4, p1)
    d2 = direction(p3, p4, p2)
    d3 = direction(p1, p2, p3)
    d4 = direction(p1, p2, p4)

    if (((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and
            ((d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0))):
        return True

    if d1 == 0 and on_segment(p3, p4, p1):
        return True
    if d2 == 0 and on_segment(p3, p4, p2):
        return True
    if d3 == 0 and on_segment(p1, p2, p3):
        return True
    if d4 == 0 and on_segment(p1, p2, p4):
        return True

    return False


def point_in_polygon(point: Point, ring: Ring) -> bool:
    """
    Ray-casting point-in-polygon test.

    Casts a horizontal ray towards +lng and counts edge crossings; an odd
    count means inside. Points on an edge are not special-cased.
    """
    x, y = point[0], point[1]
    inside = False

    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


def _ring_edges(ring: Ring):
    n = len(ring)
    for i in range(n):
        j = (i + 1) % n
        yield (ring[i][0], ring[i][1]), (ring[j][0], ring[j][1])


def _any_edge_crossing(rect: BoundingBox, ring: Ring) -> bool:
    rect_edges = rect.edges()
    for a, b in _ring_edges(ring):
        for p1, p2 in rect_edges:
            if segments_intersect(p1, p2, a, b):
                return True
    return False


def rectangle_overlaps_polygon(rect: BoundingBox, ring: Ring) -> bool:
    """
    Check if a rectangle overlaps a ring.

    True if any rectangle corner is inside the ring, any ring vertex is
    inside the rectangle, or any rectangle edge crosses any ring edge.
    All three checks are needed: a ring can cut through a rectangle
    without either shape having a vertex inside the other.
    """
    for corner in rect.corners():
        if point_in_polygon(corner, ring):
            return True

    for vertex in ring:
        if rect.contains_point(vertex[0], vertex[1]):
            return True

    return _any_edge_crossing(rect, ring)


def rectangle_contained_in_polygon(rect: BoundingBox, ring: Ring) -> bool:
    """
    Check if a rectangle is fully inside a ring.

    All four corners must be inside, and no ring edge may cross a
    rectangle edge (a concave ring can dip into the rectangle between
    two inside corners).
    """
    for corner in rect.corners():
        if not point_in_polygon(corner, ring):
            return False

    return not _any_edge_crossing(rect, ring)
