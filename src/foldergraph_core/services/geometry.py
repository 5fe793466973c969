"""
Geometry kernel for folder puddles.

Pure functions over Points: side-of-line test, line distance, and a
QuickHull convex hull (recursive divide and conquer). Nothing here keeps
state between calls.
"""

import math
from typing import Dict, Iterable, List, Sequence

from ..domain.models import Point, ORIGIN


def side(p1: Point, p2: Point, p: Point) -> int:
    """
    Return which side of the directed line p1 -> p2 the point p lies on.

    Returns:
        1 or -1 for the two half-planes, 0 if p is on the line
    """
    val = (p.y - p1.y) * (p2.x - p1.x) - (p2.y - p1.y) * (p.x - p1.x)
    if val > 0:
        return 1
    if val < 0:
        return -1
    return 0


def line_distance(p1: Point, p2: Point, p: Point) -> float:
    """
    Value proportional to the distance between p and the line p1 -> p2.

    Only good for comparing points against the same line.
    """
    return abs((p.y - p1.y) * (p2.x - p1.x) - (p2.y - p1.y) * (p.x - p1.x))


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return p1.distance_to(p2)


def quick_hull(
    points: Sequence[Point],
    p1: Point,
    p2: Point,
    which_side: int,
    hull: Dict[Point, None],
) -> None:
    """
    Collect the hull points on one side of the line p1 -> p2.

    Args:
        points: All candidate points
        p1, p2: End points of the dividing line
        which_side: 1 or -1, the half-plane to search
        hull: Ordered set (dict keys) the hull points are added to
    """
    index = -1
    max_dist = 0.0

    # Farthest point from the line on the requested side
    for i, p in enumerate(points):
        dist = line_distance(p1, p2, p)
        if side(p1, p2, p) == which_side and dist > max_dist:
            index = i
            max_dist = dist

    if index == -1:
        hull.setdefault(p1)
        hull.setdefault(p2)
        return

    far = points[index]
    quick_hull(points, far, p1, -side(far, p1, p2), hull)
    quick_hull(points, far, p2, -side(far, p2, p1), hull)


def convex_hull(points: Iterable[Point]) -> List[Point]:
    """
    Compute the convex hull of a set of points with QuickHull.

    Fewer than three points are returned unchanged. Otherwise the result
    holds each hull vertex once, in the order it was found (not sorted).
    Extremes are picked by x, then y, so a vertical column still spans
    both of its ends.
    """
    pts = list(points)
    if len(pts) < 3:
        return pts

    min_x = 0
    max_x = 0
    for i in range(1, len(pts)):
        if (pts[i].x, pts[i].y) < (pts[min_x].x, pts[min_x].y):
            min_x = i
        if (pts[i].x, pts[i].y) > (pts[max_x].x, pts[max_x].y):
            max_x = i

    hull: Dict[Point, None] = {}
    quick_hull(pts, pts[min_x], pts[max_x], 1, hull)
    quick_hull(pts, pts[min_x], pts[max_x], -1, hull)
    return list(hull)


def centroid(points: Sequence[Point]) -> Point:
    """Average of the points, ORIGIN if there are none."""
    if not points:
        return ORIGIN
    xc = sum(p.x for p in points) / len(points)
    yc = sum(p.y for p in points) / len(points)
    return Point(xc, yc)


def sort_counter_clockwise(points: Iterable[Point]) -> List[Point]:
    """
    Sort points by angle around their centroid.

    Used to turn an unordered hull into a drawable polygon.
    """
    pts = list(points)
    c = centroid(pts)
    return sorted(pts, key=lambda p: math.atan2(p.y - c.y, p.x - c.x))


def bounding_box_center(points: Iterable[Point]) -> Point:
    """Midpoint of the axis-aligned bounding box, ORIGIN if empty."""
    pts = list(points)
    if not pts:
        return ORIGIN

    xmin = xmax = pts[0].x
    ymin = ymax = pts[0].y
    for p in pts[1:]:
        xmin = min(xmin, p.x)
        xmax = max(xmax, p.x)
        ymin = min(ymin, p.y)
        ymax = max(ymax, p.y)

    return Point(xmin + (xmax - xmin) / 2, ymin + (ymax - ymin) / 2)


def ease_out_quad(value: float, t: float) -> float:
    """Scale value by the quadratic ease-out 1 - t^2 (t in [0, 1])."""
    return value * (1 - t * t)
