"""
Helpers for inputs that never reach the wrapping loop: duplicates,
0-2 points and collinear sets, plus the vertex-count classifier.
"""
from typing import List, Sequence

from giftwrap.geometry import cross, distance_sq, lower_first
from giftwrap.types import HullType, Point


def _same(a: Point, b: Point, tolerance: float) -> bool:
    if tolerance == 0.0:
        return a.x == b.x and a.y == b.y
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance


def remove_duplicates(points: Sequence[Point], tolerance: float = 0.0) -> List[Point]:
    """
    Drop repeated points, keeping first occurrences in input order.

    With the default tolerance of 0 only exactly equal points collapse.
    A positive tolerance merges points whose coordinates both differ by
    at most that amount from an already kept point.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    unique: List[Point] = []
    for p in points:
        if not any(_same(u, p, tolerance) for u in unique):
            unique.append(p)
    return unique


def are_collinear(points: Sequence[Point]) -> bool:
    if len(points) < 3:
        return True
    p0, p1 = points[0], points[1]
    return all(cross(p0, p1, p) == 0 for p in points[2:])


def segment_endpoints(points: Sequence[Point]) -> List[Point]:
    """
    The farthest-apart pair of points, lower y (then lower x) first.

    Exact distance ties keep the first pair found.
    """
    if len(points) <= 1:
        return list(points)

    max_dist = -1.0
    p1 = p2 = points[0]
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            dist = distance_sq(points[i], points[j])
            if dist > max_dist:
                max_dist = dist
                p1, p2 = points[i], points[j]

    if lower_first(p1) < lower_first(p2):
        return [p1, p2]
    return [p2, p1]


def classify_hull(vertex_count: int) -> HullType:
    if vertex_count == 1:
        return HullType.POINT
    if vertex_count == 2:
        return HullType.SEGMENT
    if vertex_count == 3:
        return HullType.TRIANGLE
    return HullType.QUADRILATERAL
