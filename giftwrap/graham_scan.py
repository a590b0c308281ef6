from functools import cmp_to_key
from typing import List, Sequence

from giftwrap.geometry import cross, distance_sq, start_index
from giftwrap.types import Point

# Faster than Jarvis for large inputs: O(n log n) instead of O(n*h)


def graham_scan(points: Sequence[Point]) -> List[Point]:
    """
    Same contract as ``jarvis_march``: CCW hull from the lowest point,
    collinear boundary points dropped.
    """
    if len(points) < 3:
        return list(points)

    # min y point as pivot; every other point is sorted by its angle around it
    p0 = points[start_index(points)]
    rest = [p for p in points if p != p0]

    def by_angle(a: Point, b: Point) -> int:
        d = cross(p0, a, b)
        if d > 0:  # a comes first, b is further counter-clockwise
            return -1
        if d < 0:
            return 1
        # same direction from the pivot: nearer first
        da, db = distance_sq(p0, a), distance_sq(p0, b)
        return (da > db) - (da < db)

    rest.sort(key=cmp_to_key(by_angle))

    hull = [p0]
    for p in rest:
        # pop while the last turn is clockwise or collinear (!= left turn)
        while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    return hull
