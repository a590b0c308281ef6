"""
Jarvis march (gift wrapping).

From the current hull vertex, scan every point and keep the candidate that
no other point lies to the right of, so the wrap runs counter-clockwise.
On a collinear tie keep the farther point, so points lying inside a hull
edge are never picked. O(n*h).
"""
import logging
from typing import List, Sequence

from giftwrap.geometry import cross, distance_sq, start_index
from giftwrap.types import Point

logger = logging.getLogger(__name__)


def next_hull_index(points: Sequence[Point], current: int) -> int:
    """Index of the hull vertex following ``points[current]`` in CCW order."""
    pivot = points[current]
    candidate = current
    for i, point in enumerate(points):
        if i == current:
            continue
        if candidate == current:
            candidate = i
            continue
        d = cross(pivot, points[candidate], point)
        if d < 0 or (d == 0 and distance_sq(pivot, point) > distance_sq(pivot, points[candidate])):
            candidate = i
    return candidate


def jarvis_march(points: Sequence[Point]) -> List[Point]:
    """
    Hull vertices in CCW order, starting from the lowest (then leftmost) point.

    Expects deduplicated, non-collinear points; fewer than 3 are returned as is.
    """
    n = len(points)
    if n < 3:
        return list(points)

    start = start_index(points)
    hull: List[Point] = []
    current = start

    while True:
        hull.append(points[current])
        current = next_hull_index(points, current)
        if current == start:  # Completed the loop
            break
        if len(hull) >= n:
            logger.warning("Gift wrapping stopped after %d vertices without closing the hull", n)
            break

    return hull
