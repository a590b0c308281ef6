from typing import Iterable, List, Sequence

from giftwrap.types import Point


def as_points(points: Iterable) -> List[Point]:
    """Coerce any iterable of (x, y) pairs into a list of Points."""
    out = []
    for p in points:
        if isinstance(p, Point):
            out.append(p)
            continue
        try:
            x, y = p
        except (TypeError, ValueError) as e:
            raise ValueError(f"Expected an (x, y) pair, got {p!r}") from e
        out.append(Point(x, y))
    return out


def cross(o: Point, a: Point, b: Point) -> float:
    # > 0: o->a->b turns left (CCW), < 0: right (CW), 0: collinear
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def distance_sq(p1: Point, p2: Point) -> float:
    return (p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2


def lower_first(p: Point):
    """Sort key for the canonical order: lowest y, then lowest x."""
    return (p.y, p.x)


def start_index(points: Sequence[Point]) -> int:
    # Lowest y, ties broken by lowest x. First occurrence wins.
    start = 0
    for i in range(1, len(points)):
        if lower_first(points[i]) < lower_first(points[start]):
            start = i
    return start
