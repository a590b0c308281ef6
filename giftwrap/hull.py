"""
Public entry points: the hull of a point set and the animation trace of
the gift-wrapping loop that builds it.
"""
import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from giftwrap import config
from giftwrap.degenerate import are_collinear, classify_hull, remove_duplicates, segment_endpoints
from giftwrap.geometry import as_points
from giftwrap.graham_scan import graham_scan
from giftwrap.jarvis_march import jarvis_march
from giftwrap.jarvis_march_trace import jarvis_march_trace
from giftwrap.types import AlgorithmStep, HullResult, HullType, Point, StepKind

logger = logging.getLogger(__name__)

HULL_METHODS: Dict[str, Callable[[Sequence[Point]], List[Point]]] = {
    "jarvis": jarvis_march,
    "graham": graham_scan,
}


def _degenerate_hull(unique: List[Point]) -> Optional[HullResult]:
    if not unique:
        logger.debug("No points, returning an empty hull")
        return HullResult(HullType.POINT, ())
    if len(unique) == 1:
        logger.debug("Single point hull")
        return HullResult(HullType.POINT, tuple(unique))
    if len(unique) == 2 or are_collinear(unique):
        logger.debug("%d points on a line, returning segment endpoints", len(unique))
        return HullResult(HullType.SEGMENT, tuple(segment_endpoints(unique)))
    return None


def _unique(points: Iterable, tolerance: Optional[float]) -> List[Point]:
    if tolerance is None:
        tolerance = config.DEFAULT_TOLERANCE
    pts = as_points(points)
    unique = remove_duplicates(pts, tolerance)
    if len(unique) != len(pts):
        logger.debug("Removed %d duplicate point(s)", len(pts) - len(unique))
    return unique


def compute_hull(points: Iterable, method: Optional[str] = None,
                 tolerance: Optional[float] = None) -> HullResult:
    """
    Convex hull of ``points`` (Points or plain (x, y) pairs).

    Defined for every finite input: empty and single-point sets give a
    ``point`` result, two distinct or collinear points a ``segment`` with the
    lower point first, anything else the CCW polygon from ``method``.
    """
    if method is None:
        method = config.DEFAULT_METHOD
    if method not in HULL_METHODS:
        raise ValueError(f"Unknown hull method {method!r}, expected one of {sorted(HULL_METHODS)}")

    unique = _unique(points, tolerance)
    result = _degenerate_hull(unique)
    if result is not None:
        return result

    hull = HULL_METHODS[method](unique)
    logger.debug("%s hull of %d points has %d vertices", method, len(unique), len(hull))
    return HullResult(classify_hull(len(hull)), tuple(hull))


def compute_hull_steps(points: Iterable, tolerance: Optional[float] = None) -> Tuple[AlgorithmStep, ...]:
    """
    Every intermediate state of the gift-wrapping loop, for step-by-step playback.

    Degenerate inputs produce a single ``complete`` step. Otherwise the last
    step's ``hull_so_far`` equals ``compute_hull(points).vertices``. Points are
    labelled by their position in ``points`` (1-based, first occurrence).
    """
    pts = as_points(points)
    unique = _unique(pts, tolerance)

    degenerate = _degenerate_hull(unique)
    if degenerate is not None:
        return (AlgorithmStep(
            kind=StepKind.COMPLETE,
            description=f"Hull is trivial: {degenerate.hull_type.value} "
                        f"with {len(degenerate.vertices)} vertices",
            hull_so_far=degenerate.vertices,
            hull_type=degenerate.hull_type,
        ),)

    # label each unique point by where it first shows up in the caller's input
    labels = [pts.index(p) + 1 for p in unique]
    steps = tuple(jarvis_march_trace(unique, labels))
    logger.debug("Traced %d steps for %d points", len(steps), len(unique))
    return steps
