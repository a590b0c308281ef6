"""
Jarvis march that yields its intermediate states for animation.

The loop mirrors ``jarvis_march`` comparison for comparison, so the hull in
the final step is identical to the one the plain version returns. Points
are named P1..Pn in the narration; pass ``labels`` to use other numbers.
"""
from typing import Iterator, Optional, Sequence

from giftwrap.degenerate import classify_hull
from giftwrap.geometry import cross, distance_sq, start_index
from giftwrap.types import AlgorithmStep, Point, StepKind


def jarvis_march_trace(points: Sequence[Point],
                       labels: Optional[Sequence[int]] = None) -> Iterator[AlgorithmStep]:
    """
    Computes the convex hull using Jarvis March and yields states for animation.

    Step order: ``start``, then per hull vertex a ``found`` step committing it
    and a ``found`` step for the initial candidate, then for every probe a
    ``checking`` step followed by a ``found`` step if the probe becomes the
    new candidate. A single ``complete`` step ends the trace.
    """
    points = list(points)
    n = len(points)
    if labels is None:
        labels = range(1, n + 1)
    labels = list(labels)

    def name(i: int) -> str:
        return f"P{labels[i]}"

    if n < 3:
        yield AlgorithmStep(
            kind=StepKind.COMPLETE,
            description=f"Not enough points for a convex hull (n={n}), the hull is the points themselves",
            hull_so_far=tuple(points),
            hull_type=classify_hull(n) if n else None,
        )
        return

    start = start_index(points)
    yield AlgorithmStep(
        kind=StepKind.START,
        description=f"Starting point found: lowest Y coordinate ({name(start)})",
        current_point=points[start],
    )

    hull = []
    current = start

    while True:
        pivot = points[current]
        hull.append(pivot)
        yield AlgorithmStep(
            kind=StepKind.FOUND,
            description=f"Added {name(current)} to hull. Searching next...",
            current_point=pivot,
            hull_so_far=tuple(hull),
        )

        candidate = current
        for i, point in enumerate(points):
            if i == current:  # Don't check against self
                continue

            if candidate == current:
                candidate = i
                yield AlgorithmStep(
                    kind=StepKind.FOUND,
                    description=f"Initial candidate for next: {name(candidate)}",
                    current_point=pivot,
                    candidate_point=point,
                    hull_so_far=tuple(hull),
                    highlight_line=(pivot, point),
                )
                continue

            yield AlgorithmStep(
                kind=StepKind.CHECKING,
                description=f"From {name(current)}: checking {name(i)} against candidate {name(candidate)}",
                current_point=pivot,
                candidate_point=points[candidate],
                checking_point=point,
                hull_so_far=tuple(hull),
                highlight_line=(pivot, point),
            )

            d = cross(pivot, points[candidate], point)
            if d < 0:
                reason = f"lies right of {name(current)}->{name(candidate)}"
            elif d == 0 and distance_sq(pivot, point) > distance_sq(pivot, points[candidate]):
                reason = "is collinear but farther"
            else:
                continue

            old = name(candidate)
            candidate = i
            yield AlgorithmStep(
                kind=StepKind.FOUND,
                description=f"{name(i)} {reason} - new candidate (was {old})",
                current_point=pivot,
                candidate_point=point,
                checking_point=point,
                hull_so_far=tuple(hull),
                highlight_line=(pivot, point),
            )

        current = candidate
        if current == start or len(hull) >= n:
            break

    hull_type = classify_hull(len(hull))
    yield AlgorithmStep(
        kind=StepKind.COMPLETE,
        description=f"Convex hull complete: {hull_type.value} with {len(hull)} vertices",
        hull_so_far=tuple(hull),
        hull_type=hull_type,
    )
