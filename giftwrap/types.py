"""Value types shared by the hull computers and the step tracer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Point(NamedTuple):
    x: float
    y: float


class HullType(str, Enum):
    POINT = "point"
    SEGMENT = "segment"
    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"


class StepKind(str, Enum):
    START = "start"
    CHECKING = "checking"
    FOUND = "found"
    COMPLETE = "complete"


@dataclass(frozen=True)
class HullResult:
    """Category of the hull plus its vertices (CCW for 3+ vertices)."""
    hull_type: HullType
    vertices: Tuple[Point, ...] = ()


@dataclass(frozen=True)
class AlgorithmStep:
    """
    One observable state of the gift-wrapping loop.

    ``hull_so_far`` is a snapshot taken when the step was recorded.
    ``hull_type`` is only set on the ``complete`` step.
    """
    kind: StepKind
    description: str
    current_point: Optional[Point] = None
    candidate_point: Optional[Point] = None
    checking_point: Optional[Point] = None
    hull_so_far: Tuple[Point, ...] = ()
    highlight_line: Optional[Tuple[Point, Point]] = None
    hull_type: Optional[HullType] = None
