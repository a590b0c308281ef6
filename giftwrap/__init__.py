from giftwrap.degenerate import are_collinear, classify_hull, remove_duplicates, segment_endpoints
from giftwrap.graham_scan import graham_scan
from giftwrap.hull import HULL_METHODS, compute_hull, compute_hull_steps
from giftwrap.jarvis_march import jarvis_march
from giftwrap.jarvis_march_trace import jarvis_march_trace
from giftwrap.logging_config import setup_logging
from giftwrap.types import AlgorithmStep, HullResult, HullType, Point, StepKind

__all__ = [
    "AlgorithmStep",
    "HULL_METHODS",
    "HullResult",
    "HullType",
    "Point",
    "StepKind",
    "are_collinear",
    "classify_hull",
    "compute_hull",
    "compute_hull_steps",
    "graham_scan",
    "jarvis_march",
    "jarvis_march_trace",
    "remove_duplicates",
    "segment_endpoints",
    "setup_logging",
]
