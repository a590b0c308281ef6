import pytest

from helpers import random_point_sets
from giftwrap import HULL_METHODS, Point, compute_hull, graham_scan, jarvis_march


SQUARE_WITH_MIDPOINTS = [Point(*p) for p in [
    (2, 4), (0, 0), (4, 2), (2, 0), (4, 0), (4, 4), (0, 4), (0, 2), (1, 3),
]]


@pytest.mark.parametrize("hull_fn", [jarvis_march, graham_scan])
def test_collinear_boundary_points_dropped(hull_fn):
    assert hull_fn(SQUARE_WITH_MIDPOINTS) == [(0, 0), (4, 0), (4, 4), (0, 4)]


@pytest.mark.parametrize("hull_fn", [jarvis_march, graham_scan])
def test_fewer_than_three_returned_as_is(hull_fn):
    assert hull_fn([Point(1, 0), Point(0, 1)]) == [(1, 0), (0, 1)]


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_methods_agree(seed):
    for pts in random_point_sets(seed, span=4):
        assert compute_hull(pts, method="graham") == compute_hull(pts, method="jarvis")


def test_default_method_is_jarvis():
    assert compute_hull(SQUARE_WITH_MIDPOINTS) == compute_hull(SQUARE_WITH_MIDPOINTS, method="jarvis")
    assert set(HULL_METHODS) == {"jarvis", "graham"}


def test_unknown_method():
    with pytest.raises(ValueError, match="quickhull"):
        compute_hull([(0, 0)], method="quickhull")
