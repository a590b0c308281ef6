import pytest

from giftwrap import HullType, Point, are_collinear, classify_hull, remove_duplicates, segment_endpoints


class TestRemoveDuplicates:
    def test_keeps_first_occurrence_order(self):
        pts = [Point(1, 1), Point(0, 0), Point(1, 1), Point(2, 0), Point(0, 0)]
        assert remove_duplicates(pts) == [(1, 1), (0, 0), (2, 0)]

    def test_empty(self):
        assert remove_duplicates([]) == []

    def test_near_duplicates_distinct_without_tolerance(self):
        pts = [Point(0, 0), Point(0, 1e-12)]
        assert len(remove_duplicates(pts)) == 2

    def test_tolerance_merges_into_first(self):
        pts = [Point(0, 0), Point(0.05, -0.05), Point(0.2, 0)]
        assert remove_duplicates(pts, tolerance=0.1) == [(0, 0), (0.2, 0)]

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            remove_duplicates([Point(0, 0)], tolerance=-0.1)


class TestAreCollinear:
    def test_diagonal(self):
        assert are_collinear([Point(0, 0), Point(1, 1), Point(2, 2), Point(-5, -5)])

    def test_one_point_off_the_line(self):
        assert not are_collinear([Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3.5)])

    def test_fewer_than_three(self):
        assert are_collinear([Point(0, 0), Point(1, 5)])


class TestSegmentEndpoints:
    def test_farthest_pair_lower_first(self):
        pts = [Point(2, 2), Point(3, 3), Point(0, 0), Point(1, 1)]
        assert segment_endpoints(pts) == [(0, 0), (3, 3)]

    def test_equal_y_lower_x_first(self):
        assert segment_endpoints([Point(4, 1), Point(-1, 1)]) == [(-1, 1), (4, 1)]

    def test_first_pair_wins_on_ties(self):
        pts = [Point(0, 0), Point(2, 0), Point(1, 1), Point(1, -1)]
        assert segment_endpoints(pts) == [(0, 0), (2, 0)]

    def test_single_point(self):
        assert segment_endpoints([Point(1, 1)]) == [(1, 1)]


@pytest.mark.parametrize("count, expected", [
    (1, HullType.POINT),
    (2, HullType.SEGMENT),
    (3, HullType.TRIANGLE),
    (4, HullType.QUADRILATERAL),
    (7, HullType.QUADRILATERAL),
    (0, HullType.QUADRILATERAL),
])
def test_classify_hull(count, expected):
    assert classify_hull(count) == expected
