import pytest

from route_mapping.core import InvalidParameterError, haversine_km
from route_mapping.route import (
    Route,
    RouteSegment,
    Sample,
    build_route,
    elevation_profile,
    point_at_distance,
    slice_route,
)

DEG_KM = haversine_km(0.0, 0.0, 0.0, 1.0)


class TestBuildRoute:
    def test_cumulative_distance(self, equator_route):
        assert equator_route.cumulative_distance[0] == 0.0
        assert equator_route.cumulative_distance[1] == pytest.approx(DEG_KM)
        assert equator_route.total_length == pytest.approx(2 * DEG_KM)

    def test_one_degree_is_about_111_km(self):
        assert DEG_KM == pytest.approx(111.195, abs=1e-3)

    def test_non_decreasing(self, bend_route):
        cum = bend_route.cumulative_distance
        assert len(cum) == len(bend_route.samples)
        assert all(b >= a for a, b in zip(cum, cum[1:]))

    def test_repeated_points_add_no_distance(self):
        route = build_route([Sample(1, 1), Sample(1, 1), Sample(1, 2)])
        assert route.cumulative_distance[1] == 0.0
        assert route.total_length > 0

    def test_empty_route(self):
        route = build_route([])
        assert route.total_length == 0.0
        assert route.is_degenerate

    def test_single_sample_route(self):
        route = build_route([Sample(5, 5)])
        assert route.cumulative_distance == (0.0,)
        assert route.total_length == 0.0
        assert route.is_degenerate

    def test_frozen(self, equator_route):
        with pytest.raises(AttributeError):
            equator_route.samples = ()  # type: ignore

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError):
            Route(samples=(Sample(0, 0),), cumulative_distance=(0.0, 1.0))


class TestPointAtDistance:
    def test_interpolates_within_segment(self, equator_route):
        point = point_at_distance(equator_route, DEG_KM / 2)
        assert point.lat == pytest.approx(0.0)
        assert point.lon == pytest.approx(0.5)
        assert point.elevation == pytest.approx(15.0)

    def test_vertex(self, equator_route):
        point = point_at_distance(equator_route, DEG_KM)
        assert point.lon == pytest.approx(1.0)

    def test_clamps_below_and_above(self, equator_route):
        assert point_at_distance(equator_route, -5) == equator_route.samples[0]
        assert point_at_distance(equator_route, 1e6) == equator_route.samples[-1]

    def test_empty_route_returns_none(self):
        assert point_at_distance(build_route([]), 1.0) is None

    def test_single_sample(self):
        route = build_route([Sample(3, 4, 5)])
        assert point_at_distance(route, 10.0) == Sample(3, 4, 5)


class TestSliceRoute:
    def test_full_slice_reproduces_route(self, bend_route):
        segment = slice_route(bend_route, 0, bend_route.total_length)
        assert isinstance(segment, RouteSegment)
        assert segment.samples[0] == bend_route.samples[0]
        assert segment.samples[-1] == bend_route.samples[-1]
        assert segment.total_length == pytest.approx(bend_route.total_length)
        assert segment.cumulative_distance == pytest.approx(bend_route.cumulative_distance)

    def test_window_keeps_interior_samples(self, equator_route):
        segment = slice_route(equator_route, DEG_KM / 2, DEG_KM * 1.5)
        lons = [s.lon for s in segment.samples]
        assert lons == pytest.approx([0.5, 1.0, 1.5])
        assert segment.start == pytest.approx(DEG_KM / 2)
        assert segment.end == pytest.approx(DEG_KM * 1.5)
        assert segment.cumulative_distance[0] == 0.0
        assert segment.total_length == pytest.approx(DEG_KM)

    def test_window_inside_single_segment(self, equator_route):
        segment = slice_route(equator_route, 10.0, 20.0)
        assert len(segment.samples) == 2
        assert segment.total_length == pytest.approx(10.0)

    def test_bounds_are_clamped(self, equator_route):
        segment = slice_route(equator_route, -10, 1e6)
        assert segment.start == 0.0
        assert segment.end == pytest.approx(equator_route.total_length)

    def test_start_after_end_raises(self, equator_route):
        with pytest.raises(InvalidParameterError) as exc_info:
            slice_route(equator_route, 20, 10)
        assert exc_info.value.parameter == "position_range"

    def test_zero_width_window_is_degenerate(self, equator_route):
        segment = slice_route(equator_route, 50, 50)
        assert segment.is_degenerate
        assert segment.total_length == 0.0

    def test_empty_route(self):
        segment = slice_route(build_route([]), 0, 10)
        assert segment.samples == ()
        assert segment.is_degenerate

    def test_single_sample_route(self):
        segment = slice_route(build_route([Sample(1, 1)]), 0, 10)
        assert len(segment.samples) == 1
        assert segment.total_length == 0.0


class TestElevationProfile:
    def test_pairs(self, equator_route):
        profile = elevation_profile(equator_route)
        assert [p.elevation for p in profile] == [10.0, 20.0, 30.0]
        assert profile[2].distance == pytest.approx(2 * DEG_KM)

    def test_empty(self):
        assert elevation_profile(build_route([])) == []
