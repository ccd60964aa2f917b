import math
import threading

import pytest

from route_mapping.analysis import DISTANCE_TOLERANCE_KM, build_corridor, enrich
from route_mapping.core import EnrichmentCancelled, InvalidParameterError
from route_mapping.pois import POI, ClosestPoint, PoiType
from route_mapping.route import Sample, build_route, slice_route

KM_PER_DEG = 6371.0 * math.pi / 180.0


class TestEnrich:
    def test_filters_and_enriches(self, equator_route, equator_pois):
        result = enrich(equator_pois, equator_route, 5)
        assert [poi.id for poi in result] == [1, 3, 4]

        hut = result[0]
        assert hut.min_distance == pytest.approx(0.111, abs=0.005)
        assert hut.route_position == pytest.approx(55.6, abs=0.2)
        assert isinstance(hut.closest_point, ClosestPoint)
        assert hut.closest_point.lat == pytest.approx(0.0, abs=1e-12)
        assert hut.closest_point.lon == pytest.approx(0.5)

    def test_point_before_start_snaps_to_first_vertex(self, equator_route, equator_pois):
        before = enrich(equator_pois, equator_route, 5)[-1]
        assert before.id == 4
        assert before.route_position == 0.0
        assert before.min_distance == pytest.approx(0.02 * KM_PER_DEG, rel=1e-3)

    def test_preserves_input_order(self, equator_route, equator_pois):
        reordered = list(reversed(equator_pois))
        result = enrich(reordered, equator_route, 5)
        assert [poi.id for poi in result] == [4, 3, 1]

    def test_does_not_mutate_input(self, equator_route, equator_pois):
        snapshot = list(equator_pois)
        result = enrich(equator_pois, equator_route, 5)
        assert equator_pois == snapshot
        assert all(poi.min_distance is None for poi in equator_pois)
        assert result[0] is not equator_pois[0]
        assert result[0].id == equator_pois[0].id
        assert result[0].type is PoiType.HOUSE

    def test_idempotent(self, equator_route, equator_pois):
        first = enrich(equator_pois, equator_route, 2)
        second = enrich(equator_pois, equator_route, 2)
        assert first == second

    def test_distances_never_exceed_radius(self, bend_route):
        pois = [
            POI(id=i, name=f"POI {i}", lat=48.05 + (i % 10) * 0.02, lon=11.45 + (i // 10) * 0.03)
            for i in range(100)
        ]
        for radius in (0.5, 1.0, 2.5, 5.0):
            for poi in enrich(pois, bend_route, radius):
                assert poi.min_distance <= radius + DISTANCE_TOLERANCE_KM
                assert 0.0 <= poi.route_position <= bend_route.total_length

    def test_radius_boundary_is_inclusive(self, equator_route):
        on_boundary = POI(id="edge", name="Edge", lat=2.0 / KM_PER_DEG, lon=1.5)
        just_outside = POI(id="out", name="Out", lat=2.02 / KM_PER_DEG, lon=1.5)
        result = enrich([on_boundary, just_outside], equator_route, 2)
        assert [poi.id for poi in result] == ["edge"]
        assert result[0].min_distance == pytest.approx(2.0)

    def test_uses_only_the_segment(self, equator_route, equator_pois):
        segment = slice_route(equator_route, 0, 100)
        result = enrich(equator_pois, segment, 5)
        assert [poi.id for poi in result] == [1, 4]

    def test_route_position_relative_to_segment(self, equator_route):
        segment = slice_route(equator_route, 50, 150)
        poi = POI(id=1, name="Mid", lat=0.001, lon=1.0)
        result = enrich([poi], segment, 1)
        assert result[0].route_position == pytest.approx(equator_route.cumulative_distance[1] - 50)

    def test_accepts_prebuilt_corridor(self, equator_route, equator_pois):
        corridor = build_corridor(equator_route, 5)
        assert enrich(equator_pois, equator_route, 5, corridor=corridor) == enrich(
            equator_pois, equator_route, 5
        )

    def test_empty_pois(self, equator_route):
        assert enrich([], equator_route, 5) == []

    def test_degenerate_segments(self, equator_route, equator_pois):
        assert enrich(equator_pois, build_route([]), 5) == []
        assert enrich(equator_pois, build_route([Sample(0.001, 0.5)]), 5) == []
        assert enrich(equator_pois, slice_route(equator_route, 55, 55), 5) == []

    def test_no_poi_in_corridor(self, equator_route):
        far = [POI(id=1, name="Far", lat=10.0, lon=10.0)]
        assert enrich(far, equator_route, 5) == []

    @pytest.mark.parametrize("radius", [0, -2.5])
    def test_invalid_radius_rejected_even_without_pois(self, equator_route, radius):
        with pytest.raises(InvalidParameterError):
            enrich([], equator_route, radius)

    def test_cancellation(self, equator_route, equator_pois):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(EnrichmentCancelled):
            enrich(equator_pois, equator_route, 5, cancel_event=cancel)

    def test_unset_cancel_event_runs_to_completion(self, equator_route, equator_pois):
        result = enrich(equator_pois, equator_route, 5, cancel_event=threading.Event())
        assert len(result) == 3
