import pytest

from route_mapping.analysis import AnalysisResult, RouteAnalyzer
from route_mapping.core import Config, InvalidParameterError
from route_mapping.route import build_route


class TestRouteAnalyzer:
    def test_from_gpx(self, equator_gpx, equator_pois):
        analyzer = RouteAnalyzer.from_gpx(equator_gpx)
        result = analyzer.analyze(equator_pois, radius_km=5, position_range=(0, 222))
        assert isinstance(result, AnalysisResult)
        assert [poi.id for poi in result.pois] == [1, 3, 4]
        assert [p.elevation for p in result.profile] == [10.0, 20.0, 30.0]

    def test_defaults_from_config(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        result = analyzer.analyze(equator_pois)
        assert result.radius_km == 5.0
        assert result.position_range == (0.0, 20.0)
        # Only the POI west of the start lies within the first 20 km
        assert [poi.id for poi in result.pois] == [4]

    def test_default_range_clamped_to_short_route(self, equator_route, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[corridor]\nrange_end_km = 1000\n")
        analyzer = RouteAnalyzer(equator_route, config=Config(str(path)))
        assert analyzer.default_range() == (0.0, pytest.approx(equator_route.total_length))

    def test_identical_inputs_reuse_result(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        first = analyzer.analyze(equator_pois, radius_km=3, position_range=(0, 100))
        second = analyzer.analyze(list(equator_pois), radius_km=3, position_range=(0, 100))
        assert second is first

    def test_changed_input_recomputes(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        first = analyzer.analyze(equator_pois, radius_km=3, position_range=(0, 100))
        wider = analyzer.analyze(equator_pois, radius_km=4, position_range=(0, 100))
        longer = analyzer.analyze(equator_pois, radius_km=4, position_range=(0, 222))
        assert wider is not first
        assert wider.corridor.radius_km == 4
        assert len(longer.pois) > len(wider.pois)

    def test_invalid_range(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        with pytest.raises(InvalidParameterError):
            analyzer.analyze(equator_pois, position_range=(50, 10))

    def test_invalid_radius(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        with pytest.raises(InvalidParameterError):
            analyzer.analyze(equator_pois, radius_km=0)

    def test_empty_route_degrades_gracefully(self, equator_pois):
        analyzer = RouteAnalyzer(build_route([]))
        result = analyzer.analyze(equator_pois)
        assert result.pois == ()
        assert result.corridor.is_empty
        assert result.profile == ()

    def test_nearby_pois(self, equator_route, equator_pois):
        analyzer = RouteAnalyzer(equator_route)
        nearby = analyzer.nearby_pois(equator_pois, radius_km=5, position_range=(0, 222))
        assert isinstance(nearby, list)
        assert len(nearby) == 3
