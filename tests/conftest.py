# conftest.py
import pytest

from route_mapping.pois import POI, PoiType
from route_mapping.route import Sample, build_route

GPX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Test track</name>
    <trkseg>
{points}
    </trkseg>
  </trk>
</gpx>
"""


def make_gpx(points) -> str:
    """Render (lat, lon, ele) tuples as a GPX document."""
    rows = []
    for lat, lon, ele in points:
        rows.append(f'      <trkpt lat="{lat}" lon="{lon}"><ele>{ele}</ele></trkpt>')
    return GPX_TEMPLATE.format(points="\n".join(rows))


@pytest.fixture
def equator_route():
    """Straight 3-point route along the equator, ~222 km long."""
    return build_route([
        Sample(0.0, 0.0, 10.0),
        Sample(0.0, 1.0, 20.0),
        Sample(0.0, 2.0, 30.0),
    ])


@pytest.fixture
def bend_route():
    """Route heading east then north near Munich."""
    return build_route([
        Sample(48.10, 11.50, 520.0),
        Sample(48.10, 11.60, 530.0),
        Sample(48.20, 11.60, 560.0),
    ])


@pytest.fixture
def equator_gpx() -> str:
    return make_gpx([(0.0, 0.0, 10), (0.0, 1.0, 20), (0.0, 2.0, 30)])


@pytest.fixture
def equator_pois():
    return [
        POI(id=1, name="Hut on route", lat=0.001, lon=0.5, type=PoiType.HOUSE),
        POI(id=2, name="Far camp", lat=0.5, lon=1.0, type=PoiType.TENT),
        POI(id=3, name="Hotel near end", lat=-0.01, lon=1.9, type="hotel"),
        POI(id=4, name="Before start", lat=0.0, lon=-0.02, description="west"),
    ]
