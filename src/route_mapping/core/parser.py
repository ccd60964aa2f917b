"""Lenient GPX track-point parser."""

from pathlib import Path
from typing import List, Union
from xml.etree import ElementTree as ET

from ..route.models import Sample
from .errors import ParseError
from .utils import parse_float


def _local_name(tag) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit('}', 1)[-1]


def parse_track(content: Union[str, bytes]) -> List[Sample]:
    """
    Parse track points from GPX markup.

    Every ``trkpt`` element is read in document order regardless of its
    namespace or nesting. Missing or malformed ``lat``/``lon`` attributes and
    ``ele`` values fall back to 0.0 instead of failing the parse.

    Args:
        content: GPX document as text or UTF-8 bytes

    Returns:
        List of samples in file order

    Raises:
        ParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Track file is not well-formed XML: {e}") from e

    samples = []
    for element in root.iter():
        if _local_name(element.tag) != 'trkpt':
            continue

        elevation = 0.0
        for child in element:
            if _local_name(child.tag) == 'ele':
                elevation = parse_float(child.text)
                break

        samples.append(Sample(
            lat=parse_float(element.get('lat')),
            lon=parse_float(element.get('lon')),
            elevation=elevation,
        ))

    return samples


def load_track(gpx_file) -> List[Sample]:
    """
    Load and parse a GPX track file.

    Args:
        gpx_file: Path to GPX file

    Returns:
        List of samples in file order
    """
    gpx_file = Path(gpx_file)
    return parse_track(gpx_file.read_bytes())
