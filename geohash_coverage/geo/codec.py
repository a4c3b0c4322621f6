"""
Geohash Codec

Decodes geohash strings to bounding boxes using the standard 32-symbol
alphabet. Each character carries 5 bits; bits alternate between
longitude and latitude, starting with longitude, and the alternation
carries across character boundaries.

Accuracy for typical geohash lengths (number of characters):
    Length  Width     Height
    1       5,000km   5,000km
    2       1,250km   625km
    3       156km     156km
    4       39.1km    19.5km
    5       4.89km    4.89km
    6       1.22km    0.61km
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..config import BASE32, DEFAULT_ENCODE_PRECISION

DECODE_MAP = {c: i for i, c in enumerate(BASE32)}

_MASKS = (16, 8, 4, 2, 1)

Point = Tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned lat/lng rectangle, in degrees."""
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def corners(self) -> List[Point]:
        """Corners as (lng, lat): SW, SE, NE, NW."""
        return [
            (self.min_lng, self.min_lat),
            (self.max_lng, self.min_lat),
            (self.max_lng, self.max_lat),
            (self.min_lng, self.max_lat),
        ]

    def edges(self) -> List[Tuple[Point, Point]]:
        c = self.corners()
        return [(c[0], c[1]), (c[1], c[2]), (c[2], c[3]), (c[3], c[0])]

    def contains_point(self, lng: float, lat: float) -> bool:
        """Inclusive test; points on the border count as inside."""
        return (self.min_lng <= lng <= self.max_lng and
                self.min_lat <= lat <= self.max_lat)

    def contains(self, other: "BoundingBox") -> bool:
        return (self.min_lat <= other.min_lat and other.max_lat <= self.max_lat and
                self.min_lng <= other.min_lng and other.max_lng <= self.max_lng)

    @property
    def center(self) -> Point:
        """(lat, lng) of the box center."""
        return (self.min_lat + self.max_lat) / 2.0, (self.min_lng + self.max_lng) / 2.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "minLat": self.min_lat,
            "maxLat": self.max_lat,
            "minLng": self.min_lng,
            "maxLng": self.max_lng,
        }


WORLD = BoundingBox(min_lat=-90.0, max_lat=90.0, min_lng=-180.0, max_lng=180.0)


def decode(geohash: str) -> BoundingBox:
    """
    Decode a geohash to its bounding box.

    Unknown characters are skipped, so an empty or fully invalid string
    returns the whole earth.

    Args:
        geohash: Geohash string (lowercase alphabet)

    Returns:
        BoundingBox addressed by the geohash
    """
    lat_min, lat_max = -90.0, 90.0
    lng_min, lng_max = -180.0, 180.0
    even = True

    for c in geohash:
        cd = DECODE_MAP.get(c)
        if cd is None:
            continue

        for mask in _MASKS:
            if even:
                mid = (lng_min + lng_max) / 2.0
                if cd & mask:
                    lng_min = mid
                else:
                    lng_max = mid
            else:
                mid = (lat_min + lat_max) / 2.0
                if cd & mask:
                    lat_min = mid
                else:
                    lat_max = mid
            even = not even

    return BoundingBox(min_lat=lat_min, max_lat=lat_max, min_lng=lng_min, max_lng=lng_max)


def decode_center(geohash: str) -> Point:
    """Return the (lat, lng) center of a geohash cell."""
    return decode(geohash).center


def encode(latitude: float, longitude: float, precision: int = DEFAULT_ENCODE_PRECISION) -> str:
    """
    Encode a lat/lng pair to a geohash of the given length.

    Values exactly on a midpoint go to the upper half.
    """
    if precision <= 0:
        raise ValueError("precision must be > 0")

    lat_min, lat_max = -90.0, 90.0
    lng_min, lng_max = -180.0, 180.0

    bit = 0
    ch = 0
    even = True
    out: List[str] = []

    while len(out) < precision:
        if even:
            mid = (lng_min + lng_max) / 2.0
            if longitude >= mid:
                ch |= _MASKS[bit]
                lng_min = mid
            else:
                lng_max = mid
        else:
            mid = (lat_min + lat_max) / 2.0
            if latitude >= mid:
                ch |= _MASKS[bit]
                lat_min = mid
            else:
                lat_max = mid

        even = not even
        if bit < 4:
            bit += 1
            continue

        out.append(BASE32[ch])
        bit = 0
        ch = 0

    return "".join(out)


def is_valid_geohash(geohash: str) -> bool:
    """True for a non-empty string made only of alphabet characters."""
    return bool(geohash) and all(c in DECODE_MAP for c in geohash)


def children(prefix: str) -> List[str]:
    """The 32 child cells of a prefix, in alphabet order."""
    return [prefix + c for c in BASE32]


def geohash_info(geohash: str) -> Dict[str, Any]:
    """Bounding box, center and precision of a geohash."""
    box = decode(geohash)
    lat, lng = box.center
    return {
        "geohash": geohash,
        "precision": len(geohash),
        "boundingBox": box.to_dict(),
        "center": {"latitude": lat, "longitude": lng},
    }


def to_geojson_feature(geohash: str, properties: Dict[str, Any] = None) -> Dict[str, Any]:
    """Convert a geohash cell to a GeoJSON Feature with a closed Polygon ring."""
    box = decode(geohash)
    ring = [list(p) for p in box.corners()]
    ring.append(list(ring[0]))

    props = {"geohash": geohash}
    if properties:
        props.update(properties)

    return {
        "type": "Feature",
        "properties": props,
        "geometry": {
            "type": "Polygon",
            "coordinates": [ring],
        },
    }
