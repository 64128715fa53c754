# routeline/services/polyline.py
"""
Encoded Polyline Algorithm Format.

ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm

Coordinates are handled as [lng, lat] pairs (GeoJSON order) on both sides,
while the encoded string stores latitude first for every point.
"""

import math
from typing import List, Sequence, Tuple

import polyline

from routeline.core.errors import InvalidCoordinateError, MalformedPolylineError

DEFAULT_PRECISION = 5

_MIN_CHAR = 63
_MAX_CHAR = 126

# Widest value accepted per delta; larger groups cannot come from real coordinates.
_MAX_SHIFT = 60


def _check_precision(precision: int) -> None:
    if not isinstance(precision, int) or precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision!r}")


def _scale(precision: int) -> float:
    # Parsed from a literal so precision 5 yields exactly 1e-5.
    return float(f"1e-{precision}")


def _decode_value(encoded: str, index: int) -> Tuple[int, int]:
    """
    Decode one zig-zag varint starting at ``index``.

    Returns the signed delta and the index just past its last character.
    """
    result = 0
    shift = 0
    length = len(encoded)

    while True:
        if index >= length:
            raise MalformedPolylineError("truncated value, continuation bit set on last character", index)

        code = ord(encoded[index])
        if not _MIN_CHAR <= code <= _MAX_CHAR:
            raise MalformedPolylineError(f"character {encoded[index]!r} outside the polyline alphabet", index)

        if shift > _MAX_SHIFT:
            raise MalformedPolylineError("value out of range", index)

        b = code - _MIN_CHAR
        index += 1
        result |= (b & 0x1F) << shift
        shift += 5
        if not b & 0x20:
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode_polyline(encoded: str, precision: int = DEFAULT_PRECISION) -> List[List[float]]:
    """
    Decode an encoded polyline into a list of [lng, lat] coordinates.

    An empty string yields an empty list. Input that ends mid-value or after
    a latitude without its longitude raises MalformedPolylineError; no partial
    result is returned.
    """
    _check_precision(precision)
    scale = _scale(precision)
    coordinates: List[List[float]] = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded)

    while index < length:
        dlat, index = _decode_value(encoded, index)
        if index >= length:
            raise MalformedPolylineError("latitude without a longitude", index)
        dlng, index = _decode_value(encoded, index)

        lat += dlat
        lng += dlng
        coordinates.append([lng * scale, lat * scale])

    return coordinates


def encode_polyline(coordinates: Sequence[Sequence[float]], precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode [lng, lat] coordinates into a polyline string.
    """
    _check_precision(precision)
    points = []
    for i, (lng, lat) in enumerate(coordinates):
        if not (math.isfinite(lng) and math.isfinite(lat)):
            raise InvalidCoordinateError(f"coordinate {i} is not a finite number")
        points.append((lng, lat))

    return polyline.encode(points, precision=precision, geojson=True)
