# routeline/services/route_geometry_service.py
import math
from time import perf_counter
from typing import Any, List, Optional, Sequence

from routeline.core.config import settings
from routeline.core.errors import MalformedPolylineError, NoRouteError
from routeline.core.logger import logger
from routeline.models.geometry import (
    DirectionsPayload,
    LineGeometry,
    RouteFeature,
    RouteProperties,
)
from routeline.services.polyline import decode_polyline, encode_polyline


def extract_overview_polyline(payload: DirectionsPayload) -> Optional[str]:
    """
    Return the encoded string at routes[0].overview_polyline.points.

    Any missing or wrongly typed level yields None.
    """
    if not isinstance(payload, dict):
        return None

    routes = payload.get("routes")
    if not isinstance(routes, list) or not routes:
        return None

    first = routes[0]
    if not isinstance(first, dict):
        return None

    overview = first.get("overview_polyline")
    if not isinstance(overview, dict):
        return None

    points: Any = overview.get("points")
    if not isinstance(points, str) or not points:
        return None

    return points


class RouteGeometryService:
    """
    Turns encoded route polylines into GeoJSON-like features:
    - decodes the polyline into [lng, lat] coordinates
    - measures the great-circle length of the line
    - derives the bounding box
    """

    EARTH_RADIUS_M: float = 6_371_000.0

    def __init__(self, precision: Optional[int] = None) -> None:
        self.precision = precision if precision is not None else settings.POLYLINE_PRECISION
        logger.info(f"RouteGeometryService initialised (precision={self.precision}).")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def feature_from_polyline(self, encoded: str, precision: Optional[int] = None) -> RouteFeature:
        """
        Decode an encoded polyline and wrap it into a LineString feature.

        MalformedPolylineError propagates to the caller unchanged.
        """
        precision = precision if precision is not None else self.precision
        t0 = perf_counter()

        try:
            coords = decode_polyline(encoded, precision=precision)
        except MalformedPolylineError as exc:
            logger.warning(f"Rejecting polyline of length {len(encoded)}: {exc}")
            raise

        distance_m = self._line_length_m(coords)

        logger.info(
            "Decoded {} chars into {} points ({:.1f} m) in {:.2f} ms",
            len(encoded),
            len(coords),
            distance_m,
            (perf_counter() - t0) * 1000.0,
        )

        return RouteFeature(
            geometry=LineGeometry(coordinates=coords),
            properties=RouteProperties(point_count=len(coords), distance_m=distance_m),
            bbox=self._bbox(coords),
        )

    def feature_from_directions(self, payload: DirectionsPayload) -> RouteFeature:
        """
        Build the route feature from a raw directions service response.
        """
        encoded = extract_overview_polyline(payload)
        if encoded is None:
            logger.info("Directions payload carries no overview polyline.")
            raise NoRouteError("No route polyline found in directions payload")

        return self.feature_from_polyline(encoded)

    def encode(self, coordinates: Sequence[Sequence[float]], precision: Optional[int] = None) -> str:
        precision = precision if precision is not None else self.precision
        encoded = encode_polyline(coordinates, precision=precision)
        logger.info(f"Encoded {len(coordinates)} points into {len(encoded)} chars")
        return encoded

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _bbox(coords: List[List[float]]) -> Optional[List[float]]:
        """
        Bounding box as [west, south, east, north], or None for an empty line.
        """
        if not coords:
            return None

        xs = [lng for lng, _ in coords]
        ys = [lat for _, lat in coords]
        return [min(xs), min(ys), max(xs), max(ys)]

    def _line_length_m(self, coords: List[List[float]]) -> float:
        total = 0.0
        for (lng1, lat1), (lng2, lat2) in zip(coords[:-1], coords[1:]):
            total += self._haversine_distance_m(lat1, lng1, lat2, lng2)
        return total

    @classmethod
    def _haversine_distance_m(cls, lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
        """
        Compute great-circle distance between two points (lat/lon in degrees), in metres.
        """
        lat1 = math.radians(lat_a)
        lon1 = math.radians(lon_a)
        lat2 = math.radians(lat_b)
        lon2 = math.radians(lon_b)

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        h = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        h = min(h, 1.0)
        return cls.EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


geometry_service = RouteGeometryService()
