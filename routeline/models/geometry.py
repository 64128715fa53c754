# routeline/models/geometry.py

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class LineGeometry(BaseModel):
    """
    GeoJSON LineString geometry.

    coordinates is a list of [lng, lat] pairs in route traversal order, e.g.:
    [
        [-120.2, 38.5],
        [-120.95, 40.7],
        ...
    ]
    """
    type: str = "LineString"
    coordinates: List[List[float]]


class RouteProperties(BaseModel):
    """
    Summary values derived from the decoded line.
    """
    point_count: int
    distance_m: float


class RouteFeature(BaseModel):
    """
    GeoJSON Feature wrapping a decoded route line.

    bbox is [west, south, east, north] and is left out for an empty line.
    """
    type: str = "Feature"
    geometry: LineGeometry
    properties: RouteProperties
    bbox: Optional[List[float]] = None


class DecodeRequest(BaseModel):
    """
    Request body for the /polyline/decode endpoint.
    """
    encoded: str
    # Falls back to settings.POLYLINE_PRECISION when omitted.
    precision: Optional[int] = Field(default=None, ge=1, le=10)


class EncodeRequest(BaseModel):
    """
    Request body for the /polyline/encode endpoint; coordinates are [lng, lat].
    """
    coordinates: List[Tuple[float, float]]
    precision: Optional[int] = Field(default=None, ge=1, le=10)


class EncodeResponse(BaseModel):
    encoded: str


# Raw directions service response; only routes[0].overview_polyline.points is read.
DirectionsPayload = Dict[str, Any]
