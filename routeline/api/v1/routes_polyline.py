# routeline/api/v1/routes_polyline.py
from fastapi import APIRouter, HTTPException

from routeline.core.errors import InvalidCoordinateError, MalformedPolylineError
from routeline.models.geometry import (
    DecodeRequest,
    EncodeRequest,
    EncodeResponse,
    RouteFeature,
)
from routeline.services.route_geometry_service import geometry_service

router = APIRouter(
    prefix="/polyline",
    tags=["polyline"],
)


@router.post(
    "/decode",
    response_model=RouteFeature,
    response_model_exclude_none=True,
    summary="Decode an encoded polyline into a LineString feature",
)
async def decode(request: DecodeRequest) -> RouteFeature:
    """
    Decode an encoded polyline into [lng, lat] coordinates.

    Malformed input is answered with 422 and no coordinates.
    """
    try:
        return geometry_service.feature_from_polyline(request.encoded, request.precision)
    except MalformedPolylineError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.post(
    "/encode",
    response_model=EncodeResponse,
    summary="Encode [lng, lat] coordinates into a polyline",
)
async def encode(request: EncodeRequest) -> EncodeResponse:
    """
    NaN or infinite coordinates are answered with 422.
    """
    try:
        return EncodeResponse(encoded=geometry_service.encode(request.coordinates, request.precision))
    except InvalidCoordinateError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
