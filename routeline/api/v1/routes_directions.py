# routeline/api/v1/routes_directions.py
from fastapi import APIRouter, Body, HTTPException

from routeline.core.errors import MalformedPolylineError, NoRouteError
from routeline.models.geometry import DirectionsPayload, RouteFeature
from routeline.services.route_geometry_service import geometry_service

router = APIRouter(
    prefix="/directions",
    tags=["directions"],
)


@router.post(
    "/geometry",
    response_model=RouteFeature,
    response_model_exclude_none=True,
    summary="Extract the route line from a directions service response",
)
async def directions_geometry(payload: DirectionsPayload = Body(...)) -> RouteFeature:
    """
    Read routes[0].overview_polyline.points from the payload and decode it.

    - 404 when the payload has no route polyline.
    - 422 when the polyline is malformed.
    """
    try:
        return geometry_service.feature_from_directions(payload)
    except NoRouteError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except MalformedPolylineError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
