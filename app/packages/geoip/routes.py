"""FastAPI routes for the geoip package."""

from typing import Callable, Optional

from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from infrastructure.clients.maxmind import GeoLocationData
from infrastructure.operations import OperationResult, OperationStatus
from packages.geoip.schemas import PointResponse, ZipResponse
from packages.geoip.service import GeoLookupServiceDep

router = APIRouter(prefix="/geo", tags=["geo"])

ERROR_RESPONSES = {
    400: {"description": "Missing or unparseable `ip` parameter (empty body)"},
    500: {"description": "Address not in the database or lookup failed (empty body)"},
}


def lookup_response(
    result: OperationResult,
    render: Callable[[GeoLocationData], BaseModel],
) -> Response:
    """Translate a lookup outcome into an HTTP response.

    Only the success body differs between endpoints; ``render`` shapes it.
    Errors carry no body: 400 for invalid input, 500 for everything else.
    """
    if result.is_success:
        return JSONResponse(render(result.data).model_dump(mode="json"))
    if result.status == OperationStatus.PERMANENT_ERROR:
        return Response(status_code=400)
    return Response(status_code=500)


@router.get(
    "/zip",
    response_model=ZipResponse,
    responses=ERROR_RESPONSES,
    summary="Postal code for an IP address",
)
def get_zip(
    service: GeoLookupServiceDep,
    ip: Optional[str] = Query(None, description="IPv4 or IPv6 address to locate"),
) -> Response:
    return lookup_response(
        service.resolve(ip),
        lambda location: ZipResponse(zip=location.postal_code),
    )


@router.get(
    "/point",
    response_model=PointResponse,
    responses=ERROR_RESPONSES,
    summary="Latitude/longitude for an IP address",
)
def get_point(
    service: GeoLookupServiceDep,
    ip: Optional[str] = Query(None, description="IPv4 or IPv6 address to locate"),
) -> Response:
    return lookup_response(
        service.resolve(ip),
        lambda location: PointResponse(point=(location.latitude, location.longitude)),
    )
