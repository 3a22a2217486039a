from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["System"])


# Liveness probe. Never touches the geolocation database so it keeps
# answering even if lookups are failing.
@router.get("/healthz", response_class=PlainTextResponse)
def get_health() -> str:
    """Healthcheck endpoint."""
    return "OK"
