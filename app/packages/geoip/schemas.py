"""Pydantic schemas for the geoip package."""

from pydantic import BaseModel, ConfigDict, Field


class ZipResponse(BaseModel):
    """Postal code for an IP address."""

    model_config = ConfigDict(json_schema_extra={"example": {"zip": "94043"}})

    zip: str = Field(..., description="Postal/ZIP code, empty when unknown")


class PointResponse(BaseModel):
    """Coordinates for an IP address."""

    model_config = ConfigDict(json_schema_extra={"example": {"point": [37.4, -122.1]}})

    point: tuple[float, float] = Field(
        ..., description="Latitude and longitude in degrees, latitude first"
    )
