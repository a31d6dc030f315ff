"""Pydantic schemas for the Locations and Datacenters APIs.

API Documentation: https://docs.hetzner.cloud/#locations
"""

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Location as returned by GET /locations/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique location ID")
    name: str = Field("", description="Unique name (e.g., 'fsn1')")
    description: str = Field("", description="Description of the location")
    country: str = Field("", description="ISO 3166-1 alpha-2 country code")
    city: str = Field("", description="City the location is closest to")
    latitude: float = Field(0, description="Latitude of the city")
    longitude: float = Field(0, description="Longitude of the city")


class DatacenterServerTypes(BaseModel):
    model_config = ConfigDict(extra="allow")

    supported: list[int] = Field(default_factory=list, description="Server type IDs supported")
    available: list[int] = Field(default_factory=list, description="Server type IDs currently available")


class Datacenter(BaseModel):
    """Datacenter as returned by GET /datacenters/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique datacenter ID")
    name: str = Field("", description="Unique name (e.g., 'fsn1-dc8')")
    description: str = Field("", description="Description of the datacenter")
    location: Location | None = Field(None, description="Location of the datacenter")
    server_types: DatacenterServerTypes = Field(default_factory=DatacenterServerTypes)


class LocationGetResponse(BaseModel):
    location: Location


class LocationListResponse(BaseModel):
    locations: list[Location] = Field(default_factory=list)


class DatacenterGetResponse(BaseModel):
    datacenter: Datacenter


class DatacenterListResponse(BaseModel):
    datacenters: list[Datacenter] = Field(default_factory=list)
