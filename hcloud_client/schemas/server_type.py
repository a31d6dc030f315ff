"""Pydantic schemas for the Server Types API.

API Documentation: https://docs.hetzner.cloud/#server-types
"""

from pydantic import BaseModel, ConfigDict, Field


class ServerType(BaseModel):
    """Server type as returned by GET /server_types/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique server type ID")
    name: str = Field("", description="Unique name (e.g., 'cx11')")
    description: str = Field("", description="Description of the server type")
    cores: int = Field(0, description="Number of CPU cores")
    memory: float = Field(0, description="Memory in GB")
    disk: int = Field(0, description="Disk size in GB")
    storage_type: str | None = Field(None, description="Storage type: local or network")


class ServerTypeGetResponse(BaseModel):
    server_type: ServerType


class ServerTypeListResponse(BaseModel):
    server_types: list[ServerType] = Field(default_factory=list)
