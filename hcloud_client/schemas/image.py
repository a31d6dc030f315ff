"""Pydantic schemas for the Images API.

API Documentation: https://docs.hetzner.cloud/#images
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ImageCreatedFrom(BaseModel):
    """Server an image was created from."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Server ID")
    name: str = Field("", description="Server name at the time the image was created")


class Image(BaseModel):
    """Image as returned by GET /images/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique image ID")
    type: str | None = Field(None, description="Type: system, snapshot or backup")
    status: str | None = Field(None, description="Status: available or creating")
    name: str | None = Field(None, description="Unique name, only set for system images")
    description: str = Field("", description="Description of the image")
    image_size: float | None = Field(None, description="Size of the image file in GB")
    disk_size: float = Field(0, description="Size of the disk contained in the image in GB")
    created: datetime | None = Field(None, description="Point in time when the image was created")
    created_from: ImageCreatedFrom | None = Field(None, description="Server the image was created from")
    bound_to: int | None = Field(None, description="ID of the server the image is bound to (backups)")
    os_flavor: str = Field("", description="Flavor of the operating system (e.g., 'ubuntu')")
    os_version: str | None = Field(None, description="Operating system version")
    rapid_deploy: bool = Field(False, description="Whether the image is cached for fast deployment")


class ImageGetResponse(BaseModel):
    image: Image


class ImageListResponse(BaseModel):
    images: list[Image] = Field(default_factory=list)


class ImageUpdateRequest(BaseModel):
    description: str | None = None
    type: str | None = None
