"""Client for the Images API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hcloud_client import schemas
from hcloud_client.errors import ValidationError
from hcloud_client.logging import get_logger
from hcloud_client.models import Image, ImageType, image_from_schema

from .base import ListOpts, Page, ResourceClient, enum_option

logger = get_logger(__name__)


@dataclass
class ImageListOpts(ListOpts):
    """Options for listing images."""

    name: str = ""
    type: list[ImageType | str] = field(default_factory=list)
    bound_to: list[int] = field(default_factory=list)

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        if self.type:
            params["type"] = [enum_option(ImageType, t, "image type").value for t in self.type]
        if self.bound_to:
            params["bound_to"] = [str(server_id) for server_id in self.bound_to]
        return params


@dataclass
class ImageUpdateOpts:
    """Fields to change on an image. Only snapshots can be converted, to ``snapshot``."""

    description: str | None = None
    type: ImageType | None = None

    def validate(self) -> None:
        if self.type is None:
            return
        if enum_option(ImageType, self.type, "image type") != ImageType.SNAPSHOT:
            raise ValidationError("images can only be converted to snapshots")


class ImageClient(ResourceClient):
    """Client for the images API."""

    async def get(self, image_id: int) -> Image | None:
        """Get an image by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/images/{image_id}")
        if resp is None:
            return None
        return image_from_schema(resp.parse(schemas.ImageGetResponse).image)

    async def get_by_name(self, name: str) -> Image | None:
        """Get a system image by name (e.g., 'ubuntu-22.04')."""
        page = await self.list(ImageListOpts(name=name))
        return page.items[0] if page.items else None

    async def list(self, opts: ImageListOpts | None = None) -> Page[Image]:
        """List a single page of images."""
        opts = opts or ImageListOpts()
        resp = await self._client.request("GET", "/images", params=opts.to_params())
        body = resp.parse(schemas.ImageListResponse)
        return Page(items=[image_from_schema(i) for i in body.images], response=resp)

    async def all(self, opts: ImageListOpts | None = None) -> list[Image]:
        """Get all images, walking every page."""
        return await self._collect_all(self.list, opts or ImageListOpts())

    async def update(self, image_id: int, opts: ImageUpdateOpts) -> Image:
        """Update the description of an image or convert it to a snapshot."""
        opts.validate()
        payload = schemas.ImageUpdateRequest(
            description=opts.description,
            type=ImageType(opts.type).value if opts.type is not None else None,
        )
        resp = await self._client.request(
            "PUT", f"/images/{image_id}", json=payload.model_dump(exclude_none=True)
        )
        return image_from_schema(resp.parse(schemas.ImageGetResponse).image)

    async def delete(self, image_id: int) -> None:
        """Delete a snapshot or backup image."""
        await self._client.request("DELETE", f"/images/{image_id}")
        logger.info("hcloud_image_deleted", image_id=image_id)
