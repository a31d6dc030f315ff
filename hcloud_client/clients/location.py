"""Client for the Locations API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hcloud_client import schemas
from hcloud_client.models import Location, location_from_schema

from .base import ListOpts, Page, ResourceClient


@dataclass
class LocationListOpts(ListOpts):
    """Options for listing locations."""

    name: str = ""

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        return params


class LocationClient(ResourceClient):
    """Read access to locations."""

    async def get(self, location_id: int) -> Location | None:
        """Get a location by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/locations/{location_id}")
        if resp is None:
            return None
        return location_from_schema(resp.parse(schemas.LocationGetResponse).location)

    async def get_by_name(self, name: str) -> Location | None:
        """Get a location by name, or None if none has that name."""
        page = await self.list(LocationListOpts(name=name))
        return page.items[0] if page.items else None

    async def list(self, opts: LocationListOpts | None = None) -> Page[Location]:
        """List a single page of locations."""
        opts = opts or LocationListOpts()
        resp = await self._client.request("GET", "/locations", params=opts.to_params())
        body = resp.parse(schemas.LocationListResponse)
        return Page(items=[location_from_schema(loc) for loc in body.locations], response=resp)

    async def all(self) -> list[Location]:
        """Get all locations, walking every page."""
        return await self._collect_all(self.list, LocationListOpts())
