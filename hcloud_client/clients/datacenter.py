"""Client for the Datacenters API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hcloud_client import schemas
from hcloud_client.models import Datacenter, datacenter_from_schema

from .base import ListOpts, Page, ResourceClient


@dataclass
class DatacenterListOpts(ListOpts):
    """Options for listing datacenters."""

    name: str = ""

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        return params


class DatacenterClient(ResourceClient):
    """Read access to datacenters."""

    async def get(self, datacenter_id: int) -> Datacenter | None:
        """Get a datacenter by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/datacenters/{datacenter_id}")
        if resp is None:
            return None
        return datacenter_from_schema(resp.parse(schemas.DatacenterGetResponse).datacenter)

    async def get_by_name(self, name: str) -> Datacenter | None:
        """Get a datacenter by name, or None if none has that name."""
        page = await self.list(DatacenterListOpts(name=name))
        return page.items[0] if page.items else None

    async def list(self, opts: DatacenterListOpts | None = None) -> Page[Datacenter]:
        """List a single page of datacenters."""
        opts = opts or DatacenterListOpts()
        resp = await self._client.request("GET", "/datacenters", params=opts.to_params())
        body = resp.parse(schemas.DatacenterListResponse)
        return Page(items=[datacenter_from_schema(dc) for dc in body.datacenters], response=resp)

    async def all(self) -> list[Datacenter]:
        """Get all datacenters, walking every page."""
        return await self._collect_all(self.list, DatacenterListOpts())
