"""Client for the Server Types API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hcloud_client import schemas
from hcloud_client.models import ServerType, server_type_from_schema

from .base import ListOpts, Page, ResourceClient


@dataclass
class ServerTypeListOpts(ListOpts):
    """Options for listing server types."""

    name: str = ""

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        return params


class ServerTypeClient(ResourceClient):
    """Read access to server types."""

    async def get(self, server_type_id: int) -> ServerType | None:
        """Get a server type by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/server_types/{server_type_id}")
        if resp is None:
            return None
        return server_type_from_schema(resp.parse(schemas.ServerTypeGetResponse).server_type)

    async def get_by_name(self, name: str) -> ServerType | None:
        """Get a server type by name, or None if none has that name."""
        page = await self.list(ServerTypeListOpts(name=name))
        return page.items[0] if page.items else None

    async def list(self, opts: ServerTypeListOpts | None = None) -> Page[ServerType]:
        """List a single page of server types."""
        opts = opts or ServerTypeListOpts()
        resp = await self._client.request("GET", "/server_types", params=opts.to_params())
        body = resp.parse(schemas.ServerTypeListResponse)
        return Page(items=[server_type_from_schema(t) for t in body.server_types], response=resp)

    async def all(self) -> list[ServerType]:
        """Get all server types, walking every page."""
        return await self._collect_all(self.list, ServerTypeListOpts())
