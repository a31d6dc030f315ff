"""Client for the Actions API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hcloud_client import schemas
from hcloud_client.models import Action, ActionStatus, action_from_schema

from .base import ListOpts, Page, ResourceClient, enum_option


@dataclass
class ActionListOpts(ListOpts):
    """Options for listing actions."""

    status: list[ActionStatus | str] = field(default_factory=list)
    sort: list[str] = field(default_factory=list)

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.status:
            params["status"] = [
                enum_option(ActionStatus, s, "action status").value for s in self.status
            ]
        if self.sort:
            params["sort"] = list(self.sort)
        return params


class ActionClient(ResourceClient):
    """Read access to actions. Polling until completion is left to the caller."""

    async def get(self, action_id: int) -> Action | None:
        """Get an action by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/actions/{action_id}")
        if resp is None:
            return None
        return action_from_schema(resp.parse(schemas.ActionGetResponse).action)

    async def list(self, opts: ActionListOpts | None = None) -> Page[Action]:
        """List a single page of actions."""
        opts = opts or ActionListOpts()
        resp = await self._client.request("GET", "/actions", params=opts.to_params())
        body = resp.parse(schemas.ActionListResponse)
        return Page(items=[action_from_schema(a) for a in body.actions], response=resp)

    async def all(self, opts: ActionListOpts | None = None) -> list[Action]:
        """Get all actions, walking every page."""
        return await self._collect_all(self.list, opts or ActionListOpts())
