"""Client for the SSH Keys API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hcloud_client import schemas
from hcloud_client.errors import ValidationError
from hcloud_client.logging import get_logger
from hcloud_client.models import SSHKey, ssh_key_from_schema

from .base import ListOpts, Page, ResourceClient

logger = get_logger(__name__)


@dataclass
class SSHKeyListOpts(ListOpts):
    """Options for listing SSH keys."""

    name: str = ""
    fingerprint: str = ""

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        if self.fingerprint:
            params["fingerprint"] = self.fingerprint
        return params


@dataclass
class SSHKeyCreateOpts:
    """Parameters for creating an SSH key."""

    name: str = ""
    public_key: str = ""

    def validate(self) -> None:
        if not self.name:
            raise ValidationError("missing name")
        if not self.public_key:
            raise ValidationError("missing public key")


@dataclass
class SSHKeyUpdateOpts:
    name: str = ""


class SSHKeyClient(ResourceClient):
    """Client for the SSH keys API."""

    async def get(self, ssh_key_id: int) -> SSHKey | None:
        """Get an SSH key by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/ssh_keys/{ssh_key_id}")
        if resp is None:
            return None
        return ssh_key_from_schema(resp.parse(schemas.SSHKeyGetResponse).ssh_key)

    async def get_by_name(self, name: str) -> SSHKey | None:
        """Get an SSH key by name, or None if no key has that name."""
        page = await self.list(SSHKeyListOpts(name=name))
        return page.items[0] if page.items else None

    async def get_by_fingerprint(self, fingerprint: str) -> SSHKey | None:
        """Get an SSH key by fingerprint, or None if no key matches."""
        page = await self.list(SSHKeyListOpts(fingerprint=fingerprint))
        return page.items[0] if page.items else None

    async def list(self, opts: SSHKeyListOpts | None = None) -> Page[SSHKey]:
        """List a single page of SSH keys."""
        opts = opts or SSHKeyListOpts()
        resp = await self._client.request("GET", "/ssh_keys", params=opts.to_params())
        body = resp.parse(schemas.SSHKeyListResponse)
        return Page(items=[ssh_key_from_schema(k) for k in body.ssh_keys], response=resp)

    async def all(self) -> list[SSHKey]:
        """Get all SSH keys."""
        return await self._collect_all(self.list, SSHKeyListOpts())

    async def create(self, opts: SSHKeyCreateOpts) -> SSHKey:
        """Create a new SSH key.

        Raises:
            ValidationError: If name or public key is missing. No request is sent.
        """
        opts.validate()

        payload = schemas.SSHKeyCreateRequest(name=opts.name, public_key=opts.public_key)
        resp = await self._client.request("POST", "/ssh_keys", json=payload.model_dump())
        ssh_key = ssh_key_from_schema(resp.parse(schemas.SSHKeyCreateResponse).ssh_key)
        logger.info("hcloud_ssh_key_created", ssh_key_id=ssh_key.id, name=ssh_key.name)
        return ssh_key

    async def update(self, ssh_key_id: int, opts: SSHKeyUpdateOpts) -> SSHKey:
        """Update the name of an SSH key."""
        payload = schemas.SSHKeyUpdateRequest(name=opts.name or None)
        resp = await self._client.request(
            "PUT", f"/ssh_keys/{ssh_key_id}", json=payload.model_dump(exclude_none=True)
        )
        return ssh_key_from_schema(resp.parse(schemas.SSHKeyGetResponse).ssh_key)

    async def delete(self, ssh_key_id: int) -> None:
        """Delete an SSH key."""
        await self._client.request("DELETE", f"/ssh_keys/{ssh_key_id}")
        logger.info("hcloud_ssh_key_deleted", ssh_key_id=ssh_key_id)
