"""Client for the Servers API.

Besides CRUD, servers have lifecycle actions (power on/off, reboot, rescue
mode, image creation, ...). Each one is a POST to
``/servers/{id}/actions/<name>`` and returns the ``Action`` the API started;
waiting for it to finish is up to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from hcloud_client import schemas
from hcloud_client.errors import ValidationError
from hcloud_client.logging import get_logger
from hcloud_client.models import (
    Action,
    Datacenter,
    Image,
    ImageType,
    Location,
    Server,
    ServerStatus,
    ServerType,
    SSHKey,
    action_from_schema,
    image_from_schema,
    server_from_schema,
)

from .base import ListOpts, Page, ResourceClient, enum_option

logger = get_logger(__name__)

ServerRef = Server | int
ServerTypeRef = ServerType | int | str
ImageRef = Image | int | str
SSHKeyRef = SSHKey | int


class RescueType(str, Enum):
    LINUX64 = "linux64"
    LINUX32 = "linux32"
    FREEBSD64 = "freebsd64"


def _server_id(server: ServerRef) -> int:
    return server.id if isinstance(server, Server) else server


def _id_or_name(ref: Any) -> int | str:
    """API accepts either the numeric ID or the unique name of a referenced resource."""
    if isinstance(ref, int | str):
        return ref
    return ref.id if ref.id else ref.name


def _missing(ref: Any) -> bool:
    return ref is None or _id_or_name(ref) in ("", 0)


def _ssh_key_ids(keys: list[SSHKeyRef]) -> list[int]:
    return [k.id if isinstance(k, SSHKey) else k for k in keys]


@dataclass
class ServerListOpts(ListOpts):
    """Options for listing servers."""

    name: str = ""
    status: list[ServerStatus | str] = field(default_factory=list)

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        if self.name:
            params["name"] = self.name
        if self.status:
            params["status"] = [
                enum_option(ServerStatus, s, "server status").value for s in self.status
            ]
        return params


@dataclass
class ServerCreateOpts:
    """Parameters for creating a server."""

    name: str = ""
    server_type: ServerTypeRef | None = None
    image: ImageRef | None = None
    ssh_keys: list[SSHKeyRef] = field(default_factory=list)
    location: Location | int | str | None = None
    datacenter: Datacenter | int | str | None = None
    user_data: str = ""
    start_after_create: bool | None = None

    def validate(self) -> None:
        if not self.name:
            raise ValidationError("missing name")
        if _missing(self.server_type):
            raise ValidationError("missing server type")
        if _missing(self.image):
            raise ValidationError("missing image")
        if self.location is not None and self.datacenter is not None:
            raise ValidationError("location and datacenter are mutually exclusive")

    def to_request(self) -> schemas.ServerCreateRequest:
        return schemas.ServerCreateRequest(
            name=self.name,
            server_type=_id_or_name(self.server_type),
            image=_id_or_name(self.image),
            ssh_keys=_ssh_key_ids(self.ssh_keys) or None,
            location=_id_or_name(self.location) if self.location is not None else None,
            datacenter=_id_or_name(self.datacenter) if self.datacenter is not None else None,
            user_data=self.user_data or None,
            start_after_create=self.start_after_create,
        )


@dataclass
class ServerUpdateOpts:
    name: str = ""


@dataclass
class ServerCreateImageOpts:
    """Options for creating an image from a server. Both fields are optional."""

    type: ImageType | None = None
    description: str | None = None

    def validate(self) -> None:
        if self.type is None:
            return
        image_type = enum_option(ImageType, self.type, "image type")
        if image_type not in (ImageType.SNAPSHOT, ImageType.BACKUP):
            raise ValidationError("invalid image type")


@dataclass
class ServerEnableRescueOpts:
    type: RescueType | None = None
    ssh_keys: list[SSHKeyRef] = field(default_factory=list)

    def validate(self) -> None:
        if self.type is not None:
            enum_option(RescueType, self.type, "rescue type")


@dataclass
class ServerRebuildOpts:
    image: ImageRef | None = None

    def validate(self) -> None:
        if _missing(self.image):
            raise ValidationError("missing image")


@dataclass
class ServerChangeTypeOpts:
    server_type: ServerTypeRef | None = None
    upgrade_disk: bool = False

    def validate(self) -> None:
        if _missing(self.server_type):
            raise ValidationError("missing server type")


@dataclass(frozen=True)
class ServerCreateResult:
    server: Server
    action: Action | None = None
    root_password: str = ""


@dataclass(frozen=True)
class ServerResetPasswordResult:
    action: Action
    root_password: str = ""


@dataclass(frozen=True)
class ServerCreateImageResult:
    action: Action
    image: Image


@dataclass(frozen=True)
class ServerEnableRescueResult:
    action: Action
    root_password: str = ""


class ServerClient(ResourceClient):
    """Client for the servers API."""

    async def get(self, server_id: int) -> Server | None:
        """Get a server by ID, or None if it does not exist."""
        resp = await self._get_or_none(f"/servers/{server_id}")
        if resp is None:
            return None
        return server_from_schema(resp.parse(schemas.ServerGetResponse).server)

    async def get_by_name(self, name: str) -> Server | None:
        """Get a server by name, or None if no server has that name."""
        page = await self.list(ServerListOpts(name=name))
        return page.items[0] if page.items else None

    async def list(self, opts: ServerListOpts | None = None) -> Page[Server]:
        """List a single page of servers."""
        opts = opts or ServerListOpts()
        resp = await self._client.request("GET", "/servers", params=opts.to_params())
        body = resp.parse(schemas.ServerListResponse)
        return Page(items=[server_from_schema(s) for s in body.servers], response=resp)

    async def all(self, opts: ServerListOpts | None = None) -> list[Server]:
        """Get all servers, walking every page."""
        return await self._collect_all(self.list, opts or ServerListOpts())

    async def create(self, opts: ServerCreateOpts) -> ServerCreateResult:
        """Create a new server.

        Returns the server together with the ``create_server`` action and,
        when no SSH key was given, the generated root password.

        Raises:
            ValidationError: If a required option is missing. No request is sent.
        """
        opts.validate()

        payload = opts.to_request().model_dump(exclude_none=True)
        resp = await self._client.request("POST", "/servers", json=payload)
        body = resp.parse(schemas.ServerCreateResponse)

        result = ServerCreateResult(
            server=server_from_schema(body.server),
            action=action_from_schema(body.action) if body.action else None,
            root_password=body.root_password or "",
        )
        logger.info(
            "hcloud_server_created",
            server_id=result.server.id,
            name=result.server.name,
            action_id=result.action.id if result.action else None,
        )
        return result

    async def update(self, server: ServerRef, opts: ServerUpdateOpts) -> Server:
        """Rename a server."""
        payload = schemas.ServerUpdateRequest(name=opts.name or None)
        resp = await self._client.request(
            "PUT",
            f"/servers/{_server_id(server)}",
            json=payload.model_dump(exclude_none=True),
        )
        return server_from_schema(resp.parse(schemas.ServerGetResponse).server)

    async def delete(self, server: ServerRef) -> None:
        """Delete a server. All data on it is lost."""
        server_id = _server_id(server)
        await self._client.request("DELETE", f"/servers/{server_id}")
        logger.info("hcloud_server_deleted", server_id=server_id)

    async def _action(
        self, server: ServerRef, name: str, payload: dict[str, Any] | None = None
    ) -> schemas.ServerActionResponse:
        server_id = _server_id(server)
        resp = await self._client.request(
            "POST", f"/servers/{server_id}/actions/{name}", json=payload
        )
        body = resp.parse(schemas.ServerActionResponse)
        logger.info(
            "hcloud_server_action_started",
            server_id=server_id,
            action=name,
            action_id=body.action.id,
        )
        return body

    async def poweron(self, server: ServerRef) -> Action:
        """Start a server."""
        return action_from_schema((await self._action(server, "poweron")).action)

    async def poweroff(self, server: ServerRef) -> Action:
        """Cut power to a server (hard stop)."""
        return action_from_schema((await self._action(server, "poweroff")).action)

    async def reboot(self, server: ServerRef) -> Action:
        """Reboot a server via ACPI."""
        return action_from_schema((await self._action(server, "reboot")).action)

    async def reset(self, server: ServerRef) -> Action:
        """Cut power to a server and start it again."""
        return action_from_schema((await self._action(server, "reset")).action)

    async def shutdown(self, server: ServerRef) -> Action:
        """Shut a server down gracefully via ACPI."""
        return action_from_schema((await self._action(server, "shutdown")).action)

    async def reset_password(self, server: ServerRef) -> ServerResetPasswordResult:
        """Reset the root password. Requires the qemu guest agent on the server."""
        server_id = _server_id(server)
        resp = await self._client.request("POST", f"/servers/{server_id}/actions/reset_password")
        body = resp.parse(schemas.ServerActionResetPasswordResponse)
        logger.info(
            "hcloud_server_action_started",
            server_id=server_id,
            action="reset_password",
            action_id=body.action.id,
        )
        return ServerResetPasswordResult(
            action=action_from_schema(body.action),
            root_password=body.root_password,
        )

    async def create_image(
        self, server: ServerRef, opts: ServerCreateImageOpts | None = None
    ) -> ServerCreateImageResult:
        """Create a snapshot (default) or backup image from a server."""
        payload: dict[str, Any] = {}
        if opts is not None:
            opts.validate()
            payload = schemas.ServerActionCreateImageRequest(
                type=ImageType(opts.type).value if opts.type is not None else None,
                description=opts.description,
            ).model_dump(exclude_none=True)

        server_id = _server_id(server)
        resp = await self._client.request(
            "POST", f"/servers/{server_id}/actions/create_image", json=payload
        )
        body = resp.parse(schemas.ServerActionCreateImageResponse)
        logger.info(
            "hcloud_server_action_started",
            server_id=server_id,
            action="create_image",
            action_id=body.action.id,
            image_id=body.image.id,
        )
        return ServerCreateImageResult(
            action=action_from_schema(body.action),
            image=image_from_schema(body.image),
        )

    async def enable_rescue(
        self, server: ServerRef, opts: ServerEnableRescueOpts | None = None
    ) -> ServerEnableRescueResult:
        """Enable rescue mode; takes effect on the next boot."""
        opts = opts or ServerEnableRescueOpts()
        opts.validate()
        payload = schemas.ServerActionEnableRescueRequest(
            type=RescueType(opts.type).value if opts.type is not None else None,
            ssh_keys=_ssh_key_ids(opts.ssh_keys) or None,
        ).model_dump(exclude_none=True)

        server_id = _server_id(server)
        resp = await self._client.request(
            "POST", f"/servers/{server_id}/actions/enable_rescue", json=payload
        )
        body = resp.parse(schemas.ServerActionEnableRescueResponse)
        logger.info(
            "hcloud_server_action_started",
            server_id=server_id,
            action="enable_rescue",
            action_id=body.action.id,
        )
        return ServerEnableRescueResult(
            action=action_from_schema(body.action),
            root_password=body.root_password,
        )

    async def disable_rescue(self, server: ServerRef) -> Action:
        """Disable rescue mode; the server boots from its disk again."""
        return action_from_schema((await self._action(server, "disable_rescue")).action)

    async def rebuild(self, server: ServerRef, opts: ServerRebuildOpts) -> Action:
        """Reinstall a server from an image. All data on the server is lost."""
        opts.validate()
        payload = schemas.ServerActionRebuildRequest(image=_id_or_name(opts.image)).model_dump()
        return action_from_schema((await self._action(server, "rebuild", payload)).action)

    async def change_type(self, server: ServerRef, opts: ServerChangeTypeOpts) -> Action:
        """Change the server type. The server must be powered off."""
        opts.validate()
        payload = schemas.ServerActionChangeTypeRequest(
            server_type=_id_or_name(opts.server_type),
            upgrade_disk=opts.upgrade_disk,
        ).model_dump()
        return action_from_schema((await self._action(server, "change_type", payload)).action)
