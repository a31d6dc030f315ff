"""Pydantic schemas for the Servers API.

API Documentation: https://docs.hetzner.cloud/#servers
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .action import Action
from .image import Image
from .location import Datacenter
from .server_type import ServerType


class ServerPublicNetIPv4(BaseModel):
    model_config = ConfigDict(extra="allow")

    ip: str = Field("", description="Primary IPv4 address")
    blocked: bool = Field(False, description="Whether the address is blocked")
    dns_ptr: str = Field("", description="Reverse DNS entry")


class ServerPublicNetIPv6(BaseModel):
    model_config = ConfigDict(extra="allow")

    ip: str = Field("", description="IPv6 network of the server (e.g., '2001:db8::/64')")
    blocked: bool = Field(False, description="Whether the network is blocked")
    dns_ptr: list[dict] = Field(default_factory=list, description="Reverse DNS entries")


class ServerPublicNet(BaseModel):
    model_config = ConfigDict(extra="allow")

    ipv4: ServerPublicNetIPv4 = Field(default_factory=ServerPublicNetIPv4)
    ipv6: ServerPublicNetIPv6 = Field(default_factory=ServerPublicNetIPv6)
    floating_ips: list[int] = Field(default_factory=list, description="Assigned floating IP IDs")


class ISO(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique ISO ID")
    name: str = Field("", description="Unique ISO name")
    description: str = Field("", description="Description of the ISO")
    type: str | None = Field(None, description="Type: public or private")


class Server(BaseModel):
    """Server as returned by GET /servers/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique server ID")
    name: str = Field("", description="Unique server name")
    status: str | None = Field(None, description="Status (running, off, initializing, ...)")
    created: datetime | None = Field(None, description="Point in time when the server was created")
    public_net: ServerPublicNet = Field(default_factory=ServerPublicNet)
    server_type: ServerType | None = Field(None, description="Type of the server")
    datacenter: Datacenter | None = Field(None, description="Datacenter the server is located in")
    image: Image | None = Field(None, description="Image the server was created from")
    iso: ISO | None = Field(None, description="ISO attached to the server")
    rescue_enabled: bool = Field(False, description="Whether rescue mode is enabled")
    locked: bool = Field(False, description="Whether the server is locked by a running action")
    backup_window: str | None = Field(None, description="Time window for daily backups")
    outgoing_traffic: int | None = Field(None, description="Outbound traffic this billing period (bytes)")
    ingoing_traffic: int | None = Field(None, description="Inbound traffic this billing period (bytes)")
    included_traffic: int = Field(0, description="Free traffic per billing period (bytes)")


class ServerGetResponse(BaseModel):
    server: Server


class ServerListResponse(BaseModel):
    servers: list[Server] = Field(default_factory=list)


class ServerCreateRequest(BaseModel):
    """Body of POST /servers. ``server_type`` and ``image`` accept an ID or a name."""

    name: str
    server_type: int | str
    image: int | str
    ssh_keys: list[int] | None = None
    location: int | str | None = None
    datacenter: int | str | None = None
    user_data: str | None = None
    start_after_create: bool | None = None


class ServerCreateResponse(BaseModel):
    server: Server
    action: Action | None = None
    root_password: str | None = None


class ServerUpdateRequest(BaseModel):
    name: str | None = None


class ServerActionResponse(BaseModel):
    """Response of actions that only return the action (poweron, reboot, ...)."""

    action: Action


class ServerActionResetPasswordResponse(BaseModel):
    action: Action
    root_password: str = ""


class ServerActionCreateImageRequest(BaseModel):
    type: str | None = None
    description: str | None = None


class ServerActionCreateImageResponse(BaseModel):
    action: Action
    image: Image


class ServerActionEnableRescueRequest(BaseModel):
    type: str | None = None
    ssh_keys: list[int] | None = None


class ServerActionEnableRescueResponse(BaseModel):
    action: Action
    root_password: str = ""


class ServerActionRebuildRequest(BaseModel):
    image: int | str


class ServerActionChangeTypeRequest(BaseModel):
    server_type: int | str
    upgrade_disk: bool
