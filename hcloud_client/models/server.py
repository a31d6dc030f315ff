"""Server domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from hcloud_client import schemas

from .image import Image, image_from_schema
from .location import Datacenter, datacenter_from_schema
from .server_type import ServerType, server_type_from_schema


class ServerStatus(str, Enum):
    """Server status as reported by the API."""

    INITIALIZING = "initializing"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"
    OFF = "off"
    DELETING = "deleting"
    MIGRATING = "migrating"
    REBUILDING = "rebuilding"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ServerPublicNetIPv4:
    ip: str = ""
    blocked: bool = False
    dns_ptr: str = ""


@dataclass(frozen=True)
class ServerPublicNetIPv6:
    network: str = ""
    blocked: bool = False

    @property
    def ip(self) -> str:
        """First address of the network, without prefix length."""
        if not self.network:
            return ""
        return self.network.split("/", 1)[0]


@dataclass(frozen=True)
class ServerPublicNet:
    ipv4: ServerPublicNetIPv4 = field(default_factory=ServerPublicNetIPv4)
    ipv6: ServerPublicNetIPv6 = field(default_factory=ServerPublicNetIPv6)
    floating_ips: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ISO:
    id: int
    name: str = ""
    description: str = ""
    type: str = ""


@dataclass(frozen=True)
class Server:
    id: int
    name: str = ""
    status: ServerStatus | str = ServerStatus.UNKNOWN
    created: datetime | None = None
    public_net: ServerPublicNet = field(default_factory=ServerPublicNet)
    server_type: ServerType | None = None
    datacenter: Datacenter | None = None
    image: Image | None = None
    iso: ISO | None = None
    rescue_enabled: bool = False
    locked: bool = False
    backup_window: str = ""
    outgoing_traffic: int = 0
    ingoing_traffic: int = 0
    included_traffic: int = 0


def _server_status(value: str | None) -> ServerStatus | str:
    if value is None:
        return ServerStatus.UNKNOWN
    try:
        return ServerStatus(value)
    except ValueError:
        return value


def server_public_net_from_schema(s: schemas.ServerPublicNet) -> ServerPublicNet:
    return ServerPublicNet(
        ipv4=ServerPublicNetIPv4(ip=s.ipv4.ip, blocked=s.ipv4.blocked, dns_ptr=s.ipv4.dns_ptr),
        ipv6=ServerPublicNetIPv6(network=s.ipv6.ip, blocked=s.ipv6.blocked),
        floating_ips=tuple(s.floating_ips),
    )


def server_from_schema(s: schemas.Server) -> Server:
    iso = None
    if s.iso is not None:
        iso = ISO(id=s.iso.id, name=s.iso.name, description=s.iso.description, type=s.iso.type or "")
    return Server(
        id=s.id,
        name=s.name,
        status=_server_status(s.status),
        created=s.created,
        public_net=server_public_net_from_schema(s.public_net),
        server_type=server_type_from_schema(s.server_type) if s.server_type else None,
        datacenter=datacenter_from_schema(s.datacenter) if s.datacenter else None,
        image=image_from_schema(s.image) if s.image else None,
        iso=iso,
        rescue_enabled=s.rescue_enabled,
        locked=s.locked,
        backup_window=s.backup_window or "",
        # null until the first billing period starts
        outgoing_traffic=s.outgoing_traffic or 0,
        ingoing_traffic=s.ingoing_traffic or 0,
        included_traffic=s.included_traffic,
    )
