"""Resource clients for the Hetzner Cloud API."""

from .action import ActionClient, ActionListOpts
from .base import ALL_PAGE_SIZE, Client, ListOpts, Page, ResourceClient, Response
from .datacenter import DatacenterClient, DatacenterListOpts
from .image import ImageClient, ImageListOpts, ImageUpdateOpts
from .location import LocationClient, LocationListOpts
from .server import (
    RescueType,
    ServerChangeTypeOpts,
    ServerClient,
    ServerCreateImageOpts,
    ServerCreateImageResult,
    ServerCreateOpts,
    ServerCreateResult,
    ServerEnableRescueOpts,
    ServerEnableRescueResult,
    ServerListOpts,
    ServerRebuildOpts,
    ServerResetPasswordResult,
    ServerUpdateOpts,
)
from .server_type import ServerTypeClient, ServerTypeListOpts
from .ssh_key import SSHKeyClient, SSHKeyCreateOpts, SSHKeyListOpts, SSHKeyUpdateOpts

__all__ = [
    "ALL_PAGE_SIZE",
    "ActionClient",
    "ActionListOpts",
    "Client",
    "DatacenterClient",
    "DatacenterListOpts",
    "ImageClient",
    "ImageListOpts",
    "ImageUpdateOpts",
    "ListOpts",
    "LocationClient",
    "LocationListOpts",
    "Page",
    "RescueType",
    "ResourceClient",
    "Response",
    "SSHKeyClient",
    "SSHKeyCreateOpts",
    "SSHKeyListOpts",
    "SSHKeyUpdateOpts",
    "ServerChangeTypeOpts",
    "ServerClient",
    "ServerCreateImageOpts",
    "ServerCreateImageResult",
    "ServerCreateOpts",
    "ServerCreateResult",
    "ServerEnableRescueOpts",
    "ServerEnableRescueResult",
    "ServerListOpts",
    "ServerRebuildOpts",
    "ServerResetPasswordResult",
    "ServerTypeClient",
    "ServerTypeListOpts",
    "ServerUpdateOpts",
]
