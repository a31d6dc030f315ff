"""Async client library for the Hetzner Cloud API.

Usage:
    from hcloud_client import Client, ServerCreateOpts

    async with Client(token="...") as client:
        result = await client.server.create(
            ServerCreateOpts(name="web-1", server_type="cx11", image="ubuntu-22.04")
        )
        servers = await client.server.all()
"""

from .clients import (
    ActionListOpts,
    Client,
    DatacenterListOpts,
    ImageListOpts,
    ImageUpdateOpts,
    ListOpts,
    LocationListOpts,
    Page,
    RescueType,
    Response,
    ServerChangeTypeOpts,
    ServerCreateImageOpts,
    ServerCreateImageResult,
    ServerCreateOpts,
    ServerCreateResult,
    ServerEnableRescueOpts,
    ServerEnableRescueResult,
    ServerListOpts,
    ServerRebuildOpts,
    ServerResetPasswordResult,
    ServerTypeListOpts,
    ServerUpdateOpts,
    SSHKeyCreateOpts,
    SSHKeyListOpts,
    SSHKeyUpdateOpts,
)
from .config import ClientSettings
from .errors import APIError, ErrorCode, HCloudError, TransportError, ValidationError, is_error
from .models import (
    Action,
    ActionStatus,
    Datacenter,
    Image,
    ImageType,
    Location,
    Server,
    ServerStatus,
    ServerType,
    SSHKey,
)
from .version import __version__

__all__ = [
    "__version__",
    # Client
    "Client",
    "ClientSettings",
    "Page",
    "Response",
    "ListOpts",
    # Errors
    "HCloudError",
    "ValidationError",
    "TransportError",
    "APIError",
    "ErrorCode",
    "is_error",
    # Models
    "Action",
    "ActionStatus",
    "Datacenter",
    "Image",
    "ImageType",
    "Location",
    "SSHKey",
    "Server",
    "ServerStatus",
    "ServerType",
    # Options and results
    "ActionListOpts",
    "DatacenterListOpts",
    "ImageListOpts",
    "ImageUpdateOpts",
    "LocationListOpts",
    "RescueType",
    "ServerChangeTypeOpts",
    "ServerCreateImageOpts",
    "ServerCreateImageResult",
    "ServerCreateOpts",
    "ServerCreateResult",
    "ServerEnableRescueOpts",
    "ServerEnableRescueResult",
    "ServerListOpts",
    "ServerRebuildOpts",
    "ServerResetPasswordResult",
    "ServerTypeListOpts",
    "ServerUpdateOpts",
    "SSHKeyCreateOpts",
    "SSHKeyListOpts",
    "SSHKeyUpdateOpts",
]
