"""Wire schemas for the Hetzner Cloud API.

These models mirror the JSON the API sends and accepts. Resource clients
convert them into the domain objects in ``hcloud_client.models``.

Usage:
    from hcloud_client.schemas import ServerGetResponse, ErrorResponse
"""

from .action import (
    Action,
    ActionError,
    ActionGetResponse,
    ActionListResponse,
    ActionResourceReference,
)
from .image import (
    Image,
    ImageCreatedFrom,
    ImageGetResponse,
    ImageListResponse,
    ImageUpdateRequest,
)
from .location import (
    Datacenter,
    DatacenterGetResponse,
    DatacenterListResponse,
    DatacenterServerTypes,
    Location,
    LocationGetResponse,
    LocationListResponse,
)
from .meta import Error, ErrorResponse, Meta, MetaPagination
from .server import (
    ISO,
    Server,
    ServerActionChangeTypeRequest,
    ServerActionCreateImageRequest,
    ServerActionCreateImageResponse,
    ServerActionEnableRescueRequest,
    ServerActionEnableRescueResponse,
    ServerActionRebuildRequest,
    ServerActionResetPasswordResponse,
    ServerActionResponse,
    ServerCreateRequest,
    ServerCreateResponse,
    ServerGetResponse,
    ServerListResponse,
    ServerPublicNet,
    ServerPublicNetIPv4,
    ServerPublicNetIPv6,
    ServerUpdateRequest,
)
from .server_type import ServerType, ServerTypeGetResponse, ServerTypeListResponse
from .ssh_key import (
    SSHKey,
    SSHKeyCreateRequest,
    SSHKeyCreateResponse,
    SSHKeyGetResponse,
    SSHKeyListResponse,
    SSHKeyUpdateRequest,
)

__all__ = [
    # Envelope
    "Meta",
    "MetaPagination",
    "Error",
    "ErrorResponse",
    # Actions
    "Action",
    "ActionError",
    "ActionResourceReference",
    "ActionGetResponse",
    "ActionListResponse",
    # Images
    "Image",
    "ImageCreatedFrom",
    "ImageGetResponse",
    "ImageListResponse",
    "ImageUpdateRequest",
    # Locations / datacenters
    "Location",
    "LocationGetResponse",
    "LocationListResponse",
    "Datacenter",
    "DatacenterServerTypes",
    "DatacenterGetResponse",
    "DatacenterListResponse",
    # Server types
    "ServerType",
    "ServerTypeGetResponse",
    "ServerTypeListResponse",
    # Servers
    "ISO",
    "Server",
    "ServerPublicNet",
    "ServerPublicNetIPv4",
    "ServerPublicNetIPv6",
    "ServerGetResponse",
    "ServerListResponse",
    "ServerCreateRequest",
    "ServerCreateResponse",
    "ServerUpdateRequest",
    "ServerActionResponse",
    "ServerActionResetPasswordResponse",
    "ServerActionCreateImageRequest",
    "ServerActionCreateImageResponse",
    "ServerActionEnableRescueRequest",
    "ServerActionEnableRescueResponse",
    "ServerActionRebuildRequest",
    "ServerActionChangeTypeRequest",
    # SSH keys
    "SSHKey",
    "SSHKeyGetResponse",
    "SSHKeyListResponse",
    "SSHKeyCreateRequest",
    "SSHKeyCreateResponse",
    "SSHKeyUpdateRequest",
]
