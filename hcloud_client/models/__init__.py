"""Domain models returned by the resource clients.

Every model is a frozen dataclass: a snapshot of the resource at the time
of the call. The ``*_from_schema`` functions convert the wire schemas.
"""

from .action import Action, ActionResource, ActionStatus, action_from_schema
from .image import Image, ImageCreatedFrom, ImageStatus, ImageType, image_from_schema
from .location import (
    Datacenter,
    DatacenterServerTypes,
    Location,
    datacenter_from_schema,
    location_from_schema,
)
from .server import (
    ISO,
    Server,
    ServerPublicNet,
    ServerPublicNetIPv4,
    ServerPublicNetIPv6,
    ServerStatus,
    server_from_schema,
)
from .server_type import ServerType, server_type_from_schema
from .ssh_key import SSHKey, ssh_key_from_schema

__all__ = [
    "Action",
    "ActionResource",
    "ActionStatus",
    "Datacenter",
    "DatacenterServerTypes",
    "ISO",
    "Image",
    "ImageCreatedFrom",
    "ImageStatus",
    "ImageType",
    "Location",
    "SSHKey",
    "Server",
    "ServerPublicNet",
    "ServerPublicNetIPv4",
    "ServerPublicNetIPv6",
    "ServerStatus",
    "ServerType",
    "action_from_schema",
    "datacenter_from_schema",
    "image_from_schema",
    "location_from_schema",
    "server_from_schema",
    "server_type_from_schema",
    "ssh_key_from_schema",
]
