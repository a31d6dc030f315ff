"""Image domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from hcloud_client import schemas


class ImageType(str, Enum):
    SYSTEM = "system"
    SNAPSHOT = "snapshot"
    BACKUP = "backup"


class ImageStatus(str, Enum):
    AVAILABLE = "available"
    CREATING = "creating"


@dataclass(frozen=True)
class ImageCreatedFrom:
    id: int
    name: str = ""


@dataclass(frozen=True)
class Image:
    id: int
    name: str = ""
    type: ImageType | str | None = None
    status: ImageStatus | str | None = None
    description: str = ""
    image_size: float | None = None
    disk_size: float = 0
    created: datetime | None = None
    created_from: ImageCreatedFrom | None = None
    bound_to: int | None = None
    os_flavor: str = ""
    os_version: str = ""
    rapid_deploy: bool = False


def _enum_or_raw(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def image_from_schema(s: schemas.Image) -> Image:
    created_from = None
    if s.created_from is not None:
        created_from = ImageCreatedFrom(id=s.created_from.id, name=s.created_from.name)
    return Image(
        id=s.id,
        name=s.name or "",
        type=_enum_or_raw(ImageType, s.type),
        status=_enum_or_raw(ImageStatus, s.status),
        description=s.description,
        image_size=s.image_size,
        disk_size=s.disk_size,
        created=s.created,
        created_from=created_from,
        bound_to=s.bound_to,
        os_flavor=s.os_flavor,
        os_version=s.os_version or "",
        rapid_deploy=s.rapid_deploy,
    )
