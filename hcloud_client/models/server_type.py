"""Server type domain model."""

from dataclasses import dataclass

from hcloud_client import schemas


@dataclass(frozen=True)
class ServerType:
    id: int
    name: str = ""
    description: str = ""
    cores: int = 0
    memory: float = 0
    disk: int = 0
    storage_type: str = ""


def server_type_from_schema(s: schemas.ServerType) -> ServerType:
    return ServerType(
        id=s.id,
        name=s.name,
        description=s.description,
        cores=s.cores,
        memory=s.memory,
        disk=s.disk,
        storage_type=s.storage_type or "",
    )
