"""Location and datacenter domain models."""

from dataclasses import dataclass, field

from hcloud_client import schemas


@dataclass(frozen=True)
class Location:
    id: int
    name: str = ""
    description: str = ""
    country: str = ""
    city: str = ""
    latitude: float = 0
    longitude: float = 0


@dataclass(frozen=True)
class DatacenterServerTypes:
    supported: tuple[int, ...] = field(default_factory=tuple)
    available: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Datacenter:
    id: int
    name: str = ""
    description: str = ""
    location: Location | None = None
    server_types: DatacenterServerTypes = field(default_factory=DatacenterServerTypes)


def location_from_schema(s: schemas.Location) -> Location:
    return Location(
        id=s.id,
        name=s.name,
        description=s.description,
        country=s.country,
        city=s.city,
        latitude=s.latitude,
        longitude=s.longitude,
    )


def datacenter_from_schema(s: schemas.Datacenter) -> Datacenter:
    return Datacenter(
        id=s.id,
        name=s.name,
        description=s.description,
        location=location_from_schema(s.location) if s.location else None,
        server_types=DatacenterServerTypes(
            supported=tuple(s.server_types.supported),
            available=tuple(s.server_types.available),
        ),
    )
