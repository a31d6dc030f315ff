"""SSH key domain model."""

from dataclasses import dataclass

from hcloud_client import schemas


@dataclass(frozen=True)
class SSHKey:
    id: int
    name: str = ""
    fingerprint: str = ""
    public_key: str = ""


def ssh_key_from_schema(s: schemas.SSHKey) -> SSHKey:
    return SSHKey(
        id=s.id,
        name=s.name,
        fingerprint=s.fingerprint,
        public_key=s.public_key,
    )
