"""Pydantic schemas for the SSH Keys API.

API Documentation: https://docs.hetzner.cloud/#ssh-keys
"""

from pydantic import BaseModel, ConfigDict, Field


class SSHKey(BaseModel):
    """SSH key as returned by GET /ssh_keys/{id}."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique SSH key ID")
    name: str = Field("", description="Unique name of the key")
    fingerprint: str = Field("", description="MD5 fingerprint of the public key")
    public_key: str = Field("", description="Public key in OpenSSH format")


class SSHKeyGetResponse(BaseModel):
    ssh_key: SSHKey


class SSHKeyListResponse(BaseModel):
    ssh_keys: list[SSHKey] = Field(default_factory=list)


class SSHKeyCreateRequest(BaseModel):
    name: str
    public_key: str


class SSHKeyCreateResponse(BaseModel):
    ssh_key: SSHKey


class SSHKeyUpdateRequest(BaseModel):
    name: str | None = None
