"""Shared definitions used across resource groups."""

from typing import Any, Dict, Optional
from pydantic import Field

from .base import DockerModel


class ObjectVersion(DockerModel):
    """Version number of a swarm object; sent back on update to avoid conflicting writes."""
    index: Optional[int] = Field(None, alias="Index")


class Driver(DockerModel):
    """Driver represents a driver (network, logging, secrets)."""
    name: Optional[str] = Field(None, alias="Name")
    options: Optional[Dict[str, Any]] = Field(None, alias="Options")


class Platform(DockerModel):
    architecture: Optional[str] = Field(None, alias="Architecture")
    os: Optional[str] = Field(None, alias="OS")


class IdResponse(DockerModel):
    """Response to an API call that returns just an Id."""
    id: Optional[str] = Field(None, alias="Id")


class ErrorResponse(DockerModel):
    message: Optional[str] = None


class ErrorDetail(DockerModel):
    code: Optional[int] = None
    message: Optional[str] = None


class ProgressDetail(DockerModel):
    current: Optional[int] = None
    total: Optional[int] = None


class TLSInfo(DockerModel):
    """Issuer of leaf TLS certificates and the trusted root CA certificate."""
    trust_root: Optional[str] = Field(None, alias="TrustRoot")
    cert_issuer_subject: Optional[str] = Field(None, alias="CertIssuerSubject")
    cert_issuer_public_key: Optional[str] = Field(None, alias="CertIssuerPublicKey")


class Commit(DockerModel):
    """Git commit a binary was built from, as reported in its version string."""
    id: Optional[str] = Field(None, alias="ID")
    expected: Optional[str] = Field(None, alias="Expected")
