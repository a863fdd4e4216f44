"""Network and volume definitions."""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import DockerModel


class IPAM(DockerModel):
    driver: Optional[str] = Field(None, alias="Driver")
    config: Optional[List[Dict[str, Any]]] = Field(None, alias="Config")
    options: Optional[Dict[str, Any]] = Field(None, alias="Options")


class NetworkContainer(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    endpoint_id: Optional[str] = Field(None, alias="EndpointID")
    mac_address: Optional[str] = Field(None, alias="MacAddress")
    ipv4_address: Optional[str] = Field(None, alias="IPv4Address")
    ipv6_address: Optional[str] = Field(None, alias="IPv6Address")


class Network(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    id: Optional[str] = Field(None, alias="Id")
    created: Optional[str] = Field(None, alias="Created")
    scope: Optional[str] = Field(None, alias="Scope")
    driver: Optional[str] = Field(None, alias="Driver")
    enable_ipv6: Optional[bool] = Field(None, alias="EnableIPv6")
    ipam: Optional[IPAM] = Field(None, alias="IPAM")
    internal: Optional[bool] = Field(None, alias="Internal")
    attachable: Optional[bool] = Field(None, alias="Attachable")
    ingress: Optional[bool] = Field(None, alias="Ingress")
    containers: Optional[Dict[str, NetworkContainer]] = Field(None, alias="Containers")
    options: Optional[Dict[str, str]] = Field(None, alias="Options")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")


class EndpointIPAMConfig(DockerModel):
    """An endpoint's IPAM configuration."""
    ipv4_address: Optional[str] = Field(None, alias="IPv4Address")
    ipv6_address: Optional[str] = Field(None, alias="IPv6Address")
    link_local_ips: Optional[List[str]] = Field(None, alias="LinkLocalIPs")


class EndpointSettings(DockerModel):
    """Configuration for a network endpoint."""
    ipam_config: Optional[EndpointIPAMConfig] = Field(None, alias="IPAMConfig")
    links: Optional[List[str]] = Field(None, alias="Links")
    aliases: Optional[List[str]] = Field(None, alias="Aliases")
    network_id: Optional[str] = Field(None, alias="NetworkID")
    endpoint_id: Optional[str] = Field(None, alias="EndpointID")
    gateway: Optional[str] = Field(None, alias="Gateway")
    ip_address: Optional[str] = Field(None, alias="IPAddress")
    ip_prefix_len: Optional[int] = Field(None, alias="IPPrefixLen")
    ipv6_gateway: Optional[str] = Field(None, alias="IPv6Gateway")
    global_ipv6_address: Optional[str] = Field(None, alias="GlobalIPv6Address")
    global_ipv6_prefix_len: Optional[int] = Field(None, alias="GlobalIPv6PrefixLen")
    mac_address: Optional[str] = Field(None, alias="MacAddress")
    driver_opts: Optional[Dict[str, str]] = Field(None, alias="DriverOpts")


class Address(DockerModel):
    addr: Optional[str] = Field(None, alias="Addr")
    prefix_len: Optional[int] = Field(None, alias="PrefixLen")


class NetworkSettings(DockerModel):
    """The network settings of a container, as exposed by the API."""
    bridge: Optional[str] = Field(None, alias="Bridge")
    sandbox_id: Optional[str] = Field(None, alias="SandboxID")
    hairpin_mode: Optional[bool] = Field(None, alias="HairpinMode")
    link_local_ipv6_address: Optional[str] = Field(None, alias="LinkLocalIPv6Address")
    link_local_ipv6_prefix_len: Optional[int] = Field(None, alias="LinkLocalIPv6PrefixLen")
    ports: Optional[Dict[str, Any]] = Field(None, alias="Ports")
    sandbox_key: Optional[str] = Field(None, alias="SandboxKey")
    secondary_ip_addresses: Optional[List[Address]] = Field(None, alias="SecondaryIPAddresses")
    secondary_ipv6_addresses: Optional[List[Address]] = Field(None, alias="SecondaryIPv6Addresses")
    endpoint_id: Optional[str] = Field(None, alias="EndpointID")
    gateway: Optional[str] = Field(None, alias="Gateway")
    global_ipv6_address: Optional[str] = Field(None, alias="GlobalIPv6Address")
    global_ipv6_prefix_len: Optional[int] = Field(None, alias="GlobalIPv6PrefixLen")
    ip_address: Optional[str] = Field(None, alias="IPAddress")
    ip_prefix_len: Optional[int] = Field(None, alias="IPPrefixLen")
    ipv6_gateway: Optional[str] = Field(None, alias="IPv6Gateway")
    mac_address: Optional[str] = Field(None, alias="MacAddress")
    networks: Optional[Dict[str, EndpointSettings]] = Field(None, alias="Networks")


class Volume(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    driver: Optional[str] = Field(None, alias="Driver")
    mountpoint: Optional[str] = Field(None, alias="Mountpoint")
    created_at: Optional[str] = Field(None, alias="CreatedAt")
    status: Optional[Dict[str, Any]] = Field(None, alias="Status")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    scope: Optional[str] = Field(None, alias="Scope")
    options: Optional[Dict[str, str]] = Field(None, alias="Options")
    usage_data: Optional[Dict[str, Any]] = Field(None, alias="UsageData")
