"""Plugin definitions."""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import DockerModel


class PluginMount(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    description: Optional[str] = Field(None, alias="Description")
    settable: Optional[List[str]] = Field(None, alias="Settable")
    source: Optional[str] = Field(None, alias="Source")
    destination: Optional[str] = Field(None, alias="Destination")
    type: Optional[str] = Field(None, alias="Type")
    options: Optional[List[str]] = Field(None, alias="Options")


class PluginDevice(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    description: Optional[str] = Field(None, alias="Description")
    settable: Optional[List[str]] = Field(None, alias="Settable")
    path: Optional[str] = Field(None, alias="Path")


class PluginEnv(DockerModel):
    name: Optional[str] = Field(None, alias="Name")
    description: Optional[str] = Field(None, alias="Description")
    settable: Optional[List[str]] = Field(None, alias="Settable")
    value: Optional[str] = Field(None, alias="Value")


class PluginInterfaceType(DockerModel):
    prefix: Optional[str] = Field(None, alias="Prefix")
    capability: Optional[str] = Field(None, alias="Capability")
    version: Optional[str] = Field(None, alias="Version")


class PluginPrivilege(DockerModel):
    """A privilege a plugin requests, as returned by /plugins/privileges and sent back on pull."""
    name: Optional[str] = Field(None, alias="Name")
    description: Optional[str] = Field(None, alias="Description")
    value: Optional[List[str]] = Field(None, alias="Value")


class Plugin(DockerModel):
    """A plugin for the Engine API"""
    id: Optional[str] = Field(None, alias="Id")
    name: Optional[str] = Field(None, alias="Name")
    enabled: Optional[bool] = Field(None, alias="Enabled")
    settings: Optional[Dict[str, Any]] = Field(None, alias="Settings")
    plugin_reference: Optional[str] = Field(None, alias="PluginReference")
    config: Optional[Dict[str, Any]] = Field(None, alias="Config")
