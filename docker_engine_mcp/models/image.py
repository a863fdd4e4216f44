"""Image definitions."""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import DockerModel
from .common import ErrorDetail, ProgressDetail
from .container import ContainerConfig


class ImageSummary(DockerModel):
    id: Optional[str] = Field(None, alias="Id")
    parent_id: Optional[str] = Field(None, alias="ParentId")
    repo_tags: Optional[List[str]] = Field(None, alias="RepoTags")
    repo_digests: Optional[List[str]] = Field(None, alias="RepoDigests")
    created: Optional[int] = Field(None, alias="Created")
    size: Optional[int] = Field(None, alias="Size")
    shared_size: Optional[int] = Field(None, alias="SharedSize")
    virtual_size: Optional[int] = Field(None, alias="VirtualSize")
    labels: Optional[Dict[str, str]] = Field(None, alias="Labels")
    containers: Optional[int] = Field(None, alias="Containers")


class GraphDriverData(DockerModel):
    """Information about a container's graph driver."""
    name: Optional[str] = Field(None, alias="Name")
    data: Optional[Dict[str, Any]] = Field(None, alias="Data")


class Image(DockerModel):
    id: Optional[str] = Field(None, alias="Id")
    repo_tags: Optional[List[str]] = Field(None, alias="RepoTags")
    repo_digests: Optional[List[str]] = Field(None, alias="RepoDigests")
    parent: Optional[str] = Field(None, alias="Parent")
    comment: Optional[str] = Field(None, alias="Comment")
    created: Optional[str] = Field(None, alias="Created")
    container: Optional[str] = Field(None, alias="Container")
    container_config: Optional[ContainerConfig] = Field(None, alias="ContainerConfig")
    docker_version: Optional[str] = Field(None, alias="DockerVersion")
    author: Optional[str] = Field(None, alias="Author")
    config: Optional[ContainerConfig] = Field(None, alias="Config")
    architecture: Optional[str] = Field(None, alias="Architecture")
    os: Optional[str] = Field(None, alias="Os")
    os_version: Optional[str] = Field(None, alias="OsVersion")
    size: Optional[int] = Field(None, alias="Size")
    virtual_size: Optional[int] = Field(None, alias="VirtualSize")
    graph_driver: Optional[GraphDriverData] = Field(None, alias="GraphDriver")
    root_fs: Optional[Dict[str, Any]] = Field(None, alias="RootFS")
    metadata: Optional[Dict[str, Any]] = Field(None, alias="Metadata")


class ImageDeleteResponseItem(DockerModel):
    untagged: Optional[str] = Field(None, alias="Untagged")
    deleted: Optional[str] = Field(None, alias="Deleted")


class CreateImageInfo(DockerModel):
    id: Optional[str] = None
    error: Optional[str] = None
    status: Optional[str] = None
    progress: Optional[str] = None
    progress_detail: Optional[ProgressDetail] = Field(None, alias="progressDetail")


class PushImageInfo(DockerModel):
    error: Optional[str] = None
    status: Optional[str] = None
    progress: Optional[str] = None
    progress_detail: Optional[ProgressDetail] = Field(None, alias="progressDetail")


class BuildInfo(DockerModel):
    id: Optional[str] = None
    stream: Optional[str] = None
    error: Optional[str] = None
    error_detail: Optional[ErrorDetail] = Field(None, alias="errorDetail")
    status: Optional[str] = None
    progress: Optional[str] = None
    progress_detail: Optional[ProgressDetail] = Field(None, alias="progressDetail")
