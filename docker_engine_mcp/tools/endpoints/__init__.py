# docker_engine_mcp/tools/endpoints/__init__.py
"""
Endpoint Catalog

Collects the descriptors of every supported Docker Engine endpoint, grouped
by resource. The order here is the order tools are listed to clients.
"""

from typing import List

from ..descriptor import EndpointDescriptor
from . import container, exec_instance, image, network, plugin, swarm, system

ALL_ENDPOINTS: List[EndpointDescriptor] = (
    container.ENDPOINTS
    + exec_instance.ENDPOINTS
    + image.ENDPOINTS
    + network.NETWORK_ENDPOINTS
    + network.VOLUME_ENDPOINTS
    + swarm.SWARM_ENDPOINTS
    + swarm.NODE_ENDPOINTS
    + swarm.SERVICE_ENDPOINTS
    + swarm.TASK_ENDPOINTS
    + swarm.SECRET_ENDPOINTS
    + swarm.CONFIG_ENDPOINTS
    + plugin.ENDPOINTS
    + system.ENDPOINTS
    + system.DISTRIBUTION_ENDPOINTS
)
