"""Helpers for host device networks and the NV peer memory driver state."""

from __future__ import annotations

import logging
import re

from netop.nodeinfo.attributes import NODE_LABEL_CUDA_VERSION_MAJOR, AttributeType
from netop.nodeinfo.filter import NodeLabelNoValFilterBuilder
from netop.nodeinfo.node_info import Provider

log = logging.getLogger(__name__)

RESOURCE_NAME_PREFIX = "nvidia.com/"

# Starting from this GPU driver version the NV peer memory driver is built in
# and need not be deployed.
MAX_CUDA_VERSION_MAJOR = 465

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def host_device_resource_name(resource_name: str) -> str:
    """Return ``resource_name`` with the resource prefix, adding it if missing."""
    if resource_name.startswith(RESOURCE_NAME_PREFIX):
        return resource_name
    return RESOURCE_NAME_PREFIX + resource_name


def _parse_version(value: str) -> int | None:
    if _DECIMAL.fullmatch(value) is None:
        return None
    return int(value)


def should_ignore_nv_peer_status(provider: Provider) -> bool:
    """Whether the NV peer memory driver status should be ignored.

    True only when there are nodes reporting a GPU driver major version and
    every one of them reports a version of at least
    :data:`MAX_CUDA_VERSION_MAJOR`. No such nodes, an unreadable version or
    any older driver mean syncing must go on.
    """
    cuda_filter = (
        NodeLabelNoValFilterBuilder().with_label(NODE_LABEL_CUDA_VERSION_MAJOR).build()
    )
    attrs = provider.get_nodes_attributes(cuda_filter)
    if not attrs:
        return False
    for attr in attrs:
        version = _parse_version(attr.attributes.get(AttributeType.CUDA_VERSION_MAJOR, ""))
        if version is None:
            log.info("Fail to check GPU driver version")
            return False
        if version < MAX_CUDA_VERSION_MAJOR:
            return False
    return True