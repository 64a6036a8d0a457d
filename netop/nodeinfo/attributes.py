"""Node attributes derived from well-known node labels."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum

log = logging.getLogger(__name__)

NODE_LABEL_OS_NAME = "feature.node.kubernetes.io/system-os_release.ID"
NODE_LABEL_OS_VER = "feature.node.kubernetes.io/system-os_release.VERSION_ID"
NODE_LABEL_KERNEL_VER_FULL = "feature.node.kubernetes.io/kernel-version.full"
NODE_LABEL_HOSTNAME = "kubernetes.io/hostname"
NODE_LABEL_CPU_ARCH = "kubernetes.io/arch"
NODE_LABEL_MLNX_NIC = "feature.node.kubernetes.io/pci-15b3.present"
NODE_LABEL_NV_GPU = "nvidia.com/gpu.present"
NODE_LABEL_WAIT_OFED = "network.nvidia.com/operator.mofed.wait"
NODE_LABEL_CUDA_VERSION_MAJOR = "nvidia.com/cuda.driver.major"


class AttributeType(IntEnum):
    """Kinds of node attribute; required ones come before the optional ones."""

    HOSTNAME = 0
    CPU_ARCH = 1
    OS_NAME = 2
    OS_VER = 3
    CUDA_VERSION_MAJOR = 4

    @property
    def label(self) -> str:
        """The node label this attribute is read from."""
        return _ATTR_TO_LABEL[self]

    @property
    def optional(self) -> bool:
        """Whether a node may lack this attribute without a warning."""
        return self >= OPTIONAL_ATTRS_START


OPTIONAL_ATTRS_START = AttributeType.CUDA_VERSION_MAJOR

_ATTR_TO_LABEL = {
    AttributeType.HOSTNAME: NODE_LABEL_HOSTNAME,
    AttributeType.CPU_ARCH: NODE_LABEL_CPU_ARCH,
    AttributeType.OS_NAME: NODE_LABEL_OS_NAME,
    AttributeType.OS_VER: NODE_LABEL_OS_VER,
    AttributeType.CUDA_VERSION_MAJOR: NODE_LABEL_CUDA_VERSION_MAJOR,
}


@dataclass
class Node:
    """A cluster node as far as label lookups are concerned."""

    name: str
    labels: dict[str, str] = field(default_factory=dict)
    kind: str = "Node"


class MissingLabelError(LookupError):
    """Raised when a node lacks the label an attribute is read from."""

    def __init__(self, label: str) -> None:
        super().__init__(f"cannot create node attribute, missing label: {label}")
        self.label = label


@dataclass
class NodeAttributes:
    """Attributes of a single node, keyed by attribute type."""

    name: str = ""
    attributes: dict[AttributeType, str] = field(default_factory=dict)

    def from_label(
        self,
        attr_type: AttributeType,
        node_labels: Mapping[str, str],
        selected_label: str,
    ) -> None:
        """Set ``attr_type`` from the value of ``selected_label``.

        An empty value is kept: a label may carry meaning by its presence alone.
        """
        try:
            value = node_labels[selected_label]
        except KeyError:
            raise MissingLabelError(selected_label) from None
        self.attributes[attr_type] = value


def node_attributes(node: Node) -> NodeAttributes:
    """Collect every known attribute present in the node's labels."""
    attrs = NodeAttributes(name=node.name)
    for attr_type in AttributeType:
        try:
            attrs.from_label(attr_type, node.labels, attr_type.label)
        except MissingLabelError as err:
            if not attr_type.optional:
                log.warning(
                    "Cannot create NodeAttribute: attribute=%s error=%s",
                    attr_type.name,
                    err,
                )
    return attrs