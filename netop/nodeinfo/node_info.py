"""Access to node attributes for a known list of nodes."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from netop.nodeinfo.attributes import NODE_LABEL_MLNX_NIC, Node, NodeAttributes, node_attributes
from netop.nodeinfo.filter import Filter

# Labels that select nodes bearing a Mellanox NIC.
MELLANOX_NIC_MATCH_LABELS = MappingProxyType({NODE_LABEL_MLNX_NIC: "true"})


class Provider:
    """Provides attributes of the nodes it was given."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._nodes = list(nodes)

    def get_nodes_attributes(self, *args: Filter) -> list[NodeAttributes]:
        """Apply the filters in turn and return attributes of the nodes left."""
        filtered: list[Node] = self._nodes
        for node_filter in args:
            filtered = node_filter.apply(filtered)
        return [node_attributes(node) for node in filtered]