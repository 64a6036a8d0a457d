"""A catalog of information sources that states may consult while syncing."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from netop.nodeinfo.node_info import Provider


class InfoType(IntEnum):
    """Kinds of information source held in an :class:`InfoCatalog`."""

    NODE_INFO = 0


class InfoCatalog:
    """Information sources keyed by type; a missing source reads as ``None``."""

    def __init__(self) -> None:
        self._sources: dict[InfoType, Any] = {}

    def add(self, info_type: InfoType, info_source: Any) -> None:
        """Add or replace the source of ``info_type``."""
        self._sources[info_type] = info_source

    def get_node_info_provider(self) -> Provider | None:
        """The node information provider, or ``None`` if there is none."""
        source = self._sources.get(InfoType.NODE_INFO)
        if source is None:
            return None
        if not isinstance(source, Provider):
            raise TypeError(
                f"node info source is a {type(source).__name__}, not a Provider"
            )
        return source