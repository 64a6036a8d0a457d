"""Filters that select nodes by their labels."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from netop.nodeinfo.attributes import Node


class Filter(ABC):
    """Selects a subset of a list of nodes."""

    @abstractmethod
    def apply(self, nodes: Sequence[Node]) -> list[Node]:
        """Return the nodes that pass the filter, in their original order."""


@dataclass
class NodeLabelFilter(Filter):
    """Keeps nodes carrying every label with exactly the given value."""

    labels: dict[str, str] = field(default_factory=dict)

    def apply(self, nodes: Sequence[Node]) -> list[Node]:
        return [
            node
            for node in nodes
            if all(
                key in node.labels and node.labels[key] == value
                for key, value in self.labels.items()
            )
        ]


@dataclass
class NodeLabelNoValFilter(Filter):
    """Keeps nodes carrying every label, whatever its value."""

    labels: set[str] = field(default_factory=set)

    def apply(self, nodes: Sequence[Node]) -> list[Node]:
        return [node for node in nodes if self.labels <= node.labels.keys()]


class NodeLabelFilterBuilder:
    """Builds a :class:`NodeLabelFilter` one label at a time."""

    def __init__(self) -> None:
        self._filter = NodeLabelFilter()

    def with_label(self, key: str, val: str) -> NodeLabelFilterBuilder:
        self._filter.labels[key] = val
        return self

    def build(self) -> NodeLabelFilter:
        return self._filter

    def reset(self) -> NodeLabelFilterBuilder:
        self._filter = NodeLabelFilter()
        return self


class NodeLabelNoValFilterBuilder:
    """Builds a :class:`NodeLabelNoValFilter` one label at a time."""

    def __init__(self) -> None:
        self._filter = NodeLabelNoValFilter()

    def with_label(self, key: str) -> NodeLabelNoValFilterBuilder:
        self._filter.labels.add(key)
        return self

    def build(self) -> NodeLabelNoValFilter:
        return self._filter

    def reset(self) -> NodeLabelNoValFilterBuilder:
        self._filter = NodeLabelNoValFilter()
        return self