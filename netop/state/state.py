"""The unit of reconciliation: a State and the status of its sync."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from netop.state.info_source import InfoCatalog


class SyncState(str, Enum):
    """Sync status of a single State or of a collection of States."""

    READY = "ready"
    NOT_READY = "notReady"
    IGNORE = "ignore"
    RESET = "reset"
    ERROR = "error"


class SyncError(Exception):
    """Raised by :meth:`State.sync` when syncing fails.

    ``status`` is the sync status the failed attempt leaves the state in.
    """

    def __init__(self, message: str, status: SyncState = SyncState.ERROR) -> None:
        super().__init__(message)
        self.status = status


class State(ABC):
    """A set of resources whose system state is reconciled together.

    A state checks the system against its resources and brings it to the
    desired state.
    """

    name: str
    description: str

    @abstractmethod
    def sync(self, custom_resource: Any, info_catalog: InfoCatalog | None) -> SyncState:
        """Bring the system towards the state described by ``custom_resource``.

        The call must be short and must not block. Raises :class:`SyncError`
        on failure.
        """

    @abstractmethod
    def get_watch_sources(self) -> dict[str, Any]:
        """Source kinds to watch for this state, keyed by kind name."""


@dataclass
class FixedState(State):
    """A state whose sync always reports the same status."""

    name: str
    description: str = ""
    sync_state: SyncState = SyncState.READY
    watch_sources: dict[str, Any] = field(default_factory=dict)

    def sync(self, custom_resource: Any, info_catalog: InfoCatalog | None) -> SyncState:
        return self.sync_state

    def get_watch_sources(self) -> dict[str, Any]:
        return self.watch_sources