"""Runs a sequence of states and combines their sync results."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from netop.state.info_source import InfoCatalog
from netop.state.state import State, SyncError, SyncState

log = logging.getLogger(__name__)

_BLOCKING = frozenset({SyncState.NOT_READY, SyncState.ERROR})


@dataclass
class Result:
    """Outcome of syncing a single state."""

    state_name: str
    status: SyncState
    err_info: Exception | None = None


@dataclass
class Results:
    """Outcome of syncing all states.

    ``status`` is READY only when no state is NOT_READY or ERROR.
    """

    status: SyncState = SyncState.NOT_READY
    states_status: list[Result] = field(default_factory=list)


class StateManager:
    """Invokes its states in order to bring the system to its desired state."""

    def __init__(self, states: Iterable[State], client: Any = None) -> None:
        self.states = list(states)
        self.client = client

    def get_watch_sources(self) -> list[Any]:
        """Sources to watch for all states; for a repeated kind the first wins."""
        kinds: dict[str, Any] = {}
        for state in self.states:
            for name, kind in state.get_watch_sources().items():
                kinds.setdefault(name, kind)
        return list(kinds.values())

    def sync_state(self, custom_resource: Any, info_catalog: InfoCatalog | None) -> Results:
        """Sync every state in order and report each result and the overall status."""
        log.info("Syncing system state")
        results = Results()
        ready = True

        for state in self.states:
            log.info("Sync State: name=%s description=%s", state.name, state.description)
            try:
                result = Result(state.name, state.sync(custom_resource, info_catalog))
            except SyncError as err:
                result = Result(state.name, err.status, err)
            results.states_status.append(result)

            if result.status in _BLOCKING:
                ready = False
            if result.err_info is not None:
                log.warning("Error while syncing state %s: %s", state.name, result.err_info)

        if ready:
            results.status = SyncState.READY
            log.info("Sync Done for custom resource")
        else:
            log.info("Sync not Done for custom resource")
        return results