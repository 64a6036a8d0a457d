from dataclasses import dataclass

from netop.state.manager import Result, Results, StateManager
from netop.state.state import FixedState, State, SyncError, SyncState


@dataclass
class _FailingState(State):
    name: str
    description: str
    status: SyncState

    def sync(self, custom_resource, info_catalog):
        raise SyncError("failed to create/update objects", self.status)

    def get_watch_sources(self):
        return {}


def test_states_ready():
    test_state = FixedState(
        name="test", description="test description", sync_state=SyncState.READY
    )
    manager = StateManager([test_state])
    results = manager.sync_state(None, None)
    assert results.status is SyncState.READY
    assert results.states_status[0].state_name == "test"
    assert results.states_status[0].status is SyncState.READY


def test_render_all():
    not_ready = FixedState(
        name="test not ready", description="test description", sync_state=SyncState.NOT_READY
    )
    ready = FixedState(
        name="test ready", description="test description", sync_state=SyncState.READY
    )
    manager = StateManager([not_ready, ready])
    results = manager.sync_state(None, None)
    assert results.status is SyncState.NOT_READY
    assert results.states_status[0].state_name == "test not ready"
    assert results.states_status[0].status is SyncState.NOT_READY
    assert results.states_status[1].state_name == "test ready"
    assert results.states_status[1].status is SyncState.READY


def test_ignore_and_reset_do_not_block_readiness():
    manager = StateManager(
        [
            FixedState(name="a", sync_state=SyncState.IGNORE),
            FixedState(name="b", sync_state=SyncState.RESET),
            FixedState(name="c", sync_state=SyncState.READY),
        ]
    )
    assert manager.sync_state(None, None).status is SyncState.READY


def test_failing_state_recorded_with_error_and_others_still_run():
    failing = _FailingState("broken", "desc", SyncState.ERROR)
    ready = FixedState(name="ok", sync_state=SyncState.READY)
    results = StateManager([failing, ready]).sync_state(None, None)
    assert results.status is SyncState.NOT_READY
    first, second = results.states_status
    assert first.state_name == "broken"
    assert first.status is SyncState.ERROR
    assert isinstance(first.err_info, SyncError)
    assert second == Result("ok", SyncState.READY, None)


def test_error_keeps_status_it_carries():
    failing = _FailingState("broken", "desc", SyncState.NOT_READY)
    results = StateManager([failing]).sync_state(None, None)
    assert results.states_status[0].status is SyncState.NOT_READY
    assert results.status is SyncState.NOT_READY


def test_no_states_is_ready():
    results = StateManager([]).sync_state(None, None)
    assert results == Results(status=SyncState.READY, states_status=[])


def test_watch_sources_deduplicated_first_wins():
    ds_first = object()
    ds_second = object()
    deployment = object()
    manager = StateManager(
        [
            FixedState(name="a", watch_sources={"DaemonSet": ds_first}),
            FixedState(
                name="b",
                watch_sources={"DaemonSet": ds_second, "Deployment": deployment},
            ),
        ]
    )
    sources = manager.get_watch_sources()
    assert len(sources) == 2
    assert any(s is ds_first for s in sources)
    assert any(s is deployment for s in sources)
    assert not any(s is ds_second for s in sources)


def test_watch_sources_empty_without_states():
    assert StateManager([]).get_watch_sources() == []


def test_results_default_not_ready():
    assert Results().status is SyncState.NOT_READY
    assert Results().states_status == []