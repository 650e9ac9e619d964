"""Tests for the lock-guarded server list state."""

import threading

from osview.openstack.compute import Server
from osview.state import FetchStatus
from osview.view_state import ServerListState


def _servers(*names):
    return [Server(id=f"id-{n}", name=n) for n in names]


class TestServerListState:

    def test_initial_snapshot(self):
        snap = ServerListState().snapshot()
        assert snap.status == FetchStatus.idle()
        assert snap.servers == ()
        assert snap.selected is None

    def test_on_load_appends_and_selects_first(self):
        state = ServerListState()
        state.on_load(_servers("a", "b"))
        snap = state.snapshot()
        assert [s.name for s in snap.servers] == ["a", "b"]
        assert snap.status == FetchStatus.loaded()
        assert snap.selected == 0

    def test_second_load_appends_without_dedup(self):
        state = ServerListState()
        state.on_load(_servers("a"))
        state.on_load(_servers("a", "b"))
        assert [s.name for s in state.snapshot().servers] == ["a", "a", "b"]

    def test_selection_untouched_when_list_was_not_empty(self):
        state = ServerListState()
        state.on_load(_servers("a", "b"))
        state.move_selection(1)
        state.on_load(_servers("c"))
        assert state.snapshot().selected == 1

    def test_empty_load_leaves_selection_unset(self):
        state = ServerListState()
        state.on_load([])
        snap = state.snapshot()
        assert snap.selected is None
        assert snap.status == FetchStatus.loaded()

    def test_on_error_keeps_servers(self):
        state = ServerListState()
        state.on_load(_servers("a"))
        state.on_error("Unexpected status: 500")
        snap = state.snapshot()
        assert snap.status == FetchStatus.error("Unexpected status: 500")
        assert [s.name for s in snap.servers] == ["a"]

    def test_loading_overlays_previous_servers(self):
        state = ServerListState()
        state.on_load(_servers("a"))
        state.set_status(FetchStatus.loading())
        snap = state.snapshot()
        assert snap.status == FetchStatus.loading()
        assert len(snap.servers) == 1

    def test_snapshot_is_a_copy(self):
        state = ServerListState()
        state.on_load(_servers("a"))
        snap = state.snapshot()
        state.on_load(_servers("b"))
        assert len(snap.servers) == 1

    def test_move_selection_clamps(self):
        state = ServerListState()
        state.on_load(_servers("a", "b", "c"))
        state.move_selection(-1)
        assert state.snapshot().selected == 0
        state.move_selection(10)
        assert state.snapshot().selected == 2

    def test_move_selection_on_empty_list(self):
        state = ServerListState()
        state.move_selection(1)
        assert state.snapshot().selected is None

    def test_concurrent_writers_and_readers(self):
        state = ServerListState()
        torn = []

        def writer():
            for i in range(200):
                state.set_status(FetchStatus.loading())
                state.on_load(_servers(str(i)))

        def reader():
            for _ in range(500):
                snap = state.snapshot()
                if snap.servers and snap.selected is None:
                    torn.append(snap)

        threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert torn == []
        assert len(state.snapshot().servers) == 200


class TestFetchStatus:

    def test_labels(self):
        assert str(FetchStatus.idle()) == "Idle"
        assert str(FetchStatus.loading()) == "Loading"
        assert str(FetchStatus.loaded()) == "Loaded"
        assert str(FetchStatus.error("boom")) == "Error(boom)"

    def test_is_error(self):
        assert FetchStatus.error("x").is_error
        assert not FetchStatus.loaded().is_error
