"""Tests for the session state wrapper, run against a plain dict."""

import sys
import os
from types import SimpleNamespace
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

import data.session_store as store
from models.room import RoomInput
from engine.estimator import compute_project


def make_result(length=12.5, material="tile"):
    return compute_project([RoomInput(length, 10.0, material, "straight")])


@pytest.fixture(autouse=True)
def fake_session(monkeypatch):
    fake_st = SimpleNamespace(session_state={})
    monkeypatch.setattr(store, "st", fake_st)
    store.initialize_session_state()
    return fake_st.session_state


class TestInitialize:
    def test_starts_with_one_room(self, fake_session):
        assert [r["room_id"] for r in store.get_rooms()] == [1]
        assert store.get_unit_system() == "imperial"
        assert not store.has_result()

    def test_rerun_keeps_state(self, fake_session):
        store.add_room()
        store.initialize_session_state()
        assert len(store.get_rooms()) == 2


class TestLastResult:
    def test_second_result_replaces_first(self):
        first = make_result()
        second = make_result(length=4.0, material="vinyl")
        store.set_last_result(first)
        store.set_last_result(second)
        assert store.get_last_result() is second
        assert store.get_last_result().materials_present == {"vinyl"}
        assert len(store.get_last_result().rooms) == 1

    def test_clearing_result(self):
        store.set_last_result(make_result())
        store.set_last_result(None)
        assert not store.has_result()


class TestRoomManagement:
    def test_counter_never_reuses_ids(self):
        store.add_room()
        store.add_room()
        store.remove_room(2)
        room = store.add_room()
        assert room["room_id"] == 4
        assert [r["room_id"] for r in store.get_rooms()] == [1, 3, 4]

    def test_update_room(self):
        store.update_room(1, name="Kitchen", length="12.5")
        assert store.get_rooms()[0]["name"] == "Kitchen"
        assert store.get_rooms()[0]["length"] == "12.5"

    def test_reset_project(self, fake_session):
        store.add_room()
        fake_session[store.room_widget_key(2, "length")] = "9"
        store.set_last_result(make_result())
        store.reset_project()
        assert [r["room_id"] for r in store.get_rooms()] == [1]
        assert store.get_rooms()[0]["length"] == ""
        assert not store.has_result()
        assert "room-2-length" not in fake_session

    def test_set_rooms_renumbers_and_clears_result(self):
        store.add_room()
        store.set_last_result(make_result())
        store.set_rooms([
            {"room_id": 99, "name": "Hall", "length": "4", "width": "3"},
            {"name": "Den", "length": "5", "width": "5"},
        ])
        rooms = store.get_rooms()
        assert [r["room_id"] for r in rooms] == [1, 2]
        assert [r["name"] for r in rooms] == ["Hall", "Den"]
        assert rooms[0]["material"] == "tile"
        assert not store.has_result()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
