"""Tests for room file parsing and result export."""

import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import parse_room_entries, load_file, results_to_df, results_to_csv
from data.validator import validate_room_entries, validate_rooms_df
from data.sample_data import generate_rooms_df
from engine.estimator import compute_project


class _Upload(io.BytesIO):
    """Minimal stand-in for a Streamlit UploadedFile."""

    def __init__(self, data: bytes, name: str):
        super().__init__(data)
        self.name = name


class TestParseRoomEntries:
    def test_sample_rooms_round_trip_through_validator(self):
        df = generate_rooms_df()
        assert validate_rooms_df(df).is_valid

        entries = parse_room_entries(df)
        rooms, result = validate_room_entries(entries)
        assert result.is_valid
        assert len(rooms) == len(df)
        # Missing coverage cell becomes 0
        assert rooms[-1].package_coverage == 0

    def test_optional_columns_absent(self):
        df = pd.DataFrame([{"Length": 10, "Width": 12, "Flooring Type": "vinyl", "Pattern": "straight"}])
        entries = parse_room_entries(df)
        assert entries[0]["name"] == ""
        assert entries[0]["cost_per_unit"] == ""
        rooms, result = validate_room_entries(entries)
        assert result.is_valid
        assert rooms[0].cost_per_unit == 0

    def test_numeric_room_names_keep_their_text(self):
        df = pd.DataFrame({
            "Room Name": [101.0, float("nan"), 2.5],
            "Length": [10, 11, 12],
            "Width": [12, 12, 12],
            "Flooring Type": ["tile"] * 3,
            "Pattern": ["straight"] * 3,
        })
        entries = parse_room_entries(df)
        assert [e["name"] for e in entries] == ["101", "", 2.5]
        rooms, result = validate_room_entries(entries)
        assert result.is_valid
        assert [room.display_name(i) for i, room in enumerate(rooms, start=1)] == ["101", "Room 2", "2.5"]


class TestLoadFile:
    def test_csv(self):
        upload = _Upload(b"Length,Width,Flooring Type,Pattern\n10,12,tile,diagonal\n", "rooms.CSV")
        df = load_file(upload)
        assert list(df.columns) == ["Length", "Width", "Flooring Type", "Pattern"]
        assert df.iloc[0]["Pattern"] == "diagonal"

    def test_csv_numeric_room_name_read_as_text(self):
        upload = _Upload(
            b"Room Name,Length,Width,Flooring Type,Pattern\n101,10,12,tile,straight\n,8,9,vinyl,straight\n",
            "rooms.csv",
        )
        entries = parse_room_entries(load_file(upload))
        assert entries[0]["name"] == "101"
        assert entries[1]["name"] == ""

    def test_unsupported(self):
        with pytest.raises(ValueError):
            load_file(_Upload(b"{}", "rooms.json"))


class TestResultsExport:
    def test_results_df(self):
        entries = parse_room_entries(generate_rooms_df())
        rooms, _ = validate_room_entries(entries)
        result = compute_project(rooms)

        df = results_to_df(result, "metric")
        assert len(df) == len(rooms)
        assert "Area (sq m)" in df.columns
        kitchen = df.iloc[0]
        assert kitchen["Room"] == "Kitchen"
        assert kitchen["Area with Waste (sq m)"] == 137.5
        assert kitchen["Packages"] == 6
        assert kitchen["Cost ($)"] == 481.25

    def test_results_csv(self):
        rooms, _ = validate_room_entries(parse_room_entries(generate_rooms_df()))
        data = results_to_csv(compute_project(rooms))
        assert data.startswith(b"Room,Length,Width")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
