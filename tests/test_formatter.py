"""Tests for presentation formatting."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import RoomInput
from models.rounding import RoundingPolicy
from engine.estimator import compute_room_result, compute_project
from engine.formatter import (
    capitalize,
    format_area,
    format_currency,
    format_waste_pct,
    format_dimensions,
    explain_room,
    auxiliary_items,
    auxiliary_lines,
    build_share_text,
    build_summary_text,
)


def make_room(length=12.5, width=10.0, material="tile", pattern="straight",
              cost=3.50, coverage=23.91, name=None):
    return RoomInput(length, width, material, pattern, name, cost, coverage)


class TestRoundingPolicy:
    def test_half_up(self):
        policy = RoundingPolicy(places=2)
        assert str(policy.apply(0.125)) == "0.13"
        assert str(policy.apply(2.675)) == "2.68"
        assert str(policy.apply(1.005)) == "1.01"
        assert str(policy.apply(7)) == "7.00"

    def test_zero_places(self):
        assert str(RoundingPolicy(places=0).apply(2.5)) == "3"

    def test_large_values_keep_all_digits(self):
        policy = RoundingPolicy(places=2)
        assert str(policy.apply(1e30)) == "1000000000000000000000000000000.00"
        assert str(policy.apply(1.1e32)) == "110000000000000000000000000000000.00"

    def test_non_finite_passes_through(self):
        assert str(RoundingPolicy(places=2).apply(float("inf"))) == "Infinity"


class TestFormatting:
    def test_area_units(self):
        assert format_area(137.5) == "137.50 sq ft"
        assert format_area(137.5, "metric") == "137.50 sq m"
        assert format_area(1234.5) == "1,234.50 sq ft"

    def test_unknown_unit_system_falls_back_to_imperial(self):
        assert format_area(1.0, "cubits") == "1.00 sq ft"

    def test_currency(self):
        assert format_currency(481.25) == "$481.25"
        assert format_currency(1234.565) == "$1,234.57"

    def test_waste_pct(self):
        assert format_waste_pct(0.10) == "10%"
        assert format_waste_pct(0.22) == "22%"
        assert format_waste_pct(0.05) == "5%"

    def test_dimensions(self):
        assert format_dimensions(12.5, 10.0) == "12.5 × 10.0 ft"
        assert format_dimensions(4, 3.25, "metric") == "4.0 × 3.3 m"

    def test_capitalize(self):
        assert capitalize("herringbone") == "Herringbone"
        assert capitalize("") == ""


class TestExplainRoom:
    def test_all_steps(self):
        steps = explain_room(compute_room_result(make_room()))
        assert len(steps) == 5
        assert steps[0] == "Step 1 - Floor area: 12.5 × 10.0 ft = 125.00 sq ft"
        assert "Tile - Straight => 10%" in steps[1]
        assert steps[3].endswith("6 boxes (143.46 sq ft total)")
        assert steps[4].endswith("$481.25")

    def test_package_and_cost_steps_omitted_when_zero(self):
        steps = explain_room(compute_room_result(make_room(cost=0, coverage=0)), "metric")
        assert len(steps) == 3
        assert "sq m" in steps[2]

    def test_steps_renumbered_when_packages_omitted(self):
        steps = explain_room(compute_room_result(make_room(coverage=0)))
        assert len(steps) == 4
        assert steps[3].startswith("Step 4 - Cost:")


class TestSummaries:
    def test_share_text(self):
        result = compute_project([make_room()])
        assert build_share_text(result) == (
            "Flooring Project Estimate:\n\n"
            "Total Area: 125.00 sq ft\n"
            "Material Needed: 137.50 sq ft"
        )

    def test_auxiliary_lines_tile(self):
        result = compute_project([make_room()])
        assert auxiliary_lines(result) == [
            "Adhesive/Thinset (50 sq ft/gal): 3 gallons",
            "Grout (150 sq ft/25lb bag): 1 bags",
        ]

    def test_auxiliary_items_split_label_and_quantity(self):
        result = compute_project([make_room(material="laminate")])
        assert auxiliary_items(result, "metric") == [
            ("Underlayment Rolls (100 sq m/roll)", "2 rolls"),
        ]

    def test_auxiliary_items_label_with_colon_stays_whole(self, monkeypatch):
        import engine.formatter as formatter
        labels = dict(formatter.AUXILIARY_LABELS)
        labels["grout"] = ("Grout: sanded", "25lb bag", "bags")
        monkeypatch.setattr(formatter, "AUXILIARY_LABELS", labels)
        result = compute_project([make_room()])
        label, quantity = auxiliary_items(result)[1]
        assert label == "Grout: sanded (150 sq ft/25lb bag)"
        assert quantity == "1 bags"

    def test_summary_text_sections(self):
        result = compute_project([make_room(name="Kitchen"), make_room(material="carpet", cost=0, coverage=0)])
        text = build_summary_text(result)
        assert "Kitchen" in text
        assert "Room 2" in text
        assert "Total Boxes Needed: 6 boxes" in text
        assert "Total Material Cost: $481.25" in text
        assert "ADDITIONAL MATERIALS NEEDED" in text
        assert "Disclaimer:" in text

    def test_summary_text_carpet_only_has_no_auxiliary(self):
        result = compute_project([make_room(material="carpet", cost=0, coverage=0)])
        text = build_summary_text(result)
        assert "ADDITIONAL MATERIALS NEEDED" not in text
        assert "Total Boxes Needed" not in text
        assert "Total Material Cost" not in text

    def test_summary_text_for_very_large_room(self):
        room = compute_room_result(make_room(length=1e15, width=1e15, cost=0, coverage=0))
        text = explain_room(room)
        assert text[0].endswith("= 1,000,000,000,000,000,000,000,000,000,000.00 sq ft")
        result = compute_project([make_room(length=1e15, width=1e15, cost=0, coverage=0)])
        assert "Total Floor Area: 1,000,000,000,000,000,000,000,000,000,000.00 sq ft" in build_summary_text(result)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
