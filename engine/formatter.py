"""Presentation helpers: rounding, unit labels, step-by-step breakdowns and text summaries."""

from typing import List, Optional, Tuple

from models.room import RoomResult
from models.rounding import RoundingPolicy
from models.project import ProjectResult
from config.defaults import (
    UNIT_SYSTEMS, DEFAULT_UNIT_SYSTEM, ROUNDING_PLACES, COVERAGE_RATES,
    AUXILIARY_LABELS, AUXILIARY_NOTE, PRO_TIPS, DISCLAIMER,
)

_DEFAULT_POLICY = RoundingPolicy(places=ROUNDING_PLACES)


def unit_labels(unit_system: str) -> dict:
    return UNIT_SYSTEMS.get(unit_system, UNIT_SYSTEMS[DEFAULT_UNIT_SYSTEM])


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_number(value: float, policy: Optional[RoundingPolicy] = None) -> str:
    """Round half-up and render with thousands separators."""
    rounded = (policy or _DEFAULT_POLICY).apply(value)
    return f"{rounded:,}"


def format_area(value: float, unit_system: str = DEFAULT_UNIT_SYSTEM,
                policy: Optional[RoundingPolicy] = None) -> str:
    return f"{format_number(value, policy)} {unit_labels(unit_system)['area']}"


def format_currency(value: float, policy: Optional[RoundingPolicy] = None) -> str:
    return f"${format_number(value, policy)}"


def format_waste_pct(factor: float) -> str:
    return f"{RoundingPolicy(places=0).apply(factor * 100)}%"


def format_dimensions(length: float, width: float, unit_system: str = DEFAULT_UNIT_SYSTEM) -> str:
    one_place = RoundingPolicy(places=1)
    return f"{one_place.apply(length)} × {one_place.apply(width)} {unit_labels(unit_system)['length']}"


def format_room_type(result: RoomResult) -> str:
    return f"{capitalize(result.material)} - {capitalize(result.pattern)}"


def explain_room(result: RoomResult, unit_system: str = DEFAULT_UNIT_SYSTEM) -> List[str]:
    """Produce step-by-step explanation for a room estimate."""
    policy = result.rounding

    def area(value: float) -> str:
        return format_area(value, unit_system, policy)

    steps = []

    steps.append(
        f"Floor area: {format_dimensions(result.length, result.width, unit_system)} "
        f"= {area(result.area)}"
    )

    steps.append(
        f"Waste factor: {format_room_type(result)} => {format_waste_pct(result.waste_factor)}"
    )

    steps.append(
        f"Material needed: {area(result.area)} x {1 + result.waste_factor:.2f} "
        f"= {area(result.area_with_waste)}"
    )

    if result.packages_needed > 0:
        steps.append(
            f"Packages: {area(result.area_with_waste)} / {area(result.package_coverage)} "
            f"per box, rounded up => {result.packages_needed} boxes "
            f"({area(result.actual_coverage)} total)"
        )

    if result.cost > 0:
        steps.append(
            f"Cost: {area(result.area_with_waste)} x "
            f"{format_currency(result.cost_per_unit, policy)} => {format_currency(result.cost, policy)}"
        )

    # Optional steps shift the numbering
    return [f"Step {i} - {step}" for i, step in enumerate(steps, start=1)]


def auxiliary_items(result: ProjectResult, unit_system: str = DEFAULT_UNIT_SYSTEM) -> List[Tuple[str, str]]:
    """(label, quantity) pairs for the relevant auxiliary materials.

    e.g. ("Grout (150 sq ft/25lb bag)", "2 bags")
    """
    area_label = unit_labels(unit_system)["area"]
    items = []
    for kind, quantity in result.auxiliary.relevant_items():
        label, per_unit, purchase_unit = AUXILIARY_LABELS[kind]
        items.append((
            f"{label} ({COVERAGE_RATES[kind]} {area_label}/{per_unit})",
            f"{quantity} {purchase_unit}",
        ))
    return items


def auxiliary_lines(result: ProjectResult, unit_system: str = DEFAULT_UNIT_SYSTEM) -> List[str]:
    return [f"{label}: {quantity}" for label, quantity in auxiliary_items(result, unit_system)]


def build_share_text(result: ProjectResult, unit_system: str = DEFAULT_UNIT_SYSTEM) -> str:
    totals = result.totals
    return (
        "Flooring Project Estimate:\n\n"
        f"Total Area: {format_area(totals.area, unit_system)}\n"
        f"Material Needed: {format_area(totals.area_with_waste, unit_system)}"
    )


def build_summary_text(result: ProjectResult, unit_system: str = DEFAULT_UNIT_SYSTEM) -> str:
    """Full plain-text summary: rooms, totals, auxiliary materials, tips, disclaimer."""
    lines = ["FLOORING PROJECT ESTIMATE", ""]

    for room in result.rooms:
        lines.append(room.name)
        lines.append(f"  Dimensions: {format_dimensions(room.length, room.width, unit_system)}")
        lines.append(f"  Floor Area: {format_area(room.area, unit_system, room.rounding)}")
        lines.append(f"  Flooring Type: {format_room_type(room)}")
        lines.append(f"  Waste Factor: {format_waste_pct(room.waste_factor)}")
        lines.append(
            f"  Material Needed (with waste): {format_area(room.area_with_waste, unit_system, room.rounding)}"
        )
        if room.packages_needed > 0:
            lines.append(
                f"  Boxes/Packages Needed: {room.packages_needed} boxes "
                f"({format_area(room.actual_coverage, unit_system, room.rounding)} total)"
            )
        if room.cost > 0:
            lines.append(f"  Estimated Material Cost: {format_currency(room.cost, room.rounding)}")
        lines.append("")

    totals = result.totals
    lines.append("PROJECT TOTALS")
    lines.append(f"  Total Floor Area: {format_area(totals.area, unit_system)}")
    lines.append(f"  Total Material with Waste: {format_area(totals.area_with_waste, unit_system)}")
    if totals.packages_needed > 0:
        lines.append(f"  Total Boxes Needed: {totals.packages_needed} boxes")
    if totals.cost > 0:
        lines.append(f"  Total Material Cost: {format_currency(totals.cost)}")
    lines.append("")

    if not result.auxiliary.is_empty:
        lines.append("ADDITIONAL MATERIALS NEEDED")
        lines.extend(f"  {line}" for line in auxiliary_lines(result, unit_system))
        lines.append(f"  Note: {AUXILIARY_NOTE}")
        lines.append("")

    lines.append("PRO TIPS")
    lines.extend(f"  - {tip}" for tip in PRO_TIPS)
    lines.append("")
    lines.append(f"Disclaimer: {DISCLAIMER}")

    return "\n".join(lines)
