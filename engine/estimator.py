"""Estimation engine: waste lookup, area and cost arithmetic, package rounding, auxiliary materials."""

import logging
import math
from typing import Iterable, List, Mapping, Optional, Sequence

from models.room import RoomInput, RoomResult
from models.rounding import RoundingPolicy
from models.project import AuxiliaryMaterials, ProjectResult, ProjectTotals
from config.defaults import (
    WASTE_FACTORS, DEFAULT_WASTE_FACTOR, COVERAGE_RATES, ROUNDING_PLACES,
    UNDERLAYMENT_MATERIALS, ADHESIVE_MATERIALS, GROUT_MATERIALS,
)

logger = logging.getLogger(__name__)

DEFAULT_ROUNDING = RoundingPolicy(places=ROUNDING_PLACES)


class InvalidDimensions(ValueError):
    """One or more rooms has a missing, zero, negative or non-numeric length/width."""

    def __init__(self, invalid_rooms: Sequence[str]):
        self.invalid_rooms = list(invalid_rooms)
        super().__init__(
            "Please fill in length and width for all rooms with valid positive numbers. "
            f"Invalid: {', '.join(self.invalid_rooms)}"
        )


def lookup_waste_factor(
    material: str,
    pattern: str,
    waste_factors: Optional[Mapping[str, float]] = None,
) -> float:
    """Waste factor for a material/pattern pair.

    Tries "material-pattern", then the bare material key (carpet), then the default.
    """
    table = WASTE_FACTORS if waste_factors is None else waste_factors
    factor = table.get(f"{material}-{pattern}")
    if factor is None:
        factor = table.get(material, DEFAULT_WASTE_FACTOR)
    return factor


def compute_room_result(
    room: RoomInput,
    waste_factors: Optional[Mapping[str, float]] = None,
    rounding: Optional[RoundingPolicy] = None,
    index: int = 1,
) -> RoomResult:
    """Compute area, waste, cost and package count for a single room."""
    name = room.display_name(index)
    if not room.has_valid_dimensions:
        raise InvalidDimensions([name])

    area = room.length * room.width
    waste_factor = lookup_waste_factor(room.material, room.pattern, waste_factors)
    area_with_waste = area * (1 + waste_factor)

    cost_per_unit = room.cost_per_unit or 0.0
    cost = area_with_waste * cost_per_unit

    package_coverage = room.package_coverage or 0.0
    packages_needed = 0
    if package_coverage > 0:
        boxes = area_with_waste / package_coverage
        if not math.isfinite(boxes):
            raise InvalidDimensions([name])
        packages_needed = math.ceil(boxes)
    actual_coverage = packages_needed * package_coverage

    logger.debug(
        "%s: %.4f x %.4f = %.4f, waste %.2f (%s-%s), %d packages",
        name, room.length, room.width, area, waste_factor,
        room.material, room.pattern, packages_needed,
    )

    return RoomResult(
        name=name,
        length=room.length,
        width=room.width,
        material=room.material,
        pattern=room.pattern,
        cost_per_unit=cost_per_unit,
        package_coverage=package_coverage,
        area=area,
        waste_factor=waste_factor,
        area_with_waste=area_with_waste,
        cost=cost,
        packages_needed=packages_needed,
        actual_coverage=actual_coverage,
        rounding=rounding or DEFAULT_ROUNDING,
    )


def compute_totals(results: Iterable[RoomResult]) -> ProjectTotals:
    """Sum area, area with waste, cost and packages across rooms."""
    area = area_with_waste = cost = 0.0
    packages = 0
    for r in results:
        area += r.area
        area_with_waste += r.area_with_waste
        cost += r.cost
        packages += r.packages_needed
    return ProjectTotals(
        area=area,
        area_with_waste=area_with_waste,
        cost=cost,
        packages_needed=packages,
    )


def compute_auxiliary_materials(
    totals: ProjectTotals,
    materials_present: Iterable[str],
    coverage_rates: Optional[Mapping[str, float]] = None,
) -> AuxiliaryMaterials:
    """Underlayment rolls, adhesive gallons and grout bags for the project.

    All quantities are computed; the needs_* flags say which ones apply.
    """
    rates = COVERAGE_RATES if coverage_rates is None else coverage_rates
    present = set(materials_present)
    total = totals.area_with_waste

    return AuxiliaryMaterials(
        underlayment_rolls=math.ceil(total / rates["underlayment"]),
        adhesive_gallons=math.ceil(total / rates["adhesive"]),
        grout_bags=math.ceil(total / rates["grout"]),
        needs_underlayment=bool(present & UNDERLAYMENT_MATERIALS),
        needs_adhesive=bool(present & ADHESIVE_MATERIALS),
        needs_grout=bool(present & GROUT_MATERIALS),
    )


def validate_rooms(rooms: Sequence[RoomInput]) -> List[str]:
    """Return display names of rooms with invalid dimensions (empty if all valid)."""
    return [
        room.display_name(i)
        for i, room in enumerate(rooms, start=1)
        if not room.has_valid_dimensions
    ]


def compute_project(
    rooms: Sequence[RoomInput],
    waste_factors: Optional[Mapping[str, float]] = None,
    coverage_rates: Optional[Mapping[str, float]] = None,
    rounding: Optional[RoundingPolicy] = None,
) -> ProjectResult:
    """Run the full estimate over a batch of rooms.

    All-or-nothing: if any room is invalid, raises InvalidDimensions naming every
    offending room and produces no results.
    """
    invalid = validate_rooms(rooms)
    if invalid:
        logger.warning("Rejected batch of %d rooms: invalid dimensions in %s", len(rooms), invalid)
        raise InvalidDimensions(invalid)

    results = tuple(
        compute_room_result(room, waste_factors, rounding, index=i)
        for i, room in enumerate(rooms, start=1)
    )
    totals = compute_totals(results)
    if not math.isfinite(totals.area_with_waste):
        logger.warning("Rejected batch of %d rooms: total area overflows", len(results))
        raise InvalidDimensions([r.name for r in results])
    auxiliary = compute_auxiliary_materials(
        totals, (r.material for r in results), coverage_rates,
    )

    logger.info(
        "Estimated %d rooms: %.2f area, %.2f with waste, %d packages, cost %.2f",
        len(results), totals.area, totals.area_with_waste,
        totals.packages_needed, totals.cost,
    )
    return ProjectResult(rooms=results, totals=totals, auxiliary=auxiliary)
