from dataclasses import dataclass
from typing import Iterator, Tuple

from models.room import RoomResult


@dataclass(frozen=True)
class ProjectTotals:
    area: float = 0.0
    area_with_waste: float = 0.0
    cost: float = 0.0
    packages_needed: int = 0


@dataclass(frozen=True)
class AuxiliaryMaterials:
    underlayment_rolls: int = 0
    adhesive_gallons: int = 0
    grout_bags: int = 0
    needs_underlayment: bool = False
    needs_adhesive: bool = False
    needs_grout: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.needs_underlayment or self.needs_adhesive or self.needs_grout)

    def relevant_items(self) -> Iterator[Tuple[str, int]]:
        """Yield (kind, quantity) for the materials flagged as needed, in display order."""
        if self.needs_underlayment:
            yield "underlayment", self.underlayment_rolls
        if self.needs_adhesive:
            yield "adhesive", self.adhesive_gallons
        if self.needs_grout:
            yield "grout", self.grout_bags


@dataclass(frozen=True)
class ProjectResult:
    rooms: Tuple[RoomResult, ...]
    totals: ProjectTotals
    auxiliary: AuxiliaryMaterials

    @property
    def materials_present(self) -> frozenset:
        return frozenset(r.material for r in self.rooms)
