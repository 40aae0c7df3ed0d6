import math
from dataclasses import dataclass, field
from typing import Optional

from models.rounding import RoundingPolicy


@dataclass(frozen=True)
class RoomInput:
    length: Optional[float]
    width: Optional[float]
    material: str                   # "tile", "hardwood", "laminate", "vinyl", "carpet"
    pattern: str                    # "straight", "diagonal", "herringbone"
    name: Optional[str] = None      # Falls back to "Room N"
    cost_per_unit: float = 0.0      # Cost per area unit
    package_coverage: float = 0.0   # Area covered by one box/roll/bag

    def display_name(self, index: int) -> str:
        """Room name, or "Room N" for the 1-based batch position when blank."""
        if self.name and self.name.strip():
            return self.name.strip()
        return f"Room {index}"

    @property
    def has_valid_dimensions(self) -> bool:
        # NaN and None both fail the comparison
        try:
            if not (self.length > 0 and self.width > 0):
                return False
        except TypeError:
            return False
        # Doubled area bounds the area with waste for any factor up to 100%
        return math.isfinite(self.length * self.width * 2)


@dataclass(frozen=True)
class RoomResult:
    name: str
    length: float
    width: float
    material: str
    pattern: str
    cost_per_unit: float
    package_coverage: float
    area: float
    waste_factor: float
    area_with_waste: float
    cost: float
    packages_needed: int
    actual_coverage: float
    rounding: RoundingPolicy = field(default=RoundingPolicy(), compare=False)

    def rounded(self, attr: str):
        """Presentation value of a numeric field under this result's rounding policy."""
        return self.rounding.apply(getattr(self, attr))
