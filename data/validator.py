"""Validation of room form entries and uploaded room files."""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import pandas as pd

from models.room import RoomInput
from config.defaults import MATERIALS, PATTERNS, MAX_DIMENSION, MAX_AMOUNT

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


ROOM_REQUIRED_COLUMNS = [
    "Length",
    "Width",
    "Flooring Type",
    "Pattern",
]

ROOM_OPTIONAL_COLUMNS = [
    "Room Name",
    "Cost per Unit",
    "Package Coverage",
]


def parse_strict_number(raw) -> Optional[float]:
    """Parse a raw form value as a finite float. Returns None if blank or not numeric."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _parse_optional_amount(raw, label: str, room_label: str, result: ValidationResult) -> float:
    """Blank -> 0. Non-numeric or negative -> error."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return 0.0
    if isinstance(raw, float) and math.isnan(raw):
        return 0.0
    value = parse_strict_number(raw)
    if value is None:
        result.is_valid = False
        result.errors.append(f"{room_label}: {label} must be a number.")
        return 0.0
    if value < 0:
        result.is_valid = False
        result.errors.append(f"{room_label}: {label} cannot be negative.")
        return 0.0
    if value > MAX_AMOUNT:
        result.is_valid = False
        result.errors.append(f"{room_label}: {label} cannot exceed {MAX_AMOUNT:,}.")
        return 0.0
    return value


def validate_room_entry(entry: dict, index: int) -> Tuple[Optional[RoomInput], ValidationResult]:
    """Validate one raw room entry (form strings) and build a RoomInput.

    Expected keys: name, length, width, material, pattern, cost_per_unit, package_coverage.
    """
    result = ValidationResult()
    name = str(entry.get("name") or "").strip() or None
    room_label = name or f"Room {index}"

    length = parse_strict_number(entry.get("length"))
    width = parse_strict_number(entry.get("width"))
    if length is None or width is None or length <= 0 or width <= 0:
        result.is_valid = False
        result.errors.append(f"{room_label}: Length and width must be positive numbers.")
    elif length > MAX_DIMENSION or width > MAX_DIMENSION:
        result.is_valid = False
        result.errors.append(
            f"{room_label}: Length and width cannot exceed {MAX_DIMENSION:,}."
        )

    material = str(entry.get("material") or "").strip().lower()
    if material not in MATERIALS:
        result.is_valid = False
        result.errors.append(
            f"{room_label}: Unknown flooring type '{material}'. Use one of: {', '.join(MATERIALS)}"
        )

    pattern = str(entry.get("pattern") or "").strip().lower()
    if pattern not in PATTERNS:
        result.is_valid = False
        result.errors.append(
            f"{room_label}: Unknown pattern '{pattern}'. Use one of: {', '.join(PATTERNS)}"
        )

    cost = _parse_optional_amount(entry.get("cost_per_unit"), "Cost per unit", room_label, result)
    coverage = _parse_optional_amount(entry.get("package_coverage"), "Package coverage", room_label, result)

    if not result.is_valid:
        return None, result

    if material == "carpet" and pattern != "straight":
        result.warnings.append(
            f"{room_label}: Carpet uses a flat waste factor regardless of pattern."
        )

    room = RoomInput(
        name=name,
        length=length,
        width=width,
        material=material,
        pattern=pattern,
        cost_per_unit=cost,
        package_coverage=coverage,
    )
    return room, result


def validate_room_entries(entries: List[dict]) -> Tuple[List[RoomInput], ValidationResult]:
    """Validate a full batch of room entries. Any error invalidates the whole batch."""
    result = ValidationResult()
    if not entries:
        result.is_valid = False
        result.errors.append("Please add at least one room to calculate.")
        return [], result

    rooms = []
    for i, entry in enumerate(entries, start=1):
        room, room_result = validate_room_entry(entry, i)
        result.errors.extend(room_result.errors)
        result.warnings.extend(room_result.warnings)
        if room is not None:
            rooms.append(room)

    if result.errors:
        result.is_valid = False
        logger.warning("Room batch failed validation with %d errors", len(result.errors))
        return [], result

    return rooms, result


def validate_rooms_df(df: pd.DataFrame) -> ValidationResult:
    """Check an uploaded room sheet has the required columns and at least one row."""
    result = ValidationResult()
    missing = [col for col in ROOM_REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"Rooms: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append("Rooms: File contains no data rows.")
    if not result.is_valid:
        return result

    unknown = [col for col in df.columns if col not in ROOM_REQUIRED_COLUMNS + ROOM_OPTIONAL_COLUMNS]
    if unknown:
        result.warnings.append(f"Rooms: Ignoring unrecognised columns: {', '.join(map(str, unknown))}")

    if "Room Name" in df.columns:
        names = df["Room Name"].dropna().astype(str).str.strip()
        names = names[names != ""]
        dupes = names[names.duplicated()].unique().tolist()
        if dupes:
            result.warnings.append(f"Rooms: Duplicate room names: {dupes}")

    return result
