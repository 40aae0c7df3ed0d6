"""File upload parsing: CSV/XLSX room lists into raw entries, results out to DataFrames."""

import logging
import pandas as pd
from typing import List

from models.project import ProjectResult
from engine.formatter import unit_labels

logger = logging.getLogger(__name__)

# Sheet column -> room entry key
COLUMN_MAP = {
    "Room Name": "name",
    "Length": "length",
    "Width": "width",
    "Flooring Type": "material",
    "Pattern": "pattern",
    "Cost per Unit": "cost_per_unit",
    "Package Coverage": "package_coverage",
}


def parse_room_entries(df: pd.DataFrame) -> List[dict]:
    """Convert a rooms DataFrame into raw room entries for the validator.

    Values are left unparsed; blank cells become empty strings.
    """
    entries = []
    for _, row in df.iterrows():
        entry = {}
        for column, key in COLUMN_MAP.items():
            value = row.get(column) if column in df.columns else None
            if value is None or pd.isna(value):
                value = ""
            elif key == "name" and isinstance(value, float) and value.is_integer():
                # Numeric room names come back from pandas as floats
                value = str(int(value))
            entry[key] = value
        entries.append(entry)
    logger.info("Parsed %d room entries from sheet", len(entries))
    return entries


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype={"Room Name": str})
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype={"Room Name": str})
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def results_to_df(result: ProjectResult, unit_system: str = "imperial") -> pd.DataFrame:
    """One row per room with presentation-rounded figures, for display and CSV export."""
    area_label = unit_labels(unit_system)["area"]
    rows = []
    for r in result.rooms:
        rows.append({
            "Room": r.name,
            "Length": r.length,
            "Width": r.width,
            "Flooring Type": r.material,
            "Pattern": r.pattern,
            f"Area ({area_label})": float(r.rounded("area")),
            "Waste Factor": r.waste_factor,
            f"Area with Waste ({area_label})": float(r.rounded("area_with_waste")),
            "Packages": r.packages_needed,
            f"Actual Coverage ({area_label})": float(r.rounded("actual_coverage")),
            "Cost ($)": float(r.rounded("cost")),
        })
    return pd.DataFrame(rows)


def results_to_csv(result: ProjectResult, unit_system: str = "imperial") -> bytes:
    return results_to_df(result, unit_system).to_csv(index=False).encode("utf-8")
