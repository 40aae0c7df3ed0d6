"""Generate a sample room list for the Flooring Material Estimator."""

import pandas as pd
import os


def generate_rooms_df() -> pd.DataFrame:
    """A small house: one room of each flooring type."""
    rooms = [
        {"Room Name": "Kitchen",     "Length": 12.5, "Width": 10.0, "Flooring Type": "tile",     "Pattern": "straight",    "Cost per Unit": 3.50, "Package Coverage": 23.91},
        {"Room Name": "Entry",       "Length": 6.0,  "Width": 5.0,  "Flooring Type": "tile",     "Pattern": "herringbone", "Cost per Unit": 6.25, "Package Coverage": 10.76},
        {"Room Name": "Living Room", "Length": 18.0, "Width": 14.0, "Flooring Type": "hardwood", "Pattern": "diagonal",    "Cost per Unit": 7.80, "Package Coverage": 20.0},
        {"Room Name": "Office",      "Length": 11.0, "Width": 10.5, "Flooring Type": "laminate", "Pattern": "straight",    "Cost per Unit": 2.29, "Package Coverage": 19.63},
        {"Room Name": "Bathroom",    "Length": 8.0,  "Width": 6.0,  "Flooring Type": "vinyl",    "Pattern": "straight",    "Cost per Unit": 3.99, "Package Coverage": 23.64},
        {"Room Name": "Bedroom",     "Length": 13.0, "Width": 12.0, "Flooring Type": "carpet",   "Pattern": "straight",    "Cost per Unit": 2.75, "Package Coverage": None},
    ]
    return pd.DataFrame(rooms)


def generate_sample_csv(output_dir: str):
    """Write the sample room list to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_rooms_df().to_csv(os.path.join(output_dir, "rooms.csv"), index=False)


def generate_sample_excel(output_dir: str):
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "rooms.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_rooms_df().to_excel(writer, sheet_name="Rooms", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
