"""Generate sample room-type master sheets for the Hotel Room Inventory Planner."""

import pandas as pd
import os

from config.defaults import DEFAULT_ROOM_TYPES
from engine.numbering import format_room_number


def generate_room_types_df(template=None) -> pd.DataFrame:
    """One row per room type, with its planned room numbers expanded from floorSettings."""
    rows = []
    for rt in template or DEFAULT_ROOM_TYPES:
        numbers = []
        for floor_num, count in sorted(rt.get("floorSettings", {}).items()):
            start = int(rt.get("startRoomNumbers", {}).get(floor_num) or format_room_number(floor_num, 1))
            numbers.extend(str(start + i) for i in range(count))
        rows.append({
            "Room Type": rt["roomInfo"],
            "Name (KOR)": rt.get("nameKor", ""),
            "Name (ENG)": rt.get("nameEng", ""),
            "Price": rt.get("price", 0),
            "Aliases": ", ".join(rt.get("aliases", [])),
            "Room Numbers": ", ".join(numbers),
        })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write the sample room-type sheet as CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_room_types_df().to_csv(os.path.join(output_dir, "room_types.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample room-type sheet as a single-tab Excel file."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "room_types.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_room_types_df().to_excel(writer, sheet_name="Room Types", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
