"""Load shipment and equipment records from YAML/JSON files.

Expected document shape::

    shipment:
      shipment_number: "345"
      customer: "45"
      supply_date: "07/01/2026"
    equipment:
      - row_num: "1"
        manufacturer_name: SONY

camelCase keys from form exports are accepted as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import EquipmentRecord, ShipmentRecord


class RecordsFileError(ValueError):
    """Raised when a records file does not have the expected structure."""


def parse_records(data: Any) -> tuple[ShipmentRecord, list[EquipmentRecord]]:
    if not isinstance(data, dict):
        raise RecordsFileError("Records document must be a mapping.")

    shipment_data = data.get("shipment") or {}
    if not isinstance(shipment_data, dict):
        raise RecordsFileError("'shipment' must be a mapping.")

    equipment_data = data.get("equipment") or []
    if not isinstance(equipment_data, list):
        raise RecordsFileError("'equipment' must be a list.")

    rows: list[EquipmentRecord] = []
    for index, item in enumerate(equipment_data, start=1):
        if not isinstance(item, dict):
            raise RecordsFileError(f"Equipment row {index} must be a mapping.")
        rows.append(EquipmentRecord.from_mapping(item))

    return ShipmentRecord.from_mapping(shipment_data), rows


def load_records(path: Path) -> tuple[ShipmentRecord, list[EquipmentRecord]]:
    """Read and parse a records file. JSON files are valid YAML."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise RecordsFileError(f"Invalid records file {path}: {exc}") from exc
    return parse_records(data)


def records_to_dict(
    shipment: ShipmentRecord | None,
    rows: list[EquipmentRecord] | None,
) -> dict[str, Any]:
    return {
        "shipment": shipment.as_dict() if shipment is not None else None,
        "equipment": [row.as_dict() for row in rows] if rows is not None else None,
    }
