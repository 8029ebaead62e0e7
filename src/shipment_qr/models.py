"""Shipment and equipment records carried by certificate QR codes.

Data contract:
- ShipmentRecord: five text fields, see SHIPMENT_FIELDS for the wire order
- EquipmentRecord: nine text fields, see EQUIPMENT_FIELDS for the wire order,
  plus an optional ``id`` used by callers for list bookkeeping only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

SHIPMENT_FIELDS: tuple[str, ...] = (
    "shipment_number",
    "customer",
    "supply_date",
    "poc_name",
    "poc_phone",
)

EQUIPMENT_FIELDS: tuple[str, ...] = (
    "row_num",
    "manufacturer_num",
    "manufacturer_name",
    "equipment_version",
    "idf_catalog",
    "serial_num",
    "purchase_qty",
    "test_qty",
    "purchase_order",
)

# camelCase keys used by the form layer and older exports.
_LEGACY_KEYS: dict[str, str] = {
    "shipmentNumber": "shipment_number",
    "supplyDate": "supply_date",
    "pocName": "poc_name",
    "pocPhone": "poc_phone",
    "poc": "poc_name",
    "rowNum": "row_num",
    "manufacturerNum": "manufacturer_num",
    "manufacturerName": "manufacturer_name",
    "equipmentVersion": "equipment_version",
    "idfCatalog": "idf_catalog",
    "serialNum": "serial_num",
    "purchaseQty": "purchase_qty",
    "testQty": "test_qty",
    "purchaseOrder": "purchase_order",
}


def _text_fields(data: Mapping[str, Any], names: tuple[str, ...]) -> dict[str, str]:
    values: dict[str, str] = {}
    for key, value in data.items():
        name = _LEGACY_KEYS.get(key, key)
        if name not in names:
            continue
        values[name] = "" if value is None else str(value)
    return values


@dataclass(frozen=True)
class ShipmentRecord:
    shipment_number: str = ""
    customer: str = ""
    supply_date: str = ""
    poc_name: str = ""
    poc_phone: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ShipmentRecord:
        """Build a record from snake_case or camelCase keys."""
        return cls(**_text_fields(data, SHIPMENT_FIELDS))

    def values(self) -> tuple[str, ...]:
        return tuple(getattr(self, name) for name in SHIPMENT_FIELDS)

    def as_dict(self) -> dict[str, str]:
        return dict(zip(SHIPMENT_FIELDS, self.values()))


@dataclass(frozen=True)
class EquipmentRecord:
    row_num: str = ""
    manufacturer_num: str = ""
    manufacturer_name: str = ""
    equipment_version: str = ""
    idf_catalog: str = ""
    serial_num: str = ""
    purchase_qty: str = ""
    test_qty: str = ""
    purchase_order: str = ""
    id: int | None = field(default=None, compare=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EquipmentRecord:
        """Build a record from snake_case or camelCase keys.

        An ``id`` key is carried over when it is an integer; it never reaches
        the payload.
        """
        raw_id = data.get("id")
        record_id = raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None
        return cls(id=record_id, **_text_fields(data, EQUIPMENT_FIELDS))

    def values(self) -> tuple[str, ...]:
        return tuple(getattr(self, name) for name in EQUIPMENT_FIELDS)

    def as_dict(self) -> dict[str, str]:
        return dict(zip(EQUIPMENT_FIELDS, self.values()))

    def has_data(self) -> bool:
        return any(value.strip() for value in self.values())
