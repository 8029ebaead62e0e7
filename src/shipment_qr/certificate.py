"""Certificate readiness checks and payload assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .codec import encode_equipment_list, encode_shipment, encode_single_equipment_row
from .models import EquipmentRecord, ShipmentRecord

REQUIRED_SHIPMENT_FIELDS = ("shipment_number", "customer", "supply_date")


class CertificateNotReadyError(ValueError):
    """Raised when records are missing data required for a certificate."""

    def __init__(self, issues: list[str]) -> None:
        super().__init__("; ".join(issues))
        self.issues = issues


@dataclass(frozen=True)
class CertificateCodes:
    shipment_payload: str
    equipment_payload: str
    row_payloads: tuple[str, ...]

    def as_dict(self) -> dict[str, object]:
        return {
            "shipment": self.shipment_payload,
            "equipment": self.equipment_payload,
            "rows": list(self.row_payloads),
        }


def missing_shipment_fields(shipment: ShipmentRecord) -> list[str]:
    return [name for name in REQUIRED_SHIPMENT_FIELDS if not getattr(shipment, name).strip()]


def is_shipment_complete(shipment: ShipmentRecord) -> bool:
    return not missing_shipment_fields(shipment)


def has_equipment_data(rows: Sequence[EquipmentRecord]) -> bool:
    """True when at least one row has a non-blank field."""
    return any(row.has_data() for row in rows)


def readiness_issues(shipment: ShipmentRecord, rows: Sequence[EquipmentRecord]) -> list[str]:
    """List what is missing before a certificate can be printed."""
    issues: list[str] = []
    missing = missing_shipment_fields(shipment)
    if missing:
        issues.append(f"Missing required shipment fields: {', '.join(missing)}")
    if not has_equipment_data(rows):
        issues.append("At least one equipment row with data is required")
    return issues


def require_ready(shipment: ShipmentRecord, rows: Sequence[EquipmentRecord]) -> None:
    issues = readiness_issues(shipment, rows)
    if issues:
        raise CertificateNotReadyError(issues)


def build_certificate_codes(
    shipment: ShipmentRecord,
    rows: Sequence[EquipmentRecord],
) -> CertificateCodes:
    """Build the shipment code, the aggregate equipment code and one code per row."""
    return CertificateCodes(
        shipment_payload=encode_shipment(shipment),
        equipment_payload=encode_equipment_list(rows),
        row_payloads=tuple(encode_single_equipment_row(row) for row in rows),
    )
