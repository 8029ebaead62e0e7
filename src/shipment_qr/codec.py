"""Delimited QR payload codec for shipment and equipment records.

Wire format:
- shipment:  ``1|number|customer|supplyDate|pocName|pocPhone``
- equipment: ``2`` followed by ``^row`` per record, each row being nine
  ``|``-joined fields

Decoders never raise on scan data: structurally invalid input returns None
and missing trailing fields decode as empty strings. There is no escaping for
``|`` or ``^`` inside field text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .models import EQUIPMENT_FIELDS, SHIPMENT_FIELDS, EquipmentRecord, ShipmentRecord
from .utils.normalize import normalize_text

SHIPMENT_TAG = "1"
EQUIPMENT_TAG = "2"
FIELD_SEP = "|"
ROW_SEP = "^"

# Tag plus number, customer and supply date. The POC slots may be absent.
MIN_SHIPMENT_SEGMENTS = 4


class PayloadType(str, Enum):
    SHIPMENT = "shipment"
    EQUIPMENT = "equipment"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DecodedPayload:
    kind: PayloadType
    shipment: ShipmentRecord | None = None
    equipment: list[EquipmentRecord] | None = None

    @property
    def ok(self) -> bool:
        return self.shipment is not None or self.equipment is not None


def _join_fields(values: Iterable[str | None]) -> str:
    return FIELD_SEP.join(normalize_text(value) for value in values)


def _map_fields(segments: list[str], names: tuple[str, ...]) -> dict[str, str]:
    return {name: segments[idx] if idx < len(segments) else "" for idx, name in enumerate(names)}


def encode_shipment(record: ShipmentRecord) -> str:
    """Build the shipment payload; empty fields keep their slot."""
    return SHIPMENT_TAG + FIELD_SEP + _join_fields(record.values())


def is_valid_shipment_payload(payload: object) -> bool:
    if not payload or not isinstance(payload, str):
        return False
    segments = payload.split(FIELD_SEP)
    return len(segments) >= MIN_SHIPMENT_SEGMENTS and segments[0] == SHIPMENT_TAG


def decode_shipment(payload: object) -> ShipmentRecord | None:
    """Parse a scanned shipment payload, or return None if it is not one."""
    if not is_valid_shipment_payload(payload):
        return None
    segments = payload.split(FIELD_SEP)  # type: ignore[union-attr]
    return ShipmentRecord(**_map_fields(segments[1:], SHIPMENT_FIELDS))


def _encode_row(row: EquipmentRecord) -> str:
    return _join_fields(row.values())


def encode_equipment_list(rows: Iterable[EquipmentRecord]) -> str:
    """Build the aggregate equipment payload, rows kept in input order."""
    return EQUIPMENT_TAG + "".join(ROW_SEP + _encode_row(row) for row in rows)


def encode_single_equipment_row(row: EquipmentRecord) -> str:
    """Build the standalone payload printed next to a single row."""
    return EQUIPMENT_TAG + ROW_SEP + _encode_row(row)


def is_valid_equipment_payload(payload: object) -> bool:
    if not payload or not isinstance(payload, str):
        return False
    return payload.startswith(EQUIPMENT_TAG)


def decode_equipment_list(payload: object) -> list[EquipmentRecord] | None:
    """Parse a scanned equipment payload.

    Returns an empty list for a bare tag and None when the payload is not an
    equipment payload. Decoded rows get ``id`` set to their 1-based position
    among the ``^`` segments, counting empty segments that were skipped.
    """
    if not is_valid_equipment_payload(payload):
        return None

    segments = payload.split(ROW_SEP)  # type: ignore[union-attr]
    if len(segments) < 2:
        return []

    rows: list[EquipmentRecord] = []
    for idx in range(1, len(segments)):
        segment = segments[idx]
        if not segment:
            continue
        columns = segment.split(FIELD_SEP)
        rows.append(EquipmentRecord(id=idx, **_map_fields(columns, EQUIPMENT_FIELDS)))
    return rows


def classify_payload(payload: object) -> PayloadType:
    """Cheap prefix check; does not guarantee the payload decodes."""
    if not payload or not isinstance(payload, str):
        return PayloadType.UNKNOWN
    if payload.startswith(SHIPMENT_TAG + FIELD_SEP):
        return PayloadType.SHIPMENT
    if payload.startswith(EQUIPMENT_TAG):
        return PayloadType.EQUIPMENT
    return PayloadType.UNKNOWN


def decode_payload(payload: object) -> DecodedPayload:
    """Classify a scanned string and decode it with the matching decoder."""
    kind = classify_payload(payload)
    if kind is PayloadType.SHIPMENT:
        return DecodedPayload(kind=kind, shipment=decode_shipment(payload))
    if kind is PayloadType.EQUIPMENT:
        return DecodedPayload(kind=kind, equipment=decode_equipment_list(payload))
    return DecodedPayload(kind=kind)
