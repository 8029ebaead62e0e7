from shipment_qr.models import EQUIPMENT_FIELDS, EquipmentRecord, ShipmentRecord


def test_shipment_from_mapping_accepts_camel_case_and_legacy_poc() -> None:
    record = ShipmentRecord.from_mapping(
        {"shipmentNumber": "345", "customer": "45", "supplyDate": "07/01/2026", "poc": "אטו"}
    )
    assert record == ShipmentRecord(
        shipment_number="345",
        customer="45",
        supply_date="07/01/2026",
        poc_name="אטו",
    )


def test_shipment_from_mapping_ignores_unknown_keys_and_none() -> None:
    record = ShipmentRecord.from_mapping({"shipment_number": 12, "poc_phone": None, "extra": "x"})
    assert record.shipment_number == "12"
    assert record.poc_phone == ""


def test_equipment_id_is_not_part_of_equality() -> None:
    first = EquipmentRecord(row_num="1", serial_num="A", id=1)
    second = EquipmentRecord(row_num="1", serial_num="A", id=7)
    assert first == second
    assert "id" not in first.as_dict()
    assert tuple(first.as_dict()) == EQUIPMENT_FIELDS


def test_equipment_from_mapping_keeps_integer_id_only() -> None:
    assert EquipmentRecord.from_mapping({"id": 3, "rowNum": "1"}).id == 3
    assert EquipmentRecord.from_mapping({"id": "3", "rowNum": "1"}).id is None


def test_equipment_has_data() -> None:
    assert not EquipmentRecord(row_num="  ").has_data()
    assert EquipmentRecord(test_qty="2").has_data()
