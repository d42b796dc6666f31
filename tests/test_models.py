"""Tests for wire record parsing"""

from datetime import datetime, timezone

import pytest

from orderboard.models import Dish, order_from_wire, parse_timestamp, reservation_from_wire


def test_order_from_wire_maps_fields():
    order = order_from_wire(
        {
            "_id": "o1",
            "tableNumber": "0",
            "dishes": [{"name": "Tea", "quantity": 2}, {"name": "Bun", "quantity": 1}],
            "isDelivered": False,
            "createdAt": "2024-05-01T12:00:00Z",
            "tokenId": "T-17",
        }
    )

    assert order.id == "o1"
    assert order.table_number == 0
    assert order.is_takeaway
    assert order.dishes == (Dish("Tea", 2), Dish("Bun", 1))
    assert order.created_at == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert order.token_id == "T-17"


def test_order_from_wire_accepts_plain_id_and_missing_token():
    order = order_from_wire(
        {
            "id": 42,
            "tableNumber": 5,
            "dishes": [{"name": "Soup", "quantity": 1}],
            "createdAt": "2024-05-01T12:00:00",
        }
    )

    assert order.id == "42"
    assert order.is_delivered is False
    assert order.token_id is None
    assert order.created_at.tzinfo is not None


@pytest.mark.parametrize(
    "raw",
    [
        {"tableNumber": 1, "dishes": [{"name": "Tea", "quantity": 1}], "createdAt": "2024-05-01T12:00:00Z"},
        {"_id": "o1", "tableNumber": 1, "dishes": [], "createdAt": "2024-05-01T12:00:00Z"},
        {"_id": "o1", "tableNumber": 1, "dishes": [{"name": "Tea", "quantity": 0}], "createdAt": "2024-05-01T12:00:00Z"},
        {"_id": "o1", "tableNumber": "window", "dishes": [{"name": "Tea", "quantity": 1}], "createdAt": "2024-05-01T12:00:00Z"},
        {"_id": "o1", "tableNumber": 1, "dishes": [{"name": "Tea", "quantity": 1}], "createdAt": ""},
    ],
)
def test_order_from_wire_rejects_malformed_records(raw):
    with pytest.raises(ValueError):
        order_from_wire(raw)


def test_parse_timestamp_keeps_offsets():
    parsed = parse_timestamp("2024-05-01T14:00:00+02:00")
    assert parsed == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_reservation_from_wire():
    reservation = reservation_from_wire(
        {"name": "Ana", "phone": "555-0101", "persons": 4, "date": "2024-05-02", "time": "19:30"}
    )
    assert reservation.name == "Ana"
    assert reservation.persons == 4
    assert reservation.time == "19:30"


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "", "phone": "555", "persons": 2},
        {"name": "Ana", "phone": "", "persons": 2},
        {"name": "Ana", "phone": "555", "persons": 0},
    ],
)
def test_reservation_from_wire_requires_name_phone_and_party(raw):
    with pytest.raises(ValueError):
        reservation_from_wire(raw)
