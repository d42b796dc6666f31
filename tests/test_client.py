"""Tests for the order-store HTTP client"""

import pytest

from conftest import wire_order
from orderboard.client import FetchError, MutationError


async def test_get_orders_parses_snapshot(store, client):
    store.orders = [wire_order("o1", table_number="3"), wire_order("o2", table_number=0, token_id="T-4")]

    orders = await client.get_orders()

    assert [order.id for order in orders] == ["o1", "o2"]
    assert orders[0].table_number == 3
    assert orders[1].token_id == "T-4"
    assert store.requests == [("GET", "/getOrders")]


async def test_get_orders_non_2xx_carries_status_text(store, client):
    store.fetch_status = 502

    with pytest.raises(FetchError, match="Error: Bad Gateway"):
        await client.get_orders()


async def test_get_orders_transport_error_is_fetch_error(store, client):
    store.offline = True

    with pytest.raises(FetchError):
        await client.get_orders()


async def test_get_orders_skips_malformed_record(store, client, debug_log_path):
    store.orders = [
        wire_order("o1"),
        wire_order("legacy", dishes=[{"name": "Tea", "quantity": 0}]),
        wire_order("o3", minutes=2),
    ]

    orders = await client.get_orders()

    assert [order.id for order in orders] == ["o1", "o3"]
    assert "order_record_skipped index=1" in debug_log_path.read_text(encoding="utf-8")


async def test_get_orders_without_orders_list_is_fetch_error(store, client):
    store.orders = None

    with pytest.raises(FetchError, match="no orders list"):
        await client.get_orders()


async def test_get_reservations_skips_malformed_record(store, client):
    store.reservations = [
        {"name": "", "phone": "555", "persons": 2},
        {"name": "Ana", "phone": "555", "persons": 2, "date": "2024-05-02", "time": "19:00"},
    ]

    reservations = await client.get_reservations()

    assert [r.name for r in reservations] == ["Ana"]


async def test_get_reservations(store, client):
    store.reservations = [{"name": "Ana", "phone": "555", "persons": 2, "date": "2024-05-02", "time": "19:00"}]

    reservations = await client.get_reservations()

    assert reservations[0].name == "Ana"
    assert reservations[0].persons == 2


async def test_mark_as_delivered_posts_order_id(store, client):
    store.orders = [wire_order("o1")]

    await client.mark_as_delivered("o1")

    assert store.requests == [("POST", "/markAsDelivered")]
    assert store.orders[0]["isDelivered"] is True


async def test_mark_as_delivered_error_payload_is_mutation_error(store, client):
    store.mark_status = 200
    store.mark_error = "Order not found"

    with pytest.raises(MutationError, match="Order not found"):
        await client.mark_as_delivered("o1")


async def test_mark_as_delivered_non_2xx_uses_fallback_message(store, client):
    store.mark_status = 500

    with pytest.raises(MutationError, match="Error marking order as delivered"):
        await client.mark_as_delivered("o1")


async def test_mark_as_delivered_transport_error(store, client):
    store.offline = True

    with pytest.raises(MutationError):
        await client.mark_as_delivered("o1")
