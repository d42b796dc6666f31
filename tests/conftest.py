"""Test configuration and fixtures"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from orderboard.client import OrderStoreClient
from orderboard.models import Dish, OrderRecord

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_order(
    order_id: str,
    table_number: int = 1,
    is_delivered: bool = False,
    minutes: int = 0,
    dishes: tuple[Dish, ...] = (Dish("Tea", 1),),
    token_id: str | None = None,
) -> OrderRecord:
    return OrderRecord(
        id=order_id,
        table_number=table_number,
        dishes=dishes,
        is_delivered=is_delivered,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        token_id=token_id,
    )


def wire_order(
    order_id: str,
    table_number: int | str = 1,
    is_delivered: bool = False,
    minutes: int = 0,
    dishes: list[dict] | None = None,
    token_id: str | None = None,
) -> dict:
    raw = {
        "_id": order_id,
        "tableNumber": table_number,
        "dishes": dishes or [{"name": "Tea", "quantity": 1}],
        "isDelivered": is_delivered,
        "createdAt": (BASE_TIME + timedelta(minutes=minutes)).isoformat().replace("+00:00", "Z"),
    }
    if token_id is not None:
        raw["tokenId"] = token_id
    return raw


class FakeOrderStore:
    """In-memory stand-in for the remote order store, served via MockTransport."""

    def __init__(self) -> None:
        self.orders: list[dict] = []
        self.reservations: list[dict] = []
        self.fetch_status: int | None = None
        self.mark_status = 200
        self.mark_error: str | None = None
        self.offline = False
        self.requests: list[tuple[str, str]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)

        path = request.url.path
        if path == "/getOrders":
            if self.fetch_status is not None:
                return httpx.Response(self.fetch_status)
            orders = None if self.orders is None else [dict(order) for order in self.orders]
            return httpx.Response(200, json={"orders": orders})

        if path == "/getReservations":
            if self.fetch_status is not None:
                return httpx.Response(self.fetch_status)
            return httpx.Response(200, json={"reservations": list(self.reservations)})

        if path == "/markAsDelivered" and request.method == "POST":
            order_id = json.loads(request.content)["orderId"]
            if self.mark_error is not None:
                return httpx.Response(self.mark_status, json={"error": self.mark_error})
            if self.mark_status >= 400:
                return httpx.Response(self.mark_status, text="")
            for order in self.orders:
                if order["_id"] == order_id:
                    order["isDelivered"] = True
            return httpx.Response(200, json={})

        return httpx.Response(404)

    def client(self) -> OrderStoreClient:
        return OrderStoreClient(base_url="http://store.test", transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    """Keep debug lines out of /tmp during tests"""
    path = tmp_path / "debug.log"
    monkeypatch.setenv("ORDERBOARD_DEBUG_LOG", str(path))
    return path


@pytest.fixture
def store() -> FakeOrderStore:
    return FakeOrderStore()


@pytest.fixture
async def client(store):
    async with store.client() as client:
        yield client
