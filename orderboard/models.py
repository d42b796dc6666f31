"""Domain models for the order board."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from orderboard.constant import TAKEAWAY_TABLE


@dataclass(frozen=True)
class Dish:
    """One dish line of an order."""

    name: str
    quantity: int


@dataclass(frozen=True)
class OrderRecord:
    """A single order as held by the remote order store."""

    id: str
    table_number: int
    dishes: tuple[Dish, ...]
    is_delivered: bool
    created_at: datetime
    token_id: str | None = None

    @property
    def is_takeaway(self) -> bool:
        return self.table_number == TAKEAWAY_TABLE


@dataclass(frozen=True)
class ReservationRecord:
    """A table reservation; display only."""

    name: str
    phone: str
    persons: int
    date: str
    time: str


@dataclass(frozen=True)
class Counters:
    """Badge counters derived from the order list."""

    pending_count: int = 0
    new_order_count: int = 0
    takeaway_count: int = 0


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
    else:
        raise ValueError(f"invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_dish(raw: Any) -> Dish:
    if not isinstance(raw, dict):
        raise ValueError(f"invalid dish line: {raw!r}")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise ValueError("dish line without a name")
    quantity = int(raw.get("quantity", 0))
    if quantity <= 0:
        raise ValueError(f"dish {name!r} has non-positive quantity {quantity}")
    return Dish(name=name, quantity=quantity)


def order_from_wire(raw: Any) -> OrderRecord:
    """Build an OrderRecord from one element of the getOrders payload."""
    if not isinstance(raw, dict):
        raise ValueError(f"invalid order record: {raw!r}")

    order_id = raw.get("_id", raw.get("id"))
    if order_id in (None, ""):
        raise ValueError("order record without an id")

    table_raw = raw.get("tableNumber")
    if table_raw is None or isinstance(table_raw, bool):
        raise ValueError(f"order {order_id} has no table number")
    table_number = int(str(table_raw).strip())

    dishes = tuple(_parse_dish(dish) for dish in raw.get("dishes") or [])
    if not dishes:
        raise ValueError(f"order {order_id} has no dishes")

    token_id = raw.get("tokenId")
    return OrderRecord(
        id=str(order_id),
        table_number=table_number,
        dishes=dishes,
        is_delivered=bool(raw.get("isDelivered", False)),
        created_at=parse_timestamp(raw.get("createdAt")),
        token_id=str(token_id) if token_id not in (None, "") else None,
    )


def reservation_from_wire(raw: Any) -> ReservationRecord:
    """Build a ReservationRecord from one element of the getReservations payload."""
    if not isinstance(raw, dict):
        raise ValueError(f"invalid reservation record: {raw!r}")

    name = str(raw.get("name") or "").strip()
    phone = str(raw.get("phone") or "").strip()
    if not name or not phone:
        raise ValueError("reservation requires a name and a phone number")

    persons = int(raw.get("persons", 0))
    if persons <= 0:
        raise ValueError(f"reservation for {name!r} has non-positive party size {persons}")

    return ReservationRecord(
        name=name,
        phone=phone,
        persons=persons,
        date=str(raw.get("date") or ""),
        time=str(raw.get("time") or ""),
    )
