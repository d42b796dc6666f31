"""Pure view projections over the current order list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from orderboard.config import TABLE_COUNT
from orderboard.constant import (
    MENU_ALL_ORDERS,
    MENU_RESERVATIONS,
    MENU_TAP_AND_COLLECT,
    MENU_UNDELIVERED,
    ORDER_STATUS_DELIVERED,
    ORDER_STATUS_PENDING,
    TABLE_STATUS_NONE,
    TABLE_STATUS_PENDING,
    TAKEAWAY_LABEL,
    TAKEAWAY_TABLE,
    TOKEN_PLACEHOLDER,
)
from orderboard.models import Counters, Dish, OrderRecord


@dataclass(frozen=True)
class OrderGroup:
    """One order laid out for display.

    The order-level cells are shared by every dish line; renderers show them
    once, on the first (anchor) line.
    """

    order_id: str
    table: str
    date: str
    time: str
    token: str | None
    status: str
    can_mark_delivered: bool
    dishes: tuple[Dish, ...]


def filter_for_display(
    orders: Sequence[OrderRecord],
    menu_option: str,
    selected_table: int | None,
) -> list[OrderRecord]:
    """Return the orders the given menu option shows, in list order."""
    if menu_option == MENU_TAP_AND_COLLECT:
        return [order for order in orders if order.table_number == TAKEAWAY_TABLE]

    if menu_option in (MENU_ALL_ORDERS, MENU_UNDELIVERED):
        undelivered_only = menu_option == MENU_UNDELIVERED
        return [
            order
            for order in orders
            if not (undelivered_only and order.is_delivered)
            and (selected_table is None or order.table_number == selected_table)
        ]

    if menu_option == MENU_RESERVATIONS:
        return []

    raise ValueError(f"unknown menu option: {menu_option!r}")


def table_status(orders: Sequence[OrderRecord], table_number: int) -> str:
    """``"pending"`` when the table has any undelivered order, else ``"none"``."""
    pending = any(order.table_number == table_number and not order.is_delivered for order in orders)
    return TABLE_STATUS_PENDING if pending else TABLE_STATUS_NONE


def table_statuses(orders: Sequence[OrderRecord], table_count: int = TABLE_COUNT) -> dict[int, str]:
    """Status for each physical table; the takeaway table is not included."""
    return {table: table_status(orders, table) for table in range(1, table_count + 1)}


def table_label(table_number: int) -> str:
    if table_number == TAKEAWAY_TABLE:
        return TAKEAWAY_LABEL
    return str(table_number)


def status_label(order: OrderRecord) -> str:
    return ORDER_STATUS_DELIVERED if order.is_delivered else ORDER_STATUS_PENDING


def group_orders(orders: Sequence[OrderRecord], include_token: bool = False) -> list[OrderGroup]:
    """Split each order into its shared cells and its dish lines."""
    groups: list[OrderGroup] = []
    for order in orders:
        local_time = order.created_at.astimezone()
        groups.append(
            OrderGroup(
                order_id=order.id,
                table=table_label(order.table_number),
                date=local_time.strftime("%d/%m/%Y"),
                time=local_time.strftime("%H:%M:%S"),
                token=(order.token_id or TOKEN_PLACEHOLDER) if include_token else None,
                status=status_label(order),
                can_mark_delivered=not order.is_delivered,
                dishes=order.dishes,
            )
        )
    return groups


def menu_badge(menu_option: str, counters: Counters) -> int | None:
    """Badge count for a sidebar entry, or None when nothing should show."""
    if menu_option == MENU_ALL_ORDERS:
        value = counters.new_order_count
    elif menu_option == MENU_UNDELIVERED:
        value = counters.pending_count
    elif menu_option == MENU_TAP_AND_COLLECT:
        value = counters.takeaway_count
    else:
        return None
    return value if value > 0 else None


def order_view_title(menu_option: str, selected_table: int | None) -> str | None:
    """Heading for the order table, or None when a table must be picked first."""
    if menu_option == MENU_TAP_AND_COLLECT:
        return menu_option
    if selected_table is None:
        return None
    return f"{menu_option} for Table {selected_table}"
