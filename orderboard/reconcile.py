"""Order reconciliation and the optimistic delivered patch.

Both paths write ``orders`` and ``counters`` together. After either one the
counters must equal ``compute_counters(state.orders)``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from orderboard.models import Counters, OrderRecord
from orderboard.state import BoardState


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of merging one fresh snapshot."""

    orders: tuple[OrderRecord, ...]
    counters: Counters
    should_notify: bool


def compute_counters(orders: Iterable[OrderRecord]) -> Counters:
    """Recount the badge counters over an order list."""
    pending = 0
    takeaway = 0
    for order in orders:
        if order.is_delivered:
            continue
        pending += 1
        if order.is_takeaway:
            takeaway += 1
    return Counters(pending_count=pending, new_order_count=pending, takeaway_count=takeaway)


def sort_newest_first(orders: Iterable[OrderRecord]) -> tuple[OrderRecord, ...]:
    # sorted() is stable with reverse=True, so ties keep snapshot order.
    return tuple(sorted(orders, key=lambda order: order.created_at, reverse=True))


def reconcile(
    previous_order_count: int,
    fresh_snapshot: Sequence[OrderRecord],
    delivered_ids: frozenset[str] = frozenset(),
) -> ReconcileResult:
    """Merge a fresh snapshot into a new authoritative order list.

    Orders listed in ``delivered_ids`` stay delivered even when the snapshot
    predates the mutation. ``should_notify`` compares total counts only, so an
    add and a removal within one poll interval go unnoticed.
    """
    merged = [
        replace(order, is_delivered=True) if not order.is_delivered and order.id in delivered_ids else order
        for order in fresh_snapshot
    ]
    orders = sort_newest_first(merged)
    return ReconcileResult(
        orders=orders,
        counters=compute_counters(orders),
        should_notify=len(fresh_snapshot) > previous_order_count,
    )


def apply_snapshot(state: BoardState, fresh_snapshot: Sequence[OrderRecord]) -> tuple[BoardState, ReconcileResult]:
    """Reconcile against ``state`` and return the replaced state with the result.

    ``delivered_ids`` is narrowed to the orders in this snapshot; ids the
    store no longer reports are forgotten.
    """
    result = reconcile(state.last_order_count, fresh_snapshot, state.delivered_ids)
    delivered = {order.id for order in result.orders if order.is_delivered}
    new_state = replace(
        state,
        orders=result.orders,
        counters=result.counters,
        last_order_count=len(fresh_snapshot),
        delivered_ids=frozenset(delivered),
        loading=False,
        error="",
    )
    return new_state, result


def mark_delivered_locally(state: BoardState, order_id: str) -> BoardState:
    """Flag one order delivered and decrement the counters it contributed to.

    A missing or already delivered order leaves orders and counters as they
    are; the id is still remembered as delivered until the next snapshot.
    """
    delivered_ids = state.delivered_ids | {order_id}
    target = next((order for order in state.orders if order.id == order_id), None)
    if target is None or target.is_delivered:
        return replace(state, delivered_ids=delivered_ids)

    orders = tuple(
        replace(order, is_delivered=True) if order.id == order_id else order for order in state.orders
    )
    current = state.counters
    counters = Counters(
        pending_count=max(0, current.pending_count - 1),
        new_order_count=max(0, current.new_order_count - 1),
        takeaway_count=max(0, current.takeaway_count - 1) if target.is_takeaway else current.takeaway_count,
    )
    return replace(state, orders=orders, counters=counters, delivered_ids=delivered_ids)
