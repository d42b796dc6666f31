"""Immutable board state and its non-order transitions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from orderboard.constant import MENU_ALL_ORDERS, MENU_OPTIONS
from orderboard.models import Counters, OrderRecord, ReservationRecord


@dataclass(frozen=True)
class BoardState:
    """Everything the board shows, replaced wholesale on every change.

    ``orders`` and ``counters`` are only written by the reconciler and the
    action applier. ``delivered_ids`` remembers every order this board has
    seen delivered so a stale snapshot cannot flip one back to pending.
    """

    orders: tuple[OrderRecord, ...] = ()
    counters: Counters = field(default_factory=Counters)
    last_order_count: int = 0
    delivered_ids: frozenset[str] = frozenset()
    reservations: tuple[ReservationRecord, ...] = ()
    loading: bool = True
    error: str = ""
    menu_option: str = MENU_ALL_ORDERS
    selected_table: int | None = None


def replace_reservations(state: BoardState, snapshot: Iterable[ReservationRecord]) -> BoardState:
    """Swap in a freshly fetched reservation list."""
    return replace(state, reservations=tuple(snapshot), loading=False, error="")


def record_error(state: BoardState, message: str) -> BoardState:
    """Surface an error while keeping the last known good data."""
    return replace(state, error=message, loading=False)


def select_menu(state: BoardState, option: str) -> BoardState:
    if option not in MENU_OPTIONS:
        raise ValueError(f"unknown menu option: {option!r}")
    return replace(state, menu_option=option, selected_table=None)


def select_table(state: BoardState, table_number: int) -> BoardState:
    return replace(state, selected_table=table_number)


def clear_table_selection(state: BoardState) -> BoardState:
    return replace(state, selected_table=None)
