"""Board controller: fetch orchestration and the mark-delivered action."""

from __future__ import annotations

from orderboard.client import FetchError, MutationError, OrderStoreClient
from orderboard.debug_log import log_debug
from orderboard.reconcile import ReconcileResult, apply_snapshot, mark_delivered_locally
from orderboard.state import (
    BoardState,
    clear_table_selection,
    record_error,
    replace_reservations,
    select_menu,
    select_table,
)


class OrderBoard:
    """Owns the board state and the only code paths that write it.

    Each write happens in one synchronous step after the remote call returns,
    against whatever state is current at that moment.
    """

    def __init__(self, client: OrderStoreClient, state: BoardState | None = None) -> None:
        self.client = client
        self.state = state or BoardState()

    async def refresh_orders(self) -> ReconcileResult | None:
        """Fetch and reconcile orders; None when the fetch failed."""
        try:
            snapshot = await self.client.get_orders()
        except FetchError as exc:
            self.state = record_error(self.state, str(exc))
            log_debug(f"orders_fetch_failed error={exc}")
            return None

        self.state, result = apply_snapshot(self.state, snapshot)
        counters = result.counters
        log_debug(
            f"orders_reconciled total={len(result.orders)} pending={counters.pending_count} "
            f"takeaway={counters.takeaway_count} notify={result.should_notify}"
        )
        return result

    async def refresh_reservations(self) -> bool:
        try:
            snapshot = await self.client.get_reservations()
        except FetchError as exc:
            self.state = record_error(self.state, str(exc))
            log_debug(f"reservations_fetch_failed error={exc}")
            return False

        self.state = replace_reservations(self.state, snapshot)
        log_debug(f"reservations_replaced total={len(self.state.reservations)}")
        return True

    async def mark_delivered(self, order_id: str) -> bool:
        """Mark an order delivered remotely, then patch local state.

        Returns False and leaves orders untouched when the store rejects it.
        """
        try:
            await self.client.mark_as_delivered(order_id)
        except MutationError as exc:
            self.state = record_error(self.state, str(exc))
            log_debug(f"mark_delivered_failed order_id={order_id} error={exc}")
            return False

        self.state = mark_delivered_locally(self.state, order_id)
        log_debug(f"mark_delivered_ok order_id={order_id} pending={self.state.counters.pending_count}")
        return True

    def select_menu(self, option: str) -> None:
        self.state = select_menu(self.state, option)

    def select_table(self, table_number: int) -> None:
        self.state = select_table(self.state, table_number)

    def clear_table_selection(self) -> None:
        self.state = clear_table_selection(self.state)

    async def close(self) -> None:
        await self.client.close()
