"""HTTP client for the remote order-store API."""

from __future__ import annotations

from typing import Any

import httpx

from orderboard.config import REQUEST_TIMEOUT_SECONDS, resolve_api_base_url
from orderboard.constant import MUTATION_FALLBACK_ERROR
from orderboard.debug_log import log_debug
from orderboard.models import OrderRecord, ReservationRecord, order_from_wire, reservation_from_wire


class BoardError(Exception):
    """Base class for errors surfaced on the board."""


class FetchError(BoardError):
    """A read from the order store failed (transport, non-2xx or bad payload)."""


class MutationError(BoardError):
    """A write to the order store failed or was rejected."""


class OrderStoreClient:
    """Client for the getOrders / getReservations / markAsDelivered endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or resolve_api_base_url()).rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> OrderStoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def get_orders(self) -> list[OrderRecord]:
        """Fetch the current order snapshot, in server order."""
        payload = await self._get_json("/getOrders")
        raw_orders = payload.get("orders")
        if not isinstance(raw_orders, list):
            raise FetchError("Error: response has no orders list")
        orders: list[OrderRecord] = []
        for idx, raw in enumerate(raw_orders):
            try:
                orders.append(order_from_wire(raw))
            except (TypeError, ValueError) as exc:
                # One bad record must not hide the rest of the snapshot.
                log_debug(f"order_record_skipped index={idx} error={exc!r}")
        return orders

    async def get_reservations(self) -> list[ReservationRecord]:
        """Fetch the current reservation snapshot."""
        payload = await self._get_json("/getReservations")
        raw_reservations = payload.get("reservations")
        if not isinstance(raw_reservations, list):
            raise FetchError("Error: response has no reservations list")
        reservations: list[ReservationRecord] = []
        for idx, raw in enumerate(raw_reservations):
            try:
                reservations.append(reservation_from_wire(raw))
            except (TypeError, ValueError) as exc:
                log_debug(f"reservation_record_skipped index={idx} error={exc!r}")
        return reservations

    async def mark_as_delivered(self, order_id: str) -> None:
        """Ask the order store to flag one order as delivered."""
        try:
            response = await self.client.post("/markAsDelivered", json={"orderId": order_id})
        except httpx.HTTPError as exc:
            log_debug(f"mark_delivered_transport_error order_id={order_id} error={exc!r}")
            raise MutationError(str(exc) or MUTATION_FALLBACK_ERROR) from exc

        data = _json_or_empty(response)
        error = data.get("error") if isinstance(data, dict) else None
        if response.is_success and not error:
            return
        log_debug(f"mark_delivered_rejected order_id={order_id} status={response.status_code} error={error!r}")
        raise MutationError(str(error) if error else MUTATION_FALLBACK_ERROR)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def _get_json(self, path: str) -> dict[str, Any]:
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as exc:
            log_debug(f"fetch_transport_error path={path} error={exc!r}")
            raise FetchError(str(exc) or f"Error: request to {path} failed") from exc

        if not response.is_success:
            log_debug(f"fetch_failed path={path} status={response.status_code}")
            raise FetchError(f"Error: {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(f"Error: invalid JSON from {path}") from exc
        if not isinstance(data, dict):
            raise FetchError(f"Error: unexpected payload from {path}")
        return data


def _json_or_empty(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}
