"""Static menu, status and message labels for the board."""

from __future__ import annotations

MENU_ALL_ORDERS = "All Orders"
MENU_UNDELIVERED = "Undelivered Orders"
MENU_TAP_AND_COLLECT = "Tap and Collect"
MENU_RESERVATIONS = "Reservations"

MENU_OPTIONS: list[str] = [
    MENU_ALL_ORDERS,
    MENU_UNDELIVERED,
    MENU_TAP_AND_COLLECT,
    MENU_RESERVATIONS,
]

MENU_ICONS: dict[str, str] = {
    MENU_ALL_ORDERS: "📦",
    MENU_UNDELIVERED: "⏳",
    MENU_TAP_AND_COLLECT: "🛒",
    MENU_RESERVATIONS: "📅",
}

# Single-key shortcuts for the sidebar menu.
MENU_KEYS: dict[str, str] = {
    "a": MENU_ALL_ORDERS,
    "u": MENU_UNDELIVERED,
    "c": MENU_TAP_AND_COLLECT,
    "r": MENU_RESERVATIONS,
}

TAKEAWAY_TABLE = 0
TAKEAWAY_LABEL = "Tap and Collect"
TOKEN_PLACEHOLDER = "N/A"

TABLE_STATUS_PENDING = "pending"
TABLE_STATUS_NONE = "none"

ORDER_STATUS_DELIVERED = "Delivered"
ORDER_STATUS_PENDING = "Pending"
MARK_DELIVERED_LABEL = "Mark as Delivered"

LOADING_MESSAGE = "Loading..."
SELECT_TABLE_PROMPT = "Select a table to view orders."
MUTATION_FALLBACK_ERROR = "Error marking order as delivered"
NEW_ORDER_MESSAGE = "New order received"
