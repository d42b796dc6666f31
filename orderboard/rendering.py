"""Rich renderables for the board panes."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from orderboard.constant import MARK_DELIVERED_LABEL, MENU_ICONS, TABLE_STATUS_PENDING
from orderboard.models import ReservationRecord
from orderboard.projection import OrderGroup


def badge_style(kind: str) -> str:
    """Return a consistent style for count badges and status tags."""
    if kind == "pending":
        return "bold #ffffff on #b23a48"
    if kind == "takeaway":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_menu_entry(option: str, active: bool, badge: int | None) -> Text:
    """Render one sidebar entry with its icon and optional badge."""
    text = Text()
    text.append("➤ " if active else "  ")
    text.append(f"{MENU_ICONS.get(option, ' ')} ")
    text.append(option, style="bold" if active else "")
    if badge is not None:
        text.append(" ")
        text.append(f" {badge} ", style=badge_style("pending"))
    return text


def format_table_grid(statuses: dict[int, str], selected: int | None, per_row: int = 5) -> Text:
    """Render the physical table buttons, highlighting pending tables."""
    text = Text()
    for idx, (table, status) in enumerate(sorted(statuses.items())):
        if idx and idx % per_row == 0:
            text.append("\n")
        elif idx:
            text.append(" ")
        style = badge_style("pending") if status == TABLE_STATUS_PENDING else "#dddddd on #333333"
        if table == selected:
            style += " underline"
        text.append(f" Table {table:>2} ", style=style)
    return text


def build_orders_table(
    groups: Sequence[OrderGroup],
    include_token: bool,
    cursor_order_id: str | None = None,
) -> Table:
    """Render grouped orders; shared cells appear on each order's first line."""
    table = Table(box=box.SIMPLE_HEAD, expand=True)
    table.add_column("Table Number")
    table.add_column("Dishes")
    table.add_column("Quantity", justify="right")
    table.add_column("Date")
    table.add_column("Time")
    if include_token:
        table.add_column("Token ID")
    table.add_column("Status")
    table.add_column("Action")

    for group in groups:
        row_style = "reverse" if group.order_id == cursor_order_id else None
        for idx, dish in enumerate(group.dishes):
            anchor = idx == 0
            status = Text(group.status, style=badge_style("pending") if group.can_mark_delivered else "")
            action = Text(MARK_DELIVERED_LABEL, style="bold") if group.can_mark_delivered else Text("")
            cells: list[str | Text] = [
                group.table if anchor else "",
                dish.name,
                str(dish.quantity),
                group.date if anchor else "",
                group.time if anchor else "",
            ]
            if include_token:
                cells.append((group.token or "") if anchor else "")
            cells.append(status if anchor else "")
            cells.append(action if anchor else "")
            table.add_row(*cells, style=row_style, end_section=idx == len(group.dishes) - 1)
    return table


def build_reservations_table(reservations: Sequence[ReservationRecord]) -> Table:
    table = Table(box=box.SIMPLE_HEAD, expand=True)
    for heading in ("Name", "Phone", "No. of Persons", "Date", "Time"):
        table.add_column(heading)
    for reservation in reservations:
        table.add_row(
            reservation.name,
            reservation.phone,
            str(reservation.persons),
            reservation.date,
            reservation.time,
        )
    return table
