"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime

from rich.console import Group
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from orderboard.board import OrderBoard
from orderboard.client import OrderStoreClient
from orderboard.config import TABLE_COUNT, resolve_poll_interval
from orderboard.confirm_modal import ConfirmDeliveredModal
from orderboard.constant import (
    LOADING_MESSAGE,
    MENU_KEYS,
    MENU_OPTIONS,
    MENU_RESERVATIONS,
    MENU_TAP_AND_COLLECT,
    NEW_ORDER_MESSAGE,
    SELECT_TABLE_PROMPT,
)
from orderboard.debug_log import log_debug
from orderboard.poller import Poller
from orderboard.projection import (
    OrderGroup,
    filter_for_display,
    group_orders,
    menu_badge,
    order_view_title,
    table_statuses,
)
from orderboard.rendering import (
    build_orders_table,
    build_reservations_table,
    format_menu_entry,
    format_table_grid,
)
from orderboard.state import BoardState


class OrderBoardApp(App):
    """A Textual live board for restaurant orders and reservations."""

    TITLE = "Order Board"
    SUB_TITLE = "Orders / Tables / Reservations"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #sidebar {
        width: 32;
        border: round $secondary;
        padding: 1;
    }

    #content-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #table-grid {
        margin-bottom: 1;
    }

    #order-details {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        height: 2;
        padding: 0 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    order_cursor = reactive(0)

    BINDINGS = [
        ("j", "move_cursor(1)", "Next order"),
        ("k", "move_cursor(-1)", "Previous order"),
        ("down", "move_cursor(1)", "Next order"),
        ("up", "move_cursor(-1)", "Previous order"),
        ("enter", "mark_selected", "Mark delivered"),
        ("m", "mark_selected", "Mark delivered"),
        ("escape", "clear_table", "All tables"),
        Binding("ctrl+r", "refresh_now", "Refresh", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: OrderStoreClient | None = None, poll_interval: float | None = None) -> None:
        super().__init__()
        self.board = OrderBoard(client or OrderStoreClient())
        self.poller = Poller(self._poll_orders, interval=poll_interval or resolve_poll_interval())
        self.last_refresh: datetime | None = None
        self.notification_count = 0
        log_debug("app_init")

    @property
    def state(self) -> BoardState:
        return self.board.state

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="sidebar"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="content-pane"):
                yield Static("Tables", id="tables-title", classes="pane-title")
                yield Static(id="table-grid")
                yield Static(id="order-title", classes="pane-title")
                yield Static(id="order-details")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_all()
        self.poller.start()
        self.run_worker(self._load_reservations(), group="reservations")

    async def on_unmount(self) -> None:
        await self.poller.stop()
        await self.board.close()
        log_debug("app_unmount")

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ConfirmDeliveredModal):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key in MENU_KEYS:
            self.board.select_menu(MENU_KEYS[key])
            self.order_cursor = 0
            self._refresh_all()
            event.stop()
            return

        if key.isdigit() and self._shows_table_grid():
            table = int(key) or 10
            if table <= TABLE_COUNT:
                self.board.select_table(table)
                self.order_cursor = 0
                self._refresh_all()
            event.stop()

    def action_move_cursor(self, delta: int) -> None:
        if isinstance(self.screen, ConfirmDeliveredModal):
            return
        groups = self._visible_groups()
        if not groups:
            self.order_cursor = 0
            return
        self.order_cursor = (self.order_cursor + delta) % len(groups)
        self._refresh_orders()

    def action_clear_table(self) -> None:
        if isinstance(self.screen, ConfirmDeliveredModal):
            return
        if self.state.selected_table is None:
            return
        self.board.clear_table_selection()
        self.order_cursor = 0
        self._refresh_all()

    def action_mark_selected(self) -> None:
        if isinstance(self.screen, ConfirmDeliveredModal):
            return
        group = self._selected_group()
        if group is None or not group.can_mark_delivered:
            return

        def _on_confirm(confirmed: bool | None) -> None:
            if confirmed:
                self.run_worker(self._mark_delivered(group.order_id), group="mark-delivered")

        self.push_screen(ConfirmDeliveredModal(group), _on_confirm)

    def action_refresh_now(self) -> None:
        log_debug("refresh_now")
        # Routed through the poller so a manual fetch never races a scheduled one.
        self.run_worker(self.poller.tick_now(), group="orders")
        self.run_worker(self._load_reservations(), group="reservations", exclusive=True)

    async def _poll_orders(self) -> None:
        result = await self.board.refresh_orders()
        if result is not None:
            self.last_refresh = datetime.now()
            if result.should_notify:
                self._announce_new_orders()
        self._refresh_all()

    async def _load_reservations(self) -> None:
        await self.board.refresh_reservations()
        self._refresh_all()

    async def _mark_delivered(self, order_id: str) -> None:
        await self.board.mark_delivered(order_id)
        self._refresh_all()

    def _announce_new_orders(self) -> None:
        self.notification_count += 1
        log_debug(f"new_orders_notify count={self.notification_count}")
        self.bell()
        self.notify(NEW_ORDER_MESSAGE, title=self.TITLE)

    def _shows_table_grid(self) -> bool:
        return self.state.menu_option not in (MENU_TAP_AND_COLLECT, MENU_RESERVATIONS)

    def _visible_groups(self) -> list[OrderGroup]:
        state = self.state
        if state.menu_option == MENU_RESERVATIONS:
            return []
        if order_view_title(state.menu_option, state.selected_table) is None:
            return []
        orders = filter_for_display(state.orders, state.menu_option, state.selected_table)
        return group_orders(orders, include_token=state.menu_option == MENU_TAP_AND_COLLECT)

    def _selected_group(self) -> OrderGroup | None:
        groups = self._visible_groups()
        if not (0 <= self.order_cursor < len(groups)):
            return None
        return groups[self.order_cursor]

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_tables()
        self._refresh_orders()
        self._refresh_status_bar()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        state = self.state
        lines = Text()
        for idx, option in enumerate(MENU_OPTIONS):
            if idx:
                lines.append("\n")
            lines.append_text(
                format_menu_entry(option, option == state.menu_option, menu_badge(option, state.counters))
            )
        menu_widget.update(lines)

    def _refresh_tables(self) -> None:
        try:
            title = self.query_one("#tables-title", Static)
            grid = self.query_one("#table-grid", Static)
        except NoMatches:
            return
        visible = self._shows_table_grid()
        title.display = visible
        grid.display = visible
        if visible:
            grid.update(format_table_grid(table_statuses(self.state.orders), self.state.selected_table))

    def _refresh_orders(self) -> None:
        try:
            title_widget = self.query_one("#order-title", Static)
            details = self.query_one("#order-details", Static)
        except NoMatches:
            return

        state = self.state
        error = Text(state.error, style="bold #ffb3b3") if state.error else None

        if state.menu_option == MENU_RESERVATIONS:
            title_widget.update(MENU_RESERVATIONS)
            if state.loading:
                details.update(LOADING_MESSAGE)
            elif error is not None and not state.reservations:
                details.update(error)
            elif error is not None:
                details.update(Group(error, build_reservations_table(state.reservations)))
            else:
                details.update(build_reservations_table(state.reservations))
            return

        title = order_view_title(state.menu_option, state.selected_table)
        title_widget.update(title or "")
        if state.loading:
            details.update(LOADING_MESSAGE)
            return
        if title is None:
            details.update(Group(error, SELECT_TABLE_PROMPT) if error is not None else SELECT_TABLE_PROMPT)
            return

        groups = self._visible_groups()
        if self.order_cursor >= len(groups):
            self.order_cursor = max(0, len(groups) - 1)
        cursor_id = groups[self.order_cursor].order_id if groups else None
        table = build_orders_table(
            groups,
            include_token=state.menu_option == MENU_TAP_AND_COLLECT,
            cursor_order_id=cursor_id,
        )
        details.update(Group(error, table) if error is not None else table)

    def _refresh_status_bar(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        refreshed = self.last_refresh.strftime("%H:%M:%S") if self.last_refresh else "never"
        bar.update(
            "A/U/C/R menu. 1-9,0 table. J/K move, Enter mark delivered. Ctrl+R refresh. Ctrl+Q quit.\n"
            f"Last refresh: {refreshed}"
        )
