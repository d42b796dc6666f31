"""Mark-as-delivered confirmation modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from orderboard.projection import OrderGroup


class ConfirmDeliveredModal(ModalScreen[bool]):
    """Ask before marking one order delivered; dismisses with True on confirm."""

    CSS = """
    ConfirmDeliveredModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #confirm-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-body {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, group: OrderGroup) -> None:
        super().__init__()
        self.group = group

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static("Mark as Delivered", id="confirm-title")
            yield Static(id="confirm-body")
            yield Static("Enter/y confirm. Esc/n/q cancel.", id="confirm-help")

    def on_mount(self) -> None:
        body = Text(style="white")
        body.append(f"Table: {self.group.table}\n", style="bold")
        body.append(f"{self.group.date} {self.group.time}\n")
        for dish in self.group.dishes:
            body.append(f"  {dish.quantity} x {dish.name}\n")
        self.query_one("#confirm-body", Static).update(body)

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "n", "q", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        if event.key in {"enter", "y"}:
            self.dismiss(True)
            event.stop()
