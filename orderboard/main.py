"""Entry point for the order board Textual app."""

from __future__ import annotations

from orderboard.board_app import OrderBoardApp


def main() -> None:
    """Run the Textual application."""
    OrderBoardApp().run()


if __name__ == "__main__":
    main()
