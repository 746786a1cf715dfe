"""Modal screen showing both full values of one difference."""

import json
from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from json_compare.diff_engine import MISSING, DiffRecord, format_path


class DiffDetailModal(ModalScreen[None]):
    """A modal screen that displays the left and right values of a difference."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close"),
        Binding("q", "quit", "Quit App"),
    ]

    CSS = """
    DiffDetailModal {
        align: center middle;
    }

    DiffDetailModal > Vertical {
        width: 90%;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    DiffDetailModal .modal-header {
        dock: top;
        height: auto;
        padding: 1 2;
        background: $primary;
        color: $text;
        text-align: center;
        text-style: bold;
    }

    DiffDetailModal .value-columns {
        height: 1fr;
    }

    DiffDetailModal .content-container {
        width: 1fr;
        height: 1fr;
        padding: 1 2;
        background: $surface-darken-2;
    }

    DiffDetailModal .side-label {
        color: $secondary;
        text-style: bold;
    }

    DiffDetailModal .close-hint {
        dock: bottom;
        height: auto;
        padding: 1 2;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        record: DiffRecord,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the difference detail modal.

        Args:
            record: The difference to show.
            name: Optional name for the widget.
            id: Optional ID for the widget.
            classes: Optional CSS classes.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.record = record

    def _format_value(self, value: Any) -> str:
        """Format a value for display.

        Args:
            value: The value to format, or MISSING.

        Returns:
            A formatted string representation.
        """
        if value is MISSING:
            return "(not present)"
        if isinstance(value, str):
            return value
        try:
            return json.dumps(value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)

    def compose(self) -> ComposeResult:
        """Compose the modal content."""
        title = f"{self.record.kind.value.upper()}: {format_path(self.record.path) or '(root)'}"

        with Vertical():
            yield Label(title, classes="modal-header")
            with Horizontal(classes="value-columns"):
                with ScrollableContainer(classes="content-container"):
                    yield Label("Left", classes="side-label")
                    yield Static(self._format_value(self.record.left_value), markup=False)
                with ScrollableContainer(classes="content-container"):
                    yield Label("Right", classes="side-label")
                    yield Static(self._format_value(self.record.right_value), markup=False)
            yield Label("Press [ESC] or [ENTER] to close", classes="close-hint", markup=False)

    def action_close(self) -> None:
        """Close the modal."""
        self.dismiss(None)

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit()
