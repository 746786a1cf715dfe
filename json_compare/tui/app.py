"""
Main Textual application for the JSON Compare viewer.

This is the entry point for the TUI that compares two JSON documents,
either as editable raw text or as a pretty-printed aligned view.
"""

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding

from json_compare.diff_engine import DEFAULT_INDENT, read_document
from json_compare.tui.state import MODES, ViewerSettings
from json_compare.tui.views.diff_screen import DiffScreen

_LOG = logging.getLogger(__name__)


class JsonDiffApp(App):
    """A Textual app for comparing two JSON documents."""

    TITLE = "JSON Compare"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    DataTable {
        background: $surface;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }

    DataTable > .datatable--hover {
        background: $primary-lighten-1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        left_path: str,
        right_path: str,
        settings: ViewerSettings | None = None,
    ):
        """Initialize the app with the two documents to compare.

        Args:
            left_path: Path to the left JSON document.
            right_path: Path to the right JSON document.
            settings: Indent and start mode for the diff screen.
        """
        super().__init__()
        self._left_path = left_path
        self._right_path = right_path
        self._settings = settings or ViewerSettings()

    def on_mount(self) -> None:
        """Read both documents and push the diff screen."""
        left_text = self._read(self._left_path)
        right_text = self._read(self._right_path)

        left_name = os.path.basename(self._left_path)
        right_name = os.path.basename(self._right_path)
        self.title = f"JSON Compare - {left_name} ↔ {right_name}"

        self.push_screen(DiffScreen(left_text, right_text, self._settings))

    def _read(self, path: str) -> str:
        """Read one document, showing an empty pane when it cannot be read."""
        try:
            return read_document(path)
        except (OSError, UnicodeDecodeError) as e:
            _LOG.debug("cannot read %s: %s", path, e)
            self.notify(f"Error loading file: {e}", severity="error")
            return ""


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Compare two JSON documents in a terminal UI."
    )
    parser.add_argument("left", help="Path to the left JSON document")
    parser.add_argument("right", help="Path to the right JSON document")
    parser.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_INDENT,
        help=f"Indent for the aligned view (default: {DEFAULT_INDENT})",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="edit",
        help="Start in edit mode or aligned view mode (default: edit)",
    )
    args = parser.parse_args()

    for path in (args.left, args.right):
        if not os.path.exists(path):
            print(f"Error: Path not found: {path}", file=sys.stderr)
            sys.exit(1)

        if not os.access(path, os.R_OK):
            print(f"Error: Permission denied: {path}", file=sys.stderr)
            sys.exit(1)

    try:
        settings = ViewerSettings(indent=args.indent, start_mode=args.mode)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app = JsonDiffApp(args.left, args.right, settings)
    app.run()


if __name__ == "__main__":
    main()
