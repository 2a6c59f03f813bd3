"""RowSelectionViewState: reactive bridge between a grid view and the engine."""

from __future__ import annotations

import json
import logging

import param

from ..core.errors import RowSelectionError
from ..selection.engine import SelectionEngine
from .serializers import serialize_selection

logger = logging.getLogger(__name__)

COMMANDS = ("toggle", "select_all", "clear_all", "select_only_selectable")


class RowSelectionViewState(param.Parameterized):
    """Mirrors engine state as params and forwards view commands.

    The view writes ``command_json`` like
    ``{"command": "toggle", "row": 3, "checked": true, "seq": 7}`` (``seq``
    makes repeated identical commands distinct changes) and watches
    ``selected_rows`` / ``state_json`` to update checkboxes and
    highlighting.
    """

    # --- Engine state (Python -> view) ---
    enabled = param.Boolean(default=False)
    checkbox_position = param.String(default=None, allow_None=True)
    checkbox_rows = param.List(default=[])
    selected_rows = param.List(default=[])
    state_json = param.String(default="{}")

    # --- Commands (view -> Python) ---
    command_json = param.String(default="{}")

    # --- Status text ---
    status_text = param.String(default="")

    engine = param.Parameter(default=None, allow_None=True)

    def __init__(self, engine: SelectionEngine, **params):
        super().__init__(engine=engine, **params)
        engine.on_change(lambda rows: self.refresh())
        self.refresh()

    def refresh(self) -> None:
        """Copy the engine's current state into the params."""
        config = self.engine.config
        self.enabled = self.engine.is_enabled()
        self.checkbox_position = config.checkbox_position.value if config else None
        self.checkbox_rows = self.engine.checkbox_rows()
        self.selected_rows = self.engine.get_selected_row_indices()
        self.state_json = serialize_selection(self.engine)
        cap = config.max_simultaneous_selected if config else None
        if not self.enabled:
            self.status_text = "Row selection off"
        elif cap is None:
            self.status_text = f"{len(self.selected_rows)} rows selected"
        else:
            self.status_text = f"{len(self.selected_rows)} of {cap} rows selected"

    @param.depends("command_json", watch=True)
    def _on_command(self) -> None:
        try:
            message = json.loads(self.command_json)
        except (json.JSONDecodeError, TypeError):
            logger.warning("Ignoring malformed command JSON: %r", self.command_json)
            return
        if not isinstance(message, dict) or not message:
            return
        self.dispatch(
            message.get("command"),
            row=message.get("row"),
            checked=message.get("checked", True),
        )

    def dispatch(
        self,
        command: str | None,
        row: int | None = None,
        checked: bool = True,
    ) -> None:
        """Run a named view command against the engine."""
        if command not in COMMANDS:
            raise ValueError(
                f"Unknown selection command {command!r}. Use one of {list(COMMANDS)}."
            )
        try:
            if command == "toggle":
                if row is None:
                    raise ValueError("'toggle' needs a 'row' index.")
                result = self.engine.toggle_row(row, bool(checked))
                if not result.accepted:
                    self.status_text = f"Row {row} not selected: {result.value}"
            elif command == "select_all":
                self.engine.click_select_all()
            elif command == "clear_all":
                self.engine.click_clear_all()
            else:
                self.engine.click_select_only_selectable()
        except RowSelectionError as exc:
            logger.warning("Selection command %r failed: %s", command, exc)
            self.status_text = str(exc)
            raise
