"""Serializers: convert engine state to JSON for the view layer."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..selection.engine import SelectionEngine


def selection_state_dict(engine: SelectionEngine) -> dict[str, Any]:
    """Everything the view needs to render checkboxes and highlighting."""
    config = engine.config
    if config is None:
        return {
            "enabled": False,
            "checkboxPosition": None,
            "checkboxRows": [],
            "selectedRows": [],
            "maxSelected": None,
        }
    return {
        "enabled": True,
        "checkboxPosition": config.checkbox_position.value,
        "checkboxRows": engine.checkbox_rows(),
        "selectedRows": engine.get_selected_row_indices(),
        "maxSelected": config.max_simultaneous_selected,
    }


def serialize_selection(engine: SelectionEngine) -> str:
    """Serialize engine state as JSON string."""
    return json.dumps(selection_state_dict(engine))


def serialize_selected_values(engine: SelectionEngine) -> str:
    """Serialize selected ``[row, values]`` entries as JSON string.

    Cell values that JSON cannot represent are converted with ``str``.
    """
    return json.dumps(
        [[row, values] for row, values in engine.get_selected_entries()],
        default=str,
    )
