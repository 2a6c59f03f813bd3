"""SelectionEngine: per-session facade used by the view layer.

The view renders checkboxes/buttons and forwards named commands here;
it reads selected indices and values back to update highlighting.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import pandas as pd

from ..core.capture import DataCapture, RowSnapshot
from ..core.config import ConfigResolver, SelectionConfig
from ..core.errors import RowSelectionError
from ..core.providers import GridCollaborators
from ..export.frame_export import labelled_selection_frame, selection_to_frame
from .selection_set import SelectionResult, SelectionSet

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[list], Any]


class SelectionEngine:
    """Row-selection plugin session: Disabled <-> Enabled.

    Usage::

        engine = SelectionEngine(grid.collaborators())
        engine.configure({"selectableRows": [[0, 4]], "multiselect": 3})
        engine.toggle_row(2, True)
        engine.click_select_all()
        engine.get_selected_values()

    ``update`` (and re-``configure`` while enabled) is disable-then-enable,
    so any standing selection is discarded.
    """

    def __init__(self, collaborators: GridCollaborators | None = None) -> None:
        self._collaborators = collaborators
        self._raw_settings: Any = None
        self._config: SelectionConfig | None = None
        self._selection: SelectionSet | None = None
        self._callbacks: list[ChangeCallback] = []

    # --- Lifecycle ---

    def configure(
        self,
        raw_settings: Any,
        collaborators: GridCollaborators | None = None,
    ) -> SelectionConfig:
        """Resolve ``raw_settings`` and (re)enable the session with them.

        Resolution happens before any state changes, so a
        ``ConfigurationError`` leaves the engine exactly as it was.
        """
        collaborators = collaborators or self._collaborators
        if collaborators is None:
            raise RowSelectionError(
                "No grid collaborators supplied. Pass GridCollaborators to "
                "SelectionEngine() or configure()."
            )
        config = ConfigResolver.resolve(raw_settings, collaborators)
        if self.is_enabled():
            self._disable()
        self._collaborators = collaborators
        self._raw_settings = raw_settings
        self._start(config)
        self._notify()
        return config

    def enable(self) -> None:
        """Enable with the last configured settings. No-op when enabled."""
        if self.is_enabled():
            return
        if self._raw_settings is None:
            raise RowSelectionError(
                "Row selection has never been configured; call configure() first."
            )
        self.configure(self._raw_settings)

    def disable(self) -> None:
        """Clear the selection and drop the config. No-op when disabled."""
        if not self.is_enabled():
            return
        self._disable()
        self._notify()

    def update(self, raw_settings: Any) -> SelectionConfig:
        """Apply new settings; prior selection is intentionally lost."""
        return self.configure(raw_settings)

    def teardown(self) -> None:
        """Disable and release the host collaborators and callbacks."""
        self.disable()
        self._collaborators = None
        self._raw_settings = None
        self._callbacks.clear()

    def is_enabled(self) -> bool:
        return self._selection is not None

    @property
    def config(self) -> SelectionConfig | None:
        return self._config

    def _start(self, config: SelectionConfig) -> None:
        self._config = config
        self._selection = SelectionSet(config, self._collaborators)
        for row_index in config.initially_selected_rows:
            if self._selection.hidden_by_policy(row_index):
                logger.warning(
                    "Initially selected row %d is hidden and was not selected",
                    row_index,
                )
                continue
            result = self._selection.select(row_index)
            if not result.accepted:
                logger.warning(
                    "Initially selected row %d was not selected: %s",
                    row_index, result.value,
                )
        logger.info(
            "Row selection enabled (%d rows preselected)", len(self._selection)
        )

    def _disable(self) -> None:
        self._selection.clear_all()
        self._selection = None
        self._config = None
        logger.info("Row selection disabled")

    # --- Commands ---

    def toggle_row(self, row_index: int, checked: bool) -> SelectionResult:
        result = self._require_selection().toggle(row_index, checked)
        if result.accepted:
            self._notify()
        return result

    def click_select_all(self) -> int:
        added = self._require_selection().select_all()
        self._notify()
        return added

    def click_clear_all(self) -> None:
        self._require_selection().clear_all()
        self._notify()

    def click_select_only_selectable(self) -> int:
        """Keep only rows accepted by ``isRowSelectable``.

        Without a configured predicate every candidate row matches, which
        makes this a clear followed by select-all.
        """
        selection = self._require_selection()
        predicate = self._config.is_row_selectable
        if predicate is None:
            count = selection.select_only_matching(selection.candidates())
        else:
            count = selection.select_where(lambda r: bool(predicate(r)))
        self._notify()
        return count

    # --- Queries ---

    def get_selected_row_indices(self) -> list[int]:
        if self._selection is None:
            return []
        return self._selection.selected_row_indices()

    def get_selected_values(self) -> list[RowSnapshot]:
        if self._selection is None:
            return []
        return self._selection.selected_values()

    def get_selected_entries(self) -> list[tuple[int, RowSnapshot]]:
        if self._selection is None:
            return []
        return self._selection.selected_entries()

    def checkbox_rows(self) -> list[int]:
        """Rows the view should render a checkbox for."""
        if self._config is None:
            return []
        n_rows = self._collaborators.rows.count_rows()
        if self._config.selectable_rows is None:
            return list(range(n_rows))
        return [r for r in self._config.selectable_rows if r < n_rows]

    def get_selected_frame(self, columns: list | None = None) -> pd.DataFrame:
        """Selected rows as a DataFrame indexed by row index.

        Column labels default to the host's ``column_labels()`` (when it
        has one). Each row is labelled by the columns it was captured from,
        so hiding or showing columns after selection does not shift values.
        """
        entries = self.get_selected_entries()
        if columns is not None or self._config is None:
            return selection_to_frame(entries, columns=columns)
        labels = getattr(self._collaborators.cols, "column_labels", None)
        if not callable(labels):
            return selection_to_frame(entries)
        all_labels = list(labels())
        if entries:
            return labelled_selection_frame(
                entries, self._selection.selected_columns(), all_labels
            )
        visible = DataCapture.visible_columns(
            self._config.column_policy,
            len(all_labels),
            self._collaborators.hidden_columns,
        )
        return selection_to_frame(entries, columns=[all_labels[c] for c in visible])

    # --- Change notification ---

    def on_change(self, callback: ChangeCallback) -> None:
        """Register a callback: fn(selected_row_indices)."""
        self._callbacks.append(callback)

    def _notify(self) -> None:
        rows = self.get_selected_row_indices()
        for cb in self._callbacks:
            cb(rows)

    def _require_selection(self) -> SelectionSet:
        if self._selection is None:
            raise RowSelectionError(
                "Row selection is disabled. Call configure() or enable() first."
            )
        return self._selection

    def __repr__(self) -> str:
        state = "enabled" if self.is_enabled() else "disabled"
        return (
            f"SelectionEngine({state}, "
            f"selected={len(self.get_selected_row_indices())})"
        )
