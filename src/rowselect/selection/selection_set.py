"""SelectionSet: the constrained, mutable set of selected rows."""

from __future__ import annotations

import logging
import numbers
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterable, Iterator

from ..core.capture import DataCapture, RowSnapshot
from ..core.config import SelectionConfig
from ..core.errors import ReentrantCommandError
from ..core.providers import GridCollaborators

logger = logging.getLogger(__name__)


class SelectionResult(Enum):
    """Outcome of a single-row selection request."""

    ACCEPTED = "accepted"
    REJECTED_NOT_SELECTABLE = "rejected_not_selectable"
    REJECTED_CAPACITY_EXCEEDED = "rejected_capacity_exceeded"

    @property
    def accepted(self) -> bool:
        return self is SelectionResult.ACCEPTED


class SelectionSet:
    """Selected rows keyed by 0-based row index, in selection order.

    Invariants held after every command:

    - each key passes ``config.is_selectable``;
    - ``len(self) <= config.max_simultaneous_selected``;
    - deselected rows leave no snapshot behind.

    Capacity is enforced by rejecting new rows; existing selections are
    never evicted to make room.
    """

    def __init__(
        self,
        config: SelectionConfig,
        collaborators: GridCollaborators,
    ) -> None:
        self._config = config
        self._collaborators = collaborators
        self._selected: dict[int, RowSnapshot] = {}
        # grid column indices each snapshot was read from
        self._columns: dict[int, list[int]] = {}
        self._busy = False

    @property
    def config(self) -> SelectionConfig:
        return self._config

    @contextmanager
    def _command(self, name: str) -> Iterator[None]:
        if self._busy:
            raise ReentrantCommandError(
                f"'{name}' was called while another selection command was "
                f"running. Callbacks and predicates must not modify the selection."
            )
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    # --- Commands ---

    def toggle(self, row_index: int, checked: bool) -> SelectionResult:
        """Select (``checked=True``) or deselect a row."""
        if checked:
            return self.select(row_index)
        self.deselect(row_index)
        return SelectionResult.ACCEPTED

    def select(self, row_index: int) -> SelectionResult:
        with self._command("select"):
            return self._select(row_index)

    def _select(self, row_index: int) -> SelectionResult:
        if not self._in_grid(row_index):
            logger.debug("Row %r is outside the grid", row_index)
            return SelectionResult.REJECTED_NOT_SELECTABLE
        row_index = int(row_index)
        if not self._config.is_selectable(row_index):
            logger.debug("Row %s is not selectable", row_index)
            return SelectionResult.REJECTED_NOT_SELECTABLE
        if row_index in self._selected:
            return SelectionResult.ACCEPTED
        cap = self._config.max_simultaneous_selected
        if cap is not None and len(self._selected) >= cap:
            logger.debug(
                "Row %s rejected: %d of %d rows already selected",
                row_index, len(self._selected), cap,
            )
            return SelectionResult.REJECTED_CAPACITY_EXCEEDED
        columns, values = self._capture(row_index)
        self._selected[row_index] = values
        self._columns[row_index] = columns
        return SelectionResult.ACCEPTED

    def deselect(self, row_index: int) -> None:
        with self._command("deselect"):
            self._selected.pop(row_index, None)
            self._columns.pop(row_index, None)

    def select_all(self) -> int:
        """Select every eligible candidate until capacity runs out.

        Returns the number of rows newly selected.
        """
        with self._command("select_all"):
            return self._select_candidates(self.candidates())

    def clear_all(self) -> None:
        with self._command("clear_all"):
            self._clear()

    def select_only_matching(self, predicate_row_indices: Iterable[int]) -> int:
        """Replace the selection with the candidates found in ``predicate_row_indices``.

        Returns the number of rows selected.
        """
        matching = set(predicate_row_indices)
        with self._command("select_only_matching"):
            return self._replace_with([r for r in self.candidates() if r in matching])

    def select_where(self, predicate: Callable[[int], bool]) -> int:
        """Replace the selection with the candidates for which ``predicate`` holds.

        The predicate runs inside the command, so it must not call back
        into this set.
        """
        with self._command("select_where"):
            return self._replace_with([r for r in self.candidates() if predicate(r)])

    def _replace_with(self, rows: list[int]) -> int:
        self._clear()
        return self._select_candidates(rows)

    def _select_candidates(self, candidates: list[int]) -> int:
        added = 0
        for row_index in candidates:
            if self.remaining_capacity == 0:
                break
            if row_index in self._selected:
                continue
            if self._select(row_index).accepted:
                added += 1
        logger.debug("Selected %d new rows (%d total)", added, len(self._selected))
        return added

    # --- Queries ---

    def candidates(self) -> list[int]:
        """Rows eligible for bulk selection, in enumeration order.

        Starts from the selectable subset (or every row), drops indices
        outside the grid and, unless hidden rows may be selected, rows the
        host reports as hidden.
        """
        n_rows = self._collaborators.rows.count_rows()
        if self._config.selectable_rows is None:
            rows = list(range(n_rows))
        else:
            rows = [r for r in self._config.selectable_rows if r < n_rows]
        return [r for r in rows if not self.hidden_by_policy(r)]

    def hidden_by_policy(self, row_index: int) -> bool:
        """True if ``row_index`` is hidden and hidden rows may not be selected."""
        hidden = self._collaborators.hidden_rows
        if self._config.select_hidden_rows or hidden is None:
            return False
        return hidden.is_hidden(row_index)

    @property
    def remaining_capacity(self) -> int | None:
        """Rows that can still be selected; None when unbounded."""
        cap = self._config.max_simultaneous_selected
        if cap is None:
            return None
        return max(0, cap - len(self._selected))

    def is_selected(self, row_index: int) -> bool:
        return row_index in self._selected

    def selected_row_indices(self) -> list[int]:
        return list(self._selected)

    def selected_values(self) -> list[RowSnapshot]:
        return [list(v) for v in self._selected.values()]

    def selected_entries(self) -> list[tuple[int, RowSnapshot]]:
        return [(r, list(v)) for r, v in self._selected.items()]

    def selected_columns(self) -> dict[int, list[int]]:
        """Grid column indices behind each snapshot, keyed by row index."""
        return {r: list(self._columns[r]) for r in self._selected}

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, row_index: object) -> bool:
        return row_index in self._selected

    def __repr__(self) -> str:
        cap = self._config.max_simultaneous_selected
        return f"SelectionSet(selected={len(self._selected)}, cap={cap})"

    # --- Internals ---

    def _in_grid(self, row_index: object) -> bool:
        if isinstance(row_index, bool) or not isinstance(row_index, numbers.Integral):
            return False
        return 0 <= row_index < self._collaborators.rows.count_rows()

    def _clear(self) -> None:
        self._selected.clear()
        self._columns.clear()

    def _capture(self, row_index: int) -> tuple[list[int], RowSnapshot]:
        c = self._collaborators
        policy = self._config.column_policy
        column_count = c.cols.count_cols()
        columns = DataCapture.visible_columns(policy, column_count, c.hidden_columns)
        values = DataCapture.capture(
            row_index,
            policy,
            column_count,
            c.cells,
            c.hidden_columns,
            row_provider=c.row_data,
        )
        return columns, values
