"""DataCapture: column-policy-filtered value snapshots of a single row."""

from __future__ import annotations

from enum import Enum

from .providers import CellDataProvider, HiddenIndexProvider, RowDataProvider

RowSnapshot = list  # cell values, one per visible column


class ColumnPolicy(Enum):
    INCLUDE_HIDDEN = "include_hidden"
    EXCLUDE_HIDDEN = "exclude_hidden"


class DataCapture:
    """Build ``RowSnapshot`` lists from host cell data.

    Pure: reads providers, never mutates them.
    """

    @staticmethod
    def visible_columns(
        policy: ColumnPolicy,
        column_count: int,
        hidden_columns_provider: HiddenIndexProvider | None = None,
    ) -> list[int]:
        """Return the column indices a snapshot covers under ``policy``."""
        if policy is ColumnPolicy.INCLUDE_HIDDEN or hidden_columns_provider is None:
            return list(range(column_count))
        return [
            c for c in range(column_count)
            if not hidden_columns_provider.is_hidden(c)
        ]

    @staticmethod
    def capture(
        row_index: int,
        policy: ColumnPolicy,
        column_count: int,
        cell_provider: CellDataProvider,
        hidden_columns_provider: HiddenIndexProvider | None = None,
        row_provider: RowDataProvider | None = None,
    ) -> RowSnapshot:
        """Snapshot the values of ``row_index``.

        Parameters
        ----------
        row_index : 0-based row to read
        policy : whether hidden columns are kept or skipped
        column_count : number of columns in the grid
        cell_provider : source of ``get_data_at_cell(row, col)``
        hidden_columns_provider : required for EXCLUDE_HIDDEN to have effect
        row_provider : optional bulk reader used for INCLUDE_HIDDEN
        """
        if policy is ColumnPolicy.INCLUDE_HIDDEN and row_provider is not None:
            values = list(row_provider.get_data_at_row(row_index))
            if len(values) >= column_count:
                return values[:column_count]
        columns = DataCapture.visible_columns(
            policy, column_count, hidden_columns_provider
        )
        return [cell_provider.get_data_at_cell(row_index, c) for c in columns]

