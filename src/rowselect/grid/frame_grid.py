"""DataFrameGrid: a pandas-backed host implementing every grid provider."""

from __future__ import annotations

import string
from typing import Any, Iterable

import numpy as np
import pandas as pd

from ..core.providers import GridCollaborators
from .validation import validate_grid_frame, validate_hidden_indices


class HiddenIndexSet:
    """Mutable set of hidden positions along one grid axis."""

    __slots__ = ("_size", "_axis_name", "_hidden")

    def __init__(
        self,
        size: int,
        indices: Iterable[int] = (),
        axis_name: str = "row",
    ) -> None:
        self._size = size
        self._axis_name = axis_name
        self._hidden: set[int] = validate_hidden_indices(indices, size, axis_name)

    def is_hidden(self, index: int) -> bool:
        return index in self._hidden

    def hide(self, *indices: int) -> None:
        self._hidden |= validate_hidden_indices(indices, self._size, self._axis_name)

    def show(self, *indices: int) -> None:
        self._hidden -= set(indices)

    @property
    def hidden(self) -> list[int]:
        return sorted(self._hidden)

    def __len__(self) -> int:
        return len(self._hidden)

    def __repr__(self) -> str:
        return f"HiddenIndexSet({self._axis_name}, hidden={self.hidden})"


class DataFrameGrid:
    """Grid host over a DataFrame, addressed by 0-based positions.

    Usage::

        grid = DataFrameGrid(df, hidden_columns=[3, 4])
        engine = SelectionEngine(grid.collaborators())
    """

    def __init__(
        self,
        df: pd.DataFrame,
        hidden_rows: Iterable[int] = (),
        hidden_columns: Iterable[int] = (),
    ) -> None:
        self._df = validate_grid_frame(df)
        self.hidden_rows = HiddenIndexSet(len(df.index), hidden_rows, axis_name="row")
        self.hidden_columns = HiddenIndexSet(
            len(df.columns), hidden_columns, axis_name="column"
        )

    @property
    def df(self) -> pd.DataFrame:
        return self._df

    def count_rows(self) -> int:
        return self._df.shape[0]

    def count_cols(self) -> int:
        return self._df.shape[1]

    def get_data_at_cell(self, row: int, col: int) -> Any:
        return _to_python(self._df.iat[row, col])

    def get_data_at_row(self, row: int) -> list:
        return [_to_python(v) for v in self._df.iloc[row].tolist()]

    def column_labels(self) -> list:
        return self._df.columns.tolist()

    def collaborators(
        self,
        with_hidden_rows: bool = True,
        with_hidden_columns: bool = True,
    ) -> GridCollaborators:
        """Providers for ``SelectionEngine``.

        The hidden-row/column providers can be left out to model hosts
        without those features.
        """
        return GridCollaborators(
            rows=self,
            cols=self,
            cells=self,
            row_data=self,
            hidden_rows=self.hidden_rows if with_hidden_rows else None,
            hidden_columns=self.hidden_columns if with_hidden_columns else None,
        )


def _to_python(value: Any) -> Any:
    # numpy scalars -> builtin scalars so snapshots compare and serialize cleanly
    if isinstance(value, np.generic):
        return value.item()
    return value


def column_letters(n_cols: int) -> list[str]:
    """Spreadsheet column names: A, B, ..., Z, AA, AB, ..."""
    letters = []
    for i in range(n_cols):
        name = ""
        i += 1
        while i:
            i, rem = divmod(i - 1, 26)
            name = string.ascii_uppercase[rem] + name
        letters.append(name)
    return letters


def create_spreadsheet_data(n_rows: int, n_cols: int) -> pd.DataFrame:
    """Grid whose cells read ``<column letter><0-based row>``, e.g. 'C6'."""
    cols = column_letters(n_cols)
    data = [[f"{c}{r}" for c in cols] for r in range(n_rows)]
    return pd.DataFrame(data, columns=cols)
