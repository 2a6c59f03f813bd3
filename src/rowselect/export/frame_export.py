"""Export selected row snapshots as pandas DataFrames or CSV files."""

from __future__ import annotations

import pathlib
from collections.abc import Mapping
from typing import Sequence

import pandas as pd

ROW_INDEX_NAME = "row"


def selection_to_frame(
    entries: Sequence[tuple[int, Sequence]],
    columns: Sequence | None = None,
) -> pd.DataFrame:
    """Build a DataFrame from ``(row_index, snapshot)`` pairs.

    Rows keep selection order; the index holds the 0-based row indices.
    Without ``columns`` the frame gets positional column labels.
    """
    index = pd.Index([r for r, _ in entries], name=ROW_INDEX_NAME, dtype="int64")
    values = [list(v) for _, v in entries]
    if columns is not None:
        columns = list(columns)
        bad = [r for r, v in entries if len(v) != len(columns)]
        if bad:
            raise ValueError(
                f"Snapshots for rows {bad[:5]} do not match the "
                f"{len(columns)} column labels given. Columns were probably "
                f"hidden or shown after those rows were selected."
            )
    if not values:
        return pd.DataFrame(index=index, columns=columns)
    return pd.DataFrame(values, index=index, columns=columns)


def labelled_selection_frame(
    entries: Sequence[tuple[int, Sequence]],
    entry_columns: Mapping[int, Sequence[int]],
    labels: Sequence,
) -> pd.DataFrame:
    """Build a DataFrame whose columns follow the grid columns each row was read from.

    ``entry_columns`` maps a row index to the grid column indices of its
    snapshot, so rows captured under different column visibility still
    land under the right labels. Cells a row did not capture are NaN.
    Indices past the end of ``labels`` keep their position as label.
    """
    labels = list(labels)

    def label(col: int):
        return labels[col] if col < len(labels) else col

    index = pd.Index([r for r, _ in entries], name=ROW_INDEX_NAME, dtype="int64")
    used = sorted({c for r, _ in entries for c in entry_columns[r]})
    records = []
    for row_index, values in entries:
        cols = entry_columns[row_index]
        if len(cols) != len(values):
            raise ValueError(
                f"Snapshot for row {row_index} has {len(values)} values but "
                f"{len(cols)} column indices."
            )
        records.append({label(c): v for c, v in zip(cols, values)})
    return pd.DataFrame(records, index=index, columns=[label(c) for c in used])


class SelectionExporter:
    """Write the selected rows of a grid to disk."""

    @staticmethod
    def export_csv(
        path: str | pathlib.Path,
        entries: Sequence[tuple[int, Sequence]],
        columns: Sequence | None = None,
    ) -> pathlib.Path:
        """Write ``entries`` as CSV (row index in the first column)."""
        path = pathlib.Path(path)
        selection_to_frame(entries, columns=columns).to_csv(path)
        return path
