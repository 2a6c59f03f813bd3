"""Input validation for the DataFrame-backed grid host."""

from __future__ import annotations

import numbers
from typing import Any, Iterable

import pandas as pd


def validate_grid_frame(data: Any) -> pd.DataFrame:
    """Validate that data is a DataFrame usable as grid contents.

    Returns the validated DataFrame (unchanged). Values may be of any
    dtype; rows and columns are addressed by position.
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}. "
            "Wrap your data with pd.DataFrame(rows, columns=labels)."
        )
    if data.columns.has_duplicates:
        dupes = data.columns[data.columns.duplicated()].unique().tolist()
        raise ValueError(
            f"Column labels must be unique. Found duplicates: {dupes[:5]}"
            + (f" (and {len(dupes) - 5} more)" if len(dupes) > 5 else "")
        )
    return data


def validate_hidden_indices(
    indices: Iterable[Any],
    size: int,
    axis_name: str,
) -> set[int]:
    """Validate hidden row/column positions against the grid size.

    Parameters
    ----------
    indices : 0-based positions to hide
    size : number of rows or columns on that axis
    axis_name : 'row' or 'column' for error messages
    """
    result: set[int] = set()
    bad: list = []
    for idx in indices:
        if isinstance(idx, bool) or not isinstance(idx, numbers.Integral):
            raise TypeError(
                f"Hidden {axis_name} positions must be integers, "
                f"got {type(idx).__name__} {idx!r}."
            )
        if not 0 <= idx < size:
            bad.append(int(idx))
        else:
            result.add(int(idx))
    if bad:
        raise ValueError(
            f"Hidden {axis_name} positions out of range 0..{size - 1}: {bad[:5]}"
            + (f" (and {len(bad) - 5} more)" if len(bad) > 5 else "")
        )
    return result
