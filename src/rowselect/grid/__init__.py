"""pandas-backed grid host."""

from .frame_grid import DataFrameGrid, HiddenIndexSet, create_spreadsheet_data

__all__ = ["DataFrameGrid", "HiddenIndexSet", "create_spreadsheet_data"]
