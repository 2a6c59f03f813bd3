"""Shared test fixtures for grid-rowselect."""

import pytest

from rowselect.grid.frame_grid import DataFrameGrid, create_spreadsheet_data
from rowselect.selection.engine import SelectionEngine


@pytest.fixture
def spreadsheet_df():
    """10x10 grid, cells 'A0'..'J9' (column letter + 0-based row)."""
    return create_spreadsheet_data(10, 10)


@pytest.fixture
def grid(spreadsheet_df):
    return DataFrameGrid(spreadsheet_df)


@pytest.fixture
def collaborators(grid):
    return grid.collaborators()


@pytest.fixture
def hidden_grid(spreadsheet_df):
    """10x10 grid with rows 3, 4 and columns 3, 4 hidden."""
    return DataFrameGrid(spreadsheet_df, hidden_rows=[3, 4], hidden_columns=[3, 4])


@pytest.fixture
def make_engine(grid):
    """Factory: configured SelectionEngine over ``grid`` (or another grid)."""

    def _make(settings=True, host=None):
        host = host or grid
        engine = SelectionEngine(host.collaborators())
        engine.configure(settings)
        return engine

    return _make
