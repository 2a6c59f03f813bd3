"""grid-rowselect: checkbox row selection engine for grid widgets."""

import logging

from ._version import __version__
from .core import (
    CheckboxPosition,
    ColumnPolicy,
    ConfigResolver,
    ConfigurationError,
    DataCapture,
    GridCollaborators,
    MissingCollaboratorError,
    RangeError,
    RangeExpander,
    ReentrantCommandError,
    RowSelectionError,
    SelectionConfig,
    expand,
)
from .grid import DataFrameGrid, create_spreadsheet_data
from .selection import SelectionEngine, SelectionResult, SelectionSet

logging.getLogger(__name__).addHandler(logging.NullHandler())


def row_selection(df, settings=True, hidden_rows=(), hidden_columns=()):
    """Enable row selection over a DataFrame in one call.

    Parameters
    ----------
    df : pd.DataFrame
        Grid contents, addressed by 0-based row/column positions.
    settings : True or dict
        Selection settings (``selectableRows``, ``multiselect``, ...).
    hidden_rows, hidden_columns : iterable of int
        Positions the host currently hides.

    Returns the configured ``SelectionEngine``.
    """
    grid = DataFrameGrid(df, hidden_rows=hidden_rows, hidden_columns=hidden_columns)
    engine = SelectionEngine(grid.collaborators())
    engine.configure(settings)
    return engine


__all__ = [
    "__version__",
    "row_selection",
    "CheckboxPosition",
    "ColumnPolicy",
    "ConfigResolver",
    "ConfigurationError",
    "DataCapture",
    "GridCollaborators",
    "MissingCollaboratorError",
    "RangeError",
    "RangeExpander",
    "ReentrantCommandError",
    "RowSelectionError",
    "SelectionConfig",
    "expand",
    "DataFrameGrid",
    "create_spreadsheet_data",
    "SelectionEngine",
    "SelectionResult",
    "SelectionSet",
]
