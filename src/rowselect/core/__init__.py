"""Configuration, range expansion, capture and provider interfaces."""

from .capture import ColumnPolicy, DataCapture, RowSnapshot
from .config import CheckboxPosition, ConfigResolver, SelectionConfig
from .errors import (
    ConfigurationError,
    MissingCollaboratorError,
    RangeError,
    ReentrantCommandError,
    RowSelectionError,
)
from .providers import GridCollaborators
from .ranges import RangeExpander, expand

__all__ = [
    "ColumnPolicy",
    "DataCapture",
    "RowSnapshot",
    "CheckboxPosition",
    "ConfigResolver",
    "SelectionConfig",
    "ConfigurationError",
    "MissingCollaboratorError",
    "RangeError",
    "ReentrantCommandError",
    "RowSelectionError",
    "GridCollaborators",
    "RangeExpander",
    "expand",
]
