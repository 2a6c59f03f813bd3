"""Selection state and the per-session engine."""

from .engine import SelectionEngine
from .selection_set import SelectionResult, SelectionSet

__all__ = ["SelectionEngine", "SelectionResult", "SelectionSet"]
