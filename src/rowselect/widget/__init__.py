"""View-layer bridge: JSON serializers and reactive state."""

from .serializers import serialize_selected_values, serialize_selection
from .view_state import RowSelectionViewState

__all__ = ["serialize_selected_values", "serialize_selection", "RowSelectionViewState"]
