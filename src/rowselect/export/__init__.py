from .frame_export import (
    SelectionExporter,
    labelled_selection_frame,
    selection_to_frame,
)

__all__ = ["SelectionExporter", "labelled_selection_frame", "selection_to_frame"]
