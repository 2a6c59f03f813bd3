"""Read-only collaborator interfaces supplied by the host grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RowCountProvider(Protocol):
    def count_rows(self) -> int: ...


@runtime_checkable
class ColumnCountProvider(Protocol):
    def count_cols(self) -> int: ...


@runtime_checkable
class CellDataProvider(Protocol):
    def get_data_at_cell(self, row: int, col: int) -> Any: ...


@runtime_checkable
class RowDataProvider(Protocol):
    def get_data_at_row(self, row: int) -> Sequence[Any]: ...


@runtime_checkable
class HiddenIndexProvider(Protocol):
    """Answers whether a row (or column) index is currently hidden."""

    def is_hidden(self, index: int) -> bool: ...


HiddenRowsProvider = HiddenIndexProvider
HiddenColumnsProvider = HiddenIndexProvider


@dataclass(frozen=True)
class GridCollaborators:
    """Bundle of the host providers the selection engine reads from.

    ``hidden_rows`` / ``hidden_columns`` are optional: hosts without the
    corresponding hiding feature leave them as None.
    """

    rows: RowCountProvider
    cols: ColumnCountProvider
    cells: CellDataProvider
    row_data: RowDataProvider | None = None
    hidden_rows: HiddenIndexProvider | None = None
    hidden_columns: HiddenIndexProvider | None = None

    @classmethod
    def from_host(cls, host: Any) -> GridCollaborators:
        """Build from a single host object exposing the provider methods.

        The host must implement ``count_rows``, ``count_cols`` and
        ``get_data_at_cell``. ``get_data_at_row`` and the ``hidden_rows`` /
        ``hidden_columns`` attributes are picked up when present.
        """
        missing = [
            name for name in ("count_rows", "count_cols", "get_data_at_cell")
            if not callable(getattr(host, name, None))
        ]
        if missing:
            raise TypeError(
                f"{type(host).__name__} cannot act as a grid host; "
                f"missing methods: {missing}"
            )
        row_data = host if callable(getattr(host, "get_data_at_row", None)) else None
        return cls(
            rows=host,
            cols=host,
            cells=host,
            row_data=row_data,
            hidden_rows=getattr(host, "hidden_rows", None),
            hidden_columns=getattr(host, "hidden_columns", None),
        )
