"""SelectionConfig and ConfigResolver: raw settings -> immutable config.

Accepted settings::

    True
    {
        "checkboxPosition": "before" | "after" | "replace",
        "selectableRows": [3, [5, 8], ...],
        "multiselect": True | False | int,
        "selectHiddenRows": bool,
        "selectHiddenColumns": bool,
        "isRowSelectable": callable(row_index) -> bool,
        "initiallySelectedRows": [0, [2, 4], ...],
    }
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Callable

from .capture import ColumnPolicy
from .errors import ConfigurationError, MissingCollaboratorError
from .providers import GridCollaborators
from .ranges import RangeExpander

logger = logging.getLogger(__name__)

KNOWN_KEYS = frozenset({
    "checkboxPosition",
    "selectableRows",
    "multiselect",
    "selectHiddenRows",
    "selectHiddenColumns",
    "isRowSelectable",
    "initiallySelectedRows",
})


class CheckboxPosition(Enum):
    """Where the view puts the checkbox relative to the row header."""

    REPLACE = "replace"
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class SelectionConfig:
    """Normalized selection settings for one enable/disable session.

    ``selectable_rows`` None means every row is selectable;
    ``max_simultaneous_selected`` None means unbounded.
    """

    checkbox_position: CheckboxPosition = CheckboxPosition.REPLACE
    selectable_rows: tuple[int, ...] | None = None
    max_simultaneous_selected: int | None = None
    select_hidden_rows: bool = False
    select_hidden_columns: bool = False
    is_row_selectable: Callable[[int], bool] | None = None
    initially_selected_rows: tuple[int, ...] = ()

    @property
    def column_policy(self) -> ColumnPolicy:
        # selectHiddenColumns=True turns on hidden-column filtering of snapshots
        if self.select_hidden_columns:
            return ColumnPolicy.EXCLUDE_HIDDEN
        return ColumnPolicy.INCLUDE_HIDDEN

    @property
    def unbounded(self) -> bool:
        return self.max_simultaneous_selected is None

    @cached_property
    def selectable_row_set(self) -> frozenset[int] | None:
        if self.selectable_rows is None:
            return None
        return frozenset(self.selectable_rows)

    def is_selectable(self, row_index: int) -> bool:
        """True if ``row_index`` passes the configured selectable subset."""
        rows = self.selectable_row_set
        return rows is None or row_index in rows


def _read_bool(settings: Mapping, key: str) -> bool:
    value = settings.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"'{key}' must be true or false, got {type(value).__name__} {value!r}."
        )
    return value


def _read_rows(settings: Mapping, key: str) -> list[int] | None:
    value = settings.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(
            f"'{key}' must be a list of row indices or [start, stop] pairs, "
            f"got {type(value).__name__}."
        )
    return RangeExpander.unique(RangeExpander.expand(value))


def _read_position(settings: Mapping) -> CheckboxPosition:
    value = settings.get("checkboxPosition", CheckboxPosition.REPLACE.value)
    if isinstance(value, CheckboxPosition):
        return value
    try:
        return CheckboxPosition(value)
    except ValueError:
        valid = [p.value for p in CheckboxPosition]
        raise ConfigurationError(
            f"Unknown checkboxPosition {value!r}. Use one of {valid}."
        ) from None


def _read_multiselect(
    settings: Mapping, collaborators: GridCollaborators | None
) -> int | None:
    if "multiselect" not in settings:
        return None
    value = settings["multiselect"]
    if value is True:
        if collaborators is None:
            raise MissingCollaboratorError("multiselect", "row count")
        # an empty grid still yields a positive cap
        return max(1, int(collaborators.rows.count_rows()))
    if value is False:
        return 1
    if isinstance(value, numbers.Integral):
        if value < 1:
            raise ConfigurationError(
                f"'multiselect' must be at least 1, got {value}."
            )
        return int(value)
    raise ConfigurationError(
        f"'multiselect' must be true, false or a positive integer, "
        f"got {type(value).__name__} {value!r}."
    )


class ConfigResolver:
    """Turn loosely-typed plugin settings into a ``SelectionConfig``."""

    @staticmethod
    def resolve(
        raw_settings: Any,
        collaborators: GridCollaborators | None = None,
    ) -> SelectionConfig:
        """Validate ``raw_settings`` and build a fresh ``SelectionConfig``.

        Raises
        ------
        ConfigurationError
            If the settings are neither ``True`` nor a mapping, or a field
            has the wrong type or value.
        RangeError
            If ``selectableRows`` / ``initiallySelectedRows`` contain an
            invalid range token.
        MissingCollaboratorError
            If a hidden row/column policy is requested but the host did
            not supply the matching provider.
        """
        if raw_settings is True:
            return SelectionConfig()
        if not isinstance(raw_settings, Mapping):
            raise ConfigurationError(
                f"Selection settings must be true or an object, "
                f"got {type(raw_settings).__name__} {raw_settings!r}."
            )

        unknown = sorted(str(k) for k in raw_settings if k not in KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown selection settings: %s", unknown)

        select_hidden_rows = _read_bool(raw_settings, "selectHiddenRows")
        select_hidden_columns = _read_bool(raw_settings, "selectHiddenColumns")
        if select_hidden_rows and (
            collaborators is None or collaborators.hidden_rows is None
        ):
            raise MissingCollaboratorError("selectHiddenRows", "hidden rows")
        if select_hidden_columns and (
            collaborators is None or collaborators.hidden_columns is None
        ):
            raise MissingCollaboratorError("selectHiddenColumns", "hidden columns")

        predicate = raw_settings.get("isRowSelectable")
        if predicate is not None and not callable(predicate):
            raise ConfigurationError(
                f"'isRowSelectable' must be callable, got {type(predicate).__name__}."
            )

        selectable = _read_rows(raw_settings, "selectableRows")
        initial = _read_rows(raw_settings, "initiallySelectedRows") or []

        config = SelectionConfig(
            checkbox_position=_read_position(raw_settings),
            selectable_rows=tuple(selectable) if selectable is not None else None,
            max_simultaneous_selected=_read_multiselect(raw_settings, collaborators),
            select_hidden_rows=select_hidden_rows,
            select_hidden_columns=select_hidden_columns,
            is_row_selectable=predicate,
            initially_selected_rows=tuple(initial),
        )
        logger.debug("Resolved selection config: %s", config)
        return config

    @staticmethod
    def downgrade_missing_policies(
        raw_settings: Any,
        collaborators: GridCollaborators | None,
    ) -> Any:
        """Return settings with unsupported hidden policies turned off.

        Use this instead of failing when the host lacks a hidden-rows or
        hidden-columns feature. Non-mapping settings are returned as-is.
        """
        if not isinstance(raw_settings, Mapping):
            return raw_settings
        settings = dict(raw_settings)
        checks = (
            ("selectHiddenRows", "hidden_rows"),
            ("selectHiddenColumns", "hidden_columns"),
        )
        for key, attr in checks:
            provider = getattr(collaborators, attr, None) if collaborators else None
            if settings.get(key) is True and provider is None:
                logger.warning("Downgrading '%s' to false: no %s provider", key, attr)
                settings[key] = False
        return settings
