"""Exception types raised while configuring or driving row selection.

Per-row rejections (not selectable, capacity reached) are never raised;
they come back as ``SelectionResult`` values.
"""

from __future__ import annotations


class RowSelectionError(Exception):
    """Base class for all row-selection errors."""


class ConfigurationError(RowSelectionError, ValueError):
    """Raw selection settings have an unsupported shape or value."""


class RangeError(ConfigurationError):
    """A row range token is malformed, reversed or negative."""


class MissingCollaboratorError(ConfigurationError):
    """A hidden row/column policy was requested without its provider.

    Callers may abort configuration or retry with the policy downgraded
    (see ``ConfigResolver.downgrade_missing_policies``).
    """

    def __init__(self, option: str, collaborator: str) -> None:
        self.option = option
        self.collaborator = collaborator
        super().__init__(
            f"'{option}' requires a {collaborator} provider, but none was "
            f"supplied. Pass one in GridCollaborators or set '{option}' "
            f"to false."
        )


class ReentrantCommandError(RowSelectionError, RuntimeError):
    """A selection command was invoked from inside another command."""
