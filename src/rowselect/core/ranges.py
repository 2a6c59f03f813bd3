"""RangeExpander: compact row range notation -> explicit row indices.

All indices are 0-based. A token is either a bare integer or an inclusive
``[start, stop]`` pair.
"""

from __future__ import annotations

import numbers
from typing import Iterable, Sequence

from .errors import RangeError


def _as_index(value: object, token: object) -> int:
    # bool is an Integral subclass but never a row index
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise RangeError(
            f"Row indices must be integers, got {type(value).__name__} "
            f"in token {token!r}."
        )
    value = int(value)
    if value < 0:
        raise RangeError(
            f"Row indices are 0-based and must be non-negative, got {value} "
            f"in token {token!r}."
        )
    return value


class RangeExpander:
    """Expand ``[3, [5, 8], 12]``-style row lists.

    Duplicates are preserved, because the order in which the view
    enumerates rows may depend on them. Use ``unique`` when a set-like
    result is needed.
    """

    @staticmethod
    def expand(entries: Iterable[int | Sequence[int]]) -> list[int]:
        """Return every row index named by ``entries``, in order.

        Raises
        ------
        RangeError
            For a reversed pair, a negative bound, a non-integer token or a
            sequence that is not exactly two items long.
        """
        if isinstance(entries, (str, bytes)):
            raise RangeError(
                f"Expected a list of row indices or [start, stop] pairs, "
                f"got {type(entries).__name__}."
            )
        result: list[int] = []
        for token in entries:
            if isinstance(token, (list, tuple)):
                if len(token) != 2:
                    raise RangeError(
                        f"Range tokens must be [start, stop] pairs, got {token!r}."
                    )
                start = _as_index(token[0], token)
                stop = _as_index(token[1], token)
                if start > stop:
                    raise RangeError(
                        f"Range start {start} is greater than stop {stop}. "
                        f"Write the range as [{stop}, {start}]."
                    )
                result.extend(range(start, stop + 1))
            else:
                result.append(_as_index(token, token))
        return result

    @staticmethod
    def unique(indices: Iterable[int]) -> list[int]:
        """Drop repeated indices, keeping first occurrences in order."""
        return list(dict.fromkeys(indices))


def expand(entries: Iterable[int | Sequence[int]]) -> list[int]:
    """Shorthand for ``RangeExpander.expand``."""
    return RangeExpander.expand(entries)
