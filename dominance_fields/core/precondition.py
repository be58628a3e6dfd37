"""
Argument checks shared by fields, factories and the parser.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

from .errors import NullArgumentError

T = TypeVar("T")


def not_null(value: Optional[T], message: str) -> T:
    """Return value unchanged, or raise NullArgumentError if it is None."""
    if value is None:
        raise NullArgumentError(message)
    return value


def not_null_with_contents(values: Optional[Iterable[T]], message: str, item_message: str) -> tuple:
    """
    Check a collection and each of its items for None.

    item_message may contain ``{index}``, replaced by the position of the
    first None item.
    """
    items = tuple(not_null(values, message))
    for index, item in enumerate(items):
        if item is None:
            raise NullArgumentError(item_message.format(index=index))
    return items
