"""Ordering of mixed folder/object listings.

Folders of any kind come first, ordered by display name without regard
to case, followed by object versions ordered the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from mfws_folders.vault.models import (
    FOLDER_ITEM_TYPES,
    FolderContentItem,
    MFFolderContentItemType,
)
from mfws_folders.vault.paths import display_name


def compare_item_types(x: MFFolderContentItemType | int, y: MFFolderContentItemType | int) -> int:
    """Compare two folder content item types for ordering purposes.

    Returns:
        0 when the types sort together, -1 when x sorts first, 1 when y does.
    """
    if x == y:
        return 0

    # Objects always at the end.
    if x == MFFolderContentItemType.ObjectVersion:
        return 1
    if x in FOLDER_ITEM_TYPES:
        return -1 if y == MFFolderContentItemType.ObjectVersion else 0
    return -1


def _ordinal_upper(name: str) -> str:
    """Upper-case one character at a time, leaving multi-character mappings alone."""
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in name)


def _compare_names(x: str | None, y: str | None) -> int:
    if x is None or y is None:
        return (x is not None) - (y is not None)
    x_key = _ordinal_upper(x)
    y_key = _ordinal_upper(y)
    return (x_key > y_key) - (x_key < y_key)


def compare_items(x: FolderContentItem | None, y: FolderContentItem | None) -> int:
    """Compare two folder content items for ordering purposes.

    None sorts after everything else. Items are grouped by type first
    (see compare_item_types) and then ordered by display name, ignoring case.

    Returns:
        0 when equal, -1 when x sorts first, 1 when y does.
    """
    if x is None and y is None:
        return 0
    if x is None:
        return 1
    if y is None:
        return -1

    type_compare = compare_item_types(x.folder_content_item_type, y.folder_content_item_type)
    if type_compare != 0:
        return type_compare

    return _compare_names(display_name(x), display_name(y))


folder_content_item_key = cmp_to_key(compare_items)


def sort_items(items: Iterable[FolderContentItem | None]) -> list[FolderContentItem | None]:
    """Return the items in listing order; the sort is stable."""
    return sorted(items, key=folder_content_item_key)
