"""Display names and MFWS path segments for folder content items.

Path tokens follow the MFWS view path syntax: a ``/``-joined,
trailing-slash-terminated sequence of single-character prefixed tokens
(``v<view id>``, ``y<item id>``, ``<data type prefix><value>``).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any
from urllib.parse import unquote_plus

from mfws_folders.vault.models import (
    FolderContentItem,
    MFDataType,
    MFFolderContentItemType,
    PropertyFolder,
)

logger = logging.getLogger(__name__)

DEFAULT_VIEWS_RESOURCE = "/REST/views/"
DEFAULT_ITEMS_RESOURCE = "items"

VIEW_PREFIX = "v"
TRADITIONAL_FOLDER_PREFIX = "y"

# Property folder prefixes by data type. Data types missing here cannot be encoded.
DATA_TYPE_PREFIXES: dict[MFDataType, str] = {
    MFDataType.Text: "T",
    MFDataType.MultiLineText: "M",
    MFDataType.Integer: "I",
    MFDataType.Integer64: "J",
    MFDataType.Floating: "R",
    MFDataType.Date: "D",
    MFDataType.Time: "C",
    MFDataType.FILETIME: "E",
    MFDataType.Lookup: "L",
    MFDataType.MultiSelectLookup: "S",
    MFDataType.Uninitialized: "-",
    MFDataType.ACL: "A",
    MFDataType.Boolean: "B",
}


def display_name(item: FolderContentItem | None) -> str:
    """Return the name of a folder content item for display.

    Args:
        item: The folder content item.

    Returns:
        The title or display value for the item's type, or an empty
        string for types without one.

    Raises:
        ValueError: If item is None.
    """
    if item is None:
        raise ValueError("item must not be None")

    item_type = item.folder_content_item_type
    if item_type == MFFolderContentItemType.ObjectVersion:
        return item.object_version.title  # type: ignore[union-attr]
    if item_type == MFFolderContentItemType.PropertyFolder:
        return item.property_folder.display_value  # type: ignore[union-attr]
    if item_type == MFFolderContentItemType.ViewFolder:
        return item.view.name  # type: ignore[union-attr]
    if item_type == MFFolderContentItemType.TraditionalFolder:
        return item.traditional_folder.display_value  # type: ignore[union-attr]
    return ""


def item_path(item: FolderContentItem | None) -> str | None:
    """Return the MFWS path token addressing a single folder content item.

    Args:
        item: The folder content item, or None.

    Returns:
        The path token (e.g. ``v12``, ``y3``, ``TInvoices``), an empty
        string for None, or None if the item cannot be addressed by path
        (objects, unknown types, property folders without an encodable value).
    """
    if item is None:
        return ""

    item_type = item.folder_content_item_type
    if item_type == MFFolderContentItemType.ViewFolder:
        return f"{VIEW_PREFIX}{item.view.id}"  # type: ignore[union-attr]
    if item_type == MFFolderContentItemType.TraditionalFolder:
        return f"{TRADITIONAL_FOLDER_PREFIX}{item.traditional_folder.item}"  # type: ignore[union-attr]
    if item_type == MFFolderContentItemType.PropertyFolder:
        return _property_folder_path(item.property_folder)  # type: ignore[arg-type]
    return None


def _property_folder_path(folder: PropertyFolder) -> str | None:
    """Encode a property folder as ``<prefix><value>``."""
    prefix = DATA_TYPE_PREFIXES.get(folder.data_type)  # type: ignore[call-overload]
    suffix = None if folder.value is None else _format_value(folder.value)
    if folder.data_type == MFDataType.Lookup:
        suffix = str(folder.lookup.item if folder.lookup is not None else 0)
    elif folder.data_type == MFDataType.MultiSelectLookup:
        suffix = ",".join(str(lookup.item) for lookup in folder.lookups or ())

    if prefix is None or suffix is None:
        logger.debug(
            "[item_path] property folder cannot be encoded; data_type:%s;has_value:%s",
            folder.data_type,
            suffix is not None,
        )
        return None

    # The value is form-decoded once; the HTTP layer escapes it again on the way out.
    return f"{prefix}{unquote_plus(suffix)}"


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    """Format a float the way the server formats doubles.

    Shortest round-trip digits with the invariant culture: no trailing
    ``.0``, and scientific notation (``1E+20``, ``1E-05``) when the decimal
    exponent is 15 or more, or below -4.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    sign_text = "-" if sign else ""
    digits = "".join(str(d) for d in digit_tuple)
    if digits == "0":
        return f"{sign_text}0"

    # Digits before the decimal point.
    point = len(digits) + int(exponent)
    scientific_exponent = point - 1
    if scientific_exponent >= 15 or scientific_exponent < -4:
        mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        exponent_sign = "+" if scientific_exponent >= 0 else "-"
        return f"{sign_text}{mantissa}E{exponent_sign}{abs(scientific_exponent):02d}"
    if point <= 0:
        return f"{sign_text}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign_text}{digits}{'0' * (point - len(digits))}"
    return f"{sign_text}{digits[:point]}.{digits[point:]}"


def items_path(items: Sequence[FolderContentItem | None] | None) -> str:
    """Return the MFWS view path for a sequence of folder content items.

    Items that cannot be encoded are skipped; the remaining tokens keep
    their input order.

    Args:
        items: The items from the outermost view/folder inwards.

    Returns:
        The ``/``-joined tokens followed by a trailing ``/``, or an empty
        string when items is None or empty.
    """
    if not items:
        return ""

    segments = [item_path(item) for item in items]
    return "/".join(s for s in segments if s is not None and s.strip()) + "/"


def items_resource_path(
    items: Sequence[FolderContentItem | None] | None,
    views_resource: str = DEFAULT_VIEWS_RESOURCE,
    items_resource: str = DEFAULT_ITEMS_RESOURCE,
) -> str:
    """Return the request path for listing the contents at a view location.

    ``[view(5), traditional(9)]`` maps to ``/REST/views/v5/y9/items``; an
    empty location maps to the view root, ``/REST/views/items``.

    Args:
        items: The items making up the location.
        views_resource: Path of the MFWS views resource, with trailing ``/``.
        items_resource: Name of the items sub-resource.

    Returns:
        The path portion of the folder-listing request URL.
    """
    path = items_path(items)
    if path == "/":
        path = ""
    return f"{views_resource}{path}{items_resource}"
