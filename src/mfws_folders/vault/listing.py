"""Parsing of MFWS folder listing JSON into folder content items."""

from __future__ import annotations

import logging
from typing import Any

from mfws_folders.vault.models import (
    FIELD_DATA_TYPE,
    FIELD_DISPLAY_VALUE,
    FIELD_FOLDER_CONTENT_ITEM_TYPE,
    FIELD_ID,
    FIELD_ITEM,
    FIELD_ITEMS,
    FIELD_LOOKUP,
    FIELD_LOOKUPS,
    FIELD_MORE_RESULTS,
    FIELD_NAME,
    FIELD_OBJECT_VERSION,
    FIELD_PROPERTY_FOLDER,
    FIELD_TITLE,
    FIELD_TRADITIONAL_FOLDER,
    FIELD_VALUE,
    FIELD_VIEW,
    FolderContentItem,
    FolderContentListing,
    InvalidFolderContentItemError,
    Lookup,
    MFDataType,
    MFFolderContentItemType,
    ObjectVersion,
    PropertyFolder,
    TraditionalFolder,
    View,
)

logger = logging.getLogger(__name__)


def parse_folder_content_items(raw: dict[str, Any]) -> FolderContentListing:
    """Map an MFWS ``FolderContentItems`` response to a FolderContentListing.

    Args:
        raw: Parsed JSON body of a ``/views/{path}items`` response.

    Returns:
        FolderContentListing with the parsed items in server order.

    Raises:
        InvalidFolderContentItemError: If the response or any item is malformed.
    """
    if not isinstance(raw, dict):
        raise InvalidFolderContentItemError(
            f"folder content items must be an object, got {type(raw).__name__}"
        )
    entries = raw.get(FIELD_ITEMS) or []
    if not isinstance(entries, list):
        raise InvalidFolderContentItemError(
            f"{FIELD_ITEMS} must be a list, got {type(entries).__name__}"
        )

    listing = FolderContentListing(
        items=[parse_folder_content_item(entry) for entry in entries],
        more_results=bool(raw.get(FIELD_MORE_RESULTS, False)),
    )
    logger.debug(
        "[parse_folder_content_items] parsed listing; item_count:%d;more_results:%s",
        len(listing.items),
        listing.more_results,
    )
    return listing


def parse_folder_content_item(raw: dict[str, Any]) -> FolderContentItem:
    """Map a raw MFWS ``FolderContentItem`` dict to a FolderContentItem.

    Unrecognised item types are kept with no payload so that callers can
    still display and order them.

    Raises:
        InvalidFolderContentItemError: If raw is not an object, the payload
            for its type is missing, or a payload field has the wrong type.
    """
    if not isinstance(raw, dict):
        raise InvalidFolderContentItemError(
            f"folder content item must be an object, got {type(raw).__name__}"
        )

    item_type = _parse_item_type(raw.get(FIELD_FOLDER_CONTENT_ITEM_TYPE))
    if item_type == MFFolderContentItemType.ObjectVersion:
        return FolderContentItem.for_object_version(
            _parse_object_version(_payload(raw, FIELD_OBJECT_VERSION))
        )
    if item_type == MFFolderContentItemType.PropertyFolder:
        return FolderContentItem.for_property_folder(
            _parse_property_folder(_payload(raw, FIELD_PROPERTY_FOLDER))
        )
    if item_type == MFFolderContentItemType.ViewFolder:
        return FolderContentItem.for_view(_parse_view(_payload(raw, FIELD_VIEW)))
    if item_type == MFFolderContentItemType.TraditionalFolder:
        return FolderContentItem.for_traditional_folder(
            _parse_traditional_folder(_payload(raw, FIELD_TRADITIONAL_FOLDER))
        )
    return FolderContentItem(item_type)


# ------------------------------------------------------------------
# Private helpers
# ------------------------------------------------------------------


def _payload(raw: dict[str, Any], field_name: str) -> dict[str, Any]:
    payload = raw.get(field_name)
    if not isinstance(payload, dict):
        raise InvalidFolderContentItemError(
            f"{raw.get(FIELD_FOLDER_CONTENT_ITEM_TYPE)!r} item is missing its {field_name} object"
        )
    return payload


def _int_field(raw: dict[str, Any], field_name: str) -> int:
    value = raw.get(field_name, 0)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidFolderContentItemError(f"{field_name} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidFolderContentItemError(
            f"{field_name} must be an integer, got {value!r}"
        ) from exc


def _str_field(raw: dict[str, Any], field_name: str) -> str:
    value = raw.get(field_name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidFolderContentItemError(f"{field_name} must be a string, got {value!r}")
    return value


def _parse_item_type(value: Any) -> MFFolderContentItemType | int:
    try:
        return MFFolderContentItemType(value)
    except ValueError:
        logger.warning("[parse_folder_content_item] unknown item type; value:%s", value)
        return value if isinstance(value, int) else MFFolderContentItemType.Unknown


def _parse_data_type(value: Any) -> MFDataType | int:
    try:
        return MFDataType(value)
    except ValueError:
        logger.warning("[parse_folder_content_item] unknown data type; value:%s", value)
        return value if isinstance(value, int) else MFDataType.Uninitialized


def _parse_lookup(raw: Any, field_name: str) -> Lookup:
    if not isinstance(raw, dict):
        raise InvalidFolderContentItemError(f"{field_name} must be an object, got {raw!r}")
    return Lookup(item=_int_field(raw, FIELD_ITEM))


def _parse_lookups(raw: Any) -> tuple[Lookup, ...] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise InvalidFolderContentItemError(f"{FIELD_LOOKUPS} must be a list, got {raw!r}")
    return tuple(_parse_lookup(entry, FIELD_LOOKUPS) for entry in raw)


def _parse_object_version(raw: dict[str, Any]) -> ObjectVersion:
    return ObjectVersion(title=_str_field(raw, FIELD_TITLE))


def _parse_property_folder(raw: dict[str, Any]) -> PropertyFolder:
    """Map an MFWS ``TypedValue`` to a PropertyFolder."""
    lookup = raw.get(FIELD_LOOKUP)
    return PropertyFolder(
        data_type=_parse_data_type(raw.get(FIELD_DATA_TYPE, MFDataType.Uninitialized)),
        display_value=_str_field(raw, FIELD_DISPLAY_VALUE),
        value=raw.get(FIELD_VALUE),
        lookup=None if lookup is None else _parse_lookup(lookup, FIELD_LOOKUP),
        lookups=_parse_lookups(raw.get(FIELD_LOOKUPS)),
    )


def _parse_view(raw: dict[str, Any]) -> View:
    return View(id=_int_field(raw, FIELD_ID), name=_str_field(raw, FIELD_NAME))


def _parse_traditional_folder(raw: dict[str, Any]) -> TraditionalFolder:
    return TraditionalFolder(
        item=_int_field(raw, FIELD_ITEM),
        display_value=_str_field(raw, FIELD_DISPLAY_VALUE),
    )
