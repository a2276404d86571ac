"""Data models for M-Files Web Service folder content items."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# MFWS JSON field names
FIELD_FOLDER_CONTENT_ITEM_TYPE = "FolderContentItemType"
FIELD_OBJECT_VERSION = "ObjectVersion"
FIELD_PROPERTY_FOLDER = "PropertyFolder"
FIELD_VIEW = "View"
FIELD_TRADITIONAL_FOLDER = "TraditionalFolder"
FIELD_TITLE = "Title"
FIELD_ID = "ID"
FIELD_NAME = "Name"
FIELD_DATA_TYPE = "DataType"
FIELD_DISPLAY_VALUE = "DisplayValue"
FIELD_VALUE = "Value"
FIELD_LOOKUP = "Lookup"
FIELD_LOOKUPS = "Lookups"
FIELD_ITEM = "Item"

# FolderContentItems response keys
FIELD_ITEMS = "Items"
FIELD_MORE_RESULTS = "MoreResults"


class InvalidFolderContentItemError(ValueError):
    """Raised when a folder content item's payload does not match its type."""


class MFFolderContentItemType(IntEnum):
    """Discriminant of a folder content item, using the MFWS wire values."""

    Unknown = 0
    ViewFolder = 1
    PropertyFolder = 2
    TraditionalFolder = 3
    ObjectVersion = 4
    ExternalViewFolder = 5


class MFDataType(IntEnum):
    """Kind of value held by a property, using the MFWS wire values."""

    Uninitialized = 0
    Text = 1
    Integer = 2
    Floating = 3
    Date = 5
    Time = 6
    Timestamp = 7
    Boolean = 8
    Lookup = 9
    MultiSelectLookup = 10
    Integer64 = 11
    FILETIME = 12
    MultiLineText = 13
    ACL = 14


FOLDER_ITEM_TYPES = frozenset(
    {
        MFFolderContentItemType.PropertyFolder,
        MFFolderContentItemType.TraditionalFolder,
        MFFolderContentItemType.ViewFolder,
    }
)


@dataclass(frozen=True)
class Lookup:
    """Reference to another vault item, identified by its numeric id."""

    item: int


@dataclass(frozen=True)
class ObjectVersion:
    """A single object version entry in a listing."""

    title: str


@dataclass(frozen=True)
class PropertyFolder:
    """A virtual folder grouping objects by one property value.

    ``value`` is the raw typed value reported by the server. For lookup
    data types the identity lives in ``lookup`` / ``lookups`` instead.
    """

    data_type: MFDataType | int
    display_value: str = ""
    value: Any = None
    lookup: Lookup | None = None
    lookups: tuple[Lookup, ...] | None = None


@dataclass(frozen=True)
class View:
    """A saved view, identified by its numeric id."""

    id: int
    name: str = ""


@dataclass(frozen=True)
class TraditionalFolder:
    """A value-list backed traditional folder."""

    item: int
    display_value: str = ""


_PAYLOAD_FIELDS: dict[MFFolderContentItemType, str] = {
    MFFolderContentItemType.ObjectVersion: "object_version",
    MFFolderContentItemType.PropertyFolder: "property_folder",
    MFFolderContentItemType.ViewFolder: "view",
    MFFolderContentItemType.TraditionalFolder: "traditional_folder",
}


@dataclass(frozen=True)
class FolderContentItem:
    """One entry of a folder listing: an object or one of three folder kinds.

    Exactly the payload field matching ``folder_content_item_type`` is set;
    discriminants without a payload (``Unknown``, ``ExternalViewFolder`` or
    values this module does not know) carry none.
    """

    folder_content_item_type: MFFolderContentItemType | int
    object_version: ObjectVersion | None = None
    property_folder: PropertyFolder | None = None
    view: View | None = None
    traditional_folder: TraditionalFolder | None = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_FIELDS.get(self.folder_content_item_type)  # type: ignore[call-overload]
        for name in _PAYLOAD_FIELDS.values():
            populated = getattr(self, name) is not None
            if name == expected and not populated:
                raise InvalidFolderContentItemError(
                    f"{self.folder_content_item_type!r} item requires a {name} payload"
                )
            if name != expected and populated:
                raise InvalidFolderContentItemError(
                    f"{self.folder_content_item_type!r} item cannot carry a {name} payload"
                )

    @classmethod
    def for_object_version(cls, object_version: ObjectVersion) -> FolderContentItem:
        return cls(MFFolderContentItemType.ObjectVersion, object_version=object_version)

    @classmethod
    def for_property_folder(cls, property_folder: PropertyFolder) -> FolderContentItem:
        return cls(MFFolderContentItemType.PropertyFolder, property_folder=property_folder)

    @classmethod
    def for_view(cls, view: View) -> FolderContentItem:
        return cls(MFFolderContentItemType.ViewFolder, view=view)

    @classmethod
    def for_traditional_folder(cls, traditional_folder: TraditionalFolder) -> FolderContentItem:
        return cls(
            MFFolderContentItemType.TraditionalFolder,
            traditional_folder=traditional_folder,
        )


@dataclass
class FolderContentListing:
    """Represents one page of a view/folder listing returned by MFWS."""

    items: list[FolderContentItem] = field(default_factory=list)
    more_results: bool = False
