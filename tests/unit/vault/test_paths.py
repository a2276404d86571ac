"""Unit tests for vault/paths.py — display names and MFWS path encoding."""

import pytest

from mfws_folders.vault.models import (
    FolderContentItem,
    Lookup,
    MFDataType,
    MFFolderContentItemType,
    ObjectVersion,
    PropertyFolder,
    TraditionalFolder,
    View,
)
from mfws_folders.vault.paths import display_name, item_path, items_path, items_resource_path

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _view(id: int = 5, name: str = "Documents") -> FolderContentItem:
    return FolderContentItem.for_view(View(id=id, name=name))


def _traditional(item: int = 42, display_value: str = "Customers") -> FolderContentItem:
    return FolderContentItem.for_traditional_folder(
        TraditionalFolder(item=item, display_value=display_value)
    )


def _object(title: str = "Invoice.pdf") -> FolderContentItem:
    return FolderContentItem.for_object_version(ObjectVersion(title=title))


def _property(
    data_type: MFDataType | int,
    value: object = None,
    display_value: str = "",
    lookup: Lookup | None = None,
    lookups: tuple[Lookup, ...] | None = None,
) -> FolderContentItem:
    return FolderContentItem.for_property_folder(
        PropertyFolder(
            data_type=data_type,
            display_value=display_value,
            value=value,
            lookup=lookup,
            lookups=lookups,
        )
    )


# ---------------------------------------------------------------------------
# display_name tests
# ---------------------------------------------------------------------------


class TestDisplayName:
    def test_raises_value_error_for_none(self) -> None:
        with pytest.raises(ValueError):
            display_name(None)

    def test_object_version_uses_title(self) -> None:
        assert display_name(_object("Contract.docx")) == "Contract.docx"

    def test_property_folder_uses_display_value(self) -> None:
        item = _property(MFDataType.Text, value="ACME", display_value="ACME Corp")
        assert display_name(item) == "ACME Corp"

    def test_view_folder_uses_view_name(self) -> None:
        assert display_name(_view(name="By Customer")) == "By Customer"

    def test_traditional_folder_uses_display_value(self) -> None:
        assert display_name(_traditional(display_value="Archive")) == "Archive"

    def test_unknown_type_returns_empty_string(self) -> None:
        assert display_name(FolderContentItem(MFFolderContentItemType.Unknown)) == ""

    def test_unlisted_type_value_returns_empty_string(self) -> None:
        assert display_name(FolderContentItem(99)) == ""


# ---------------------------------------------------------------------------
# item_path tests
# ---------------------------------------------------------------------------


class TestItemPath:
    def test_none_returns_empty_string(self) -> None:
        assert item_path(None) == ""

    def test_view_folder(self) -> None:
        assert item_path(_view(id=5)) == "v5"

    def test_traditional_folder(self) -> None:
        assert item_path(_traditional(item=42)) == "y42"

    def test_object_version_cannot_be_encoded(self) -> None:
        assert item_path(_object()) is None

    def test_unknown_type_cannot_be_encoded(self) -> None:
        assert item_path(FolderContentItem(MFFolderContentItemType.ExternalViewFolder)) is None

    @pytest.mark.parametrize(
        ("data_type", "value", "expected"),
        [
            (MFDataType.Text, "Invoices", "TInvoices"),
            (MFDataType.MultiLineText, "notes", "Mnotes"),
            (MFDataType.Integer, 7, "I7"),
            (MFDataType.Integer64, 9000000000, "J9000000000"),
            (MFDataType.Floating, 1.5, "R1.5"),
            (MFDataType.Date, "2024-01-31", "D2024-01-31"),
            (MFDataType.Time, "13:45:00", "C13:45:00"),
            (MFDataType.FILETIME, "2024-01-31T13:45:00Z", "E2024-01-31T13:45:00Z"),
            (MFDataType.Uninitialized, "", "-"),
            (MFDataType.ACL, "1", "A1"),
            (MFDataType.Boolean, True, "BTrue"),
        ],
    )
    def test_property_folder_prefixes(
        self, data_type: MFDataType, value: object, expected: str
    ) -> None:
        assert item_path(_property(data_type, value=value)) == expected

    def test_lookup_uses_lookup_item_and_ignores_value(self) -> None:
        item = _property(MFDataType.Lookup, value="ignored", lookup=Lookup(item=12))
        assert item_path(item) == "L12"

    def test_lookup_without_lookup_uses_zero(self) -> None:
        assert item_path(_property(MFDataType.Lookup)) == "L0"

    def test_multi_select_lookup_joins_items_in_order(self) -> None:
        item = _property(
            MFDataType.MultiSelectLookup,
            lookups=(Lookup(item=1), Lookup(item=2)),
        )
        assert item_path(item) == "S1,2"

    def test_multi_select_lookup_keeps_input_order(self) -> None:
        item = _property(
            MFDataType.MultiSelectLookup,
            lookups=(Lookup(item=30), Lookup(item=4), Lookup(item=17)),
        )
        assert item_path(item) == "S30,4,17"

    def test_multi_select_lookup_without_lookups(self) -> None:
        assert item_path(_property(MFDataType.MultiSelectLookup)) == "S"

    def test_multi_select_lookup_with_empty_lookups(self) -> None:
        assert item_path(_property(MFDataType.MultiSelectLookup, lookups=())) == "S"

    def test_missing_value_cannot_be_encoded(self) -> None:
        assert item_path(_property(MFDataType.Integer, value=None)) is None

    def test_unmapped_data_type_cannot_be_encoded(self) -> None:
        assert item_path(_property(MFDataType.Timestamp, value="2024-01-31 10:00")) is None

    def test_unknown_data_type_value_cannot_be_encoded(self) -> None:
        assert item_path(_property(99, value="x")) is None

    def test_percent_encoded_value_is_decoded(self) -> None:
        assert item_path(_property(MFDataType.Text, value="A%20B")) == "TA B"

    def test_plus_is_decoded_as_space(self) -> None:
        assert item_path(_property(MFDataType.Text, value="A+B")) == "TA B"

    def test_value_is_decoded_exactly_once(self) -> None:
        assert item_path(_property(MFDataType.Text, value="%2541")) == "T%41"

    def test_plain_value_is_unchanged(self) -> None:
        assert item_path(_property(MFDataType.Text, value="Q1 report")) == "TQ1 report"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5.0, "R5"),
            (-2.0, "R-2"),
            (100.0, "R100"),
            (0.0, "R0"),
            (-0.0, "R-0"),
            (0.1, "R0.1"),
            (0.0001, "R0.0001"),
            (1e-05, "R1E-05"),
            (1.25e-07, "R1.25E-07"),
            (123456789012345.0, "R123456789012345"),
            (1e15, "R1E+15"),
            (1e20, "R1E+20"),
            (1.2345678901234568e20, "R1.2345678901234568E+20"),
            (float("nan"), "RNaN"),
            (float("inf"), "RInfinity"),
            (float("-inf"), "R-Infinity"),
        ],
    )
    def test_floating_values_use_server_number_format(self, value: float, expected: str) -> None:
        assert item_path(_property(MFDataType.Floating, value=value)) == expected

    def test_integer_value_for_floating_type(self) -> None:
        assert item_path(_property(MFDataType.Floating, value=5)) == "R5"


# ---------------------------------------------------------------------------
# items_path tests
# ---------------------------------------------------------------------------


class TestItemsPath:
    def test_none_returns_empty_string(self) -> None:
        assert items_path(None) == ""

    def test_empty_returns_empty_string(self) -> None:
        assert items_path([]) == ""

    def test_joins_segments_with_trailing_slash(self) -> None:
        assert items_path([_view(5), _traditional(9)]) == "v5/y9/"

    def test_skips_none_items(self) -> None:
        assert items_path([_view(5), None, _traditional(9)]) == "v5/y9/"

    def test_skips_items_that_cannot_be_encoded(self) -> None:
        items = [_view(5), _object(), _property(MFDataType.Integer), _traditional(9)]
        assert items_path(items) == "v5/y9/"

    def test_keeps_input_order(self) -> None:
        items = [_traditional(9), _property(MFDataType.Text, value="ACME"), _view(5)]
        assert items_path(items) == "y9/TACME/v5/"

    def test_keeps_segments_with_empty_values(self) -> None:
        assert items_path([_view(5), _property(MFDataType.Text, value="")]) == "v5/T/"

    def test_keeps_segments_with_decoded_spaces(self) -> None:
        assert items_path([_view(5), _property(MFDataType.Uninitialized, value="+")]) == "v5/- /"

    def test_only_unencodable_items_returns_slash(self) -> None:
        assert items_path([_object()]) == "/"


# ---------------------------------------------------------------------------
# items_resource_path tests
# ---------------------------------------------------------------------------


class TestItemsResourcePath:
    def test_builds_listing_request_path(self) -> None:
        assert items_resource_path([_view(5), _traditional(9)]) == "/REST/views/v5/y9/items"

    def test_empty_location_is_view_root(self) -> None:
        assert items_resource_path([]) == "/REST/views/items"

    def test_unencodable_location_is_view_root(self) -> None:
        assert items_resource_path([_object()]) == "/REST/views/items"

    def test_custom_resources(self) -> None:
        result = items_resource_path(
            [_view(101)],
            views_resource="/m-files/REST/views/",
            items_resource="items.aspx",
        )
        assert result == "/m-files/REST/views/v101/items.aspx"
