"""SchemaDescriptor tests: reflection over the models and fail-fast wiring."""

from typing import Any

import pytest

from adcom.enums import SizeUnit
from adcom.errors import ConfigError
from adcom.registry import FieldKind, SchemaDescriptor
from adcom.schema import (
    ALL_MODELS,
    AdcomMessage,
    DistributionChannel,
    EventSpec,
    Placement,
)
from adcom.schema.base import bool_field, enum_field, int_field, message_field, string_field


class TestLookups:
    def test_all_message_types_registered(self, schema):
        assert len(schema.message_types()) == len(ALL_MODELS) == 28

    def test_lookup_by_full_name_suffix_and_model(self, schema):
        full = schema.message("Placement.DisplayPlacement.EventSpec")
        assert schema.message("DisplayPlacement.EventSpec") is full
        assert schema.message("EventSpec") is full
        assert schema.message(EventSpec) is full
        assert full.model is EventSpec

    def test_unknown_message_type(self, schema):
        with pytest.raises(ConfigError):
            schema.message("NoSuchMessage")

    def test_unregistered_model(self, schema):
        class Stray(AdcomMessage):
            adcom_name = "Stray"

        with pytest.raises(ConfigError):
            schema.message(Stray)


class TestFieldsOf:
    def test_fields_ordered_by_number(self, schema):
        names = [f.name for f in schema.fields_of("EventSpec")]
        assert names == ["type", "method", "api", "jstrk", "wjs", "pxtrk", "wpx"]

    def test_extension_bag_is_not_a_field(self, schema):
        assert "ext" not in [f.name for f in schema.fields_of(Placement)]

    def test_field_declarations(self, schema):
        display = schema.message("DisplayPlacement")
        pos = display.field("pos")
        assert pos.kind is FieldKind.ENUM
        assert pos.enum_type == "PlacementPosition"
        event = display.field("event")
        assert event.kind is FieldKind.MESSAGE
        assert event.repeated
        assert event.message_type == "Placement.DisplayPlacement.EventSpec"
        assert display.field("instl").allowed == frozenset({0, 1})

    def test_required_fields(self, schema):
        assert schema.message("EventSpec").field("type").required
        assert schema.message("TitleAssetFormat").field("len").required
        assert not schema.message("Placement").field("tagid").required


class TestOneofGroups:
    def test_channel_oneof(self, schema):
        assert schema.oneof_groups_of(DistributionChannel) == frozenset(
            {frozenset({"site", "app", "dooh"})}
        )

    def test_asset_oneof(self, schema):
        assert schema.oneof_groups_of("AssetFormat") == frozenset(
            {frozenset({"title", "img", "video", "data"})}
        )

    def test_message_without_oneofs(self, schema):
        assert schema.oneof_groups_of("Placement") == frozenset()


class TestDefaults:
    def test_declared_defaults(self, schema):
        display = schema.message("DisplayPlacement")
        video = schema.message("VideoPlacement")
        event = schema.message("EventSpec")
        assert schema.default_of(display.field("unit")) == SizeUnit.DIPS
        assert schema.default_of(video.field("unit")) == SizeUnit.DIPS
        assert schema.default_of(video.field("boxing")) is True
        assert schema.default_of(event.field("wjs")) is True
        assert schema.default_of(event.field("wpx")) is True

    def test_undeclared_default_is_none(self, schema):
        placement = schema.message("Placement")
        assert schema.default_of(placement.field("reward")) is None
        assert schema.default_of(placement.field("tagid")) is None

    def test_enum_default_stored_as_plain_int(self, schema):
        default = schema.default_of(schema.message("DisplayPlacement").field("unit"))
        assert type(default) is int


class TestExtensionRanges:
    def test_vendor_range_declared(self, schema):
        assert schema.message("Placement").extension_range == (100, 9999)
        assert schema.message("Geo").accepts_extension(100)
        assert not schema.message("Geo").accepts_extension(10000)

    def test_distribution_channel_declares_no_range(self, schema):
        assert schema.message("DistributionChannel").extension_range is None


class TestEnumUsages:
    def test_size_unit_usages(self, schema):
        assert schema.enum_usages()["SizeUnit"] == [
            "Placement.DisplayPlacement.unit",
            "Placement.VideoPlacement.unit",
        ]

    def test_every_used_enum_is_registered(self, schema, enums):
        for name in schema.enum_usages():
            assert enums.has_enum(name)


class TestMalformedSchema:
    """Declaration mistakes fail while building, never at request time."""

    def _build(self, enums, *models):
        return SchemaDescriptor.from_models(models, enums)

    def test_duplicate_field_number(self, enums):
        class Dup(AdcomMessage):
            adcom_name = "Dup"
            a: int | None = int_field(1)
            b: int | None = int_field(1)

        with pytest.raises(ConfigError, match="reuses field number"):
            self._build(enums, Dup)

    def test_field_number_inside_extension_range(self, enums):
        class InRange(AdcomMessage):
            adcom_name = "InRange"
            a: int | None = int_field(150)

        with pytest.raises(ConfigError, match="extension range"):
            self._build(enums, InRange)

    def test_unknown_enum_reference(self, enums):
        class BadEnum(AdcomMessage):
            adcom_name = "BadEnum"
            a: int | None = enum_field(1, "NoSuchEnum")

        with pytest.raises(ConfigError, match="unknown enum"):
            self._build(enums, BadEnum)

    def test_unknown_message_reference(self, enums):
        class BadRef(AdcomMessage):
            adcom_name = "BadRef"
            a: Any = message_field(1, "Missing")

        with pytest.raises(ConfigError, match="unknown message"):
            self._build(enums, BadRef)

    def test_undeclared_field(self, enums):
        class Undeclared(AdcomMessage):
            adcom_name = "Undeclared"
            a: int | None = None

        with pytest.raises(ConfigError, match="no field declaration"):
            self._build(enums, Undeclared)

    def test_ill_typed_default(self, enums):
        class BadDefault(AdcomMessage):
            adcom_name = "BadDefault"
            a: bool | None = bool_field(1, default="yes")

        with pytest.raises(ConfigError, match="not a bool"):
            self._build(enums, BadDefault)

    def test_unregistered_enum_default(self, enums):
        class BadEnumDefault(AdcomMessage):
            adcom_name = "BadEnumDefault"
            a: int | None = enum_field(1, "SizeUnit", default=9)

        with pytest.raises(ConfigError, match="not a registered"):
            self._build(enums, BadEnumDefault)

    def test_repeated_oneof_member(self, enums):
        class RepeatedOneof(AdcomMessage):
            adcom_name = "RepeatedOneof"
            a: list[str] | None = string_field(1, repeated=True, oneof="group")

        with pytest.raises(ConfigError, match="cannot belong to oneof"):
            self._build(enums, RepeatedOneof)

    def test_missing_message_name(self, enums):
        class Nameless(AdcomMessage):
            a: int | None = int_field(1)

        with pytest.raises(ConfigError, match="adcom_name"):
            self._build(enums, Nameless)

    def test_duplicate_message_name(self, enums):
        class First(AdcomMessage):
            adcom_name = "Same"

        class Second(AdcomMessage):
            adcom_name = "Same"

        with pytest.raises(ConfigError, match="declared twice"):
            self._build(enums, First, Second)

    def test_ambiguous_suffix(self, enums):
        class LeftItem(AdcomMessage):
            adcom_name = "Left.Item"

        class RightItem(AdcomMessage):
            adcom_name = "Right.Item"

        schema = self._build(enums, LeftItem, RightItem)
        assert schema.message("Left.Item").model is LeftItem
        with pytest.raises(ConfigError, match="ambiguous"):
            schema.message("Item")
