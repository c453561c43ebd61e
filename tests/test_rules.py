"""Cross-field rules: each rule on its own and through the validator."""

from adcom.schema import (
    AssetFormat,
    AudioPlacement,
    Companion,
    DataAssetFormat,
    Device,
    DisplayFormat,
    DisplayPlacement,
    Geo,
    ImageAssetFormat,
    NativeFormat,
    Placement,
    User,
    VideoPlacement,
)
from adcom.validation import Severity
from adcom.validation.rules import (
    CROSS_FIELD_RULES,
    asset_subtype_required,
    display_format_mixed,
    geo_coordinates,
    mccmnc_format,
    media_ranges,
    placement_subtype_required,
    single_end_card,
    size_mixed,
    skip_settings,
    user_demographics,
)


class TestPlacementSubtype:
    def test_placement_without_subtype_is_an_error(self, validator):
        issues = validator.validate(Placement(tagid="t"), "Placement")
        assert [(i.path, i.rule, i.severity) for i in issues] == [
            ("$", "placement_subtype_required", Severity.ERROR)
        ]

    def test_any_subtype_satisfies(self):
        for placement in (
            Placement(display=DisplayPlacement()),
            Placement(video=VideoPlacement()),
            Placement(audio=AudioPlacement()),
        ):
            assert placement_subtype_required(placement, "$") == []

    def test_several_subtypes_allowed(self):
        placement = Placement(display=DisplayPlacement(), video=VideoPlacement())
        assert placement_subtype_required(placement, "$") == []


class TestAssetSubtype:
    def test_asset_without_subtype(self):
        issues = asset_subtype_required(AssetFormat(id=1, req=True), "$.asset[0]")
        assert [(i.path, i.severity) for i in issues] == [("$.asset[0]", Severity.ERROR)]

    def test_asset_with_subtype(self):
        assert asset_subtype_required(AssetFormat(data=DataAssetFormat(type=2)), "$") == []

    def test_reported_through_native_format(self, validator):
        placement = Placement(display=DisplayPlacement(nativefmt=NativeFormat(asset=[AssetFormat(id=1)])))
        issues = validator.validate(placement, "Placement")
        assert [(i.path, i.rule) for i in issues] == [
            ("$.display.nativefmt.asset[0]", "asset_subtype_required")
        ]


class TestDisplayRecommendations:
    def test_display_and_native_formats_mixed(self):
        display = DisplayPlacement(displayfmt=[DisplayFormat(w=300, h=250)], nativefmt=NativeFormat())
        issues = display_format_mixed(display, "$")
        assert [(i.rule, i.severity) for i in issues] == [("display_format_mixed", Severity.WARNING)]

    def test_display_formats_only(self):
        assert display_format_mixed(DisplayPlacement(displayfmt=[DisplayFormat(w=1, h=1)]), "$") == []

    def test_absolute_and_relative_sizes_mixed(self):
        issues = size_mixed(DisplayFormat(w=300, hratio=1), "$.displayfmt[0]")
        assert [(i.path, i.rule) for i in issues] == [("$.displayfmt[0]", "size_mixed")]

    def test_image_asset_sizes(self):
        assert size_mixed(ImageAssetFormat(wratio=16, hratio=9), "$") == []
        assert len(size_mixed(ImageAssetFormat(w=100, wratio=16), "$")) == 1


class TestMediaRanges:
    def test_duration_inverted(self):
        issues = media_ranges(VideoPlacement(mindur=30, maxdur=15), "$.video")
        assert [(i.path, i.rule, i.severity) for i in issues] == [
            ("$.video.mindur", "duration_range", Severity.WARNING)
        ]

    def test_extension_below_unlimited(self):
        assert media_ranges(AudioPlacement(maxext=-1), "$") == []
        issues = media_ranges(AudioPlacement(maxext=-2), "$")
        assert [i.path for i in issues] == ["$.maxext"]

    def test_bitrate_inverted(self):
        issues = media_ranges(VideoPlacement(minbitr=900, maxbitr=300), "$")
        assert [(i.path, i.rule) for i in issues] == [("$.minbitr", "bitrate_range")]

    def test_consistent_ranges(self):
        video = VideoPlacement(mindur=5, maxdur=30, maxext=0, minbitr=300, maxbitr=900)
        assert media_ranges(video, "$") == []


class TestSkipSettings:
    def test_skip_thresholds_without_skip(self):
        issues = skip_settings(VideoPlacement(skip=False, skipmin=10, skipafter=5), "$")
        assert [i.path for i in issues] == ["$.skipmin", "$.skipafter"]

    def test_skip_thresholds_with_skip(self):
        assert skip_settings(VideoPlacement(skip=True, skipmin=10, skipafter=5), "$") == []

    def test_skip_unset(self):
        assert skip_settings(AudioPlacement(skipmin=10), "$") == []


class TestEndCards:
    def test_two_end_cards(self):
        video = VideoPlacement(comp=[Companion(vcm=1), Companion(vcm=1), Companion(vcm=0)])
        issues = single_end_card(video, "$.video")
        assert [(i.path, i.rule) for i in issues] == [("$.video.comp", "single_end_card")]

    def test_one_end_card(self):
        assert single_end_card(VideoPlacement(comp=[Companion(vcm=1), Companion(vcm=0)]), "$") == []


class TestContextRules:
    def test_coordinates_out_of_range(self):
        issues = geo_coordinates(Geo(lat=91.5, lon=-181), "$")
        assert [(i.path, i.rule) for i in issues] == [
            ("$.lat", "geo_coordinates"),
            ("$.lon", "geo_coordinates"),
        ]

    def test_coordinates_in_range(self):
        assert geo_coordinates(Geo(lat=-90.0, lon=180.0), "$") == []

    def test_gender_and_year_of_birth(self):
        issues = user_demographics(User(gender="X", yob=85), "$")
        assert [(i.path, i.rule) for i in issues] == [
            ("$.gender", "gender_code"),
            ("$.yob", "year_of_birth"),
        ]
        assert user_demographics(User(gender="O", yob=1985), "$") == []

    def test_mccmnc_format(self):
        assert mccmnc_format(Device(mccmnc="310-005"), "$") == []
        issues = mccmnc_format(Device(mccmnc="310005"), "$.device")
        assert [(i.path, i.severity) for i in issues] == [("$.device.mccmnc", Severity.WARNING)]

    def test_nested_user_geo_checked(self, validator):
        issues = validator.validate(User(geo=Geo(lat=120.0)), "User")
        assert [i.path for i in issues] == ["$.geo.lat"]


class TestRuleWiring:
    def test_rules_keyed_by_registered_names(self, schema):
        for name in CROSS_FIELD_RULES:
            assert schema.message(name).name == name

    def test_rules_skip_ill_typed_values(self):
        video = VideoPlacement.model_construct(mindur="long", maxdur=5, skip=False, skipmin="x")
        assert media_ranges(video, "$") == []
        assert skip_settings(video, "$") == []
