"""Placement group: the set of ads allowed for a given impression.

A ``Placement`` is the root; its subtype objects (display, video, audio)
describe the media permitted and media-specific behaviour. At least one
subtype is required, which the validator checks as a named rule.
"""

from __future__ import annotations

from ..enums import SizeUnit
from .base import (
    AdcomMessage,
    bool_field,
    enum_field,
    int_field,
    message_field,
    string_field,
)

DISPLAY_PLACEMENT = "Placement.DisplayPlacement"
VIDEO_PLACEMENT = "Placement.VideoPlacement"
AUDIO_PLACEMENT = "Placement.AudioPlacement"
COMPANION = "Placement.Companion"
DISPLAY_FORMAT = "Placement.DisplayPlacement.DisplayFormat"
NATIVE_FORMAT = "Placement.DisplayPlacement.NativeFormat"
ASSET_FORMAT = "Placement.DisplayPlacement.NativeFormat.AssetFormat"
TITLE_ASSET_FORMAT = "Placement.DisplayPlacement.NativeFormat.AssetFormat.TitleAssetFormat"
IMAGE_ASSET_FORMAT = "Placement.DisplayPlacement.NativeFormat.AssetFormat.ImageAssetFormat"
DATA_ASSET_FORMAT = "Placement.DisplayPlacement.NativeFormat.AssetFormat.DataAssetFormat"
EVENT_SPEC = "Placement.DisplayPlacement.EventSpec"

_FLAG = (0, 1)


class Placement(AdcomMessage):
    """Properties of a placement and the characteristics of ads permitted in it."""

    adcom_name = "Placement"

    tagid: str | None = string_field(1, "Placement or ad tag identifier, unique within the channel")
    ssai: int | None = int_field(
        2,
        "Server-side ad insertion: 0 unknown, 1 client-side, 2 stitched assets, 3 all server-side",
        allowed=(0, 1, 2, 3),
    )
    sdk: str | None = string_field(3, "Mediation partner, SDK or player rendering the ad")
    sdkver: str | None = string_field(4, "Version of the SDK named in 'sdk'")
    reward: bool | None = bool_field(5, "Rewarded placement")
    wlang: list[str] | None = string_field(6, "Allowlist of creative languages (ISO-639-1-alpha-2)", repeated=True)
    secure: int | None = int_field(7, "Creative must use HTTPS for all assets", allowed=_FLAG)
    admx: int | None = int_field(8, "Inline markup supported", allowed=_FLAG)
    curlx: int | None = int_field(9, "Markup retrieval by URL supported", allowed=_FLAG)
    display: DisplayPlacement | None = message_field(10, DISPLAY_PLACEMENT, "Display subtype")
    video: VideoPlacement | None = message_field(11, VIDEO_PLACEMENT, "Video subtype")
    audio: AudioPlacement | None = message_field(12, AUDIO_PLACEMENT, "Audio subtype")


class DisplayFormat(AdcomMessage):
    """Allowed parameters for a banner display ad; one entry per permitted size."""

    adcom_name = DISPLAY_FORMAT

    w: int | None = int_field(1, "Absolute width in 'DisplayPlacement.unit' units")
    h: int | None = int_field(2, "Absolute height in 'DisplayPlacement.unit' units")
    wratio: int | None = int_field(3, "Relative width when sizing by ratio")
    hratio: int | None = int_field(4, "Relative height when sizing by ratio")
    expdir: list[int] | None = enum_field(5, "ExpandableDirection", "Permitted expansion directions", repeated=True)


class TitleAssetFormat(AdcomMessage):
    adcom_name = TITLE_ASSET_FORMAT

    len: int | None = int_field(1, "Maximum title length", required=True)


class ImageAssetFormat(AdcomMessage):
    adcom_name = IMAGE_ASSET_FORMAT

    type: int | None = enum_field(1, "NativeImageAssetType", "Image asset type")
    mime: list[str] | None = string_field(2, "Supported mime types", repeated=True)
    w: int | None = int_field(3, "Absolute width in DIPS")
    h: int | None = int_field(4, "Absolute height in DIPS")
    wmin: int | None = int_field(5, "Minimum width in DIPS")
    hmin: int | None = int_field(6, "Minimum height in DIPS")
    wratio: int | None = int_field(7, "Relative width when sizing by ratio")
    hratio: int | None = int_field(8, "Relative height when sizing by ratio")


class DataAssetFormat(AdcomMessage):
    adcom_name = DATA_ASSET_FORMAT

    type: int | None = enum_field(1, "NativeDataAssetType", "Data asset type")
    len: int | None = int_field(2, "Maximum length of the data value")


class AssetFormat(AdcomMessage):
    """Permitted specification of a single native asset; exactly one subtype applies."""

    adcom_name = ASSET_FORMAT

    id: int | None = int_field(1, "Asset ID, unique within the placement")
    req: bool | None = bool_field(2, "Asset is required")
    title: TitleAssetFormat | None = message_field(3, TITLE_ASSET_FORMAT, oneof="asset_oneof")
    img: ImageAssetFormat | None = message_field(4, IMAGE_ASSET_FORMAT, oneof="asset_oneof")
    video: VideoPlacement | None = message_field(5, VIDEO_PLACEMENT, oneof="asset_oneof")
    data: DataAssetFormat | None = message_field(6, DATA_ASSET_FORMAT, oneof="asset_oneof")


class NativeFormat(AdcomMessage):
    adcom_name = NATIVE_FORMAT

    asset: list[AssetFormat] | None = message_field(1, ASSET_FORMAT, "Native asset specifications", repeated=True)


class EventSpec(AdcomMessage):
    """A supported ad tracking event and the tracking methods available for it."""

    adcom_name = EVENT_SPEC

    type: int | None = enum_field(1, "EventType", "Tracking event type", required=True)
    method: list[int] | None = enum_field(2, "EventTrackingMethod", "Tracking methods", repeated=True)
    api: list[int] | None = enum_field(3, "APIFramework", "Tracking APIs for JavaScript trackers", repeated=True)
    jstrk: list[str] | None = string_field(4, "Restriction list of JavaScript tracker domains", repeated=True)
    wjs: bool | None = bool_field(5, "Sense of 'jstrk': false blocklist, true allowlist", default=True)
    pxtrk: list[str] | None = string_field(6, "Restriction list of pixel tracker domains", repeated=True)
    wpx: bool | None = bool_field(7, "Sense of 'pxtrk': false blocklist, true allowlist", default=True)


class DisplayPlacement(AdcomMessage):
    """Display subtype: banners, AMPHTML and native."""

    adcom_name = DISPLAY_PLACEMENT

    pos: int | None = enum_field(1, "PlacementPosition", "Position on screen")
    instl: int | None = int_field(2, "Interstitial placement", allowed=_FLAG)
    topframe: int | None = int_field(3, "0 unfriendly iframe or unknown, 1 top frame or friendly iframe", allowed=_FLAG)
    ifrbust: list[str] | None = string_field(4, "Supported iframe busters", repeated=True)
    clktype: int | None = enum_field(5, "ClickType", "Click type")
    ampren: int | None = int_field(6, "AMPHTML rendering: 1 early loading, 2 standard loading", allowed=(1, 2))
    ptype: int | None = enum_field(7, "DisplayPlacementType", "Display placement type")
    context: int | None = enum_field(8, "DisplayContextType", "Context of the placement")
    mime: list[str] | None = string_field(9, "Supported mime types", repeated=True)
    api: list[int] | None = enum_field(10, "APIFramework", "Supported APIs", repeated=True)
    ctype: list[int] | None = enum_field(11, "DisplayCreativeSubtype", "Permitted creative subtypes", repeated=True)
    w: int | None = int_field(12, "Placement width in 'unit' units")
    h: int | None = int_field(13, "Placement height in 'unit' units")
    unit: int | None = enum_field(14, "SizeUnit", "Unit for 'w' and 'h'", default=SizeUnit.DIPS)
    priv: bool | None = bool_field(15, "Buyer-specific privacy notice URL supported")
    displayfmt: list[DisplayFormat] | None = message_field(16, DISPLAY_FORMAT, "Banner formats", repeated=True)
    nativefmt: NativeFormat | None = message_field(17, NATIVE_FORMAT, "Native format")
    event: list[EventSpec] | None = message_field(18, EVENT_SPEC, "Supported tracking events", repeated=True)


class Companion(AdcomMessage):
    """Companion display ad attached to a video or audio placement."""

    adcom_name = COMPANION

    id: str | None = string_field(1, "Companion identifier, unique within the placement")
    vcm: int | None = int_field(2, "Rendering mode: 0 concurrent, 1 end card", allowed=_FLAG)
    display: DisplayPlacement | None = message_field(3, DISPLAY_PLACEMENT, "Companion display specification")


class VideoPlacement(AdcomMessage):
    """Video subtype (e.g., VAST)."""

    adcom_name = VIDEO_PLACEMENT

    ptype: int | None = enum_field(1, "VideoPlacementSubtype", "Video placement subtype")
    pos: int | None = enum_field(2, "PlacementPosition", "Position on screen")
    delay: int | None = int_field(3, "Start delay in seconds, or a start delay mode")
    skip: bool | None = bool_field(4, "Placement imposes skippability")
    skipmin: int | None = int_field(5, "Creatives longer than this many seconds may be skipped")
    skipafter: int | None = int_field(6, "Seconds a creative must play before skipping is enabled")
    playmethod: int | None = enum_field(7, "PlaybackMethod", "Playback method")
    playend: int | None = enum_field(8, "PlaybackCessationMode", "Event ending playback")
    clktype: int | None = enum_field(9, "ClickType", "Click type")
    mime: list[str] | None = string_field(10, "Supported mime types", repeated=True)
    api: list[int] | None = enum_field(11, "APIFramework", "Supported APIs", repeated=True)
    ctype: list[int] | None = enum_field(12, "AudioVideoCreativeSubtype", "Permitted creative subtypes", repeated=True)
    w: int | None = int_field(13, "Creative width in 'unit' units")
    h: int | None = int_field(14, "Creative height in 'unit' units")
    unit: int | None = enum_field(15, "SizeUnit", "Unit for 'w' and 'h'", default=SizeUnit.DIPS)
    mindur: int | None = int_field(16, "Minimum duration in seconds")
    maxdur: int | None = int_field(17, "Maximum duration in seconds")
    maxext: int | None = int_field(18, "Extended duration: 0 none, -1 unlimited, >0 extra seconds")
    minbitr: int | None = int_field(19, "Minimum bit rate in Kbps")
    maxbitr: int | None = int_field(20, "Maximum bit rate in Kbps")
    delivery: list[int] | None = enum_field(21, "DeliveryMethod", "Supported delivery methods", repeated=True)
    maxseq: int | None = int_field(22, "Maximum ads in a pod")
    linear: int | None = enum_field(23, "LinearityMode", "Required linearity")
    boxing: bool | None = bool_field(24, "Letterboxing of 4:3 into 16:9 allowed", default=True)
    comp: list[Companion] | None = message_field(25, COMPANION, "Companion ads", repeated=True)
    comptype: list[int] | None = enum_field(26, "CompanionType", "Supported companion types", repeated=True)


class AudioPlacement(AdcomMessage):
    """Audio subtype (e.g., DAAST)."""

    adcom_name = AUDIO_PLACEMENT

    delay: int | None = int_field(1, "Start delay in seconds, or a start delay mode")
    skip: bool | None = bool_field(2, "Placement imposes skippability")
    skipmin: int | None = int_field(3, "Creatives longer than this many seconds may be skipped")
    skipafter: int | None = int_field(4, "Seconds a creative must play before skipping is enabled")
    playmethod: int | None = enum_field(5, "PlaybackMethod", "Playback method")
    playend: int | None = enum_field(6, "PlaybackCessationMode", "Event ending playback")
    feed: int | None = enum_field(7, "FeedType", "Audio feed type")
    nvol: int | None = enum_field(8, "VolumeNormalizationMode", "Volume normalization mode")
    mime: list[str] | None = string_field(9, "Supported mime types", repeated=True)
    api: list[int] | None = enum_field(10, "APIFramework", "Supported APIs", repeated=True)
    ctype: list[int] | None = enum_field(11, "AudioVideoCreativeSubtype", "Permitted creative subtypes", repeated=True)
    mindur: int | None = int_field(12, "Minimum duration in seconds")
    maxdur: int | None = int_field(13, "Maximum duration in seconds")
    maxext: int | None = int_field(14, "Extended duration: 0 none, -1 unlimited, >0 extra seconds")
    minbitr: int | None = int_field(15, "Minimum bit rate in Kbps")
    maxbitr: int | None = int_field(16, "Maximum bit rate in Kbps")
    delivery: list[int] | None = enum_field(17, "DeliveryMethod", "Supported delivery methods", repeated=True)
    maxseq: int | None = int_field(18, "Maximum ads in a pod")
    comp: list[Companion] | None = message_field(19, COMPANION, "Companion ads", repeated=True)
    comptype: list[int] | None = enum_field(20, "CompanionType", "Supported companion types", repeated=True)


PLACEMENT_MODELS: tuple[type[AdcomMessage], ...] = (
    Placement,
    DisplayPlacement,
    DisplayFormat,
    NativeFormat,
    AssetFormat,
    TitleAssetFormat,
    ImageAssetFormat,
    DataAssetFormat,
    EventSpec,
    VideoPlacement,
    AudioPlacement,
    Companion,
)

for _model in PLACEMENT_MODELS:
    _model.model_rebuild()
