"""AdCOM message models (the compiled schema)."""

from .base import ADCOM_KEY, DEFAULT_EXTENSION_RANGE, EXTENSION_FIELD, AdcomMessage
from .context import (
    CONTEXT_MODELS,
    DOOH,
    App,
    Content,
    Data,
    Device,
    DistributionChannel,
    ExtendedId,
    Geo,
    Producer,
    Publisher,
    Regs,
    Restrictions,
    Segment,
    Site,
    UniversalId,
    User,
)
from .placement import (
    PLACEMENT_MODELS,
    AssetFormat,
    AudioPlacement,
    Companion,
    DataAssetFormat,
    DisplayFormat,
    DisplayPlacement,
    EventSpec,
    ImageAssetFormat,
    NativeFormat,
    Placement,
    TitleAssetFormat,
    VideoPlacement,
)

ALL_MODELS: tuple[type[AdcomMessage], ...] = PLACEMENT_MODELS + CONTEXT_MODELS

__all__ = [
    "ADCOM_KEY",
    "ALL_MODELS",
    "DEFAULT_EXTENSION_RANGE",
    "EXTENSION_FIELD",
    "AdcomMessage",
    # Placement
    "AssetFormat",
    "AudioPlacement",
    "Companion",
    "DataAssetFormat",
    "DisplayFormat",
    "DisplayPlacement",
    "EventSpec",
    "ImageAssetFormat",
    "NativeFormat",
    "Placement",
    "TitleAssetFormat",
    "VideoPlacement",
    # Context
    "App",
    "Content",
    "DOOH",
    "Data",
    "Device",
    "DistributionChannel",
    "ExtendedId",
    "Geo",
    "Producer",
    "Publisher",
    "Regs",
    "Restrictions",
    "Segment",
    "Site",
    "UniversalId",
    "User",
]
