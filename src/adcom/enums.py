"""AdCOM 1.0 enumerated lists.

Code 0 is reserved for unknown/unset in every list; members named for 0 below
exist only where AdCOM gives the value a meaning of its own.
"""

from __future__ import annotations

from enum import IntEnum


class APIFramework(IntEnum):
    VPAID_1_0 = 1
    VPAID_2_0 = 2
    MRAID_1_0 = 3
    ORMMA = 4
    MRAID_2_0 = 5
    MRAID_3_0 = 6
    OMID_1_0 = 7
    SIMID_1_0 = 8
    SIMID_1_1 = 9


class AgentType(IntEnum):
    BROWSER_OR_DEVICE = 1
    IN_APP = 2
    PERSON = 3


class AudioVideoCreativeSubtype(IntEnum):
    VAST_1_0 = 1
    VAST_2_0 = 2
    VAST_3_0 = 3
    VAST_1_0_WRAPPER = 4
    VAST_2_0_WRAPPER = 5
    VAST_3_0_WRAPPER = 6
    VAST_4_0 = 7
    VAST_4_0_WRAPPER = 8
    DAAST_1_0 = 9
    DAAST_1_0_WRAPPER = 10
    VAST_4_1 = 11
    VAST_4_1_WRAPPER = 12
    VAST_4_2 = 13
    VAST_4_2_WRAPPER = 14


class CategoryTaxonomy(IntEnum):
    IAB_CONTENT_1_0 = 1
    IAB_CONTENT_2_0 = 2
    IAB_PRODUCT_1_0 = 3
    IAB_AUDIENCE_1_1 = 4
    IAB_CONTENT_2_1 = 5
    IAB_CONTENT_2_2 = 6
    IAB_CONTENT_3_0 = 7


class ClickType(IntEnum):
    NON_CLICKABLE = 0
    CLICKABLE_DETAILS_UNKNOWN = 1
    EMBEDDED_BROWSER = 2
    NATIVE_BROWSER = 3


class CompanionType(IntEnum):
    STATIC = 1
    HTML = 2
    IFRAME = 3


class ConnectionType(IntEnum):
    UNKNOWN = 0
    ETHERNET = 1
    WIFI = 2
    CELLULAR_UNKNOWN = 3
    CELLULAR_2G = 4
    CELLULAR_3G = 5
    CELLULAR_4G = 6
    CELLULAR_5G = 7


class ContentContext(IntEnum):
    VIDEO = 1
    GAME = 2
    MUSIC = 3
    APPLICATION = 4
    TEXT = 5
    OTHER = 6
    UNKNOWN = 7


class CreativeAttribute(IntEnum):
    AUDIO_AUTO_PLAY = 1
    AUDIO_USER_INITIATED = 2
    EXPANDABLE_AUTOMATIC = 3
    EXPANDABLE_CLICK = 4
    EXPANDABLE_ROLLOVER = 5
    IN_BANNER_VIDEO_AUTO_PLAY = 6
    IN_BANNER_VIDEO_USER_INITIATED = 7
    POP = 8
    PROVOCATIVE = 9
    SHAKY_FLASHING = 10
    SURVEYS = 11
    TEXT_ONLY = 12
    USER_INTERACTIVE = 13
    ALERT_STYLE = 14
    HAS_AUDIO_TOGGLE = 15
    HAS_SKIP_BUTTON = 16
    ADOBE_FLASH = 17


class DeliveryMethod(IntEnum):
    STREAMING = 1
    PROGRESSIVE = 2
    DOWNLOAD = 3


class DeviceType(IntEnum):
    MOBILE_TABLET_GENERAL = 1
    PERSONAL_COMPUTER = 2
    CONNECTED_TV = 3
    PHONE = 4
    TABLET = 5
    CONNECTED_DEVICE = 6
    SET_TOP_BOX = 7
    OOH_DEVICE = 8


class DisplayContextType(IntEnum):
    CONTENT_CENTRIC = 1
    SOCIAL_CENTRIC = 2
    PRODUCT_CENTRIC = 3
    CONTENT_FEED = 10
    CONTENT_ATOMIC = 11
    CONTENT_OUTSIDE = 12
    SOCIAL_FEED = 20
    SOCIAL_CONVERSATION = 21
    PRODUCT_LISTING = 30
    PRODUCT_DETAILS = 31
    PRODUCT_REVIEW = 32


class DisplayCreativeSubtype(IntEnum):
    HTML = 1
    AMPHTML = 2
    STRUCTURED_IMAGE = 3
    STRUCTURED_NATIVE = 4


class DisplayPlacementType(IntEnum):
    IN_FEED = 1
    SIDEBAR = 2
    INTERSTITIAL = 3
    FLOATING = 4


class DOOHVenueType(IntEnum):
    AIRBORNE = 1
    AIRPORTS_GENERAL = 2
    AIRPORTS_BAGGAGE_CLAIM = 3
    AIRPORTS_TERMINAL = 4
    AIRPORTS_LOUNGES = 5
    ATMS = 6
    BACKLIGHTS = 7
    BARS = 8
    BENCHES = 9
    BIKE_RACKS = 10
    BULLETINS = 11
    BUSES = 12
    CAFES = 13
    CASUAL_DINING_RESTAURANTS = 14
    CHILD_CARE = 15
    CINEMA = 16
    CITY_INFORMATION_PANELS = 17
    CONVENIENCE_STORES = 18
    DEDICATED_WILD_POSTING = 19
    DOCTORS_OFFICES_GENERAL = 20
    DOCTORS_OFFICES_OBSTETRICS = 21
    DOCTORS_OFFICES_PEDIATRICS = 22
    FAMILY_ENTERTAINMENT = 23
    FERRIES = 24
    FINANCIAL_SERVICES = 25
    GAS_STATIONS = 26
    GOLF_COURSES = 27
    GYMS = 28
    HEALTH_CLUBS = 29
    HOTELS = 30
    HIGHWAYS = 31


class EventTrackingMethod(IntEnum):
    IMAGE_PIXEL = 1
    JAVASCRIPT = 2


class EventType(IntEnum):
    LOADED = 1
    IMPRESSION = 2
    VIEWABLE_MRC_50 = 3
    VIEWABLE_MRC_100 = 4
    VIEWABLE_VIDEO_50 = 5


class ExpandableDirection(IntEnum):
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4
    FULL_SCREEN = 5
    RESIZE_MINIMIZE = 6


class FeedType(IntEnum):
    MUSIC_SERVICE = 1
    FM_AM_BROADCAST = 2
    PODCAST = 3
    CATCH_UP_RADIO = 4
    WEB_RADIO = 5
    VIDEO_GAME = 6
    TEXT_TO_SPEECH = 7


class LinearityMode(IntEnum):
    LINEAR = 1
    NON_LINEAR = 2


class LocationService(IntEnum):
    IP2LOCATION = 1
    NEUSTAR = 2
    MAXMIND = 3
    NETACUITY = 4


class LocationType(IntEnum):
    GPS = 1
    IP = 2
    USER_PROVIDED = 3


class MediaRating(IntEnum):
    ALL_AUDIENCES = 1
    EVERYONE_OVER_12 = 2
    MATURE = 3


class NativeDataAssetType(IntEnum):
    SPONSORED = 1
    DESC = 2
    RATING = 3
    LIKES = 4
    DOWNLOADS = 5
    PRICE = 6
    SALE_PRICE = 7
    PHONE = 8
    ADDRESS = 9
    DESC2 = 10
    DISPLAY_URL = 11
    CTA_TEXT = 12


class NativeImageAssetType(IntEnum):
    ICON = 1
    MAIN = 3


class OperatingSystem(IntEnum):
    OTHER_NOT_LISTED = 0
    NINTENDO_3DS = 1
    ANDROID = 2
    APPLE_TV = 3
    ASHA = 4
    BADA = 5
    BLACKBERRY = 6
    BREW = 7
    CHROME_OS = 8
    DARWIN = 9
    FIRE_OS = 10
    FIREFOX_OS = 11
    HELEN_OS = 12
    IOS = 13
    LINUX = 14
    MAC_OS = 15
    MEEGO = 16
    MORPH_OS = 17
    NET_BSD = 18
    NUCLEUS_PLUS = 19
    PS_VITA = 20
    PS3 = 21
    PS4 = 22
    PSP = 23
    SYMBIAN = 24
    TIZEN = 25
    WATCH_OS = 26
    WEB_OS = 27
    WINDOWS = 28


class PlacementPosition(IntEnum):
    UNKNOWN = 0
    ABOVE_FOLD = 1
    LOCKED = 2
    BELOW_FOLD = 3
    HEADER = 4
    FOOTER = 5
    SIDEBAR = 6
    FULLSCREEN = 7


class PlaybackCessationMode(IntEnum):
    VIDEO_COMPLETION_OR_USER = 1
    LEAVING_VIEWPORT_OR_USER = 2
    LEAVING_VIEWPORT_CONTINUES_FLOATING = 3


class PlaybackMethod(IntEnum):
    PAGE_LOAD_SOUND_ON = 1
    PAGE_LOAD_SOUND_OFF = 2
    CLICK_SOUND_ON = 3
    MOUSE_OVER_SOUND_ON = 4
    VIEWPORT_ENTRY_SOUND_ON = 5
    VIEWPORT_ENTRY_SOUND_OFF = 6


class ProductionQuality(IntEnum):
    PROFESSIONAL = 1
    PROSUMER = 2
    USER_GENERATED = 3


class SizeUnit(IntEnum):
    DIPS = 1
    INCHES = 2
    CENTIMETERS = 3


class VideoPlacementSubtype(IntEnum):
    IN_STREAM = 1
    IN_BANNER = 2
    IN_ARTICLE = 3
    IN_FEED = 4
    INTERSTITIAL_SLIDER_FLOATING = 5


class VolumeNormalizationMode(IntEnum):
    NONE = 0
    AVERAGE_VOLUME = 1
    PEAK_VOLUME = 2
    LOUDNESS = 3
    CUSTOM_VOLUME = 4


ALL_ENUMS: tuple[type[IntEnum], ...] = (
    APIFramework,
    AgentType,
    AudioVideoCreativeSubtype,
    CategoryTaxonomy,
    ClickType,
    CompanionType,
    ConnectionType,
    ContentContext,
    CreativeAttribute,
    DeliveryMethod,
    DeviceType,
    DisplayContextType,
    DisplayCreativeSubtype,
    DisplayPlacementType,
    DOOHVenueType,
    EventTrackingMethod,
    EventType,
    ExpandableDirection,
    FeedType,
    LinearityMode,
    LocationService,
    LocationType,
    MediaRating,
    NativeDataAssetType,
    NativeImageAssetType,
    OperatingSystem,
    PlacementPosition,
    PlaybackCessationMode,
    PlaybackMethod,
    ProductionQuality,
    SizeUnit,
    VideoPlacementSubtype,
    VolumeNormalizationMode,
)

# Lists whose codes from this value upward are reserved for vendor-specific use.
VENDOR_SPECIFIC_FROM: dict[str, int] = {
    "APIFramework": 500,
    "CategoryTaxonomy": 500,
    "CreativeAttribute": 500,
    "DisplayContextType": 500,
    "DisplayPlacementType": 500,
    "EventTrackingMethod": 500,
    "EventType": 500,
    "NativeDataAssetType": 500,
    "NativeImageAssetType": 500,
    "OperatingSystem": 500,
}
