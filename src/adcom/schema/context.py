"""Context group: the channel, publisher, content, user, device, location and
regulations surrounding an impression."""

from __future__ import annotations

from .base import (
    AdcomMessage,
    bool_field,
    enum_field,
    float_field,
    int_field,
    message_field,
    string_field,
)


class Site(AdcomMessage):
    """Ad supported website."""

    adcom_name = "DistributionChannel.Site"

    domain: str | None = string_field(1, "Domain of the site")
    cat: list[str] | None = string_field(2, "Site categories from 'cattax'", repeated=True)
    sectcat: list[str] | None = string_field(3, "Section categories from 'cattax'", repeated=True)
    pagecat: list[str] | None = string_field(4, "Page categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(5, "CategoryTaxonomy", "Taxonomy of the category lists")
    privpolicy: bool | None = bool_field(6, "Site has a privacy policy")
    keywords: str | None = string_field(7, "Comma-separated keywords")
    page: str | None = string_field(8, "URL of the page")
    ref: str | None = string_field(9, "Referrer URL")
    search: str | None = string_field(10, "Search string leading to the page")
    mobile: bool | None = bool_field(11, "Layout optimized for mobile")
    amp: bool | None = bool_field(12, "Page built with AMP HTML")


class App(AdcomMessage):
    """Ad supported non-browser application."""

    adcom_name = "DistributionChannel.App"

    domain: str | None = string_field(1, "Domain of the app")
    cat: list[str] | None = string_field(2, "App categories from 'cattax'", repeated=True)
    sectcat: list[str] | None = string_field(3, "Section categories from 'cattax'", repeated=True)
    pagecat: list[str] | None = string_field(4, "View categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(5, "CategoryTaxonomy", "Taxonomy of the category lists")
    privpolicy: bool | None = bool_field(6, "App has a privacy policy")
    keywords: str | None = string_field(7, "Comma-separated keywords")
    bundle: str | None = string_field(8, "Bundle or package name, not a store ID")
    storeid: str | None = string_field(9, "App store ID")
    storeurl: str | None = string_field(10, "App store URL")
    ver: str | None = string_field(11, "Application version")
    paid: bool | None = bool_field(12, "Paid app")


class DOOH(AdcomMessage):
    """Digital out-of-home experience such as a kiosk or billboard."""

    adcom_name = "DistributionChannel.DOOH"

    venue: int | None = enum_field(1, "DOOHVenueType", "Venue type")
    fixed: int | None = int_field(2, "1 fixed location, 2 movable", allowed=(1, 2))
    etime: int | None = int_field(3, "Exposure time in seconds per view")
    dpi: int | None = int_field(4, "Minimum DPI for text elements")


class Publisher(AdcomMessage):
    adcom_name = "Publisher"

    id: str | None = string_field(1, "Publisher identifier as used in ads.txt")
    name: str | None = string_field(2, "Displayable name")
    domain: str | None = string_field(3, "Highest level domain")
    cat: list[str] | None = string_field(4, "Publisher categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(5, "CategoryTaxonomy", "Taxonomy of 'cat'")


class Producer(AdcomMessage):
    adcom_name = "Producer"

    id: str | None = string_field(1, "Producer identifier")
    name: str | None = string_field(2, "Displayable name")
    domain: str | None = string_field(3, "Highest level domain")
    cat: list[str] | None = string_field(4, "Producer categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(5, "CategoryTaxonomy", "Taxonomy of 'cat'")


class Segment(AdcomMessage):
    adcom_name = "Segment"

    id: str | None = string_field(1, "Segment ID specific to the data provider")
    name: str | None = string_field(2, "Displayable segment name")
    value: str | None = string_field(3, "Segment value")


class Data(AdcomMessage):
    """Additional data from one provider, expressed as segments."""

    adcom_name = "Data"

    id: str | None = string_field(1, "Data provider ID")
    name: str | None = string_field(2, "Data provider name")
    segment: list[Segment] | None = message_field(3, "Segment", "Data values", repeated=True)


class Content(AdcomMessage):
    """Content in which an impression can appear, syndicated or not."""

    adcom_name = "Content"

    id: str | None = string_field(1, "Content ID")
    episode: int | None = int_field(2, "Episode number")
    title: str | None = string_field(3, "Content title")
    series: str | None = string_field(4, "Content series")
    season: str | None = string_field(5, "Content season")
    artist: str | None = string_field(6, "Credited artist")
    genre: str | None = string_field(7, "Genre")
    album: str | None = string_field(8, "Album")
    isrc: str | None = string_field(9, "International Standard Recording Code")
    url: str | None = string_field(10, "URL of the content")
    cat: list[str] | None = string_field(11, "Content categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(12, "CategoryTaxonomy", "Taxonomy of 'cat'")
    prodq: int | None = enum_field(13, "ProductionQuality", "Production quality")
    context: int | None = enum_field(14, "ContentContext", "Type of content")
    rating: str | None = string_field(15, "Content rating (e.g., MPAA)")
    urating: str | None = string_field(16, "User rating")
    mrating: int | None = enum_field(17, "MediaRating", "Media rating per IQG")
    keywords: list[str] | None = string_field(18, "Keywords", repeated=True)
    live: bool | None = bool_field(19, "Live content")
    srcrel: bool | None = bool_field(20, "Source relationship: false indirect, true direct")
    len: int | None = int_field(21, "Length in seconds")
    lang: str | None = string_field(22, "Language (ISO-639-1-alpha-2)")
    embed: bool | None = bool_field(23, "Embedded off-site")
    producer: Producer | None = message_field(24, "Producer", "Content producer")
    data: list[Data] | None = message_field(25, "Data", "Additional content data", repeated=True)


class DistributionChannel(AdcomMessage):
    """Site, app or DOOH channel through which ads are distributed."""

    adcom_name = "DistributionChannel"
    extension_range = None

    id: str | None = string_field(1, "Channel identifier")
    name: str | None = string_field(2, "Displayable name")
    pub: Publisher | None = message_field(3, "Publisher", "Publisher of the channel")
    content: Content | None = message_field(4, "Content", "Content within the channel")
    site: Site | None = message_field(5, "DistributionChannel.Site", oneof="channel_oneof")
    app: App | None = message_field(6, "DistributionChannel.App", oneof="channel_oneof")
    dooh: DOOH | None = message_field(7, "DistributionChannel.DOOH", oneof="channel_oneof")


class UniversalId(AdcomMessage):
    adcom_name = "UniversalId"

    id: str | None = string_field(1, "Cookie or platform-native identifier")
    atype: int | None = enum_field(2, "AgentType", "Type of user agent the ID comes from")


class ExtendedId(AdcomMessage):
    """Third-party identifiers from a single source."""

    adcom_name = "ExtendedId"

    source: str | None = string_field(1, "Source or technology provider domain")
    uids: list[UniversalId] | None = message_field(2, "UniversalId", "Identifiers from the source", repeated=True)


class Geo(AdcomMessage):
    """Geographic location of a device or a user's home base."""

    adcom_name = "Geo"

    type: int | None = enum_field(1, "LocationType", "Source of location data")
    lat: float | None = float_field(2, "Latitude, -90.0 to +90.0")
    lon: float | None = float_field(3, "Longitude, -180.0 to +180.0")
    accur: int | None = int_field(4, "Estimated accuracy in meters")
    lastfix: int | None = int_field(5, "Seconds since the fix was established")
    ipserv: int | None = enum_field(6, "LocationService", "IP geolocation provider")
    country: str | None = string_field(7, "Country (ISO-3166-1-alpha-2)")
    region: str | None = string_field(8, "Region (ISO-3166-2)")
    metro: str | None = string_field(9, "Regional marketing area")
    city: str | None = string_field(10, "City (UN/LOCODE)")
    zip: str | None = string_field(11, "ZIP or postal code")
    utcoffset: int | None = int_field(12, "Local time offset from UTC in minutes")


class User(AdcomMessage):
    """The human user of the device, i.e. the audience."""

    adcom_name = "User"

    id: str | None = string_field(1, "Vendor-specific user ID")
    buyeruid: str | None = string_field(2, "Buyer-specific user ID")
    yob: int | None = int_field(3, "Year of birth, 4 digits")
    gender: str | None = string_field(4, "'M', 'F' or 'O'")
    keywords: str | None = string_field(5, "Comma-separated keywords or interests")
    consent: str | None = string_field(6, "GDPR consent string")
    geo: Geo | None = message_field(7, "Geo", "Home base location")
    data: list[Data] | None = message_field(8, "Data", "Additional user data", repeated=True)
    eids: list[ExtendedId] | None = message_field(9, "ExtendedId", "Extended identifiers", repeated=True)


class Device(AdcomMessage):
    """The device through which the user is interacting."""

    adcom_name = "Device"

    type: int | None = enum_field(1, "DeviceType", "General device type")
    ua: str | None = string_field(2, "Browser user agent")
    ifa: str | None = string_field(3, "Advertiser ID in the clear")
    dnt: bool | None = bool_field(4, "Do Not Track")
    lmt: bool | None = bool_field(5, "Limit Ad Tracking")
    make: str | None = string_field(6, "Device make")
    model: str | None = string_field(7, "Device model")
    os: int | None = enum_field(8, "OperatingSystem", "Operating system")
    osv: str | None = string_field(9, "Operating system version")
    hwv: str | None = string_field(10, "Hardware version")
    h: int | None = int_field(11, "Screen height in pixels")
    w: int | None = int_field(12, "Screen width in pixels")
    ppi: int | None = int_field(13, "Pixels per linear inch")
    pxratio: float | None = float_field(14, "Physical to device independent pixel ratio")
    js: bool | None = bool_field(15, "JavaScript supported")
    lang: str | None = string_field(16, "Browser language (ISO-639-1-alpha-2)")
    ip: str | None = string_field(17, "IPv4 address")
    ipv6: str | None = string_field(18, "IPv6 address")
    xff: str | None = string_field(19, "X-Forwarded-For header value")
    iptr: bool | None = bool_field(20, "IP attributes truncated")
    carrier: str | None = string_field(21, "Carrier or ISP")
    mccmnc: str | None = string_field(22, "Mobile carrier as MCC-MNC")
    mccmncsim: str | None = string_field(23, "SIM card MCC-MNC")
    contype: int | None = enum_field(24, "ConnectionType", "Network connection type")
    geofetch: bool | None = bool_field(25, "Geolocation API available to ads")
    geo: Geo | None = message_field(26, "Geo", "Current device location")


class Regs(AdcomMessage):
    adcom_name = "Regs"

    coppa: bool | None = bool_field(1, "COPPA applies")
    gdpr: bool | None = bool_field(2, "GDPR applies")


class Restrictions(AdcomMessage):
    """Block lists applied to ad responses."""

    adcom_name = "Restrictions"

    bcat: list[str] | None = string_field(1, "Blocked categories from 'cattax'", repeated=True)
    cattax: int | None = enum_field(2, "CategoryTaxonomy", "Taxonomy of 'bcat'")
    badv: list[str] | None = string_field(3, "Blocked advertiser domains", repeated=True)
    bapp: list[str] | None = string_field(4, "Blocked app bundles", repeated=True)
    battr: list[int] | None = enum_field(5, "CreativeAttribute", "Blocked creative attributes", repeated=True)


CONTEXT_MODELS: tuple[type[AdcomMessage], ...] = (
    DistributionChannel,
    Site,
    App,
    DOOH,
    Publisher,
    Content,
    Producer,
    UniversalId,
    ExtendedId,
    User,
    Device,
    Geo,
    Data,
    Segment,
    Regs,
    Restrictions,
)

for _model in CONTEXT_MODELS:
    _model.model_rebuild()
