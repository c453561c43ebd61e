"""Named cross-field rules that the schema declarations cannot express.

Each rule receives an instance whose own type has already been checked and
the path of that instance; field values may still be ill-typed, so rules
only act on values of the expected kind.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from ..schema.placement import (
    ASSET_FORMAT,
    AUDIO_PLACEMENT,
    DISPLAY_FORMAT,
    DISPLAY_PLACEMENT,
    IMAGE_ASSET_FORMAT,
    VIDEO_PLACEMENT,
)
from .issues import ValidationIssue, error, join_path, warning
from .semantics import (
    RULE_ASSET_SUBTYPE_REQUIRED,
    RULE_BITRATE_RANGE,
    RULE_DISPLAY_FORMAT_MIXED,
    RULE_DURATION_RANGE,
    RULE_GENDER_CODE,
    RULE_GEO_COORDINATES,
    RULE_MCCMNC_FORMAT,
    RULE_PLACEMENT_SUBTYPE_REQUIRED,
    RULE_SINGLE_END_CARD,
    RULE_SIZE_MIXED,
    RULE_SKIP_SETTINGS,
    RULE_YEAR_OF_BIRTH,
)

CrossFieldRule = Callable[[Any, str], list[ValidationIssue]]

PLACEMENT_SUBTYPES = ("display", "video", "audio")
ASSET_SUBTYPES = ("title", "img", "video", "data")
GENDER_CODES = frozenset({"M", "F", "O"})

_MCCMNC_RE = re.compile(r"^\d{3}-\d{2,3}$")


def _int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def placement_subtype_required(instance: Any, path: str) -> list[ValidationIssue]:
    """A placement must carry at least one of display, video, audio."""
    if any(getattr(instance, name, None) is not None for name in PLACEMENT_SUBTYPES):
        return []
    return [
        error(
            path,
            RULE_PLACEMENT_SUBTYPE_REQUIRED,
            "placement requires at least one subtype: display, video or audio",
        )
    ]


def asset_subtype_required(instance: Any, path: str) -> list[ValidationIssue]:
    """A native asset format must carry one of its subtype objects."""
    if any(getattr(instance, name, None) is not None for name in ASSET_SUBTYPES):
        return []
    return [
        error(
            path,
            RULE_ASSET_SUBTYPE_REQUIRED,
            "asset format requires exactly one subtype: title, img, video or data",
        )
    ]


def display_format_mixed(instance: Any, path: str) -> list[ValidationIssue]:
    displayfmt = getattr(instance, "displayfmt", None)
    if displayfmt and getattr(instance, "nativefmt", None) is not None:
        return [
            warning(
                path,
                RULE_DISPLAY_FORMAT_MIXED,
                "including both 'displayfmt' and 'nativefmt' is not recommended",
            )
        ]
    return []


def size_mixed(instance: Any, path: str) -> list[ValidationIssue]:
    absolute = any(_int(getattr(instance, name, None)) for name in ("w", "h"))
    relative = any(_int(getattr(instance, name, None)) for name in ("wratio", "hratio"))
    if absolute and relative:
        return [
            warning(
                path,
                RULE_SIZE_MIXED,
                "mixing absolute (w/h) and relative (wratio/hratio) sizes is not recommended",
            )
        ]
    return []


def media_ranges(instance: Any, path: str) -> list[ValidationIssue]:
    """Duration, extension and bit rate bounds of video and audio placements."""
    issues: list[ValidationIssue] = []
    mindur = _int(getattr(instance, "mindur", None))
    maxdur = _int(getattr(instance, "maxdur", None))
    if mindur is not None and maxdur is not None and mindur > maxdur:
        issues.append(
            warning(join_path(path, "mindur"), RULE_DURATION_RANGE, f"mindur {mindur} exceeds maxdur {maxdur}")
        )
    maxext = _int(getattr(instance, "maxext", None))
    if maxext is not None and maxext < -1:
        issues.append(
            warning(
                join_path(path, "maxext"),
                RULE_DURATION_RANGE,
                f"maxext {maxext} is below -1 (unlimited extension)",
            )
        )
    minbitr = _int(getattr(instance, "minbitr", None))
    maxbitr = _int(getattr(instance, "maxbitr", None))
    if minbitr is not None and maxbitr is not None and minbitr > maxbitr:
        issues.append(
            warning(join_path(path, "minbitr"), RULE_BITRATE_RANGE, f"minbitr {minbitr} exceeds maxbitr {maxbitr}")
        )
    return issues


def skip_settings(instance: Any, path: str) -> list[ValidationIssue]:
    """skipmin/skipafter only apply to skippable placements."""
    if getattr(instance, "skip", None) is not False:
        return []
    issues: list[ValidationIssue] = []
    for name in ("skipmin", "skipafter"):
        value = _int(getattr(instance, name, None))
        if value:
            issues.append(
                warning(
                    join_path(path, name),
                    RULE_SKIP_SETTINGS,
                    f"{name} is set but the placement is not skippable",
                )
            )
    return issues


def single_end_card(instance: Any, path: str) -> list[ValidationIssue]:
    comp = getattr(instance, "comp", None)
    if not isinstance(comp, list):
        return []
    end_cards = sum(1 for companion in comp if _int(getattr(companion, "vcm", None)) == 1)
    if end_cards > 1:
        return [
            warning(
                join_path(path, "comp"),
                RULE_SINGLE_END_CARD,
                f"{end_cards} companions are designated end cards; at most one is expected",
            )
        ]
    return []


def geo_coordinates(instance: Any, path: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for name, bound in (("lat", 90.0), ("lon", 180.0)):
        value = _number(getattr(instance, name, None))
        if value is not None and not -bound <= value <= bound:
            issues.append(
                warning(
                    join_path(path, name),
                    RULE_GEO_COORDINATES,
                    f"{name} {value} is outside -{bound:g}..{bound:g}",
                )
            )
    return issues


def user_demographics(instance: Any, path: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    gender = getattr(instance, "gender", None)
    if isinstance(gender, str) and gender not in GENDER_CODES:
        issues.append(
            warning(join_path(path, "gender"), RULE_GENDER_CODE, f"gender {gender!r} is not one of M, F, O")
        )
    yob = _int(getattr(instance, "yob", None))
    if yob is not None and not 1000 <= yob <= 9999:
        issues.append(
            warning(join_path(path, "yob"), RULE_YEAR_OF_BIRTH, f"yob {yob} is not a 4-digit year")
        )
    return issues


def mccmnc_format(instance: Any, path: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for name in ("mccmnc", "mccmncsim"):
        value = getattr(instance, name, None)
        if isinstance(value, str) and not _MCCMNC_RE.match(value):
            issues.append(
                warning(
                    join_path(path, name),
                    RULE_MCCMNC_FORMAT,
                    f"{name} {value!r} is not MCC-MNC with a dash (e.g. '310-005')",
                )
            )
    return issues


CROSS_FIELD_RULES: Mapping[str, tuple[CrossFieldRule, ...]] = {
    "Placement": (placement_subtype_required,),
    DISPLAY_PLACEMENT: (display_format_mixed,),
    DISPLAY_FORMAT: (size_mixed,),
    ASSET_FORMAT: (asset_subtype_required,),
    IMAGE_ASSET_FORMAT: (size_mixed,),
    VIDEO_PLACEMENT: (media_ranges, skip_settings, single_end_card),
    AUDIO_PLACEMENT: (media_ranges, skip_settings, single_end_card),
    "Geo": (geo_coordinates,),
    "User": (user_demographics,),
    "Device": (mccmnc_format,),
}
