"""Shared fixtures: the process-wide registry and descriptor, fresh services."""

import pytest

from adcom.config.runtime import RuntimeSettings
from adcom.normalization import Normalizer
from adcom.schema import (
    AssetFormat,
    Companion,
    DisplayPlacement,
    NativeFormat,
    VideoPlacement,
)
from adcom.validation import Validator
from adcom.wiring import build_enum_registry, build_object_service, build_schema_descriptor


@pytest.fixture
def settings():
    return RuntimeSettings(log_warnings=False)


@pytest.fixture
def enums():
    return build_enum_registry()


@pytest.fixture
def schema():
    return build_schema_descriptor()


@pytest.fixture
def validator(schema, enums, settings):
    return Validator(schema, enums, settings=settings)


@pytest.fixture
def normalizer(schema, settings):
    return Normalizer(schema, settings=settings)


@pytest.fixture
def service(settings):
    return build_object_service(settings)


_CHAIN_KINDS = (VideoPlacement, Companion, DisplayPlacement, NativeFormat, AssetFormat)
_CHAIN_WRAPPERS = (
    lambda child: VideoPlacement(comp=[child]),
    lambda child: Companion(display=child),
    lambda child: DisplayPlacement(nativefmt=child),
    lambda child: NativeFormat(asset=[child]),
    lambda child: AssetFormat(video=child),
)


@pytest.fixture
def make_chain():
    """Build a VideoPlacement > Companion > DisplayPlacement > NativeFormat > AssetFormat
    cycle ``levels`` messages deep; returns the nodes outermost first."""

    def _make(levels: int) -> list:
        nodes = [None] * levels
        nodes[-1] = _CHAIN_KINDS[(levels - 1) % len(_CHAIN_KINDS)]()
        for index in range(levels - 2, -1, -1):
            nodes[index] = _CHAIN_WRAPPERS[index % len(_CHAIN_WRAPPERS)](nodes[index + 1])
        return nodes

    return _make
