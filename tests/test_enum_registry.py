"""EnumRegistry tests: code 0 handling, vendor ranges, fail-fast construction."""

from enum import IntEnum

import pytest

from adcom.enums import ALL_ENUMS, PlacementPosition, SizeUnit
from adcom.errors import ConfigError
from adcom.registry import EnumRegistry


class TestCodeLookup:
    def test_registered_code_is_valid_and_known(self, enums):
        assert enums.is_valid_code("SizeUnit", SizeUnit.DIPS)
        assert not enums.is_unknown("SizeUnit", 1)

    def test_zero_is_valid_but_unknown(self, enums):
        assert enums.is_valid_code("SizeUnit", 0)
        assert enums.is_unknown("SizeUnit", 0)

    def test_named_zero_is_still_unknown(self, enums):
        assert enums.symbol("PlacementPosition", 0) == PlacementPosition.UNKNOWN.name
        assert enums.is_unknown("PlacementPosition", 0)

    def test_unregistered_code(self, enums):
        assert not enums.is_valid_code("SizeUnit", 4)
        assert enums.is_unknown("SizeUnit", 4)

    def test_bool_is_not_a_code(self, enums):
        assert not enums.is_valid_code("SizeUnit", True)
        assert enums.is_unknown("SizeUnit", True)
        assert enums.symbol("SizeUnit", True) is None

    def test_vendor_specific_range(self, enums):
        assert enums.is_valid_code("APIFramework", 500)
        assert enums.is_valid_code("APIFramework", 12345)
        assert not enums.is_unknown("APIFramework", 501)
        assert not enums.is_valid_code("APIFramework", 499)

    def test_lists_without_vendor_range_reject_high_codes(self, enums):
        assert not enums.is_valid_code("SizeUnit", 500)

    def test_all_lists_registered(self, enums):
        assert len(enums.names()) == len(ALL_ENUMS) == 33
        assert "DOOHVenueType" in enums.names()


class TestUnregisteredEnum:
    def test_is_valid_code_raises(self, enums):
        with pytest.raises(ConfigError):
            enums.is_valid_code("NoSuchEnum", 1)

    def test_is_unknown_raises(self, enums):
        with pytest.raises(ConfigError):
            enums.is_unknown("NoSuchEnum", 0)


class TestConstruction:
    def test_duplicate_enum_rejected(self):
        with pytest.raises(ConfigError, match="twice"):
            EnumRegistry.from_enum_types([SizeUnit, SizeUnit])

    def test_negative_code_rejected(self):
        class Broken(IntEnum):
            BAD = -1

        with pytest.raises(ConfigError, match="negative"):
            EnumRegistry.from_enum_types([Broken])

    def test_vendor_range_overlapping_codes_rejected(self):
        with pytest.raises(ConfigError, match="overlapping"):
            EnumRegistry.from_enum_types([SizeUnit], vendor_ranges={"SizeUnit": 2})

    def test_vendor_range_for_unknown_enum_rejected(self):
        with pytest.raises(ConfigError, match="unknown enums"):
            EnumRegistry.from_enum_types([SizeUnit], vendor_ranges={"Other": 500})
