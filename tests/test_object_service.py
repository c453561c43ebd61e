"""ObjectService and codec tests: decode, check, normalize and re-encode."""

import copy
import json
import logging

import pytest

from adcom import codec
from adcom.enums import SizeUnit
from adcom.errors import ConfigError, DecodeError
from adcom.schema import DisplayPlacement, EventSpec, Geo, Placement
from adcom.services import ObjectService
from adcom.validation import Severity, ValidationReport
from adcom.validation.issues import error, warning


def _make_payload() -> dict:
    return {
        "tagid": "slot-7",
        "secure": 1,
        "display": {
            "w": 300,
            "h": 250,
            "api": [3, 501],
            "event": [{"type": 1, "method": [1], "jstrk": ["tracker.example"]}],
        },
        "video": {"mindur": 5, "maxdur": 30, "mime": ["video/mp4"]},
        "ext": {"500": {"vendor": "acme"}},
    }


class TestCodec:
    def test_decode_leaves_defaults_unset(self):
        placement = codec.decode(Placement, json.dumps(_make_payload()))
        assert placement.display.unit is None
        assert placement.video.boxing is None
        assert placement.display.event[0].wjs is None

    def test_decode_mapping(self):
        placement = codec.decode(Placement, _make_payload())
        assert placement.ext == {500: {"vendor": "acme"}}

    def test_decode_bytes(self):
        placement = codec.decode(Placement, json.dumps(_make_payload()).encode("utf-8"))
        assert placement.tagid == "slot-7"

    def test_malformed_json(self):
        with pytest.raises(DecodeError):
            codec.decode(Placement, "{")

    def test_incompatible_value(self):
        with pytest.raises(DecodeError, match="Placement"):
            codec.decode(Placement, '{"display": {"w": "wide"}}')

    def test_string_in_bool_field_is_not_coerced(self):
        with pytest.raises(DecodeError, match="wjs"):
            codec.decode(EventSpec, '{"type": 1, "wjs": "no"}')

    def test_integer_in_bool_field_is_not_coerced(self):
        with pytest.raises(DecodeError, match="wpx"):
            codec.decode(EventSpec, '{"type": 1, "wpx": 0}')

    def test_bool_in_enum_field_is_not_coerced(self):
        with pytest.raises(DecodeError, match="pos"):
            codec.decode(Placement, '{"display": {"pos": true}}')

    def test_string_in_int_field_is_not_coerced(self):
        with pytest.raises(DecodeError, match="ssai"):
            codec.decode(Placement, {"ssai": "2", "display": {}})

    def test_float_field_accepts_integers(self):
        geo = codec.decode(Geo, '{"lat": 10, "lon": -20.5}')
        assert geo.lat == 10.0

    def test_string_extension_keys_decode(self):
        placement = codec.decode(Placement, '{"display": {}, "ext": {"150": true}}')
        assert placement.ext == {150: True}

    def test_unsupported_payload(self):
        with pytest.raises(DecodeError, match="unsupported"):
            codec.decode(Placement, 42)

    def test_encode_omits_unset_fields(self):
        assert json.loads(codec.encode(DisplayPlacement(w=300))) == {"w": 300}
        assert codec.to_dict(DisplayPlacement(w=300, mime=[])) == {"w": 300, "mime": []}


class TestRoundTrip:
    def test_round_trip_fills_exactly_the_defaults(self, service):
        payload = _make_payload()
        instance, report = service.process("Placement", json.dumps(payload))

        assert report.is_valid
        assert report.normalized
        assert report.issues == []

        expected = copy.deepcopy(payload)
        expected["display"]["unit"] = SizeUnit.DIPS
        expected["display"]["event"][0]["wjs"] = True
        expected["display"]["event"][0]["wpx"] = True
        expected["video"]["unit"] = SizeUnit.DIPS
        expected["video"]["boxing"] = True
        assert json.loads(service.encode(instance)) == expected

    def test_unknown_fields_survive(self, service):
        payload = _make_payload()
        payload["display"]["futurefield"] = {"keep": True}
        instance, report = service.process("Placement", payload)

        assert report.is_valid
        assert [(i.path, i.rule) for i in report.warnings] == [("$.display.futurefield", "unknown_field")]
        assert json.loads(service.encode(instance))["display"]["futurefield"] == {"keep": True}


class TestCheck:
    def test_invalid_object_is_not_normalized(self, service):
        instance, report = service.process("Placement", '{"tagid": "t"}')
        assert not report.is_valid
        assert not report.normalized
        assert [i.rule for i in report.errors] == ["placement_subtype_required"]

    def test_invalid_event_left_untouched(self, service):
        instance, report = service.process("Placement", '{"display": {"event": [{}]}}')
        assert not report.is_valid
        assert instance.display.unit is None
        assert instance.display.event[0].wjs is None

    def test_force_normalizes_anyway(self, service):
        instance, report = service.process("Placement", '{"display": {"event": [{}]}}', force=True)
        assert not report.is_valid
        assert report.normalized
        assert instance.display.unit == SizeUnit.DIPS

    def test_warnings_do_not_block_normalization(self, service):
        instance, report = service.process("Placement", '{"display": {"pos": 77}}')
        assert report.is_valid
        assert report.normalized
        assert [i.severity for i in report.issues] == [Severity.WARNING]

    def test_check_by_model(self, service):
        placement = Placement(display=DisplayPlacement())
        report = service.check(placement, Placement)
        assert report.message_type == "Placement"
        assert placement.display.unit == SizeUnit.DIPS

    def test_skipped_normalization_is_logged(self, schema, validator, normalizer, caplog):
        logger = logging.getLogger("adcom.test_service")
        svc = ObjectService(schema, validator, normalizer, logger=logger)
        caplog.set_level(logging.INFO, logger="adcom.test_service")
        svc.check(Placement(tagid="t"), "Placement")
        records = [r for r in caplog.records if r.getMessage() == "normalization_skipped"]
        assert len(records) == 1
        assert records[0].message_type == "Placement"
        assert records[0].errors == 1

    def test_forced_check_of_deep_chain(self, service, make_chain):
        nodes = make_chain(1501)
        report = service.check(nodes[0], "VideoPlacement", force=True)
        assert [i.rule for i in report.errors] == ["max_depth"]
        assert report.normalized
        assert nodes[0].boxing is True
        assert nodes[1500].boxing is None

    def test_unregistered_type(self, service):
        with pytest.raises(ConfigError):
            service.process("Nope", "{}")


class TestValidationReport:
    def test_to_dict(self):
        report = ValidationReport("Placement")
        report.add(error("$", "placement_subtype_required", "missing subtype")).add(
            warning("$.secure", "value_out_of_set", "value 2 is not one of 0, 1")
        )
        data = report.to_dict()
        assert data["message_type"] == "Placement"
        assert data["valid"] is False
        assert data["normalized"] is False
        assert data["summary"] == {"error_count": 1, "warning_count": 1}
        assert data["errors"][0] == {
            "severity": "error",
            "path": "$",
            "message": "missing subtype",
            "rule": "placement_subtype_required",
        }

    def test_empty_report_is_valid(self):
        assert ValidationReport("Geo").is_valid
