"""CLI for checking AdCOM JSON documents against the schema."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ..config.runtime import get_settings
from ..errors import ConfigError, DecodeError
from ..observability import configure_logging
from ..validation.issues import ValidationReport
from ..wiring import build_enum_registry, build_object_service, build_schema_descriptor


def _read_payload(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_report(report: ValidationReport, as_json: bool) -> None:
    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
        return
    for issue in report.issues:
        print(f"{issue.severity.value.upper():7} {issue.path}: {issue.message} [{issue.rule}]")
    status = "valid" if report.is_valid else "invalid"
    print(
        f"{report.message_type}: {status} "
        f"({len(report.errors)} errors, {len(report.warnings)} warnings)"
    )


def _cmd_validate(args: argparse.Namespace) -> int:
    svc = build_object_service()
    instance = svc.decode(args.type, _read_payload(args.file))
    report = svc.validate(instance, args.type)
    _print_report(report, args.json)
    return 0 if report.is_valid else 1


def _cmd_normalize(args: argparse.Namespace) -> int:
    svc = build_object_service()
    instance, report = svc.process(args.type, _read_payload(args.file), force=args.force)
    if not report.normalized:
        _print_report(report, as_json=False)
        print("Refusing to normalize an invalid object (use --force to override).", file=sys.stderr)
        return 1
    print(svc.encode(instance, indent=2))
    return 0


def _cmd_types(args: argparse.Namespace) -> int:
    for name in build_schema_descriptor().message_types():
        print(name)
    return 0


def _cmd_enums(args: argparse.Namespace) -> int:
    registry = build_enum_registry()
    usages = build_schema_descriptor().enum_usages() if args.usages else {}
    for name in registry.names():
        codes = registry.get(name).codes
        print(f"{name} ({len(codes)} codes)")
        for usage in usages.get(name, []):
            print(f"  {usage}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate and normalize AdCOM objects")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON document")
    validate_parser.add_argument("type", help="Message type, e.g. Placement or DisplayPlacement.EventSpec")
    validate_parser.add_argument("file", help="Path to a JSON document, or '-' for stdin")
    validate_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    validate_parser.set_defaults(handler=_cmd_validate)

    normalize_parser = subparsers.add_parser("normalize", help="Validate, fill defaults and print the result")
    normalize_parser.add_argument("type", help="Message type")
    normalize_parser.add_argument("file", help="Path to a JSON document, or '-' for stdin")
    normalize_parser.add_argument(
        "--force", action="store_true", help="Normalize even when ERROR issues are present"
    )
    normalize_parser.set_defaults(handler=_cmd_normalize)

    types_parser = subparsers.add_parser("types", help="List registered message types")
    types_parser.set_defaults(handler=_cmd_types)

    enums_parser = subparsers.add_parser("enums", help="List registered enums")
    enums_parser.add_argument("--usages", action="store_true", help="Show the fields using each enum")
    enums_parser.set_defaults(handler=_cmd_enums)

    args = parser.parse_args(argv)
    if not getattr(args, "handler", None):
        parser.print_help()
        return 2

    configure_logging(get_settings().log_level)
    try:
        return args.handler(args)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 2
    except (ConfigError, DecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
