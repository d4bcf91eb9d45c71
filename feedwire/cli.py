from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from feedwire.adapters import list_formats, list_protocols, resolve
from feedwire.errors import InvalidArgument, UnsupportedFormat, UnsupportedProtocol
from feedwire.models import AdapterConfig, FormatConfig, ProtocolConfig
from feedwire.settings import configure_logging, load_settings
from feedwire.validation import load_adapter_config, load_notification_config, validate_adapter_config


def _parse_pairs(values: list[str] | None, flag: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise InvalidArgument(f"{flag} expects key=value, got {item!r}")
        out[key] = value
    return out


def _config_from_args(args: argparse.Namespace) -> AdapterConfig:
    if args.config:
        return load_adapter_config(Path(args.config))
    if not args.protocol or not args.format:
        raise InvalidArgument("either --config or both --protocol and --format are required")
    return AdapterConfig(
        protocol=ProtocolConfig(type=args.protocol, parameters=_parse_pairs(args.param, "--param")),
        format=FormatConfig(type=args.format, parameters=_parse_pairs(args.format_param, "--format-param")),
    )


def cmd_protocols(args: argparse.Namespace) -> int:
    print(json.dumps(list_protocols(), indent=2))
    return 0


def cmd_formats(args: argparse.Namespace) -> int:
    print(json.dumps(list_formats(), indent=2))
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    try:
        adapter = resolve(_config_from_args(args))
    except (InvalidArgument, UnsupportedProtocol, UnsupportedFormat) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(adapter.to_dict(), indent=2))
    return 0


def cmd_validate_adapter(args: argparse.Namespace) -> int:
    config_path = Path(args.config)
    try:
        adapter = validate_adapter_config(load_adapter_config(config_path))
    except (InvalidArgument, UnsupportedProtocol, UnsupportedFormat) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print(f"OK: adapter config valid: {config_path} ({adapter.protocol}/{adapter.format})")
    return 0


def cmd_validate_notification(args: argparse.Namespace) -> int:
    config_path = Path(args.config)
    try:
        config = load_notification_config(config_path)
    except InvalidArgument as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    print(f"OK: notification config valid: {config_path} ({config.params.kind.value})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="feedwire", description="Data-source adapter and notification config tool")
    sub = p.add_subparsers(dest="cmd", required=True)

    protocols = sub.add_parser("protocols", help="List supported protocols and their parameters")
    protocols.set_defaults(func=cmd_protocols)

    formats = sub.add_parser("formats", help="List supported formats and their parameters")
    formats.set_defaults(func=cmd_formats)

    res = sub.add_parser("resolve", help="Resolve an adapter for a protocol/format pair")
    res.add_argument("--config", required=False, help="Adapter config YAML (protocol + format)")
    res.add_argument("--protocol", required=False)
    res.add_argument("--format", required=False)
    res.add_argument("--param", action="append", help="Protocol parameter key=value (repeatable)")
    res.add_argument("--format-param", action="append", help="Format parameter key=value (repeatable)")
    res.set_defaults(func=cmd_resolve)

    va = sub.add_parser("validate-adapter", help="Validate an adapter config YAML, including parameters")
    va.add_argument("--config", required=True)
    va.set_defaults(func=cmd_validate_adapter)

    vn = sub.add_parser("validate-notification", help="Validate a notification config YAML")
    vn.add_argument("--config", required=True)
    vn.set_defaults(func=cmd_validate_notification)

    return p


def main(argv: list[str] | None = None) -> int:
    configure_logging(load_settings())
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
