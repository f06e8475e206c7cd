# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dbuscore command-line interface."""

import argparse
import json
import sys
from pathlib import Path

from dbuscore.address.formatter import format_address
from dbuscore.address.parser import parse_addresses
from dbuscore.config.logging import configure_logging
from dbuscore.config.settings import SETTINGS_FILE_NAME, ConfigError, Settings, load_settings, resolve_bus_addresses
from dbuscore.introspection.decoder import decode_introspection
from dbuscore.introspection.encoder import encode_introspection
from dbuscore.model.address import Address

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dbuscore CLI."""
    parser = argparse.ArgumentParser(
        prog="dbuscore",
        description="dbuscore: introspection XML and bus address tool",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON lines")
    parser.add_argument(
        "--config",
        help=f"Settings file (default: {SETTINGS_FILE_NAME} in the current directory, if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # introspect subcommand
    introspect_parser = subparsers.add_parser(
        "introspect",
        help="Validate an introspection document and print its canonical form",
        description="Decode an introspection XML document and re-encode it canonically.",
    )
    introspect_parser.add_argument("file", help="Introspection XML file ('-' reads standard input)")
    introspect_parser.add_argument(
        "--path",
        help="Object path for a root node without a name (default: from settings, else '/')",
    )

    # address subcommand
    address_parser = subparsers.add_parser(
        "address",
        help="Parse a bus address list",
        description="Parse a ';'-separated list of bus addresses and show each one.",
    )
    address_parser.add_argument("text", help="Address string, e.g. 'unix:path=/run/dbus/system_bus_socket'")
    address_parser.add_argument("--json", action="store_true", help="Print the addresses as a JSON list")

    # bus-addresses subcommand
    subparsers.add_parser(
        "bus-addresses",
        help="Show the system, session and starter bus addresses",
        description="Resolve the well-known bus addresses from settings and the environment.",
    )

    args = parser.parse_args()
    configure_logging(verbose=args.verbose, log_json=args.log_json)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        settings = _load_settings(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "introspect":
        return _cmd_introspect(args, settings)
    if args.command == "address":
        return _cmd_address(args)
    if args.command == "bus-addresses":
        return _cmd_bus_addresses(settings)
    return 0


def _load_settings(config: str | None) -> Settings:
    if config is not None:
        return load_settings(Path(config))
    default_file = Path.cwd() / SETTINGS_FILE_NAME
    if default_file.exists():
        return load_settings(default_file)
    return Settings()


def _cmd_introspect(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the introspect subcommand."""
    if args.file == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{args.file}': {exc}", file=sys.stderr)
            return 1

    default_path = args.path if args.path is not None else settings.default_object_path
    obj = decode_introspection(default_path, text)
    if obj is None:
        print(f"Error: '{args.file}' is not a valid introspection document.", file=sys.stderr)
        return 1

    sys.stdout.write(encode_introspection(obj))
    return 0


def _cmd_address(args: argparse.Namespace) -> int:
    """Handle the address subcommand."""
    addresses = parse_addresses(args.text)
    if addresses is None:
        print(f"Error: invalid address string {args.text!r}.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([addr.model_dump() for addr in addresses], indent=2))
        return 0

    for addr in addresses:
        print(format_address(addr))
        print(f"  method: {addr.method}")
        for key, value in addr.parameters.items():
            print(f"  {key} = {value}")
    return 0


def _cmd_bus_addresses(settings: Settings) -> int:
    """Handle the bus-addresses subcommand."""
    resolved = resolve_bus_addresses(settings)
    print(f"system:  {_describe(resolved.system)}")
    print(f"session: {_describe(resolved.session)}")
    print(f"starter: {_describe(resolved.starter)}")
    return 0


def _describe(addr: Address | None) -> str:
    return "(none)" if addr is None else format_address(addr)
