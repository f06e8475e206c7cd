# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing and formatting of bus address strings."""

from dbuscore.address.environment import get_session_address, get_starter_address, get_system_address
from dbuscore.address.formatter import format_address, format_addresses
from dbuscore.address.parser import parse_address, parse_addresses

__all__ = [
    "parse_address",
    "parse_addresses",
    "format_address",
    "format_addresses",
    "get_system_address",
    "get_session_address",
    "get_starter_address",
]
