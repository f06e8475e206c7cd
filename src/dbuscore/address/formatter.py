# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting of Address values back into address strings."""

from __future__ import annotations

from collections.abc import Iterable

from dbuscore.address.parser import UNESCAPED_CHARACTERS
from dbuscore.model.address import Address

# ###############
# Public Interface
# ###############


def format_address(addr: Address) -> str:
    """Format *addr* as ``method:key=value,...`` with values percent-escaped.

    Keys are written verbatim. Parameters appear in the mapping's order.
    """
    params = ",".join(f"{key}={_escape(value)}" for key, value in addr.parameters.items())
    return f"{addr.method}:{params}"


def format_addresses(addrs: Iterable[Address]) -> str:
    """Format several addresses joined by ``;``."""
    return ";".join(format_address(addr) for addr in addrs)


# ################
# Implementation
# ################


def _escape(value: str) -> str:
    return "".join(c if c in UNESCAPED_CHARACTERS else f"%{ord(c):02X}" for c in value)
