# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Well-known bus addresses taken from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from dbuscore.address.parser import parse_address
from dbuscore.model.address import Address

# ###############
# Public Interface
# ###############

SYSTEM_BUS_ADDRESS_VARIABLE = "DBUS_SYSTEM_BUS_ADDRESS"
SESSION_BUS_ADDRESS_VARIABLE = "DBUS_SESSION_BUS_ADDRESS"
STARTER_ADDRESS_VARIABLE = "DBUS_STARTER_ADDRESS"

DEFAULT_SYSTEM_BUS_ADDRESS = "unix:path=/var/run/dbus/system_bus_socket"


def get_system_address(environ: Mapping[str, str] | None = None) -> Address | None:
    """Return the system bus address, falling back to the well-known socket path."""
    text = _getenv(SYSTEM_BUS_ADDRESS_VARIABLE, environ)
    return parse_address(DEFAULT_SYSTEM_BUS_ADDRESS if text is None else text)


def get_session_address(environ: Mapping[str, str] | None = None) -> Address | None:
    """Return the session bus address, or None if it is unset or unparseable."""
    return _parse_variable(SESSION_BUS_ADDRESS_VARIABLE, environ)


def get_starter_address(environ: Mapping[str, str] | None = None) -> Address | None:
    """Return the address of the bus that started this process, if any."""
    return _parse_variable(STARTER_ADDRESS_VARIABLE, environ)


# ################
# Implementation
# ################


def _getenv(name: str, environ: Mapping[str, str] | None) -> str | None:
    if environ is None:
        environ = os.environ
    return environ.get(name)


def _parse_variable(name: str, environ: Mapping[str, str] | None) -> Address | None:
    text = _getenv(name, environ)
    if text is None:
        return None
    return parse_address(text)
