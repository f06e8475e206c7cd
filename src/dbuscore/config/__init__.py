# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings file handling and logging setup."""

from dbuscore.config.logging import configure_logging
from dbuscore.config.settings import (
    SETTINGS_FILE_NAME,
    BusAddresses,
    ConfigError,
    Settings,
    load_settings,
    resolve_bus_addresses,
)

__all__ = [
    "configure_logging",
    "ConfigError",
    "Settings",
    "BusAddresses",
    "SETTINGS_FILE_NAME",
    "load_settings",
    "resolve_bus_addresses",
]
