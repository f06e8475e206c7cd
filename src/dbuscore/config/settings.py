# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings file model and loader."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dbuscore.address.environment import get_session_address, get_starter_address, get_system_address
from dbuscore.address.parser import parse_address
from dbuscore.model.address import Address
from dbuscore.model.types import parse_object_path

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".dbuscore.yaml"


class ConfigError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class Settings(BaseModel):
    """Explicit bus addresses and decoding defaults.

    Addresses left unset are taken from the environment.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    system_bus_address: str | None = Field(alias="system-bus-address", default=None)
    session_bus_address: str | None = Field(alias="session-bus-address", default=None)
    starter_address: str | None = Field(alias="starter-address", default=None)
    default_object_path: str = Field(alias="default-object-path", default="/")

    @field_validator("default_object_path")
    @classmethod
    def check_default_object_path(cls, value: str) -> str:
        if parse_object_path(value) is None:
            raise ValueError(f"Invalid object path: {value!r}")
        return value


@dataclass(frozen=True)
class BusAddresses:
    """The resolved well-known bus addresses; None where unavailable.

    Attributes:
        system: Address of the system bus.
        session: Address of the user's session bus.
        starter: Address of the bus that activated the current process.
    """

    system: Address | None
    session: Address | None
    starter: Address | None


def load_settings(path: Path) -> Settings:
    """Load and validate a settings file.

    An empty file yields default settings.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A validated Settings instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in settings file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: settings must be a YAML mapping")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings file '{path}': {exc}") from exc


def resolve_bus_addresses(settings: Settings, environ: Mapping[str, str] | None = None) -> BusAddresses:
    """Resolve the well-known addresses, preferring configured values over the environment."""
    return BusAddresses(
        system=_configured(settings.system_bus_address) or get_system_address(environ),
        session=_configured(settings.session_bus_address) or get_session_address(environ),
        starter=_configured(settings.starter_address) or get_starter_address(environ),
    )


# ################
# Implementation
# ################


def _configured(text: str | None) -> Address | None:
    if text is None:
        return None
    return parse_address(text)
