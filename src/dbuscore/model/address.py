# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Bus address model: a transport method plus method-specific parameters."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Address(BaseModel):
    """Where and how to reach a bus broker.

    The *method* (e.g. ``unix`` or ``tcp``) selects the transport; the
    *parameters* carry transport-specific settings such as ``path`` or
    ``host``. Constructing an Address directly performs no grammar checks;
    use :func:`address` for a validated value.

    ``parameters`` is a read-only view; an Address never changes after
    construction.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    parameters: Mapping[str, str] = _Field(default_factory=dict, validate_default=True)

    @field_validator("parameters")
    @classmethod
    def freeze_parameters(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("parameters")
    def serialize_parameters(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((self.method, frozenset(self.parameters.items())))


def address(method: str, parameters: Mapping[str, str]) -> Address | None:
    """Build an Address, or return None if *method* or *parameters* are invalid.

    The method may not contain ``:`` or ``;``. Every key and value must be
    non-empty and keys may not contain ``;``, ``,`` or ``=``. An address with
    neither a method nor any parameters is rejected.
    """
    if not _valid_method(method) or not _valid_parameters(parameters):
        return None
    if not method and not parameters:
        return None
    return Address(method=method, parameters=dict(parameters))


# ################
# Implementation
# ################


def _valid_method(method: str) -> bool:
    return not any(c in ":;" for c in method)


def _valid_parameters(parameters: Mapping[str, str]) -> bool:
    for key, value in parameters.items():
        if not key or not value:
            return False
        if any(c in ";,=" for c in key):
            return False
    return True
