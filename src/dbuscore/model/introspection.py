# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Introspection entities: objects, interfaces, methods, signals, parameters and properties."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from dbuscore.model.types import InterfaceName, MemberName, ObjectPath, Signature

# ###############
# Public Interface
# ###############


class PropertyAccess(Enum):
    """A capability a property grants to callers."""

    READ = "read"
    WRITE = "write"


class Parameter(BaseModel):
    """A named argument of a method or signal, typed by a single complete type."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: Signature

    @field_validator("type")
    @classmethod
    def require_single_type(cls, value: Signature) -> Signature:
        return _require_single_type(value)


class Method(BaseModel):
    """A callable member with input and output parameters."""

    model_config = ConfigDict(frozen=True)

    name: MemberName
    in_params: tuple[Parameter, ...] = ()
    out_params: tuple[Parameter, ...] = ()


class Signal(BaseModel):
    """A broadcast member carrying output parameters."""

    model_config = ConfigDict(frozen=True)

    name: MemberName
    params: tuple[Parameter, ...] = ()


class Property(BaseModel):
    """A named, typed attribute with a set of access capabilities.

    ``access`` is a capability set: it may be empty, hold either flag, or both.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: Signature
    access: frozenset[PropertyAccess] = frozenset()

    @field_validator("type")
    @classmethod
    def require_single_type(cls, value: Signature) -> Signature:
        return _require_single_type(value)


class Interface(BaseModel):
    """A named group of methods, signals and properties."""

    model_config = ConfigDict(frozen=True)

    name: InterfaceName
    methods: tuple[Method, ...] = ()
    signals: tuple[Signal, ...] = ()
    properties: tuple[Property, ...] = ()


class Object(BaseModel):
    """An addressable object with its interfaces and child objects.

    Every child path extends the parent path: below ``/`` a child is any
    other path, elsewhere it starts with the parent path followed by ``/``.
    """

    model_config = ConfigDict(frozen=True)

    path: ObjectPath
    interfaces: tuple[Interface, ...] = ()
    children: tuple[Object, ...] = ()

    @model_validator(mode="after")
    def check_child_paths(self) -> Object:
        for child in self.children:
            if not is_child_path(self.path, child.path):
                raise ValueError(f"Child path {child.path.value!r} does not extend {self.path.value!r}")
        return self


def is_child_path(parent: ObjectPath, child: ObjectPath) -> bool:
    """Return True if *child* lies strictly below *parent*."""
    if parent.value == "/":
        return child.value != "/"
    return child.value.startswith(parent.value + "/")


# ################
# Implementation
# ################


def _require_single_type(value: Signature) -> Signature:
    if not value.is_single_type:
        raise ValueError(f"Signature {value.value!r} must denote exactly one complete type")
    return value


# Resolve forward references in self-referential models.
Object.model_rebuild()
