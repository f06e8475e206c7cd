# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validated bus identifiers: object paths, interface names, member names and signatures."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

# ###############
# Public Interface
# ###############

MAX_NAME_LENGTH = 255
MAX_SIGNATURE_LENGTH = 255
MAX_ARRAY_DEPTH = 32
MAX_STRUCT_DEPTH = 32


class _Identifier(BaseModel):
    """Base for string identifiers; accepts a bare ``str`` wherever a model is expected."""

    model_config = ConfigDict(frozen=True)

    value: str

    @model_validator(mode="before")
    @classmethod
    def wrap_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data

    def __str__(self) -> str:
        return self.value


class ObjectPath(_Identifier):
    """An absolute, slash-delimited object path such as ``/org/example/Object``."""

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if not _OBJECT_PATH_RE.fullmatch(value):
            raise ValueError(f"Invalid object path: {value!r}")
        return value


class InterfaceName(_Identifier):
    """A dot-delimited interface name such as ``org.example.Interface``."""

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if len(value) > MAX_NAME_LENGTH or not _INTERFACE_NAME_RE.fullmatch(value):
            raise ValueError(f"Invalid interface name: {value!r}")
        return value


class MemberName(_Identifier):
    """A method or signal name."""

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if len(value) > MAX_NAME_LENGTH or not _MEMBER_NAME_RE.fullmatch(value):
            raise ValueError(f"Invalid member name: {value!r}")
        return value


class Signature(_Identifier):
    """A type signature: zero or more complete types concatenated."""

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if _split_signature(value) is None:
            raise ValueError(f"Invalid signature: {value!r}")
        return value

    @property
    def types(self) -> list[str]:
        """The complete types this signature contains, in order."""
        # The value was checked on construction, so the split never fails here.
        return _split_signature(self.value) or []

    @property
    def is_single_type(self) -> bool:
        """True if the signature denotes exactly one complete type."""
        return len(self.types) == 1


def parse_object_path(text: str) -> ObjectPath | None:
    """Return *text* as an ObjectPath, or None if it is not a valid object path."""
    return _try(ObjectPath, text)


def parse_interface_name(text: str) -> InterfaceName | None:
    """Return *text* as an InterfaceName, or None if it is invalid."""
    return _try(InterfaceName, text)


def parse_member_name(text: str) -> MemberName | None:
    """Return *text* as a MemberName, or None if it is invalid."""
    return _try(MemberName, text)


def parse_signature(text: str) -> Signature | None:
    """Return *text* as a Signature, or None if it is invalid."""
    return _try(Signature, text)


def parse_single_type(text: str) -> Signature | None:
    """Return *text* as a Signature denoting exactly one complete type, or None."""
    signature = parse_signature(text)
    if signature is None or not signature.is_single_type:
        return None
    return signature


# ################
# Implementation
# ################

_OBJECT_PATH_RE = re.compile(r"/|(/[A-Za-z0-9_]+)+")
_INTERFACE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)+")
_MEMBER_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_BASIC_TYPE_CODES = frozenset("ybnqiuxtdhsog")


def _try(model: type[_Identifier], text: str) -> Any:
    try:
        return model(value=text)
    except ValidationError:
        return None


def _split_signature(text: str) -> list[str] | None:
    """Split *text* into complete types, or return None if it is malformed."""
    if len(text) > MAX_SIGNATURE_LENGTH:
        return None
    types: list[str] = []
    pos = 0
    while pos < len(text):
        end = _scan_type(text, pos, array_depth=0, struct_depth=0)
        if end is None:
            return None
        types.append(text[pos:end])
        pos = end
    return types


def _scan_type(text: str, pos: int, array_depth: int, struct_depth: int) -> int | None:
    """Scan one complete type starting at *pos*; return the index just past it."""
    if pos >= len(text):
        return None
    code = text[pos]
    if code in _BASIC_TYPE_CODES or code == "v":
        return pos + 1
    if code == "a":
        if array_depth >= MAX_ARRAY_DEPTH:
            return None
        if text.startswith("{", pos + 1):
            return _scan_dict_entry(text, pos + 1, array_depth + 1, struct_depth)
        return _scan_type(text, pos + 1, array_depth + 1, struct_depth)
    if code == "(":
        if struct_depth >= MAX_STRUCT_DEPTH:
            return None
        pos += 1
        fields = 0
        while pos < len(text) and text[pos] != ")":
            end = _scan_type(text, pos, array_depth, struct_depth + 1)
            if end is None:
                return None
            pos = end
            fields += 1
        if pos >= len(text) or fields == 0:
            return None
        return pos + 1
    return None


def _scan_dict_entry(text: str, pos: int, array_depth: int, struct_depth: int) -> int | None:
    """Scan a ``{KV}`` dict entry whose opening brace sits at *pos*."""
    if struct_depth >= MAX_STRUCT_DEPTH:
        return None
    pos += 1
    if pos >= len(text) or text[pos] not in _BASIC_TYPE_CODES:
        return None
    end = _scan_type(text, pos + 1, array_depth, struct_depth + 1)
    if end is None or not text.startswith("}", end):
        return None
    return end + 1
