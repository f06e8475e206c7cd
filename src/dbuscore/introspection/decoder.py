# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoder for introspection XML documents.

Converts the ``<node>`` element tree of an introspection document into an
:class:`~dbuscore.model.introspection.Object` tree. Decoding is all-or-nothing:
any invalid element anywhere in the document rejects the whole document.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import structlog
from pydantic import ValidationError

from dbuscore.model.introspection import (
    Interface,
    Method,
    Object,
    Parameter,
    Property,
    PropertyAccess,
    Signal,
)
from dbuscore.model.types import (
    InterfaceName,
    MemberName,
    ObjectPath,
    Signature,
    parse_interface_name,
    parse_member_name,
    parse_object_path,
    parse_single_type,
)

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############


def decode_introspection(default_path: ObjectPath | str, xml_text: str) -> Object | None:
    """Decode an introspection document into an Object tree.

    Args:
        default_path: Path of the root object when the root ``<node>`` carries
            no ``name`` attribute, or an empty one.
        xml_text: The XML document.

    Returns:
        The decoded Object, or None if the document is malformed or any
        element in it is invalid.
    """
    try:
        return _decode(default_path, xml_text)
    except _DecodeError as exc:
        logger.debug("introspection.decode_failed", reason=str(exc))
        return None
    except RecursionError:
        logger.debug("introspection.decode_failed", reason="Nodes nested too deeply")
        return None


# ################
# Implementation
# ################

_ACCESS_FLAGS: dict[str, frozenset[PropertyAccess]] = {
    "": frozenset(),
    "read": frozenset({PropertyAccess.READ}),
    "write": frozenset({PropertyAccess.WRITE}),
    "readwrite": frozenset({PropertyAccess.READ, PropertyAccess.WRITE}),
}


class _DecodeError(Exception):
    """Raised internally to abort decoding at the first invalid element."""


def _decode(default_path: ObjectPath | str, xml_text: str) -> Object:
    if isinstance(default_path, str):
        default_path = _object_path(default_path)

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise _DecodeError(f"Malformed XML: {exc}") from exc

    if root.tag != "node":
        raise _DecodeError(f"Expected a top-level <node> element, got <{root.tag}>")

    name = root.get("name", "")
    path = _object_path(name) if name else default_path
    try:
        return _parse_object(path, root)
    except ValidationError as exc:
        raise _DecodeError(str(exc)) from exc


def _parse_object(path: ObjectPath, element: ET.Element) -> Object:
    interfaces = tuple(_parse_interface(child) for child in element.findall("interface"))
    children = tuple(_parse_child(path, child) for child in element.findall("node"))
    return Object(path=path, interfaces=interfaces, children=children)


def _parse_child(parent: ObjectPath, element: ET.Element) -> Object:
    """Parse a nested ``<node>``, whose name is relative to *parent*."""
    name = element.get("name", "")
    if not name:
        raise _DecodeError(f"Child node of {parent.value!r} has no name")
    if parent.value == "/":
        path = _object_path("/" + name)
    else:
        path = _object_path(parent.value + "/" + name)
    return _parse_object(path, element)


def _parse_interface(element: ET.Element) -> Interface:
    return Interface(
        name=_interface_name(element.get("name", "")),
        methods=tuple(_parse_method(child) for child in element.findall("method")),
        signals=tuple(_parse_signal(child) for child in element.findall("signal")),
        properties=tuple(_parse_property(child) for child in element.findall("property")),
    )


def _parse_method(element: ET.Element) -> Method:
    """Parse a ``<method>``; arguments without a direction are inputs."""
    in_params: list[Parameter] = []
    out_params: list[Parameter] = []
    for arg in element.findall("arg"):
        direction = arg.get("direction", "")
        if direction in ("", "in"):
            in_params.append(_parse_parameter(arg))
        elif direction == "out":
            out_params.append(_parse_parameter(arg))
    return Method(
        name=_member_name(element.get("name", "")),
        in_params=tuple(in_params),
        out_params=tuple(out_params),
    )


def _parse_signal(element: ET.Element) -> Signal:
    """Parse a ``<signal>``; arguments without a direction are outputs."""
    params = [_parse_parameter(arg) for arg in element.findall("arg") if arg.get("direction", "") in ("", "out")]
    return Signal(name=_member_name(element.get("name", "")), params=tuple(params))


def _parse_parameter(element: ET.Element) -> Parameter:
    return Parameter(name=element.get("name", ""), type=_single_type(element.get("type", "")))


def _parse_property(element: ET.Element) -> Property:
    access = element.get("access", "")
    if access not in _ACCESS_FLAGS:
        raise _DecodeError(f"Invalid property access: {access!r}")
    return Property(
        name=element.get("name", ""),
        type=_single_type(element.get("type", "")),
        access=_ACCESS_FLAGS[access],
    )


def _object_path(text: str) -> ObjectPath:
    path = parse_object_path(text)
    if path is None:
        raise _DecodeError(f"Invalid object path: {text!r}")
    return path


def _interface_name(text: str) -> InterfaceName:
    name = parse_interface_name(text)
    if name is None:
        raise _DecodeError(f"Invalid interface name: {text!r}")
    return name


def _member_name(text: str) -> MemberName:
    name = parse_member_name(text)
    if name is None:
        raise _DecodeError(f"Invalid member name: {text!r}")
    return name


def _single_type(text: str) -> Signature:
    signature = parse_single_type(text)
    if signature is None:
        raise _DecodeError(f"Invalid single-type signature: {text!r}")
    return signature
