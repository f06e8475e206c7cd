# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoder producing canonical introspection XML from an Object tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from dbuscore.model.introspection import Interface, Method, Object, Parameter, Property, PropertyAccess, Signal

# ###############
# Public Interface
# ###############

DOCTYPE_PUBLIC_ID = "-//freedesktop//DTD D-BUS Object Introspection 1.0//EN"
DOCTYPE_SYSTEM_ID = "http://www.freedesktop.org/standards/dbus/1.0/introspect.dtd"
DOCTYPE = f'<!DOCTYPE node PUBLIC "{DOCTYPE_PUBLIC_ID}" "{DOCTYPE_SYSTEM_ID}">'


def encode_introspection(obj: Object) -> str:
    """Encode an Object tree as an introspection document.

    The root ``<node>`` is named by the object's absolute path; nested nodes
    are named relative to their immediate parent. Argument directions are
    always written out.
    """
    root = _object_element(obj, obj.path.value)
    ET.indent(root, space="  ")
    return DOCTYPE + "\n" + ET.tostring(root, encoding="unicode") + "\n"


# ################
# Implementation
# ################


def _object_element(obj: Object, name: str) -> ET.Element:
    element = ET.Element("node", {"name": name})
    for interface in obj.interfaces:
        element.append(_interface_element(interface))
    parent = obj.path.value
    # Character-count drop of the parent path and its separator, no segment checks.
    prefix_length = len(parent) if parent == "/" else len(parent) + 1
    for child in obj.children:
        element.append(_object_element(child, child.path.value[prefix_length:]))
    return element


def _interface_element(interface: Interface) -> ET.Element:
    element = ET.Element("interface", {"name": interface.name.value})
    for method in interface.methods:
        element.append(_method_element(method))
    for signal in interface.signals:
        element.append(_signal_element(signal))
    for prop in interface.properties:
        element.append(_property_element(prop))
    return element


def _method_element(method: Method) -> ET.Element:
    element = ET.Element("method", {"name": method.name.value})
    for param in method.in_params:
        element.append(_arg_element(param, "in"))
    for param in method.out_params:
        element.append(_arg_element(param, "out"))
    return element


def _signal_element(signal: Signal) -> ET.Element:
    element = ET.Element("signal", {"name": signal.name.value})
    for param in signal.params:
        element.append(_arg_element(param, "out"))
    return element


def _arg_element(param: Parameter, direction: str) -> ET.Element:
    return ET.Element("arg", {"name": param.name, "type": param.type.value, "direction": direction})


def _property_element(prop: Property) -> ET.Element:
    access = ""
    if PropertyAccess.READ in prop.access:
        access += "read"
    if PropertyAccess.WRITE in prop.access:
        access += "write"
    return ET.Element("property", {"name": prop.name, "type": prop.type.value, "access": access})
