# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value models for bus identifiers, introspection documents and addresses."""

from dbuscore.model.address import Address, address
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
    parse_signature,
    parse_single_type,
)

__all__ = [
    # Identifiers
    "ObjectPath",
    "InterfaceName",
    "MemberName",
    "Signature",
    "parse_object_path",
    "parse_interface_name",
    "parse_member_name",
    "parse_signature",
    "parse_single_type",
    # Introspection
    "PropertyAccess",
    "Parameter",
    "Method",
    "Signal",
    "Property",
    "Interface",
    "Object",
    # Addresses
    "Address",
    "address",
]
