# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the bus identifier validators."""

import pytest
from pydantic import ValidationError

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

# ###############
# Object Paths
# ###############


class TestObjectPath:
    @pytest.mark.parametrize("text", ["/", "/org", "/org/example/Object_1", "/a/b/c"])
    def test_valid_paths(self, text: str) -> None:
        path = parse_object_path(text)
        assert path is not None
        assert str(path) == text

    @pytest.mark.parametrize("text", ["", "org", "//", "/org/", "/org//example", "/org/ex-ample", "/org.example"])
    def test_invalid_paths(self, text: str) -> None:
        assert parse_object_path(text) is None

    def test_constructor_rejects_invalid_path(self) -> None:
        with pytest.raises(ValidationError):
            ObjectPath(value="not/absolute")

    def test_paths_are_hashable_and_compare_by_value(self) -> None:
        assert ObjectPath(value="/a") == ObjectPath(value="/a")
        assert len({ObjectPath(value="/a"), ObjectPath(value="/a")}) == 1


# ###############
# Names
# ###############


class TestInterfaceName:
    @pytest.mark.parametrize("text", ["org.example", "org.example.Interface", "_a.b_1"])
    def test_valid_names(self, text: str) -> None:
        assert parse_interface_name(text) == InterfaceName(value=text)

    @pytest.mark.parametrize("text", ["", "org", ".org.example", "org.example.", "org..example", "org.1example"])
    def test_invalid_names(self, text: str) -> None:
        assert parse_interface_name(text) is None

    def test_too_long_name_is_rejected(self) -> None:
        name = "a." + "b" * 254
        assert len(name) == 256
        assert parse_interface_name(name) is None


class TestMemberName:
    @pytest.mark.parametrize("text", ["Echo", "_private", "get_value2"])
    def test_valid_names(self, text: str) -> None:
        assert parse_member_name(text) == MemberName(value=text)

    @pytest.mark.parametrize("text", ["", "1st", "Echo.Twice", "with-dash"])
    def test_invalid_names(self, text: str) -> None:
        assert parse_member_name(text) is None


# ###############
# Signatures
# ###############


class TestSignature:
    @pytest.mark.parametrize(
        ("text", "types"),
        [
            ("", []),
            ("s", ["s"]),
            ("su", ["s", "u"]),
            ("as", ["as"]),
            ("a{sv}", ["a{sv}"]),
            ("(ii)s", ["(ii)", "s"]),
            ("aa(sa{oi})", ["aa(sa{oi})"]),
            ("v", ["v"]),
        ],
    )
    def test_types_are_split_into_complete_types(self, text: str, types: list[str]) -> None:
        signature = parse_signature(text)
        assert signature is not None
        assert signature.types == types

    @pytest.mark.parametrize("text", ["a", "(", "()", "(s", "{sv}", "a{vs}", "a{s}", "a{sss}", "z"])
    def test_invalid_signatures(self, text: str) -> None:
        assert parse_signature(text) is None

    def test_array_depth_limit(self) -> None:
        assert parse_signature("a" * 32 + "s") is not None
        assert parse_signature("a" * 33 + "s") is None

    def test_struct_depth_limit(self) -> None:
        assert parse_signature("(" * 32 + "s" + ")" * 32) is not None
        assert parse_signature("(" * 33 + "s" + ")" * 33) is None

    def test_length_limit(self) -> None:
        assert parse_signature("s" * 255) is not None
        assert parse_signature("s" * 256) is None

    def test_empty_signature_has_no_types(self) -> None:
        signature = Signature(value="")
        assert signature.types == []
        assert not signature.is_single_type


class TestSingleType:
    @pytest.mark.parametrize("text", ["s", "a{sv}", "(sii)", "aai"])
    def test_single_complete_types(self, text: str) -> None:
        assert parse_single_type(text) == Signature(value=text)

    @pytest.mark.parametrize("text", ["", "ss", "(i)s", "a"])
    def test_zero_or_many_types_are_rejected(self, text: str) -> None:
        assert parse_single_type(text) is None
