# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the bus address parser."""

import pytest

from dbuscore.address.parser import parse_address, parse_addresses
from dbuscore.model.address import Address, address

# ###############
# Single Addresses
# ###############


class TestParseAddress:
    def test_method_and_parameters(self) -> None:
        addr = parse_address("unix:path=/tmp/dbus-test,guid=1234")
        assert addr == Address(method="unix", parameters={"path": "/tmp/dbus-test", "guid": "1234"})

    def test_parameters_keep_input_order(self) -> None:
        addr = parse_address("unix:path=/tmp/dbus-test,guid=1234")
        assert addr is not None
        assert list(addr.parameters) == ["path", "guid"]

    def test_last_duplicate_key_wins(self) -> None:
        addr = parse_address("unix:a=1,a=2")
        assert addr is not None
        assert addr.parameters == {"a": "2"}

    def test_percent_escapes_are_decoded(self) -> None:
        addr = parse_address("tcp:host=%68%6f%73%74")
        assert addr is not None
        assert addr.parameters == {"host": "host"}

    def test_escape_hex_digits_are_case_insensitive(self) -> None:
        addr = parse_address("tcp:v=%2c%2C")
        assert addr is not None
        assert addr.parameters == {"v": ",,"}

    def test_escape_decodes_single_byte(self) -> None:
        addr = parse_address("unix:path=%C3%A9")
        assert addr is not None
        assert addr.parameters["path"] == "Ã©"

    def test_all_unescaped_characters_are_allowed(self) -> None:
        value = "09azAZ-_/\\*."
        addr = parse_address(f"unix:k={value}")
        assert addr is not None
        assert addr.parameters["k"] == value

    def test_method_without_parameters(self) -> None:
        assert parse_address("unix:") == Address(method="unix")

    def test_empty_method(self) -> None:
        assert parse_address(":k=v") == Address(method="", parameters={"k": "v"})

    def test_empty_address_parses_without_validation(self) -> None:
        parsed = parse_address(":")
        assert parsed == Address(method="", parameters={})
        assert address("", {}) is None

    def test_trailing_comma_is_allowed(self) -> None:
        assert parse_address("unix:a=1,") == Address(method="unix", parameters={"a": "1"})

    def test_method_ends_at_first_colon(self) -> None:
        addr = parse_address("bad:method:k=v")
        assert addr is not None
        assert addr.method == "bad"
        assert addr.parameters == {"method:k": "v"}

    def test_key_may_hold_unescaped_characters(self) -> None:
        addr = parse_address("unix:some key!=v")
        assert addr is not None
        assert addr.parameters == {"some key!": "v"}

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "unix",
            "unix:path",
            "unix:path=",
            "unix:=v",
            "unix:,",
            "unix:a=1,,b=2",
            "unix:path=/tmp/a b",
            "unix:path=%",
            "unix:path=%4",
            "unix:path=%zz",
            "unix:a=1;",
            "unix:a=1;tcp:",
            "un;ix:a=1",
        ],
    )
    def test_invalid_single_address(self, text: str) -> None:
        assert parse_address(text) is None


# ###############
# Address Lists
# ###############


class TestParseAddresses:
    def test_multiple_addresses(self) -> None:
        addrs = parse_addresses("unix:path=/a;tcp:host=localhost,port=1234")
        assert addrs == [
            Address(method="unix", parameters={"path": "/a"}),
            Address(method="tcp", parameters={"host": "localhost", "port": "1234"}),
        ]

    def test_trailing_separator(self) -> None:
        assert parse_addresses("unix:path=/a;") == [Address(method="unix", parameters={"path": "/a"})]

    def test_empty_string_is_empty_list(self) -> None:
        assert parse_addresses("") == []

    def test_single_address(self) -> None:
        assert parse_addresses("unix:") == [Address(method="unix")]

    @pytest.mark.parametrize("text", [";", "unix:;;", "unix:a=1;junk", "unix:a=1;;tcp:", "unix:a=1 ;tcp:"])
    def test_any_bad_segment_fails_everything(self, text: str) -> None:
        assert parse_addresses(text) is None
