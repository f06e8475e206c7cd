# Copyright 2026 dbuscore Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for bus address strings.

Grammar::

    addresses := (address (";" address)* ";"?)?
    address   := method ":" (param ("," param)* ","?)?
    method    := any characters except ":" and ";"
    param     := key "=" value
    key       := one or more characters except "=", ";" and ","
    value     := one or more of [0-9A-Za-z-_/\\*.] or "%" HEX HEX

Parsed addresses are built directly, without the checks of
:func:`dbuscore.model.address.address`.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from dbuscore.model.address import Address

logger = structlog.get_logger(__name__)

# ###############
# Public Interface
# ###############

UNESCAPED_CHARACTERS = frozenset("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_/\\*.")


def parse_address(text: str) -> Address | None:
    """Parse exactly one address; return None unless all of *text* is consumed."""
    parser = _Parser(text)
    try:
        result = parser.parse_address()
        parser.expect_end()
    except _AddressSyntaxError as exc:
        logger.debug("address.decode_failed", text=text, reason=str(exc))
        return None
    return result


def parse_addresses(text: str) -> list[Address] | None:
    """Parse a ``;``-separated list of addresses, allowing a trailing separator."""
    parser = _Parser(text)
    try:
        result = parser.parse_addresses()
        parser.expect_end()
    except _AddressSyntaxError as exc:
        logger.debug("address.decode_failed", text=text, reason=str(exc))
        return None
    return result


# ################
# Implementation
# ################

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class _AddressSyntaxError(Exception):
    """Raised internally when the input does not match the address grammar."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"Position {position}: {message}")
        self.position = position


class _Parser:
    """Single-pass parser over an address string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse_addresses(self) -> list[Address]:
        addresses: list[Address] = []
        while not self._at_end():
            addresses.append(self.parse_address())
            if not self._accept(";"):
                break
        return addresses

    def parse_address(self) -> Address:
        method = self._take_while(lambda c: c not in ":;")
        self._expect(":")
        parameters: dict[str, str] = {}
        while self._starts_parameter():
            key, value = self._parse_parameter()
            # Later occurrences of a key replace earlier ones.
            parameters[key] = value
            if not self._accept(","):
                break
        return Address(method=method, parameters=parameters)

    def expect_end(self) -> None:
        if not self._at_end():
            raise _AddressSyntaxError(f"Unexpected {self._current()!r}", self._pos)

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _starts_parameter(self) -> bool:
        return not self._at_end() and self._current() not in "=;,"

    def _parse_parameter(self) -> tuple[str, str]:
        key = self._take_while(lambda c: c not in "=;,")
        if not key:
            raise _AddressSyntaxError("Expected a parameter key", self._pos)
        self._expect("=")
        chars: list[str] = []
        while not self._at_end():
            c = self._current()
            if c == "%":
                chars.append(self._parse_escape())
            elif c in UNESCAPED_CHARACTERS:
                chars.append(c)
                self._pos += 1
            else:
                break
        if not chars:
            raise _AddressSyntaxError(f"Empty value for parameter {key!r}", self._pos)
        return key, "".join(chars)

    def _parse_escape(self) -> str:
        """Decode ``%XX`` at the cursor into the single character with that byte value."""
        digits = self._text[self._pos + 1 : self._pos + 3]
        if len(digits) != 2 or not all(d in _HEX_DIGITS for d in digits):
            raise _AddressSyntaxError("Invalid percent escape", self._pos)
        self._pos += 3
        return chr(int(digits, 16))

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _current(self) -> str:
        return self._text[self._pos]

    def _accept(self, char: str) -> bool:
        """Consume *char* if it is next; return whether it was consumed."""
        if not self._at_end() and self._current() == char:
            self._pos += 1
            return True
        return False

    def _expect(self, char: str) -> None:
        if not self._accept(char):
            found = "end of input" if self._at_end() else repr(self._current())
            raise _AddressSyntaxError(f"Expected {char!r}, got {found}", self._pos)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._pos
        while not self._at_end() and predicate(self._current()):
            self._pos += 1
        return self._text[start : self._pos]
