from curses.ascii import isdigit, isxdigit
from typing import Any

TERMINATOR = "\0"
SIGNS = ("+", "-")
HEX_PREFIXES = ("0x", "0X")
EXPONENT_MARKERS = ("e", "E")
DECIMAL_POINT = "."
REAL_SUFFIXES = ("d", "D", "f", "F")
INTEGER_SUFFIXES = ("l", "L")


class NumericLiteralScanner:
    """Single pass scanner deciding whether a string is a numeric literal.

    Accepts signed decimals, exponent forms, hexadecimal literals with a ``0x`` prefix and the
    ``d``/``f`` (real) and ``l`` (integer) type suffixes.
    """

    input: str
    look: str
    index: int
    has_exponent: bool
    has_decimal_point: bool
    sign_allowed: bool
    digit_seen: bool

    def __init__(self) -> None:
        self.__reset("")

    def scan(self, input_string: Any) -> bool:
        if not isinstance(input_string, str) or not input_string:
            return False

        self.__reset(input_string)
        start = 1 if self.input[0] in SIGNS else 0

        if self.input[start : start + 2] in HEX_PREFIXES:
            return self.__scan_hex(start + 2)

        # the last character may be a type suffix, it is checked separately
        last = len(self.input) - 1
        self.index = start
        while self.index < last:
            self.__next()
            if not self.__consume():
                return False

        if self.index >= len(self.input):
            return not self.sign_allowed and self.digit_seen

        self.__next()
        return self.__accept_last()

    def __scan_hex(self, index: int) -> bool:
        digits = self.input[index:]
        if not digits:
            return False
        return all(isxdigit(c) for c in digits)

    def __consume(self) -> bool:
        if isdigit(self.look):
            self.digit_seen = True
            self.sign_allowed = False
            return True

        if self.look == DECIMAL_POINT:
            if self.has_decimal_point or self.has_exponent:
                return False
            self.has_decimal_point = True
            return True

        if self.look in EXPONENT_MARKERS:
            if self.has_exponent or not self.digit_seen:
                return False
            self.has_exponent = True
            self.sign_allowed = True
            return True

        if self.look in SIGNS:
            if not self.sign_allowed:
                return False
            # the exponent needs digits of its own
            self.sign_allowed = False
            self.digit_seen = False
            return True

        return False

    def __accept_last(self) -> bool:
        if isdigit(self.look):
            return True

        if self.look in EXPONENT_MARKERS:
            return False

        if self.look == DECIMAL_POINT:
            return self.digit_seen and not self.has_decimal_point and not self.has_exponent

        if self.look in REAL_SUFFIXES and not self.sign_allowed:
            return self.digit_seen

        if self.look in INTEGER_SUFFIXES:
            return self.digit_seen and not self.has_exponent

        return False

    def __reset(self, input_string: str) -> None:
        self.input = input_string
        self.look = ""
        self.index = 0
        self.has_exponent = False
        self.has_decimal_point = False
        self.sign_allowed = False
        self.digit_seen = False

    def __next(self) -> None:
        if self.index >= len(self.input):
            self.look = TERMINATOR
        else:
            self.look = self.input[self.index]
            self.index += 1


def is_numeric_literal(value: Any) -> bool:
    return NumericLiteralScanner().scan(value)
