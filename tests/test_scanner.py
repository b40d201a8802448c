from typing import Any

import pytest

from verikit.utils._scanner import NumericLiteralScanner, is_numeric_literal


@pytest.mark.parametrize(
    "value",
    [
        "0",
        "123",
        "-123",
        "+123",
        "1.",
        ".1",
        "1.5",
        "-123.45e-6",
        "1e10",
        "1E10",
        "1e+10",
        "1.5e-3",
        "0x1F",
        "0X1f",
        "0x1A",
        "-0xff",
        "1L",
        "5L",
        "1.2L",
        "1.0f",
        "5.0f",
        "2d",
        "2.5D",
        "1e5F",
    ],
)
def test_valid_literals(value: str) -> None:
    """It should accept decimal, signed, exponent, hexadecimal and suffixed literals"""
    assert is_numeric_literal(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "+",
        "-",
        ".",
        "e",
        "1e",
        "1E",
        "e1",
        "1.2.3",
        "12.3.4",
        "1e2e3",
        "1e2.5",
        "0x",
        "-0x",
        "0xG1",
        "0x1.5",
        "1+2",
        "--1",
        "+-1",
        "1e+",
        "1e+f",
        "1e5L",
        "L",
        "1a",
        "1 ",
        " 1",
        "1,000",
        "١٢٣",
        "1\0",
    ],
)
def test_invalid_literals(value: str) -> None:
    """It should reject malformed literals"""
    assert is_numeric_literal(value) is False


@pytest.mark.parametrize("value", [None, 12, 1.5, b"12", ["1"]])
def test_non_string_input(value: Any) -> None:
    """It should never raise on non-string input"""
    assert is_numeric_literal(value) is False


def test_scanner_is_reusable() -> None:
    """It should reset its state between scans"""
    scanner = NumericLiteralScanner()

    assert scanner.scan("1.5e3") is True
    assert scanner.has_exponent is True
    assert scanner.has_decimal_point is True

    assert scanner.scan("15") is True
    assert scanner.has_exponent is False
    assert scanner.has_decimal_point is False

    for _ in range(3):
        assert scanner.scan("1e") is False
        assert scanner.scan("-123.45e-6") is True


def test_scanner_tracks_exponent_sign() -> None:
    """It should reopen the sign window after an exponent marker and require exponent digits"""
    scanner = NumericLiteralScanner()

    assert scanner.scan("1e-5") is True
    assert scanner.sign_allowed is False
    assert scanner.digit_seen is False

    assert scanner.scan("1e-") is False
