import logging
import re
from typing import Any

from verikit.utils._date_parse import parse_short_date

logger = logging.getLogger(__name__)

LEGACY_LENGTH = 15
MODERN_LENGTH = 18

WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
CHECKSUM_CHARS = ("1", "0", "X", "9", "8", "7", "6", "5", "4", "3", "2")

# birth date position inside the legacy 15 character number
LEGACY_BIRTH_DATE = slice(6, 12)

digits_re = re.compile(r"\d+", re.ASCII)


def is_valid_national_id(value: Any) -> bool:
    """Validate a mainland Chinese identity card number.

    Legacy 15 character numbers must be all digits with a real ``yyMMdd`` birth date, modern 18
    character numbers must carry a matching weighted modulo 11 checksum in their last character.
    Any other input is rejected, the function never raises.
    """
    if not isinstance(value, str) or not value:
        return False

    if len(value) == LEGACY_LENGTH:
        return _is_legacy_format(value)
    if len(value) == MODERN_LENGTH:
        return _is_modern_format(value)
    return False


def _is_modern_format(value: str) -> bool:
    body, check = value[:-1], value[-1].upper()
    if not digits_re.fullmatch(body):
        logger.debug("Rejected national id %r: non-digit before the checksum", value)
        return False

    checksum = sum(weight * int(digit) for weight, digit in zip(WEIGHTS, body))
    return CHECKSUM_CHARS[checksum % 11] == check


def _is_legacy_format(value: str) -> bool:
    birth_date = parse_short_date(value[LEGACY_BIRTH_DATE])
    return birth_date is not None and _round_trips_as_integer(value)


def _round_trips_as_integer(value: str) -> bool:
    try:
        return str(int(value)) == value
    except ValueError:
        logger.debug("Rejected national id %r: not an integer", value)
        return False
