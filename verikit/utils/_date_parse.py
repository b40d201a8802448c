import logging
import re
from datetime import date
from typing import Any, Optional

logger = logging.getLogger(__name__)

SHORT_DATE_EXPR = r"(?P<year>\d{2})(?P<month>\d{2})(?P<day>\d{2})"

short_date_re = re.compile(SHORT_DATE_EXPR, re.ASCII)

# two digit years resolve into the century starting this many years ago
CENTURY_START_OFFSET = 80


def resolve_two_digit_year(year: int, today: Optional[date] = None) -> int:
    century_start = (today or date.today()).year - CENTURY_START_OFFSET
    resolved = century_start // 100 * 100 + year
    if resolved < century_start:
        resolved += 100
    return resolved


def parse_short_date(value: Any) -> Optional[date]:
    """Try to parse a ``yyMMdd`` string, returns ``None`` when it is not a real calendar date"""
    if not isinstance(value, str):
        return None

    match = short_date_re.fullmatch(value)
    if match is None:
        return None

    date_params = {k: int(v) for k, v in match.groupdict().items()}
    date_params["year"] = resolve_two_digit_year(date_params["year"])

    try:
        return date(**date_params)
    except ValueError:
        logger.debug("Rejected short date %r: not a calendar date", value)
        return None
