import logging
import re
from typing import Any, Pattern, Union

logger = logging.getLogger(__name__)

CJK_EXPR = "一-龥"
OCTET_EXPR = r"((?!\d\d\d)\d+|1\d\d|2[0-4]\d|25[0-5])"
PROVINCES = "京津晋冀蒙辽吉黑沪苏浙皖闽赣鲁豫鄂湘粤桂琼川贵云藏陕甘青宁新渝"

# Latin names may hold single spaces between words, Chinese names hold none
real_name_re = re.compile(rf"^([{CJK_EXPR}]+|[a-zA-Z]+(\s[a-zA-Z]+)*\s?)$", re.ASCII)
phone_num_re = re.compile(r"^(\+?\d{2}-?)?(1[0-9])\d{9}$", re.ASCII)
account_re = re.compile(rf"[{CJK_EXPR}a-zA-Z0-9\-]{{4,20}}", re.ASCII)
password_re = re.compile(r"^[a-zA-Z0-9]{6,12}$")
# letters and digits only, at least one of each
password_strong_re = re.compile(r"(?![0-9]+$)(?![a-zA-Z]+$)[0-9A-Za-z]{6,}")
email_re = re.compile(
    r"^[a-z0-9!#$%&'*+/=?^_`{|}~-]+"
    r"(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+"
    r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?$"
)
ip_re = re.compile(rf"\b{OCTET_EXPR}\.{OCTET_EXPR}\.{OCTET_EXPR}\.{OCTET_EXPR}\b", re.ASCII)
url_re = re.compile(r"^((https?)|(ftp)):\/\/[\w-]+\.\w{2,4}(\/.*)?$", re.ASCII | re.IGNORECASE)
vehicle_number_re = re.compile(rf"^[{PROVINCES}]?[A-Z][A-HJ-NP-Z0-9学挂港澳练]{{5}}$")
postcode_re = re.compile(r"[1-9]\d{5}", re.ASCII)


def _full_match(pattern: Pattern, value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def match_regex(pattern: Union[str, Pattern], value: Any) -> bool:
    """Check that the whole value matches the pattern, an invalid pattern never matches"""
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error:
            logger.debug("Invalid pattern %r", pattern, exc_info=True)
            return False
    return _full_match(pattern, value)


def match_real_name(value: Any) -> bool:
    return _full_match(real_name_re, value)


def match_phone_num(value: Any) -> bool:
    """Eleven digit mobile number starting with 1, optionally prefixed by a two digit country code"""
    return _full_match(phone_num_re, value)


def match_account(value: Any) -> bool:
    return _full_match(account_re, value)


def match_password(value: Any) -> bool:
    return _full_match(password_re, value)


def match_password_strong(value: Any) -> bool:
    return _full_match(password_strong_re, value)


def match_email(value: Any) -> bool:
    return _full_match(email_re, value)


def match_ip(value: Any) -> bool:
    return _full_match(ip_re, value)


def match_url(value: Any) -> bool:
    """Match http, https and ftp urls of the form ``scheme://host.tld/optional/path``"""
    return _full_match(url_re, value)


def match_vehicle_number(value: Any) -> bool:
    """Match civilian vehicle plates of mainland China, latin letters are compared upper-cased"""
    if not isinstance(value, str):
        return False
    return _full_match(vehicle_number_re, value.upper())


def match_postcode(value: Any) -> bool:
    return _full_match(postcode_re, value)
