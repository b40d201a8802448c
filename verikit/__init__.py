from verikit._id_card import is_valid_national_id
from verikit._patterns import (
    match_account,
    match_email,
    match_ip,
    match_password,
    match_password_strong,
    match_phone_num,
    match_postcode,
    match_real_name,
    match_regex,
    match_url,
    match_vehicle_number,
)
from verikit._settings import ImageSettings
from verikit.utils._scanner import NumericLiteralScanner, is_numeric_literal
