"""
multiform_validator - string/format validators (CEP, email, date, time, MAC, MD5,
postal code, port, base64, ASCII, decimal, number).
"""
from .date_formats import DATE_FORMATS, DATE_TIME_FORMATS, DateFormat
from .errors import InvalidArgumentError, NullReferenceError, ValidatorError
from .validators import (
    VALIDATORS,
    get_validator,
    guess_validator,
    is_ascii,
    is_base64,
    is_cep,
    is_date,
    is_decimal,
    is_email,
    is_mac_address,
    is_md5,
    is_number,
    is_port,
    is_postal_code,
    is_time,
)

__version__ = "0.1.0"

__all__ = [
    "DATE_FORMATS",
    "DATE_TIME_FORMATS",
    "DateFormat",
    "InvalidArgumentError",
    "NullReferenceError",
    "ValidatorError",
    "VALIDATORS",
    "get_validator",
    "guess_validator",
    "is_ascii",
    "is_base64",
    "is_cep",
    "is_date",
    "is_decimal",
    "is_email",
    "is_mac_address",
    "is_md5",
    "is_number",
    "is_port",
    "is_postal_code",
    "is_time",
]
