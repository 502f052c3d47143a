import math
import re
from typing import Callable, Dict, Tuple

from .date_formats import DATE_FORMATS, DATE_TIME_FORMATS
from .errors import InvalidArgumentError, NullReferenceError

BASE64_RE = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?", re.ASCII)
DOUBLE_BLANKS = "".join(chr(code) for code in range(0x21))
DOUBLE_RE = re.compile(
    r"[\x00-\x20]*[+-]?"
    r"(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)"
    r"[\x00-\x20]*",
    re.ASCII,
)
NON_DIGIT_RE = re.compile(r"[^0-9]")
EMAIL_FIRST_CHAR_RE = re.compile(r"[^a-zA-Z]")
EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$", re.ASCII)
MAC_RE = re.compile(r"([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})", re.ASCII)
MD5_RE = re.compile(r"[a-fA-F0-9]{32}", re.ASCII)
NUMBER_RE = re.compile(r"-?\d+", re.ASCII)
PORT_RE = re.compile(r"[+-]?\d+", re.ASCII)
TIME_RE = re.compile(r"(?:2[0-3]|1\d|0?\d):[0-5]\d(?::[0-5]\d)?(?: [APap][Mm])?", re.ASCII)

POSTAL_CODE_RES = (
    re.compile(r"\d{5}(-\d{4})?", re.ASCII),  # US ZIP
    re.compile(r"[A-Za-z]\d[A-Za-z] \d[A-Za-z]\d", re.ASCII),  # Canada
    re.compile(r"[A-Za-z]{1,2}\d[A-Za-z\d]? \d[A-Za-z]{2}", re.ASCII),  # UK
    re.compile(r"\d{5}", re.ASCII),  # France, Spain, Italy, Germany
    re.compile(r"\d{4}", re.ASCII),  # Netherlands, South Africa, Switzerland
    re.compile(r"\d{3}-\d{4}", re.ASCII),  # Japan
    re.compile(r"\d{5}-\d{3}", re.ASCII),  # Brazil
)

MIN_PORT = 0
MAX_PORT = 65535


def _require(value, message: str | None = None) -> None:
    if value is None or value == "":
        raise InvalidArgumentError(message) if message else InvalidArgumentError()


def is_ascii(value: str) -> bool:
    _require(value)
    return all(ord(ch) < 128 for ch in value)


def is_base64(value: str) -> bool:
    _require(value)
    return bool(BASE64_RE.fullmatch(value))


def is_cep(cep: str) -> bool:
    """Brazilian CEP: 8 digits once separators are removed (``12345-678``).

    There is no None guard here; ``is_cep(None)`` raises ``TypeError``.
    """
    if len(cep) < 8 or len(cep) > 10:
        return False
    return len(NON_DIGIT_RE.sub("", cep)) == 8


def is_date(date_str: str) -> bool:
    """Accept any date or date-time layout from the format tables.

    Date-only layouts are tried before date-time layouts and the first strict
    parse wins.
    """
    _require(date_str, "Date string cannot be null or empty")
    for fmt in DATE_FORMATS:
        if fmt.parse(date_str) is not None:
            return True
    for fmt in DATE_TIME_FORMATS:
        if fmt.parse(date_str) is not None:
            return True
    return False


def is_decimal(value: str) -> bool:
    """True only for numbers with a fractional part: ``"10.5"`` yes, ``"10.0"`` no.

    Accepts the same text as a double literal: surrounding blanks, a sign,
    an exponent, an ``f``/``d`` suffix, ``NaN`` and ``Infinity``. NaN and the
    infinities leave a NaN remainder, so they count as decimal.
    """
    _require(value)
    if not DOUBLE_RE.fullmatch(value):
        return False
    parsed = float(value.strip(DOUBLE_BLANKS).rstrip("fFdD"))
    if not math.isfinite(parsed):
        return True
    return parsed % 1 != 0


def is_email(email: str) -> bool:
    if email is None:
        raise NullReferenceError("Email cannot be null")

    if EMAIL_FIRST_CHAR_RE.match(email):
        return False
    # "$" also matches before a single trailing newline.
    if not EMAIL_RE.search(email):
        return False

    at = email.index("@")
    local_part = email[:at]
    domain = email[at + 1 :]

    if email[at + 1].isdigit():
        return False
    if email[email.rindex(".") + 1].isdigit():
        return False
    if ".." in local_part or local_part.endswith("."):
        return False

    # Runs over the whole address, local part included.
    parts = email.split(".")
    if len(parts) > 2 and parts[-2] == parts[-3]:
        return False

    if email.count("@") > 1:
        return False
    if ".." in domain:
        return False

    labels = domain.split(".")
    return len(labels) == len(set(labels))


def is_mac_address(mac_address: str) -> bool:
    _require(mac_address)
    return bool(MAC_RE.fullmatch(mac_address))


def is_md5(value: str) -> bool:
    _require(value)
    return bool(MD5_RE.fullmatch(value))


def is_number(value: str) -> bool:
    _require(value)
    return bool(NUMBER_RE.fullmatch(value))


def is_port(port: int | str) -> bool:
    """Port in 0..65535, given as an int or as a decimal string."""
    if isinstance(port, bool):
        return False
    if isinstance(port, int):
        return MIN_PORT <= port <= MAX_PORT
    _require(port)
    if not PORT_RE.fullmatch(port):
        return False
    return MIN_PORT <= int(port) <= MAX_PORT


def is_postal_code(postal_code: str) -> bool:
    if not isinstance(postal_code, str) or not postal_code:
        raise InvalidArgumentError("Input value must be a string.")
    return any(regex.fullmatch(postal_code) for regex in POSTAL_CODE_RES)


def is_time(time: str) -> bool:
    _require(time)
    return bool(TIME_RE.fullmatch(time))


VALIDATORS: Dict[str, Callable[..., bool]] = {
    "ascii": is_ascii,
    "base64": is_base64,
    "cep": is_cep,
    "date": is_date,
    "decimal": is_decimal,
    "email": is_email,
    "mac": is_mac_address,
    "md5": is_md5,
    "number": is_number,
    "port": is_port,
    "postal_code": is_postal_code,
    "time": is_time,
}

HINTS: Dict[str, str] = {
    "ascii": "somente caracteres ASCII",
    "base64": "texto em Base64",
    "cep": "CEP no formato 99999-999",
    "date": "data (aaaa-mm-dd, dd/mm/aaaa, dd-Jan-aaaa...)",
    "decimal": "número com casas decimais (ex.: 10.5)",
    "email": "e-mail válido",
    "mac": "endereço MAC (AA:BB:CC:DD:EE:FF)",
    "md5": "hash MD5 com 32 caracteres hexadecimais",
    "number": "número inteiro (ex.: -42)",
    "port": "porta entre 0 e 65535",
    "postal_code": "código postal (ZIP, CEP, UK, CA, JP...)",
    "time": "hora no formato HH:mm[:ss] [AM|PM]",
}

# Checked in order against the field name's tokens; the first hit wins.
FIELD_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("CEP",), "cep"),
    (("EMAIL", "MAIL"), "email"),
    (("POSTAL", "ZIP", "ZIPCODE", "POSTCODE"), "postal_code"),
    (("MAC",), "mac"),
    (("MD5", "HASH"), "md5"),
    (("BASE64", "B64"), "base64"),
    (("PORTA", "PORT"), "port"),
    (("DATA", "DATE", "DT", "NASC", "NASCIMENTO"), "date"),
    (("HORA", "HORARIO", "TIME"), "time"),
    (("VALOR", "PRECO", "DECIMAL"), "decimal"),
    (("NUMERO", "NUMBER", "NUM", "QTD", "QUANTIDADE"), "number"),
    (("ASCII",), "ascii"),
)
FIELD_TOKEN_SPLIT_RE = re.compile(r"[^A-Z0-9]+")


def get_validator(rule: str) -> Callable[..., bool]:
    try:
        return VALIDATORS[rule]
    except KeyError:
        known = ", ".join(sorted(VALIDATORS))
        raise KeyError(f"Unknown rule '{rule}'. Known rules: {known}") from None


def guess_validator(field_name: str) -> Tuple[Callable[..., bool], str | None, str | None]:
    tokens = set(FIELD_TOKEN_SPLIT_RE.split((field_name or "").upper()))
    for keywords, rule in FIELD_KEYWORDS:
        if tokens.intersection(keywords):
            return VALIDATORS[rule], HINTS[rule], rule
    return (lambda _value: True), None, None
