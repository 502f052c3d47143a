import pytest

from multiform_validator import (
    InvalidArgumentError,
    NullReferenceError,
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

GUARDED = [
    is_ascii,
    is_base64,
    is_date,
    is_decimal,
    is_mac_address,
    is_md5,
    is_number,
    is_port,
    is_postal_code,
    is_time,
]


@pytest.mark.parametrize("validator", GUARDED, ids=lambda fn: fn.__name__)
@pytest.mark.parametrize("value", [None, ""])
def test_empty_input_raises_invalid_argument(validator, value):
    with pytest.raises(InvalidArgumentError):
        validator(value)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError, match="Input value cannot be empty."):
        is_md5("")


def test_date_and_postal_code_messages():
    with pytest.raises(InvalidArgumentError, match="Date string cannot be null or empty"):
        is_date(None)
    with pytest.raises(InvalidArgumentError, match="Input value must be a string."):
        is_postal_code("")


def test_email_none_is_null_reference_not_invalid_argument():
    with pytest.raises(NullReferenceError, match="Email cannot be null"):
        is_email(None)
    assert not issubclass(NullReferenceError, InvalidArgumentError)
    assert is_email("") is False


def test_cep_has_no_empty_guard():
    with pytest.raises(TypeError):
        is_cep(None)
    assert is_cep("") is False


@pytest.mark.parametrize(
    "value, expected",
    [("hello world", True), ("\x00\x7f", True), ("olá", False), ("naïve", False), ("emoji 🙂", False)],
)
def test_is_ascii(value, expected):
    assert is_ascii(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("SGVsbG8=", True),
        ("SGVsbG8gV29ybGQ=", True),
        ("SGk=", True),
        ("SQ==", True),
        ("QUJD", True),
        ("abc", False),
        ("SGVsbG8", False),
        ("SGVs bG8=", False),
        ("SGVsbG8===", False),
        ("SGVsbG8-", False),
    ],
)
def test_is_base64(value, expected):
    assert is_base64(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12345-678", True),
        ("12345678", True),
        ("12.345-678", True),
        ("12345 678", True),
        ("1234567", False),
        ("12345-6789", False),
        ("123456789012", False),
        ("abcde-fgh", False),
    ],
)
def test_is_cep(value, expected):
    assert is_cep(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10", False),
        ("10.0", False),
        ("10.5", True),
        ("-3.25", True),
        ("1e-3", True),
        ("abc", False),
        ("NaN", True),
        ("-Infinity", True),
        ("10.5d", True),
        ("10.5F", True),
        ("10d", False),
        (" 10.5 ", True),
        ("1_0.5", False),
        ("10.5dd", False),
        (".5", True),
        ("5.", False),
        ("nan", False),
        ("Infinity", True),
    ],
)
def test_is_decimal(value, expected):
    assert is_decimal(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:1A:2B:3C:4D:5E", True),
        ("00-1a-2b-3c-4d-5e", True),
        ("00:1A-2B:3C-4D:5E", True),
        ("00:1A:2B:3C:4D", False),
        ("00:1A:2B:3C:4D:5G", False),
        ("001A.2B3C.4D5E", False),
        ("00:1A:2B:3C:4D:5E:", False),
    ],
)
def test_is_mac_address(value, expected):
    assert is_mac_address(value) is expected


def test_is_md5():
    digest = "d41d8cd98f00b204e9800998ecf8427e"
    assert is_md5(digest) is True
    assert is_md5(digest.upper()) is True
    assert is_md5(digest[:-1]) is False
    assert is_md5(digest + "0") is False
    assert is_md5("z" * 32) is False


@pytest.mark.parametrize(
    "value, expected",
    [("-42", True), ("42", True), ("007", True), ("4.2", False), ("+4", False), (" 4", False), ("--4", False), ("٣", False)],
)
def test_is_number(value, expected):
    assert is_number(value) is expected


@pytest.mark.parametrize("port, expected", [(0, True), (80, True), (65535, True), (-1, False), (65536, False)])
def test_is_port_int(port, expected):
    assert is_port(port) is expected


@pytest.mark.parametrize(
    "port, expected",
    [("0", True), ("8080", True), ("+80", True), ("65535", True), ("65536", False), ("-1", False), ("abc", False), ("8 0", False), ("80.0", False)],
)
def test_is_port_str(port, expected):
    assert is_port(port) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12345", True),
        ("12345-6789", True),
        ("K1A 0B1", True),
        ("SW1A 1AA", True),
        ("M1 1AE", True),
        ("1234", True),
        ("123-4567", True),
        ("12345-678", True),
        ("123", False),
        ("ABCDE", False),
        ("K1A0B1", False),
    ],
)
def test_is_postal_code(value, expected):
    assert is_postal_code(value) is expected


def test_is_postal_code_rejects_non_strings():
    with pytest.raises(InvalidArgumentError):
        is_postal_code(12345)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("23:59:59", True),
        ("00:00", True),
        ("9:05", True),
        ("1:30 PM", True),
        ("01:30 am", True),
        ("24:00:00", False),
        ("12:60", False),
        ("12:30:60", False),
        ("1:30PM", False),
        ("1:30 XM", False),
    ],
)
def test_is_time(value, expected):
    assert is_time(value) is expected


@pytest.mark.parametrize(
    "validator, value",
    [
        (is_email, "john.doe@example.com"),
        (is_date, "15-Jan-2023"),
        (is_decimal, "10.5"),
        (is_cep, "12345-678"),
        (is_time, "1:30 PM"),
    ],
)
def test_same_input_same_result(validator, value):
    assert validator(value) == validator(value)


def test_is_port_rejects_booleans():
    assert is_port(True) is False
    assert is_port(False) is False
