import logging

from brasil_utils.utils.digits import only_digits, has_whitespace, is_repeated_sequence

logger = logging.getLogger("test_digits")
logging.basicConfig(level=logging.INFO)


def test_only_digits_strips_formatting():
    assert only_digits("123.456.789-09") == "12345678909"
    assert only_digits("(11) 91234-5678") == "11912345678"
    assert only_digits("11.222.333/0001-81") == "11222333000181"


def test_only_digits_preserves_leading_zeros():
    assert only_digits("000.000.001-91") == "00000000191"


def test_only_digits_never_fails():
    assert only_digits("") == ""
    assert only_digits(None) == ""
    assert only_digits("abc-def") == ""


def test_only_digits_ignores_non_ascii_digits():
    # Dígitos arábico-índicos não são dígitos ASCII
    assert only_digits("١٢٣45") == "45"


def test_only_digits_is_idempotent():
    for value in ["01001-000", "11144477735", "(21) 2234-5678", "x1y2z3"]:
        once = only_digits(value)
        logger.info(f"[PASS/FAIL] test_only_digits_is_idempotent: value={value!r}, digits={once!r}")
        assert only_digits(once) == once


def test_has_whitespace():
    assert has_whitespace("0100 1000")
    assert has_whitespace("01001000\n")
    assert has_whitespace("\t01001000")
    assert not has_whitespace("01001-000")
    assert not has_whitespace("")
    assert not has_whitespace(None)


def test_is_repeated_sequence():
    assert is_repeated_sequence("00000000000")
    assert is_repeated_sequence("11111111111111")
    assert not is_repeated_sequence("11144477735")
    assert not is_repeated_sequence("")
