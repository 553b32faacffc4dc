import logging

from brasil_utils.utils.cep_utils import CEPUtils

logger = logging.getLogger("test_cep_utils")
logging.basicConfig(level=logging.INFO)


def test_valid_ceps():
    for cep in ["01001000", "01001-000", "01.001-000"]:
        result = CEPUtils.is_valid_cep(cep)
        logger.info(f"[PASS/FAIL] test_valid_ceps: cep={cep!r}, result={result}")
        assert result is True


def test_invalid_lengths():
    for cep in ["", "12345", "1234567", "123456789", "01001-0000", "abcde-fgh"]:
        result = CEPUtils.is_valid_cep(cep)
        logger.info(f"[PASS/FAIL] test_invalid_lengths: cep={cep!r}, result={result}")
        assert result is False


def test_whitespace_is_rejected_by_default():
    assert CEPUtils.is_valid_cep("01001 000") is False
    assert CEPUtils.is_valid_cep(" 01001000") is False
    assert CEPUtils.is_valid_cep("010 010 00") is False


def test_lenient_variant_accepts_whitespace():
    assert CEPUtils.is_valid_cep("01001 000", reject_whitespace=False) is True
    assert CEPUtils.is_valid_cep("0100 100", reject_whitespace=False) is False


def test_letters_are_stripped_before_length_check():
    assert CEPUtils.is_valid_cep("CEP01001000") is True
    assert CEPUtils.is_valid_cep("CEP0100100") is False


def test_format_cep():
    assert CEPUtils.format_cep("01001000") == "01001-000"
    assert CEPUtils.format_cep("0100100") == ""
