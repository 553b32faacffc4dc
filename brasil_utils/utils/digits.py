"""
Funções básicas de canonicalização compartilhadas pelos validadores.
"""
import re
from typing import Optional

_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE = re.compile(r"\s")


def only_digits(value: Optional[str]) -> str:
    """
    Remove todo caractere que não seja dígito ASCII (0-9).
    Parâmetros:
        value (str): texto em qualquer formato (None vira string vazia)
    Retorno:
        str: apenas os dígitos, na ordem original
    Exemplo: '123.456.789-09' -> '12345678909'
    """
    return _NON_DIGITS.sub("", value or "")


def has_whitespace(value: Optional[str]) -> bool:
    return bool(value) and _WHITESPACE.search(value) is not None


def is_repeated_sequence(digits: str) -> bool:
    """Sequências como '00000000000' ou '11111111111111'."""
    return bool(digits) and digits == digits[0] * len(digits)
