"""
Módulo utilitário para validação de telefones fixos e celulares brasileiros.
Formato esperado: DDD (2 dígitos) + número, com ou sem formatação.
"""
from brasil_utils.utils.digits import only_digits

LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11
MIN_DDD = 11
MAX_DDD = 99


class PhoneUtils:
    @staticmethod
    def normalize_phone(phone: str) -> str:
        """
        Remove caracteres não numéricos do telefone.
        Exemplo: '(11) 91234-5678' -> '11912345678'
        """
        return only_digits(phone)

    @staticmethod
    def _has_valid_ddd(digits: str) -> bool:
        return MIN_DDD <= int(digits[:2]) <= MAX_DDD

    @staticmethod
    def is_valid_landline(phone: str) -> bool:
        """
        Valida telefone fixo.
        Regras:
            - 10 dígitos (2 DDD + 8 número)
            - DDD entre 11 e 99
            - número não pode começar com 0 ou 1
        Parâmetros:
            phone (str): telefone em qualquer formato
        Retorno:
            bool: True se válido, False caso contrário
        """
        phone = PhoneUtils.normalize_phone(phone)
        if len(phone) != LANDLINE_LENGTH:
            return False
        if not PhoneUtils._has_valid_ddd(phone):
            return False
        return phone[2] not in ("0", "1")

    @staticmethod
    def is_valid_mobile(phone: str) -> bool:
        """
        Valida celular.
        Regras:
            - 11 dígitos (2 DDD + 9 número)
            - DDD entre 11 e 99
            - número começa com 9
        """
        phone = PhoneUtils.normalize_phone(phone)
        if len(phone) != MOBILE_LENGTH:
            return False
        if not PhoneUtils._has_valid_ddd(phone):
            return False
        return phone[2] == "9"

    @staticmethod
    def format_phone(phone: str) -> str:
        """
        Formata telefone fixo como (XX) XXXX-XXXX e celular como (XX) XXXXX-XXXX.
        Retorna string vazia para outros tamanhos.
        """
        phone = PhoneUtils.normalize_phone(phone)
        if len(phone) == LANDLINE_LENGTH:
            return f"({phone[:2]}) {phone[2:6]}-{phone[6:]}"
        if len(phone) == MOBILE_LENGTH:
            return f"({phone[:2]}) {phone[2:7]}-{phone[7:]}"
        return ""
