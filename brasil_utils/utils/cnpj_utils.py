"""
Módulo utilitário para validação e formatação de CNPJ,
conforme o algoritmo da Receita Federal.
"""
from typing import List

from brasil_utils.utils.digits import only_digits, is_repeated_sequence

CNPJ_LENGTH = 14


class CNPJUtils:
    # Pesos posicionais (não cíclicos) de cada dígito verificador
    WEIGHTS_FIRST: List[int] = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    WEIGHTS_SECOND: List[int] = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

    @staticmethod
    def normalize_cnpj(cnpj: str) -> str:
        """
        Remove caracteres não numéricos do CNPJ.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return only_digits(cnpj)

    @staticmethod
    def calculate_check_digit(digits: str, weights: List[int]) -> int:
        """
        Calcula um dígito verificador do CNPJ.
        Parâmetros:
            digits (str): dígitos anteriores ao DV (12 ou 13)
            weights (List[int]): pesos alinhados por posição
        Retorno:
            int: 0 se o resto for menor que 2, senão 11 - resto
        """
        soma = sum(int(d) * w for d, w in zip(digits, weights))
        resto = soma % 11
        return 0 if resto < 2 else 11 - resto

    @staticmethod
    def is_valid_cnpj(cnpj: str) -> bool:
        """
        Valida CNPJ usando o algoritmo da Receita Federal.

        Verifica:
        - Formato básico (14 dígitos)
        - Rejeita CNPJs com todos os dígitos iguais
        - Os dois dígitos verificadores

        Parâmetros:
            cnpj (str): CNPJ com ou sem formatação
        Retorno:
            bool: True se o CNPJ for válido, False caso contrário
        """
        cnpj = CNPJUtils.normalize_cnpj(cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            return False
        if is_repeated_sequence(cnpj):
            return False

        digito1 = CNPJUtils.calculate_check_digit(cnpj[:12], CNPJUtils.WEIGHTS_FIRST)
        if int(cnpj[12]) != digito1:
            return False

        digito2 = CNPJUtils.calculate_check_digit(cnpj[:13], CNPJUtils.WEIGHTS_SECOND)
        return int(cnpj[13]) == digito2

    @staticmethod
    def format_cnpj(cnpj: str) -> str:
        """Formata CNPJ no padrão XX.XXX.XXX/XXXX-XX (string vazia se não tiver 14 dígitos)."""
        cnpj = CNPJUtils.normalize_cnpj(cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            return ""
        return f"{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}"
