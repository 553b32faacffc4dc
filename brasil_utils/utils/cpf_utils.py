"""
Módulo utilitário para validação e normalização de CPF.
Funções reutilizáveis e testáveis, com nomes claros e comentários críticos.
"""
from brasil_utils.utils.digits import only_digits, is_repeated_sequence

CPF_LENGTH = 11


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres não numéricos do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos
        Exemplo: '123.456.789-09' -> '12345678909'
        """
        return only_digits(cpf)

    @staticmethod
    def calculate_check_digit(digits: str) -> int:
        """
        Calcula um dígito verificador a partir dos dígitos anteriores.
        Pesos decrescentes de len(digits) + 1 até 2.
        Parâmetros:
            digits (str): 9 dígitos (primeiro DV) ou 10 dígitos (segundo DV)
        Retorno:
            int: dígito verificador (restos 10 viram 0)
        """
        weight = len(digits) + 1
        soma = sum(int(d) * (weight - i) for i, d in enumerate(digits))
        return ((soma * 10) % 11) % 10

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF formatado ou apenas com dígitos
        Retorno:
            bool: True se válido, False caso contrário
        """
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != CPF_LENGTH:
            return False
        # Sequências repetidas são rejeitadas antes do cálculo
        if is_repeated_sequence(cpf):
            return False
        for i in [9, 10]:
            if int(cpf[i]) != CPFUtils.calculate_check_digit(cpf[:i]):
                return False
        return True

    @staticmethod
    def format_cpf(cpf: str) -> str:
        """
        Formata CPF no padrão XXX.XXX.XXX-XX.
        Retorno:
            str: CPF formatado ou string vazia se não tiver 11 dígitos
        """
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != CPF_LENGTH:
            return ""
        return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
