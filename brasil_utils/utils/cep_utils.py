"""
Módulo utilitário para validação e formatação de CEP.
O CEP não possui dígito verificador: apenas o formato é validado.
"""
from brasil_utils.utils.digits import only_digits, has_whitespace

CEP_LENGTH = 8


class CEPUtils:
    @staticmethod
    def normalize_cep(cep: str) -> str:
        return only_digits(cep)

    @staticmethod
    def is_valid_cep(cep: str, reject_whitespace: bool = True) -> bool:
        """
        Valida o formato de um CEP.
        Parâmetros:
            cep (str): CEP formatado ('01001-000') ou apenas números
            reject_whitespace (bool): rejeita entradas com espaços antes da
                limpeza (ex: '0100 1000'); False aceita a variante permissiva
        Retorno:
            bool: True se restarem exatamente 8 dígitos
        """
        if reject_whitespace and has_whitespace(cep):
            return False
        return len(CEPUtils.normalize_cep(cep)) == CEP_LENGTH

    @staticmethod
    def format_cep(cep: str) -> str:
        """Formata CEP no padrão XXXXX-XXX (string vazia se não tiver 8 dígitos)."""
        cep = CEPUtils.normalize_cep(cep)
        if len(cep) != CEP_LENGTH:
            return ""
        return f"{cep[:5]}-{cep[5:]}"
