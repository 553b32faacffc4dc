"""
Consultas de CEP utilizando a API ViaCEP.
Documentação: https://viacep.com.br/
"""
import os
from typing import List, Optional
from urllib.parse import quote

from pydantic import ValidationError

from brasil_utils.clients.base import DirectoryClient
from brasil_utils.clients.schemas import Endereco
from brasil_utils.utils.cep_utils import CEPUtils

VIACEP_BASE_URL = os.getenv("VIACEP_BASE_URL", "https://viacep.com.br/ws")

MIN_CIDADE_LENGTH = 3
MIN_LOGRADOURO_LENGTH = 3


def _encode_segment(value: str) -> str:
    # Mesmo conjunto preservado pelo encodeURIComponent
    return quote(value, safe="-_.!~*'()")


def _has_error_flag(data: dict) -> bool:
    # ViaCEP responde 200 com {"erro": true} (ou "true") para CEP inexistente
    return data.get("erro") in (True, "true")


class ViaCEPClient(DirectoryClient):
    def __init__(self, base_url: str = VIACEP_BASE_URL, http_client=None, logger=None):
        super().__init__(base_url, http_client=http_client, logger=logger)

    async def buscar_cep(self, cep: str) -> Optional[Endereco]:
        """
        Busca o endereço correspondente a um CEP.

        O formato é validado antes da requisição; CEP inválido não gera
        nenhuma chamada de rede.

        Parâmetros:
            cep (str): CEP formatado ou apenas números
        Retorno:
            Endereco | None: None se o CEP for inválido, não encontrado ou
            se ocorrer qualquer erro na requisição
        """
        if not CEPUtils.is_valid_cep(cep):
            self.logger.info(f"CEP com formato inválido, consulta ignorada: cep={cep!r}")
            return None

        data = await self.get_json(f"{CEPUtils.normalize_cep(cep)}/json/")
        if not isinstance(data, dict):
            return None
        if _has_error_flag(data):
            self.logger.info(f"CEP não encontrado no ViaCEP: cep={cep!r}")
            return None
        try:
            return Endereco.model_validate(data)
        except ValidationError as exc:
            self.logger.warning(f"Resposta do ViaCEP fora do formato esperado: {exc}")
            return None

    async def buscar_cep_por_endereco(self, uf: str, cidade: str, logradouro: str) -> List[Endereco]:
        """
        Busca CEPs a partir de UF, cidade e logradouro.
        Parâmetros:
            uf (str): sigla do estado, exatamente 2 caracteres
            cidade (str): nome da cidade, mínimo 3 caracteres
            logradouro (str): trecho do logradouro, mínimo 3 caracteres
        Retorno:
            List[Endereco]: resultados (o provedor limita a 50) ou lista vazia
            para parâmetros inválidos e qualquer falha
        """
        if not uf or len(uf) != 2:
            return []
        if not cidade or len(cidade) < MIN_CIDADE_LENGTH:
            return []
        if not logradouro or len(logradouro) < MIN_LOGRADOURO_LENGTH:
            return []

        try:
            path = "/".join(
                _encode_segment(segment) for segment in (uf.upper(), cidade, logradouro)
            )
        except UnicodeEncodeError:
            self.logger.info(f"Parâmetros não codificáveis, busca ignorada: cidade={cidade!r}, logradouro={logradouro!r}")
            return []
        data = await self.get_json(f"{path}/json/")
        if not isinstance(data, list):
            return []
        enderecos = []
        for item in data:
            try:
                enderecos.append(Endereco.model_validate(item))
            except ValidationError as exc:
                self.logger.warning(f"Item ignorado, fora do formato esperado: {exc}")
        return enderecos
