"""
Consultas de CNPJ utilizando a API ReceitaWS.
Documentação: https://developers.receitaws.com.br/
"""
import os
from typing import Optional

from pydantic import ValidationError

from brasil_utils.clients.base import DirectoryClient
from brasil_utils.clients.schemas import Empresa, StatusReceitaWS
from brasil_utils.utils.cnpj_utils import CNPJUtils

RECEITAWS_BASE_URL = os.getenv("RECEITAWS_BASE_URL", "https://www.receitaws.com.br/v1")


class ReceitaWSClient(DirectoryClient):
    def __init__(self, base_url: str = RECEITAWS_BASE_URL, http_client=None, logger=None):
        super().__init__(base_url, http_client=http_client, logger=logger)

    async def _buscar_empresa(self, endpoint: str, cnpj: str) -> Optional[Empresa]:
        if not CNPJUtils.is_valid_cnpj(cnpj):
            self.logger.info(f"CNPJ inválido, consulta ignorada: cnpj={cnpj!r}")
            return None

        data = await self.get_json(f"{endpoint}/{CNPJUtils.normalize_cnpj(cnpj)}")
        if not isinstance(data, dict):
            return None
        # A ReceitaWS sinaliza erros no corpo, com status HTTP 200
        if data.get("status") == "ERROR":
            self.logger.info(f"ReceitaWS retornou erro: cnpj={cnpj!r}, message={data.get('message')!r}")
            return None
        try:
            return Empresa.model_validate(data)
        except ValidationError as exc:
            self.logger.warning(f"Resposta da ReceitaWS fora do formato esperado: {exc}")
            return None

    async def buscar_cnpj(self, cnpj: str) -> Optional[Empresa]:
        """
        Busca os dados cadastrais de uma empresa pelo CNPJ.
        Parâmetros:
            cnpj (str): CNPJ formatado ou apenas números
        Retorno:
            Empresa | None: None se o CNPJ for inválido, não encontrado ou
            se ocorrer qualquer erro na requisição
        """
        return await self._buscar_empresa("cnpj", cnpj)

    async def buscar_cnpj_proxy(self, cnpj: str) -> Optional[Empresa]:
        """Mesma consulta pelo endpoint rf/, útil quando o limite do endpoint principal é atingido."""
        return await self._buscar_empresa("rf", cnpj)

    async def consultar_status(self) -> Optional[StatusReceitaWS]:
        """
        Consulta o status da API ReceitaWS.
        Retorno:
            StatusReceitaWS | None: status ("UP", "DOWN", ...) ou None em caso de erro
        """
        data = await self.get_json("status")
        if not isinstance(data, dict):
            return None
        try:
            return StatusReceitaWS.model_validate(data)
        except ValidationError as exc:
            self.logger.warning(f"Status da ReceitaWS fora do formato esperado: {exc}")
            return None
