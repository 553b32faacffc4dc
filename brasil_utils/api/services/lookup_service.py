"""
Serviço de consultas: encapsula os clientes ViaCEP e ReceitaWS para a API.
Converte a ausência de resultado em respostas HTTP.
"""
import logging
from typing import List, Optional

import httpx
from fastapi import HTTPException

from brasil_utils.clients.receitaws import ReceitaWSClient
from brasil_utils.clients.schemas import Empresa, Endereco, StatusReceitaWS
from brasil_utils.clients.viacep import ViaCEPClient


class LookupService:
    def __init__(self, http_client: Optional[httpx.AsyncClient] = None, logger=None):
        """
        Inicializa o serviço de consultas.
        Parâmetros:
            http_client (httpx.AsyncClient, opcional): cliente HTTP compartilhado pelos diretórios
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("lookup_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger
        self.viacep = ViaCEPClient(http_client=http_client, logger=logger)
        self.receitaws = ReceitaWSClient(http_client=http_client, logger=logger)

    async def get_endereco(self, cep: str) -> Endereco:
        """
        Consulta o endereço de um CEP.
        Parâmetros:
            cep (str): CEP informado pelo usuário
        Retorno:
            Endereco: endereço encontrado (404 se ausente)
        """
        endereco = await self.viacep.buscar_cep(cep)
        if endereco is None:
            self.logger.warning(f"CEP não encontrado: cep={cep}")
            raise HTTPException(status_code=404, detail="CEP não encontrado")
        self.logger.info(f"CEP encontrado: cep={endereco.cep}, localidade={endereco.localidade}")
        return endereco

    async def search_enderecos(self, uf: str, cidade: str, logradouro: str) -> List[Endereco]:
        enderecos = await self.viacep.buscar_cep_por_endereco(uf, cidade, logradouro)
        self.logger.info(f"Busca por endereço: uf={uf}, cidade={cidade}, logradouro={logradouro}, total={len(enderecos)}")
        return enderecos

    async def get_empresa(self, cnpj: str) -> Empresa:
        """
        Consulta os dados cadastrais de um CNPJ.
        Parâmetros:
            cnpj (str): CNPJ informado pelo usuário
        Retorno:
            Empresa: dados da empresa (404 se ausente)
        """
        empresa = await self.receitaws.buscar_cnpj(cnpj)
        if empresa is None:
            self.logger.warning(f"CNPJ não encontrado: cnpj={cnpj}")
            raise HTTPException(status_code=404, detail="CNPJ não encontrado")
        self.logger.info(f"CNPJ encontrado: cnpj={empresa.cnpj}, nome={empresa.nome}")
        return empresa

    async def get_receitaws_status(self) -> StatusReceitaWS:
        status = await self.receitaws.consultar_status()
        if status is None:
            self.logger.warning("Status da ReceitaWS indisponível")
            raise HTTPException(status_code=503, detail="ReceitaWS indisponível")
        return status
