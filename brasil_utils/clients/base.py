"""
Cliente base para diretórios REST somente leitura.

Concentra a requisição GET e o tratamento de falhas: erro de rede, status
HTTP diferente de 2xx ou corpo que não é JSON resultam em None. Os clientes
concretos tratam apenas os sentinelas específicos de cada provedor.
"""
import logging
from typing import Any, Optional

import httpx


class DirectoryClient:
    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Inicializa o cliente de diretório.
        Parâmetros:
            base_url (str): URL base do provedor
            http_client (httpx.AsyncClient, opcional): cliente HTTP do chamador;
                se omitido, um cliente é aberto e fechado a cada consulta
            logger (logging.Logger, opcional): Logger para logs
        """
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.logger = logger or logging.getLogger(self.__class__.__module__)

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, url: str) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.get(url)
        async with httpx.AsyncClient() as client:
            return await client.get(url)

    async def get_json(self, path: str) -> Optional[Any]:
        """
        Executa um GET e decodifica o corpo JSON.
        Parâmetros:
            path (str): caminho relativo à URL base (já codificado)
        Retorno:
            Any: JSON decodificado, ou None em caso de falha
        """
        url = self.build_url(path)
        self.logger.debug(f"GET {url}")
        try:
            response = await self._get(url)
        except httpx.HTTPError as exc:
            self.logger.warning(f"Falha de rede em {url}: {exc!r}")
            return None
        if not response.is_success:
            self.logger.warning(f"Resposta sem sucesso em {url}: status={response.status_code}")
            return None
        try:
            return response.json()
        except ValueError:
            self.logger.warning(f"Corpo não é JSON válido em {url}")
            return None
