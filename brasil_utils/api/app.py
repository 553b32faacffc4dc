from typing import Any, Dict, List
from fastapi import FastAPI, Depends
import logging
import uvicorn
from brasil_utils.auth.basic import basic_auth
from brasil_utils.api.services.lookup_service import LookupService
from brasil_utils.api.services.validation_service import validate_document
from brasil_utils.clients.schemas import Empresa, Endereco, StatusReceitaWS

logger = logging.getLogger(__name__)

app = FastAPI(title="Brasil Utils API", version="1.0.0")


def get_lookup_service() -> LookupService:
    """
    Fornece o serviço de consultas aos diretórios externos.
    Sobrescrito nos testes via app.dependency_overrides.
    """
    return LookupService()


@app.get("/")
async def root(_: str = Depends(basic_auth)) -> dict:
    """
    Endpoint de status da API.
    Parâmetros:
        _: autenticação básica
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


#########
@app.post("/api/v1/validate")
async def validate(payload: Dict[str, Any], _: str = Depends(basic_auth)) -> Dict[str, Any]:
    """
    Valida CPF, CNPJ, CEP, telefone fixo ou celular.
    Parâmetros:
        payload (dict): {"type": ..., "value": ...}
        _: autenticação básica
    Retorno:
        dict: resultado da validação
    """
    logger.info(f"Recebendo payload de validação: type={payload.get('type')}")
    return validate_document(payload)


######### Consultas de CEP (ViaCEP)
@app.get("/api/v1/cep/{cep}", response_model=Endereco)
async def get_cep(cep: str, service: LookupService = Depends(get_lookup_service), _: str = Depends(basic_auth)) -> Endereco:
    logger.info(f"Consulta de CEP: cep={cep}")
    return await service.get_endereco(cep)


@app.get("/api/v1/cep/{uf}/{cidade}/{logradouro}", response_model=List[Endereco])
async def search_cep(
    uf: str,
    cidade: str,
    logradouro: str,
    service: LookupService = Depends(get_lookup_service),
    _: str = Depends(basic_auth),
) -> List[Endereco]:
    """
    Busca CEPs por UF, cidade e logradouro.
    Retorno:
        List[Endereco]: lista possivelmente vazia
    """
    return await service.search_enderecos(uf, cidade, logradouro)


######### Consultas de CNPJ (ReceitaWS)
@app.get("/api/v1/cnpj/{cnpj:path}", response_model=Empresa)
async def get_cnpj(cnpj: str, service: LookupService = Depends(get_lookup_service), _: str = Depends(basic_auth)) -> Empresa:
    logger.info(f"Consulta de CNPJ: cnpj={cnpj}")
    return await service.get_empresa(cnpj)


@app.get("/api/v1/receitaws/status", response_model=StatusReceitaWS)
async def receitaws_status(service: LookupService = Depends(get_lookup_service), _: str = Depends(basic_auth)) -> StatusReceitaWS:
    return await service.get_receitaws_status()


######### ------------------------------ #########

if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    logger.info("Starting Uvicorn server on 0.0.0.0:3000")
    uvicorn.run(app, host="0.0.0.0", port=3000)
