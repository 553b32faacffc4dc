import logging

import httpx
import pytest
from pydantic import ValidationError

from brasil_utils.clients.viacep import ViaCEPClient

logger = logging.getLogger("test_viacep_client")
logging.basicConfig(level=logging.INFO)

BASE_URL = "https://viacep.test/ws"

PRACA_DA_SE = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "unidade": "",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "estado": "São Paulo",
    "regiao": "Sudeste",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


def make_client(handler) -> ViaCEPClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ViaCEPClient(base_url=BASE_URL, http_client=http_client)


def fail_if_called(request: httpx.Request) -> httpx.Response:
    pytest.fail(f"Nenhuma requisição era esperada: {request.url}")


@pytest.mark.asyncio
async def test_buscar_cep_success():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=PRACA_DA_SE)

    endereco = await make_client(handler).buscar_cep("01001-000")
    logger.info(f"[PASS/FAIL] test_buscar_cep_success: endereco={endereco}")
    assert endereco is not None
    assert endereco.logradouro == "Praça da Sé"
    assert endereco.ddd == "11"
    assert len(requests) == 1
    assert str(requests[0].url) == f"{BASE_URL}/01001000/json/"


@pytest.mark.asyncio
async def test_buscar_cep_record_is_immutable():
    endereco = await make_client(lambda request: httpx.Response(200, json=PRACA_DA_SE)).buscar_cep("01001000")
    with pytest.raises(ValidationError):
        endereco.cep = "99999-999"


@pytest.mark.asyncio
async def test_buscar_cep_invalid_format_skips_network():
    client = make_client(fail_if_called)
    for cep in ["12345", "123456789", "0100 1000", "", None]:
        result = await client.buscar_cep(cep)
        logger.info(f"[PASS/FAIL] test_buscar_cep_invalid_format_skips_network: cep={cep!r}, result={result}")
        assert result is None


@pytest.mark.asyncio
async def test_buscar_cep_not_found_flag():
    for body in [{"erro": True}, {"erro": "true"}]:
        result = await make_client(lambda request: httpx.Response(200, json=body)).buscar_cep("99999999")
        logger.info(f"[PASS/FAIL] test_buscar_cep_not_found_flag: body={body}, result={result}")
        assert result is None


@pytest.mark.asyncio
async def test_buscar_cep_http_error_status():
    result = await make_client(lambda request: httpx.Response(400, text="Bad Request")).buscar_cep("01001000")
    assert result is None


@pytest.mark.asyncio
async def test_buscar_cep_invalid_json():
    result = await make_client(lambda request: httpx.Response(200, text="<html>")).buscar_cep("01001000")
    assert result is None


@pytest.mark.asyncio
async def test_buscar_cep_transport_error():
    def handler(request):
        raise httpx.ConnectError("conexão recusada", request=request)

    result = await make_client(handler).buscar_cep("01001000")
    assert result is None


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_success():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=[PRACA_DA_SE, {**PRACA_DA_SE, "cep": "01001-001", "complemento": "lado par"}])

    result = await make_client(handler).buscar_cep_por_endereco("sp", "São Paulo", "Praça da Sé")
    logger.info(f"[PASS/FAIL] test_buscar_cep_por_endereco_success: total={len(result)}")
    assert [e.cep for e in result] == ["01001-000", "01001-001"]
    assert requests[0].url.path == "/ws/SP/São Paulo/Praça da Sé/json/"
    assert b"S%C3%A3o%20Paulo" in requests[0].url.raw_path


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_invalid_params_skip_network():
    client = make_client(fail_if_called)
    cases = [
        ("S", "São Paulo", "Praça da Sé"),
        ("SPX", "São Paulo", "Praça da Sé"),
        ("SP", "SP", "Praça da Sé"),
        ("SP", "São Paulo", "Pa"),
        ("", "São Paulo", "Praça da Sé"),
        (None, None, None),
    ]
    for uf, cidade, logradouro in cases:
        result = await client.buscar_cep_por_endereco(uf, cidade, logradouro)
        logger.info(f"[PASS/FAIL] test_buscar_cep_por_endereco_invalid_params_skip_network: params={(uf, cidade, logradouro)}, result={result}")
        assert result == []


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_non_array_body():
    result = await make_client(lambda request: httpx.Response(200, json={"erro": True})).buscar_cep_por_endereco(
        "RS", "Porto Alegre", "Domingos"
    )
    assert result == []


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_failure_returns_empty():
    result = await make_client(lambda request: httpx.Response(500)).buscar_cep_por_endereco(
        "RS", "Porto Alegre", "Domingos"
    )
    assert result == []


@pytest.mark.asyncio
async def test_buscar_cep_null_text_fields_become_empty():
    body = {**PRACA_DA_SE, "complemento": None, "gia": None}
    endereco = await make_client(lambda request: httpx.Response(200, json=body)).buscar_cep("01001000")
    assert endereco is not None
    assert endereco.complemento == ""
    assert endereco.gia == ""


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_keeps_good_items():
    items = [{"cep": "01001-000"}, {"cep": "01001-001", "unidade": None}, "lixo"]
    result = await make_client(lambda request: httpx.Response(200, json=items)).buscar_cep_por_endereco(
        "SP", "São Paulo", "Praça da Sé"
    )
    logger.info(f"[PASS/FAIL] test_buscar_cep_por_endereco_keeps_good_items: result={result}")
    assert [e.cep for e in result] == ["01001-000", "01001-001"]
    assert result[1].unidade == ""


@pytest.mark.asyncio
async def test_buscar_cep_por_endereco_unencodable_text_returns_empty():
    result = await make_client(fail_if_called).buscar_cep_por_endereco("SP", "S\udc80o Paulo", "Praça da Sé")
    assert result == []
