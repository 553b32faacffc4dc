"""
Helpers HTTP do console: chamam a API e devolvem (ok, dados, status) sem lançar exceções.
"""
import os
from typing import Any, Optional, Tuple
from urllib.parse import quote

import httpx

API_BASE = os.getenv("API_BASE", "http://api:3000")  # service name in docker network

Auth = Optional[Tuple[str, str]]
Result = Tuple[bool, Any, int]


async def fetch_json(client: httpx.AsyncClient, method: str, url: str, auth: Auth = None, **kwargs) -> Result:
    try:
        resp = await client.request(method, url, auth=auth, timeout=10, **kwargs)
        if resp.headers.get("content-type", "").startswith("application/json"):
            data = resp.json()
        else:
            data = {"raw": resp.text}
        if resp.is_error:
            return False, data, resp.status_code
        return True, data, resp.status_code
    except Exception as e:
        return False, {"error": str(e)}, 0


async def validate_credentials(client: httpx.AsyncClient, user: str, password: str) -> bool:
    """Realiza uma chamada ao endpoint raiz para validar credenciais Basic Auth."""
    ok, _, _ = await fetch_json(client, "GET", f"{API_BASE}/", auth=(user, password))
    return ok


async def validate_document(client: httpx.AsyncClient, auth: Auth, doc_type: str, value: str) -> Result:
    payload = {"type": doc_type, "value": value}
    return await fetch_json(client, "POST", f"{API_BASE}/api/v1/validate", auth=auth, json=payload)


async def lookup_cep(client: httpx.AsyncClient, auth: Auth, cep: str) -> Result:
    return await fetch_json(client, "GET", f"{API_BASE}/api/v1/cep/{quote(cep, safe='')}", auth=auth)


async def search_cep(client: httpx.AsyncClient, auth: Auth, uf: str, cidade: str, logradouro: str) -> Result:
    path = "/".join(quote(part, safe="") for part in (uf, cidade, logradouro))
    return await fetch_json(client, "GET", f"{API_BASE}/api/v1/cep/{path}", auth=auth)


async def lookup_cnpj(client: httpx.AsyncClient, auth: Auth, cnpj: str) -> Result:
    return await fetch_json(client, "GET", f"{API_BASE}/api/v1/cnpj/{quote(cnpj, safe='')}", auth=auth)


def error_detail(data: Any) -> Any:
    """Extrai o detalhe amigável de uma resposta de erro."""
    return data.get("detail") if isinstance(data, dict) else data
