"""
Registros retornados pelos diretórios externos (ViaCEP e ReceitaWS).

Os modelos são imutáveis e mantêm campos desconhecidos enviados pelo
provedor. Campos de texto ausentes ou nulos viram string vazia.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class _Registro(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty_text(cls, value: Any, info: ValidationInfo) -> Any:
        # Os provedores às vezes enviam null em campos de texto
        if value is None and cls.model_fields[info.field_name].annotation is str:
            return ""
        return value


class Endereco(_Registro):
    """Endereço da API ViaCEP (busca por CEP ou por logradouro)."""
    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    unidade: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    estado: str = ""
    regiao: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""
    erro: Optional[bool] = None


class Atividade(_Registro):
    code: str = ""
    text: str = ""


class Socio(_Registro):
    nome: str = ""
    qual: str = ""
    pais_origem: Optional[str] = None
    nome_rep_legal: Optional[str] = None
    qual_rep_legal: Optional[str] = None


class Billing(_Registro):
    free: bool = False
    database: bool = False


class Empresa(_Registro):
    """Dados cadastrais de uma empresa na API ReceitaWS."""
    status: str = "OK"
    message: Optional[str] = None
    cnpj: str = ""
    tipo: str = ""
    abertura: str = ""
    nome: str = ""
    fantasia: str = ""
    porte: str = ""
    natureza_juridica: str = ""
    logradouro: str = ""
    numero: str = ""
    complemento: str = ""
    cep: str = ""
    bairro: str = ""
    municipio: str = ""
    uf: str = ""
    email: str = ""
    telefone: str = ""
    efr: str = ""
    situacao: str = ""
    data_situacao: str = ""
    motivo_situacao: str = ""
    situacao_especial: str = ""
    data_situacao_especial: str = ""
    capital_social: str = ""
    ultima_atualizacao: str = ""
    atividade_principal: List[Atividade] = []
    atividades_secundarias: List[Atividade] = []
    qsa: List[Socio] = []
    extra: Optional[Dict[str, Any]] = None
    billing: Optional[Billing] = None


class StatusReceitaWS(_Registro):
    status: str
    message: Optional[str] = None
    uptime: Optional[float] = None
    version: Optional[str] = None
    timestamp: Optional[str] = None
