"""
Serviço de validação de documentos: recebe o payload da API, escolhe o
validador pelo tipo e devolve o resultado junto com as formas normalizada
e formatada do valor.
"""
import logging
from typing import Any, Callable, Dict, NamedTuple

from fastapi import HTTPException

from brasil_utils.utils.cep_utils import CEPUtils
from brasil_utils.utils.cnpj_utils import CNPJUtils
from brasil_utils.utils.cpf_utils import CPFUtils
from brasil_utils.utils.phone_utils import PhoneUtils

logger = logging.getLogger(__name__)


class DocumentRules(NamedTuple):
    validate: Callable[[str], bool]
    normalize: Callable[[str], str]
    format: Callable[[str], str]


DOCUMENT_TYPES: Dict[str, DocumentRules] = {
    "cpf": DocumentRules(CPFUtils.is_valid_cpf, CPFUtils.normalize_cpf, CPFUtils.format_cpf),
    "cnpj": DocumentRules(CNPJUtils.is_valid_cnpj, CNPJUtils.normalize_cnpj, CNPJUtils.format_cnpj),
    "cep": DocumentRules(CEPUtils.is_valid_cep, CEPUtils.normalize_cep, CEPUtils.format_cep),
    "telefone": DocumentRules(PhoneUtils.is_valid_landline, PhoneUtils.normalize_phone, PhoneUtils.format_phone),
    "celular": DocumentRules(PhoneUtils.is_valid_mobile, PhoneUtils.normalize_phone, PhoneUtils.format_phone),
}


def validate_document(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida um documento a partir do payload da requisição.
    Parâmetros:
        payload (dict): {"type": <tipo>, "value": <texto>}
    Retorno:
        dict: type, value, normalized, formatted e valid
    """
    doc_type = payload.get("type")
    value = payload.get("value")
    if doc_type is None or value is None:
        logger.warning(f"Payload incompleto: {payload}")
        raise HTTPException(status_code=400, detail="Campos obrigatórios: type, value")
    if not isinstance(value, str):
        logger.warning(f"value não é texto: value={value!r}")
        raise HTTPException(status_code=400, detail="value deve ser texto")
    rules = DOCUMENT_TYPES.get(doc_type)
    if rules is None:
        logger.warning(f"Tipo de documento desconhecido: type={doc_type}")
        raise HTTPException(
            status_code=400,
            detail=f"type deve ser um de: {', '.join(DOCUMENT_TYPES)}",
        )

    valid = rules.validate(value)
    result = {
        "type": doc_type,
        "value": value,
        "normalized": rules.normalize(value),
        "formatted": rules.format(value) if valid else "",
        "valid": valid,
    }
    logger.info(f"Documento validado: type={doc_type}, valid={valid}")
    return result
