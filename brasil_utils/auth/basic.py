"""
Autenticação HTTP Basic da API, com credenciais lidas de um arquivo texto
no formato usuario:senha (linhas iniciadas por # são comentários).
"""
from typing import Dict
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
import logging
import os
import secrets

DEFAULT_CREDENTIALS_FILE = "brasil_utils/credentials/basic_auth.txt"

logger = logging.getLogger(__name__)
security = HTTPBasic(realm="brasil-utils")


def load_credentials(file_path: str) -> Dict[str, str]:
	"""
	Lê o mapa usuario -> senha a cada chamada, refletindo alterações no arquivo.
	Parâmetros:
		file_path (str): caminho do arquivo de credenciais
	Retorno:
		dict: credenciais conhecidas; vazio se o arquivo não existir
	"""
	loaded: Dict[str, str] = {}
	try:
		with open(file_path, "r", encoding="utf-8") as f:
			for line in f:
				line = line.strip()
				if not line or line.startswith("#") or ":" not in line:
					continue
				username, password = line.split(":", 1)
				loaded[username] = password
	except FileNotFoundError:
		logger.warning(f"Arquivo de credenciais não encontrado: {file_path}")
	return loaded


def check_credentials(username: str, password: str, file_path: str) -> bool:
	expected = load_credentials(file_path).get(username)
	return expected is not None and secrets.compare_digest(expected.encode(), password.encode())


async def basic_auth(credentials: HTTPBasicCredentials = Depends(security)) -> str:
	credentials_file = os.getenv("BASIC_AUTH_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE)
	if not check_credentials(credentials.username, credentials.password, credentials_file):
		logger.warning(f"Falha de autenticação: username={credentials.username}")
		raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais inválidas", headers={"WWW-Authenticate": "Basic"})
	return credentials.username
