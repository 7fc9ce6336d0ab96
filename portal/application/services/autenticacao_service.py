# portal/application/services/autenticacao_service.py
from __future__ import annotations

import hmac

from portal.domain.errors import AutenticacaoError
from portal.infrastructure.config import Settings

MSG_CREDENCIAIS_INVALIDAS = "Usuário ou senha inválidos."


class AutenticacaoService:
    """Par fixo usuario/senha do gestor (credenciais de demonstracao)."""

    def __init__(self, settings: Settings) -> None:
        self._usuario = settings.gestor_usuario
        self._senha = settings.gestor_senha

    def autenticar(self, usuario: str, senha: str) -> str:
        usuario_ok = hmac.compare_digest(usuario.encode(), self._usuario.encode())
        senha_ok = hmac.compare_digest(senha.encode(), self._senha.encode())
        if not (usuario_ok and senha_ok):
            raise AutenticacaoError(MSG_CREDENCIAIS_INVALIDAS)
        return usuario
