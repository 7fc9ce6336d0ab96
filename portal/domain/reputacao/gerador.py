# portal/domain/reputacao/gerador.py
from __future__ import annotations

from typing import Protocol

from .entities import RespostaGerador


class GeradorReputacao(Protocol):
    """Colaborador externo de geracao de texto. Falivel: levanta
    ServicoExternoError quando inacessivel ou mal configurado."""

    def gerar_relatorio(
        self,
        consulta: str,
        contexto: dict[str, str] | None = None,
    ) -> RespostaGerador: ...

    def gerar_analise(self, prompt: str) -> str: ...
