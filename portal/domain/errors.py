# portal/domain/errors.py
"""Tipos de erro do dominio. Todos sao recuperaveis: a camada HTTP converte
cada um em resposta para o usuario e o processo segue aceitando requisicoes."""
from __future__ import annotations


class PortalError(Exception):
    """Base de todos os erros de dominio do portal."""


class NaoEncontradoError(PortalError):
    """OC/processo, fornecedor, ocorrencia ou reclamacao inexistente."""


class ValidacaoError(PortalError):
    """Coleta TODAS as regras violadas, nunca so a primeira."""

    def __init__(self, erros: list[str]) -> None:
        if not erros:
            raise ValueError("ValidacaoError exige ao menos uma mensagem")
        self.erros = list(erros)
        super().__init__("; ".join(self.erros))


class FornecedorBloqueadoError(ValidacaoError):
    """Advertencia aplicada a fornecedor ja bloqueado."""

    def __init__(self, fornecedor_id: str) -> None:
        self.fornecedor_id = fornecedor_id
        super().__init__([f"Fornecedor {fornecedor_id} ja esta bloqueado."])


class ServicoExternoError(PortalError):
    """Gerador de reputacao inacessivel, mal configurado ou com resposta invalida.
    Distinto de uma consulta bem-sucedida sem fontes."""


class AutenticacaoError(PortalError):
    """Credenciais de gestor invalidas."""
