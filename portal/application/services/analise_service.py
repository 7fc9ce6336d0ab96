# portal/application/services/analise_service.py
from __future__ import annotations

from portal.domain.errors import NaoEncontradoError
from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.repository import FornecedorRepository
from portal.domain.reputacao.gerador import GeradorReputacao

from ..dtos.gestao_dto import AnaliseDTO

SEM_ANALISE = "Sem análise disponível."


def montar_prompt(fornecedor: Fornecedor) -> str:
    return (
        "Analise o risco de compliance deste fornecedor:\n"
        f"Nome: {fornecedor.nome}\n"
        f"Nota: {fornecedor.nota_media}\n"
        f"Ocorrências: {fornecedor.ocorrencias}\n"
        f"Advertências Atuais: {fornecedor.advertencias}\n"
        "Forneça um parecer curtíssimo (máximo 2 frases) sobre o risco de "
        "BLOQUEIO no sistema Paradigma."
    )


class AnaliseService:
    """Parecer preditivo de bloqueio. Texto opaco, exibido como veio."""

    def __init__(self, fornecedor_repo: FornecedorRepository, gerador: GeradorReputacao) -> None:
        self._fornecedor_repo = fornecedor_repo
        self._gerador = gerador

    def analisar(self, fornecedor_id: str) -> AnaliseDTO:
        fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id)
        if fornecedor is None:
            raise NaoEncontradoError(f"Fornecedor {fornecedor_id} nao encontrado")
        texto = self._gerador.gerar_analise(montar_prompt(fornecedor))
        return AnaliseDTO(fornecedor_id=fornecedor_id, parecer=texto.strip() or SEM_ANALISE)
