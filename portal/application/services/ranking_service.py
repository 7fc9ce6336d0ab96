# portal/application/services/ranking_service.py
from __future__ import annotations

from portal.domain.fornecedor.repository import FornecedorRepository
from portal.domain.fornecedor.score import ordenar_ranking

from ..dtos.fornecedor_dto import FornecedorResumoDTO

TODOS_SEGMENTOS = "Todos"


class RankingService:
    def __init__(self, fornecedor_repo: FornecedorRepository) -> None:
        self._fornecedor_repo = fornecedor_repo

    def ranking(
        self,
        texto: str | None = None,
        segmento: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[FornecedorResumoDTO]:
        if texto and texto.strip():
            fornecedores = self._fornecedor_repo.buscar_por_nome_ou_cnpj(texto)
        else:
            fornecedores = self._fornecedor_repo.listar()
        if segmento and segmento != TODOS_SEGMENTOS:
            fornecedores = [f for f in fornecedores if f.segmento == segmento]

        ordenados = ordenar_ranking(fornecedores)
        return [FornecedorResumoDTO.from_domain(f) for f in ordenados[offset:offset + limit]]

    def segmentos(self) -> list[str]:
        """'Todos' seguido dos segmentos distintos na ordem do ranking."""
        vistos = dict.fromkeys(f.segmento for f in ordenar_ranking(self._fornecedor_repo.listar()))
        return [TODOS_SEGMENTOS, *vistos]
