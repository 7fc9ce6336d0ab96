# portal/application/services/painel_service.py
from __future__ import annotations

from decimal import Decimal

from portal.domain.fornecedor.repository import FornecedorRepository
from portal.domain.ocorrencia.repository import ReclamacaoRepository

from ..dtos.gestao_dto import PainelDTO

# Corte do card "nota baixa" do painel; diferente do limiar da faixa RUIM.
LIMIAR_NOTA_BAIXA = Decimal("2.5")


class PainelService:
    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        reclamacao_repo: ReclamacaoRepository,
    ) -> None:
        self._fornecedor_repo = fornecedor_repo
        self._reclamacao_repo = reclamacao_repo

    def metricas(self) -> PainelDTO:
        fornecedores = self._fornecedor_repo.listar()
        return PainelDTO(
            total_fornecedores=len(fornecedores),
            bloqueados=sum(1 for f in fornecedores if f.bloqueado),
            nota_baixa=sum(1 for f in fornecedores if f.nota_media < LIMIAR_NOTA_BAIXA),
            reclamacoes_pendentes=self._reclamacao_repo.contar_pendentes(),
        )
