# portal/interfaces/api/routes/reputacao_routes.py
from fastapi import APIRouter, Depends, Query

from portal.application.dtos.gestao_dto import RelatorioReputacaoDTO
from portal.application.services.reputacao_service import ReputacaoService
from portal.interfaces.api.dependencies import get_reputacao_service

router = APIRouter()


@router.get("/reputacao", response_model=RelatorioReputacaoDTO)
def consultar_reputacao(
    q: str = Query(..., min_length=1, max_length=200),
    sessao: str = Query(default="default", max_length=100),
    service: ReputacaoService = Depends(get_reputacao_service),  # noqa: B008
) -> RelatorioReputacaoDTO:
    return service.consultar(q, sessao)


@router.get("/reputacao/ultimo", response_model=RelatorioReputacaoDTO)
def ultimo_relatorio(
    sessao: str = Query(default="default", max_length=100),
    service: ReputacaoService = Depends(get_reputacao_service),  # noqa: B008
) -> RelatorioReputacaoDTO:
    return service.ultimo_relatorio(sessao)
