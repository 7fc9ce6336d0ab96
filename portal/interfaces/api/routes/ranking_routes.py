# portal/interfaces/api/routes/ranking_routes.py
from fastapi import APIRouter, Depends, Query

from portal.application.dtos.fornecedor_dto import FornecedorResumoDTO
from portal.application.services.ranking_service import RankingService
from portal.interfaces.api.dependencies import get_ranking_service

router = APIRouter()


@router.get("/fornecedores/ranking", response_model=list[FornecedorResumoDTO])
def get_ranking(
    q: str | None = Query(default=None, max_length=200),
    segmento: str | None = Query(default=None, max_length=100),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: RankingService = Depends(get_ranking_service),  # noqa: B008
) -> list[FornecedorResumoDTO]:
    return service.ranking(q, segmento, limit, offset)


@router.get("/fornecedores/segmentos", response_model=list[str])
def get_segmentos(
    service: RankingService = Depends(get_ranking_service),  # noqa: B008
) -> list[str]:
    return service.segmentos()
