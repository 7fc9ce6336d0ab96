# portal/interfaces/api/routes/ocorrencia_routes.py
from fastapi import APIRouter, Depends, Query

from portal.application.dtos.ocorrencia_dto import OcorrenciaDTO
from portal.application.services.ocorrencia_service import OcorrenciaService
from portal.domain.ocorrencia.enums import StatusOcorrencia, TipoOcorrencia
from portal.interfaces.api.dependencies import get_ocorrencia_service

router = APIRouter()


@router.get("/ocorrencias", response_model=list[OcorrenciaDTO])
def listar_ocorrencias(
    pedido_id: str | None = Query(default=None, max_length=100),
    segmento: str | None = Query(default=None, max_length=100),
    status: StatusOcorrencia | None = None,
    tipo: TipoOcorrencia | None = None,
    service: OcorrenciaService = Depends(get_ocorrencia_service),  # noqa: B008
) -> list[OcorrenciaDTO]:
    return service.listar(pedido_id, segmento, status, tipo)
