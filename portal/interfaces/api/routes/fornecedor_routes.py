# portal/interfaces/api/routes/fornecedor_routes.py
from fastapi import APIRouter, Depends

from portal.application.dtos.ficha_dto import FichaFornecedorDTO
from portal.application.services.ficha_service import FichaService
from portal.interfaces.api.dependencies import get_ficha_service

router = APIRouter()


@router.get("/fornecedores/{fornecedor_id}", response_model=FichaFornecedorDTO)
def get_ficha(
    fornecedor_id: str,
    service: FichaService = Depends(get_ficha_service),  # noqa: B008
) -> FichaFornecedorDTO:
    return service.obter_ficha(fornecedor_id)
