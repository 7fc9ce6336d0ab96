# portal/interfaces/api/routes/avaliacao_routes.py
from fastapi import APIRouter, Depends, Path

from portal.application.dtos.fornecedor_dto import AvaliacaoIn, FornecedorDTO
from portal.application.dtos.ocorrencia_dto import OcorrenciaDTO, RelatoOcorrenciaIn
from portal.application.services.avaliacao_service import AvaliacaoService
from portal.application.services.ocorrencia_service import OcorrenciaService
from portal.domain.errors import ValidacaoError
from portal.domain.ocorrencia.entities import ItemSelecionado, RelatoOcorrencia
from portal.domain.ocorrencia.enums import TipoOcorrencia
from portal.interfaces.api.dependencies import get_avaliacao_service, get_ocorrencia_service

router = APIRouter()


@router.get("/avaliacao/pedidos/{identificador}", response_model=FornecedorDTO)
def buscar_pedido(
    identificador: str = Path(..., max_length=100),
    service: AvaliacaoService = Depends(get_avaliacao_service),  # noqa: B008
) -> FornecedorDTO:
    return service.buscar_por_pedido(identificador)


@router.post("/avaliacao/fornecedores/{fornecedor_id}", response_model=FornecedorDTO)
def enviar_avaliacao(
    fornecedor_id: str,
    avaliacao: AvaliacaoIn,
    service: AvaliacaoService = Depends(get_avaliacao_service),  # noqa: B008
) -> FornecedorDTO:
    return service.enviar_avaliacao(
        fornecedor_id, avaliacao.qualidade, avaliacao.entrega, avaliacao.suporte,
    )


@router.post(
    "/avaliacao/pedidos/{identificador}/ocorrencias",
    response_model=OcorrenciaDTO,
    status_code=201,
)
def relatar_ocorrencia(
    identificador: str,
    relato: RelatoOcorrenciaIn,
    service: OcorrenciaService = Depends(get_ocorrencia_service),  # noqa: B008
) -> OcorrenciaDTO:
    tipo: TipoOcorrencia | None = None
    if relato.tipo:
        try:
            tipo = TipoOcorrencia(relato.tipo)
        except ValueError as err:
            validos = [t.value for t in TipoOcorrencia]
            raise ValidacaoError([f"Tipo de problema invalido. Valores aceitos: {validos}"]) from err

    return service.registrar(
        RelatoOcorrencia(
            pedido_id=identificador,
            tipo=tipo,
            descricao=relato.descricao,
            autor=relato.autor,
            itens=tuple(ItemSelecionado(i.item_id, i.observacao) for i in relato.itens),
            anexos=tuple(relato.anexos),
        ),
    )
