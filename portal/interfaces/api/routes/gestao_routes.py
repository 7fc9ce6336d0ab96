# portal/interfaces/api/routes/gestao_routes.py
from fastapi import APIRouter, Depends, Query

from portal.application.dtos.fornecedor_dto import FornecedorDTO, FornecedorResumoDTO
from portal.application.dtos.gestao_dto import (
    AdvertenciaIn,
    AnaliseDTO,
    LoginDTO,
    LoginIn,
    PainelDTO,
)
from portal.application.dtos.ocorrencia_dto import (
    OcorrenciaDTO,
    ReclamacaoDTO,
    RespostaReclamacaoIn,
)
from portal.application.services.analise_service import AnaliseService
from portal.application.services.autenticacao_service import AutenticacaoService
from portal.application.services.ocorrencia_service import OcorrenciaService
from portal.application.services.painel_service import PainelService
from portal.application.services.penalidade_service import PenalidadeService
from portal.application.services.ranking_service import RankingService
from portal.application.services.reclamacao_service import ReclamacaoService
from portal.domain.ocorrencia.enums import StatusReclamacao
from portal.interfaces.api.dependencies import (
    get_analise_service,
    get_autenticacao_service,
    get_gestor,
    get_ocorrencia_service,
    get_painel_service,
    get_penalidade_service,
    get_ranking_service,
    get_reclamacao_service,
)

router = APIRouter(prefix="/gestao")


@router.post("/login", response_model=LoginDTO)
def login(
    credenciais: LoginIn,
    service: AutenticacaoService = Depends(get_autenticacao_service),  # noqa: B008
) -> LoginDTO:
    usuario = service.autenticar(credenciais.usuario, credenciais.senha)
    return LoginDTO(autenticado=True, usuario=usuario)


@router.get("/painel", response_model=PainelDTO)
def painel(
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: PainelService = Depends(get_painel_service),  # noqa: B008
) -> PainelDTO:
    return service.metricas()


@router.get("/fornecedores", response_model=list[FornecedorResumoDTO])
def listar_fornecedores(
    q: str | None = Query(default=None, max_length=200),
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: RankingService = Depends(get_ranking_service),  # noqa: B008
) -> list[FornecedorResumoDTO]:
    return service.ranking(q, limit=100)


@router.post("/fornecedores/{fornecedor_id}/advertencias", response_model=FornecedorDTO)
def aplicar_advertencia(
    fornecedor_id: str,
    advertencia: AdvertenciaIn | None = None,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: PenalidadeService = Depends(get_penalidade_service),  # noqa: B008
) -> FornecedorDTO:
    motivo = advertencia.motivo if advertencia else ""
    return service.aplicar_advertencia(fornecedor_id, motivo, gestor)


@router.delete("/fornecedores/{fornecedor_id}/advertencias", response_model=FornecedorDTO)
def resetar_advertencias(
    fornecedor_id: str,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: PenalidadeService = Depends(get_penalidade_service),  # noqa: B008
) -> FornecedorDTO:
    return service.resetar_advertencias(fornecedor_id, gestor)


@router.post("/fornecedores/{fornecedor_id}/bloqueio", response_model=FornecedorDTO)
def bloquear(
    fornecedor_id: str,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: PenalidadeService = Depends(get_penalidade_service),  # noqa: B008
) -> FornecedorDTO:
    return service.bloquear(fornecedor_id, gestor)


@router.post("/fornecedores/{fornecedor_id}/analise", response_model=AnaliseDTO)
def analisar(
    fornecedor_id: str,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: AnaliseService = Depends(get_analise_service),  # noqa: B008
) -> AnaliseDTO:
    return service.analisar(fornecedor_id)


@router.get("/reclamacoes", response_model=list[ReclamacaoDTO])
def listar_reclamacoes(
    status: StatusReclamacao | None = None,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: ReclamacaoService = Depends(get_reclamacao_service),  # noqa: B008
) -> list[ReclamacaoDTO]:
    return service.listar(status)


@router.post("/reclamacoes/{reclamacao_id}/resposta", response_model=ReclamacaoDTO)
def responder_reclamacao(
    reclamacao_id: str,
    resposta: RespostaReclamacaoIn,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: ReclamacaoService = Depends(get_reclamacao_service),  # noqa: B008
) -> ReclamacaoDTO:
    return service.responder(reclamacao_id, resposta.email, resposta.texto)


@router.post("/ocorrencias/{ocorrencia_id}/avanco", response_model=OcorrenciaDTO)
def avancar_ocorrencia(
    ocorrencia_id: str,
    gestor: str = Depends(get_gestor),  # noqa: B008
    service: OcorrenciaService = Depends(get_ocorrencia_service),  # noqa: B008
) -> OcorrenciaDTO:
    return service.avancar_status(ocorrencia_id)
