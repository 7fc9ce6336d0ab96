# portal/interfaces/api/dependencies.py
from collections.abc import Generator
from functools import lru_cache

import duckdb
from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from portal.application.services.analise_service import AnaliseService
from portal.application.services.autenticacao_service import AutenticacaoService
from portal.application.services.avaliacao_service import AvaliacaoService
from portal.application.services.ficha_service import FichaService
from portal.application.services.ocorrencia_service import OcorrenciaService
from portal.application.services.painel_service import PainelService
from portal.application.services.penalidade_service import PenalidadeService
from portal.application.services.ranking_service import RankingService
from portal.application.services.reclamacao_service import ReclamacaoService
from portal.application.services.reputacao_service import RastreadorConsultas, ReputacaoService
from portal.domain.errors import AutenticacaoError
from portal.domain.reputacao.gerador import GeradorReputacao
from portal.infrastructure.config import get_settings
from portal.infrastructure.duckdb_connection import get_connection
from portal.infrastructure.gemini_client import GeminiClient
from portal.infrastructure.repositories.duckdb_fornecedor_repo import DuckDBFornecedorRepo
from portal.infrastructure.repositories.duckdb_ocorrencia_repo import DuckDBOcorrenciaRepo
from portal.infrastructure.repositories.duckdb_pedido_repo import DuckDBPedidoRepo
from portal.infrastructure.repositories.duckdb_reclamacao_repo import DuckDBReclamacaoRepo

_basic = HTTPBasic(auto_error=False)


@lru_cache(maxsize=1)
def get_gerador() -> GeradorReputacao:
    return GeminiClient(get_settings())


@lru_cache(maxsize=1)
def get_rastreador() -> RastreadorConsultas:
    return RastreadorConsultas(max_sessoes=get_settings().reputacao_max_sessoes)


def get_autenticacao_service() -> AutenticacaoService:
    return AutenticacaoService(get_settings())


def get_gestor(
    credentials: HTTPBasicCredentials | None = Depends(_basic),  # noqa: B008
    service: AutenticacaoService = Depends(get_autenticacao_service),  # noqa: B008
) -> str:
    """Pre-condicao de todas as rotas /gestao. Devolve o usuario autenticado."""
    if credentials is None:
        raise AutenticacaoError("Autenticacao de gestor obrigatoria.")
    return service.autenticar(credentials.username, credentials.password)


def get_cursor() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Cursor proprio por requisicao; transacoes de threads distintas nao se misturam."""
    cursor = get_connection().cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_avaliacao_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> AvaliacaoService:
    return AvaliacaoService(
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        pedido_repo=DuckDBPedidoRepo(conn),
    )


def get_ranking_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> RankingService:
    return RankingService(fornecedor_repo=DuckDBFornecedorRepo(conn))


def get_ficha_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> FichaService:
    return FichaService(
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        pedido_repo=DuckDBPedidoRepo(conn),
        ocorrencia_repo=DuckDBOcorrenciaRepo(conn),
    )


def get_ocorrencia_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> OcorrenciaService:
    return OcorrenciaService(
        ocorrencia_repo=DuckDBOcorrenciaRepo(conn),
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        pedido_repo=DuckDBPedidoRepo(conn),
    )


def get_penalidade_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> PenalidadeService:
    return PenalidadeService(fornecedor_repo=DuckDBFornecedorRepo(conn))


def get_reclamacao_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> ReclamacaoService:
    return ReclamacaoService(reclamacao_repo=DuckDBReclamacaoRepo(conn))


def get_painel_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> PainelService:
    return PainelService(
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        reclamacao_repo=DuckDBReclamacaoRepo(conn),
    )


def get_reputacao_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    gerador: GeradorReputacao = Depends(get_gerador),  # noqa: B008
    rastreador: RastreadorConsultas = Depends(get_rastreador),  # noqa: B008
) -> ReputacaoService:
    return ReputacaoService(
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        gerador=gerador,
        rastreador=rastreador,
    )


def get_analise_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    gerador: GeradorReputacao = Depends(get_gerador),  # noqa: B008
) -> AnaliseService:
    return AnaliseService(
        fornecedor_repo=DuckDBFornecedorRepo(conn),
        gerador=gerador,
    )
