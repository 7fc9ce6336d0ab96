# tests/application/test_penalidade_service.py
from datetime import date

import duckdb
import pytest

from portal.application.services.penalidade_service import PenalidadeService
from portal.domain.errors import FornecedorBloqueadoError, NaoEncontradoError
from portal.infrastructure.repositories.duckdb_fornecedor_repo import DuckDBFornecedorRepo

HOJE = date(2025, 11, 3)


def _service(conn: duckdb.DuckDBPyConnection) -> PenalidadeService:
    return PenalidadeService(DuckDBFornecedorRepo(conn))


def test_advertencia_persistida_com_historico(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).aplicar_advertencia("2", "Segundo atraso no mes", "gestor", HOJE)
    assert dto.advertencias == 2
    assert dto.bloqueado is False
    assert dto.historico_advertencias[-1].motivo == "Segundo atraso no mes"
    assert dto.historico_advertencias[-1].data == "2025-11-03"

    gravado = DuckDBFornecedorRepo(conn).buscar_por_id("2")
    assert gravado is not None
    assert gravado.advertencias == 2
    assert len(gravado.historico_advertencias) == 2
    assert gravado.historico_advertencias[0].gestor == "Carlos Gestor"


def test_terceira_advertencia_bloqueia_e_persiste(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).aplicar_advertencia("4", "Terceira ocorrencia grave", "gestor", HOJE)
    assert dto.advertencias == 3
    assert dto.bloqueado is True
    assert dto.estado_penalidade == "BLOQUEADO"

    gravado = DuckDBFornecedorRepo(conn).buscar_por_id("4")
    assert gravado is not None
    assert gravado.bloqueado is True


def test_advertencia_em_bloqueado_nao_altera_registro(conn: duckdb.DuckDBPyConnection):
    with pytest.raises(FornecedorBloqueadoError):
        _service(conn).aplicar_advertencia("5", "Mais uma", "gestor", HOJE)
    gravado = DuckDBFornecedorRepo(conn).buscar_por_id("5")
    assert gravado is not None
    assert gravado.advertencias == 3
    assert len(gravado.historico_advertencias) == 3


def test_reset_limpa_historico_persistido(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).resetar_advertencias("9", "gestor")
    assert dto.advertencias == 0
    assert dto.bloqueado is False
    assert dto.historico_advertencias == []

    gravado = DuckDBFornecedorRepo(conn).buscar_por_id("9")
    assert gravado is not None
    assert gravado.historico_advertencias == ()
    assert gravado.bloqueado is False


def test_bloqueio_manual(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).bloquear("3", "gestor")
    assert dto.bloqueado is True
    assert dto.advertencias == 0


def test_fornecedor_inexistente(conn: duckdb.DuckDBPyConnection):
    with pytest.raises(NaoEncontradoError):
        _service(conn).aplicar_advertencia("999", "x", "gestor", HOJE)
    with pytest.raises(NaoEncontradoError):
        _service(conn).resetar_advertencias("999", "gestor")
