# tests/application/test_ocorrencia_service.py
from datetime import date

import duckdb
import pytest

from portal.application.services.ficha_service import FichaService
from portal.application.services.ocorrencia_service import OcorrenciaService
from portal.domain.errors import NaoEncontradoError, ValidacaoError
from portal.domain.ocorrencia.entities import ItemSelecionado, RelatoOcorrencia
from portal.domain.ocorrencia.enums import StatusOcorrencia, TipoOcorrencia
from portal.domain.ocorrencia.fluxo import ERRO_ITENS, ERRO_TIPO
from portal.infrastructure.repositories.duckdb_fornecedor_repo import DuckDBFornecedorRepo
from portal.infrastructure.repositories.duckdb_ocorrencia_repo import DuckDBOcorrenciaRepo
from portal.infrastructure.repositories.duckdb_pedido_repo import DuckDBPedidoRepo

HOJE = date(2025, 11, 3)


def _service(conn: duckdb.DuckDBPyConnection) -> OcorrenciaService:
    return OcorrenciaService(
        DuckDBOcorrenciaRepo(conn), DuckDBFornecedorRepo(conn), DuckDBPedidoRepo(conn),
    )


def _relato(**kwargs: object) -> RelatoOcorrencia:
    dados: dict[str, object] = {
        "pedido_id": "OC-2025-001",
        "tipo": TipoOcorrencia.PRODUTO_COM_DEFEITO,
        "descricao": "Cabos com isolamento rompido.",
        "autor": "Maria Compras",
        "itens": (ItemSelecionado("i1", "10 unidades danificadas"),),
        "anexos": ("foto_lote.jpg",),
    }
    dados.update(kwargs)
    return RelatoOcorrencia(**dados)  # type: ignore[arg-type]


def test_registro_gera_id_sequencial(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    primeira = service.registrar(_relato(), HOJE)
    segunda = service.registrar(_relato(), HOJE)
    assert primeira.id == "RP-2025-0044"
    assert segunda.id == "RP-2025-0045"


def test_sequencia_reinicia_por_ano(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).registrar(_relato(), date(2026, 1, 2))
    assert dto.id == "RP-2026-0001"


def test_registro_resolve_itens_e_segmento(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).registrar(_relato(pedido_id="oc-2025-001"), HOJE)
    assert dto.pedido_id == "OC-2025-001"
    assert dto.segmento == "Logística"
    assert dto.status == "Aberto"
    assert dto.tipo == "Produto com defeito"
    assert dto.qtd_itens_afetados == 1
    assert dto.itens_afetados[0].nome == "Cabo de alimentação 2m"
    assert dto.itens_afetados[0].quantidade == 50
    assert dto.itens_afetados[0].observacao == "10 unidades danificadas"
    assert dto.qtd_anexos == 1


def test_registro_persistido_no_historico(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    dto = service.registrar(_relato(), HOJE)
    historico = service.listar(pedido_id="OC-2025-001")
    assert [o.id for o in historico] == ["RP-2025-0043", dto.id]
    assert historico[-1].itens_afetados[0].nome == "Cabo de alimentação 2m"
    assert historico[-1].anexos == ["foto_lote.jpg"]


def test_defeito_sem_itens_nao_registra(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    with pytest.raises(ValidacaoError) as exc:
        service.registrar(_relato(itens=()), HOJE)
    assert exc.value.erros == [ERRO_ITENS]
    assert len(service.listar()) == 1


def test_relato_sem_tipo_nao_registra(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    with pytest.raises(ValidacaoError) as exc:
        service.registrar(_relato(tipo=None), HOJE)
    assert exc.value.erros == [ERRO_TIPO]
    assert len(service.listar()) == 1


def test_item_de_outra_oc_rejeitado(conn: duckdb.DuckDBPyConnection):
    with pytest.raises(ValidacaoError) as exc:
        _service(conn).registrar(_relato(itens=(ItemSelecionado("i4"),)), HOJE)
    assert exc.value.erros == ["Item i4 nao pertence a OC OC-2025-001."]


def test_tipo_sem_itens_descarta_selecao(conn: duckdb.DuckDBPyConnection):
    dto = _service(conn).registrar(_relato(tipo=TipoOcorrencia.FALTA_DE_RETORNO), HOJE)
    assert dto.itens_afetados == []
    assert dto.qtd_itens_afetados == 0


def test_pedido_desconhecido(conn: duckdb.DuckDBPyConnection):
    with pytest.raises(NaoEncontradoError):
        _service(conn).registrar(_relato(pedido_id="ZZZ-000"), HOJE)


def test_listar_com_filtros(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    service.registrar(_relato(pedido_id="OC-2025-002", itens=(ItemSelecionado("i5"),)), HOJE)
    assert [o.segmento for o in service.listar(segmento="Periféricos")] == ["Periféricos"]
    assert [o.id for o in service.listar(status=StatusOcorrencia.FECHADO)] == ["RP-2025-0043"]
    assert len(service.listar(tipo=TipoOcorrencia.PRODUTO_COM_DEFEITO)) == 1
    assert service.listar(segmento="TI") == []


def test_avancar_status(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    dto = service.registrar(_relato(), HOJE)
    assert service.avancar_status(dto.id).status == "Em análise"
    assert service.avancar_status(dto.id).status == "Fechado"
    with pytest.raises(ValidacaoError):
        service.avancar_status(dto.id)


def test_avancar_fechado_e_inexistente(conn: duckdb.DuckDBPyConnection):
    service = _service(conn)
    with pytest.raises(ValidacaoError):
        service.avancar_status("RP-2025-0043")
    with pytest.raises(NaoEncontradoError):
        service.avancar_status("RP-1999-0001")


def test_ficha_vincula_ocorrencias_por_pedido_e_segmento(conn: duckdb.DuckDBPyConnection):
    ficha_service = FichaService(
        DuckDBFornecedorRepo(conn), DuckDBPedidoRepo(conn), DuckDBOcorrenciaRepo(conn),
    )
    ficha = ficha_service.obter_ficha("1")
    assert ficha.fornecedor.id == "1"
    assert ficha.pedidos == ["FLUIG-123456", "OC-2025-001"]
    assert [o.id for o in ficha.ocorrencias] == ["RP-2025-0043"]

    assert ficha_service.obter_ficha("3").ocorrencias == []
    with pytest.raises(NaoEncontradoError):
        ficha_service.obter_ficha("999")
