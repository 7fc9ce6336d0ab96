# tests/domain/test_score_fornecedor.py
from decimal import Decimal

import pytest

from portal.domain.errors import ValidacaoError
from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.enums import StatusFornecedor
from portal.domain.fornecedor.score import (
    calcular_media,
    classificar,
    ordenar_ranking,
    recomendado,
    registrar_avaliacao,
)
from portal.domain.fornecedor.value_objects import CNPJ, Criterios


def _fornecedor(fornecedor_id: str = "1", nota: str = "3.0") -> Fornecedor:
    return Fornecedor(
        id=fornecedor_id,
        nome=f"Fornecedor {fornecedor_id}",
        cnpj=CNPJ("11222333000181"),
        contato="contato@teste.com.br",
        nota_media=Decimal(nota),
        criterios=Criterios(Decimal("3"), Decimal("3"), Decimal("3")),
        segmento="TI",
    )


# ---------- calcular_media ----------


def test_media_arredonda_para_uma_casa():
    """(5+4+5)/3 = 4.666... -> 4.7"""
    assert calcular_media(5, 4, 5) == Decimal("4.7")


def test_media_criterio_zero_e_indefinida():
    assert calcular_media(0, 4, 5) is None
    assert calcular_media(5, 0, 5) is None
    assert calcular_media(5, 4, 0) is None


def test_media_round_half_up():
    """(1+1+2.15)/3 = 1.38333 -> 1.4; (4.5+4.5+4.6)/3 = 4.5333 -> 4.5"""
    assert calcular_media(Decimal("1"), Decimal("1"), Decimal("2.15")) == Decimal("1.4")
    assert calcular_media(Decimal("4.5"), Decimal("4.5"), Decimal("4.6")) == Decimal("4.5")


def test_media_meio_exato_sobe():
    """(1+1+1.15)/3 = 1.05 exato -> 1.1 (nao arredonda para par)."""
    assert calcular_media(Decimal("1"), Decimal("1"), Decimal("1.15")) == Decimal("1.1")


def test_media_notas_maximas():
    assert calcular_media(5, 5, 5) == Decimal("5.0")


# ---------- classificar ----------


@pytest.mark.parametrize(
    ("nota", "esperado"),
    [
        (Decimal("5.0"), StatusFornecedor.OTIMO),
        (Decimal("4.0"), StatusFornecedor.OTIMO),
        (Decimal("3.999"), StatusFornecedor.BOM),
        (Decimal("2.0"), StatusFornecedor.BOM),
        (Decimal("1.999"), StatusFornecedor.RUIM),
        (Decimal("0"), StatusFornecedor.RUIM),
    ],
)
def test_classificar_limiares_inclusivos(nota: Decimal, esperado: StatusFornecedor):
    assert classificar(nota) is esperado


def test_classificar_aceita_float():
    assert classificar(4.0) is StatusFornecedor.OTIMO
    assert classificar(3.999) is StatusFornecedor.BOM


def test_recomendado_apenas_otimo():
    assert recomendado(Decimal("4.0")) is True
    assert recomendado(Decimal("3.9")) is False
    assert recomendado(Decimal("1.2")) is False


def test_rotulos_de_status_preservados():
    assert StatusFornecedor.OTIMO.value == "ÓTIMO"
    assert StatusFornecedor.BOM.value == "BOM"
    assert StatusFornecedor.RUIM.value == "RUIM"


# ---------- ordenar_ranking ----------


def test_ranking_desc_com_empate_estavel():
    a = _fornecedor("A", "4.8")
    b = _fornecedor("B", "1.2")
    c = _fornecedor("C", "4.8")
    ordenados = ordenar_ranking([a, b, c])
    assert [f.id for f in ordenados] == ["A", "C", "B"]


def test_ranking_nao_perde_elementos():
    fornecedores = [_fornecedor(str(i), nota) for i, nota in enumerate(["2.0", "4.1", "2.0", "0.5"])]
    ordenados = ordenar_ranking(fornecedores)
    assert len(ordenados) == 4
    assert {f.id for f in ordenados} == {"0", "1", "2", "3"}


def test_ranking_vazio():
    assert ordenar_ranking([]) == []


# ---------- registrar_avaliacao ----------


def test_avaliacao_completa_atualiza_media_e_criterios():
    avaliado = registrar_avaliacao(_fornecedor(), 5, 4, 5)
    assert avaliado.nota_media == Decimal("4.7")
    assert avaliado.criterios == Criterios(Decimal("5"), Decimal("4"), Decimal("5"))


def test_avaliacao_nao_altera_original():
    original = _fornecedor()
    registrar_avaliacao(original, 5, 5, 5)
    assert original.nota_media == Decimal("3.0")


def test_avaliacao_incompleta_lista_todos_criterios_pendentes():
    with pytest.raises(ValidacaoError) as exc:
        registrar_avaliacao(_fornecedor(), 0, 4, 0)
    assert len(exc.value.erros) == 2
    assert any("qualidade" in e for e in exc.value.erros)
    assert any("suporte" in e for e in exc.value.erros)


def test_avaliacao_estrela_fora_do_intervalo():
    with pytest.raises(ValidacaoError):
        registrar_avaliacao(_fornecedor(), 6, 4, 5)
