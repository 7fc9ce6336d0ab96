# portal/domain/fornecedor/score.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from portal.domain.errors import ValidacaoError

from .entities import Fornecedor
from .enums import StatusFornecedor
from .value_objects import Criterios

# ADR: Limiares como constante de modulo, limite inferior inclusivo.
LIMIAR_OTIMO = Decimal("4.0")
LIMIAR_BOM = Decimal("2.0")

_UMA_CASA = Decimal("0.1")


def _decimal(valor: Decimal | float | int) -> Decimal:
    return valor if isinstance(valor, Decimal) else Decimal(str(valor))


def calcular_media(
    qualidade: Decimal | float | int,
    entrega: Decimal | float | int,
    suporte: Decimal | float | int,
) -> Decimal | None:
    """Media aritmetica com uma casa decimal (ROUND_HALF_UP).
    None se algum criterio for 0 (nao avaliado)."""
    notas = [_decimal(qualidade), _decimal(entrega), _decimal(suporte)]
    if any(n == 0 for n in notas):
        return None
    media = sum(notas, Decimal("0")) / Decimal(len(notas))
    return media.quantize(_UMA_CASA, rounding=ROUND_HALF_UP)


def classificar(nota: Decimal | float | int) -> StatusFornecedor:
    n = _decimal(nota)
    if n >= LIMIAR_OTIMO:
        return StatusFornecedor.OTIMO
    if n >= LIMIAR_BOM:
        return StatusFornecedor.BOM
    return StatusFornecedor.RUIM


def recomendado(nota: Decimal | float | int) -> bool:
    """Apenas a faixa OTIMO e recomendada; RUIM e sinalizada como nao recomendada."""
    return classificar(nota) is StatusFornecedor.OTIMO


def ordenar_ranking(fornecedores: Iterable[Fornecedor]) -> list[Fornecedor]:
    """nota_media DESC. sorted() e estavel: empates mantem a ordem de entrada."""
    return sorted(fornecedores, key=lambda f: f.nota_media, reverse=True)


def registrar_avaliacao(
    fornecedor: Fornecedor,
    qualidade: int,
    entrega: int,
    suporte: int,
) -> Fornecedor:
    """Aplica uma submissao de estrelas (1-5, 0 = nao avaliado).

    Sem os tres criterios a media nao existe: nada muda e todas as
    pendencias sao reportadas de uma vez.
    """
    estrelas = {"qualidade": qualidade, "entrega": entrega, "suporte": suporte}
    erros = [
        f"Avalie o criterio '{nome}' com 1 a 5 estrelas."
        for nome, valor in estrelas.items()
        if not 0 < valor <= 5
    ]
    media = calcular_media(qualidade, entrega, suporte)
    if erros or media is None:
        raise ValidacaoError(erros or ["Avaliacao incompleta."])

    return replace(
        fornecedor,
        nota_media=media,
        criterios=Criterios(
            qualidade=Decimal(qualidade),
            entrega=Decimal(entrega),
            suporte=Decimal(suporte),
        ),
    )
