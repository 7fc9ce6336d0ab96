# portal/domain/fornecedor/penalidade.py
"""Maquina de estados de penalidades. Funcoes puras, zero IO.

Estados: ATIVO (0-2 advertencias, nao bloqueado) e BLOQUEADO.
Advertencias nao expiram; so o reset administrativo limpa o historico.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date

from portal.domain.errors import FornecedorBloqueadoError

from .entities import LIMITE_ADVERTENCIAS, Fornecedor, RegistroAdvertencia
from .enums import EstadoPenalidade

MOTIVO_PADRAO = "Penalidade aplicada manualmente pelo gestor via Central."


def estado(fornecedor: Fornecedor) -> EstadoPenalidade:
    return EstadoPenalidade.BLOQUEADO if fornecedor.bloqueado else EstadoPenalidade.ATIVO


def aplicar_advertencia(
    fornecedor: Fornecedor,
    motivo: str,
    gestor: str,
    data: date,
) -> Fornecedor:
    """Soma um strike e anexa o registro. Ao atingir LIMITE_ADVERTENCIAS bloqueia.

    Raises:
        FornecedorBloqueadoError: fornecedor ja bloqueado. Nada e alterado.
    """
    if fornecedor.bloqueado:
        raise FornecedorBloqueadoError(fornecedor.id)

    registro = RegistroAdvertencia(
        data=data,
        motivo=motivo.strip() or MOTIVO_PADRAO,
        gestor=gestor,
    )
    advertencias = fornecedor.advertencias + 1
    return replace(
        fornecedor,
        advertencias=advertencias,
        bloqueado=advertencias >= LIMITE_ADVERTENCIAS or fornecedor.bloqueado,
        historico_advertencias=(*fornecedor.historico_advertencias, registro),
    )


def resetar_advertencias(fornecedor: Fornecedor) -> Fornecedor:
    """Override administrativo. O historico anterior e descartado, nao arquivado."""
    return replace(
        fornecedor,
        advertencias=0,
        bloqueado=False,
        historico_advertencias=(),
    )


def bloquear_manualmente(fornecedor: Fornecedor) -> Fornecedor:
    """Bloqueio explicito sem strike. Advertencias e historico ficam intactos."""
    return replace(fornecedor, bloqueado=True)
