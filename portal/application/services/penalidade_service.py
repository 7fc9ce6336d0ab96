# portal/application/services/penalidade_service.py
from __future__ import annotations

from datetime import date

from portal.domain.errors import NaoEncontradoError
from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.penalidade import (
    aplicar_advertencia,
    bloquear_manualmente,
    resetar_advertencias,
)
from portal.domain.fornecedor.repository import FornecedorRepository
from portal.log import log

from ..dtos.fornecedor_dto import FornecedorDTO
from .trava import TRAVA_REGISTRO


class PenalidadeService:
    """Imperative Shell da maquina de penalidades: carrega, aplica transicao
    pura e grava o registro inteiro, tudo sob TRAVA_REGISTRO."""

    def __init__(self, fornecedor_repo: FornecedorRepository) -> None:
        self._fornecedor_repo = fornecedor_repo

    def aplicar_advertencia(
        self,
        fornecedor_id: str,
        motivo: str,
        gestor: str,
        hoje: date | None = None,
    ) -> FornecedorDTO:
        with TRAVA_REGISTRO:
            fornecedor = self._carregar(fornecedor_id)
            penalizado = aplicar_advertencia(fornecedor, motivo, gestor, hoje or date.today())
            self._fornecedor_repo.salvar(penalizado)
        log(
            f"Advertencia aplicada: fornecedor={fornecedor_id} gestor={gestor} "
            f"strikes={penalizado.advertencias} bloqueado={penalizado.bloqueado}"
        )
        return FornecedorDTO.from_domain(penalizado)

    def resetar_advertencias(self, fornecedor_id: str, gestor: str) -> FornecedorDTO:
        with TRAVA_REGISTRO:
            fornecedor = self._carregar(fornecedor_id)
            resetado = resetar_advertencias(fornecedor)
            self._fornecedor_repo.salvar(resetado)
        log(
            f"Advertencias resetadas: fornecedor={fornecedor_id} gestor={gestor} "
            f"descartados={len(fornecedor.historico_advertencias)} registros"
        )
        return FornecedorDTO.from_domain(resetado)

    def bloquear(self, fornecedor_id: str, gestor: str) -> FornecedorDTO:
        with TRAVA_REGISTRO:
            fornecedor = self._carregar(fornecedor_id)
            bloqueado = bloquear_manualmente(fornecedor)
            self._fornecedor_repo.salvar(bloqueado)
        log(f"Bloqueio manual: fornecedor={fornecedor_id} gestor={gestor}")
        return FornecedorDTO.from_domain(bloqueado)

    def _carregar(self, fornecedor_id: str) -> Fornecedor:
        fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id)
        if fornecedor is None:
            raise NaoEncontradoError(f"Fornecedor {fornecedor_id} nao encontrado")
        return fornecedor
