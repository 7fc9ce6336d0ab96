# portal/application/services/avaliacao_service.py
from __future__ import annotations

from portal.domain.errors import NaoEncontradoError
from portal.domain.fornecedor.repository import FornecedorRepository, PedidoRepository
from portal.domain.fornecedor.score import registrar_avaliacao
from portal.log import log

from ..dtos.fornecedor_dto import FornecedorDTO
from .trava import TRAVA_REGISTRO

MSG_PEDIDO_NAO_ENCONTRADO = "Nenhuma OC/Processo encontrada(o). Tente outro número."


class AvaliacaoService:
    """Fluxo de avaliacao: OC/processo -> fornecedor -> estrelas."""

    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        pedido_repo: PedidoRepository,
    ) -> None:
        self._fornecedor_repo = fornecedor_repo
        self._pedido_repo = pedido_repo

    def buscar_por_pedido(self, identificador: str) -> FornecedorDTO:
        """Match exato, case-insensitive. Ausencia e reportada, nunca outra excecao."""
        normalizado = identificador.strip().upper()
        fornecedor_id = self._pedido_repo.fornecedor_do_pedido(normalizado) if normalizado else None
        fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id) if fornecedor_id else None
        if fornecedor is None:
            raise NaoEncontradoError(MSG_PEDIDO_NAO_ENCONTRADO)
        return FornecedorDTO.from_domain(fornecedor)

    def enviar_avaliacao(
        self,
        fornecedor_id: str,
        qualidade: int,
        entrega: int,
        suporte: int,
    ) -> FornecedorDTO:
        with TRAVA_REGISTRO:
            fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id)
            if fornecedor is None:
                raise NaoEncontradoError(f"Fornecedor {fornecedor_id} nao encontrado")

            avaliado = registrar_avaliacao(fornecedor, qualidade, entrega, suporte)
            self._fornecedor_repo.salvar(avaliado)
        log(f"Avaliacao registrada: fornecedor={fornecedor_id} nota={avaliado.nota_media}")
        return FornecedorDTO.from_domain(avaliado)
