# portal/application/services/ficha_service.py
from __future__ import annotations

from portal.domain.errors import NaoEncontradoError
from portal.domain.fornecedor.repository import FornecedorRepository, PedidoRepository
from portal.domain.ocorrencia.repository import OcorrenciaRepository

from ..dtos.ficha_dto import FichaFornecedorDTO


class FichaService:
    """Ficha do fornecedor: cadastro, penalidades e ocorrencias vinculadas."""

    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        pedido_repo: PedidoRepository,
        ocorrencia_repo: OcorrenciaRepository,
    ) -> None:
        self._fornecedor_repo = fornecedor_repo
        self._pedido_repo = pedido_repo
        self._ocorrencia_repo = ocorrencia_repo

    def obter_ficha(self, fornecedor_id: str) -> FichaFornecedorDTO:
        fornecedor = self._fornecedor_repo.buscar_por_id(fornecedor_id)
        if fornecedor is None:
            raise NaoEncontradoError(f"Fornecedor {fornecedor_id} nao encontrado")

        pedidos = self._pedido_repo.pedidos_do_fornecedor(fornecedor_id)
        ocorrencias = self._ocorrencia_repo.listar_por_pedidos_ou_segmento(
            pedidos, fornecedor.segmento,
        )
        return FichaFornecedorDTO.from_domain(fornecedor, pedidos, ocorrencias)
