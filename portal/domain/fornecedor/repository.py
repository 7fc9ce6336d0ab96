# portal/domain/fornecedor/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Fornecedor


class FornecedorRepository(Protocol):
    def buscar_por_id(self, fornecedor_id: str) -> Fornecedor | None: ...
    def listar(self) -> list[Fornecedor]: ...
    def buscar_por_nome_ou_cnpj(self, query: str) -> list[Fornecedor]: ...
    def salvar(self, fornecedor: Fornecedor) -> None: ...


class PedidoRepository(Protocol):
    """Associacao fixa OC/processo -> fornecedor."""

    def fornecedor_do_pedido(self, identificador: str) -> str | None: ...
    def pedidos_do_fornecedor(self, fornecedor_id: str) -> list[str]: ...
