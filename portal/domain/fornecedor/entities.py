# portal/domain/fornecedor/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .value_objects import CNPJ, Criterios, ItemPedido

# Strikes que disparam o bloqueio.
LIMITE_ADVERTENCIAS = 3


@dataclass(frozen=True)
class RegistroAdvertencia:
    """Entrada do historico de strikes. Imutavel depois de anexada."""
    data: date
    motivo: str
    gestor: str

    def __post_init__(self) -> None:
        if not self.motivo.strip():
            raise ValueError("RegistroAdvertencia exige motivo nao-vazio")
        if not self.gestor.strip():
            raise ValueError("RegistroAdvertencia exige gestor nao-vazio")


@dataclass(frozen=True)
class Fornecedor:
    """Aggregate Root. Imutavel: nota e penalidades mudam apenas por funcoes
    puras de score.py / penalidade.py, que devolvem uma nova instancia."""
    id: str
    nome: str
    cnpj: CNPJ
    contato: str
    nota_media: Decimal
    criterios: Criterios
    segmento: str
    volume: int = 0
    ocorrencias: int = 0
    itens: tuple[ItemPedido, ...] = ()
    advertencias: int = 0
    bloqueado: bool = False
    historico_advertencias: tuple[RegistroAdvertencia, ...] = ()
    ultima_auditoria: date | None = None

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome do fornecedor nao pode ser vazio")
        if self.advertencias < 0:
            raise ValueError("Advertencias nao podem ser negativas")
        if self.advertencias >= LIMITE_ADVERTENCIAS and not self.bloqueado:
            raise ValueError(
                f"Fornecedor com {self.advertencias} advertencias deve estar bloqueado",
            )

    def item_por_id(self, item_id: str) -> ItemPedido | None:
        return next((i for i in self.itens if i.id == item_id), None)
