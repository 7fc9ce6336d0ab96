# portal/domain/ocorrencia/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .enums import StatusOcorrencia, StatusReclamacao, TipoOcorrencia


@dataclass(frozen=True)
class ItemAfetado:
    nome: str
    quantidade: int
    observacao: str = ""


@dataclass(frozen=True)
class Ocorrencia:
    """Problema registrado contra um fornecedor. Sem FK: o vinculo com o
    fornecedor e feito pelo pedido_id ou pelo texto do segmento."""
    id: str
    data: date
    pedido_id: str
    segmento: str
    tipo: TipoOcorrencia
    descricao: str
    autor: str
    status: StatusOcorrencia = StatusOcorrencia.ABERTO
    itens_afetados: tuple[ItemAfetado, ...] = ()
    anexos: tuple[str, ...] = ()
    qtd_itens_afetados: int | None = None
    qtd_anexos: int | None = None

    def __post_init__(self) -> None:
        # Contagens acompanham o detalhe quando nao informadas.
        if self.qtd_itens_afetados is None:
            object.__setattr__(self, "qtd_itens_afetados", len(self.itens_afetados))
        if self.qtd_anexos is None:
            object.__setattr__(self, "qtd_anexos", len(self.anexos))


@dataclass(frozen=True)
class ItemSelecionado:
    """Item da OC marcado no relato, com observacao opcional."""
    item_id: str
    observacao: str = ""


@dataclass(frozen=True)
class RelatoOcorrencia:
    """Submissao de relato de problema. Ainda nao validada."""
    pedido_id: str
    tipo: TipoOcorrencia | None
    descricao: str
    autor: str
    itens: tuple[ItemSelecionado, ...] = ()
    anexos: tuple[str, ...] = ()


@dataclass(frozen=True)
class Reclamacao:
    id: str
    fornecedor_nome: str
    fornecedor_email: str
    data: date
    tipo: TipoOcorrencia
    descricao: str
    status: StatusReclamacao = StatusReclamacao.PENDENTE
    resposta_email: str | None = None
    resposta_texto: str | None = None
