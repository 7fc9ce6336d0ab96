# portal/application/dtos/ocorrencia_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from portal.domain.ocorrencia.entities import Ocorrencia, Reclamacao


class ItemAfetadoDTO(BaseModel):
    nome: str
    quantidade: int
    observacao: str


class OcorrenciaDTO(BaseModel):
    id: str
    data: str
    pedido_id: str
    segmento: str
    tipo: str
    qtd_itens_afetados: int
    itens_afetados: list[ItemAfetadoDTO]
    qtd_anexos: int
    anexos: list[str]
    status: str
    descricao: str
    autor: str

    @classmethod
    def from_domain(cls, o: Ocorrencia) -> OcorrenciaDTO:
        return cls(
            id=o.id,
            data=o.data.isoformat(),
            pedido_id=o.pedido_id,
            segmento=o.segmento,
            tipo=o.tipo.value,
            qtd_itens_afetados=o.qtd_itens_afetados or 0,
            itens_afetados=[
                ItemAfetadoDTO(nome=i.nome, quantidade=i.quantidade, observacao=i.observacao)
                for i in o.itens_afetados
            ],
            qtd_anexos=o.qtd_anexos or 0,
            anexos=list(o.anexos),
            status=o.status.value,
            descricao=o.descricao,
            autor=o.autor,
        )


class ItemSelecionadoIn(BaseModel):
    item_id: str
    observacao: str = ""


class RelatoOcorrenciaIn(BaseModel):
    """Tipo chega como texto livre: rotulo desconhecido vira erro de validacao
    junto com as demais regras, nao um 422 isolado do pydantic."""
    tipo: str | None = None
    descricao: str = ""
    autor: str = Field(default="Usuário do portal", min_length=1, max_length=200)
    itens: list[ItemSelecionadoIn] = []
    anexos: list[str] = []


class ReclamacaoDTO(BaseModel):
    id: str
    fornecedor_nome: str
    fornecedor_email: str
    data: str
    tipo: str
    descricao: str
    status: str
    resposta_email: str | None
    resposta_texto: str | None

    @classmethod
    def from_domain(cls, r: Reclamacao) -> ReclamacaoDTO:
        return cls(
            id=r.id,
            fornecedor_nome=r.fornecedor_nome,
            fornecedor_email=r.fornecedor_email,
            data=r.data.isoformat(),
            tipo=r.tipo.value,
            descricao=r.descricao,
            status=r.status.value,
            resposta_email=r.resposta_email,
            resposta_texto=r.resposta_texto,
        )


class RespostaReclamacaoIn(BaseModel):
    email: str = ""
    texto: str = ""
