# portal/application/dtos/fornecedor_dto.py
from __future__ import annotations

from pydantic import BaseModel

from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.penalidade import estado
from portal.domain.fornecedor.score import classificar, recomendado


class CriteriosDTO(BaseModel):
    qualidade: float
    entrega: float
    suporte: float


class ItemPedidoDTO(BaseModel):
    id: str
    nome: str
    quantidade: int
    unidade: str


class RegistroAdvertenciaDTO(BaseModel):
    data: str
    motivo: str
    gestor: str


class FornecedorResumoDTO(BaseModel):
    id: str
    nome: str
    cnpj: str
    cnpj_valido: bool
    segmento: str
    nota_media: float
    status: str
    recomendado: bool
    volume: int
    ocorrencias: int
    advertencias: int
    bloqueado: bool

    @classmethod
    def from_domain(cls, f: Fornecedor) -> FornecedorResumoDTO:
        return cls(
            id=f.id,
            nome=f.nome,
            cnpj=f.cnpj.formatado,
            cnpj_valido=f.cnpj.digitos_conferem,
            segmento=f.segmento,
            nota_media=float(f.nota_media),
            status=classificar(f.nota_media).value,
            recomendado=recomendado(f.nota_media),
            volume=f.volume,
            ocorrencias=f.ocorrencias,
            advertencias=f.advertencias,
            bloqueado=f.bloqueado,
        )


class FornecedorDTO(FornecedorResumoDTO):
    contato: str
    criterios: CriteriosDTO
    itens: list[ItemPedidoDTO]
    estado_penalidade: str
    historico_advertencias: list[RegistroAdvertenciaDTO]
    ultima_auditoria: str | None

    @classmethod
    def from_domain(cls, f: Fornecedor) -> FornecedorDTO:
        resumo = FornecedorResumoDTO.from_domain(f)
        return cls(
            **resumo.model_dump(),
            contato=f.contato,
            criterios=CriteriosDTO(
                qualidade=float(f.criterios.qualidade),
                entrega=float(f.criterios.entrega),
                suporte=float(f.criterios.suporte),
            ),
            itens=[
                ItemPedidoDTO(id=i.id, nome=i.nome, quantidade=i.quantidade, unidade=i.unidade)
                for i in f.itens
            ],
            estado_penalidade=estado(f).value,
            historico_advertencias=[
                RegistroAdvertenciaDTO(data=r.data.isoformat(), motivo=r.motivo, gestor=r.gestor)
                for r in f.historico_advertencias
            ],
            ultima_auditoria=f.ultima_auditoria.isoformat() if f.ultima_auditoria else None,
        )


class AvaliacaoIn(BaseModel):
    """Estrelas por criterio. 0 = nao avaliado; a regra de negocio exige 1-5."""
    qualidade: int = 0
    entrega: int = 0
    suporte: int = 0
