# portal/application/dtos/gestao_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from portal.domain.reputacao.entities import RelatorioReputacao


class PainelDTO(BaseModel):
    total_fornecedores: int
    bloqueados: int
    nota_baixa: int
    reclamacoes_pendentes: int


class AdvertenciaIn(BaseModel):
    motivo: str = Field(default="", max_length=500)


class LoginIn(BaseModel):
    usuario: str
    senha: str


class LoginDTO(BaseModel):
    autenticado: bool
    usuario: str


class AnaliseDTO(BaseModel):
    fornecedor_id: str
    parecer: str


class FonteDTO(BaseModel):
    titulo: str
    url: str


class RelatorioReputacaoDTO(BaseModel):
    consulta: str
    texto: str
    origem: str
    gerado_em: str
    fontes: list[FonteDTO]
    indicadores: dict[str, object]

    @classmethod
    def from_domain(cls, r: RelatorioReputacao) -> RelatorioReputacaoDTO:
        return cls(
            consulta=r.consulta,
            texto=r.texto,
            origem=r.origem.value,
            gerado_em=r.gerado_em.isoformat(timespec="seconds"),
            fontes=[FonteDTO(titulo=f.titulo, url=f.url) for f in r.fontes],
            indicadores=dict(r.indicadores),
        )
