# portal/domain/reputacao/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class OrigemRelatorio(str, Enum):
    SIMULADO_INTERNO = "SIMULADO_INTERNO"
    GERADOR_EXTERNO = "GERADOR_EXTERNO"


@dataclass(frozen=True)
class FonteCitada:
    titulo: str
    url: str


@dataclass(frozen=True)
class RespostaGerador:
    """Saida opaca do gerador: texto livre + trilha de procedencia.
    O texto nunca e interpretado para regra de negocio."""
    texto: str
    fontes: tuple[FonteCitada, ...] = ()


@dataclass(frozen=True)
class RelatorioReputacao:
    consulta: str
    texto: str
    origem: OrigemRelatorio
    gerado_em: datetime
    fontes: tuple[FonteCitada, ...] = ()
    # Indicadores estruturados, presentes apenas no relatorio simulado.
    indicadores: dict[str, object] = field(default_factory=dict)
