# portal/domain/fornecedor/enums.py
from __future__ import annotations

from enum import Enum


class StatusFornecedor(str, Enum):
    """Faixa de classificacao derivada da nota media."""
    OTIMO = "ÓTIMO"
    BOM = "BOM"
    RUIM = "RUIM"


class EstadoPenalidade(str, Enum):
    ATIVO = "ATIVO"
    BLOQUEADO = "BLOQUEADO"
