# portal/domain/ocorrencia/enums.py
from __future__ import annotations

from enum import Enum


class TipoOcorrencia(str, Enum):
    """Rotulos exatos preservados por compatibilidade."""
    ATRASO_NA_ENTREGA = "Atraso na entrega"
    PRODUTO_COM_DEFEITO = "Produto com defeito"
    DIVERGENCIA_NO_PEDIDO = "Divergência no pedido"
    ATENDIMENTO_INSATISFATORIO = "Atendimento insatisfatório"
    FALTA_DE_RETORNO = "Falta de retorno"
    OUTRO = "Outro"

    @property
    def relacionado_a_itens(self) -> bool:
        return self in TIPOS_RELACIONADOS_A_ITENS


TIPOS_RELACIONADOS_A_ITENS = frozenset({
    TipoOcorrencia.ATRASO_NA_ENTREGA,
    TipoOcorrencia.PRODUTO_COM_DEFEITO,
    TipoOcorrencia.DIVERGENCIA_NO_PEDIDO,
})


class StatusOcorrencia(str, Enum):
    """Ciclo de vida do historico de ocorrencias. So avanca."""
    ABERTO = "Aberto"
    EM_ANALISE = "Em análise"
    FECHADO = "Fechado"


class StatusReclamacao(str, Enum):
    """Fluxo simplificado da central de reclamacoes.
    Vocabulario separado de StatusOcorrencia: nao existe mapeamento entre os dois."""
    PENDENTE = "Pendente"
    RESPONDIDO = "Respondido"
