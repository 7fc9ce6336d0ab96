# portal/domain/ocorrencia/fluxo.py
"""Validacao de relatos e transicoes de status. Funcoes puras, zero IO."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from portal.domain.errors import ValidacaoError
from portal.domain.fornecedor.value_objects import ItemPedido

from .entities import Ocorrencia, Reclamacao, RelatoOcorrencia
from .enums import StatusOcorrencia, StatusReclamacao

ERRO_TIPO = "Selecione o tipo de problema."
ERRO_DESCRICAO = "Descreva o problema detalhadamente."
ERRO_ITENS = "Selecione ao menos um item da OC que teve problema."

_PROXIMO_STATUS: dict[StatusOcorrencia, StatusOcorrencia] = {
    StatusOcorrencia.ABERTO: StatusOcorrencia.EM_ANALISE,
    StatusOcorrencia.EM_ANALISE: StatusOcorrencia.FECHADO,
}


def validar_relato(
    relato: RelatoOcorrencia,
    itens_disponiveis: Iterable[ItemPedido] | None = None,
) -> list[str]:
    """Lista com TODAS as regras violadas. Lista vazia = relato valido.

    Itens so sao conferidos quando o tipo e relacionado a itens; para os
    demais tipos a selecao e descartada no registro.
    """
    erros: list[str] = []
    if relato.tipo is None:
        erros.append(ERRO_TIPO)
    if not relato.descricao.strip():
        erros.append(ERRO_DESCRICAO)

    if relato.tipo is not None and relato.tipo.relacionado_a_itens:
        if not relato.itens:
            erros.append(ERRO_ITENS)
        elif itens_disponiveis is not None:
            ids = {i.id for i in itens_disponiveis}
            erros.extend(
                f"Item {sel.item_id} nao pertence a OC {relato.pedido_id}."
                for sel in relato.itens
                if sel.item_id not in ids
            )
    return erros


def avancar_status(ocorrencia: Ocorrencia) -> Ocorrencia:
    """Aberto -> Em analise -> Fechado. Fechado e terminal."""
    proximo = _PROXIMO_STATUS.get(ocorrencia.status)
    if proximo is None:
        raise ValidacaoError([f"Ocorrencia {ocorrencia.id} ja esta fechada."])
    return replace(ocorrencia, status=proximo)


def responder_reclamacao(reclamacao: Reclamacao, email: str, texto: str) -> Reclamacao:
    """Pendente -> Respondido (terminal)."""
    erros: list[str] = []
    if reclamacao.status is StatusReclamacao.RESPONDIDO:
        erros.append(f"Reclamacao {reclamacao.id} ja foi respondida.")
    if not email.strip():
        erros.append("Informe o e-mail de destino da resposta.")
    if not texto.strip():
        erros.append("Escreva o texto da resposta.")
    if erros:
        raise ValidacaoError(erros)

    return replace(
        reclamacao,
        status=StatusReclamacao.RESPONDIDO,
        resposta_email=email.strip(),
        resposta_texto=texto.strip(),
    )
