# portal/application/services/reputacao_service.py
"""Consulta de reputacao: simulacao local para fornecedor do cadastro,
gerador externo para o resto.

Uma consulta nova substitui a anterior da mesma sessao: o resultado de uma
chamada que terminou depois de outra mais recente ter comecado e devolvido a
quem pediu, mas nao sobrescreve o ultimo relatorio da sessao.
"""
from __future__ import annotations

import itertools
import threading
from collections import OrderedDict
from datetime import datetime

from portal.domain.errors import NaoEncontradoError, ValidacaoError
from portal.domain.fornecedor.entities import Fornecedor
from portal.domain.fornecedor.repository import FornecedorRepository
from portal.domain.reputacao.entities import OrigemRelatorio, RelatorioReputacao
from portal.domain.reputacao.gerador import GeradorReputacao
from portal.infrastructure.simulador_reputacao import simular_relatorio
from portal.log import log

from ..dtos.gestao_dto import RelatorioReputacaoDTO


class RastreadorConsultas:
    """Tickets monotonicos por sessao. So o ticket mais novo grava resultado.

    Guarda no maximo `max_sessoes` sessoes; a menos usada recentemente sai
    primeiro. O contador e global para que uma sessao despejada e depois
    reaberta nunca reutilize um ticket ainda em voo.
    """

    def __init__(self, max_sessoes: int = 1000) -> None:
        if max_sessoes < 1:
            raise ValueError("max_sessoes deve ser >= 1")
        self._lock = threading.Lock()
        self._max_sessoes = max_sessoes
        self._contador = itertools.count(1)
        self._tickets: OrderedDict[str, int] = OrderedDict()
        self._ultimos: dict[str, RelatorioReputacao] = {}

    def iniciar(self, sessao: str) -> int:
        with self._lock:
            ticket = next(self._contador)
            self._tickets[sessao] = ticket
            self._tickets.move_to_end(sessao)
            while len(self._tickets) > self._max_sessoes:
                antiga, _ = self._tickets.popitem(last=False)
                self._ultimos.pop(antiga, None)
            return ticket

    def concluir(self, sessao: str, ticket: int, relatorio: RelatorioReputacao) -> bool:
        """False quando o ticket ja foi superado ou a sessao foi despejada."""
        with self._lock:
            if self._tickets.get(sessao) != ticket:
                return False
            self._ultimos[sessao] = relatorio
            return True

    def ultimo(self, sessao: str) -> RelatorioReputacao | None:
        with self._lock:
            if sessao in self._tickets:
                self._tickets.move_to_end(sessao)
            return self._ultimos.get(sessao)


class ReputacaoService:
    def __init__(
        self,
        fornecedor_repo: FornecedorRepository,
        gerador: GeradorReputacao,
        rastreador: RastreadorConsultas,
    ) -> None:
        self._fornecedor_repo = fornecedor_repo
        self._gerador = gerador
        self._rastreador = rastreador

    def consultar(self, consulta: str, sessao: str = "default") -> RelatorioReputacaoDTO:
        """Raises:
            ValidacaoError: consulta vazia.
            ServicoExternoError: gerador externo falhou (nunca vira relatorio vazio).
        """
        termo = consulta.strip()
        if not termo:
            raise ValidacaoError(["Informe o nome ou CNPJ da empresa."])

        ticket = self._rastreador.iniciar(sessao)
        relatorio = self._gerar(termo)
        if not self._rastreador.concluir(sessao, ticket, relatorio):
            log(f"Consulta de reputacao '{termo}' superada na sessao {sessao}; resultado descartado")
        return RelatorioReputacaoDTO.from_domain(relatorio)

    def ultimo_relatorio(self, sessao: str = "default") -> RelatorioReputacaoDTO:
        relatorio = self._rastreador.ultimo(sessao)
        if relatorio is None:
            raise NaoEncontradoError("Nenhuma consulta concluida nesta sessao")
        return RelatorioReputacaoDTO.from_domain(relatorio)

    def _gerar(self, termo: str) -> RelatorioReputacao:
        interno = self._fornecedor_interno(termo)
        if interno is not None:
            return simular_relatorio(interno, termo)

        resposta = self._gerador.gerar_relatorio(termo)
        return RelatorioReputacao(
            consulta=termo,
            texto=resposta.texto,
            origem=OrigemRelatorio.GERADOR_EXTERNO,
            gerado_em=datetime.now(),
            fontes=resposta.fontes,
        )

    def _fornecedor_interno(self, termo: str) -> Fornecedor | None:
        encontrados = self._fornecedor_repo.buscar_por_nome_ou_cnpj(termo)
        return encontrados[0] if encontrados else None
