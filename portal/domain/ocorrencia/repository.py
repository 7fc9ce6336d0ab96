# portal/domain/ocorrencia/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Ocorrencia, Reclamacao
from .enums import StatusOcorrencia, StatusReclamacao, TipoOcorrencia


class OcorrenciaRepository(Protocol):
    def listar(
        self,
        pedido_id: str | None = None,
        segmento: str | None = None,
        status: StatusOcorrencia | None = None,
        tipo: TipoOcorrencia | None = None,
    ) -> list[Ocorrencia]: ...
    def listar_por_pedidos_ou_segmento(
        self, pedidos: list[str], segmento: str,
    ) -> list[Ocorrencia]: ...
    def buscar_por_id(self, ocorrencia_id: str) -> Ocorrencia | None: ...
    def adicionar(self, ocorrencia: Ocorrencia) -> None: ...
    def atualizar_status(self, ocorrencia_id: str, status: StatusOcorrencia) -> None: ...
    def proximo_id(self, ano: int) -> str: ...


class ReclamacaoRepository(Protocol):
    def listar(self, status: StatusReclamacao | None = None) -> list[Reclamacao]: ...
    def buscar_por_id(self, reclamacao_id: str) -> Reclamacao | None: ...
    def salvar(self, reclamacao: Reclamacao) -> None: ...
    def contar_pendentes(self) -> int: ...
